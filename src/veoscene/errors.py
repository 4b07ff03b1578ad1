"""Error types raised while building, dispatching and checking a scene."""

from enum import Enum
from typing import List, Optional


class ErrorKind(str, Enum):
    """Machine-readable error category."""
    CONFIGURATION = "configuration"
    TRANSPORT = "transport"
    PARSE = "parse"
    SHAPE = "shape"


class SceneGenerationError(Exception):
    """Base class for every failure of a generation attempt.

    Each failure is terminal for the attempt that raised it.
    """

    kind: ErrorKind

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ConfigurationError(SceneGenerationError):
    """Duration, scene type or credential outside what the core accepts."""

    kind = ErrorKind.CONFIGURATION


class TransportError(SceneGenerationError):
    """The external service call failed or returned a non-success status."""

    kind = ErrorKind.TRANSPORT

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ParseError(SceneGenerationError):
    """The reply could not be read as a JSON object."""

    kind = ErrorKind.PARSE


class ShapeError(SceneGenerationError):
    """The parsed reply is missing required fields or is inconsistent."""

    kind = ErrorKind.SHAPE

    def __init__(self, message: str, problems: Optional[List[str]] = None) -> None:
        super().__init__(message)
        self.problems = problems or []
