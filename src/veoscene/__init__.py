"""Veo-3 scene architect: layered prompts and scene validation."""

__version__ = "0.1.0"

from .architecture import ArchitectureSpec, lookup
from .errors import (
    ConfigurationError,
    ErrorKind,
    ParseError,
    SceneGenerationError,
    ShapeError,
    TransportError,
)
from .models import GeneratedScene, SceneConfig, SceneDuration, SceneType
from .prompts import ComposedPrompt, compose
from .sample import SAMPLE_SCENE, sample_scene
from .validation import validate

__all__ = [
    "__version__",
    "ArchitectureSpec",
    "lookup",
    "ConfigurationError",
    "ErrorKind",
    "ParseError",
    "SceneGenerationError",
    "ShapeError",
    "TransportError",
    "GeneratedScene",
    "SceneConfig",
    "SceneDuration",
    "SceneType",
    "ComposedPrompt",
    "compose",
    "SAMPLE_SCENE",
    "sample_scene",
    "validate",
]
