"""Generation service client abstraction."""

from abc import ABC, abstractmethod

from ..prompts import ComposedPrompt
from .credential import Credential


class SceneClient(ABC):
    """A client that sends one composed prompt and returns the reply text.

    Implementations make exactly one request per call and never retry.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the service name."""
        ...

    @property
    @abstractmethod
    def model(self) -> str:
        """Return the model being used."""
        ...

    @abstractmethod
    def complete(self, prompt: ComposedPrompt, credential: Credential) -> str:
        """Send the prompt and return the model's reply text.

        Args:
            prompt: System and user text to send.
            credential: API key for this single request.

        Raises:
            TransportError: If the request fails or the reply carries no text.
        """
        ...
