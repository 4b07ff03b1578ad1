"""Anthropic Claude API client wrapper."""

import logging
from typing import Optional

from anthropic import Anthropic, APIError, APIConnectionError, APIStatusError

from ..config import Provider, config
from ..errors import TransportError
from ..prompts import ComposedPrompt
from .base import SceneClient
from .credential import Credential

logger = logging.getLogger(__name__)


class AnthropicClient(SceneClient):
    """Client wrapper for the Anthropic Claude API.

    A fresh SDK client is built for every request so the API key is only
    referenced while that request is in flight.
    """

    def __init__(
        self,
        model: Optional[str] = None,
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
        timeout: Optional[float] = None,
    ) -> None:
        """Initialize the Anthropic client.

        Args:
            model: Model to use. Defaults to the configured or provider default.
            temperature: Sampling temperature (0.0-1.0).
            max_tokens: Maximum tokens in the response.
            timeout: Request timeout in seconds.
        """
        self._model = model or config.resolve_model(Provider.ANTHROPIC)
        self._temperature = config.temperature if temperature is None else temperature
        self._max_tokens = max_tokens or config.max_tokens
        self._timeout = timeout or config.request_timeout

    @property
    def name(self) -> str:
        """Return the service name."""
        return "anthropic"

    @property
    def model(self) -> str:
        """Return the model being used."""
        return self._model

    def complete(self, prompt: ComposedPrompt, credential: Credential) -> str:
        """Create a message using Claude.

        Args:
            prompt: System and user text to send.
            credential: API key for this request.

        Returns:
            The text content of Claude's response.

        Raises:
            TransportError: If the API request fails or returns no text.
        """
        client = Anthropic(
            api_key=credential.secret,
            max_retries=0,
            timeout=self._timeout,
        )
        logger.info(f"Requesting scene from {self._model}")

        try:
            response = client.messages.create(
                model=self._model,
                max_tokens=self._max_tokens,
                temperature=self._temperature,
                system=prompt.system_text,
                messages=[{"role": "user", "content": prompt.user_text}],
            )

        except APIStatusError as e:
            logger.error(f"API error {e.status_code}: {e.message}")
            raise TransportError(
                e.message or f"API Error: {e.status_code}", status_code=e.status_code
            ) from None

        except APIConnectionError as e:
            logger.error(f"Connection error: {e}")
            raise TransportError(f"Connection error: {e}") from None

        except APIError as e:
            logger.error(f"API error: {e}")
            raise TransportError(str(e)) from None

        finally:
            client.close()

        # Extract text content from response
        text = "".join(
            block.text for block in response.content if hasattr(block, "text")
        )
        if not text:
            raise TransportError("No content received from API")

        logger.debug(f"Received response of length: {len(text)}")
        return text
