"""OpenAI-compatible chat completions client."""

import logging
from typing import Any, Dict, Optional

import requests

from ..config import Provider, config
from ..errors import TransportError
from ..prompts import ComposedPrompt
from .base import SceneClient
from .credential import Credential

logger = logging.getLogger(__name__)


class ChatCompletionsClient(SceneClient):
    """Client for ``POST {base_url}/chat/completions`` with JSON output mode."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        model: Optional[str] = None,
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
        timeout: Optional[float] = None,
    ) -> None:
        self.base_url = (base_url or config.base_url).rstrip("/")
        self._model = model or config.resolve_model(Provider.OPENAI)
        self.temperature = config.temperature if temperature is None else temperature
        self.max_tokens = max_tokens or config.max_tokens
        self.timeout = timeout or config.request_timeout

    @property
    def name(self) -> str:
        return "openai"

    @property
    def model(self) -> str:
        return self._model

    def build_request(self, prompt: ComposedPrompt) -> Dict[str, Any]:
        """Return the JSON request body for a prompt."""
        return {
            "model": self._model,
            "messages": prompt.messages(),
            "temperature": self.temperature,
            "max_tokens": self.max_tokens,
            "response_format": {"type": "json_object"},
        }

    def complete(self, prompt: ComposedPrompt, credential: Credential) -> str:
        url = f"{self.base_url}/chat/completions"
        logger.info(f"Requesting scene from {self._model}")

        try:
            response = requests.post(
                url,
                json=self.build_request(prompt),
                headers={
                    "Content-Type": "application/json",
                    "Authorization": f"Bearer {credential.secret}",
                },
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.error(f"Request to {url} failed: {type(e).__name__}")
            raise TransportError(f"Request failed: {type(e).__name__}") from None

        if not response.ok:
            message = _error_message(response)
            logger.error(f"API error {response.status_code}: {message}")
            raise TransportError(message, status_code=response.status_code)

        try:
            data = response.json()
            content = data["choices"][0]["message"]["content"]
        except (ValueError, KeyError, IndexError, TypeError):
            content = None

        if not content:
            raise TransportError("No content received from API", status_code=response.status_code)

        logger.debug(f"Received response of length: {len(content)}")
        return content


def _error_message(response: requests.Response) -> str:
    """Service error message if present, else one derived from the status."""
    try:
        message = response.json().get("error", {}).get("message")
    except (ValueError, AttributeError):
        message = None
    return message or f"API Error: {response.status_code}"
