"""External service integrations."""

from typing import Optional

from ..config import Provider, config
from .anthropic import AnthropicClient
from .base import SceneClient
from .chat_completions import ChatCompletionsClient
from .credential import Credential, credential_scope


def create_client(provider: Optional[Provider] = None, model: Optional[str] = None) -> SceneClient:
    """Build the client for a provider (defaults to the configured one)."""
    provider = Provider(provider or config.provider)
    if provider is Provider.ANTHROPIC:
        return AnthropicClient(model=model)
    return ChatCompletionsClient(model=model)


__all__ = [
    "AnthropicClient",
    "ChatCompletionsClient",
    "Credential",
    "SceneClient",
    "create_client",
    "credential_scope",
]
