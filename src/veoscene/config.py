"""Configuration management."""

import os
from enum import Enum
from pydantic import BaseModel, Field
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


class Provider(str, Enum):
    """Supported generation services."""
    OPENAI = "openai"
    ANTHROPIC = "anthropic"


DEFAULT_MODELS = {
    Provider.OPENAI: "gpt-4o",
    Provider.ANTHROPIC: "claude-sonnet-4-20250514",
}

API_KEY_ENV_VARS = {
    Provider.OPENAI: "OPENAI_API_KEY",
    Provider.ANTHROPIC: "ANTHROPIC_API_KEY",
}


class Config(BaseModel):
    """Application configuration.

    API keys are not held here. They are read from the environment at the
    moment of a generation attempt (see :meth:`read_api_key`).
    """

    provider: Provider = Field(
        default_factory=lambda: Provider(os.getenv("VEOSCENE_PROVIDER", "openai")),
        description="Generation service to call"
    )
    model: str = Field(
        default_factory=lambda: os.getenv("VEOSCENE_MODEL", ""),
        description="Model override; empty means the provider default"
    )
    base_url: str = Field(
        default_factory=lambda: os.getenv("VEOSCENE_BASE_URL", "https://api.openai.com/v1"),
        description="Base URL of the OpenAI-compatible chat completions API"
    )
    request_timeout: float = Field(
        default_factory=lambda: float(os.getenv("VEOSCENE_TIMEOUT", "300")),
        description="HTTP timeout in seconds",
        gt=0
    )

    # Generation settings
    temperature: float = Field(default=0.7, description="Sampling temperature")
    max_tokens: int = Field(default=8000, description="Maximum output tokens")

    class Config:
        """Pydantic config."""
        frozen = False

    def resolve_model(self, provider: Provider) -> str:
        """Return the model to use for a provider."""
        return self.model or DEFAULT_MODELS[provider]

    def read_api_key(self, provider: Provider) -> str:
        """Read the provider's API key from the environment.

        Raises:
            ValueError: If the variable is not set.
        """
        env_var = API_KEY_ENV_VARS[provider]
        value = os.getenv(env_var, "")
        if not value:
            raise ValueError(f"{env_var} not set")
        return value


# Global config instance
config = Config()
