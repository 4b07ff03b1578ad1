"""Scene generation: compose, dispatch once, validate."""

import logging
from dataclasses import dataclass
from typing import Optional

from .architecture import lookup
from .errors import ConfigurationError, SceneGenerationError
from .models import GeneratedScene, SceneConfig
from .prompts import compose
from .sample import sample_scene
from .services import SceneClient, create_client, credential_scope
from .validation import validate

logger = logging.getLogger(__name__)

API_KEY_PREFIX = "sk-"


@dataclass(frozen=True)
class GeneratorState:
    """Outcome of the latest attempt."""

    is_loading: bool = False
    error: Optional[SceneGenerationError] = None
    result: Optional[GeneratedScene] = None


class SceneGenerator:
    """Runs generation attempts and holds the latest result.

    Each attempt makes exactly one service call. A failed attempt is final;
    call :meth:`generate` again with a fresh key to retry.
    """

    def __init__(self, client: Optional[SceneClient] = None, strict: bool = False) -> None:
        """Initialize the generator.

        Args:
            client: Service client. Built from configuration if not provided.
            strict: Run deep consistency checks on every reply.
        """
        self._client = client or create_client()
        self._strict = strict
        self._state = GeneratorState()
        self._in_flight = False

    @property
    def client(self) -> SceneClient:
        return self._client

    @property
    def state(self) -> GeneratorState:
        return self._state

    @property
    def result(self) -> Optional[GeneratedScene]:
        return self._state.result

    def generate(self, api_key: str, scene_config: SceneConfig) -> GeneratedScene:
        """Run one generation attempt.

        The key is released as soon as the request resolves, on every path.

        Raises:
            ConfigurationError: Bad key format, or an attempt is already running.
            TransportError: The service call failed.
            ParseError: The reply was not JSON.
            ShapeError: The reply was missing required fields.
        """
        if self._in_flight:
            raise ConfigurationError("A generation attempt is already in progress")

        self._in_flight = True
        self._state = GeneratorState(is_loading=True)
        logger.info(
            f"Generating {int(scene_config.duration)}-minute "
            f"{scene_config.scene_type.label} scene with {self._client.model}"
        )

        try:
            with credential_scope(api_key) as credential:
                del api_key
                if not credential.secret.startswith(API_KEY_PREFIX):
                    raise ConfigurationError(
                        f'Invalid API key format. Keys begin with "{API_KEY_PREFIX}"'
                    )
                prompt = compose(scene_config)
                reply = self._client.complete(prompt, credential)

            expected = lookup(scene_config.duration) if self._strict else None
            scene = validate(reply, strict=self._strict, expected=expected)

        except SceneGenerationError as e:
            logger.error(f"Generation failed ({e.kind.value}): {e.message}")
            self._state = GeneratorState(error=e)
            raise

        except Exception:
            self._state = GeneratorState()
            raise

        finally:
            self._in_flight = False

        self._state = GeneratorState(result=scene)
        logger.info(f"Scene accepted: {_title(scene)}")
        return scene

    def reset(self) -> None:
        """Discard the current result and error."""
        self._state = GeneratorState()

    def use_sample(self) -> GeneratedScene:
        """Load the bundled sample as the current result."""
        scene = sample_scene()
        self._state = GeneratorState(result=scene)
        return scene


def _title(scene: GeneratedScene) -> str:
    if isinstance(scene.overview, dict):
        return str(scene.overview.get("title", "untitled"))
    return "untitled"
