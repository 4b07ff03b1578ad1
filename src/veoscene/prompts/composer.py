"""Layered prompt composition."""

import logging
from dataclasses import dataclass
from typing import Dict, List, Union

from ..architecture import ArchitectureSpec, lookup
from ..errors import ConfigurationError
from ..models.config import SceneConfig, SceneDuration, SceneType
from .layers import DOMAIN_KNOWLEDGE_LAYER, OUTPUT_FORMAT_LAYER, ROLE_LAYER, STYLE_LAYERS

logger = logging.getLogger(__name__)

TOLERANCE = "±2 seconds"


@dataclass(frozen=True)
class ComposedPrompt:
    """System and user text for one request."""

    system_text: str
    user_text: str

    def messages(self) -> List[Dict[str, str]]:
        """Role-tagged messages for a chat completions request."""
        return [
            {"role": "system", "content": self.system_text},
            {"role": "user", "content": self.user_text},
        ]


def _act_lines(spec: ArchitectureSpec) -> List[str]:
    return [f"Act {i}: {shots} shots" for i, shots in enumerate(spec.shots_per_act, start=1)]


def architecture_layer(duration: Union[int, SceneDuration]) -> str:
    """Render the architecture requirements for a duration."""
    spec = lookup(duration)
    minutes = int(duration)
    total_seconds = spec.total_seconds(minutes)

    lines = [
        "SCENE ARCHITECTURE REQUIREMENTS:",
        f"- Total Duration: {minutes} minutes ({total_seconds} seconds)",
        f"- Act Count: {spec.act_count}",
        f"- Total Shots: {spec.total_shots}",
        f"- Shot Distribution per Act: {', '.join(str(s) for s in spec.shots_per_act)}",
        f"- Average Shot Duration: ~{spec.avg_shot_duration_seconds} seconds",
        f"- CRITICAL: Total runtime must be {total_seconds} seconds {TOLERANCE}",
        "",
        "ACT STRUCTURE:",
    ]
    lines.extend(_act_lines(spec))
    return "\n".join(lines)


def style_layer(scene_type: Union[str, SceneType]) -> str:
    """Return the style block for a scene type.

    Raises:
        ConfigurationError: If the scene type is not recognized.
    """
    try:
        return STYLE_LAYERS[SceneType(scene_type)]
    except ValueError:
        raise ConfigurationError(f"Unsupported scene type: {scene_type!r}") from None


def _user_text(config: SceneConfig, spec: ArchitectureSpec) -> str:
    minutes = int(config.duration)
    total_seconds = spec.total_seconds(minutes)

    prompt_parts = [
        "Generate a complete Veo-3 scene package with the following specifications:",
        "",
        "SCENE PARAMETERS:",
        f"- Duration: {minutes} minutes",
        f"- Scene Type: {config.scene_type.label}",
        f"- Visual Mood: {config.visual_mood}",
        f"- Location/Environment: {config.location}",
    ]

    if config.brand_references and config.brand_references.strip():
        prompt_parts.append(f"- Brand References: {config.brand_references}")

    prompt_parts.extend([
        "",
        "STRUCTURE TARGETS:",
        f"- Build exactly {spec.act_count} acts containing {spec.total_shots} shots in total",
    ])
    prompt_parts.extend(f"- {line}" for line in _act_lines(spec))
    prompt_parts.extend([
        f"- Aim for shots averaging ~{spec.avg_shot_duration_seconds} seconds, varied by purpose",
        "",
        "Generate the complete scene architecture, shot-by-shot breakdown, timing map, "
        "and Veo-3 master prompt. "
        f"Ensure total duration is exactly {total_seconds} seconds {TOLERANCE}.",
    ])

    return "\n".join(prompt_parts)


def compose(config: SceneConfig) -> ComposedPrompt:
    """Build the system and user text for a scene configuration.

    Output depends only on ``config``; repeated calls return identical text.

    Raises:
        ConfigurationError: If the duration or scene type is unsupported.
    """
    spec = lookup(config.duration)

    system_text = "\n\n".join([
        ROLE_LAYER,
        DOMAIN_KNOWLEDGE_LAYER,
        architecture_layer(config.duration),
        style_layer(config.scene_type),
        OUTPUT_FORMAT_LAYER,
    ])
    user_text = _user_text(config, spec)

    logger.debug(
        f"Composed prompt for {int(config.duration)}-minute {config.scene_type.value} scene "
        f"(system: {len(system_text)} chars, user: {len(user_text)} chars)"
    )
    return ComposedPrompt(system_text=system_text, user_text=user_text)
