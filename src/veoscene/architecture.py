"""Duration-keyed scene architecture table."""

from dataclasses import dataclass
from typing import Dict, List, Tuple, Union

from .errors import ConfigurationError
from .models.config import SceneDuration


@dataclass(frozen=True)
class ArchitectureSpec:
    """Structural pacing for one duration category.

    ``avg_shot_duration_seconds`` is guidance embedded in the prompt text;
    nothing derives individual shot lengths from it.
    """

    act_count: int
    shots_per_act: Tuple[int, ...]
    avg_shot_duration_seconds: int

    @property
    def total_shots(self) -> int:
        """Canonical shot count for the duration."""
        return sum(self.shots_per_act)

    @staticmethod
    def total_seconds(duration: Union[int, SceneDuration]) -> int:
        """Target runtime in seconds."""
        return int(duration) * 60


ARCHITECTURE_SPECS: Dict[SceneDuration, ArchitectureSpec] = {
    SceneDuration.THREE: ArchitectureSpec(2, (5, 6), 16),
    SceneDuration.FIVE: ArchitectureSpec(3, (5, 8, 5), 17),
    SceneDuration.TEN: ArchitectureSpec(4, (6, 10, 10, 6), 19),
    SceneDuration.TWENTY: ArchitectureSpec(5, (8, 12, 14, 12, 8), 22),
}


def lookup(duration: Union[int, SceneDuration]) -> ArchitectureSpec:
    """Return the architecture for a supported duration in minutes.

    Raises:
        ConfigurationError: If the duration is not one of 3, 5, 10 or 20.
    """
    try:
        key = SceneDuration(duration)
    except ValueError:
        raise ConfigurationError(
            f"Unsupported duration: {duration!r}. "
            f"Must be one of {', '.join(str(d) for d in supported_durations())} minutes"
        ) from None
    return ARCHITECTURE_SPECS[key]


def supported_durations() -> List[int]:
    """Durations the table covers, ascending."""
    return sorted(int(d) for d in ARCHITECTURE_SPECS)
