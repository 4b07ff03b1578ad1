"""Scene configuration model."""

from enum import Enum, IntEnum
from typing import Any, Optional

from pydantic import BaseModel, Field, ValidationInfo, field_validator

from ..errors import ConfigurationError


class SceneDuration(IntEnum):
    """Supported scene lengths in minutes."""
    THREE = 3
    FIVE = 5
    TEN = 10
    TWENTY = 20


class SceneType(str, Enum):
    """Supported scene styles."""
    CINEMATIC_BRAND = "cinematic-brand"
    LUXURY_COMMERCIAL = "luxury-commercial"
    DOCUMENTARY = "documentary"
    HYPER_REAL_PERFORMANCE = "hyper-real-performance"

    @property
    def label(self) -> str:
        """Human-readable style name."""
        return SCENE_TYPE_LABELS[self]


SCENE_TYPE_LABELS = {
    SceneType.CINEMATIC_BRAND: "Cinematic Brand Film",
    SceneType.LUXURY_COMMERCIAL: "Luxury Commercial",
    SceneType.DOCUMENTARY: "Documentary Style",
    SceneType.HYPER_REAL_PERFORMANCE: "Hyper-Real Performance",
}


class SceneConfig(BaseModel):
    """User-chosen parameters for one generation attempt."""

    duration: SceneDuration = Field(..., description="Scene length in minutes")
    scene_type: SceneType = Field(..., alias="sceneType", description="Scene style tag")
    visual_mood: str = Field(..., alias="visualMood", description="Visual mood description")
    location: str = Field(..., description="Location or environment")
    brand_references: Optional[str] = Field(
        None, alias="brandReferences", description="Optional brand references"
    )

    class Config:
        """Pydantic config."""
        frozen = True
        populate_by_name = True

    @field_validator("duration", mode="before")
    @classmethod
    def _check_duration(cls, value: Any) -> SceneDuration:
        try:
            return SceneDuration(value)
        except ValueError:
            raise ConfigurationError(
                f"Unsupported duration: {value!r}. Must be one of "
                f"{', '.join(str(d.value) for d in SceneDuration)} minutes"
            ) from None

    @field_validator("scene_type", mode="before")
    @classmethod
    def _check_scene_type(cls, value: Any) -> SceneType:
        try:
            return SceneType(value)
        except ValueError:
            raise ConfigurationError(
                f"Unsupported scene type: {value!r}. Must be one of "
                f"{', '.join(t.value for t in SceneType)}"
            ) from None

    @field_validator("visual_mood", "location", mode="before")
    @classmethod
    def _check_not_blank(cls, value: Any, info: ValidationInfo) -> str:
        if not isinstance(value, str) or not value.strip():
            label = info.field_name.replace("_", " ").capitalize()
            raise ConfigurationError(f"{label} must not be empty")
        return value

    @property
    def total_seconds(self) -> int:
        """Target runtime in seconds."""
        return int(self.duration) * 60
