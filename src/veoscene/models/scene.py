"""Generated scene data models."""

import json
from pathlib import Path
from typing import Any, Dict, List

from pydantic import BaseModel, Field, ValidationError
import yaml

from ..errors import ParseError, ShapeError


class Shot(BaseModel):
    """The smallest timed unit of a scene."""

    shot_number: int = Field(..., alias="shotNumber")
    start_time: str = Field(..., alias="startTime", description="MM:SS")
    end_time: str = Field(..., alias="endTime", description="MM:SS")
    duration_seconds: int = Field(..., alias="durationSeconds", ge=0)
    camera_type: str = Field(..., alias="cameraType")
    lens: str
    movement: str
    lighting: str
    emotional_intent: str = Field(..., alias="emotionalIntent")
    sound_cue: str = Field(..., alias="soundCue")
    description: str

    class Config:
        """Pydantic config."""
        frozen = True
        populate_by_name = True


class Act(BaseModel):
    """A narrative segment holding an ordered run of shots."""

    act_number: int = Field(..., alias="actNumber")
    title: str
    start_time: str = Field(..., alias="startTime")
    end_time: str = Field(..., alias="endTime")
    duration_seconds: int = Field(..., alias="durationSeconds", ge=0)
    emotional_arc: str = Field(..., alias="emotionalArc")
    shots: List[Shot] = Field(default_factory=list)

    class Config:
        """Pydantic config."""
        frozen = True
        populate_by_name = True


class SceneArchitecture(BaseModel):
    """Structural skeleton reported by the service."""

    total_duration: int = Field(..., alias="totalDuration", ge=0, description="Seconds")
    total_shots: int = Field(..., alias="totalShots")
    act_count: int = Field(..., alias="actCount")
    acts: List[Act] = Field(default_factory=list)

    class Config:
        """Pydantic config."""
        frozen = True
        populate_by_name = True

    def all_shots(self) -> List[Shot]:
        """Every shot across all acts, in order."""
        return [shot for act in self.acts for shot in act.shots]


class SceneOverview(BaseModel):
    """Headline description of the scene."""

    title: str
    duration: str
    type: str
    mood: str
    location: str
    logline: str

    class Config:
        """Pydantic config."""
        frozen = True


class TimingEntry(BaseModel):
    """One act row of the timing map."""

    act: int
    start: str
    end: str
    shots: int

    class Config:
        """Pydantic config."""
        frozen = True


class TimingMap(BaseModel):
    """Quick-scan summary of act boundaries."""

    total_runtime: str = Field(..., alias="totalRuntime")
    tolerance: str
    breakdown: List[TimingEntry] = Field(default_factory=list)

    class Config:
        """Pydantic config."""
        frozen = True
        populate_by_name = True


class SceneBreakdown(BaseModel):
    """Fully typed view of a generated scene."""

    overview: SceneOverview
    architecture: SceneArchitecture
    timing_map: TimingMap = Field(..., alias="timingMap")
    veo_prompt: str = Field(..., alias="veoPrompt", min_length=1)
    quality_checklist: List[str] = Field(..., alias="qualityChecklist")

    class Config:
        """Pydantic config."""
        frozen = True
        populate_by_name = True


class GeneratedScene(BaseModel):
    """Scene package as returned by the generation service.

    Only the presence of the top-level fields is guaranteed. Use
    :meth:`breakdown` for the typed, fully checked structure.
    """

    overview: Any = Field(..., description="Title, mood, location and logline")
    architecture: Any = Field(..., description="Acts and shots")
    timing_map: Any = Field(None, alias="timingMap", description="Act boundary summary")
    veo_prompt: Any = Field(..., alias="veoPrompt", description="Copy-ready Veo prompt")
    quality_checklist: Any = Field(
        default_factory=list, alias="qualityChecklist", description="Self-check items"
    )

    class Config:
        """Pydantic config."""
        frozen = True
        populate_by_name = True
        extra = "allow"

    def breakdown(self) -> SceneBreakdown:
        """Validate the nested structure into typed models.

        Raises:
            ShapeError: If any nested field is missing or has the wrong type.
        """
        try:
            return SceneBreakdown.model_validate(self.to_dict())
        except ValidationError as e:
            problems = [
                f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
                for err in e.errors()
            ]
            raise ShapeError(
                f"Scene structure is invalid ({len(problems)} problem(s))",
                problems=problems,
            ) from e

    def to_dict(self) -> Dict[str, Any]:
        """Return the payload with its wire (camelCase) field names."""
        return self.model_dump(by_alias=True)

    def to_file(self, path: Path) -> None:
        """Save the scene to a JSON or YAML file, chosen by suffix."""
        with open(path, "w", encoding="utf-8") as f:
            if _is_yaml(path):
                yaml.safe_dump(
                    self.to_dict(),
                    f,
                    default_flow_style=False,
                    allow_unicode=True,
                    sort_keys=False,
                )
            else:
                json.dump(self.to_dict(), f, indent=2, ensure_ascii=False)


def load_scene_file(path: Path) -> Any:
    """Load a raw scene payload from a JSON or YAML file.

    The payload is returned unvalidated; pass it to ``validate``.

    Raises:
        ParseError: If the file is not valid JSON or YAML.
    """
    with open(path, "r", encoding="utf-8") as f:
        try:
            if _is_yaml(path):
                return yaml.safe_load(f)
            return json.load(f)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise ParseError(f"Failed to parse {path.name}: {e}") from e


def _is_yaml(path: Path) -> bool:
    return path.suffix.lower() in (".yaml", ".yml")
