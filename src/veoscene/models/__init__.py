"""Data models for the scene architect."""

from .config import SceneConfig, SceneDuration, SceneType, SCENE_TYPE_LABELS
from .scene import (
    Act,
    GeneratedScene,
    SceneArchitecture,
    SceneBreakdown,
    SceneOverview,
    Shot,
    TimingEntry,
    TimingMap,
    load_scene_file,
)

__all__ = [
    "SceneConfig",
    "SceneDuration",
    "SceneType",
    "SCENE_TYPE_LABELS",
    "Act",
    "GeneratedScene",
    "SceneArchitecture",
    "SceneBreakdown",
    "SceneOverview",
    "Shot",
    "TimingEntry",
    "TimingMap",
    "load_scene_file",
]
