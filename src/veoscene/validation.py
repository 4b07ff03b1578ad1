"""Response validation for generated scene payloads."""

import copy
import json
import logging
import re
from typing import Any, List, Mapping, Optional

from .architecture import ArchitectureSpec
from .errors import ParseError, ShapeError
from .models.scene import GeneratedScene, SceneBreakdown
from .timecode import parse_timecode

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("overview", "architecture", "veoPrompt")

# Allowed difference between the summed act runtimes and the declared total
RUNTIME_TOLERANCE_SECONDS = 2

_FENCE_START_RE = re.compile(r"^```(?:json)?\s*")
_FENCE_END_RE = re.compile(r"\s*```$")


def validate(
    payload: Any,
    strict: bool = False,
    expected: Optional[ArchitectureSpec] = None,
) -> GeneratedScene:
    """Accept or reject a reply from the generation service.

    By default only checks that ``overview``, ``architecture`` and
    ``veoPrompt`` are present and non-empty. With ``strict=True`` the nested
    structure is typed and its timing and counts are cross-checked.

    Args:
        payload: A mapping, or the reply text holding a JSON object.
        strict: Also run the deep structure and consistency checks.
        expected: Architecture the shot distribution must match (strict only).

    Returns:
        The accepted, read-only scene.

    Raises:
        ParseError: If the payload is not a JSON object.
        ShapeError: If required fields are missing or strict checks fail.
    """
    data = _as_mapping(payload)

    missing = [name for name in REQUIRED_FIELDS if _is_empty(data.get(name))]
    if missing:
        raise ShapeError(
            f"API response missing required fields: {', '.join(missing)}",
            problems=[f"{name}: missing or empty" for name in missing],
        )

    scene = GeneratedScene.model_validate(copy.deepcopy(dict(data)))

    if strict:
        problems = check_consistency(scene.breakdown(), expected)
        if problems:
            logger.debug(f"Strict validation found {len(problems)} problem(s)")
            raise ShapeError(
                f"Scene timing is inconsistent: {problems[0]}"
                + (f" (and {len(problems) - 1} more)" if len(problems) > 1 else ""),
                problems=problems,
            )

    return scene


def check_consistency(
    breakdown: SceneBreakdown,
    expected: Optional[ArchitectureSpec] = None,
) -> List[str]:
    """Cross-check counts and timecodes of a typed scene.

    Returns:
        Human-readable problems, empty when the scene is consistent.
    """
    problems: List[str] = []
    arch = breakdown.architecture
    shots = arch.all_shots()

    if arch.act_count != len(arch.acts):
        problems.append(f"actCount is {arch.act_count} but {len(arch.acts)} acts were given")
    if arch.total_shots != len(shots):
        problems.append(f"totalShots is {arch.total_shots} but {len(shots)} shots were given")

    if expected is not None:
        actual = tuple(len(act.shots) for act in arch.acts)
        if actual != tuple(expected.shots_per_act):
            problems.append(
                f"shots per act are {list(actual)}, expected {list(expected.shots_per_act)}"
            )

    cursor = 0
    runtime = 0
    for act in arch.acts:
        label = f"act {act.act_number}"
        span = _span(label, act.start_time, act.end_time, problems)
        if span is not None:
            start, end = span
            if start != cursor:
                problems.append(f"{label} starts at {act.start_time}, expected continuation")
            if end - start != act.duration_seconds:
                problems.append(
                    f"{label} spans {end - start}s but durationSeconds is {act.duration_seconds}"
                )
            cursor = end
        runtime += act.duration_seconds

        shot_cursor = span[0] if span is not None else None
        shot_total = 0
        for shot in act.shots:
            shot_label = f"shot {shot.shot_number}"
            shot_span = _span(shot_label, shot.start_time, shot.end_time, problems)
            shot_total += shot.duration_seconds
            if shot_span is None:
                shot_cursor = None
                continue
            start, end = shot_span
            if shot_cursor is not None and start != shot_cursor:
                problems.append(f"{shot_label} starts at {shot.start_time}, expected continuation")
            if end - start != shot.duration_seconds:
                problems.append(
                    f"{shot_label} spans {end - start}s but durationSeconds is {shot.duration_seconds}"
                )
            shot_cursor = end

        if act.shots and shot_total != act.duration_seconds:
            problems.append(
                f"{label} shots add up to {shot_total}s but durationSeconds is {act.duration_seconds}"
            )

    if abs(runtime - arch.total_duration) > RUNTIME_TOLERANCE_SECONDS:
        problems.append(
            f"acts add up to {runtime}s, outside ±{RUNTIME_TOLERANCE_SECONDS}s of "
            f"totalDuration {arch.total_duration}s"
        )

    return problems


def _span(label: str, start: str, end: str, problems: List[str]):
    try:
        start_s, end_s = parse_timecode(start), parse_timecode(end)
    except ValueError as e:
        problems.append(f"{label}: {e}")
        return None
    if end_s < start_s:
        problems.append(f"{label} ends ({end}) before it starts ({start})")
        return None
    return start_s, end_s


def _as_mapping(payload: Any) -> Mapping[str, Any]:
    if isinstance(payload, bytes):
        payload = payload.decode("utf-8", errors="replace")

    if isinstance(payload, str):
        text = _FENCE_START_RE.sub("", payload.strip())
        text = _FENCE_END_RE.sub("", text.strip())
        try:
            payload = json.loads(text)
        except json.JSONDecodeError as e:
            logger.debug(f"Unparseable response: {e}")
            raise ParseError("Failed to parse API response as JSON") from e

    if not isinstance(payload, Mapping):
        raise ParseError(
            f"API response is not a JSON object (got {type(payload).__name__})"
        )
    return payload


def _is_empty(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, dict, bool, int, float)):
        return not value
    return False
