import json

import pytest
from pydantic import ValidationError

from veoscene.architecture import lookup
from veoscene.errors import ErrorKind, ParseError, ShapeError
from veoscene.models import GeneratedScene
from veoscene.sample import SAMPLE_SCENE
from veoscene.validation import check_consistency, validate


def test_rejects_empty_payload():
    with pytest.raises(ShapeError) as exc_info:
        validate({})

    assert exc_info.value.kind is ErrorKind.SHAPE
    for field in ("overview", "architecture", "veoPrompt"):
        assert field in exc_info.value.message


def test_rejects_missing_veo_prompt(sample_payload):
    del sample_payload["veoPrompt"]

    with pytest.raises(ShapeError) as exc_info:
        validate(sample_payload)

    assert exc_info.value.message == "API response missing required fields: veoPrompt"


@pytest.mark.parametrize("empty", [None, "", "  ", {}, []])
def test_rejects_empty_required_values(sample_payload, empty):
    sample_payload["overview"] = empty

    with pytest.raises(ShapeError):
        validate(sample_payload)


def test_shallow_check_ignores_internal_structure():
    scene = validate({"overview": "anything", "architecture": 7, "veoPrompt": ["not", "text"]})

    assert isinstance(scene, GeneratedScene)
    assert scene.overview == "anything"
    assert scene.architecture == 7


@pytest.mark.parametrize(
    "payload",
    [
        {"overview": "x", "architecture": False, "veoPrompt": "prompt"},
        {"overview": "x", "architecture": {"acts": []}, "veoPrompt": 0},
        {"overview": 0.0, "architecture": {"acts": []}, "veoPrompt": "prompt"},
    ],
)
def test_rejects_falsy_scalar_values(payload):
    with pytest.raises(ShapeError):
        validate(payload)


def test_result_does_not_share_state_with_golden_sample():
    scene = validate(SAMPLE_SCENE)

    scene.overview["title"] = "Tampered"
    scene.architecture["acts"].clear()

    assert SAMPLE_SCENE["overview"]["title"] == "The Artisan's Dawn"
    assert len(SAMPLE_SCENE["architecture"]["acts"]) == 3


def test_changing_input_after_validation_leaves_scene_intact(sample_payload):
    scene = validate(sample_payload)

    sample_payload["overview"]["title"] = "Tampered"
    sample_payload["architecture"]["acts"][0]["shots"].clear()

    assert scene.overview["title"] == "The Artisan's Dawn"
    assert len(scene.architecture["acts"][0]["shots"]) == 5


def test_accepts_reply_text(sample_reply):
    scene = validate(sample_reply)

    assert scene.overview["title"] == "The Artisan's Dawn"
    assert scene.timing_map["tolerance"] == "±2 seconds"


def test_accepts_fenced_reply_text(sample_reply):
    scene = validate(f"```json\n{sample_reply}\n```")

    assert scene.architecture["totalShots"] == 18


@pytest.mark.parametrize("text", ["", "Here is your scene!", "{'overview': 1}", "{\"overview\": "])
def test_rejects_unparseable_text(text):
    with pytest.raises(ParseError) as exc_info:
        validate(text)

    assert exc_info.value.kind is ErrorKind.PARSE
    assert exc_info.value.message == "Failed to parse API response as JSON"


@pytest.mark.parametrize("payload", ["[1, 2, 3]", "42", "null", 42, ["overview"]])
def test_rejects_non_object(payload):
    with pytest.raises(ParseError):
        validate(payload)


def test_result_is_read_only(sample_payload):
    scene = validate(sample_payload)

    with pytest.raises(ValidationError):
        scene.veo_prompt = "changed"


def test_extra_fields_preserved(sample_payload):
    sample_payload["notes"] = "director's cut"

    scene = validate(sample_payload)

    assert scene.to_dict()["notes"] == "director's cut"


def test_strict_accepts_consistent_scene(sample_payload):
    scene = validate(sample_payload, strict=True, expected=lookup(5))

    assert scene.breakdown().architecture.total_shots == 18


def test_strict_rejects_wrong_distribution(sample_payload):
    with pytest.raises(ShapeError) as exc_info:
        validate(sample_payload, strict=True, expected=lookup(3))

    assert "shots per act are [5, 8, 5], expected [5, 6]" in exc_info.value.problems


def test_strict_rejects_shallow_payload():
    with pytest.raises(ShapeError) as exc_info:
        validate({"overview": "x", "architecture": 1, "veoPrompt": "y"}, strict=True)

    assert exc_info.value.problems


def test_strict_rejects_inconsistent_shot_timing(sample_payload):
    sample_payload["architecture"]["acts"][0]["shots"][0]["durationSeconds"] = 14

    with pytest.raises(ShapeError) as exc_info:
        validate(sample_payload, strict=True)

    problems = exc_info.value.problems
    assert "shot 1 spans 15s but durationSeconds is 14" in problems
    assert "act 1 shots add up to 89s but durationSeconds is 90" in problems


def test_strict_rejects_wrong_total_shots(sample_payload):
    sample_payload["architecture"]["totalShots"] = 25

    with pytest.raises(ShapeError) as exc_info:
        validate(sample_payload, strict=True)

    assert exc_info.value.problems == ["totalShots is 25 but 18 shots were given"]


def test_runtime_tolerance(sample_payload):
    sample_payload["architecture"]["totalDuration"] = 302
    assert check_consistency(validate(sample_payload).breakdown()) == []

    sample_payload["architecture"]["totalDuration"] = 303
    problems = check_consistency(validate(sample_payload).breakdown())
    assert problems == ["acts add up to 300s, outside ±2s of totalDuration 303s"]


def test_strict_reports_bad_timecode(sample_payload):
    sample_payload["architecture"]["acts"][2]["shots"][4]["endTime"] = "5:00pm"

    with pytest.raises(ShapeError) as exc_info:
        validate(json.dumps(sample_payload), strict=True)

    assert any(p.startswith("shot 18: Invalid timecode") for p in exc_info.value.problems)
