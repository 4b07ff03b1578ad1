from veoscene.architecture import lookup
from veoscene.models import GeneratedScene
from veoscene.sample import SAMPLE_SCENE, sample_scene
from veoscene.validation import validate


def test_sample_passes_validation():
    scene = validate(SAMPLE_SCENE)

    assert isinstance(scene, GeneratedScene)


def test_sample_total_shots_matches_listed_shots():
    architecture = SAMPLE_SCENE["architecture"]
    shots = [shot for act in architecture["acts"] for shot in act["shots"]]

    assert architecture["totalShots"] == len(shots)
    assert architecture["actCount"] == len(architecture["acts"])


def test_sample_follows_five_minute_architecture():
    spec = lookup(5)
    acts = SAMPLE_SCENE["architecture"]["acts"]

    assert tuple(len(act["shots"]) for act in acts) == spec.shots_per_act
    assert SAMPLE_SCENE["architecture"]["totalDuration"] == spec.total_seconds(5)
    assert [row["shots"] for row in SAMPLE_SCENE["timingMap"]["breakdown"]] == list(spec.shots_per_act)


def test_sample_is_strictly_consistent():
    validate(SAMPLE_SCENE, strict=True, expected=lookup(5))


def test_sample_shot_numbers_are_continuous():
    breakdown = sample_scene().breakdown()

    numbers = [shot.shot_number for shot in breakdown.architecture.all_shots()]
    assert numbers == list(range(1, 19))


def test_sample_scene_is_a_copy():
    scene = sample_scene()
    scene.overview["title"] = "Changed"

    assert SAMPLE_SCENE["overview"]["title"] == "The Artisan's Dawn"
    assert sample_scene().overview["title"] == "The Artisan's Dawn"
