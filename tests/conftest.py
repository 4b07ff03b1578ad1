import copy
import json
from typing import List, Optional

import pytest

from veoscene.models import SceneConfig
from veoscene.prompts import ComposedPrompt
from veoscene.sample import SAMPLE_SCENE
from veoscene.services.base import SceneClient
from veoscene.services.credential import Credential


class FakeClient(SceneClient):
    """Records calls and returns a canned reply or raises a canned error."""

    def __init__(self, reply: Optional[str] = None, error: Optional[Exception] = None) -> None:
        self.reply = reply
        self.error = error
        self.prompts: List[ComposedPrompt] = []
        self.credentials: List[Credential] = []
        self.seen_keys: List[str] = []

    @property
    def name(self) -> str:
        return "fake"

    @property
    def model(self) -> str:
        return "fake-model"

    def complete(self, prompt: ComposedPrompt, credential: Credential) -> str:
        self.prompts.append(prompt)
        self.credentials.append(credential)
        self.seen_keys.append(credential.secret)
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def luxury_config() -> SceneConfig:
    return SceneConfig(
        duration=5,
        scene_type="luxury-commercial",
        visual_mood="Warm intimacy meeting cold precision",
        location="Swiss watchmaking atelier",
    )


@pytest.fixture
def sample_payload() -> dict:
    return copy.deepcopy(SAMPLE_SCENE)


@pytest.fixture
def sample_reply() -> str:
    return json.dumps(SAMPLE_SCENE)
