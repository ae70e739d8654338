import pytest

from quest.cases.loader import build_case_world
from quest.cases.mansion import MANSION_CASE


@pytest.fixture
def world():
    return build_case_world(MANSION_CASE)


@pytest.fixture
def room_map(world):
    return world.room_map


@pytest.fixture
def index(world):
    return world.index


class ScriptedInput:
    """Feeds lines to a session; returns None once the script runs out."""

    def __init__(self, lines):
        self.lines = list(lines)
        self.prompts = []

    def __call__(self, prompt):
        self.prompts.append(prompt)
        if not self.lines:
            return None
        return self.lines.pop(0)


@pytest.fixture
def scripted():
    return ScriptedInput
