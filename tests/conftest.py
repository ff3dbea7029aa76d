import os

# Run pygame without a real display or sound card
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest


class ScriptedRandom:
    """Random source that replays fixed vertex choices and jitter values."""

    def __init__(self, choices=(), offsets=()):
        self.choices = list(choices)
        self.offsets = list(offsets)
        self.randrange_calls = 0

    def randrange(self, stop):
        self.randrange_calls += 1
        value = self.choices.pop(0)
        assert 0 <= value < stop
        return value

    def uniform(self, a, b):
        if self.offsets:
            return self.offsets.pop(0)
        return (a + b) / 2


@pytest.fixture
def scripted_random():
    return ScriptedRandom
