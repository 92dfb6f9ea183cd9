import os

# Must be set before pygame opens a display
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from dataclasses import dataclass, field
from typing import Set

import pytest

from gridsnake.config import make_rng
from gridsnake.inputs import Key
from gridsnake.state import reset_state


@dataclass
class FakeInput:
    """Scripted input source: keys pressed this frame and the frame's dt."""
    pressed: Set[Key] = field(default_factory=set)
    dt: float = 0.0

    def is_key_pressed(self, key: Key) -> bool:
        return key in self.pressed

    def frame_time(self) -> float:
        return self.dt


@pytest.fixture
def frame():
    """Build one frame of scripted input: frame(Key.UP, dt=0.2)."""
    def make(*keys: Key, dt: float = 0.0) -> FakeInput:
        return FakeInput(set(keys), dt)
    return make


@pytest.fixture
def state():
    return reset_state(make_rng(1234))
