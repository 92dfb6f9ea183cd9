# inputs.py
from __future__ import annotations
from enum import Enum
from typing import Protocol, Set
import logging

import pygame  # type: ignore

logger = logging.getLogger(__name__)


class Key(Enum):
    LEFT = pygame.K_LEFT
    RIGHT = pygame.K_RIGHT
    UP = pygame.K_UP
    DOWN = pygame.K_DOWN
    ESCAPE = pygame.K_ESCAPE


_KEYCODES = {k.value: k for k in Key}


class InputSource(Protocol):
    """What the update step needs from the outside world each frame."""

    def is_key_pressed(self, key: Key) -> bool: ...

    def frame_time(self) -> float: ...


class FrameHost:
    """
    pygame-backed frame driver.

    poll_events() drains the queue once per frame and remembers which keys went
    down; next_frame() flips the display and paces to `fps`, measuring the
    elapsed time that the following update will consume.
    """

    def __init__(self, fps: int = 60) -> None:
        if fps <= 0:
            raise ValueError(f"fps must be positive, got {fps}")
        self.fps = fps
        self.clock = pygame.time.Clock()
        self._pressed: Set[Key] = set()
        self._dt = 0.0

    def poll_events(self) -> bool:
        """Collect this frame's key presses. Return False once the window is closed."""
        self._pressed.clear()
        running = True
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                logger.info("Window closed")
                running = False
            elif event.type == pygame.KEYDOWN and event.key in _KEYCODES:
                self._pressed.add(_KEYCODES[event.key])
        return running

    def is_key_pressed(self, key: Key) -> bool:
        return key in self._pressed

    def frame_time(self) -> float:
        return self._dt

    def next_frame(self) -> None:
        pygame.display.flip()
        self._dt = self.clock.tick(self.fps) / 1000.0
