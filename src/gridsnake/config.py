# config.py
from dataclasses import dataclass
from typing import Optional

import numpy as np  # type: ignore

# ----- Board -----
BOARD_CELLS = 11                     # walls sit on 0 and BOARD_CELLS - 1
PART_WIDTH, PART_HEIGHT = 10.0, 10.0 # logical units per cell
BOARD_W = BOARD_CELLS * PART_WIDTH
BOARD_H = BOARD_CELLS * PART_HEIGHT

# Fruit is drawn from [FRUIT_MIN, FRUIT_MAX] on both axes
FRUIT_MIN, FRUIT_MAX = 1, 8

# Starting body, head first
START_PARTS = ((2.0, 1.0), (1.0, 1.0))

# ----- Timing / comparison -----
MOVE_INTERVAL = 0.2   # seconds between grid steps
EQ_TOLERANCE = 0.1

# ----- Colors (raylib palette) -----
GRAY      = (130, 130, 130)
BLACK     = (0, 0, 0)
ORANGE    = (255, 161, 0)
RED       = (230, 41, 55)
GREEN     = (0, 228, 48)
DARKBROWN = (76, 63, 47)
WHITE     = (255, 255, 255)

OUTLINE_THICKNESS = 0.1  # logical units

# ----- Tunables -----
@dataclass
class Config:
    seed: Optional[int] = None
    fps: int = 60
    window_scale: int = 5   # pixels per logical unit
    font_size: int = 20

CFG = Config()


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Build the generator used for fruit placement; pass a seed to replay a game."""
    return np.random.default_rng(seed)
