# state.py
from dataclasses import dataclass, field
from typing import List, Optional, Tuple
import logging

import numpy as np  # type: ignore

from .config import BOARD_CELLS, FRUIT_MIN, FRUIT_MAX, START_PARTS, make_rng
from .geometry import Direction, Position

logger = logging.getLogger(__name__)

# Offset of the new tail segment, mirrored from the heading
_BEHIND = {
    Direction.NORTH: (0, 1),
    Direction.SOUTH: (0, -1),
    Direction.WEST:  (1, 0),
    Direction.EAST:  (-1, 0),
}

# ---------- State ----------
@dataclass
class PlayState:
    walls: Tuple[Position, ...]
    parts: List[Position]              # head at index 0
    direction: Direction               # heading we are moving in
    next_direction: Direction          # committed at the next grid step
    fruit: Position
    time_since_last_move: float = 0.0
    dead: bool = False
    rng: np.random.Generator = field(default_factory=make_rng, repr=False, compare=False)

    @property
    def head(self) -> Position:
        return self.parts[0]

    @property
    def length(self) -> int:
        return len(self.parts)

# ---------- Helpers ----------
def random_position_on_board(rng: np.random.Generator) -> Position:
    x = int(rng.integers(FRUIT_MIN, FRUIT_MAX + 1))
    y = int(rng.integers(FRUIT_MIN, FRUIT_MAX + 1))
    return Position(float(x), float(y))

def build_walls(size: int = BOARD_CELLS) -> Tuple[Position, ...]:
    """Perimeter ring of a size x size board, each corner listed once."""
    if size < 2:
        raise ValueError(f"Board needs at least 2 cells per side, got {size}")
    last = float(size - 1)
    walls: List[Position] = []
    for x in range(size):
        walls.append(Position(float(x), 0.0))
        walls.append(Position(float(x), last))
    for y in range(1, size - 1):
        walls.append(Position(0.0, float(y)))
        walls.append(Position(last, float(y)))
    return tuple(walls)

def reset_state(rng: Optional[np.random.Generator] = None) -> PlayState:
    """Fresh game: wall ring, two-segment body heading east, one random fruit."""
    if rng is None:
        rng = make_rng()
    state = PlayState(
        walls=build_walls(),
        parts=[Position(*p) for p in START_PARTS],
        direction=Direction.EAST,
        next_direction=Direction.EAST,
        fruit=random_position_on_board(rng),
        time_since_last_move=0.0,
        dead=False,
        rng=rng,
    )
    logger.info("New game, fruit at (%g, %g)", state.fruit.x, state.fruit.y)
    return state

def extend_snake_body(state: PlayState) -> None:
    """Append one segment behind the tail, opposite to the current heading."""
    if not state.parts:
        return
    tx, ty = state.parts[-1]
    ox, oy = _BEHIND[state.direction]
    state.parts.append(Position(tx + ox, ty + oy))
