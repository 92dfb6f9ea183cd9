# geometry.py
from enum import Enum
from typing import NamedTuple, Tuple

from .config import EQ_TOLERANCE


class Direction(Enum):
    """Compass headings as (dx, dy) steps. y grows downward."""
    NORTH = (0, -1)
    SOUTH = (0, 1)
    WEST  = (-1, 0)
    EAST  = (1, 0)


class Position(NamedTuple):
    x: float
    y: float


def is_opposite_of(one: Direction, other: Direction) -> bool:
    (ax, ay), (bx, by) = one.value, other.value
    return ax == -bx and ay == -by


def next_position(start: Tuple[float, float], direction: Direction) -> Position:
    x, y = start
    dx, dy = direction.value
    return Position(x + dx, y + dy)


def are_basically_eq(this: Tuple[float, float], other: Tuple[float, float]) -> bool:
    """Equal within EQ_TOLERANCE on both axes (bounds excluded)."""
    dx = this[0] - other[0]
    dy = this[1] - other[1]
    return -EQ_TOLERANCE < dx < EQ_TOLERANCE and -EQ_TOLERANCE < dy < EQ_TOLERANCE
