# game.py
from typing import Optional
import logging

from .config import MOVE_INTERVAL
from .geometry import Direction, are_basically_eq, is_opposite_of, next_position
from .inputs import InputSource, Key
from .state import PlayState, extend_snake_body, random_position_on_board, reset_state

logger = logging.getLogger(__name__)

# Checked in this order; the first acceptable press wins
KEY_DIRECTIONS = (
    (Key.LEFT, Direction.WEST),
    (Key.RIGHT, Direction.EAST),
    (Key.UP, Direction.NORTH),
    (Key.DOWN, Direction.SOUTH),
)

# ---------- Input ----------
def input_to_direction(inputs: InputSource, current: Direction,
                       key: Key, mapping: Direction) -> Optional[Direction]:
    if inputs.is_key_pressed(key) and not is_opposite_of(mapping, current):
        return mapping
    return None

def buffer_direction(state: PlayState, inputs: InputSource) -> None:
    """Queue a turn for the next grid step (no 180° turns)."""
    for key, mapping in KEY_DIRECTIONS:
        cand = input_to_direction(inputs, state.direction, key, mapping)
        if cand is not None:
            state.next_direction = cand
            return

# ---------- Update ----------
def step_snake(state: PlayState) -> None:
    """Advance the body one cell, then resolve collisions and fruit."""
    state.time_since_last_move = 0.0
    state.direction = state.next_direction

    # Shift in place: each slot takes the value of the one in front of it
    carry = next_position(state.parts[0], state.direction)
    for i in range(len(state.parts)):
        state.parts[i], carry = carry, state.parts[i]

    head = state.parts[0]
    logger.debug("Head -> (%g, %g) heading %s", head.x, head.y, state.direction.name)

    if any(are_basically_eq(part, head) for part in state.parts[1:]):
        state.dead = True
    if any(are_basically_eq(wall, head) for wall in state.walls):
        state.dead = True
    if state.dead:
        logger.info("Snake died at (%g, %g) with length %d", head.x, head.y, state.length)

    if are_basically_eq(head, state.fruit):
        extend_snake_body(state)
        state.fruit = random_position_on_board(state.rng)
        logger.debug("Fruit eaten, length %d, next fruit at (%g, %g)",
                     state.length, state.fruit.x, state.fruit.y)

def update(state: PlayState, inputs: InputSource) -> PlayState:
    """
    Per-frame transition. Returns the state for the next frame: the same
    object, or a fresh one when Escape was pressed.
    """
    if inputs.is_key_pressed(Key.ESCAPE):
        return reset_state(state.rng)

    if state.dead:
        return state

    buffer_direction(state, inputs)

    state.time_since_last_move += inputs.frame_time()
    if state.time_since_last_move < MOVE_INTERVAL:
        return state  # not time to move yet

    step_snake(state)
    return state
