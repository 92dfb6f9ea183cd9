# render.py
from dataclasses import dataclass
from typing import List, Tuple

import pygame  # type: ignore

from .config import (
    BOARD_W, BOARD_H, PART_WIDTH, PART_HEIGHT, OUTLINE_THICKNESS,
    GRAY, BLACK, ORANGE, RED, GREEN, DARKBROWN, WHITE,
)
from .state import PlayState

Color = Tuple[int, int, int]

HELP_TEXT = "Use arrow keys to control the snake."
DEATH_TEXT = "YOU DIED. R I P"
RESTART_TEXT = "Press 'Esc' to restart."


@dataclass(frozen=True)
class Viewport:
    """Maps the logical board (BOARD_W x BOARD_H units) onto window pixels."""
    scale: int = 5

    def __post_init__(self):
        if self.scale <= 0:
            raise ValueError(f"Viewport scale must be positive, got {self.scale}")

    @property
    def size(self) -> Tuple[int, int]:
        return int(BOARD_W * self.scale), int(BOARD_H * self.scale)

    def cell_rect(self, x: float, y: float) -> pygame.Rect:
        """Screen rect of grid cell (x, y)."""
        return pygame.Rect(
            round(x * PART_WIDTH * self.scale),
            round(y * PART_HEIGHT * self.scale),
            round(PART_WIDTH * self.scale),
            round(PART_HEIGHT * self.scale),
        )

    def line_width(self, thickness: float) -> int:
        return max(1, round(thickness * self.scale))


def draw_block(screen: pygame.Surface, viewport: Viewport, x: float, y: float, color: Color) -> None:
    rect = viewport.cell_rect(x, y)
    pygame.draw.rect(screen, color, rect)
    pygame.draw.rect(screen, DARKBROWN, rect, viewport.line_width(OUTLINE_THICKNESS))


def status_lines(state: PlayState) -> List[str]:
    lines = [HELP_TEXT]
    if state.dead:
        lines += [DEATH_TEXT, RESTART_TEXT]
    else:
        lines.append(f"length of {state.length}")
    return lines


def render(screen: pygame.Surface, font: pygame.font.Font, state: PlayState, viewport: Viewport) -> None:
    screen.fill(GRAY)

    for x, y in state.walls:
        draw_block(screen, viewport, x, y, BLACK)

    # head first, then the rest of the body
    for i, (x, y) in enumerate(state.parts):
        draw_block(screen, viewport, x, y, ORANGE if i == 0 else RED)

    draw_block(screen, viewport, state.fruit.x, state.fruit.y, GREEN)

    # labels stacked from the top-left corner
    ty = 4
    for line in status_lines(state):
        txt = font.render(line, True, WHITE)
        screen.blit(txt, (6, ty))
        ty += txt.get_height() + 2
