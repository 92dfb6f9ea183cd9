# main.py
import logging

import pygame  # type: ignore

from .config import CFG, make_rng
from .game import update
from .inputs import FrameHost
from .render import Viewport, render
from .state import reset_state

logger = logging.getLogger(__name__)


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    pygame.init()
    try:
        viewport = Viewport(scale=CFG.window_scale)
        screen = pygame.display.set_mode(viewport.size)
        pygame.display.set_caption("Snake")
        font = pygame.font.SysFont(None, CFG.font_size)
        host = FrameHost(fps=CFG.fps)

        state = reset_state(make_rng(CFG.seed))
        logger.info("Window %dx%d at %d fps", *viewport.size, CFG.fps)

        # 1) input  2) update  3) render  4) wait for the next frame
        while host.poll_events():
            state = update(state, host)
            render(screen, font, state, viewport)
            host.next_frame()
    finally:
        pygame.quit()

if __name__ == "__main__":
    main()
