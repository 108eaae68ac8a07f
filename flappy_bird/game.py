"""Window, event pump and frame loop for Flappy Bird."""

from __future__ import annotations

import logging
import os
import sys

import pygame

from .config import CANVAS_HEIGHT, CANVAS_WIDTH, FPS, WINDOW_SCALE
from .controller import GameController
from .events import FrameScheduler, to_logical
from .renderer import Renderer

logger = logging.getLogger(__name__)

ACTIVATE_KEYS = (pygame.K_SPACE, pygame.K_UP)


def setup_logging(debug: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


class Game:
    """Hosts the controller in a pygame window: maps input, paces frames, presents."""

    def __init__(self, scale: float = WINDOW_SCALE, controller: GameController | None = None) -> None:
        pygame.init()
        self.window_size = (max(1, int(CANVAS_WIDTH * scale)), max(1, int(CANVAS_HEIGHT * scale)))
        self.screen = pygame.display.set_mode(self.window_size, pygame.DOUBLEBUF)
        pygame.display.set_caption("Flappy Bird")
        self.clock = pygame.time.Clock()
        self.controller = controller or GameController()
        self.renderer = Renderer()
        self.scheduler = FrameScheduler()
        self._last_time: float | None = None
        logger.info("Window %dx%d (scale %.2f)", self.window_size[0], self.window_size[1], scale)

    def handle_input(self, event: pygame.event.Event) -> None:
        if event.type == pygame.QUIT:
            self.controller.stop()
        elif event.type == pygame.KEYDOWN:
            if event.key in ACTIVATE_KEYS:
                self.controller.tap()
            elif event.key == pygame.K_ESCAPE:
                self.controller.stop()
        elif event.type == pygame.MOUSEBUTTONDOWN:
            # Touches arrive as FINGERDOWN too; skip the synthetic mouse copy
            if event.button == 1 and not getattr(event, "touch", False):
                self.controller.tap(to_logical(event.pos, self.window_size))
        elif event.type == pygame.FINGERDOWN:
            # Finger coordinates are normalized to [0, 1]
            self.controller.tap((event.x * CANVAS_WIDTH, event.y * CANVAS_HEIGHT))

    def frame(self) -> bool:
        """One display refresh: advance the game, present it, ask for the next one."""
        now = pygame.time.get_ticks() / 1000.0
        dt = 0.0 if self._last_time is None else now - self._last_time
        self._last_time = now

        keep_going = self.controller.tick(now, dt)
        self.draw()
        if keep_going:
            self.scheduler.request(self.frame)
        return keep_going

    def draw(self) -> None:
        canvas = self.renderer.draw(self.controller.state)
        if canvas.get_size() == self.window_size:
            self.screen.blit(canvas, (0, 0))
        else:
            self.screen.blit(pygame.transform.smoothscale(canvas, self.window_size), (0, 0))
        pygame.display.flip()

    def run(self) -> None:
        self.scheduler.request(self.frame)
        while self.scheduler.pending:
            self.clock.tick(FPS)
            for event in pygame.event.get():
                self.handle_input(event)
            self.scheduler.run_pending()
        logger.info("Stopped with best score %d", self.controller.state.scoreboard.best)
        pygame.quit()


def main() -> None:
    """Main entry point."""
    debug = os.getenv("FLAPPY_DEBUG", "false").lower() == "true"
    setup_logging(debug)

    try:
        scale = float(os.getenv("FLAPPY_WINDOW_SCALE", str(WINDOW_SCALE)))
    except ValueError:
        logger.error("FLAPPY_WINDOW_SCALE must be a number")
        sys.exit(1)

    logger.info("Flappy Bird starting...")
    try:
        Game(scale=scale).run()
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
    except Exception as e:
        logger.exception(f"Fatal error: {e}")
        sys.exit(1)
