"""Draws a GameState onto the logical canvas. Reads state, never mutates it."""

from __future__ import annotations

import pygame

from .assets import Assets
from .config import (
    CANVAS_HEIGHT,
    CANVAS_WIDTH,
    OVER_BUTTON_SRC,
    OVER_TITLE_DEST,
    OVER_TITLE_SRC,
    READY_TAP_DEST,
    READY_TAP_SRC,
    READY_TITLE_DEST,
    READY_TITLE_SRC,
    RESTART_BUTTON_RECT,
    RESULT_SCORE_TOP,
    SCORE_CENTER_X,
)
from .controller import GamePhase, GameState


class Renderer:
    def __init__(self, assets: Assets | None = None) -> None:
        self.assets = assets or Assets()
        self.canvas = pygame.Surface((CANVAS_WIDTH, CANVAS_HEIGHT), 0, 32)

    def draw(self, state: GameState) -> pygame.Surface:
        """Compose the frame for the current phase and return the canvas."""
        surf = self.canvas
        a = self.assets
        surf.blit(a.sky, (0, 0))

        phase = state.phase
        if phase is GamePhase.READY:
            state.bird.draw(surf, a)
            state.ground.draw(surf, a)
            surf.blit(a.ready_sheet, READY_TITLE_DEST, pygame.Rect(READY_TITLE_SRC))
            surf.blit(a.ready_sheet, READY_TAP_DEST, pygame.Rect(READY_TAP_SRC))
            return surf

        for obs in state.obstacles:
            obs.draw(surf, a)
        if phase is GamePhase.PLAYING:
            state.bird.draw(surf, a)
            state.ground.draw(surf, a)
        else:
            # Bird lies on the ground strip once it has fallen
            state.ground.draw(surf, a)
            state.bird.draw(surf, a)

        if phase is GamePhase.RESULT:
            surf.blit(a.over_sheet, OVER_TITLE_DEST, pygame.Rect(OVER_TITLE_SRC))
            surf.blit(a.over_sheet, RESTART_BUTTON_RECT[:2], pygame.Rect(OVER_BUTTON_SRC))
            state.scoreboard.draw(surf, a, center_x=SCORE_CENTER_X, top=RESULT_SCORE_TOP)
            self._draw_best(surf, state)
        else:
            state.scoreboard.draw(surf, a)
        return surf

    def _draw_best(self, surf: pygame.Surface, state: GameState) -> None:
        text = self.assets.font_mid.render(f"Best: {state.scoreboard.best}", True, (255, 255, 255))
        surf.blit(text, text.get_rect(midtop=(SCORE_CENTER_X, RESULT_SCORE_TOP + 100)))
