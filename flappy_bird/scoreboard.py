"""Score keeping and numeral rendering."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

import pygame

from .config import NUMERAL_HEIGHT, NUMERAL_WIDTH, SCORE_CENTER_X, SCORE_TOP
from .entities import Bird, Obstacle, ObstacleKind

if TYPE_CHECKING:
    from .assets import Assets


class Scoreboard:
    def __init__(self) -> None:
        self.score = 0
        self.best = 0

    def reset(self) -> None:
        self.score = 0

    def count(self, bird: Bird, obstacles: Iterable[Obstacle]) -> int:
        """Score every pair whose trailing edge the bird has just passed.

        Only the upper pipe of a pair is counted and it is flagged so later calls
        skip it; retiring pipes afterwards cannot take points away.
        """
        gained = 0
        for obs in obstacles:
            if obs.kind is not ObstacleKind.UPPER or obs.passed:
                continue
            if bird.x > obs.right:
                obs.passed = True
                gained += 1
        self.score += gained
        return gained

    def record_best(self) -> int:
        self.best = max(self.best, self.score)
        return self.best

    def draw(
        self,
        surf: pygame.Surface,
        assets: Assets,
        value: int | None = None,
        center_x: int = SCORE_CENTER_X,
        top: int = SCORE_TOP,
    ) -> None:
        digits = str(self.score if value is None else value)
        x = center_x - len(digits) * NUMERAL_WIDTH // 2
        for ch in digits:
            src = pygame.Rect(int(ch) * NUMERAL_WIDTH, 0, NUMERAL_WIDTH, NUMERAL_HEIGHT)
            surf.blit(assets.numerals, (x, top), src)
            x += NUMERAL_WIDTH
