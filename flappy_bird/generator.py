"""Timed spawning of upper/lower pipe pairs."""

from __future__ import annotations

import logging
import random

from .config import ObstacleConfig
from .entities import Obstacle, ObstacleKind

logger = logging.getLogger(__name__)


class ObstacleGenerator:
    """Creates pipe pairs with a random lower height and gap.

    The upper pipe takes whatever height is left, so
    ``upper.height + gap + lower.height == playfield_height`` for every pair.
    """

    def __init__(self, config: ObstacleConfig | None = None, rng: random.Random | None = None) -> None:
        self.config = config or ObstacleConfig()
        self.rng = rng or random.Random()
        self.last_spawn: float | None = None

    def reset(self) -> None:
        self.last_spawn = None

    def should_spawn(self, now: float) -> bool:
        if self.last_spawn is None:
            return True
        return now - self.last_spawn > self.config.interval

    def spawn_pair(self, now: float) -> tuple[Obstacle, Obstacle]:
        cfg = self.config
        self.last_spawn = now
        lower_h = round(self.rng.uniform(cfg.min_lower, cfg.max_lower))
        gap_h = round(self.rng.uniform(cfg.min_gap, cfg.max_gap))
        upper_h = cfg.playfield_height - lower_h - gap_h
        x = cfg.playfield_width

        upper = Obstacle(ObstacleKind.UPPER, x, 0, cfg.width, upper_h, cfg.speed)
        lower = Obstacle(ObstacleKind.LOWER, x, cfg.playfield_height - lower_h, cfg.width, lower_h, cfg.speed)
        logger.debug("Spawned pair at t=%.2f: upper=%d gap=%d lower=%d", now, upper_h, gap_h, lower_h)
        return upper, lower
