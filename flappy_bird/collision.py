"""Bounding-box crash detection between the bird, the pipes and the ground."""

from __future__ import annotations

import logging
from typing import Iterable

from .entities import Bird, Obstacle
from .utils import rects_overlap

logger = logging.getLogger(__name__)


def check_crash(bird: Bird, obstacles: Iterable[Obstacle], ground_y: float) -> bool:
    """True if the bird overlaps any pipe or has reached the ground.

    ``obstacles`` must be ordered by ascending x (oldest first). The scan stops at
    the first pipe starting at or past the bird's right edge; nothing after it can
    overlap.
    """
    bird_rect = bird.rect
    bird_right = bird.right
    for obs in obstacles:
        if obs.x >= bird_right:
            break
        if rects_overlap(bird_rect, obs.rect):
            return True

    if bird.on_ground(ground_y):
        logger.debug("Crash into the ground at y=%.1f", bird.y)
        return True
    return False


def check_crash_exhaustive(bird: Bird, obstacles: Iterable[Obstacle], ground_y: float) -> bool:
    """Same answer as check_crash, testing every pipe regardless of order."""
    if any(rects_overlap(bird.rect, obs.rect) for obs in obstacles):
        return True
    return bird.on_ground(ground_y)
