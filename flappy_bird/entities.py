"""Game entities: the player-controlled bird, pipe obstacles and the ground strip.

Entities carry their own state and know how to draw themselves from the shared
sprite sheets; the controller decides when they move.
"""

from __future__ import annotations

import math
from enum import Enum
from typing import TYPE_CHECKING

import pygame

from .config import (
    BIRD_CRASH_ROTATION,
    BIRD_FRAME_TIME,
    BIRD_HEIGHT,
    BIRD_IDLE_AMPLITUDE,
    BIRD_IDLE_FREQUENCY,
    BIRD_MAX_TILT_DOWN,
    BIRD_MAX_TILT_UP,
    BIRD_START_Y,
    BIRD_WIDTH,
    BIRD_X,
    CANVAS_HEIGHT,
    FLAP_IMPULSE,
    GRAVITY,
    GROUND_Y,
    MAX_FALL_SPEED,
)
from .utils import clamp

if TYPE_CHECKING:
    from .assets import Assets

BIRD_FRAME_COUNT = 3


class ObstacleKind(Enum):
    UPPER = "up"
    LOWER = "down"


class Obstacle:
    def __init__(
        self,
        kind: ObstacleKind,
        x: float,
        y: float,
        width: float,
        height: float,
        speed: float,
    ) -> None:
        self.kind = kind
        self.x = float(x)
        self.y = float(y)
        self.width = width
        self.height = height
        self.speed = speed
        self.passed = False

    def __repr__(self) -> str:
        return f"Obstacle({self.kind.name}, x={self.x:.1f}, y={self.y:.1f}, h={self.height})"

    @property
    def rect(self) -> tuple[float, float, float, float]:
        return (self.x, self.y, self.width, self.height)

    @property
    def right(self) -> float:
        return self.x + self.width

    def update(self, dt: float) -> None:
        self.x -= self.speed * dt

    def out_of_view(self) -> bool:
        return self.right < 0

    def draw(self, surf: pygame.Surface, assets: Assets) -> None:
        h = int(round(self.height))
        if h <= 0:
            return
        dest = (int(self.x), int(self.y))
        if self.kind is ObstacleKind.UPPER:
            # Flipped sheet: the cap sits at the bottom, so take the last h rows
            sheet = assets.pipe_flipped
            area = pygame.Rect(0, sheet.get_height() - h, int(self.width), h)
        else:
            sheet = assets.pipe
            area = pygame.Rect(0, 0, int(self.width), h)
        surf.blit(sheet, dest, area)


class Bird:
    def __init__(
        self,
        x: float = BIRD_X,
        y: float = BIRD_START_Y,
        width: float = BIRD_WIDTH,
        height: float = BIRD_HEIGHT,
    ) -> None:
        self.start_x = float(x)
        self.start_y = float(y)
        self.width = width
        self.height = height
        self.reset()

    def reset(self) -> None:
        self.x = self.start_x
        self.y = self.start_y
        self.vy = 0.0
        self.rotation = 0.0
        self.crashing = False
        self.landed = False
        # Animation state
        self.frame = 0
        self._frame_clock = 0.0
        self._idle_phase = 0.0

    @property
    def rect(self) -> tuple[float, float, float, float]:
        return (self.x, self.y, self.width, self.height)

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def _animate(self, dt: float) -> None:
        self._frame_clock += dt
        self.frame = int(self._frame_clock / BIRD_FRAME_TIME) % BIRD_FRAME_COUNT

    def idle(self, dt: float) -> None:
        """Hover around the start height while waiting for the first tap."""
        self._animate(dt)
        self._idle_phase += dt * BIRD_IDLE_FREQUENCY
        self.y = self.start_y + math.sin(self._idle_phase) * BIRD_IDLE_AMPLITUDE

    def fly(self) -> bool:
        """Apply one upward impulse. Returns False when the bird can no longer flap."""
        if self.crashing:
            return False
        self.vy = FLAP_IMPULSE
        return True

    def crash_pose(self) -> None:
        self.crashing = True
        self.vy = max(self.vy, 0.0)
        self.rotation = BIRD_CRASH_ROTATION
        self.frame = 1

    def on_ground(self, ground_y: float = GROUND_Y) -> bool:
        return self.bottom >= ground_y

    def update(self, dt: float, ground_y: float = GROUND_Y) -> None:
        if self.landed:
            return
        self.vy = min(self.vy + GRAVITY * dt, MAX_FALL_SPEED)
        self.y += self.vy * dt
        if self.crashing:
            if self.on_ground(ground_y):
                self.y = ground_y - self.height
                self.vy = 0.0
                self.landed = True
            return

        # Ceiling
        if self.y < 0:
            self.y = 0.0
            self.vy = 0.0
        self._animate(dt)
        # Nose follows velocity: up while rising, down while falling
        self.rotation = clamp(-self.vy / 20.0, BIRD_MAX_TILT_DOWN, BIRD_MAX_TILT_UP)

    def draw(self, surf: pygame.Surface, assets: Assets) -> None:
        sprite = assets.bird_frames[self.frame % len(assets.bird_frames)]
        if self.rotation:
            sprite = pygame.transform.rotate(sprite, self.rotation)
        center = (int(self.x + self.width / 2), int(self.y + self.height / 2))
        surf.blit(sprite, sprite.get_rect(center=center))


class Ground:
    def __init__(self, y: float = GROUND_Y, height: float = CANVAS_HEIGHT - GROUND_Y) -> None:
        self.y = y
        self.height = height
        self.offset = 0.0

    def update(self, dt: float, speed: float) -> None:
        self.offset += speed * dt

    def draw(self, surf: pygame.Surface, assets: Assets) -> None:
        period = assets.ground_period
        shift = int(self.offset) % period
        surf.blit(assets.ground, (-shift, int(self.y)))
