"""Game configuration constants for Flappy Bird."""

from __future__ import annotations

from dataclasses import dataclass

# Logical canvas (all positions/sizes live in this space)
CANVAS_WIDTH = 720
CANVAS_HEIGHT = 1280
FPS = 60
WINDOW_SCALE = 0.5  # physical window = logical * scale

# Physics
GRAVITY = 2400.0  # px/s^2
FLAP_IMPULSE = -900.0  # px/s
MAX_FALL_SPEED = 1400.0  # px/s

# Obstacles
OBSTACLE_WIDTH = 140
OBSTACLE_SPEED = 150.0  # px/s
OBSTACLE_INTERVAL = 4.0  # seconds between pair spawns
OBSTACLE_MIN_LOWER = 380
OBSTACLE_MAX_LOWER = 700
GAP_MIN_HEIGHT = 280
GAP_MAX_HEIGHT = 380
MIN_UPPER_HEIGHT = 0

# Ground
GROUND_HEIGHT = 160
GROUND_Y = CANVAS_HEIGHT - GROUND_HEIGHT

# Bird
BIRD_X = 150
BIRD_START_Y = 560
BIRD_WIDTH = 86
BIRD_HEIGHT = 60
BIRD_IDLE_AMPLITUDE = 14.0  # px bob while waiting
BIRD_IDLE_FREQUENCY = 4.0  # rad/s
BIRD_FRAME_TIME = 0.1  # seconds per wing frame
BIRD_MAX_TILT_UP = 25.0  # degrees
BIRD_MAX_TILT_DOWN = -70.0
BIRD_CRASH_ROTATION = -90.0  # nose straight down

# Scoreboard numerals
NUMERAL_WIDTH = 60
NUMERAL_HEIGHT = 90
SCORE_CENTER_X = CANVAS_WIDTH // 2
SCORE_TOP = 100
RESULT_SCORE_TOP = 540

# Sprite-sheet regions (src) and placements (dest), (x, y, w, h)
READY_TITLE_SRC = (10, 15, 470, 135)
READY_TITLE_DEST = (125, 300)
READY_TAP_SRC = (0, 150, 286, 255)
READY_TAP_DEST = (217, 600)
OVER_TITLE_SRC = (15, 315, 484, 110)
OVER_TITLE_DEST = (118, 400)
OVER_BUTTON_SRC = (604, 2, 264, 150)
RESTART_BUTTON_RECT = (228, 700, 264, 150)

# Palette
SKY_TOP = (78, 192, 202)
SKY_BOTTOM = (196, 236, 222)
PIPE_BODY = (116, 191, 46)
PIPE_SHADE = (84, 140, 32)
PIPE_HIGHLIGHT = (170, 226, 96)
PIPE_OUTLINE = (84, 56, 71)
GROUND_TOP = (222, 216, 149)
GROUND_STRIPE = (150, 210, 80)
GROUND_STRIPE_DARK = (110, 170, 50)
BIRD_BODY = (250, 200, 40)
BIRD_BELLY = (252, 240, 190)
BIRD_WING = (245, 245, 235)
BIRD_BEAK = (240, 110, 40)
BIRD_OUTLINE = (60, 40, 40)
EYE_COLOR = (255, 255, 255)
PUPIL_COLOR = (20, 20, 20)
TEXT_FILL = (255, 255, 255)
TEXT_OUTLINE = (60, 40, 40)
TITLE_FILL = (250, 170, 50)
PANEL_FILL = (222, 216, 149)
BUTTON_FILL = (240, 96, 40)


@dataclass(frozen=True)
class ObstacleConfig:
    """Bounds for pipe-pair generation, checked once at construction."""

    playfield_width: int = CANVAS_WIDTH
    playfield_height: int = CANVAS_HEIGHT
    min_lower: int = OBSTACLE_MIN_LOWER
    max_lower: int = OBSTACLE_MAX_LOWER
    min_gap: int = GAP_MIN_HEIGHT
    max_gap: int = GAP_MAX_HEIGHT
    min_upper: int = MIN_UPPER_HEIGHT
    width: int = OBSTACLE_WIDTH
    speed: float = OBSTACLE_SPEED
    interval: float = OBSTACLE_INTERVAL

    def __post_init__(self) -> None:
        if self.min_lower < 0 or self.min_gap < 0 or self.min_upper < 0:
            raise ValueError("obstacle bounds must be non-negative")
        if self.min_lower > self.max_lower:
            raise ValueError(f"min_lower {self.min_lower} exceeds max_lower {self.max_lower}")
        if self.min_gap > self.max_gap:
            raise ValueError(f"min_gap {self.min_gap} exceeds max_gap {self.max_gap}")
        if self.max_lower + self.max_gap > self.playfield_height - self.min_upper:
            raise ValueError(
                "max_lower + max_gap leaves less than min_upper for the upper obstacle "
                f"({self.max_lower} + {self.max_gap} > {self.playfield_height} - {self.min_upper})"
            )
        if self.width <= 0 or self.speed <= 0 or self.interval <= 0:
            raise ValueError("width, speed and interval must be positive")
