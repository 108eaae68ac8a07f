"""Procedurally drawn sprite sheets.

Every image the renderer needs is painted once at startup with pygame primitives
and numpy-built textures, so the game ships without image files. The ready and
game-over sheets keep a fixed layout so the renderer can address regions by
source rect.
"""

from __future__ import annotations

import logging

import pygame

from .config import (
    BIRD_BEAK,
    BIRD_BELLY,
    BIRD_BODY,
    BIRD_HEIGHT,
    BIRD_OUTLINE,
    BIRD_WIDTH,
    BIRD_WING,
    BUTTON_FILL,
    CANVAS_HEIGHT,
    CANVAS_WIDTH,
    EYE_COLOR,
    GROUND_HEIGHT,
    GROUND_STRIPE,
    GROUND_STRIPE_DARK,
    GROUND_TOP,
    NUMERAL_HEIGHT,
    NUMERAL_WIDTH,
    OBSTACLE_WIDTH,
    OVER_BUTTON_SRC,
    OVER_TITLE_SRC,
    PANEL_FILL,
    PIPE_BODY,
    PIPE_HIGHLIGHT,
    PIPE_OUTLINE,
    PIPE_SHADE,
    PUPIL_COLOR,
    READY_TAP_SRC,
    READY_TITLE_SRC,
    SKY_BOTTOM,
    SKY_TOP,
    TEXT_FILL,
    TEXT_OUTLINE,
    TITLE_FILL,
)
from .utils import diagonal_stripes, scale_color, vertical_gradient

logger = logging.getLogger(__name__)

PIPE_CAP_HEIGHT = 56
PIPE_BODY_INSET = 8
GROUND_STRIPE_HEIGHT = 28
GROUND_STRIPE_PERIOD = 48


def _outlined_text(
    font: pygame.font.Font,
    text: str,
    fill: tuple[int, int, int],
    outline: tuple[int, int, int],
    px: int = 4,
) -> pygame.Surface:
    """Render text with a solid outline by stamping the outline color around it."""
    inner = font.render(text, True, fill)
    edge = font.render(text, True, outline)
    w, h = inner.get_width() + px * 2, inner.get_height() + px * 2
    s = pygame.Surface((w, h), pygame.SRCALPHA)
    for dx in (-px, 0, px):
        for dy in (-px, 0, px):
            if dx or dy:
                s.blit(edge, (px + dx, px + dy))
    s.blit(inner, (px, px))
    return s


def _blit_centered(dst: pygame.Surface, src: pygame.Surface, region: tuple[int, int, int, int]) -> None:
    x, y, w, h = region
    dst.blit(src, src.get_rect(center=(x + w // 2, y + h // 2)))


class Assets:
    """All sheets used by the renderer, built from code."""

    def __init__(self) -> None:
        if not pygame.font.get_init():
            pygame.font.init()
        self.font_big = pygame.font.SysFont(None, 120)
        self.font_mid = pygame.font.SysFont(None, 72)

        self.sky = self._make_sky()
        self.bird_frames = [self._make_bird(wing) for wing in (-1, 0, 1)]
        self.pipe = self._make_pipe()
        self.pipe_flipped = pygame.transform.flip(self.pipe, False, True)
        self.ground_period = GROUND_STRIPE_PERIOD
        self.ground = self._make_ground()
        self.numerals = self._make_numerals()
        self.ready_sheet = self._make_ready_sheet()
        self.over_sheet = self._make_over_sheet()
        logger.debug("Sprite sheets built")

    def _make_sky(self) -> pygame.Surface:
        return pygame.surfarray.make_surface(vertical_gradient(CANVAS_WIDTH, CANVAS_HEIGHT, SKY_TOP, SKY_BOTTOM))

    def _make_bird(self, wing: int) -> pygame.Surface:
        w, h = BIRD_WIDTH, BIRD_HEIGHT
        s = pygame.Surface((w, h), pygame.SRCALPHA)
        body = pygame.Rect(2, 2, w - 14, h - 4)
        pygame.draw.ellipse(s, BIRD_BODY, body)
        belly = pygame.Rect(body.x + body.w // 4, body.centery, body.w // 2, body.h // 2 - 2)
        pygame.draw.ellipse(s, BIRD_BELLY, belly)
        pygame.draw.ellipse(s, BIRD_OUTLINE, body, 3)

        # Wing: up, level or down depending on the frame
        wing_rect = pygame.Rect(6, h // 2 - 10 + wing * 10, w // 3, h // 3)
        pygame.draw.ellipse(s, BIRD_WING, wing_rect)
        pygame.draw.ellipse(s, BIRD_OUTLINE, wing_rect, 2)

        eye_c = (body.right - body.w // 4, body.y + body.h // 3)
        pygame.draw.circle(s, EYE_COLOR, eye_c, h // 6)
        pygame.draw.circle(s, BIRD_OUTLINE, eye_c, h // 6, 2)
        pygame.draw.circle(s, PUPIL_COLOR, (eye_c[0] + 4, eye_c[1]), max(2, h // 14))

        beak = [
            (body.right - 10, body.centery - 2),
            (w - 1, body.centery + 6),
            (body.right - 10, body.centery + 14),
        ]
        pygame.draw.polygon(s, BIRD_BEAK, beak)
        pygame.draw.polygon(s, BIRD_OUTLINE, beak, 2)
        return s

    def _make_pipe(self) -> pygame.Surface:
        # Cap at the top; lower pipes show the first rows, upper pipes the flipped last rows
        w, h = OBSTACLE_WIDTH, CANVAS_HEIGHT
        s = pygame.Surface((w, h), pygame.SRCALPHA)
        body = pygame.Rect(PIPE_BODY_INSET, PIPE_CAP_HEIGHT, w - PIPE_BODY_INSET * 2, h - PIPE_CAP_HEIGHT)
        pygame.draw.rect(s, PIPE_BODY, body)
        pygame.draw.rect(s, PIPE_HIGHLIGHT, pygame.Rect(body.x + 12, body.y, 14, body.h))
        pygame.draw.rect(s, PIPE_SHADE, pygame.Rect(body.right - 24, body.y, 18, body.h))
        pygame.draw.rect(s, PIPE_OUTLINE, body, 3)

        cap = pygame.Rect(0, 0, w, PIPE_CAP_HEIGHT)
        pygame.draw.rect(s, PIPE_BODY, cap)
        pygame.draw.rect(s, PIPE_HIGHLIGHT, pygame.Rect(cap.x + 14, cap.y + 4, 14, cap.h - 8))
        pygame.draw.rect(s, scale_color(PIPE_SHADE, 0.9), pygame.Rect(cap.right - 26, cap.y + 4, 18, cap.h - 8))
        pygame.draw.rect(s, PIPE_OUTLINE, cap, 3)
        return s

    def _make_ground(self) -> pygame.Surface:
        w = CANVAS_WIDTH + GROUND_STRIPE_PERIOD
        s = pygame.Surface((w, GROUND_HEIGHT))
        s.fill(GROUND_TOP)
        stripes = pygame.surfarray.make_surface(
            diagonal_stripes(w, GROUND_STRIPE_HEIGHT, GROUND_STRIPE_PERIOD, GROUND_STRIPE, GROUND_STRIPE_DARK)
        )
        s.blit(stripes, (0, 0))
        pygame.draw.line(s, PIPE_OUTLINE, (0, 0), (w, 0), 3)
        pygame.draw.line(s, scale_color(GROUND_TOP, 0.8), (0, GROUND_STRIPE_HEIGHT), (w, GROUND_STRIPE_HEIGHT), 3)
        return s

    def _make_numerals(self) -> pygame.Surface:
        s = pygame.Surface((NUMERAL_WIDTH * 10, NUMERAL_HEIGHT), pygame.SRCALPHA)
        for digit in range(10):
            glyph = _outlined_text(self.font_big, str(digit), TEXT_FILL, TEXT_OUTLINE)
            _blit_centered(s, glyph, (digit * NUMERAL_WIDTH, 0, NUMERAL_WIDTH, NUMERAL_HEIGHT))
        return s

    def _make_ready_sheet(self) -> pygame.Surface:
        s = pygame.Surface((500, 410), pygame.SRCALPHA)
        title = _outlined_text(self.font_big, "Get Ready!", TITLE_FILL, TEXT_OUTLINE, px=5)
        _blit_centered(s, title, READY_TITLE_SRC)

        x, y, w, h = READY_TAP_SRC
        cx = x + w // 2
        # Up arrow with the hint underneath
        arrow = [(cx, y + 20), (cx - 50, y + 90), (cx - 18, y + 90), (cx - 18, y + 150),
                 (cx + 18, y + 150), (cx + 18, y + 90), (cx + 50, y + 90)]
        pygame.draw.polygon(s, TEXT_FILL, arrow)
        pygame.draw.polygon(s, TEXT_OUTLINE, arrow, 4)
        hint = _outlined_text(self.font_mid, "TAP", TEXT_FILL, TEXT_OUTLINE)
        _blit_centered(s, hint, (x, y + 160, w, h - 160))
        return s

    def _make_over_sheet(self) -> pygame.Surface:
        s = pygame.Surface((870, 430), pygame.SRCALPHA)
        title = _outlined_text(self.font_big, "Game Over", TITLE_FILL, TEXT_OUTLINE, px=5)
        _blit_centered(s, title, OVER_TITLE_SRC)

        button = pygame.Rect(OVER_BUTTON_SRC)
        pygame.draw.rect(s, PANEL_FILL, button, border_radius=18)
        inner = button.inflate(-24, -24)
        pygame.draw.rect(s, BUTTON_FILL, inner, border_radius=12)
        pygame.draw.rect(s, TEXT_OUTLINE, button, 4, border_radius=18)
        play = [
            (inner.centerx - 24, inner.centery - 34),
            (inner.centerx - 24, inner.centery + 34),
            (inner.centerx + 36, inner.centery),
        ]
        pygame.draw.polygon(s, TEXT_FILL, play)
        return s
