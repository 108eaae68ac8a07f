"""Geometry and color utility functions used across the game."""

from __future__ import annotations

from typing import Sequence

import numpy as np


def clamp(value: float, lo: float, hi: float) -> float:
    """Clamp a numeric value into the inclusive range [lo, hi]."""
    return max(lo, min(hi, value))


def rects_overlap(
    a: Sequence[float],
    b: Sequence[float],
) -> bool:
    """True if axis-aligned boxes a and b, given as (x, y, w, h), share interior area.

    Boxes that only touch along an edge do not overlap.
    """
    ax, ay, aw, ah = a
    bx, by, bw, bh = b
    return ax < bx + bw and bx < ax + aw and ay < by + bh and by < ay + ah


def point_in_rect(px: float, py: float, rect: Sequence[float]) -> bool:
    """True if (px,py) lies inside rect (x, y, w, h), edges included."""
    x, y, w, h = rect
    return x <= px <= x + w and y <= py <= y + h


def scale_color(color: tuple[int, int, int], factor: float) -> tuple[int, int, int]:
    """Scale an RGB color by factor, clamped to [0,255]."""
    r, g, b = color
    return (
        int(clamp(r * factor, 0, 255)),
        int(clamp(g * factor, 0, 255)),
        int(clamp(b * factor, 0, 255)),
    )


def vertical_gradient(
    w: int,
    h: int,
    top: tuple[int, int, int],
    bottom: tuple[int, int, int],
) -> np.ndarray:
    """Build a top-to-bottom RGB gradient as a (w, h, 3) array for surfarray.

    Args:
        w, h: Dimensions.
        top, bottom: End colors.

    Returns:
        uint8 array indexed [x, y, channel].
    """
    t = np.linspace(0.0, 1.0, h, dtype=np.float32)[None, :, None]
    top_c = np.asarray(top, dtype=np.float32)[None, None, :]
    bottom_c = np.asarray(bottom, dtype=np.float32)[None, None, :]
    column = top_c * (1.0 - t) + bottom_c * t
    arr = np.broadcast_to(column, (w, h, 3))
    return np.clip(arr, 0, 255).astype(np.uint8)


def diagonal_stripes(
    w: int,
    h: int,
    period: int,
    light: tuple[int, int, int],
    dark: tuple[int, int, int],
) -> np.ndarray:
    """Diagonal two-tone stripe texture as a (w, h, 3) array for surfarray."""
    x = np.arange(w, dtype=np.int32)[:, None]
    y = np.arange(h, dtype=np.int32)[None, :]
    mask = ((x + y) // max(1, period // 2)) % 2 == 0
    out = np.empty((w, h, 3), dtype=np.uint8)
    out[mask] = light
    out[~mask] = dark
    return out
