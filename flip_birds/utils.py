"""Geometry and color utility functions used across the game."""

from __future__ import annotations

import math

import numpy as np


def clamp(value: float, lo: float, hi: float) -> float:
    """Clamp a numeric value into the inclusive range [lo, hi]."""
    return max(lo, min(hi, value))


def approach(value: float, target: float, step: float) -> float:
    """Move value toward target by at most step."""
    if value < target:
        return min(target, value + step)
    return max(target, value - step)


def point_in_circle(px: float, py: float, cx: float, cy: float, r: float) -> bool:
    """Return True if point (px,py) lies inside or on the circle."""
    return math.hypot(px - cx, py - cy) <= r


def spans_overlap(a1: float, a2: float, b1: float, b2: float) -> bool:
    """Strict overlap of the open intervals (a1,a2) and (b1,b2)."""
    return not (a2 <= b1 or a1 >= b2)


def scale_color(color: tuple[int, int, int], factor: float) -> tuple[int, int, int]:
    """Scale an RGB color by factor, clamped to [0,255]."""
    r, g, b = color
    return (
        int(clamp(r * factor, 0, 255)),
        int(clamp(g * factor, 0, 255)),
        int(clamp(b * factor, 0, 255)),
    )


def vertical_gradient(
    w: int, h: int, top: tuple[int, int, int], bottom: tuple[int, int, int]
) -> np.ndarray:
    """Build a (w, h, 3) uint8 array blending top into bottom, ready for surfarray.

    Args:
        w, h: Dimensions.
        top, bottom: RGB endpoints.
    """
    t = np.linspace(0.0, 1.0, h, dtype=np.float32)[None, :, None]
    a = np.asarray(top, dtype=np.float32)[None, None, :]
    b = np.asarray(bottom, dtype=np.float32)[None, None, :]
    column = a * (1.0 - t) + b * t
    return np.clip(np.repeat(column, w, axis=0), 0, 255).astype(np.uint8)
