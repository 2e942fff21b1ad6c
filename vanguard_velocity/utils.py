"""Geometry and color utility functions used across the game."""

from __future__ import annotations

import math

import numpy as np

Color = tuple[int, int, int]
# (x, y, width, height) with y growing downwards
Rect = tuple[float, float, float, float]


def clamp(value: float, lo: float, hi: float) -> float:
    """Clamp a numeric value into the inclusive range [lo, hi]."""
    return max(lo, min(hi, value))


def interpolate_color(c1: Color, c2: Color, phase: float) -> Color:
    """Blend c1 towards c2; phase 0 gives c1, phase 1 gives c2."""
    t = clamp(phase, 0.0, 1.0)
    return (
        int(round(c1[0] + (c2[0] - c1[0]) * t)),
        int(round(c1[1] + (c2[1] - c1[1]) * t)),
        int(round(c1[2] + (c2[2] - c1[2]) * t)),
    )


def scale_color(color: Color, factor: float) -> Color:
    """Scale an RGB color by factor, clamped to [0,255]."""
    r, g, b = color
    return (
        int(clamp(r * factor, 0, 255)),
        int(clamp(g * factor, 0, 255)),
        int(clamp(b * factor, 0, 255)),
    )


def vertical_gradient(top: Color, bottom: Color, width: int, height: int) -> np.ndarray:
    """Build a (width, height, 3) uint8 array fading top -> bottom.

    The axis order matches ``pygame.surfarray.make_surface``.
    """
    t = np.linspace(0.0, 1.0, max(1, height), dtype=np.float32)[:, None]
    a = np.asarray(top, dtype=np.float32)[None, :]
    b = np.asarray(bottom, dtype=np.float32)[None, :]
    column = np.clip(np.rint(a + (b - a) * t), 0, 255).astype(np.uint8)
    return np.broadcast_to(column[None, :, :], (max(1, width), max(1, height), 3)).copy()


def rects_overlap(a: Rect, b: Rect) -> bool:
    """Strict AABB overlap; rectangles that only touch do not overlap."""
    ax, ay, aw, ah = a
    bx, by, bw, bh = b
    return ax < bx + bw and ax + aw > bx and ay < by + bh and ay + ah > by


def distance_point_to_rect(px: float, py: float, rect: Rect) -> float:
    """Shortest distance from (px,py) to the rectangle; 0 when inside."""
    x, y, w, h = rect
    cx = clamp(px, x, x + w)
    cy = clamp(py, y, y + h)
    return math.hypot(px - cx, py - cy)
