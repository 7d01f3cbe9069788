# -*- coding: utf-8 -*-
# Copyright (c) 2024-2026 Vasile Lucian Borbeleac / FRAGMERGENT TECHNOLOGY S.R.L.
# Cluj-Napoca, Romania

"""Synthetic test images for the edge detector.

Every generator is deterministic and returns an R, G, B color grid, so the
images can go straight into the pipeline or the BMP encoder.
"""

import numpy as np

from cannyedge.grid import SampleGrid, SampleKind

BACKGROUND = 0
FOREGROUND = 255


# ============================================================
# PRIMITIVES
# ============================================================

def _make_canvas(width: int, height: int, val: int = BACKGROUND) -> np.ndarray:
    """Create a single-channel canvas."""
    return np.full((height, width), val, dtype=np.uint8)


def _add_circle(img: np.ndarray, cx: int, cy: int, r: int,
                val: int = FOREGROUND) -> None:
    """Draw a filled circle."""
    yy, xx = np.indices(img.shape)
    img[(xx - cx) ** 2 + (yy - cy) ** 2 <= r * r] = val


def _add_rect(img: np.ndarray, x0: int, y0: int, x1: int, y1: int,
              val: int = FOREGROUND) -> None:
    """Draw a filled rectangle."""
    img[y0:y1, x0:x1] = val


def _add_triangle(img: np.ndarray, pts: list, val: int = FOREGROUND) -> None:
    """Draw a filled triangle using barycentric coordinates."""
    yy, xx = np.indices(img.shape)
    x0, y0 = pts[0]
    x1, y1 = pts[1]
    x2, y2 = pts[2]
    den = (y1 - y2) * (x0 - x2) + (x2 - x1) * (y0 - y2) + 1e-12
    a = ((y1 - y2) * (xx - x2) + (x2 - x1) * (yy - y2)) / den
    b = ((y2 - y0) * (xx - x2) + (x0 - x2) * (yy - y2)) / den
    c = 1 - a - b
    img[(a >= 0) & (b >= 0) & (c >= 0)] = val


def _to_color(img: np.ndarray) -> SampleGrid:
    return SampleGrid(np.repeat(img[..., None], 3, axis=2), SampleKind.COLOR)


# ============================================================
# SHAPE GENERATORS
# ============================================================

def make_uniform(width: int = 32, height: int = 32, rgb=(128, 128, 128)) -> SampleGrid:
    """Uniform color: no edges anywhere."""
    img = np.empty((height, width, 3), dtype=np.uint8)
    img[...] = np.asarray(rgb, dtype=np.uint8)
    return SampleGrid(img, SampleKind.COLOR)


def make_step(width: int = 32, height: int = 32, col: int = None) -> SampleGrid:
    """Vertical step: dark left half, bright right half."""
    img = _make_canvas(width, height)
    _add_rect(img, width // 2 if col is None else col, 0, width, height)
    return _to_color(img)


def make_vertical_bar(width: int = 32, height: int = 32, x0: int = 12, x1: int = 20) -> SampleGrid:
    """Bright vertical bar on a dark background: two parallel edges."""
    img = _make_canvas(width, height)
    _add_rect(img, x0, 0, x1, height)
    return _to_color(img)


def make_circle_square(s: int = 64) -> SampleGrid:
    """Circle + square: curved and straight edges."""
    img = _make_canvas(s, s)
    _add_rect(img, s // 8, s // 8, s // 2 - s // 16, s // 2 - s // 16)
    _add_circle(img, s * 5 // 8, s * 9 // 16, s // 4)
    return _to_color(img)


def make_triangle(s: int = 64) -> SampleGrid:
    """Triangle: angled edges with varying orientation."""
    img = _make_canvas(s, s)
    _add_triangle(img, [(s // 2, s // 6), (s // 6, s * 5 // 6), (s * 5 // 6, s * 5 // 6)])
    return _to_color(img)


# ============================================================
# REGISTRY
# ============================================================

SHAPES: dict = {
    "uniform": make_uniform,
    "step": make_step,
    "vertical_bar": make_vertical_bar,
    "circle_square": make_circle_square,
    "triangle": make_triangle,
}
