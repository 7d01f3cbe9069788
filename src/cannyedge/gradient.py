# -*- coding: utf-8 -*-
# Copyright (c) 2024-2026 Vasile Lucian Borbeleac / FRAGMERGENT TECHNOLOGY S.R.L.
# Cluj-Napoca, Romania

"""Sobel gradient estimation.

Computes horizontal and vertical derivative estimates with the 3x3 Sobel
pair, then per-pixel gradient magnitude and an edge-orientation angle
folded into the half circle [0, 180).
"""

from typing import NamedTuple

import numpy as np
from scipy.ndimage import correlate

from cannyedge.grid import SampleGrid, SampleKind

SOBEL_X = np.array([
    [-1, 0, 1],
    [-2, 0, 2],
    [-1, 0, 1],
], dtype=np.int32)

SOBEL_Y = np.array([
    [-1, -2, -1],
    [0, 0, 0],
    [1, 2, 1],
], dtype=np.int32)

SOBEL_X.flags.writeable = False
SOBEL_Y.flags.writeable = False


class Gradients(NamedTuple):
    gx: SampleGrid
    gy: SampleGrid
    magnitude: SampleGrid
    direction: SampleGrid


def sobel_gradients(smoothed: SampleGrid):
    """Correlate the smoothed grid with the Sobel kernels.

    Args:
        smoothed: Intensity grid (output of the Gaussian stage).

    Returns:
        Tuple ``(gx, gy)`` of gradient grids; the outermost row and column
        on every side stay 0.
    """
    assert smoothed.kind is SampleKind.INTENSITY, f"expected intensity grid, got {smoothed.kind.value}"
    h, w = smoothed.shape
    gx = np.zeros((h, w), dtype=np.int32)
    gy = np.zeros((h, w), dtype=np.int32)

    if h > 2 and w > 2:
        src = smoothed.data.astype(np.int32)
        gx[1:-1, 1:-1] = correlate(src, SOBEL_X, mode="constant")[1:-1, 1:-1]
        gy[1:-1, 1:-1] = correlate(src, SOBEL_Y, mode="constant")[1:-1, 1:-1]

    return SampleGrid(gx, SampleKind.GRADIENT), SampleGrid(gy, SampleKind.GRADIENT)


def magnitude_direction(gx: SampleGrid, gy: SampleGrid):
    """Gradient magnitude and orientation from the two derivative grids.

    Magnitude is ``sqrt(gx^2 + gy^2)`` and is not clamped. Direction is
    ``atan2(gy, gx)`` in degrees with negative angles shifted by 180; the
    single value that lands on exactly 180 is folded back to 0, so every
    direction lies in [0, 180). ``atan2(0, 0)`` is 0.

    Returns:
        Tuple ``(magnitude, direction)`` of float grids.
    """
    assert gx.kind is SampleKind.GRADIENT and gy.kind is SampleKind.GRADIENT
    assert gx.same_shape(gy), f"gx {gx.shape} and gy {gy.shape} differ"

    fx = gx.data.astype(np.float64)
    fy = gy.data.astype(np.float64)

    magnitude = np.sqrt(fx * fx + fy * fy).astype(np.float32)

    direction = np.degrees(np.arctan2(fy, fx)).astype(np.float32)
    direction[direction < 0] += np.float32(180.0)
    direction[direction >= 180.0] -= np.float32(180.0)

    return SampleGrid(magnitude, SampleKind.FLOAT), SampleGrid(direction, SampleKind.FLOAT)


def compute_gradients(smoothed: SampleGrid) -> Gradients:
    """Run both gradient steps and return all four grids."""
    gx, gy = sobel_gradients(smoothed)
    magnitude, direction = magnitude_direction(gx, gy)
    return Gradients(gx, gy, magnitude, direction)
