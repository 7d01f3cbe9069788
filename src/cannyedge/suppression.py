# -*- coding: utf-8 -*-
# Copyright (c) 2024-2026 Vasile Lucian Borbeleac / FRAGMERGENT TECHNOLOGY S.R.L.
# Cluj-Napoca, Romania

"""Non-maximum suppression of the gradient magnitude.

Thins gradient ridges to one pixel by keeping a pixel only when its
magnitude is at least that of both grid neighbours along the gradient
direction. The direction is quantised into four 45-degree sectors and the
two nearest neighbours of that sector are sampled directly (no sub-pixel
interpolation along the true angle).
"""

import numpy as np

from cannyedge.grid import SampleGrid, SampleKind

#: Sector boundaries in degrees; 0/180 horizontal, 45, 90 vertical, 135
SECTOR_EDGES = (22.5, 67.5, 112.5, 157.5)


def _neighbour_views(mag: np.ndarray):
    """Interior-aligned views of the four neighbour pairs.

    Returns a list ``[(a, b), ...]`` ordered as the sectors 0, 45, 90, 135.
    Each view has shape ``(h - 2, w - 2)`` and lines up with
    ``mag[1:-1, 1:-1]``.
    """
    return [
        (mag[1:-1, 2:], mag[1:-1, :-2]),   # 0: right, left
        (mag[2:, 2:], mag[:-2, :-2]),      # 45: below-right, above-left
        (mag[2:, 1:-1], mag[:-2, 1:-1]),   # 90: below, above
        (mag[:-2, 2:], mag[2:, :-2]),      # 135: above-right, below-left
    ]


def non_maximum_suppression(magnitude: SampleGrid, direction: SampleGrid) -> SampleGrid:
    """Zero every pixel that is not a local maximum across its edge.

    Args:
        magnitude: Gradient magnitude grid.
        direction: Gradient direction grid in degrees, [0, 180).

    Returns:
        Intensity grid holding the truncated magnitude of surviving interior
        pixels (saturated at 255) and 0 elsewhere, border included.
    """
    assert magnitude.kind is SampleKind.FLOAT and direction.kind is SampleKind.FLOAT
    assert magnitude.same_shape(direction), (
        f"magnitude {magnitude.shape} and direction {direction.shape} differ")

    h, w = magnitude.shape
    out = np.zeros((h, w), dtype=np.uint8)
    if h < 3 or w < 3:
        return SampleGrid(out, SampleKind.INTENSITY)

    mag = magnitude.data
    centre = mag[1:-1, 1:-1]
    angle = direction.data[1:-1, 1:-1]

    e1, e2, e3, e4 = SECTOR_EDGES
    sectors = [
        (angle < e1) | (angle >= e4),
        (angle >= e1) & (angle < e2),
        (angle >= e2) & (angle < e3),
        (angle >= e3) & (angle < e4),
    ]
    pairs = _neighbour_views(mag)

    q = np.select(sectors, [a for a, _ in pairs], default=255.0)
    r = np.select(sectors, [b for _, b in pairs], default=255.0)

    keep = (centre >= q) & (centre >= r)
    out[1:-1, 1:-1] = np.where(keep, np.minimum(centre, 255.0), 0.0).astype(np.uint8)

    return SampleGrid(out, SampleKind.INTENSITY)
