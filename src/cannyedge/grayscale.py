# -*- coding: utf-8 -*-
# Copyright (c) 2024-2026 Vasile Lucian Borbeleac / FRAGMERGENT TECHNOLOGY S.R.L.
# Cluj-Napoca, Romania

"""Grayscale reduction of R, G, B grids and the inverse channel replication."""

import numpy as np

from cannyedge.config import GRAYSCALE_POLICIES
from cannyedge.grid import SampleGrid, SampleKind

#: Luma weights 0.299 / 0.587 / 0.114 scaled to integers over 1000
LUMA_WEIGHTS = (299, 587, 114)
LUMA_SCALE = 1000


def to_grayscale(color: SampleGrid, policy: str = "luma") -> SampleGrid:
    """Collapse a color grid into an intensity grid.

    Args:
        color: Color grid in R, G, B channel order.
        policy: ``"luma"`` for ``floor(0.299 R + 0.587 G + 0.114 B)`` or
            ``"average"`` for ``floor((R + G + B) / 3)``.

    Returns:
        Intensity grid of the same width and height.
    """
    assert color.kind is SampleKind.COLOR, f"expected color grid, got {color.kind.value}"
    if policy not in GRAYSCALE_POLICIES:
        raise ValueError(f"unknown grayscale policy {policy!r}, choose from {GRAYSCALE_POLICIES}")

    rgb = color.data.astype(np.int32)
    r, g, b = rgb[..., 0], rgb[..., 1], rgb[..., 2]

    if policy == "luma":
        wr, wg, wb = LUMA_WEIGHTS
        gray = (wr * r + wg * g + wb * b) // LUMA_SCALE
    else:
        gray = (r + g + b) // 3

    return SampleGrid(gray.astype(np.uint8), SampleKind.INTENSITY)


def to_color(gray: SampleGrid) -> SampleGrid:
    """Replicate a single-channel intensity grid into all three channels."""
    assert gray.kind is SampleKind.INTENSITY, f"expected intensity grid, got {gray.kind.value}"
    return SampleGrid(np.repeat(gray.data[..., None], 3, axis=2), SampleKind.COLOR)
