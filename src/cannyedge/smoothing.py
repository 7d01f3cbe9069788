# -*- coding: utf-8 -*-
# Copyright (c) 2024-2026 Vasile Lucian Borbeleac / FRAGMERGENT TECHNOLOGY S.R.L.
# Cluj-Napoca, Romania

"""Fixed 5x5 Gaussian low-pass filter.

The kernel is the classic integer approximation of a sigma ~1.4 Gaussian.
Its weights add up to 159, but the weighted sum is divided by 273, so the
filter darkens: a flat region of value k comes out as
``floor(159 * k / 273)``. Only pixels with a complete 5x5 neighbourhood are
filtered; the 2-pixel border band is left at zero rather than extended.
"""

import numpy as np
from scipy.ndimage import correlate

from cannyedge.grid import SampleGrid, SampleKind

GAUSSIAN_KERNEL = np.array([
    [2, 4, 5, 4, 2],
    [4, 9, 12, 9, 4],
    [5, 12, 15, 12, 5],
    [4, 9, 12, 9, 4],
    [2, 4, 5, 4, 2],
], dtype=np.int32)
GAUSSIAN_KERNEL.flags.writeable = False

GAUSSIAN_NORM = 273
GAUSSIAN_RADIUS = GAUSSIAN_KERNEL.shape[0] // 2


def gaussian_smooth(gray: SampleGrid) -> SampleGrid:
    """Blur an intensity grid with the 5x5 Gaussian kernel.

    Interior pixels receive ``floor(sum(w * p) / 273)``; the weighted sum is
    accumulated in integers, so a uniform neighbourhood of value k yields
    ``159 * k // 273`` with no rounding error.

    Args:
        gray: Intensity grid.

    Returns:
        Smoothed intensity grid; rows/cols within 2 of any edge are 0.
    """
    assert gray.kind is SampleKind.INTENSITY, f"expected intensity grid, got {gray.kind.value}"
    h, w = gray.shape
    r = GAUSSIAN_RADIUS
    out = np.zeros((h, w), dtype=np.uint8)

    if h > 2 * r and w > 2 * r:
        acc = correlate(gray.data.astype(np.int32), GAUSSIAN_KERNEL, mode="constant", cval=0)
        out[r:h - r, r:w - r] = acc[r:h - r, r:w - r] // GAUSSIAN_NORM

    return SampleGrid(out, SampleKind.INTENSITY)
