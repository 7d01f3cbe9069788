# -*- coding: utf-8 -*-
# Copyright (c) 2024-2026 Vasile Lucian Borbeleac / FRAGMERGENT TECHNOLOGY S.R.L.
# Cluj-Napoca, Romania

"""Double-threshold classification and hysteresis edge linking.

Suppressed magnitudes at or above ``high`` are strong edges, those below
``low`` are discarded, and the weak values in between are promoted only
when linked to a strong pixel.

Two linking rules are available:

* ``single_hop`` looks exactly one pixel away from each weak pixel, in the
  thresholded input. A weak pixel next to another *promoted* weak pixel is
  not promoted. This is the behaviour of the classic reference detector.
* ``connected`` keeps every weak pixel whose 8-connected weak/strong
  component contains a strong pixel (full flood-fill hysteresis).

For ``single_hop`` the neighbourhood is either the true 2-D 8-neighbourhood
(``bounded``) or the reference's ``flat`` scan, which steps through
row-major indices with only a ``[0, w*h)`` range check and therefore wraps
from the first/last column into the previous/next row.
"""

import numpy as np
from scipy.ndimage import binary_dilation

from cannyedge.config import (DEFAULT_HIGH_THRESHOLD, DEFAULT_LOW_THRESHOLD,
                              LINKING_MODES, NEIGHBOURHOODS, validate_thresholds)
from cannyedge.grid import SampleGrid, SampleKind

EDGE = 255

_EIGHT_CONNECTED = np.ones((3, 3), dtype=bool)


def _near_strong_bounded(strong: np.ndarray) -> np.ndarray:
    """Pixels with a strong pixel in their 2-D 3x3 neighbourhood."""
    return binary_dilation(strong, structure=_EIGHT_CONNECTED)


def _near_strong_flat(strong: np.ndarray) -> np.ndarray:
    """Pixels with a strong pixel at a flattened offset ``ky*w + kx``.

    Offsets are only range-checked against the flattened buffer, so the
    left and right neighbours of an edge column come from the adjacent row.
    """
    h, w = strong.shape
    n = h * w
    pad = w + 1
    padded = np.zeros(n + 2 * pad, dtype=bool)
    padded[pad:pad + n] = strong.ravel()

    near = np.zeros(n, dtype=bool)
    for ky in (-1, 0, 1):
        for kx in (-1, 0, 1):
            start = pad + ky * w + kx
            near |= padded[start:start + n]
    return near.reshape(h, w)


def _connected_to_strong(strong: np.ndarray, candidate: np.ndarray) -> np.ndarray:
    """Candidate pixels in an 8-connected component holding a strong pixel."""
    return binary_dilation(strong, structure=_EIGHT_CONNECTED, iterations=-1, mask=candidate)


def hysteresis(suppressed: SampleGrid,
               low: int = DEFAULT_LOW_THRESHOLD,
               high: int = DEFAULT_HIGH_THRESHOLD,
               neighbourhood: str = "bounded",
               linking: str = "single_hop") -> SampleGrid:
    """Turn a suppressed-magnitude grid into a binary edge grid.

    Args:
        suppressed: Intensity grid from non-maximum suppression.
        low: Weak-edge threshold (inclusive).
        high: Strong-edge threshold (inclusive); ``low <= high``.
        neighbourhood: ``"bounded"`` or ``"flat"``; used by ``single_hop``.
        linking: ``"single_hop"`` or ``"connected"``.

    Returns:
        Intensity grid with values in {0, 255}.
    """
    assert suppressed.kind is SampleKind.INTENSITY, (
        f"expected intensity grid, got {suppressed.kind.value}")
    validate_thresholds(low, high)
    if neighbourhood not in NEIGHBOURHOODS:
        raise ValueError(f"unknown neighbourhood {neighbourhood!r}, choose from {NEIGHBOURHOODS}")
    if linking not in LINKING_MODES:
        raise ValueError(f"unknown linking mode {linking!r}, choose from {LINKING_MODES}")

    src = suppressed.data
    out = np.zeros(src.shape, dtype=np.uint8)
    if src.size == 0:
        return SampleGrid(out, SampleKind.INTENSITY)

    strong = src >= high
    weak = (src >= low) & ~strong

    if linking == "connected":
        keep = _connected_to_strong(strong, strong | weak)
    elif neighbourhood == "flat":
        keep = strong | (weak & _near_strong_flat(strong))
    else:
        keep = strong | (weak & _near_strong_bounded(strong))

    out[keep] = EDGE
    return SampleGrid(out, SampleKind.INTENSITY)
