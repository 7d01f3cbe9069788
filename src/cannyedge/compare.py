# -*- coding: utf-8 -*-
# Copyright (c) 2024-2026 Vasile Lucian Borbeleac / FRAGMERGENT TECHNOLOGY S.R.L.
# Cluj-Napoca, Romania

"""Image comparison utilities.

``pixel_similarity`` is the strict check: the share of byte samples that
are identical. ``edge_agreement`` is the lenient one for edge grids:
edge pixels are matched through distance transforms, so edges displaced by a
pixel or two still count, e.g. between the single-hop and connected linking
modes or against an external detector.
"""

from typing import NamedTuple, Union

import numpy as np
from scipy.ndimage import distance_transform_edt

from cannyedge.bmpio import PathLike, read_bmp
from cannyedge.errors import ComparisonError
from cannyedge.grid import SampleGrid
from cannyedge.hysteresis import EDGE

GridOrArray = Union[SampleGrid, np.ndarray]


def _as_array(img: GridOrArray) -> np.ndarray:
    return img.data if isinstance(img, SampleGrid) else np.asarray(img)


def pixel_similarity(a: GridOrArray, b: GridOrArray) -> float:
    """Percentage of samples that are equal in ``a`` and ``b``.

    Args:
        a: Grid or array.
        b: Grid or array with the same shape as ``a``.

    Returns:
        Similarity in percent; 100.0 for two empty images.

    Raises:
        ComparisonError: Shapes differ.
    """
    x, y = _as_array(a), _as_array(b)
    if x.shape != y.shape:
        raise ComparisonError(f"images do not match in dimensions: {x.shape} vs {y.shape}")
    if x.size == 0:
        return 100.0
    return float(np.count_nonzero(x == y)) / x.size * 100.0


def compare_bmp(path1: PathLike, path2: PathLike) -> float:
    """Decode two BMP files and return their pixel similarity in percent."""
    return pixel_similarity(read_bmp(path1), read_bmp(path2))


class EdgeAgreement(NamedTuple):
    """Tolerant agreement between two edge grids."""

    precision: float
    recall: float
    f1: float
    matched: int
    spurious: int
    missed: int


def _edge_mask(img: GridOrArray) -> np.ndarray:
    data = _as_array(img)
    if data.ndim == 3:
        return np.all(data == EDGE, axis=2)
    return data == EDGE


def edge_agreement(edges: GridOrArray, expected: GridOrArray,
                   tolerance: int = 1) -> EdgeAgreement:
    """Match the edge pixels of two binary edge grids within ``tolerance``.

    A pixel is an edge when it holds 255 (in every channel, for color
    grids). An edge in ``edges`` is matched when ``expected`` has an edge
    within ``tolerance`` pixels (Euclidean), and an expected edge is missed
    when ``edges`` has none that close. Two edgeless grids agree fully.

    Raises:
        ComparisonError: Shapes differ.
    """
    found = _edge_mask(edges)
    wanted = _edge_mask(expected)
    if found.shape != wanted.shape:
        raise ComparisonError(f"edge grids do not match in dimensions: {found.shape} vs {wanted.shape}")

    n_found = int(found.sum())
    n_wanted = int(wanted.sum())
    if n_found == 0 and n_wanted == 0:
        return EdgeAgreement(1.0, 1.0, 1.0, 0, 0, 0)

    matched, missed = 0, n_wanted
    if n_found and n_wanted:
        near_wanted = distance_transform_edt(~wanted) <= tolerance
        near_found = distance_transform_edt(~found) <= tolerance
        matched = int((found & near_wanted).sum())
        missed = int((wanted & ~near_found).sum())
    spurious = n_found - matched

    precision = matched / n_found if n_found else 0.0
    recall = (n_wanted - missed) / n_wanted if n_wanted else 0.0
    f1 = 2 * precision * recall / (precision + recall) if precision + recall else 0.0
    return EdgeAgreement(precision, recall, f1, matched, spurious, missed)
