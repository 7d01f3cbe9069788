# -*- coding: utf-8 -*-
# Copyright (c) 2024-2026 Vasile Lucian Borbeleac / FRAGMERGENT TECHNOLOGY S.R.L.
# Cluj-Napoca, Romania

"""CannyEdge: five-stage Canny edge detection for still bitmap images.

Grayscale reduction, 5x5 Gaussian smoothing, Sobel gradients, non-maximum
suppression and double-threshold hysteresis, expressed as pure functions
over immutable sample grids.
"""

from cannyedge.grid import SampleGrid, SampleKind
from cannyedge.grayscale import to_grayscale, to_color
from cannyedge.smoothing import gaussian_smooth
from cannyedge.gradient import sobel_gradients, magnitude_direction, compute_gradients
from cannyedge.suppression import non_maximum_suppression
from cannyedge.hysteresis import hysteresis
from cannyedge.pipeline import CannyPipeline, CannyResult, detect_edges
from cannyedge.errors import CannyEdgeError, DecodeError, EncodeError, ComparisonError

__version__ = "0.1.0"
__author__ = "Vasile Lucian Borbeleac"
__copyright__ = "© 2024-2026 FRAGMERGENT TECHNOLOGY S.R.L."

__all__ = [
    "SampleGrid",
    "SampleKind",
    "to_grayscale",
    "to_color",
    "gaussian_smooth",
    "sobel_gradients",
    "magnitude_direction",
    "compute_gradients",
    "non_maximum_suppression",
    "hysteresis",
    "CannyPipeline",
    "CannyResult",
    "detect_edges",
    "CannyEdgeError",
    "DecodeError",
    "EncodeError",
    "ComparisonError",
]
