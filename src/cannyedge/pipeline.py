# -*- coding: utf-8 -*-
# Copyright (c) 2024-2026 Vasile Lucian Borbeleac / FRAGMERGENT TECHNOLOGY S.R.L.
# Cluj-Napoca, Romania

"""CannyEdge processing pipeline.

Sequences grayscale reduction, Gaussian smoothing, Sobel gradients,
non-maximum suppression and hysteresis over one in-memory image.
"""

import time
from typing import Dict, NamedTuple, Optional

from cannyedge.config import resolve_params
from cannyedge.gradient import magnitude_direction, sobel_gradients
from cannyedge.grayscale import to_color, to_grayscale
from cannyedge.grid import SampleGrid, SampleKind
from cannyedge.hysteresis import hysteresis
from cannyedge.log import setup_logger
from cannyedge.smoothing import gaussian_smooth
from cannyedge.suppression import non_maximum_suppression

logger = setup_logger("cannyedge.pipeline")

#: Stage grids in production order, as stored in ``CannyResult.stages``
STAGE_NAMES = ("gray", "blurred", "gx", "gy", "magnitude", "direction", "suppressed", "edges")


class CannyResult(NamedTuple):
    """Output of one pipeline run."""

    edges: SampleGrid
    params: dict
    timings_ms: Dict[str, float]
    stages: Optional[Dict[str, SampleGrid]] = None

    def to_color(self) -> SampleGrid:
        """Edge grid replicated into R, G, B for the bitmap encoder."""
        return to_color(self.edges)

    @property
    def edge_count(self) -> int:
        return int((self.edges.data > 0).sum())


class CannyPipeline:
    """Five-stage Canny edge detector with preset-driven parameters."""

    def __init__(self, preset: str = "default", **overrides):
        self.preset = preset
        self.params: dict = {}
        self.set_preset(preset, **overrides)

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    def set_preset(self, preset: str, **overrides):
        self.params = resolve_params(preset, **overrides)
        self.preset = preset

    def update_params(self, **kwargs):
        merged = {k: v for k, v in self.params.items()}
        merged.update({k: v for k, v in kwargs.items() if v is not None})
        self.params = resolve_params(self.preset, **merged)

    # ------------------------------------------------------------------
    # Main processing entry point
    # ------------------------------------------------------------------

    def run(self, color: SampleGrid, keep_stages: bool = False) -> CannyResult:
        """Run every stage over ``color`` and return the binary edge grid.

        Args:
            color: Decoded color image (R, G, B).
            keep_stages: If True, keep every intermediate grid in the result;
                otherwise each grid is released once the next stage has
                consumed it.

        Returns:
            ``CannyResult`` whose ``edges`` grid holds only 0 and 255.
        """
        if color.kind is not SampleKind.COLOR:
            raise ValueError(f"pipeline input must be a color grid, got {color.kind.value}")
        if color.width == 0 or color.height == 0:
            raise ValueError(f"cannot detect edges in an empty {color.width}x{color.height} image")

        p = self.params
        logger.info(f"{color.width}x{color.height} image, preset={self.preset} "
                    f"grayscale={p['grayscale']} low={p['low']} high={p['high']} "
                    f"neighbourhood={p['neighbourhood']} linking={p['linking']}")

        timings: Dict[str, float] = {}

        def timed(name, fn, *args, **kwargs):
            t0 = time.perf_counter()
            out = fn(*args, **kwargs)
            timings[name] = (time.perf_counter() - t0) * 1000.0
            logger.debug(f"{name}: {timings[name]:.2f} ms")
            return out

        gray = timed("grayscale", to_grayscale, color, policy=p["grayscale"])
        blurred = timed("smooth", gaussian_smooth, gray)
        gx, gy = timed("sobel", sobel_gradients, blurred)
        magnitude, direction = timed("magnitude", magnitude_direction, gx, gy)
        suppressed = timed("suppress", non_maximum_suppression, magnitude, direction)
        edges = timed("hysteresis", hysteresis, suppressed,
                      low=p["low"], high=p["high"],
                      neighbourhood=p["neighbourhood"], linking=p["linking"])

        stages = None
        if keep_stages:
            stages = dict(zip(STAGE_NAMES, (gray, blurred, gx, gy, magnitude,
                                            direction, suppressed, edges)))

        result = CannyResult(edges=edges, params=dict(p), timings_ms=timings, stages=stages)
        logger.debug(f"{result.edge_count} edge pixels in {sum(timings.values()):.2f} ms")
        return result


def detect_edges(color: SampleGrid, preset: str = "default", **overrides) -> SampleGrid:
    """One-shot helper: binary edge grid of ``color``."""
    return CannyPipeline(preset, **overrides).run(color).edges
