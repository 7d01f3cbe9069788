# -*- coding: utf-8 -*-
# Copyright (c) 2024-2026 Vasile Lucian Borbeleac / FRAGMERGENT TECHNOLOGY S.R.L.
# Cluj-Napoca, Romania

"""Default parameters and named presets for the edge detector."""

from typing import Dict

DEFAULT_LOW_THRESHOLD = 10
DEFAULT_HIGH_THRESHOLD = 75

DEFAULT_OUTPUT = "canny_edges.bmp"
DEFAULT_GRAY_OUTPUT = "grayscale_image.bmp"

GRAYSCALE_POLICIES = ("luma", "average")
NEIGHBOURHOODS = ("bounded", "flat")
LINKING_MODES = ("single_hop", "connected")


# ---------------------------------------------------------------------------
# Presets
# ---------------------------------------------------------------------------

PRESETS: Dict[str, dict] = {
    "reference": {
        "description": "Classic detector behaviour: flat neighbour scan with row wrap",
        "grayscale": "luma",
        "low": DEFAULT_LOW_THRESHOLD,
        "high": DEFAULT_HIGH_THRESHOLD,
        "neighbourhood": "flat",
        "linking": "single_hop",
    },
    "default": {
        "description": "Single-hop hysteresis over a true 2-D neighbourhood",
        "grayscale": "luma",
        "low": DEFAULT_LOW_THRESHOLD,
        "high": DEFAULT_HIGH_THRESHOLD,
        "neighbourhood": "bounded",
        "linking": "single_hop",
    },
    "connected": {
        "description": "Flood-fill hysteresis: weak chains linked to any strong pixel",
        "grayscale": "luma",
        "low": DEFAULT_LOW_THRESHOLD,
        "high": DEFAULT_HIGH_THRESHOLD,
        "neighbourhood": "bounded",
        "linking": "connected",
    },
}


def validate_thresholds(low: int, high: int) -> None:
    """Reject thresholds that are not ordered 8-bit levels."""
    for name, value in (("low", low), ("high", high)):
        if not 0 <= value <= 255:
            raise ValueError(f"{name} threshold must be in [0, 255], got {value}")
    if low > high:
        raise ValueError(f"low threshold {low} exceeds high threshold {high}")


def resolve_params(preset: str = "default", **overrides) -> dict:
    """Copy a preset and apply the non-None overrides.

    Args:
        preset: Name of an entry in ``PRESETS``.
        **overrides: Parameter values replacing the preset's; ``None`` keeps
            the preset value.

    Returns:
        Validated parameter dict (without the description).
    """
    if preset not in PRESETS:
        raise ValueError(f"unknown preset {preset!r}, choose from {sorted(PRESETS)}")
    params = {k: v for k, v in PRESETS[preset].items() if k != "description"}

    for key, value in overrides.items():
        if key not in params:
            raise ValueError(f"unknown parameter {key!r}")
        if value is not None:
            params[key] = value

    if params["grayscale"] not in GRAYSCALE_POLICIES:
        raise ValueError(f"unknown grayscale policy {params['grayscale']!r}")
    if params["neighbourhood"] not in NEIGHBOURHOODS:
        raise ValueError(f"unknown neighbourhood {params['neighbourhood']!r}")
    if params["linking"] not in LINKING_MODES:
        raise ValueError(f"unknown linking mode {params['linking']!r}")
    params["low"] = int(params["low"])
    params["high"] = int(params["high"])
    validate_thresholds(params["low"], params["high"])
    return params
