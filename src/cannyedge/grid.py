# -*- coding: utf-8 -*-
# Copyright (c) 2024-2026 Vasile Lucian Borbeleac / FRAGMERGENT TECHNOLOGY S.R.L.
# Cluj-Napoca, Romania

"""Dense 2-D sample grids shared by every stage of the CannyEdge pipeline.

A grid wraps a C-contiguous numpy array in row-major order. Stages allocate
a fresh grid for their output and the wrapped array is frozen on
construction, so a grid handed to the next stage can no longer change.
"""

import enum
from typing import Tuple

import numpy as np


class SampleKind(enum.Enum):
    """Element type of a grid."""

    INTENSITY = "intensity"  # uint8, gray / blurred / suppressed / edges
    GRADIENT = "gradient"    # int32, Sobel responses
    FLOAT = "float"          # float32, magnitude and direction
    COLOR = "color"          # uint8 x 3, R, G, B


_DTYPES = {
    SampleKind.INTENSITY: np.dtype(np.uint8),
    SampleKind.GRADIENT: np.dtype(np.int32),
    SampleKind.FLOAT: np.dtype(np.float32),
    SampleKind.COLOR: np.dtype(np.uint8),
}

_CHANNELS = {
    SampleKind.INTENSITY: 1,
    SampleKind.GRADIENT: 1,
    SampleKind.FLOAT: 1,
    SampleKind.COLOR: 3,
}


def _expected_shape(width: int, height: int, kind: SampleKind) -> Tuple[int, ...]:
    if _CHANNELS[kind] == 1:
        return (height, width)
    return (height, width, _CHANNELS[kind])


class SampleGrid:
    """Immutable row-major grid of ``width * height`` samples.

    Args:
        data: Array of shape ``(height, width)`` (``(height, width, 3)`` for
            color) whose dtype matches ``kind``. The grid takes ownership
            and marks the array read-only.
        kind: Sample kind of the grid.
    """

    __slots__ = ("_data", "_kind")

    def __init__(self, data: np.ndarray, kind: SampleKind):
        if not isinstance(data, np.ndarray):
            raise TypeError(f"expected numpy array, got {type(data).__name__}")
        if data.dtype != _DTYPES[kind]:
            raise TypeError(f"{kind.value} grid needs dtype {_DTYPES[kind]}, got {data.dtype}")
        expected_ndim = 2 if _CHANNELS[kind] == 1 else 3
        if data.ndim != expected_ndim or (expected_ndim == 3 and data.shape[2] != _CHANNELS[kind]):
            raise ValueError(f"{kind.value} grid cannot hold array of shape {data.shape}")

        data = np.ascontiguousarray(data)
        data.flags.writeable = False
        self._data = data
        self._kind = kind

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def zeros(cls, width: int, height: int, kind: SampleKind) -> "SampleGrid":
        """Create a zero-filled grid."""
        if width < 0 or height < 0:
            raise ValueError(f"grid dimensions must be >= 0, got {width}x{height}")
        return cls(np.zeros(_expected_shape(width, height, kind), dtype=_DTYPES[kind]), kind)

    @classmethod
    def from_array(cls, array, kind: SampleKind) -> "SampleGrid":
        """Copy ``array`` into a new grid, converting to the kind's dtype.

        Integer kinds reject values that do not fit the target dtype instead
        of letting numpy wrap them around.
        """
        src = np.asarray(array)
        dtype = _DTYPES[kind]
        if dtype.kind in "iu" and src.size and src.dtype.kind in "iuf":
            info = np.iinfo(dtype)
            if src.min() < info.min or src.max() > info.max:
                raise ValueError(f"values outside [{info.min}, {info.max}] for {kind.value} grid")
        return cls(np.array(src, dtype=dtype, order="C", copy=True), kind)

    # ------------------------------------------------------------------
    # Attributes
    # ------------------------------------------------------------------

    @property
    def data(self) -> np.ndarray:
        """Read-only view of the samples, shape ``(height, width[, 3])``."""
        return self._data

    @property
    def kind(self) -> SampleKind:
        return self._kind

    @property
    def dtype(self) -> np.dtype:
        return self._data.dtype

    @property
    def width(self) -> int:
        return self._data.shape[1]

    @property
    def height(self) -> int:
        return self._data.shape[0]

    @property
    def channels(self) -> int:
        return _CHANNELS[self._kind]

    @property
    def shape(self) -> Tuple[int, int]:
        """``(height, width)``, the spatial shape shared by all stages."""
        return (self.height, self.width)

    @property
    def size(self) -> int:
        """Number of pixels (``width * height``)."""
        return self.width * self.height

    # ------------------------------------------------------------------
    # Addressing
    # ------------------------------------------------------------------

    def index(self, row: int, col: int) -> int:
        """Flattened row-major index of ``(row, col)``."""
        if not (0 <= row < self.height and 0 <= col < self.width):
            raise IndexError(f"({row}, {col}) outside {self.width}x{self.height} grid")
        return row * self.width + col

    def get(self, row: int, col: int):
        """Sample at ``(row, col)``; a length-3 array for color grids."""
        self.index(row, col)
        return self._data[row, col]

    def flat(self) -> np.ndarray:
        """Read-only row-major 1-D view of the pixels."""
        return self._data.reshape(self.size, -1) if self.channels > 1 else self._data.reshape(-1)

    def same_shape(self, other: "SampleGrid") -> bool:
        return self.shape == other.shape

    def __repr__(self) -> str:
        return f"SampleGrid({self._kind.value}, {self.width}x{self.height})"
