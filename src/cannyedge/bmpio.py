# -*- coding: utf-8 -*-
# Copyright (c) 2024-2026 Vasile Lucian Borbeleac / FRAGMERGENT TECHNOLOGY S.R.L.
# Cluj-Napoca, Romania

"""Uncompressed 24-bit BMP input and output.

Headers are parsed with numpy structured dtypes so malformed or unsupported
files are rejected with a precise message; the pixel array itself is
decoded and encoded by OpenCV, which handles row padding and bottom-up row
order. Images enter and leave the package as R, G, B color grids with
row 0 at the top.
"""

from pathlib import Path
from typing import NamedTuple, Union

import cv2
import numpy as np

from cannyedge.errors import DecodeError, EncodeError
from cannyedge.grayscale import to_color
from cannyedge.grid import SampleGrid, SampleKind
from cannyedge.log import setup_logger

logger = setup_logger("cannyedge.bmpio")

PathLike = Union[str, Path]

BMP_SIGNATURE = 0x4D42  # "BM"
BI_RGB = 0
SUPPORTED_BIT_COUNT = 24

FILE_HEADER = np.dtype([
    ("type", "<u2"),
    ("size", "<u4"),
    ("reserved1", "<u2"),
    ("reserved2", "<u2"),
    ("offset", "<u4"),
])

INFO_HEADER = np.dtype([
    ("size", "<u4"),
    ("width", "<i4"),
    ("height", "<i4"),
    ("planes", "<u2"),
    ("bit_count", "<u2"),
    ("compression", "<u4"),
    ("image_size", "<u4"),
    ("x_pixels_per_meter", "<i4"),
    ("y_pixels_per_meter", "<i4"),
    ("colors_used", "<u4"),
    ("important_colors", "<u4"),
])

HEADER_BYTES = FILE_HEADER.itemsize + INFO_HEADER.itemsize  # 54


class BmpInfo(NamedTuple):
    width: int
    height: int
    bit_count: int
    compression: int
    top_down: bool
    pixel_offset: int


def _row_stride(width: int, bit_count: int) -> int:
    """Bytes per stored row, padded to a 4-byte boundary."""
    return ((width * bit_count + 31) // 32) * 4


def _read_bytes(path: PathLike) -> np.ndarray:
    p = Path(path)
    if not p.is_file():
        raise DecodeError(f"Could not read the BMP image: {p} does not exist")
    try:
        return np.fromfile(p, dtype=np.uint8)
    except OSError as e:
        raise DecodeError(f"Could not read the BMP image {p}: {e}") from e


def parse_header(raw: np.ndarray, name: str = "<buffer>") -> BmpInfo:
    """Validate the file and info headers of a BMP held in ``raw``.

    Args:
        raw: Whole file as a uint8 array.
        name: Label used in error messages.

    Returns:
        ``BmpInfo`` with absolute height and the row-order flag.

    Raises:
        DecodeError: Truncated file, wrong signature, or a layout other than
            uncompressed 24-bit.
    """
    if raw.size < HEADER_BYTES:
        raise DecodeError(f"{name}: truncated header ({raw.size} bytes)")

    fh = np.frombuffer(raw[:FILE_HEADER.itemsize].tobytes(), dtype=FILE_HEADER)[0]
    ih = np.frombuffer(raw[FILE_HEADER.itemsize:HEADER_BYTES].tobytes(), dtype=INFO_HEADER)[0]

    if int(fh["type"]) != BMP_SIGNATURE:
        raise DecodeError(f"{name}: not a BMP file (signature {int(fh['type']):#06x})")
    if int(ih["size"]) < INFO_HEADER.itemsize:
        raise DecodeError(f"{name}: unsupported info header of {int(ih['size'])} bytes")

    width, height = int(ih["width"]), int(ih["height"])
    bit_count, compression = int(ih["bit_count"]), int(ih["compression"])
    if width <= 0 or height == 0:
        raise DecodeError(f"{name}: invalid dimensions {width}x{height}")
    if int(ih["planes"]) != 1:
        raise DecodeError(f"{name}: invalid plane count {int(ih['planes'])}")
    if bit_count != SUPPORTED_BIT_COUNT:
        raise DecodeError(f"{name}: unsupported bit depth {bit_count}, only 24-bit is supported")
    if compression != BI_RGB:
        raise DecodeError(f"{name}: unsupported compression {compression}")

    offset = int(fh["offset"])
    if offset < FILE_HEADER.itemsize + int(ih["size"]):
        raise DecodeError(f"{name}: pixel offset {offset} overlaps the header")
    needed = offset + _row_stride(width, bit_count) * abs(height)
    if raw.size < needed:
        raise DecodeError(f"{name}: truncated pixel data ({raw.size} of {needed} bytes)")

    return BmpInfo(width, abs(height), bit_count, compression, height < 0, offset)


def read_bmp_info(path: PathLike) -> BmpInfo:
    """Read and validate only the headers of a BMP file."""
    return parse_header(_read_bytes(path), str(path))


def read_bmp(path: PathLike) -> SampleGrid:
    """Decode a 24-bit BMP file into an R, G, B color grid.

    Raises:
        DecodeError: Missing file, malformed header, unsupported layout or
            undecodable pixel data.
    """
    raw = _read_bytes(path)
    info = parse_header(raw, str(path))

    try:
        bgr = cv2.imdecode(raw, cv2.IMREAD_COLOR)
    except cv2.error as e:
        raise DecodeError(f"{path}: OpenCV could not decode the pixel data: {e}") from e
    if bgr is None or bgr.shape[:2] != (info.height, info.width):
        raise DecodeError(f"{path}: OpenCV could not decode the pixel data")

    rgb = cv2.cvtColor(bgr, cv2.COLOR_BGR2RGB)
    logger.debug(f"decoded {path}: {info.width}x{info.height}")
    return SampleGrid(np.ascontiguousarray(rgb, dtype=np.uint8), SampleKind.COLOR)


def write_bmp(path: PathLike, image: SampleGrid) -> None:
    """Encode a color (or intensity) grid as a 24-bit BMP file.

    Intensity grids are replicated into three channels first.

    Raises:
        EncodeError: The bitmap could not be encoded or written.
    """
    if image.kind is SampleKind.INTENSITY:
        image = to_color(image)
    if image.kind is not SampleKind.COLOR:
        raise ValueError(f"cannot encode a {image.kind.value} grid as BMP")

    try:
        bgr = np.ascontiguousarray(image.data[..., ::-1])
        ok, buf = cv2.imencode(".bmp", bgr)
    except cv2.error as e:
        raise EncodeError(f"Could not encode the BMP image: {e}") from e
    if not ok:
        raise EncodeError("Could not encode the BMP image")

    try:
        buf.tofile(str(path))
    except OSError as e:
        raise EncodeError(f"Could not write the BMP image {path}: {e}") from e
    logger.debug(f"wrote {path}: {image.width}x{image.height}")
