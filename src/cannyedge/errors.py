# -*- coding: utf-8 -*-
# Copyright (c) 2024-2026 Vasile Lucian Borbeleac / FRAGMERGENT TECHNOLOGY S.R.L.
# Cluj-Napoca, Romania

"""User-facing error categories.

Only the bitmap codec and the image comparison raise these. Contract
violations inside the pipeline stages surface as ``AssertionError`` or
``ValueError`` and are never caught.
"""


class CannyEdgeError(Exception):
    """Base class for CannyEdge failures reported to the user."""


class DecodeError(CannyEdgeError):
    """Missing file, malformed header or unsupported bitmap layout."""


class EncodeError(CannyEdgeError):
    """The output bitmap could not be written."""


class ComparisonError(CannyEdgeError):
    """Two images cannot be compared sample by sample."""
