# -*- coding: utf-8 -*-
# Copyright (c) 2024-2026 Vasile Lucian Borbeleac / FRAGMERGENT TECHNOLOGY S.R.L.
# Cluj-Napoca, Romania

"""Command line tools: edge detection, grayscale conversion, image comparison."""

import argparse
import sys
from typing import List, Optional

from cannyedge.bmpio import read_bmp, write_bmp
from cannyedge.compare import edge_agreement, pixel_similarity
from cannyedge.config import (DEFAULT_GRAY_OUTPUT, DEFAULT_OUTPUT, GRAYSCALE_POLICIES,
                              LINKING_MODES, NEIGHBOURHOODS, PRESETS)
from cannyedge.errors import CannyEdgeError
from cannyedge.grayscale import to_color, to_grayscale
from cannyedge.log import set_verbosity
from cannyedge.pipeline import CannyPipeline


def _fail(msg: str) -> int:
    print(f"Error: {msg}", file=sys.stderr)
    return 1


# ---------------------------------------------------------------------------
# cannyedge
# ---------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cannyedge",
        description="Detect edges in a 24-bit BMP image and save them as a black/white BMP.",
    )
    parser.add_argument("image", help="Path to the input BMP image")
    parser.add_argument("-o", "--output", default=DEFAULT_OUTPUT,
                        help=f"Output BMP path (default: {DEFAULT_OUTPUT})")
    parser.add_argument("--preset", default="default", choices=sorted(PRESETS),
                        help="Named parameter set (default: default)")
    parser.add_argument("--low", type=int, default=None, help="Weak-edge threshold")
    parser.add_argument("--high", type=int, default=None, help="Strong-edge threshold")
    parser.add_argument("--grayscale", choices=GRAYSCALE_POLICIES, default=None,
                        help="Grayscale reduction policy")
    parser.add_argument("--neighbourhood", choices=NEIGHBOURHOODS, default=None,
                        help="Hysteresis neighbour scan")
    parser.add_argument("--linking", choices=LINKING_MODES, default=None,
                        help="Hysteresis linking rule")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log per-stage timings")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    set_verbosity(args.verbose)

    try:
        pipeline = CannyPipeline(args.preset, low=args.low, high=args.high,
                                 grayscale=args.grayscale,
                                 neighbourhood=args.neighbourhood,
                                 linking=args.linking)
    except ValueError as e:
        parser.error(str(e))

    try:
        image = read_bmp(args.image)
        result = pipeline.run(image)
        write_bmp(args.output, result.to_color())
    except CannyEdgeError as e:
        return _fail(str(e))

    print(f"Canny edge detection complete. Output saved as {args.output}")
    return 0


# ---------------------------------------------------------------------------
# cannyedge-gray
# ---------------------------------------------------------------------------

def gray_main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="cannyedge-gray",
        description="Convert a 24-bit BMP image to grayscale.",
    )
    parser.add_argument("image", help="Path to the input BMP image")
    parser.add_argument("-o", "--output", default=DEFAULT_GRAY_OUTPUT,
                        help=f"Output BMP path (default: {DEFAULT_GRAY_OUTPUT})")
    parser.add_argument("--policy", choices=GRAYSCALE_POLICIES, default="average",
                        help="Channel weighting (default: average)")
    args = parser.parse_args(argv)

    try:
        gray = to_grayscale(read_bmp(args.image), policy=args.policy)
        write_bmp(args.output, to_color(gray))
    except CannyEdgeError as e:
        return _fail(str(e))

    print(f"Image converted to grayscale successfully. Output saved as {args.output}")
    return 0


# ---------------------------------------------------------------------------
# cannyedge-compare
# ---------------------------------------------------------------------------

def compare_main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="cannyedge-compare",
        description="Report how many samples two BMP images share.",
    )
    parser.add_argument("image1")
    parser.add_argument("image2")
    parser.add_argument("--tolerance", type=int, default=None,
                        help="Also report edge-map F1 with this pixel tolerance")
    args = parser.parse_args(argv)

    try:
        a = read_bmp(args.image1)
        b = read_bmp(args.image2)
        similarity = pixel_similarity(a, b)
        print(f"The images are {similarity:g}% similar.")
        if args.tolerance is not None:
            m = edge_agreement(a, b, tolerance=args.tolerance)
            print(f"Edge F1 @ {args.tolerance}px: {m.f1:.4f} "
                  f"(P={m.precision:.4f} R={m.recall:.4f})")
    except CannyEdgeError as e:
        return _fail(str(e))
    return 0


if __name__ == "__main__":
    sys.exit(main())
