# -*- coding: utf-8 -*-
"""Tests for the CannyEdge pipeline stages."""

import math
import sys
from pathlib import Path

# Allow imports from src/
_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(_ROOT / "src"))

import numpy as np
import pytest

from cannyedge.config import PRESETS, resolve_params
from cannyedge.gradient import compute_gradients, magnitude_direction, sobel_gradients
from cannyedge.grayscale import to_color, to_grayscale
from cannyedge.grid import SampleGrid, SampleKind
from cannyedge.hysteresis import hysteresis
from cannyedge.pipeline import STAGE_NAMES, CannyPipeline, detect_edges
from cannyedge.shapes import SHAPES, make_circle_square, make_step, make_uniform
from cannyedge.smoothing import GAUSSIAN_KERNEL, GAUSSIAN_NORM, gaussian_smooth
from cannyedge.suppression import non_maximum_suppression


def _intensity(rows) -> SampleGrid:
    return SampleGrid.from_array(rows, SampleKind.INTENSITY)


def _float(rows) -> SampleGrid:
    return SampleGrid.from_array(rows, SampleKind.FLOAT)


def _gradient(rows) -> SampleGrid:
    return SampleGrid.from_array(rows, SampleKind.GRADIENT)


# ============================================================
# grid.py
# ============================================================

class TestSampleGrid:
    def test_zeros_shape(self):
        g = SampleGrid.zeros(7, 3, SampleKind.GRADIENT)
        assert (g.width, g.height) == (7, 3)
        assert g.data.shape == (3, 7)
        assert g.data.dtype == np.int32
        assert g.size == 21

    def test_color_has_three_channels(self):
        g = SampleGrid.zeros(4, 2, SampleKind.COLOR)
        assert g.data.shape == (2, 4, 3)
        assert g.channels == 3

    def test_row_major_index(self):
        g = SampleGrid.zeros(5, 4, SampleKind.INTENSITY)
        assert g.index(0, 0) == 0
        assert g.index(2, 3) == 13
        assert g.index(3, 4) == 19

    @pytest.mark.parametrize("row,col", [(-1, 0), (0, -1), (4, 0), (0, 5)])
    def test_index_out_of_bounds(self, row, col):
        g = SampleGrid.zeros(5, 4, SampleKind.INTENSITY)
        with pytest.raises(IndexError):
            g.index(row, col)

    def test_get_matches_flat(self):
        g = _intensity(np.arange(12).reshape(3, 4))
        assert g.get(2, 1) == g.flat()[g.index(2, 1)] == 9

    def test_immutable(self):
        g = _intensity([[1, 2], [3, 4]])
        with pytest.raises(ValueError):
            g.data[0, 0] = 9

    def test_from_array_copies(self):
        src = np.ones((2, 2), dtype=np.uint8)
        g = SampleGrid.from_array(src, SampleKind.INTENSITY)
        src[0, 0] = 7
        assert g.data[0, 0] == 1

    def test_from_array_rejects_out_of_range(self):
        with pytest.raises(ValueError):
            SampleGrid.from_array([[0, 256]], SampleKind.INTENSITY)
        with pytest.raises(ValueError):
            SampleGrid.from_array([[-1, 0]], SampleKind.INTENSITY)

    def test_wrong_dtype(self):
        with pytest.raises(TypeError):
            SampleGrid(np.zeros((2, 2), dtype=np.float64), SampleKind.FLOAT)

    def test_wrong_dimensionality(self):
        with pytest.raises(ValueError):
            SampleGrid(np.zeros((2, 2), dtype=np.uint8), SampleKind.COLOR)


# ============================================================
# grayscale.py
# ============================================================

class TestGrayscale:
    @pytest.mark.parametrize("policy", ["luma", "average"])
    @pytest.mark.parametrize("k", [0, 1, 77, 128, 254, 255])
    def test_uniform_gray_is_exact(self, policy, k):
        gray = to_grayscale(make_uniform(6, 4, (k, k, k)), policy=policy)
        assert gray.kind is SampleKind.INTENSITY
        assert gray.shape == (4, 6)
        assert np.all(gray.data == k)

    def test_luma_weights_follow_rgb_order(self):
        assert to_grayscale(make_uniform(1, 1, (255, 0, 0))).data[0, 0] == 76
        assert to_grayscale(make_uniform(1, 1, (0, 255, 0))).data[0, 0] == 149
        assert to_grayscale(make_uniform(1, 1, (0, 0, 255))).data[0, 0] == 29

    def test_average_truncates(self):
        gray = to_grayscale(make_uniform(2, 2, (10, 20, 31)), policy="average")
        assert np.all(gray.data == 20)

    def test_unknown_policy(self):
        with pytest.raises(ValueError):
            to_grayscale(make_uniform(2, 2), policy="median")

    def test_rejects_intensity_input(self):
        with pytest.raises(AssertionError):
            to_grayscale(_intensity([[1]]))

    def test_to_color_replicates(self):
        color = to_color(_intensity([[0, 255], [12, 34]]))
        assert color.kind is SampleKind.COLOR
        for ch in range(3):
            np.testing.assert_array_equal(color.data[..., ch], [[0, 255], [12, 34]])


# ============================================================
# smoothing.py
# ============================================================

class TestGaussianSmooth:
    def test_kernel_weights_and_divisor(self):
        assert int(GAUSSIAN_KERNEL.sum()) == 159
        assert GAUSSIAN_NORM == 273

    @pytest.mark.parametrize("k,expected", [(1, 0), (2, 1), (91, 53), (100, 58), (255, 148)])
    def test_uniform_interior_scaled(self, k, expected):
        # weights sum to 159 over a divisor of 273: flat regions darken
        out = gaussian_smooth(_intensity(np.full((9, 11), k)))
        assert np.all(out.data[2:-2, 2:-2] == expected)
        assert expected == 159 * k // 273

    def test_border_band_is_zero(self):
        out = gaussian_smooth(_intensity(np.full((9, 11), 200)))
        assert np.all(out.data[:2, :] == 0)
        assert np.all(out.data[-2:, :] == 0)
        assert np.all(out.data[:, :2] == 0)
        assert np.all(out.data[:, -2:] == 0)

    def test_impulse_response(self):
        img = np.zeros((9, 9), dtype=np.uint8)
        img[4, 4] = 255
        out = gaussian_smooth(_intensity(img))
        assert out.data[4, 4] == 14   # 255 * 15 // 273
        assert out.data[4, 5] == 11   # 255 * 12 // 273
        assert out.data[2, 2] == 1    # 255 * 2 // 273

    def test_does_not_touch_input(self):
        src = _intensity(np.arange(49).reshape(7, 7))
        before = src.data.copy()
        gaussian_smooth(src)
        np.testing.assert_array_equal(src.data, before)

    @pytest.mark.parametrize("shape", [(4, 10), (10, 4), (1, 1)])
    def test_too_small_for_kernel(self, shape):
        out = gaussian_smooth(_intensity(np.full(shape, 90)))
        assert out.shape == shape
        assert not out.data.any()


# ============================================================
# gradient.py
# ============================================================

class TestGradient:
    def test_uniform_has_no_gradient(self):
        gx, gy, mag, direction = compute_gradients(_intensity(np.full((6, 6), 42)))
        assert not gx.data.any() and not gy.data.any()
        assert not mag.data.any()
        assert np.all(direction.data == 0.0)
        assert not np.isnan(direction.data).any()

    def test_vertical_step(self):
        img = np.zeros((5, 5), dtype=np.uint8)
        img[:, 3:] = 100
        gx, gy = sobel_gradients(_intensity(img))
        expected = np.zeros((5, 5), dtype=np.int32)
        expected[1:4, 2:4] = 400
        np.testing.assert_array_equal(gx.data, expected)
        assert not gy.data.any()

    def test_horizontal_step_points_down(self):
        img = np.zeros((5, 5), dtype=np.uint8)
        img[3:, :] = 100
        _, gy, mag, direction = compute_gradients(_intensity(img))
        assert gy.data[2, 2] == 400
        assert mag.data[2, 2] == pytest.approx(400.0)
        assert direction.data[2, 2] == pytest.approx(90.0)

    def test_border_untouched(self):
        rng = np.random.default_rng(0)
        gx, gy = sobel_gradients(_intensity(rng.integers(0, 256, (8, 8))))
        for g in (gx, gy):
            assert not g.data[0, :].any() and not g.data[-1, :].any()
            assert not g.data[:, 0].any() and not g.data[:, -1].any()

    @pytest.mark.parametrize("gx,gy,mag,angle", [
        (3, 4, 5.0, 53.130102),
        (1, 1, np.sqrt(2), 45.0),
        (-1, 1, np.sqrt(2), 135.0),
        (1, -1, np.sqrt(2), 135.0),
        (0, -7, 7.0, 90.0),
        (-400, 0, 400.0, 0.0),
    ])
    def test_magnitude_and_folded_direction(self, gx, gy, mag, angle):
        m, d = magnitude_direction(_gradient([[gx]]), _gradient([[gy]]))
        assert m.data[0, 0] == pytest.approx(mag, rel=1e-6)
        assert d.data[0, 0] == pytest.approx(angle, abs=1e-4)

    def test_direction_range(self):
        rng = np.random.default_rng(1)
        gx = _gradient(rng.integers(-2000, 2000, (32, 32)))
        gy = _gradient(rng.integers(-2000, 2000, (32, 32)))
        _, d = magnitude_direction(gx, gy)
        assert d.data.min() >= 0.0
        assert d.data.max() < 180.0

    def test_magnitude_not_clamped(self):
        m, _ = magnitude_direction(_gradient([[1020]]), _gradient([[1020]]))
        assert m.data[0, 0] > 255

    def test_shape_mismatch(self):
        with pytest.raises(AssertionError):
            magnitude_direction(_gradient(np.zeros((3, 3))), _gradient(np.zeros((3, 4))))


# ============================================================
# suppression.py
# ============================================================

class TestNonMaximumSuppression:
    def test_vertical_ridge_survives_only_on_its_column(self):
        mag = np.full((5, 5), 10.0)
        mag[:, 2] = 100.0
        out = non_maximum_suppression(_float(mag), _float(np.zeros((5, 5)))).data
        expected = np.zeros((5, 5), dtype=np.uint8)
        expected[1:4, 2] = 100
        np.testing.assert_array_equal(out, expected)

    def test_border_zeroed(self):
        mag = np.full((6, 6), 50.0)
        out = non_maximum_suppression(_float(mag), _float(np.zeros((6, 6)))).data
        assert not out[0, :].any() and not out[-1, :].any()
        assert not out[:, 0].any() and not out[:, -1].any()
        assert np.all(out[1:-1, 1:-1] == 50)

    def test_truncates_and_saturates(self):
        mag = np.zeros((3, 5))
        mag[1, 1] = 37.9
        mag[1, 3] = 812.0
        out = non_maximum_suppression(_float(mag), _float(np.zeros((3, 5)))).data
        assert out[1, 1] == 37
        assert out[1, 3] == 255

    @pytest.mark.parametrize("angle,centre_kept", [
        (45.0, False),   # compares along (3,3): suppressed
        (135.0, True),   # compares (1,3)/(3,1): kept
        (90.0, True),
        (0.0, True),
    ])
    def test_diagonal_sectors(self, angle, centre_kept):
        mag = np.zeros((5, 5))
        mag[2, 2] = 50.0
        mag[3, 3] = 60.0
        out = non_maximum_suppression(_float(mag), _float(np.full((5, 5), angle))).data
        assert (out[2, 2] == 50) == centre_kept
        assert out[3, 3] == 60

    @pytest.mark.parametrize("angle,centre_kept", [
        (22.4, False),
        (22.5, True),
        (157.4, True),
        (157.5, False),
    ])
    def test_sector_boundaries(self, angle, centre_kept):
        mag = np.zeros((5, 5))
        mag[2, 2] = 50.0
        mag[2, 3] = 60.0
        out = non_maximum_suppression(_float(mag), _float(np.full((5, 5), angle))).data
        assert (out[2, 2] == 50) == centre_kept

    def test_thin_grid(self):
        out = non_maximum_suppression(_float(np.ones((2, 9))), _float(np.zeros((2, 9))))
        assert out.shape == (2, 9)
        assert not out.data.any()

    def test_shape_mismatch(self):
        with pytest.raises(AssertionError):
            non_maximum_suppression(_float(np.zeros((3, 3))), _float(np.zeros((4, 3))))


# ============================================================
# hysteresis.py
# ============================================================

class TestHysteresis:
    def test_strong_centre_alone(self):
        src = np.zeros((3, 3))
        src[1, 1] = 200
        out = hysteresis(_intensity(src), low=10, high=75).data
        expected = np.zeros((3, 3), dtype=np.uint8)
        expected[1, 1] = 255
        np.testing.assert_array_equal(out, expected)

    @pytest.mark.parametrize("nb", [(0, 0), (0, 1), (0, 2), (1, 0), (1, 2), (2, 0), (2, 1), (2, 2)])
    def test_weak_centre_with_strong_neighbour(self, nb):
        src = np.zeros((3, 3))
        src[1, 1] = 50
        src[nb] = 75
        out = hysteresis(_intensity(src), low=10, high=75).data
        assert out[1, 1] == 255
        assert out[nb] == 255

    def test_weak_centre_without_strong_neighbour(self):
        src = np.full((3, 3), 5)
        src[1, 1] = 50
        out = hysteresis(_intensity(src), low=10, high=75).data
        assert not out.any()

    def test_below_low_never_promoted(self):
        src = np.zeros((3, 3))
        src[1, 1] = 9
        src[0, 0] = 200
        out = hysteresis(_intensity(src), low=10, high=75).data
        assert out[1, 1] == 0

    def test_output_is_binary(self):
        rng = np.random.default_rng(3)
        out = hysteresis(_intensity(rng.integers(0, 256, (16, 16)))).data
        assert set(np.unique(out)) <= {0, 255}

    def test_single_hop_does_not_chain(self):
        src = np.zeros((3, 5))
        src[1, 1:4] = [100, 50, 50]
        single = hysteresis(_intensity(src), linking="single_hop").data
        np.testing.assert_array_equal(single[1], [0, 255, 255, 0, 0])
        connected = hysteresis(_intensity(src), linking="connected").data
        np.testing.assert_array_equal(connected[1], [0, 255, 255, 255, 0])

    def test_connected_drops_isolated_weak_chain(self):
        src = np.zeros((4, 6))
        src[1, 0:3] = 50
        src[3, 5] = 90
        out = hysteresis(_intensity(src), linking="connected").data
        assert not out[1].any()
        assert out[3, 5] == 255

    def test_flat_scan_wraps_into_previous_row(self):
        src = np.zeros((3, 4))
        src[0, 3] = 100  # last column of row 0
        src[1, 0] = 50   # first column of row 1, flat offset -1
        flat = hysteresis(_intensity(src), neighbourhood="flat").data
        bounded = hysteresis(_intensity(src), neighbourhood="bounded").data
        assert flat[1, 0] == 255
        assert bounded[1, 0] == 0

    def test_flat_scan_wraps_into_next_row(self):
        src = np.zeros((3, 4))
        src[0, 3] = 50
        src[1, 0] = 100
        flat = hysteresis(_intensity(src), neighbourhood="flat").data
        bounded = hysteresis(_intensity(src), neighbourhood="bounded").data
        assert flat[0, 3] == 255
        assert bounded[0, 3] == 0

    def test_flat_and_bounded_agree_inside_rows(self):
        rng = np.random.default_rng(7)
        src = rng.integers(0, 120, (12, 12)).astype(np.uint8)
        src[:, 0] = 0
        src[:, -1] = 0
        flat = hysteresis(_intensity(src), neighbourhood="flat").data
        bounded = hysteresis(_intensity(src), neighbourhood="bounded").data
        np.testing.assert_array_equal(flat, bounded)

    @pytest.mark.parametrize("low,high", [(80, 20), (-1, 75), (10, 256)])
    def test_invalid_thresholds(self, low, high):
        with pytest.raises(ValueError):
            hysteresis(_intensity(np.zeros((3, 3))), low=low, high=high)

    def test_unknown_modes(self):
        with pytest.raises(ValueError):
            hysteresis(_intensity(np.zeros((3, 3))), neighbourhood="torus")
        with pytest.raises(ValueError):
            hysteresis(_intensity(np.zeros((3, 3))), linking="iterative")


# ============================================================
# config.py
# ============================================================

class TestConfig:
    def test_presets_resolve(self):
        for name in PRESETS:
            p = resolve_params(name)
            assert p["low"] == 10 and p["high"] == 75
            assert "description" not in p

    def test_reference_preset_is_flat_single_hop(self):
        p = resolve_params("reference")
        assert p["neighbourhood"] == "flat"
        assert p["linking"] == "single_hop"

    def test_overrides(self):
        p = resolve_params("default", low=20, high=None)
        assert p["low"] == 20
        assert p["high"] == 75

    def test_unknown_preset_and_key(self):
        with pytest.raises(ValueError):
            resolve_params("fast")
        with pytest.raises(ValueError):
            resolve_params("default", sigma=1.4)

    def test_invalid_values(self):
        with pytest.raises(ValueError):
            resolve_params("default", grayscale="hsv")
        with pytest.raises(ValueError):
            resolve_params("default", low=90, high=30)


# ============================================================
# shapes.py
# ============================================================

class TestShapes:
    @pytest.mark.parametrize("name", list(SHAPES.keys()))
    def test_shape_output(self, name):
        img = SHAPES[name]()
        assert img.kind is SampleKind.COLOR
        assert img.data.dtype == np.uint8
        assert img.width > 0 and img.height > 0


# ============================================================
# Integration: full pipeline
# ============================================================

class TestPipeline:
    def test_step_edge_located(self):
        # blurred row: ... 0 15 51 97 132 148 ... 148 0 0 (cols 13..31)
        # |gx| peaks at col 15 (328 vs 324 at col 16); the blur border
        # gives a second ridge at cols 29 and 30 (592 each, ties kept)
        edges = detect_edges(make_step(32, 32, col=16)).data
        cols = np.flatnonzero(edges[5:27].any(axis=0))
        np.testing.assert_array_equal(cols, [15, 29, 30])
        assert np.all(edges[5:27, 15] == 255)
        assert np.all(edges[5:27, 29] == 255)
        assert not edges[:, :10].any()

    def test_uniform_has_edges_only_at_blur_border(self):
        # the unfiltered 2-pixel band is 0, so a bright uniform image
        # shows a rectangle where the band meets the filtered interior
        edges = detect_edges(make_uniform(24, 24, (90, 140, 30))).data
        assert edges.any()
        assert not edges[4:-4, 4:-4].any()

    def test_black_image_has_no_edges(self):
        assert not detect_edges(make_uniform(24, 24, (0, 0, 0))).data.any()

    def test_deterministic(self):
        img = make_circle_square(64)
        a = detect_edges(img).data
        b = detect_edges(img).data
        np.testing.assert_array_equal(a, b)
        assert a.any()

    def test_binary_output_and_color_assembly(self):
        result = CannyPipeline().run(make_circle_square(48))
        assert set(np.unique(result.edges.data)) <= {0, 255}
        color = result.to_color()
        assert color.kind is SampleKind.COLOR
        for ch in range(3):
            np.testing.assert_array_equal(color.data[..., ch], result.edges.data)
        assert result.edge_count == int((result.edges.data == 255).sum())

    def test_keep_stages(self):
        result = CannyPipeline().run(make_circle_square(32), keep_stages=True)
        assert tuple(result.stages) == STAGE_NAMES
        assert result.stages["gx"].kind is SampleKind.GRADIENT
        assert result.stages["magnitude"].kind is SampleKind.FLOAT
        assert result.stages["edges"] is result.edges
        assert set(result.timings_ms) == {"grayscale", "smooth", "sobel", "magnitude",
                                          "suppress", "hysteresis"}

    def test_stages_released_by_default(self):
        assert CannyPipeline().run(make_circle_square(32)).stages is None

    def test_reference_matches_default(self):
        # suppression zeroes the outer columns, so the flat scan never wraps
        img = make_circle_square(64)
        np.testing.assert_array_equal(detect_edges(img, "reference").data,
                                      detect_edges(img, "default").data)

    def test_connected_is_superset(self):
        img = make_circle_square(64)
        single = detect_edges(img, "default").data > 0
        connected = detect_edges(img, "connected").data > 0
        assert not (single & ~connected).any()

    @pytest.mark.parametrize("width,height", [(1, 1), (1, 17), (17, 1), (2, 9), (4, 4)])
    def test_degenerate_sizes(self, width, height):
        img = make_uniform(width, height, (200, 10, 60))
        result = CannyPipeline().run(img, keep_stages=True)
        for name in STAGE_NAMES[1:]:
            grid = result.stages[name]
            assert grid.shape == (height, width)
            assert not grid.data.any(), name

    def test_empty_image_rejected(self):
        with pytest.raises(ValueError):
            CannyPipeline().run(SampleGrid.zeros(0, 5, SampleKind.COLOR))

    def test_update_params(self):
        pipeline = CannyPipeline("default")
        pipeline.update_params(low=30, linking="connected")
        assert pipeline.params["low"] == 30
        assert pipeline.params["linking"] == "connected"
        with pytest.raises(ValueError):
            pipeline.update_params(high=5)


# ============================================================
# Agreement with a per-pixel scalar detector
# ============================================================

def _scalar_canny(rgb: np.ndarray, low: int = 10, high: int = 75):
    """Straightforward loop-per-pixel detector; returns (blurred, suppressed, edges)."""
    h, w = rgb.shape[:2]
    r, g, b = (rgb[..., c].astype(np.int64) for c in range(3))
    gray = ((299 * r + 587 * g + 114 * b) // 1000).ravel().tolist()

    kernel = GAUSSIAN_KERNEL.tolist()
    blurred = [0] * (w * h)
    for y in range(2, h - 2):
        for x in range(2, w - 2):
            acc = 0
            for ky in range(-2, 3):
                for kx in range(-2, 3):
                    acc += gray[(y + ky) * w + (x + kx)] * kernel[ky + 2][kx + 2]
            blurred[y * w + x] = acc // 273

    sobel_x = [[-1, 0, 1], [-2, 0, 2], [-1, 0, 1]]
    sobel_y = [[-1, -2, -1], [0, 0, 0], [1, 2, 1]]
    mag = [np.float32(0.0)] * (w * h)
    ang = [np.float32(0.0)] * (w * h)
    for y in range(1, h - 1):
        for x in range(1, w - 1):
            gx = gy = 0
            for ky in range(-1, 2):
                for kx in range(-1, 2):
                    p = blurred[(y + ky) * w + (x + kx)]
                    gx += p * sobel_x[ky + 1][kx + 1]
                    gy += p * sobel_y[ky + 1][kx + 1]
            idx = y * w + x
            mag[idx] = np.float32(math.sqrt(gx * gx + gy * gy))
            a = np.float32(math.degrees(math.atan2(gy, gx)))
            if a < 0:
                a += np.float32(180.0)
            ang[idx] = np.float32(0.0) if a >= 180.0 else a

    suppressed = [0] * (w * h)
    for y in range(1, h - 1):
        for x in range(1, w - 1):
            idx = y * w + x
            a, m = ang[idx], mag[idx]
            if a < 22.5 or a >= 157.5:
                q, s = mag[idx + 1], mag[idx - 1]
            elif a < 67.5:
                q, s = mag[idx + w + 1], mag[idx - w - 1]
            elif a < 112.5:
                q, s = mag[idx + w], mag[idx - w]
            else:
                q, s = mag[idx - w + 1], mag[idx + w - 1]
            if m >= q and m >= s:
                suppressed[idx] = min(int(m), 255)

    edges = [0] * (w * h)
    for idx, v in enumerate(suppressed):
        if v >= high:
            edges[idx] = 255
        elif v >= low:
            for ky in (-1, 0, 1):
                for kx in (-1, 0, 1):
                    n = idx + ky * w + kx
                    if 0 <= n < w * h and suppressed[n] >= high:
                        edges[idx] = 255

    def grid(values):
        return np.array(values, dtype=np.int64).reshape(h, w)

    return grid(blurred), grid(suppressed), grid(edges)


class TestScalarAgreement:
    @pytest.mark.parametrize("seed,height,width", [
        (0, 12, 12), (1, 9, 17), (2, 16, 7), (3, 20, 20), (4, 6, 6), (5, 14, 23),
    ])
    def test_random_image_matches_loop_detector(self, seed, height, width):
        rng = np.random.default_rng(seed)
        rgb = rng.integers(0, 256, (height, width, 3)).astype(np.uint8)
        blurred, suppressed, edges = _scalar_canny(rgb)

        for preset in ("reference", "default"):
            result = CannyPipeline(preset).run(SampleGrid(rgb, SampleKind.COLOR), keep_stages=True)
            np.testing.assert_array_equal(result.stages["blurred"].data, blurred)
            np.testing.assert_array_equal(result.stages["suppressed"].data, suppressed)
            np.testing.assert_array_equal(result.edges.data, edges)

    def test_smooth_image_matches_loop_detector(self):
        img = make_circle_square(40)
        _, suppressed, edges = _scalar_canny(img.data)
        result = CannyPipeline("reference").run(img, keep_stages=True)
        np.testing.assert_array_equal(result.stages["suppressed"].data, suppressed)
        np.testing.assert_array_equal(result.edges.data, edges)
