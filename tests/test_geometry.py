"""Tests for midpoints, base shapes, grid placement, and normalization."""

import math

import numpy as np
import pytest

from sfcurves.errors import DegenerateViewport
from sfcurves.geometry import (
    bounding_box, equilateral_triangle, hexagon, midpoint, normalize,
    place_on_grid,
)
from sfcurves.lsystem import flowsnake_raw
from tests.conftest import inside


class TestShapes:

    def test_midpoint(self):
        assert midpoint((0, 0), (4, 2)) == (2, 1)

    def test_hexagon_vertices_on_circle(self):
        pts = hexagon((10, 20), 5)
        assert len(pts) == 6
        assert pts[0] == pytest.approx((15, 20))
        for x, y in pts:
            assert math.hypot(x - 10, y - 20) == pytest.approx(5)

    def test_hexagon_sides_equal_radius(self):
        pts = hexagon((0, 0), 3)
        for i in range(6):
            a, b = pts[i], pts[(i + 1) % 6]
            assert math.dist(a, b) == pytest.approx(3)

    def test_triangle_apex_up(self):
        top, left, right = equilateral_triangle((0, 0), 2)
        # y grows downward, so the apex has the smallest y
        assert top[1] < left[1] == right[1]
        assert top[0] == 0
        assert math.dist(left, right) == pytest.approx(2)
        assert math.dist(top, left) == pytest.approx(2)

    def test_bounding_box(self):
        assert bounding_box([(1, 5), (-2, 3), (4, -1)]) == (-2, -1, 4, 5)

    def test_bounding_box_empty(self):
        with pytest.raises(ValueError):
            bounding_box([])


class TestPlaceOnGrid:

    def test_unit_square_at_300(self):
        pts = place_on_grid([(0, 0), (1, 1)], 2, 300, 300)
        np.testing.assert_allclose(pts, [(20, 20), (150, 150)])

    def test_uses_shorter_side(self):
        pts = place_on_grid([(1, 1)], 1, 500, 240)
        np.testing.assert_allclose(pts, [(220, 220)])

    def test_small_viewport_fills_from_corner(self):
        pts = place_on_grid([(0, 0), (1, 1)], 2, 30, 30)
        np.testing.assert_allclose(pts, [(0, 0), (15, 15)])

    def test_degenerate(self):
        with pytest.raises(DegenerateViewport):
            place_on_grid([(0, 0)], 1, 0, 100)


class TestNormalize:

    def test_small_shape_only_translated(self):
        pts = normalize([(0, 0), (10, 0), (10, 20)], 200, 200)
        np.testing.assert_allclose(pts, [(95, 90), (105, 90), (105, 110)])

    def test_large_shape_scaled_to_margin(self):
        pts = normalize([(0, 0), (1000, 500)], 300, 300)
        np.testing.assert_allclose(pts, [(20, 85), (280, 215)])

    def test_never_upscales(self):
        raw = [(0, 0), (1, 1)]
        pts = normalize(raw, 400, 400)
        lo_x, lo_y, hi_x, hi_y = bounding_box(pts)
        assert hi_x - lo_x == pytest.approx(1)
        assert hi_y - lo_y == pytest.approx(1)

    def test_single_point_centred(self):
        np.testing.assert_allclose(normalize([(7, -3)], 100, 60), [(50, 30)])

    def test_flat_line_scales_on_its_only_axis(self):
        pts = normalize([(0, 5), (900, 5)], 300, 300)
        np.testing.assert_allclose(pts, [(20, 150), (280, 150)])

    def test_result_fits(self):
        pts = normalize(flowsnake_raw(3) * 40, 300, 300)
        assert inside(pts, 300, 300, margin=20)

    def test_idempotent(self):
        once = normalize(flowsnake_raw(3) * 40, 300, 300)
        twice = normalize(once, 300, 300)
        np.testing.assert_allclose(twice, once, atol=1e-9)

    def test_idempotent_when_not_scaled(self):
        once = normalize(flowsnake_raw(2), 300, 300)
        np.testing.assert_allclose(normalize(once, 300, 300), once, atol=1e-9)

    def test_preserves_order(self):
        raw = np.array([(3, 3), (0, 0), (1, 2)], dtype=float)
        pts = normalize(raw, 100, 100)
        np.testing.assert_allclose(pts - pts[0], raw - raw[0])

    def test_empty(self):
        assert normalize([], 100, 100).shape == (0, 2)

    @pytest.mark.parametrize("width,height", [(0, 100), (100, 0), (-5, -5)])
    def test_degenerate(self, width, height):
        with pytest.raises(DegenerateViewport):
            normalize([(0, 0)], width, height)
