"""Геометрические преобразования: сдвиг, масштаб, поворот, преобразование вокруг точки."""
from __future__ import annotations

import math

import pytest

from funimage.algebra.images import and_then, constant_image
from funimage.algebra.transforms import (
    about_point,
    rotate,
    rotate_about_origin,
    scale,
    scale_about_origin,
    translate,
)
from funimage.models.color import RED
from funimage.models.errors import InvalidScaleFactor

SAMPLE_POINTS = [(0.0, 0.0), (1.0, 0.0), (12.5, -3.0), (-200.0, 75.25), (0.001, 999.0)]


class TestTranslate:
    def test_moves_content(self, coords_image):
        moved = translate(10, -4)(coords_image)
        assert moved(10.0, -4.0) == (0.0, 0.0)

    @pytest.mark.parametrize("point", SAMPLE_POINTS)
    def test_constant_image_is_invariant(self, point):
        assert translate(10, 0)(constant_image(RED))(*point) == RED


class TestScale:
    def test_magnifies(self, coords_image):
        zoomed = scale_about_origin(2)(coords_image)
        assert zoomed(4.0, 6.0) == (2.0, 3.0)

    def test_zero_factor_rejected(self):
        with pytest.raises(InvalidScaleFactor):
            scale_about_origin(0)

    def test_zero_factor_rejected_about_point(self):
        with pytest.raises(InvalidScaleFactor):
            scale(0.0, 5.0, 5.0)

    @pytest.mark.parametrize("factor", [0.1, 0.5, 2.0, 7.3, -3.0])
    @pytest.mark.parametrize("point", SAMPLE_POINTS)
    def test_inverse_round_trip(self, coords_image, factor, point):
        round_trip = and_then(scale_about_origin(factor), scale_about_origin(1 / factor))(coords_image)
        assert round_trip(*point) == pytest.approx(point)

    def test_center_is_fixed(self, coords_image):
        image = scale(2, 10, 20)(coords_image)
        assert image(10.0, 20.0) == pytest.approx((10.0, 20.0))
        assert image(12.0, 20.0) == pytest.approx((11.0, 20.0))


class TestRotate:
    def test_quarter_turn(self, coords_image):
        image = rotate_about_origin(math.pi / 2)(coords_image)
        assert image(1.0, 0.0) == pytest.approx((0.0, 1.0))

    @pytest.mark.parametrize("angle", [0.3, math.pi / 4, 2.0, -5.0])
    @pytest.mark.parametrize("point", SAMPLE_POINTS)
    def test_inverse_round_trip(self, coords_image, angle, point):
        round_trip = and_then(rotate_about_origin(angle), rotate_about_origin(-angle))(coords_image)
        assert round_trip(*point) == pytest.approx(point, abs=1e-9)

    def test_center_is_fixed(self, coords_image):
        image = rotate(1.1, -30.0, 45.0)(coords_image)
        assert image(-30.0, 45.0) == pytest.approx((-30.0, 45.0))


class TestAboutPoint:
    @pytest.mark.parametrize("center", [(0.0, 0.0), (200.0, 150.0), (-13.5, 8.0)])
    @pytest.mark.parametrize("point", SAMPLE_POINTS)
    def test_zero_rotation_is_identity(self, coords_image, center, point):
        image = about_point(rotate_about_origin(0), *center)(coords_image)
        assert image(*point) == pytest.approx(point)

    def test_matches_translate_sandwich(self, coords_image):
        t = rotate_about_origin(0.4)
        expected = translate(5, 7)(t(translate(-5, -7)(coords_image)))
        actual = about_point(t, 5, 7)(coords_image)
        assert actual(11.0, -2.0) == pytest.approx(expected(11.0, -2.0))

    def test_scale_is_about_point_of_scale_about_origin(self, coords_image):
        a = scale(3, 4, 4)(coords_image)
        b = about_point(scale_about_origin(3), 4, 4)(coords_image)
        assert a(1.0, 9.0) == pytest.approx(b(1.0, 9.0))
