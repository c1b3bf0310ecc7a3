"""Примитивные изображения."""
from __future__ import annotations

import pytest

from funimage.algebra.images import map_image
from funimage.algebra.colors import bool_to_color
from funimage.algebra.shapes import checkerboard, disk, grid, rings
from funimage.models.color import BLACK, RED, WHITE


class TestGrid:
    def test_line_at_origin(self):
        assert grid(20, 2)(0.0, 0.0) == BLACK

    def test_background_mid_cell(self):
        assert grid(20, 2)(10.0, 10.0) == WHITE

    def test_line_on_negative_side(self):
        image = grid(20, 2)
        assert image(-19.0, 10.0) == BLACK
        assert image(-10.0, -10.0) == WHITE

    def test_custom_colors(self):
        image = grid(10, 1, line_color=RED, background=BLACK)
        assert image(30.5, 5.0) == RED
        assert image(5.0, 5.0) == BLACK

    def test_non_positive_cell_rejected(self):
        with pytest.raises(ValueError):
            grid(0, 2)


class TestCheckerboard:
    def test_alternates(self):
        image = checkerboard(10)
        assert image(5.0, 5.0) is True
        assert image(15.0, 5.0) is False
        assert image(15.0, 15.0) is True

    def test_negative_coordinates(self):
        assert checkerboard(10)(-5.0, 5.0) is False

    def test_explicit_adapter_to_color(self):
        image = map_image(bool_to_color(RED, WHITE), checkerboard(10))
        assert image(1.0, 1.0) == RED


class TestDiskAndRings:
    def test_disk(self):
        image = disk(5)
        assert image(3.0, 4.0) is True
        assert image(4.0, 4.0) is False

    def test_rings_range(self):
        image = rings(10)
        assert image(0.0, 0.0) == pytest.approx(1.0)
        assert image(5.0, 0.0) == pytest.approx(0.0, abs=1e-12)
        for col in range(-20, 21, 3):
            assert 0.0 <= image(float(col), 2.0) <= 1.0
