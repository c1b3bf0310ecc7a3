"""Растеризация: точная выборка в целых координатах, полосы строк, буфер."""
from __future__ import annotations

import numpy as np
import pytest

from funimage.algebra.images import constant_image
from funimage.models.color import BLUE, RED, Color
from funimage.models.pixel_buffer import PixelBuffer
from funimage.services.raster_service import RasterService


def gradient(col, row):
    return Color(col * 10, row * 10, 0)


class TestPixelBuffer:
    def test_shape(self):
        buffer = PixelBuffer(4, 3)
        assert buffer.pixels.shape == (3, 4, 3)
        assert buffer.pixels.dtype == np.uint8

    @pytest.mark.parametrize("size", [(0, 3), (4, 0), (-1, -1)])
    def test_non_positive_size_rejected(self, size):
        with pytest.raises(ValueError):
            PixelBuffer(*size)

    def test_fill_and_get(self):
        buffer = PixelBuffer(2, 2)
        buffer.fill(RED)
        assert buffer.get(1, 1) == RED

    def test_write_rows_out_of_range(self):
        buffer = PixelBuffer(1, 2)
        with pytest.raises(IndexError):
            buffer.write_rows(1, [[(0, 0, 0)], [(0, 0, 0)]])

    def test_to_pil_is_a_copy(self):
        buffer = PixelBuffer(2, 1)
        buffer.fill(BLUE)
        pil = buffer.to_pil()
        buffer.fill(RED)
        assert pil.mode == "RGB"
        assert pil.size == (2, 1)
        assert pil.getpixel((0, 0)) == (0, 0, 255)


class TestRasterize:
    def test_constant_fills_every_pixel(self):
        buffer = PixelBuffer(4, 3)
        RasterService().rasterize(constant_image(BLUE), buffer)
        assert [buffer.get(x, y) for y in range(3) for x in range(4)] == [BLUE] * 12

    def test_samples_exact_integer_coordinates(self):
        buffer = RasterService().render(gradient, 4, 3)
        assert buffer.get(0, 0) == Color(0, 0, 0)
        assert buffer.get(3, 2) == Color(30, 20, 0)
        assert buffer.get(2, 1) == Color(20, 10, 0)

    def test_overwrites_whole_buffer(self):
        buffer = PixelBuffer(3, 3)
        service = RasterService()
        service.rasterize(constant_image(RED), buffer)
        service.rasterize(constant_image(BLUE), buffer)
        assert np.all(buffer.pixels == np.array([0, 0, 255], dtype=np.uint8))

    @pytest.mark.parametrize("workers", [2, 3, 8])
    def test_parallel_matches_sequential(self, workers):
        sequential = RasterService().render(gradient, 7, 5)
        parallel = RasterService(workers=workers).render(gradient, 7, 5)
        np.testing.assert_array_equal(parallel.pixels, sequential.pixels)

    def test_bands_are_disjoint_and_cover_rows(self):
        bands = RasterService(workers=3)._bands(10)
        assert bands == [(0, 4), (4, 7), (7, 10)]

    def test_failure_propagates_from_worker(self):
        def broken(col, row):
            if row == 2:
                raise ZeroDivisionError("boom")
            return RED

        with pytest.raises(ZeroDivisionError):
            RasterService(workers=2).render(broken, 3, 4)

    def test_failed_band_leaves_buffer_untouched(self):
        def broken(col, row):
            if row == 3:
                raise ZeroDivisionError("boom")
            return RED

        buffer = PixelBuffer(2, 4)
        buffer.fill(BLUE)
        with pytest.raises(ZeroDivisionError):
            RasterService(workers=2).rasterize(broken, buffer)
        assert all(buffer.get(x, y) == BLUE for y in range(4) for x in range(2))

    def test_invalid_workers(self):
        with pytest.raises(ValueError):
            RasterService(workers=0)
