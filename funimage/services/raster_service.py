"""Растеризация: выборка функционального изображения в целых точках сетки.

Принципы:
- Пиксель равен значению функции ровно в (x, y); сдвига к центру пикселя нет,
  интерполяции и сглаживания нет.
- Буфер перезаписывается целиком. При `workers > 1` строки делятся на
  непересекающиеся полосы, каждая полоса пишет только свои строки.
"""
from __future__ import annotations

import logging
import time
from concurrent.futures import ThreadPoolExecutor
from typing import List, Tuple

from funimage.models.color import Color
from funimage.models.image_model import Image
from funimage.models.pixel_buffer import PixelBuffer

logger = logging.getLogger(__name__)

Row = List[Tuple[int, int, int]]


class RasterService:
    def __init__(self, workers: int = 1) -> None:
        if workers < 1:
            raise ValueError(f"workers должен быть >= 1, получено {workers}")
        self._workers = workers

    @property
    def workers(self) -> int:
        return self._workers

    # ---------- Вспомогательные функции ----------
    def _sample_rows(self, image: Image[Color], width: int, start: int, stop: int) -> List[Row]:
        """Вычисляет строки [start, stop) как списки троек (r, g, b)."""
        return [[image(x, y).as_tuple() for x in range(width)] for y in range(start, stop)]

    def _bands(self, height: int) -> List[Tuple[int, int]]:
        """Делит [0, height) на не более чем `workers` смежных полос."""
        count = min(self._workers, height)
        step, extra = divmod(height, count)
        bands: List[Tuple[int, int]] = []
        start = 0
        for i in range(count):
            stop = start + step + (1 if i < extra else 0)
            bands.append((start, stop))
            start = stop
        return bands

    # ---------- Публичный API ----------
    def rasterize(self, image: Image[Color], buffer: PixelBuffer) -> None:
        """Записывает `image(x, y)` в каждый пиксель 0 <= x < W, 0 <= y < H."""
        started = time.perf_counter()
        width, height = buffer.width, buffer.height
        if self._workers == 1:
            buffer.write_rows(0, self._sample_rows(image, width, 0, height))
        else:
            bands = self._bands(height)
            with ThreadPoolExecutor(max_workers=len(bands)) as pool:
                futures = [
                    (start, pool.submit(self._sample_rows, image, width, start, stop))
                    for start, stop in bands
                ]
                # result() re-raises the first sampling failure before any row is written
                sampled = [(start, future.result()) for start, future in futures]
            for start, rows in sampled:
                buffer.write_rows(start, rows)
        logger.debug(
            "Rasterized %dx%d in %.1f ms (workers=%d)",
            width, height, (time.perf_counter() - started) * 1000.0, self._workers,
        )

    def render(self, image: Image[Color], width: int, height: int) -> PixelBuffer:
        """Создаёт новый буфер и растеризует в него неподвижное изображение."""
        buffer = PixelBuffer(width, height)
        self.rasterize(image, buffer)
        return buffer
