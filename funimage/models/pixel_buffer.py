"""Буфер пикселей фиксированного размера.

Принципы:
- SRP: только хранение дискретных цветов; выборкой занимается `RasterService`.
- Буфер перезаписывается целиком на каждом кадре, частичные обновления не отслеживаются.
"""
from __future__ import annotations

from typing import Sequence, Tuple

import numpy as np
from PIL import Image

from funimage.models.color import Color


class PixelBuffer:
    """Сетка width x height поверх numpy-массива формы (height, width, 3)."""
    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Размер буфера должен быть положительным: {width}x{height}")
        self._width = int(width)
        self._height = int(height)
        self._pixels = np.zeros((self._height, self._width, 3), dtype=np.uint8)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def pixels(self) -> np.ndarray:
        """Только для чтения: копия не делается, поэтому не мутируйте результат."""
        return self._pixels

    def get(self, x: int, y: int) -> Color:
        r, g, b = self._pixels[y, x]
        return Color(int(r), int(g), int(b))

    def fill(self, color: Color) -> None:
        self._pixels[:, :] = color.as_tuple()

    def write_rows(self, start_row: int, rows: Sequence[Sequence[Tuple[int, int, int]]]) -> None:
        """Записывает подряд идущие строки, начиная со `start_row`.

        Каждая строка содержит ровно `width` троек (r, g, b).
        """
        if not rows:
            return
        stop_row = start_row + len(rows)
        if start_row < 0 or stop_row > self._height:
            raise IndexError(f"Строки {start_row}..{stop_row} вне буфера высотой {self._height}")
        self._pixels[start_row:stop_row] = np.asarray(rows, dtype=np.uint8)

    def to_pil(self) -> Image.Image:
        """Возвращает копию буфера как `PIL.Image.Image` в режиме RGB."""
        return Image.fromarray(self._pixels.copy())
