"""Примитивные изображения: сетка, шахматная доска, диск, кольца."""
from __future__ import annotations

import math

from funimage.algebra.mathutil import distance, positive_mod
from funimage.models.color import BLACK, WHITE, Color
from funimage.models.image_model import Image


def _require_positive(name: str, value: float) -> None:
    if value <= 0:
        raise ValueError(f"{name} должен быть положительным, получено {value}")


def grid(cell_size: float, line_thickness: float,
         line_color: Color = BLACK, background: Color = WHITE) -> Image[Color]:
    """Сетка из вертикальных и горизонтальных линий, бесконечная во все стороны."""
    _require_positive("cell_size", cell_size)

    def image(col: float, row: float) -> Color:
        if positive_mod(col, cell_size) < line_thickness or positive_mod(row, cell_size) < line_thickness:
            return line_color
        return background
    return image


def checkerboard(cell_size: float) -> Image[bool]:
    """True на «тёмных» клетках; клетка, содержащая начало координат, тёмная."""
    _require_positive("cell_size", cell_size)

    def image(col: float, row: float) -> bool:
        return (math.floor(col / cell_size) + math.floor(row / cell_size)) % 2 == 0
    return image


def disk(radius: float) -> Image[bool]:
    def image(col: float, row: float) -> bool:
        return distance((col, row), (0.0, 0.0)) <= radius
    return image


def rings(period: float) -> Image[float]:
    """Концентрические кольца с интенсивностью в [0, 1], 1 в начале координат."""
    _require_positive("period", period)
    compress = 2 * math.pi / period

    def image(col: float, row: float) -> float:
        return 0.5 + 0.5 * math.cos(compress * distance((col, row), (0.0, 0.0)))
    return image
