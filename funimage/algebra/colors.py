"""Операции над цветами и адаптеры значений к цвету.

Адаптеры (`bool_to_color`, `intensity_to_color`) применяются явно через `map_image`:
неявных преобразований не-цветного изображения в цветное нет.
"""
from __future__ import annotations

from typing import Callable

from funimage.models.color import BLACK, WHITE, Color


def scale_color(color: Color, factor: float) -> Color:
    """Умножает каждую компоненту на `factor` с обрезкой в [0, 255]."""
    return Color(color.red * factor, color.green * factor, color.blue * factor)


def add_colors(a: Color, b: Color) -> Color:
    return Color(a.red + b.red, a.green + b.green, a.blue + b.blue)


def blend_colors(a: Color, b: Color, weight: float = 0.5) -> Color:
    """Линейное смешивание: `weight` = 0 даёт `a`, 1 даёт `b`."""
    keep = 1.0 - weight
    return Color(
        a.red * keep + b.red * weight,
        a.green * keep + b.green * weight,
        a.blue * keep + b.blue * weight,
    )


def bool_to_color(true_color: Color = BLACK, false_color: Color = WHITE) -> Callable[[bool], Color]:
    def convert(value: bool) -> Color:
        return true_color if value else false_color
    return convert


def intensity_to_color(low: Color = BLACK, high: Color = WHITE) -> Callable[[float], Color]:
    """Интенсивность из [0, 1] (значения вне обрезаются) -> цвет между `low` и `high`."""
    def convert(value: float) -> Color:
        return blend_colors(low, high, max(0.0, min(1.0, value)))
    return convert
