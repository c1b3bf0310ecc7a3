"""Периодическая (косинусная) модуляция масштаба, сдвига и цвета.

Общий вид волны:

    F(d) = A cos(B d - C) + D

    A = amplitude
    B = 2 pi / period (сжатие по оси d)
    C = phase_shift * B (C / B это фазовый сдвиг)
    D = vert_shift

`d` это расстояние до опорной точки либо, в чисто временных вариантах,
прошедшее время. Анимации подают время в `phase_shift` (например, `time * 2`),
тогда форма волны неизменна, а сама волна бежит от кадра к кадру.
"""
from __future__ import annotations

import math
from typing import Literal

from funimage.algebra.colors import scale_color
from funimage.algebra.mathutil import distance
from funimage.algebra.transforms import about_point, scale_about_origin
from funimage.models.color import Color
from funimage.models.errors import InvalidWavePeriod
from funimage.models.image_model import Image, ImageTrans, T

ORIGIN = (0.0, 0.0)


def _compression(period: float) -> float:
    if period == 0:
        raise InvalidWavePeriod("Период волны не может быть равен нулю")
    return 2 * math.pi / period


def wave_value(d: float, phase_shift: float, vert_shift: float, amplitude: float, period: float) -> float:
    """Значение `A cos(B d - C) + D` в точке `d`."""
    compress = _compression(period)
    return amplitude * math.cos(compress * d - phase_shift * compress) + vert_shift


def wave_intensity(phase_shift: float, vert_shift: float, amplitude: float, period: float) -> Image[float]:
    """Скалярное изображение: волна от расстояния до начала координат."""
    compress = _compression(period)
    phase_factor = phase_shift * compress

    def intensity(col: float, row: float) -> float:
        d = distance((col, row), ORIGIN)
        return amplitude * math.cos(compress * d - phase_factor) + vert_shift
    return intensity


def wave_scale_about_origin(phase_shift: float, vert_shift: float, amplitude: float, period: float) -> ImageTrans:
    """Масштаб, меняющийся с расстоянием от начала координат: концентрическая рябь.

    Если в какой-то точке волна даёт ровно 0, вычисление в ней бросает
    `InvalidScaleFactor`.
    """
    intensity = wave_intensity(phase_shift, vert_shift, amplitude, period)

    def transform(image: Image[T]) -> Image[T]:
        def waved(col: float, row: float) -> T:
            return scale_about_origin(intensity(col, row))(image)(col, row)
        return waved
    return transform


def wave_scale(phase_shift: float, vert_shift: float, amplitude: float, period: float,
               center_col: float, center_row: float) -> ImageTrans:
    return about_point(wave_scale_about_origin(phase_shift, vert_shift, amplitude, period), center_col, center_row)


def wave_color_about_origin(phase_shift: float, vert_shift: float, amplitude: float, period: float) -> ImageTrans:
    """Пульсирующая яркость: интенсивность волны умножает все три компоненты цвета."""
    intensity = wave_intensity(phase_shift, vert_shift, amplitude, period)

    def transform(image: Image[Color]) -> Image[Color]:
        def waved(col: float, row: float) -> Color:
            return scale_color(image(col, row), intensity(col, row))
        return waved
    return transform


def wave_color(phase_shift: float, vert_shift: float, amplitude: float, period: float,
               center_col: float, center_row: float) -> ImageTrans:
    return about_point(wave_color_about_origin(phase_shift, vert_shift, amplitude, period), center_col, center_row)


def wave_translate(phase_shift: float, vert_shift: float, amplitude: float, period: float,
                   direction: Literal["vertical", "horizontal"] = "vertical",
                   reference: float = 0.0) -> ImageTrans:
    """Синусоидальный сдвиг вдоль одной оси.

    Для "vertical" волна считается по расстоянию вдоль col (row зафиксирован
    на `reference`) и сдвигает изображение по row; "horizontal" наоборот.
    """
    if direction not in ("vertical", "horizontal"):
        raise ValueError(f"Неизвестное направление волны: {direction!r}")
    compress = _compression(period)
    phase_factor = phase_shift * compress

    def offset(d: float) -> float:
        return amplitude * math.cos(compress * d - phase_factor) + vert_shift

    def transform(image: Image[T]) -> Image[T]:
        if direction == "vertical":
            def waved(col: float, row: float) -> T:
                d = distance((col, reference), (0.0, reference))
                return image(col, row - offset(d))
        else:
            def waved(col: float, row: float) -> T:
                d = distance((reference, row), (reference, 0.0))
                return image(col - offset(d), row)
        return waved
    return transform


def pulse_color(time: float, phase_shift: float, vert_shift: float, amplitude: float, period: float) -> ImageTrans:
    """Чисто временной вариант: одна интенсивность `F(time)` на всё изображение."""
    factor = wave_value(time, phase_shift, vert_shift, amplitude, period)

    def transform(image: Image[Color]) -> Image[Color]:
        def pulsed(col: float, row: float) -> Color:
            return scale_color(image(col, row), factor)
        return pulsed
    return transform
