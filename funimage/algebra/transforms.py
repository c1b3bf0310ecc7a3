"""Геометрические преобразования изображений.

Все преобразования задаются как pullback через `coord_transform`: функция
отображает координату результата в координату, которую нужно взять из исходника.
Позиционированные варианты (`scale`, `rotate`) собираются через `about_point`.
"""
from __future__ import annotations

import math

from funimage.algebra.images import compose, coord_transform
from funimage.models.errors import InvalidScaleFactor
from funimage.models.image_model import ImageTrans


def translate(col_delta: float, row_delta: float) -> ImageTrans:
    """Сдвигает изображение на (col_delta, row_delta)."""
    return coord_transform(lambda col, row: (col - col_delta, row - row_delta))


def scale_about_origin(factor: float) -> ImageTrans:
    """Масштаб относительно начала координат; `factor` > 1 увеличивает.

    Raises:
        InvalidScaleFactor: при `factor == 0`, до какого-либо деления.
    """
    if factor == 0:
        raise InvalidScaleFactor("Коэффициент масштабирования не может быть равен нулю")
    return coord_transform(lambda col, row: (col / factor, row / factor))


def rotate_about_origin(angle: float) -> ImageTrans:
    """Поворот по часовой стрелке вокруг начала координат, угол в радианах."""
    cos_angle = math.cos(angle)
    sin_angle = math.sin(angle)
    return coord_transform(
        lambda col, row: (col * cos_angle - row * sin_angle, col * sin_angle + row * cos_angle)
    )


def about_point(image_trans: ImageTrans, center_col: float, center_row: float) -> ImageTrans:
    """Применяет преобразование, заданное относительно начала координат, вокруг точки.

    Сдвиг центра в начало координат, само преобразование, сдвиг обратно.
    """
    return compose(
        translate(-center_col, -center_row),
        image_trans,
        translate(center_col, center_row),
    )


def scale(factor: float, center_col: float, center_row: float) -> ImageTrans:
    return about_point(scale_about_origin(factor), center_col, center_row)


def rotate(angle: float, center_col: float, center_row: float) -> ImageTrans:
    """Поворот по часовой стрелке вокруг точки, угол в радианах."""
    return about_point(rotate_about_origin(angle), center_col, center_row)
