"""Алгебра изображений: изображение это функция (col, row) -> значение.

Принципы:
- Комбинаторы не мутируют исходные изображения, а возвращают новые функции.
- Все геометрические преобразования строятся из одного примитива `coord_transform`
  (pullback: координата назначения отображается в координату источника).
- Композиция преобразований `and_then` ассоциативна, но не коммутативна.
"""
from __future__ import annotations

from functools import reduce
from typing import Callable, Sequence

from funimage.algebra.mathutil import positive_mod
from funimage.models.color import Color
from funimage.models.errors import EmptySequence
from funimage.models.image_model import BitmapData, CoordTrans, Image, ImageTrans, T, U, V


def constant_image(value: T) -> Image[T]:
    """Изображение, которое в любой точке равно `value`."""
    def image(col: float, row: float) -> T:
        return value
    return image


def map_image(f: Callable[[T], U], image: Image[T]) -> Image[U]:
    """Поточечное преобразование значений: `result(c) = f(image(c))`."""
    def mapped(col: float, row: float) -> U:
        return f(image(col, row))
    return mapped


def combine_image(image_a: Image[T], image_b: Image[U], combine: Callable[[T, U], V]) -> Image[V]:
    """Поточечное объединение двух изображений."""
    def combined(col: float, row: float) -> V:
        return combine(image_a(col, row), image_b(col, row))
    return combined


def combine_many(images: Sequence[Image[T]], combine: Callable[[T, T], T]) -> Image[T]:
    """Левая свёртка `combine_image` по последовательности изображений.

    Raises:
        EmptySequence: если последовательность пуста (нейтрального элемента нет).
    """
    images = list(images)
    if not images:
        raise EmptySequence("combine_many: нужна хотя бы одна картинка")
    return reduce(lambda acc, img: combine_image(acc, img, combine), images[1:], images[0])


def coord_transform(trans: CoordTrans) -> ImageTrans:
    """Преобразование изображения через отображение координат: `new(c) = old(trans(c))`."""
    def transform(image: Image[T]) -> Image[T]:
        def transformed(col: float, row: float) -> T:
            return image(*trans(col, row))
        return transformed
    return transform


def identity(image: Image[T]) -> Image[T]:
    return image


def and_then(first: ImageTrans, second: ImageTrans) -> ImageTrans:
    """`and_then(f, g)(image) == g(f(image))`."""
    def chained(image: Image[T]) -> Image[T]:
        return second(first(image))
    return chained


def compose(*transforms: ImageTrans) -> ImageTrans:
    """Цепочка `t1 and_then t2 and_then ...`; без аргументов это `identity`."""
    return reduce(and_then, transforms, identity)


def bitmap_image(bitmap: BitmapData) -> Image[Color]:
    """Оборачивает растр в изображение, бесконечно замощающее плоскость.

    Координата усекается к нулю и берётся по положительному модулю ширины/высоты.
    """
    pixels = bitmap.pixels
    width, height = bitmap.width, bitmap.height

    def image(col: float, row: float) -> Color:
        x = positive_mod(int(col), width)
        y = positive_mod(int(row), height)
        r, g, b = pixels[y, x]
        return Color(int(r), int(g), int(b))
    return image
