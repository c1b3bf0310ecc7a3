"""Модели данных для функциональных изображений.

Принципы:
- Изображение не хранится как данные: это функция от вещественной координаты (col, row).
- Единственная «настоящая» структура данных здесь: загруженный растр `BitmapData`.
- Неизменяемость (`frozen=True`) для предсказуемости.
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional, Tuple, TypeVar

import numpy as np

T = TypeVar("T")
U = TypeVar("U")
V = TypeVar("V")

Coord = Tuple[float, float]
# (col, row) -> value
Image = Callable[[float, float], T]
CoordTrans = Callable[[float, float], Coord]
ImageTrans = Callable[[Image], Image]
# time -> image
Animation = Callable[[float], Image]


@dataclass(frozen=True)
class BitmapData:
    """Неизменяемый растр, загруженный с диска.

    Fields:
        path: Путь к исходному файлу.
        pixels: Массив `uint8` формы (height, width, 3).
        width: Ширина, px.
        height: Высота, px.
        mode: Исходный режим PIL, например "RGBA".
        size_bytes: Размер файла, если доступен.
    """
    path: Path
    pixels: np.ndarray
    width: int
    height: int
    mode: str
    size_bytes: Optional[int]
