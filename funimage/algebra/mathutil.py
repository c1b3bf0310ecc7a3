"""Вспомогательные числовые функции: расстояние, положительный остаток, ограничение интенсивности."""
from __future__ import annotations

import math
from typing import Tuple, TypeVar

Number = TypeVar("Number", int, float)

MIN_INTENSITY = 0
MAX_INTENSITY = 255


def distance(p1: Tuple[float, float], p2: Tuple[float, float]) -> float:
    """Евклидово расстояние между двумя точками (col, row)."""
    return math.hypot(p1[0] - p2[0], p1[1] - p2[1])


def positive_mod(x: Number, y: Number) -> Number:
    """Остаток `x mod y`, сдвинутый в [0, y) при отрицательном `x`.

    Сырой остаток берётся с усечением к нулю (знак делимого), затем к
    отрицательному результату прибавляется `y`. Работает одинаково для int и float.
    """
    m = abs(x) % abs(y)
    if x < 0:
        m = -m
    if m < 0:
        m += y
        # tiny negative floats round up to exactly y
        if m >= y:
            m = type(m)(0)
    return m


def clamp_intensity(value: float) -> int:
    """Ограничивает значение диапазоном [0, 255]."""
    return int(max(MIN_INTENSITY, min(MAX_INTENSITY, value)))
