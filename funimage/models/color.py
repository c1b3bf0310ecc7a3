"""Модель цвета RGB с ограничением компонент диапазоном [0, 255].

Принципы:
- Неизменяемость (`frozen=True`): цвет можно безопасно разделять между изображениями.
- Инвариант держится на каждом конструировании: значения вне диапазона
  обрезаются, а не отклоняются.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from funimage.algebra.mathutil import clamp_intensity


@dataclass(frozen=True)
class Color:
    """Цвет из трёх компонент.

    Fields:
        red: Красный, 0..255.
        green: Зелёный, 0..255.
        blue: Синий, 0..255.
    """
    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "red", clamp_intensity(self.red))
        object.__setattr__(self, "green", clamp_intensity(self.green))
        object.__setattr__(self, "blue", clamp_intensity(self.blue))

    @classmethod
    def from_rgb_int(cls, rgb: int) -> "Color":
        """Создаёт цвет из упакованного целого 0xRRGGBB (старшие биты игнорируются)."""
        return cls((rgb >> 16) & 0xFF, (rgb >> 8) & 0xFF, rgb & 0xFF)

    def as_tuple(self) -> Tuple[int, int, int]:
        return self.red, self.green, self.blue

    @property
    def hex(self) -> str:
        return f"#{self.red:02X}{self.green:02X}{self.blue:02X}"


BLACK = Color(0, 0, 0)
WHITE = Color(255, 255, 255)
RED = Color(255, 0, 0)
GREEN = Color(0, 255, 0)
BLUE = Color(0, 0, 255)
