"""Иерархия ошибок функциональной графики.

Принципы:
- Все ошибки наследуются от `FunImageError`, чтобы вызывающий код мог ловить их одним `except`.
- Каждая ошибка также наследует подходящий встроенный тип (`ValueError`, `OSError`),
  поэтому существующие обработчики продолжают работать.
"""
from __future__ import annotations


class FunImageError(Exception):
    """Базовая ошибка пакета."""


class InvalidScaleFactor(FunImageError, ValueError):
    """Коэффициент масштабирования равен нулю."""


class EmptySequence(FunImageError, ValueError):
    """`combine_many` вызван без изображений."""


class InvalidWavePeriod(FunImageError, ValueError):
    """Период волны равен нулю."""


class BitmapLoadFailure(FunImageError, OSError):
    """Растровый файл не найден или не распознан как изображение."""
