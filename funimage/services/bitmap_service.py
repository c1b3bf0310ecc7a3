"""Загрузка растров с диска для оборачивания в функциональные изображения.

Принципы:
- SRP: класс отвечает только за загрузку и базовое извлечение свойств.
- Ошибка загрузки никогда не подменяется пустой картинкой: бросается `BitmapLoadFailure`.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import numpy as np
from PIL import Image, UnidentifiedImageError

from funimage.models.errors import BitmapLoadFailure
from funimage.models.image_model import BitmapData

logger = logging.getLogger(__name__)


class BitmapService:
    def load_bitmap(self, file_path: str | Path) -> BitmapData:
        """Загружает изображение с диска и возвращает пиксели вместе с метаданными.

        Args:
            file_path: Путь до файла изображения.

        Returns:
            `BitmapData` c массивом RGB формы (height, width, 3), размерами, режимом и размером файла.

        Raises:
            BitmapLoadFailure: если путь не существует, не указывает на файл
                или файл не распознан как изображение.
        """
        path = Path(file_path)
        if not path.exists() or not path.is_file():
            raise BitmapLoadFailure(f"Файл не найден: {path}")

        try:
            with Image.open(path) as pil_image:
                mode = pil_image.mode
                rgb = pil_image.convert("RGB")
        except (UnidentifiedImageError, OSError) as exc:
            raise BitmapLoadFailure(f"Файл не является изображением: {path}") from exc

        width, height = rgb.size
        if width == 0 or height == 0:
            raise BitmapLoadFailure(f"Пустое изображение: {path}")
        try:
            size_bytes: Optional[int] = path.stat().st_size
        except OSError:
            size_bytes = None

        pixels = np.asarray(rgb, dtype=np.uint8)
        pixels.setflags(write=False)
        logger.info("Loaded bitmap %s (%dx%d, %s)", path, width, height, mode)
        return BitmapData(
            path=path,
            pixels=pixels,
            width=width,
            height=height,
            mode=mode,
            size_bytes=size_bytes,
        )
