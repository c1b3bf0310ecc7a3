"""Общие фикстуры: изображение-«координатомер» и небольшие растры на диске."""
from __future__ import annotations

from pathlib import Path

import pytest
from PIL import Image as PILImage


@pytest.fixture
def coords_image():
    """Изображение, возвращающее саму координату; удобно проверять pullback."""
    return lambda col, row: (col, row)


@pytest.fixture
def bitmap_file(tmp_path: Path) -> Path:
    """PNG 3x2: верхняя строка красный/зелёный/синий, нижняя чёрный/белый/серый."""
    img = PILImage.new("RGB", (3, 2))
    img.putdata([
        (255, 0, 0), (0, 255, 0), (0, 0, 255),
        (0, 0, 0), (255, 255, 255), (128, 128, 128),
    ])
    path = tmp_path / "tile.png"
    img.save(path)
    return path
