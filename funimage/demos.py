"""Реестр демо: имя -> построитель изображения или анимации.

Принципы:
- Никаких заранее собранных глобальных картинок: реестр создаётся явно
  при старте (`build_registry`) и передаётся тем, кому нужен.
- Построители без аргументов; растр загружается только при построении демо,
  поэтому ошибка загрузки всплывает в момент выбора, а не подменяется пустой картинкой.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Callable, Dict, Iterator, List, Literal, Optional, Union

from funimage.algebra.colors import add_colors, blend_colors, bool_to_color, intensity_to_color
from funimage.algebra.images import bitmap_image, combine_many, map_image
from funimage.algebra.shapes import checkerboard, disk, grid, rings
from funimage.algebra.transforms import about_point, rotate, scale, translate
from funimage.algebra.waves import pulse_color, wave_color, wave_intensity, wave_scale, wave_translate
from funimage.models.color import BLACK, BLUE, GREEN, RED, WHITE, Color
from funimage.models.image_model import Animation, Image
from funimage.services.bitmap_service import BitmapService

logger = logging.getLogger(__name__)

DemoKind = Literal["image", "animation"]
DemoValue = Union[Image, Animation]


@dataclass(frozen=True)
class Demo:
    """Описание демо.

    Fields:
        name: Имя для выбора из командной строки и списка.
        description: Короткое описание для UI.
        kind: "image" (неподвижное) | "animation".
        build: Построитель `Image[Color]` или `Animation[Color]`.
        width: Ширина растра, px.
        height: Высота растра, px.
    """
    name: str
    description: str
    kind: DemoKind
    build: Callable[[], DemoValue]
    width: int
    height: int


class DemoRegistry:
    def __init__(self) -> None:
        self._demos: Dict[str, Demo] = {}

    def register(self, demo: Demo) -> None:
        if demo.name in self._demos:
            raise ValueError(f"Демо уже зарегистрировано: {demo.name}")
        self._demos[demo.name] = demo

    def get(self, name: str) -> Demo:
        try:
            return self._demos[name]
        except KeyError:
            known = ", ".join(self.names())
            raise KeyError(f"Неизвестное демо {name!r}; доступны: {known}") from None

    def names(self) -> List[str]:
        return list(self._demos)

    def __contains__(self, name: object) -> bool:
        return name in self._demos

    def __len__(self) -> int:
        return len(self._demos)

    def __iter__(self) -> Iterator[Demo]:
        return iter(self._demos.values())


def build_registry(width: int, height: int, bitmap_path: Optional[str] = None,
                   bitmap_service: Optional[BitmapService] = None) -> DemoRegistry:
    """Собирает реестр демо для растра `width` x `height`.

    Демо с растром регистрируются, только если задан `bitmap_path`.
    """
    cx, cy = width / 2.0, height / 2.0
    registry = DemoRegistry()

    def add(name: str, description: str, kind: DemoKind, build: Callable[[], DemoValue]) -> None:
        registry.register(Demo(name, description, kind, build, width, height))

    def test_grid() -> Image[Color]:
        return grid(20, 2)

    def rotated_grid() -> Image[Color]:
        return rotate(math.pi / 6, cx, cy)(test_grid())

    def wave_animation() -> Animation[Color]:
        base = test_grid()
        return lambda t: wave_scale(t * 2, 2, 0.8, 100, cx, cy)(base)

    def color_wave_animation() -> Animation[Color]:
        base = grid(20, 2, line_color=BLUE, background=Color(255, 220, 120))
        return lambda t: wave_color(t * 4, 0.6, 0.4, 80, cx, cy)(base)

    def translate_wave_animation() -> Animation[Color]:
        base = test_grid()
        return lambda t: about_point(wave_translate(t * 3, 0, 10, 80, "vertical"), cx, cy)(base)

    def pulse_animation() -> Animation[Color]:
        base = rotated_grid()
        return lambda t: pulse_color(t, 0, 0.4, 0.6, 20)(base)

    def checker_image() -> Image[Color]:
        return map_image(bool_to_color(RED, WHITE), checkerboard(25))

    def rings_image() -> Image[Color]:
        return translate(cx, cy)(map_image(intensity_to_color(BLACK, GREEN), rings(40)))

    def blend_image() -> Image[Color]:
        layers = [
            translate(cx, cy)(map_image(bool_to_color(RED, BLACK), disk(min(cx, cy) * 0.8))),
            map_image(bool_to_color(BLUE, WHITE), checkerboard(30)),
            rings_image(),
        ]
        return combine_many(layers, blend_colors)

    def interference_image() -> Image[Color]:
        ripples = wave_intensity(0, 0.5, 0.5, 30)
        left = translate(cx - width / 6.0, cy)(map_image(intensity_to_color(BLACK, RED), ripples))
        right = translate(cx + width / 6.0, cy)(map_image(intensity_to_color(BLACK, BLUE), ripples))
        return combine_many([left, right], add_colors)

    add("grid", "Чёрно-белая сетка 20 px", "image", test_grid)
    add("rotated-grid", "Сетка, повёрнутая на 30° вокруг центра", "image", rotated_grid)
    add("wave", "Рябь масштаба вокруг центра поверх сетки", "animation", wave_animation)
    add("color-wave", "Бегущая волна яркости", "animation", color_wave_animation)
    add("translate-wave", "Синусоидальный вертикальный сдвиг", "animation", translate_wave_animation)
    add("pulse", "Пульсация яркости во времени", "animation", pulse_animation)
    add("checkerboard", "Шахматная доска: bool -> цвет", "image", checker_image)
    add("rings", "Кольца: интенсивность -> цвет", "image", rings_image)
    add("blend", "Смешивание трёх изображений", "image", blend_image)
    add("interference", "Сумма двух волновых полей", "image", interference_image)

    if bitmap_path is not None:
        service = bitmap_service or BitmapService()

        def bitmap_still() -> Image[Color]:
            return bitmap_image(service.load_bitmap(bitmap_path))

        def bitmap_wave() -> Animation[Color]:
            rotated = rotate(math.pi / 4, 0, 0)(bitmap_still())
            base = scale(0.1, 0, 0)(rotated)
            return lambda t: wave_scale(t * 2, 2, 0.8, 100, cx, cy)(base)

        add("bitmap", f"Растр {bitmap_path}, замощённый во все стороны", "image", bitmap_still)
        add("bitmap-wave", "Повёрнутый уменьшенный растр с рябью", "animation", bitmap_wave)

    logger.debug("Registered %d demos: %s", len(registry), ", ".join(registry.names()))
    return registry
