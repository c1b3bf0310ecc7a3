"""Настройки запуска: размер окна, частота кадров, шаг времени, параметры растеризации.

Принципы:
- Неизменяемость (`frozen=True`), проверка значений при создании.
- Командная строка разбирается здесь же, чтобы `main` только собирал приложение.
"""
from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import Optional, Sequence

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass(frozen=True)
class AppConfig:
    """Параметры приложения.

    Fields:
        demo: Имя демо из реестра.
        width: Ширина растра, px.
        height: Высота растра, px.
        frame_interval_ms: Пауза таймера между кадрами анимации.
        time_step: На сколько растёт время за кадр.
        raster_workers: Число потоков растеризации (1 = последовательно).
        bitmap_path: Файл для демо с растром (необязательно).
        log_level: Уровень журнала.
        list_demos: Только вывести список демо и выйти.
    """
    demo: str = "wave"
    width: int = 400
    height: int = 300
    frame_interval_ms: int = 100
    time_step: float = 1.0
    raster_workers: int = 1
    bitmap_path: Optional[str] = None
    log_level: str = "INFO"
    list_demos: bool = False

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Размер должен быть положительным: {self.width}x{self.height}")
        if self.frame_interval_ms <= 0:
            raise ValueError(f"Интервал кадра должен быть положительным: {self.frame_interval_ms}")
        if self.time_step <= 0:
            raise ValueError(f"Шаг времени должен быть положительным: {self.time_step}")
        if self.raster_workers < 1:
            raise ValueError(f"Число потоков должно быть >= 1: {self.raster_workers}")
        if self.log_level.upper() not in LOG_LEVELS:
            raise ValueError(f"Неизвестный уровень журнала: {self.log_level}")


def build_parser() -> argparse.ArgumentParser:
    defaults = AppConfig()
    parser = argparse.ArgumentParser(
        prog="funimage",
        description="Функциональные изображения и анимации: картинка как функция от координат.",
    )
    parser.add_argument("demo", nargs="?", default=defaults.demo, help=f"Имя демо (по умолчанию: {defaults.demo}).")
    parser.add_argument("--width", type=int, default=defaults.width, help="Ширина растра, px.")
    parser.add_argument("--height", type=int, default=defaults.height, help="Высота растра, px.")
    parser.add_argument(
        "--interval",
        type=int,
        default=defaults.frame_interval_ms,
        help="Интервал между кадрами анимации, мс.",
    )
    parser.add_argument("--time-step", type=float, default=defaults.time_step, help="Прирост времени за кадр.")
    parser.add_argument("--workers", type=int, default=defaults.raster_workers, help="Потоки растеризации.")
    parser.add_argument("--bitmap", default=None, help="Растровый файл для демо bitmap и bitmap-wave.")
    parser.add_argument(
        "--log-level",
        default=defaults.log_level,
        type=str.upper,
        choices=LOG_LEVELS,
        help="Уровень журнала.",
    )
    parser.add_argument("--list", action="store_true", help="Показать доступные демо и выйти.")
    return parser


def parse_args(argv: Optional[Sequence[str]] = None) -> AppConfig:
    """Разбирает командную строку в `AppConfig`.

    Raises:
        SystemExit: при синтаксической ошибке или недопустимом значении (через `parser.error`).
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        return AppConfig(
            demo=args.demo,
            width=args.width,
            height=args.height,
            frame_interval_ms=args.interval,
            time_step=args.time_step,
            raster_workers=args.workers,
            bitmap_path=args.bitmap,
            log_level=args.log_level,
            list_demos=args.list,
        )
    except ValueError as exc:
        parser.error(str(exc))
