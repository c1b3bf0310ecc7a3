"""Контроллер приложения: выбор демо, растеризация и таймер анимации.

SOLID:
- SRP: класс связывает UI с реестром демо и сервисами, без алгебры изображений.
- DIP: реестр и конфигурация передаются явно, глобального состояния нет.
Clean Code:
- Один тик таймера = один полный кадр; отмена проверяется перед каждым тиком.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

import customtkinter as ctk

from funimage.config import AppConfig
from funimage.demos import Demo, DemoRegistry
from funimage.models.pixel_buffer import PixelBuffer
from funimage.services.animation_service import AnimationDriver, AnimationState
from funimage.services.raster_service import RasterService
from funimage.ui.bottom_bar import BottomBar
from funimage.ui.frame_view import FrameView
from funimage.ui.sidebar import Sidebar

logger = logging.getLogger(__name__)


@dataclass
class AppController:
    """Связывает элементы UI с прикладной логикой.

    Ответственности:
    - Бинд событий (UI -> контроллер).
    - Построение выбранного демо через `DemoRegistry`.
    - Однократная растеризация неподвижного изображения.
    - Планирование тиков `AnimationDriver` через `window.after`.
    """
    view: FrameView
    sidebar: Sidebar
    bottom: BottomBar
    window: ctk.CTk
    registry: DemoRegistry
    config: AppConfig

    _raster_service: RasterService = field(init=False)
    _driver: Optional[AnimationDriver] = field(default=None, init=False)
    _after_id: Optional[str] = field(default=None, init=False)

    def __post_init__(self) -> None:
        self._raster_service = RasterService(workers=self.config.raster_workers)

    def bind_events(self) -> None:
        """Регистрирует обработчики событий между UI-компонентами."""
        self.sidebar.on_demo_change = self.select_demo
        self.bottom.on_stop = self.stop_animation
        self.window.protocol("WM_DELETE_WINDOW", self._handle_close)

    def select_demo(self, name: str) -> None:
        """Останавливает текущую анимацию и показывает демо `name`."""
        self.stop_animation()
        try:
            demo = self.registry.get(name)
        except KeyError as exc:
            logger.error("%s", exc.args[0])
            self.bottom.set_status(str(exc.args[0]))
            return

        logger.info("Demo selected: %s (%s, %dx%d)", demo.name, demo.kind, demo.width, demo.height)
        self.sidebar.set_demo_value(demo.name)
        self.sidebar.set_demo_info(demo)
        self.view.set_frame_size(demo.width, demo.height)
        self.view.clear()
        self.bottom.set_progress(None, None)

        try:
            value = demo.build()
            if demo.kind == "animation":
                self._start_animation(demo, value)
            else:
                self._draw_still(demo, value)
        except Exception as exc:
            logger.exception("Demo %s failed", demo.name)
            self.bottom.set_status(f"Ошибка: {exc}")

    def stop_animation(self) -> None:
        if self._after_id is not None:
            self.window.after_cancel(self._after_id)
            self._after_id = None
        if self._driver is not None:
            self._driver.stop()
            self._driver = None
        self.bottom.set_running(False)

    # ---- Helpers ----
    def _draw_still(self, demo: Demo, image) -> None:
        buffer = self._raster_service.render(image, demo.width, demo.height)
        self.view.present(buffer)
        self.bottom.set_status(demo.name)

    def _start_animation(self, demo: Demo, animation) -> None:
        self._driver = AnimationDriver(
            animation=animation,
            buffer=PixelBuffer(demo.width, demo.height),
            raster=self._raster_service,
            present=self.view.present,
            time_step=self.config.time_step,
        )
        self._driver.start()
        self.bottom.set_running(True)
        self.bottom.set_status(demo.name)
        self._schedule_tick()

    def _schedule_tick(self) -> None:
        self._after_id = self.window.after(self.config.frame_interval_ms, self._on_tick)

    def _on_tick(self) -> None:
        self._after_id = None
        driver = self._driver
        if driver is None or driver.state is not AnimationState.RUNNING:
            return
        try:
            driver.tick()
        except Exception as exc:
            logger.exception("Frame at t=%.2f failed", driver.time)
            self.bottom.set_status(f"Ошибка кадра: {exc}")
            self.stop_animation()
            return
        self.bottom.set_progress(driver.frame, driver.time)
        self._schedule_tick()

    def _handle_close(self) -> None:
        self.stop_animation()
        self.window.destroy()
