"""Драйвер анимации: время -> изображение -> растр -> показ.

Состояния:
- IDLE: создан, ещё не запущен.
- RUNNING: каждый `tick()` вычисляет `animation(time)`, растеризует кадр,
  передаёт буфер на показ и только затем увеличивает время на фиксированный шаг.
- STOPPED: остановлен явным `stop()` либо ошибкой кадра.

Драйвер однопоточный: кадры не перекрываются. Отмена проверяется между тиками.
"""
from __future__ import annotations

import enum
import logging
import threading
from typing import Callable, Optional

from funimage.models.color import Color
from funimage.models.image_model import Animation
from funimage.models.pixel_buffer import PixelBuffer
from funimage.services.raster_service import RasterService

logger = logging.getLogger(__name__)


class AnimationState(enum.Enum):
    IDLE = "idle"
    RUNNING = "running"
    STOPPED = "stopped"


class AnimationDriver:
    def __init__(
        self,
        animation: Animation[Color],
        buffer: PixelBuffer,
        raster: RasterService,
        present: Callable[[PixelBuffer], None],
        time_step: float = 1.0,
        start_time: float = 0.0,
    ) -> None:
        if time_step <= 0:
            raise ValueError(f"time_step должен быть положительным, получено {time_step}")
        self._animation = animation
        self._buffer = buffer
        self._raster = raster
        self._present = present
        self._time_step = time_step
        self._time = start_time
        self._frame = 0
        self._state = AnimationState.IDLE

    @property
    def state(self) -> AnimationState:
        return self._state

    @property
    def time(self) -> float:
        return self._time

    @property
    def frame(self) -> int:
        """Число полностью показанных кадров."""
        return self._frame

    def start(self) -> None:
        if self._state is not AnimationState.IDLE:
            raise RuntimeError(f"Нельзя запустить анимацию из состояния {self._state.value}")
        self._state = AnimationState.RUNNING
        logger.info("Animation started at t=%.2f (step %.2f)", self._time, self._time_step)

    def stop(self) -> None:
        if self._state is AnimationState.STOPPED:
            return
        self._state = AnimationState.STOPPED
        logger.info("Animation stopped after %d frames at t=%.2f", self._frame, self._time)

    def tick(self) -> None:
        """Один кадр: вычислить, растеризовать, показать, сдвинуть время.

        Ошибка при вычислении кадра останавливает драйвер и пробрасывается дальше.
        """
        if self._state is not AnimationState.RUNNING:
            raise RuntimeError(f"tick() в состоянии {self._state.value}")
        try:
            image = self._animation(self._time)
            self._raster.rasterize(image, self._buffer)
        except Exception:
            self.stop()
            raise
        self._present(self._buffer)
        self._time += self._time_step
        self._frame += 1

    def run(self, cancel: threading.Event, max_frames: Optional[int] = None, interval: float = 0.0) -> None:
        """Блокирующий цикл до отмены `cancel` (или `max_frames` кадров).

        Запускает драйвер, если он ещё в IDLE.
        """
        if self._state is AnimationState.IDLE:
            self.start()
        while self._state is AnimationState.RUNNING and not cancel.is_set():
            if max_frames is not None and self._frame >= max_frames:
                break
            self.tick()
            if interval > 0:
                # wait() doubles as an early exit on cancel
                cancel.wait(interval)
        self.stop()
