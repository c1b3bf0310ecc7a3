"""Драйвер анимации: состояния, порядок тика, отмена, ошибки кадра."""
from __future__ import annotations

import threading

import pytest

from funimage.algebra.images import constant_image
from funimage.models.color import Color
from funimage.models.pixel_buffer import PixelBuffer
from funimage.services.animation_service import AnimationDriver, AnimationState
from funimage.services.raster_service import RasterService


def red_ramp(time):
    return constant_image(Color(int(time * 10), 0, 0))


class Recorder:
    """Запоминает красную компоненту каждого показанного кадра."""
    def __init__(self):
        self.reds = []

    def __call__(self, buffer):
        self.reds.append(buffer.get(0, 0).red)


def make_driver(animation=red_ramp, present=None, **kwargs):
    return AnimationDriver(
        animation=animation,
        buffer=PixelBuffer(2, 2),
        raster=RasterService(),
        present=present or Recorder(),
        **kwargs,
    )


class TestLifecycle:
    def test_starts_idle(self):
        driver = make_driver()
        assert driver.state is AnimationState.IDLE
        assert driver.time == 0.0
        assert driver.frame == 0

    def test_tick_requires_running(self):
        with pytest.raises(RuntimeError):
            make_driver().tick()

    def test_start_twice_rejected(self):
        driver = make_driver()
        driver.start()
        with pytest.raises(RuntimeError):
            driver.start()

    def test_stop_is_idempotent(self):
        driver = make_driver()
        driver.start()
        driver.stop()
        driver.stop()
        assert driver.state is AnimationState.STOPPED
        with pytest.raises(RuntimeError):
            driver.tick()

    def test_invalid_time_step(self):
        with pytest.raises(ValueError):
            make_driver(time_step=0)


class TestTick:
    def test_resolve_then_present_then_advance(self):
        recorder = Recorder()
        driver = make_driver(present=recorder, time_step=0.5, start_time=1.0)
        driver.start()
        for _ in range(3):
            driver.tick()
        assert recorder.reds == [10, 15, 20]
        assert driver.time == pytest.approx(2.5)
        assert driver.frame == 3

    def test_frame_failure_stops_driver(self):
        recorder = Recorder()

        def failing(time):
            if time >= 1.0:
                raise ArithmeticError("bad frame")
            return red_ramp(time)

        driver = make_driver(animation=failing, present=recorder)
        driver.start()
        driver.tick()
        with pytest.raises(ArithmeticError):
            driver.tick()
        assert driver.state is AnimationState.STOPPED
        assert driver.frame == 1
        assert driver.time == 1.0
        assert recorder.reds == [0]


class TestRun:
    def test_max_frames(self):
        recorder = Recorder()
        driver = make_driver(present=recorder)
        driver.run(threading.Event(), max_frames=4)
        assert driver.frame == 4
        assert recorder.reds == [0, 10, 20, 30]
        assert driver.state is AnimationState.STOPPED

    def test_already_cancelled(self):
        cancel = threading.Event()
        cancel.set()
        driver = make_driver()
        driver.run(cancel)
        assert driver.frame == 0
        assert driver.state is AnimationState.STOPPED

    def test_cancel_checked_between_ticks(self):
        cancel = threading.Event()
        recorder = Recorder()

        def present(buffer):
            recorder(buffer)
            if len(recorder.reds) == 2:
                cancel.set()

        driver = make_driver(present=present)
        driver.run(cancel)
        assert driver.frame == 2
        assert recorder.reds == [0, 10]
