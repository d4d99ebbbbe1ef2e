"""Tests for the manual, thread, and asyncio timer drivers."""

import asyncio
import threading
import time

import pytest
from tick_progress.config import ProgressConfig
from tick_progress.drivers import AsyncioDriver, ManualDriver, ThreadDriver
from tick_progress.engine import ProgressEngine

# Reaches the stop threshold in a couple of dozen ticks.
FAST = ProgressConfig(
    tick_interval_ms=1,
    increment_speed=0.5,
    middle_phase_speed=1,
    final_phase_speed=0.5,
)


# --- ManualDriver ---

class TestManualDriver:

    def test_rejects_non_positive_interval(self):
        driver = ManualDriver()
        with pytest.raises(ValueError):
            driver.schedule(0, lambda: None)

    def test_step_fires_each_schedule_once(self):
        driver = ManualDriver()
        calls = []
        driver.schedule(0.03, lambda: calls.append("a"))
        driver.schedule(0.5, lambda: calls.append("b"))
        driver.step()
        assert calls == ["a", "b"]
        assert driver.pending == 2

    def test_cancelled_handle_does_not_fire(self):
        driver = ManualDriver()
        calls = []
        handle = driver.schedule(0.03, lambda: calls.append(1))
        handle.cancel()
        assert handle.active is False
        driver.step()
        assert calls == []
        assert driver.pending == 0

    def test_run_stops_when_nothing_pending(self):
        driver = ManualDriver()
        calls = []
        handle = None

        def fire():
            calls.append(1)
            if len(calls) == 3:
                handle.cancel()

        handle = driver.schedule(0.03, fire)
        driver.run(100)
        assert len(calls) == 3

    def test_advance_fires_per_whole_interval(self):
        driver = ManualDriver()
        calls = []
        driver.schedule(0.1, lambda: calls.append(1))
        driver.advance(0.25)
        assert len(calls) == 2
        driver.advance(0.07)
        assert len(calls) == 3

    def test_advance_stops_after_cancel_in_callback(self):
        driver = ManualDriver()
        calls = []
        handle = None

        def fire():
            calls.append(1)
            handle.cancel()

        handle = driver.schedule(0.1, fire)
        driver.advance(1.05)
        assert calls == [1]


# --- ThreadDriver ---

class TestThreadDriver:

    def test_runs_engine_to_ceiling(self):
        driver = ThreadDriver()
        engine = ProgressEngine(FAST, driver)
        done = threading.Event()

        def watch(value):
            if not engine.running and value > 0:
                done.set()

        engine.on_progress(watch)
        engine.activate()
        try:
            assert done.wait(timeout=5)
        finally:
            driver.shutdown(timeout=1)
        assert engine.progress == pytest.approx(96)

    def test_no_ticks_after_deactivate(self):
        driver = ThreadDriver()
        engine = ProgressEngine(ProgressConfig(tick_interval_ms=1), driver)
        engine.activate()
        time.sleep(0.02)
        engine.deactivate()
        ticks = engine.tick_number
        time.sleep(0.02)
        driver.shutdown(timeout=1)
        assert engine.tick_number == ticks

    def test_shutdown_cancels_handles(self):
        driver = ThreadDriver()
        calls = []
        handle = driver.schedule(0.001, lambda: calls.append(1))
        driver.shutdown(timeout=1)
        assert handle.active is False
        count = len(calls)
        time.sleep(0.01)
        assert len(calls) == count

    def test_rejects_non_positive_interval(self):
        with pytest.raises(ValueError):
            ThreadDriver().schedule(-1, lambda: None)


# --- AsyncioDriver ---

class TestAsyncioDriver:

    def test_runs_engine_to_ceiling(self):
        async def main():
            engine = ProgressEngine(FAST, AsyncioDriver())
            engine.activate()

            async def settle():
                while engine.running:
                    await asyncio.sleep(0.001)

            await asyncio.wait_for(settle(), timeout=5)
            return engine

        engine = asyncio.run(main())
        assert engine.progress == pytest.approx(96)
        assert engine.running is False

    def test_no_ticks_after_deactivate(self):
        async def main():
            engine = ProgressEngine(ProgressConfig(tick_interval_ms=1), AsyncioDriver())
            engine.activate()
            await asyncio.sleep(0.02)
            engine.deactivate()
            ticks = engine.tick_number
            await asyncio.sleep(0.02)
            return ticks, engine.tick_number

        before, after = asyncio.run(main())
        assert before == after

    def test_explicit_loop(self):
        loop = asyncio.new_event_loop()
        try:
            calls = []
            handle = AsyncioDriver(loop).schedule(0.001, lambda: calls.append(1))
            loop.run_until_complete(asyncio.sleep(0.02))
            handle.cancel()
            assert handle.active is False
            assert calls
        finally:
            loop.close()

    def test_requires_running_loop_without_explicit_loop(self):
        with pytest.raises(RuntimeError):
            AsyncioDriver().schedule(0.03, lambda: None)
