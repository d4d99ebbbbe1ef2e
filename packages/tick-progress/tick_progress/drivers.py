"""Periodic timer drivers the progress engine schedules its ticks on.

A driver hands out one :class:`TimerHandle` per ``schedule()`` call. The
handle fires ``callback`` every ``interval`` seconds until ``cancel()``.

- :class:`ManualDriver` fires only when stepped, for tests and game loops.
- :class:`ThreadDriver` runs each schedule on a daemon thread.
- :class:`AsyncioDriver` chains ``loop.call_later`` on an event loop.
"""
from __future__ import annotations

import asyncio
import logging
import threading
import time
from typing import Callable, Protocol

logger = logging.getLogger(__name__)

TimerCallback = Callable[[], None]


class TimerHandle(Protocol):
    @property
    def active(self) -> bool: ...

    def cancel(self) -> None: ...

    def join(self, timeout: float | None = None) -> None: ...


class Driver(Protocol):
    def schedule(self, interval: float, callback: TimerCallback) -> TimerHandle: ...


# --- Manual ---


class _ManualHandle:
    def __init__(self, interval: float, callback: TimerCallback) -> None:
        self.interval = interval
        self.callback = callback
        self.elapsed = 0.0
        self._active = True

    @property
    def active(self) -> bool:
        return self._active

    def cancel(self) -> None:
        self._active = False

    def join(self, timeout: float | None = None) -> None:
        pass


class ManualDriver:
    """Driver that fires scheduled callbacks only when told to.

    ``step()`` fires every live schedule once, as if one interval passed.
    ``advance(dt)`` accumulates wall time and fires each schedule once per
    whole interval covered, the way a fixed-step game loop would.
    """

    def __init__(self) -> None:
        self._handles: list[_ManualHandle] = []

    def schedule(self, interval: float, callback: TimerCallback) -> _ManualHandle:
        if interval <= 0:
            raise ValueError("interval must be positive")
        handle = _ManualHandle(interval, callback)
        self._handles.append(handle)
        return handle

    @property
    def pending(self) -> int:
        """Number of schedules that have not been cancelled."""
        return sum(1 for h in self._handles if h.active)

    def step(self) -> None:
        for handle in list(self._handles):
            if handle.active:
                handle.callback()
        self._prune()

    def run(self, n: int) -> None:
        for _ in range(n):
            if not self.pending:
                break
            self.step()

    def advance(self, dt: float) -> None:
        for handle in list(self._handles):
            if not handle.active:
                continue
            handle.elapsed += dt
            while handle.active and handle.elapsed >= handle.interval:
                handle.elapsed -= handle.interval
                handle.callback()
        self._prune()

    def _prune(self) -> None:
        self._handles = [h for h in self._handles if h.active]


# --- Thread ---


class _ThreadHandle:
    def __init__(self, interval: float, callback: TimerCallback, name: str) -> None:
        self._interval = interval
        self._callback = callback
        self._cancelled = threading.Event()
        self._thread = threading.Thread(target=self._run, name=name, daemon=True)

    @property
    def active(self) -> bool:
        return not self._cancelled.is_set() and self._thread.is_alive()

    def start(self) -> None:
        self._thread.start()

    def cancel(self) -> None:
        # Never joins: cancel may be called from the callback itself.
        self._cancelled.set()

    def join(self, timeout: float | None = None) -> None:
        if threading.current_thread() is not self._thread:
            self._thread.join(timeout)

    def _run(self) -> None:
        delay = self._interval
        while not self._cancelled.wait(delay):
            start = time.monotonic()
            self._callback()
            elapsed = time.monotonic() - start
            delay = max(self._interval - elapsed, 0.0)
        logger.debug("Timer thread %s exiting", self._thread.name)


class ThreadDriver:
    """Driver that runs each schedule on its own daemon thread.

    Callbacks fire on the timer thread; the progress engine serialises them
    with its own lock.
    """

    def __init__(self, name: str = "tick-progress-timer") -> None:
        self._name = name
        self._handles: list[_ThreadHandle] = []

    def schedule(self, interval: float, callback: TimerCallback) -> _ThreadHandle:
        if interval <= 0:
            raise ValueError("interval must be positive")
        handle = _ThreadHandle(interval, callback, self._name)
        self._handles = [h for h in self._handles if h.active]
        self._handles.append(handle)
        handle.start()
        return handle

    def shutdown(self, timeout: float | None = None) -> None:
        """Cancel every schedule and wait for the timer threads to exit."""
        handles, self._handles = self._handles, []
        for handle in handles:
            handle.cancel()
        for handle in handles:
            handle.join(timeout)


# --- Asyncio ---


class _AsyncioHandle:
    def __init__(
        self,
        loop: asyncio.AbstractEventLoop,
        interval: float,
        callback: TimerCallback,
    ) -> None:
        self._loop = loop
        self._interval = interval
        self._callback = callback
        self._timer: asyncio.TimerHandle | None = loop.call_later(interval, self._fire)

    @property
    def active(self) -> bool:
        return self._timer is not None

    def cancel(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def join(self, timeout: float | None = None) -> None:
        pass

    def _fire(self) -> None:
        if self._timer is None:
            return
        self._callback()
        if self._timer is not None:
            self._timer = self._loop.call_later(self._interval, self._fire)


class AsyncioDriver:
    """Driver that schedules ticks on an asyncio event loop.

    Without an explicit loop, ``schedule()`` must be called from a coroutine
    or callback running on the loop that should own the timer.
    """

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop

    def schedule(self, interval: float, callback: TimerCallback) -> _AsyncioHandle:
        if interval <= 0:
            raise ValueError("interval must be positive")
        loop = self._loop if self._loop is not None else asyncio.get_running_loop()
        return _AsyncioHandle(loop, interval, callback)
