"""ProgressEngine - simulated progress, phases, ceiling, and commands."""
from __future__ import annotations

import logging
import threading

from tick_progress import curve
from tick_progress.clock import Clock
from tick_progress.config import ProgressConfig
from tick_progress.drivers import Driver, ManualDriver, TimerHandle
from tick_progress.types import (
    EngineClosedError,
    Phase,
    ProgressObserver,
    ProgressState,
)

logger = logging.getLogger(__name__)


class ProgressEngine:
    """Synthesises a monotonically increasing progress value.

    The engine owns a single timer handle obtained from ``driver``. While
    running, every timer firing calls :meth:`tick`. Observers registered
    with :meth:`on_progress` receive the progress value after each tick and
    after ``activate``, ``complete`` and ``reset``.

    All operations take one re-entrant lock, so a threaded driver can fire
    ticks while other threads issue commands. Observers run under that lock.
    """

    def __init__(
        self,
        config: ProgressConfig | None = None,
        driver: Driver | None = None,
    ) -> None:
        self._config = config if config is not None else ProgressConfig()
        self._driver: Driver = driver if driver is not None else ManualDriver()
        self._clock = Clock.for_config(self._config)
        self._lock = threading.RLock()
        self._observers: list[ProgressObserver] = []

        self._progress: float = self._config.start_progress_value
        self._accumulator: float = 0.0
        self._phase = Phase.RAMP
        self._completed = False
        self._closed = False

        self._timer: TimerHandle | None = None
        self._generation = 0

    # --- Properties ---

    @property
    def config(self) -> ProgressConfig:
        return self._config

    @property
    def driver(self) -> Driver:
        return self._driver

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def progress(self) -> float:
        return self._progress

    @property
    def accumulator(self) -> float:
        return self._accumulator

    @property
    def phase(self) -> Phase:
        return self._phase

    @property
    def running(self) -> bool:
        return self._timer is not None

    @property
    def completed(self) -> bool:
        return self._completed

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def tick_number(self) -> int:
        return self._clock.tick_number

    @property
    def state(self) -> ProgressState:
        with self._lock:
            return ProgressState(
                progress=self._progress,
                accumulator=self._accumulator,
                phase=self._phase,
                running=self.running,
                completed=self._completed,
                tick_number=self._clock.tick_number,
            )

    # --- Observers ---

    def on_progress(self, observer: ProgressObserver) -> None:
        with self._lock:
            self._observers.append(observer)

    def remove_observer(self, observer: ProgressObserver) -> None:
        with self._lock:
            try:
                self._observers.remove(observer)
            except ValueError:
                pass

    def _emit(self) -> None:
        value = self._progress
        for observer in list(self._observers):
            try:
                observer(value)
            except Exception:
                logger.exception("Progress observer %r failed", observer)

    # --- Commands ---

    def activate(self) -> None:
        with self._lock:
            if self._closed:
                raise EngineClosedError("Cannot activate a closed engine")
            if self._timer is not None:
                return
            if self._progress >= self._config.end_progress_value:
                return
            self._generation += 1
            generation = self._generation
            self._timer = self._driver.schedule(
                self._config.interval, lambda: self._on_timer(generation)
            )
            logger.debug(
                "Activated at progress=%.3f phase=%s", self._progress, self._phase.value
            )
            self._emit()

    def deactivate(self) -> None:
        with self._lock:
            if self._stop_timer():
                logger.debug("Deactivated at progress=%.3f", self._progress)

    def complete(self) -> None:
        with self._lock:
            self._stop_timer()
            self._progress = self._config.end_progress_value
            self._accumulator = 0.0
            self._phase = Phase.RAMP
            self._completed = True
            logger.debug("Completed after %d ticks", self._clock.tick_number)
            self._emit()

    def set_completed(self, completed: bool) -> None:
        """Set the completed level without snapping progress.

        While completed, ticking may run all the way to the end value.
        """
        with self._lock:
            self._completed = completed

    def reset(self, completed: bool = False) -> None:
        """Return to the start value.

        ``completed`` is the level the completed flag holds afterwards, so a
        host that still signals completion can run the fresh curve to the end.
        """
        with self._lock:
            self._stop_timer()
            self._progress = self._config.start_progress_value
            self._accumulator = 0.0
            self._phase = Phase.RAMP
            self._completed = completed
            self._clock.reset()
            logger.debug("Reset to %.3f", self._progress)
            self._emit()

    def close(self, timeout: float | None = None) -> None:
        """Release the timer and refuse further activation. Idempotent.

        Waits up to ``timeout`` for a threaded timer to exit. The wait happens
        outside the engine lock, and is skipped when called from the timer
        thread itself.
        """
        with self._lock:
            timer = self._timer
            self._stop_timer()
            self._closed = True
        if timer is not None:
            timer.join(timeout)

    def __enter__(self) -> ProgressEngine:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # --- Ticking ---

    def tick(self) -> None:
        with self._lock:
            cfg = self._config
            self._clock.advance()
            self._accumulator += curve.increment(cfg, self._phase)
            candidate = curve.candidate_progress(cfg, self._accumulator)

            phase = curve.next_phase(cfg, self._phase, candidate)
            if phase is not self._phase:
                logger.debug(
                    "Phase %s -> %s at tick %d (progress=%.3f)",
                    self._phase.value,
                    phase.value,
                    self._clock.tick_number,
                    candidate,
                )
                self._phase = phase

            ceiling = curve.target_ceiling(cfg, self._completed)
            if candidate >= ceiling:
                self._progress = ceiling
                self._stop_timer()
                logger.debug(
                    "Reached ceiling %.3f at tick %d", ceiling, self._clock.tick_number
                )
            elif candidate > self._progress:
                self._progress = candidate
            self._emit()

    def _on_timer(self, generation: int) -> None:
        with self._lock:
            # A firing from a schedule that was cancelled while it waited
            # on the lock.
            if generation != self._generation or self._timer is None:
                return
            self.tick()

    def _stop_timer(self) -> bool:
        if self._timer is None:
            return False
        self._timer.cancel()
        self._timer = None
        self._generation += 1
        return True
