"""Tick counter for the progress engine."""

from tick_progress.config import ProgressConfig


class Clock:
    def __init__(self, interval_ms: float) -> None:
        if interval_ms <= 0:
            raise ValueError("interval_ms must be positive")
        self._interval_ms = interval_ms
        self._tick_number = 0

    @classmethod
    def for_config(cls, config: ProgressConfig) -> "Clock":
        return cls(config.tick_interval_ms)

    @property
    def interval_ms(self) -> float:
        return self._interval_ms

    @property
    def interval(self) -> float:
        return self._interval_ms / 1000.0

    @property
    def tick_number(self) -> int:
        return self._tick_number

    @property
    def elapsed(self) -> float:
        """Nominal seconds covered by the ticks so far."""
        return self._tick_number * self.interval

    def advance(self) -> int:
        self._tick_number += 1
        return self._tick_number

    def reset(self, tick_number: int = 0) -> None:
        self._tick_number = tick_number
