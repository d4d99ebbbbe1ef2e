"""Shared types and errors for the progress engine."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Callable

ProgressObserver = Callable[[float], None]


class Phase(enum.Enum):
    """Increment regime the accumulator is currently in."""

    RAMP = "ramp"
    ACCELERATE = "accelerate"
    SETTLE = "settle"


@dataclass(frozen=True, slots=True)
class ProgressState:
    progress: float
    accumulator: float
    phase: Phase
    running: bool
    completed: bool
    tick_number: int


class ConfigError(ValueError):
    """Raised when a configuration is rejected at construction."""


class EngineClosedError(RuntimeError):
    """Raised when activating an engine that has been closed."""
