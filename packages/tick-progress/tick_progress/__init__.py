"""tick-progress - Simulated progress for operations that report none."""

from tick_progress.clock import Clock
from tick_progress.config import ProgressConfig
from tick_progress.drivers import AsyncioDriver, Driver, ManualDriver, ThreadDriver
from tick_progress.engine import ProgressEngine
from tick_progress.host import ProgressBar
from tick_progress.types import (
    ConfigError,
    EngineClosedError,
    Phase,
    ProgressObserver,
    ProgressState,
)
from tick_progress.view import BarView, render_bar

__all__ = [
    "ProgressEngine",
    "ProgressConfig",
    "ProgressBar",
    "ProgressState",
    "Phase",
    "Clock",
    "Driver",
    "ManualDriver",
    "ThreadDriver",
    "AsyncioDriver",
    "BarView",
    "render_bar",
    "ProgressObserver",
    "ConfigError",
    "EngineClosedError",
]
