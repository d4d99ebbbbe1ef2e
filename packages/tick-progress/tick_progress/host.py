"""ProgressBar - flag-driven host that owns an engine and renders it."""
from __future__ import annotations

import logging
from typing import Any, Callable, Mapping

from tick_progress.config import ProgressConfig
from tick_progress.drivers import Driver
from tick_progress.engine import ProgressEngine
from tick_progress.view import DEFAULT_BACKGROUND, DEFAULT_HEIGHT, BarView, render_bar

logger = logging.getLogger(__name__)


class ProgressBar:
    """Drives a :class:`ProgressEngine` from ``active``/``completed``/``reset`` flags.

    ``active`` is a level: true keeps the engine ticking, false pauses it.
    ``completed`` and ``reset`` act on their rising edge only. When a reset
    fires while ``active`` is still true, ticking restarts from the start
    value.

    The held ``completed`` level also sets the engine's ceiling: a reset while
    ``completed`` is still true lets the fresh curve run to the end value.

    ``on_progress`` is called with every value the engine emits.
    """

    def __init__(
        self,
        *,
        active: bool = False,
        completed: bool = False,
        reset: bool = False,
        animation: Mapping[str, Any] | None = None,
        start_progress_value: float = 0,
        end_progress_value: float = 100,
        height: int = DEFAULT_HEIGHT,
        background: str = DEFAULT_BACKGROUND,
        class_name: str | None = None,
        style: Mapping[str, Any] | None = None,
        on_progress: Callable[[float], None] | None = None,
        driver: Driver | None = None,
    ) -> None:
        config = ProgressConfig.from_props(
            animation,
            start_progress_value=start_progress_value,
            end_progress_value=end_progress_value,
        )
        self._engine = ProgressEngine(config, driver)
        self.height = height
        self.background = background
        self.class_name = class_name
        self.style: dict[str, Any] = dict(style or {})

        self._active = False
        self._completed = False
        self._reset = False
        if on_progress is not None:
            self._engine.on_progress(on_progress)

        self.update(active=active, completed=completed, reset=reset)

    @property
    def engine(self) -> ProgressEngine:
        return self._engine

    @property
    def config(self) -> ProgressConfig:
        return self._engine.config

    @property
    def progress(self) -> float:
        return self._engine.progress

    @property
    def active(self) -> bool:
        return self._active

    @property
    def completed(self) -> bool:
        return self._completed

    @property
    def reset(self) -> bool:
        return self._reset

    def update(
        self,
        *,
        active: bool | None = None,
        completed: bool | None = None,
        reset: bool | None = None,
    ) -> None:
        """Apply new flag values. ``None`` leaves a flag unchanged."""
        activate = False

        if completed is not None:
            rising = completed and not self._completed
            self._completed = completed
            if rising:
                self._engine.complete()
            else:
                self._engine.set_completed(completed)

        if reset is not None:
            rising = reset and not self._reset
            self._reset = reset
            if rising:
                self._engine.reset(completed=self._completed)
                activate = True

        if active is not None:
            if active and not self._active:
                activate = True
            self._active = active

        if not self._active:
            self._engine.deactivate()
        elif activate:
            self._engine.activate()

    def render(self) -> BarView:
        return render_bar(
            self._engine.progress,
            self._engine.config,
            height=self.height,
            background=self.background,
            class_name=self.class_name,
            style=self.style,
        )

    def close(self) -> None:
        logger.debug("Closing progress bar at %.3f", self._engine.progress)
        self._engine.close()
