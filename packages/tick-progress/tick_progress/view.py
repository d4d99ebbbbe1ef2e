"""Render model for a progress bar."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from tick_progress.config import ProgressConfig

DEFAULT_HEIGHT = 25
DEFAULT_BACKGROUND = "blue"


def display_width(progress: float, end_progress_value: float) -> float:
    """Width in percent; never wider than the end of the range."""
    return min(progress, end_progress_value)


def transition(config: ProgressConfig) -> str:
    return f"width {config.transition_speed}s {config.transition_effect}"


@dataclass(frozen=True, slots=True)
class BarView:
    """What a renderer needs to draw the bar and expose it to assistive tech."""

    value_now: float
    value_min: float
    value_max: float
    width: float
    style: dict[str, Any] = field(default_factory=dict)
    class_name: str | None = None
    role: str = "progressbar"

    def attributes(self) -> dict[str, Any]:
        """Flatten into HTML-style attribute names."""
        attrs: dict[str, Any] = {
            "role": self.role,
            "aria-valuenow": self.value_now,
            "aria-valuemin": self.value_min,
            "aria-valuemax": self.value_max,
            "style": dict(self.style),
        }
        if self.class_name is not None:
            attrs["class"] = self.class_name
        return attrs


def render_bar(
    progress: float,
    config: ProgressConfig,
    *,
    height: int = DEFAULT_HEIGHT,
    background: str = DEFAULT_BACKGROUND,
    class_name: str | None = None,
    style: Mapping[str, Any] | None = None,
) -> BarView:
    width = display_width(progress, config.end_progress_value)
    merged: dict[str, Any] = {
        "width": f"{width}%",
        "height": f"{height}px",
        "transition": transition(config),
        "background": background,
    }
    # User style wins over computed keys.
    if style:
        merged.update(style)
    return BarView(
        value_now=progress,
        value_min=config.start_progress_value,
        value_max=config.end_progress_value,
        width=width,
        style=merged,
        class_name=class_name,
    )
