"""Progress configuration dataclass and property intake."""
from __future__ import annotations

import math
from dataclasses import dataclass, fields
from typing import Any, Mapping

from tick_progress.types import ConfigError

# Animation option names accepted by from_props(), mapped to field names.
_PROP_ALIASES: dict[str, str] = {
    "transitionSpeed": "transition_speed",
    "transitionEffect": "transition_effect",
    "stopThreshold": "stop_threshold",
    "intervalDelay": "tick_interval_ms",
    "incrementSpeed": "increment_speed",
    "middlePhaseSpeed": "middle_phase_speed",
    "finalPhaseSpeed": "final_phase_speed",
    "firstPhaseDuration": "first_phase_duration",
    "lastPhaseDuration": "last_phase_duration",
}


@dataclass(frozen=True, slots=True)
class ProgressConfig:
    """Immutable configuration for a progress engine.

    Attributes:
        start_progress_value: Progress value representing 0% elapsed.
        end_progress_value: Progress value representing 100% elapsed.
        increment_speed: Accumulator increment per tick while ramping.
        middle_phase_speed: Accumulator increment per tick while accelerating.
        final_phase_speed: Accumulator increment per tick while settling.
        first_phase_duration: Percent of the range that ends the ramp phase.
        last_phase_duration: Percent of the range that ends the accelerate
            phase. Only checked once the ramp phase is over.
        stop_threshold: Percent of ``end_progress_value`` the bar may reach
            before completion is signalled.
        tick_interval_ms: Wall-clock spacing between ticks.
        transition_speed: Seconds of the rendered width transition.
        transition_effect: Timing function of the rendered width transition.
    """

    start_progress_value: float = 0
    end_progress_value: float = 100
    increment_speed: float = 0.005
    middle_phase_speed: float = 0.3
    final_phase_speed: float = 0.002
    first_phase_duration: float = 70
    last_phase_duration: float = 40
    stop_threshold: float = 96
    tick_interval_ms: float = 30
    transition_speed: float = 0.3
    transition_effect: str = "ease-out"

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if f.name == "transition_effect":
                continue
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ConfigError(f"{f.name} must be a number, got {value!r}")
            if not math.isfinite(value):
                raise ConfigError(f"{f.name} must be finite, got {value!r}")

        if self.end_progress_value <= self.start_progress_value:
            raise ConfigError(
                "end_progress_value must be greater than start_progress_value "
                f"({self.end_progress_value} <= {self.start_progress_value})"
            )
        for name in ("increment_speed", "middle_phase_speed", "final_phase_speed"):
            if getattr(self, name) <= 0:
                raise ConfigError(f"{name} must be positive")
        for name in ("first_phase_duration", "last_phase_duration"):
            if getattr(self, name) < 0:
                raise ConfigError(f"{name} must not be negative")
        if self.tick_interval_ms <= 0:
            raise ConfigError("tick_interval_ms must be positive")
        if self.stop_threshold <= 0:
            raise ConfigError("stop_threshold must be positive")
        ceiling = self.end_progress_value * (self.stop_threshold / 100)
        if ceiling <= self.start_progress_value:
            raise ConfigError(
                f"stop_threshold {self.stop_threshold}% of end_progress_value "
                f"({ceiling}) does not exceed start_progress_value "
                f"({self.start_progress_value})"
            )
        if self.transition_speed < 0:
            raise ConfigError("transition_speed must not be negative")
        if not isinstance(self.transition_effect, str) or not self.transition_effect:
            raise ConfigError("transition_effect must be a non-empty string")

    @property
    def progress_range(self) -> float:
        return self.end_progress_value - self.start_progress_value

    @property
    def interval(self) -> float:
        """Tick spacing in seconds."""
        return self.tick_interval_ms / 1000.0

    @classmethod
    def from_props(
        cls,
        animation: Mapping[str, Any] | None = None,
        start_progress_value: float = 0,
        end_progress_value: float = 100,
    ) -> ProgressConfig:
        """Build a config from component-style properties.

        ``animation`` may use either the camelCase option names
        (``intervalDelay``, ``stopThreshold``, ...) or the field names.
        Options left out take their defaults.
        """
        known = {f.name for f in fields(cls)} - {
            "start_progress_value",
            "end_progress_value",
        }
        kwargs: dict[str, Any] = {}
        for key, value in (animation or {}).items():
            name = _PROP_ALIASES.get(key, key)
            if name not in known:
                raise ConfigError(f"Unknown animation option {key!r}")
            if name in kwargs:
                raise ConfigError(f"Animation option {name!r} given twice")
            kwargs[name] = value
        return cls(
            start_progress_value=start_progress_value,
            end_progress_value=end_progress_value,
            **kwargs,
        )
