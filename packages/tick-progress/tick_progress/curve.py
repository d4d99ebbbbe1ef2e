"""Growth curve and thresholds for the progress engine."""
from __future__ import annotations

import math

from tick_progress.config import ProgressConfig
from tick_progress.types import Phase

_LOG_BASE = math.log(11)


def shape(accumulator: float, progress_range: float) -> float:
    """Map the accumulator onto an offset from the start value.

    Below 1 the curve is ``sqrt(acc) * 10`` so the very first tick shows
    motion. From 1 on it is logarithmic and reaches the full range at 10.
    """
    if accumulator < 1:
        return math.sqrt(accumulator) * 10
    return math.log(accumulator + 1) / _LOG_BASE * progress_range


def candidate_progress(config: ProgressConfig, accumulator: float) -> float:
    return config.start_progress_value + shape(accumulator, config.progress_range)


def phase_threshold(config: ProgressConfig, percent: float) -> float:
    """Progress value at ``percent`` of the configured range."""
    return config.start_progress_value + (percent / 100) * config.progress_range


def increment(config: ProgressConfig, phase: Phase) -> float:
    if phase is Phase.RAMP:
        return config.increment_speed
    if phase is Phase.ACCELERATE:
        return config.middle_phase_speed
    return config.final_phase_speed


def next_phase(config: ProgressConfig, phase: Phase, candidate: float) -> Phase:
    """Return the phase after evaluating this tick's candidate.

    Only the exit of the current phase is checked, ramp first, so at most
    one transition happens per tick.
    """
    if phase is Phase.RAMP:
        if candidate >= phase_threshold(config, config.first_phase_duration):
            return Phase.ACCELERATE
    elif phase is Phase.ACCELERATE:
        if candidate >= phase_threshold(config, config.last_phase_duration):
            return Phase.SETTLE
    return phase


def target_ceiling(config: ProgressConfig, completed: bool) -> float:
    if completed:
        return config.end_progress_value
    return config.end_progress_value * (config.stop_threshold / 100)
