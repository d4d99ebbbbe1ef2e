"""Tests pinning the ramp/accelerate/settle sequence with default speeds.

The accelerate phase ends at ``last_phase_duration`` (40%), which is below
``first_phase_duration`` (70%). It is only evaluated once the ramp is over,
so with the defaults the engine spends exactly one tick accelerating.
"""

import math

import pytest
from tick_progress.config import ProgressConfig
from tick_progress.drivers import ManualDriver
from tick_progress.engine import ProgressEngine
from tick_progress.types import Phase


def trace(config=None, ticks=1000):
    """Run ``ticks`` ticks, recording (tick, phase after tick, accumulator, progress)."""
    driver = ManualDriver()
    engine = ProgressEngine(config, driver)
    engine.activate()
    rows = []
    for _ in range(ticks):
        if not engine.running:
            break
        driver.step()
        rows.append((engine.tick_number, engine.phase, engine.accumulator, engine.progress))
    return rows


class TestDefaultSequence:

    def test_ramp_until_seventy_percent(self):
        rows = trace()
        ramp = [r for r in rows if r[1] is Phase.RAMP]
        assert ramp[-1][0] == 871
        assert all(r[3] < 70 for r in ramp)

    def test_accelerate_entered_at_tick_872(self):
        rows = trace()
        tick, phase, accumulator, progress = rows[871]
        assert tick == 872
        assert phase is Phase.ACCELERATE
        assert accumulator == pytest.approx(872 * 0.005)
        assert progress >= 70
        assert progress == pytest.approx(math.log(5.36) / math.log(11) * 100)

    def test_accelerate_lasts_one_tick(self):
        rows = trace()
        accelerate = [r[0] for r in rows if r[1] is Phase.ACCELERATE]
        assert accelerate == [872]

    def test_middle_speed_applied_once(self):
        rows = trace()
        _, phase, accumulator, _ = rows[872]
        assert phase is Phase.SETTLE
        assert accumulator == pytest.approx(4.36 + 0.3)

    def test_final_speed_after_settle(self):
        rows = trace()
        steps = [b[2] - a[2] for a, b in zip(rows[872:900], rows[873:901])]
        assert all(s == pytest.approx(0.002) for s in steps)

    def test_ramp_speed_before_transition(self):
        rows = trace()
        steps = [b[2] - a[2] for a, b in zip(rows[:871], rows[1:872])]
        assert all(s == pytest.approx(0.005) for s in steps)


def test_last_threshold_checked_only_after_ramp():
    """Progress passes 40% while ramping without leaving the ramp."""
    rows = trace()
    passed_forty = [r for r in rows if r[3] >= 40]
    assert passed_forty[0][1] is Phase.RAMP


def test_higher_last_threshold_keeps_accelerating():
    """With last > first the accelerate phase spans several ticks."""
    rows = trace(ProgressConfig(first_phase_duration=30, last_phase_duration=60))
    accelerate = [r for r in rows if r[1] is Phase.ACCELERATE]
    assert len(accelerate) > 1
    assert all(r[3] < 60 for r in accelerate)
    settle = [r for r in rows if r[1] is Phase.SETTLE]
    assert settle[0][3] >= 60


def test_zero_durations_leave_ramp_on_first_tick():
    rows = trace(ProgressConfig(first_phase_duration=0, last_phase_duration=0), ticks=3)
    assert [r[1] for r in rows] == [Phase.ACCELERATE, Phase.SETTLE, Phase.SETTLE]
