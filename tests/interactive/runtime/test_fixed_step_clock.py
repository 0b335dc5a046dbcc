import pytest

from frameweave.interactive.runtime.frame_clock import FixedStepClock


def test_fixed_step_clock_counts_whole_steps_and_keeps_remainder():
    clock = FixedStepClock(0.01)
    assert clock.frame_index == 0
    assert clock.t == 0.0

    assert clock.advance(0.035) == 3
    assert clock.frame_index == 3
    assert clock.t == pytest.approx(0.03)
    assert clock.remainder == pytest.approx(0.005)

    assert clock.advance(0.006) == 1
    assert clock.frame_index == 4
    assert clock.remainder == pytest.approx(0.001)


def test_fixed_step_clock_small_elapsed_does_not_tick():
    clock = FixedStepClock(0.5)
    assert clock.advance(0.2) == 0
    assert clock.advance(0.2) == 0
    assert clock.advance(0.2) == 1
    assert clock.t == pytest.approx(0.5)


def test_fixed_step_clock_ignores_negative_elapsed():
    clock = FixedStepClock(0.1)
    assert clock.advance(-1.0) == 0
    assert clock.remainder == 0.0


def test_fixed_step_clock_rejects_non_positive_step():
    with pytest.raises(ValueError):
        FixedStepClock(0.0)
