import math

import pytest

from tweenkit.errors import NotArmedError
from tweenkit.progress import DurationPolicy, ProgressSource, SpeedPolicy


def test_duration_progress_and_finish():
    src = ProgressSource.over(2.0)
    src.arm(10.0)
    assert src.advance(10.0) == (0.0, False)
    assert src.advance(11.0) == (0.5, False)
    assert src.advance(12.0) == (1.0, True)
    assert src.advance(15.0) == (1.0, True)


def test_advance_before_arm_raises():
    src = ProgressSource.over(1.0)
    with pytest.raises(NotArmedError):
        src.advance(0.0)


def test_reversed_source_counts_down():
    src = ProgressSource.over(2.0, reversed=True)
    src.arm(0.0)
    assert src.advance(0.5) == (0.75, False)
    assert src.advance(2.0) == (0.0, True)


def test_reverse_requires_rearm():
    src = ProgressSource.over(1.0)
    src.arm(0.0)
    src.advance(0.5)
    src.reverse()
    assert src.reversed
    assert not src.armed
    with pytest.raises(NotArmedError):
        src.advance(0.75)
    src.arm(10.0)
    assert src.advance(10.25) == (0.75, False)


def test_clamped_before_direction_flip():
    src = ProgressSource.over(1.0, reversed=True)
    t, finished = src.progress_at(50.0)
    assert t == 0.0 and finished
    src = ProgressSource.over(1.0)
    assert src.progress_at(-3.0) == (0.0, False)


def test_speed_policy():
    src = ProgressSource.at_speed(2.0, 4.0)
    assert src.policy.duration == 2.0
    src.arm(0.0)
    assert src.advance(1.0) == (0.5, False)
    assert src.advance(2.0) == (1.0, True)


def test_zero_distance_is_complete_immediately():
    src = ProgressSource.at_speed(1.0, 0.0)
    src.arm(0.0)
    t, finished = src.advance(0.0)
    assert (t, finished) == (1.0, True)
    assert not math.isnan(t)

    back = ProgressSource.at_speed(1.0, 0.0, reversed=True)
    back.arm(0.0)
    assert back.advance(0.0) == (0.0, True)


@pytest.mark.parametrize("duration", [0, -1, float("nan")])
def test_invalid_duration(duration):
    with pytest.raises(ValueError):
        DurationPolicy(duration)


@pytest.mark.parametrize("speed,distance", [(0, 1), (-2, 1), (1, -1), (float("nan"), 1)])
def test_invalid_speed(speed, distance):
    with pytest.raises(ValueError):
        SpeedPolicy(speed, distance)


def test_produce_sequence_yields_final_frame(clock):
    src = ProgressSource.over(1.0)
    values = []
    for t in src.produce_sequence(clock):
        values.append(t)
        clock.advance(0.25)
    assert values == [0.0, 0.25, 0.5, 0.75, 1.0]
    assert not src.armed


def test_produce_sequence_fresh_iterators(clock):
    src = ProgressSource.over(0.5)
    first = list(_drain(src.produce_sequence(clock), clock))
    second = list(_drain(src.produce_sequence(clock), clock))
    assert first == second == [0.0, 0.5, 1.0]


def _drain(it, clock):
    for t in it:
        yield t
        clock.advance(0.25)
