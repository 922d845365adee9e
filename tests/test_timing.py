import math

import pytest

from volition.timing import MAX_CACHED_DELTA_TIMES, FrameTimer


class FakeClock:
    def __init__(self, now=0):
        self.now = now
        self.sleeps = []

    def __call__(self):
        return self.now

    def sleep(self, seconds):
        self.sleeps.append(seconds)
        self.now += max(1, int(seconds * 1000))


def make_timer(clock, **kwargs):
    return FrameTimer(clock=clock, sleep=clock.sleep, **kwargs)


def test_ticks_follow_clock():
    clock = FakeClock(123)
    timer = make_timer(clock)
    assert timer.ticks() == 123
    clock.now = 456
    assert timer.ticks() == 456


def test_default_clock_is_monotonic():
    timer = FrameTimer()
    first = timer.ticks()
    second = timer.ticks()
    assert 0 <= first <= second


def test_delta_time_is_time_since_last_tick():
    clock = FakeClock()
    timer = make_timer(clock)
    clock.now = 40
    timer.tick_frame()
    assert timer.delta_time == 40.0
    assert timer.last_tick == 40
    clock.now = 65
    timer.tick_frame()
    assert timer.delta_time == 25.0


def test_fixed_updates_account_for_all_time():
    clock = FakeClock()
    timer = make_timer(clock, target_fixed_fps=50)
    total = 0
    for step in (45, 7, 13, 100, 3):
        clock.now += step
        total += step
        timer.tick_frame()
        assert 0 <= timer.accumulated_fixed_time < timer.fixed_delta_time
    # Every millisecond is either consumed by fixed updates or still pending.
    clock2 = FakeClock()
    timer2 = make_timer(clock2, target_fixed_fps=50)
    clock2.now = 45
    timer2.tick_frame()
    consumed = timer2.num_fixed_updates * timer2.fixed_delta_time
    assert consumed + timer2.accumulated_fixed_time == pytest.approx(45)
    assert timer2.num_fixed_updates >= 1


def test_fps_is_average_over_cache():
    clock = FakeClock()
    timer = make_timer(clock)
    for _ in range(MAX_CACHED_DELTA_TIMES):
        clock.now += 20
        timer.tick_frame()
    assert timer.fps * 20 == pytest.approx(1000)


def test_fps_first_frame_counts_empty_slots():
    clock = FakeClock()
    timer = make_timer(clock)
    clock.now = 30
    timer.tick_frame()
    assert timer.fps * (30 / MAX_CACHED_DELTA_TIMES) == pytest.approx(1000)


def test_fps_infinite_with_zero_deltas():
    clock = FakeClock()
    timer = make_timer(clock)
    timer.tick_frame()
    assert timer.fps == math.inf


def test_frame_limit_from_target_fps():
    timer = make_timer(FakeClock(), target_fps=50)
    assert timer.ms_frame_limit == 20


def test_sync_frame_without_limit_does_not_wait():
    clock = FakeClock()
    timer = make_timer(clock, limit_fps=False)
    timer.tick_frame()
    timer.sync_frame()
    assert clock.sleeps == []
    assert clock.now == 0


def test_sync_frame_waits_for_frame_limit():
    clock = FakeClock()
    timer = make_timer(clock, limit_fps=True, target_fps=50)
    clock.now = 100
    timer.tick_frame()
    clock.now += 3
    timer.sync_frame()
    assert clock.sleeps
    assert timer.ticks() - timer.last_tick >= timer.ms_frame_limit


def test_sync_frame_returns_when_frame_already_long():
    clock = FakeClock()
    timer = make_timer(clock, limit_fps=True, target_fps=50)
    timer.tick_frame()
    clock.now += 500
    timer.sync_frame()
    assert clock.sleeps == []


@pytest.mark.parametrize("kwargs", [{"target_fps": 0}, {"target_fixed_fps": 0}, {"target_fps": -5}])
def test_non_positive_rates_rejected(kwargs):
    with pytest.raises(ValueError):
        FrameTimer(**kwargs)