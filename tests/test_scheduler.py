import pytest

from ngsnake.scheduler import TickScheduler


class Counter:
    def __init__(self):
        self.calls = 0

    def __call__(self):
        self.calls += 1


def test_ticks_at_interval():
    cb = Counter()
    s = TickScheduler(cb)
    s.start(150, now_ms=0)
    assert s.poll(100) == 0
    assert s.poll(150) == 1
    assert s.poll(200) == 0
    assert s.poll(300) == 1
    assert cb.calls == 2


def test_unarmed_scheduler_never_ticks():
    cb = Counter()
    s = TickScheduler(cb)
    assert not s.armed
    assert s.poll(10_000) == 0
    assert cb.calls == 0


def test_stalled_frame_runs_a_single_tick():
    cb = Counter()
    s = TickScheduler(cb)
    s.start(100, now_ms=0)
    assert s.poll(1000) == 1
    assert s.poll(1050) == 0
    assert s.poll(1100) == 1
    assert cb.calls == 2


def test_set_interval_rearms_from_now():
    cb = Counter()
    s = TickScheduler(cb)
    s.start(200, now_ms=0)
    s.set_interval(100, now_ms=150)
    assert s.interval_ms == 100
    assert s.poll(200) == 0
    assert s.poll(250) == 1


def test_stop():
    cb = Counter()
    s = TickScheduler(cb)
    s.start(100, now_ms=0)
    s.stop()
    assert not s.armed
    assert s.poll(500) == 0


def test_rejects_non_positive_interval():
    with pytest.raises(ValueError):
        TickScheduler(Counter()).start(0, now_ms=0)
