"""Tests for frame clocks."""

import pytest
from spin.clock import FrameClock, ManualFrameClock


def test_now_uses_time_fn():
    """Test clock reads its timestamp from the supplied time function."""
    clock = FrameClock(time_fn=lambda: 1234.5)
    assert clock.now() == 1234.5


def test_default_time_is_monotonic():
    """Test default clock never moves backwards."""
    clock = FrameClock()
    first = clock.now()
    second = clock.now()
    assert second >= first


def test_pump_runs_requested_callbacks_in_order():
    """Test pump() invokes callbacks in request order with one timestamp."""
    clock = FrameClock(time_fn=lambda: 16.0)
    seen = []
    clock.request_frame(lambda ts: seen.append(("a", ts)))
    clock.request_frame(lambda ts: seen.append(("b", ts)))

    assert clock.pending == 2
    assert clock.pump() == 2
    assert seen == [("a", 16.0), ("b", 16.0)]
    assert clock.pending == 0


def test_callbacks_requested_during_pump_wait_for_next_pump():
    """Test a callback that re-requests itself runs once per pump."""
    clock = FrameClock(time_fn=lambda: 0.0)
    calls = []

    def again(ts):
        calls.append(ts)
        clock.request_frame(again)

    clock.request_frame(again)
    clock.pump()
    assert len(calls) == 1
    assert clock.pending == 1
    clock.pump()
    assert len(calls) == 2


def test_frame_number_counts_pumps():
    clock = FrameClock(time_fn=lambda: 0.0)
    assert clock.frame_number == 0
    clock.pump()
    clock.pump()
    assert clock.frame_number == 2


def test_manual_clock_advance_moves_time_and_pumps():
    """Test ManualFrameClock.advance() moves time before pumping."""
    clock = ManualFrameClock(start=100.0)
    stamps = []
    clock.request_frame(stamps.append)

    assert clock.advance(16.0) == 1
    assert stamps == [116.0]
    assert clock.now() == 116.0


def test_manual_clock_rejects_negative_advance():
    clock = ManualFrameClock()
    with pytest.raises(ValueError):
        clock.advance(-1.0)


def test_raising_callback_leaves_later_callbacks_queued():
    """Test callbacks after a failing one still run on the next pump."""
    clock = FrameClock(time_fn=lambda: 0.0)
    seen = []

    def boom(ts):
        raise RuntimeError("boom")

    clock.request_frame(lambda ts: seen.append("a"))
    clock.request_frame(boom)
    clock.request_frame(lambda ts: seen.append("c"))

    with pytest.raises(RuntimeError):
        clock.pump()
    assert seen == ["a"]
    assert clock.pending == 1

    clock.pump()
    assert seen == ["a", "c"]
    assert clock.pending == 0
