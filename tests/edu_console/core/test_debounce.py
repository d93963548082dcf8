from __future__ import annotations

import pytest

from edu_console.core.debounce import DEFAULT_WINDOW_MS, DebouncedQueryController


class _FakeTimer:
    def __init__(self, delay, fn):
        self.delay = delay
        self.fn = fn
        self.started = False
        self.cancelled = False

    def start(self):
        self.started = True

    def cancel(self):
        self.cancelled = True

    def fire(self):
        self.fn()


class _FakeTimers:
    def __init__(self):
        self.created = []

    def __call__(self, delay, fn):
        timer = _FakeTimer(delay, fn)
        self.created.append(timer)
        return timer

    def active(self):
        return [t for t in self.created if t.started and not t.cancelled]


def _make_controller(window_ms=DEFAULT_WINDOW_MS):
    calls = []
    timers = _FakeTimers()
    ctrl = DebouncedQueryController(lambda q: calls.append(q), window_ms=window_ms, timer_factory=timers)
    return ctrl, calls, timers


def test_default_window_is_300ms():
    ctrl, _, timers = _make_controller()
    ctrl("a")

    assert ctrl.window_ms == 300
    assert timers.created[0].delay == pytest.approx(0.3)


def test_burst_fires_only_last_call():
    ctrl, calls, timers = _make_controller()

    for text in ["a", "al", "ali"]:
        ctrl(text)

    # at most one timer pending at any time
    assert len(timers.active()) == 1
    timers.active()[0].fire()

    assert calls == ["ali"]
    assert not ctrl.pending


def test_superseded_timer_is_ignored_if_it_still_fires():
    ctrl, calls, timers = _make_controller()

    ctrl("a")
    ctrl("ab")
    timers.created[0].fire()

    assert calls == []
    assert ctrl.pending

    timers.created[1].fire()
    assert calls == ["ab"]


def test_flush_runs_pending_call_immediately():
    ctrl, calls, timers = _make_controller()
    ctrl("x")
    ctrl.flush()

    assert calls == ["x"]
    assert timers.created[0].cancelled

    # the cancelled timer firing late does nothing
    timers.created[0].fire()
    assert calls == ["x"]


def test_cancel_drops_pending_call():
    ctrl, calls, timers = _make_controller()
    ctrl("x")
    ctrl.cancel()
    timers.created[0].fire()

    assert calls == []
    assert not ctrl.pending


def test_negative_window_raises():
    with pytest.raises(ValueError):
        DebouncedQueryController(lambda: None, window_ms=-1)
