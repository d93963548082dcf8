from __future__ import annotations

import logging
import threading
from functools import partial
from typing import Any, Callable, Optional, Protocol, Tuple

logger = logging.getLogger(__name__)

DEFAULT_WINDOW_MS = 300


class TimerHandle(Protocol):
    def start(self) -> None: ...

    def cancel(self) -> None: ...


TimerFactory = Callable[[float, Callable[[], None]], TimerHandle]


def _thread_timer(delay_s: float, fn: Callable[[], None]) -> TimerHandle:
    timer = threading.Timer(delay_s, fn)
    timer.daemon = True
    return timer


class DebouncedQueryController:
    """
    Collapse bursts of calls into one: only the last call inside a quiet window fires.

    Each call cancels the pending timer and schedules a new one, so at most one
    timer is pending at any time. Arguments of superseded calls are dropped, not
    merged.

    The timer factory is injectable (delay_seconds, fn) -> handle with start()/cancel();
    the default is a daemon threading.Timer, which runs the callback on the
    timer thread. Pass a factory bound to the caller's event loop when the
    callback touches state owned by that loop.
    """

    def __init__(
        self,
        callback: Callable[..., Any],
        window_ms: int = DEFAULT_WINDOW_MS,
        timer_factory: Optional[TimerFactory] = None,
    ) -> None:
        if window_ms < 0:
            raise ValueError(f"window_ms must be >= 0, got {window_ms}")
        self._callback = callback
        self.window_ms = window_ms
        self._timer_factory = timer_factory or _thread_timer
        self._lock = threading.Lock()
        self._timer: Optional[TimerHandle] = None
        self._pending: Optional[Tuple[tuple, dict]] = None
        # bumped on every call/cancel so a superseded timer that still fires is ignored
        self._generation = 0

    @property
    def pending(self) -> bool:
        return self._pending is not None

    def __call__(self, *args: Any, **kwargs: Any) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._generation += 1
            self._pending = (args, kwargs)
            self._timer = self._timer_factory(
                self.window_ms / 1000.0, partial(self._fire, self._generation)
            )
            timer = self._timer
        timer.start()

    def _take(self, generation: Optional[int]) -> Optional[Tuple[tuple, dict]]:
        with self._lock:
            if generation is not None and generation != self._generation:
                return None
            call = self._pending
            self._pending = None
            self._timer = None
            return call

    def _fire(self, generation: Optional[int] = None) -> None:
        call = self._take(generation)
        if call is None:
            return
        args, kwargs = call
        self._callback(*args, **kwargs)

    def flush(self) -> None:
        """Run the pending call now instead of waiting for the window to pass."""
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._generation += 1
        self._fire()

    def cancel(self) -> None:
        """Drop the pending call, e.g. when the owning screen unmounts."""
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            if self._pending is not None:
                logger.debug("Dropping pending debounced call")
            self._generation += 1
            self._timer = None
            self._pending = None
