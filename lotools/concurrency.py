"""Mutual exclusion, background calls and polling helpers.

Durations are in seconds.
"""

from __future__ import annotations

import threading
import time
from concurrent.futures import Future
from typing import Any, Callable, TypeVar

from lotools.errors import try_

T = TypeVar("T")


class Synchronize:
    """Runs callbacks one at a time under a lock."""

    def __init__(self, lock: Any = None) -> None:
        self._lock = lock if lock is not None else threading.Lock()

    def do(self, callback: Callable[[], Any]) -> None:
        """Run ``callback`` while holding the lock; exceptions are swallowed."""
        with self._lock:
            try_(callback)

    def __enter__(self) -> Synchronize:
        self._lock.acquire()
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self._lock.release()


def synchronize(*args: Any) -> Synchronize:
    """Create a :class:`Synchronize`, optionally around a given lock."""
    if len(args) > 1:
        raise ValueError("unexpected arguments")
    return Synchronize(args[0] if args else None)


def async_(func: Callable[[], T]) -> Future:
    """Run ``func`` in a thread; the returned future holds its result."""
    future: Future = Future()
    future.set_running_or_notify_cancel()

    def run() -> None:
        try:
            future.set_result(func())
        except BaseException as exc:
            future.set_exception(exc)

    threading.Thread(target=run, daemon=True).start()
    return future


def wait_for(
    condition: Callable[[int], bool], timeout: float, heartbeat_delay: float
) -> tuple[int, float, bool]:
    """Poll ``condition(iteration)`` every ``heartbeat_delay`` until true or timeout.

    Returns ``(iterations, elapsed, found)``.
    """
    return wait_for_with_context(
        threading.Event(), lambda _event, i: condition(i), timeout, heartbeat_delay
    )


def wait_for_with_context(
    cancel_event: threading.Event,
    condition: Callable[[threading.Event, int], bool],
    timeout: float,
    heartbeat_delay: float,
) -> tuple[int, float, bool]:
    """Like :func:`wait_for`, also stopping when ``cancel_event`` is set.

    ``condition`` receives the event and the zero-based iteration.
    """
    start = time.monotonic()

    def elapsed() -> float:
        return time.monotonic() - start

    if cancel_event.is_set():
        return 0, elapsed(), False

    deadline = start + timeout
    next_tick = start + heartbeat_delay
    iterations = 0

    while True:
        now = time.monotonic()
        if next_tick >= deadline:
            cancel_event.wait(max(0.0, deadline - now))
            return iterations, elapsed(), False
        if cancel_event.wait(max(0.0, next_tick - now)):
            return iterations, elapsed(), False

        iterations += 1
        if condition(cancel_event, iterations - 1):
            return iterations, elapsed(), True

        next_tick += heartbeat_delay
        now = time.monotonic()
        if next_tick < now:
            # Missed ticks are dropped; at most one is pending.
            next_tick = now