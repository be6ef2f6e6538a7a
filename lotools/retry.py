"""Retrying, debouncing and saga-style transactions.

Durations are in seconds.
"""

from __future__ import annotations

import itertools
import threading
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Generic, Hashable, Iterable, TypeVar

T = TypeVar("T")
K = TypeVar("K", bound=Hashable)


class _Debounce:
    def __init__(self, after: float, callbacks: tuple[Callable[[], Any], ...]) -> None:
        self._after = after
        self._callbacks = callbacks
        self._lock = threading.Lock()
        self._timer: threading.Timer | None = None
        self._done = False

    def _fire(self) -> None:
        for callback in self._callbacks:
            callback()

    def reset(self) -> None:
        with self._lock:
            if self._done:
                return
            if self._timer is not None:
                self._timer.cancel()
            self._timer = threading.Timer(self._after, self._fire)
            self._timer.daemon = True
            self._timer.start()

    def cancel(self) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None
            self._done = True


def new_debounce(
    duration: float, *args: Callable[[], Any]
) -> tuple[Callable[[], None], Callable[[], None]]:
    """Return ``(debounced, cancel)``.

    Each call to ``debounced`` restarts a timer of ``duration`` seconds; the
    callbacks run once the calls stop for that long. ``cancel`` stops the
    pending timer and disables the debouncer for good.
    """
    debounce = _Debounce(duration, args)
    return debounce.reset, debounce.cancel


@dataclass
class _DebounceItem:
    lock: threading.Lock = field(default_factory=threading.Lock)
    timer: threading.Timer | None = None
    count: int = 0


class _DebounceBy(Generic[K]):
    def __init__(self, after: float, callbacks: tuple[Callable[[K, int], Any], ...]) -> None:
        self._after = after
        self._callbacks = callbacks
        self._lock = threading.Lock()
        self._items: dict[K, _DebounceItem] = {}

    def _fire(self, key: K, item: _DebounceItem) -> None:
        with item.lock:
            count = item.count
            item.count = 0
        for callback in self._callbacks:
            callback(key, count)

    def reset(self, key: K) -> None:
        with self._lock:
            item = self._items.setdefault(key, _DebounceItem())
        with item.lock:
            item.count += 1
            if item.timer is not None:
                item.timer.cancel()
            item.timer = threading.Timer(self._after, self._fire, args=(key, item))
            item.timer.daemon = True
            item.timer.start()

    def cancel(self, key: K) -> None:
        with self._lock:
            item = self._items.pop(key, None)
            if item is None:
                return
            with item.lock:
                if item.timer is not None:
                    item.timer.cancel()
                    item.timer = None


def new_debounce_by(
    duration: float, *args: Callable[[Any, int], Any]
) -> tuple[Callable[[Any], None], Callable[[Any], None]]:
    """Return ``(debounced, cancel)`` debouncing separately for every key.

    Callbacks receive the key and how many calls were folded into the firing.
    ``cancel(key)`` stops and forgets the pending timer of that key.
    """
    debounce: _DebounceBy = _DebounceBy(duration, args)
    return debounce.reset, debounce.cancel


def _indices(max_iteration: int) -> Iterable[int]:
    return itertools.count() if max_iteration <= 0 else range(max_iteration)


def attempt(max_iteration: int, f: Callable[[int], Any]) -> int:
    """Call ``f(index)`` until it returns without raising.

    At most ``max_iteration`` calls are made; with a value below 1 there is no
    limit. Returns the number of calls made; re-raises the last exception when
    every call failed.
    """
    error: Exception | None = None
    for i in _indices(max_iteration):
        try:
            f(i)
        except Exception as exc:
            error = exc
        else:
            return i + 1
    assert error is not None
    raise error


def attempt_with_delay(
    max_iteration: int, delay: float, f: Callable[[int, float], Any]
) -> tuple[int, float]:
    """Like :func:`attempt`, pausing ``delay`` seconds between calls.

    ``f`` receives the index and the time elapsed so far. Returns
    ``(calls, elapsed)``.
    """
    start = time.monotonic()
    error: Exception | None = None
    for i in _indices(max_iteration):
        try:
            f(i, time.monotonic() - start)
        except Exception as exc:
            error = exc
        else:
            return i + 1, time.monotonic() - start
        if max_iteration <= 0 or i + 1 < max_iteration:
            time.sleep(delay)
    assert error is not None
    raise error


def _call_while(f: Callable[..., Any], *args: Any) -> tuple[Exception | None, bool]:
    try:
        outcome = f(*args)
    except Exception as exc:
        return exc, True
    error, should_continue = outcome
    return error, bool(should_continue)


def attempt_while(max_iteration: int, f: Callable[[int], tuple[Exception | None, bool]]) -> int:
    """Call ``f(index)`` until it succeeds or asks to stop.

    ``f`` returns ``(error, should_continue)`` where ``error`` is an exception
    or None; raising counts as ``(exception, True)``. Stops at once when
    ``should_continue`` is false. Returns the number of calls; raises the
    final error if there is one.
    """
    error: Exception | None = None
    for i in _indices(max_iteration):
        error, should_continue = _call_while(f, i)
        if not should_continue or error is None:
            if error is not None:
                raise error
            return i + 1
    assert error is not None
    raise error


def attempt_while_with_delay(
    max_iteration: int,
    delay: float,
    f: Callable[[int, float], tuple[Exception | None, bool]],
) -> tuple[int, float]:
    """Like :func:`attempt_while`, pausing ``delay`` seconds between calls.

    ``f`` also receives the elapsed time. Returns ``(calls, elapsed)``.
    """
    start = time.monotonic()
    error: Exception | None = None
    for i in _indices(max_iteration):
        error, should_continue = _call_while(f, i, time.monotonic() - start)
        if not should_continue or error is None:
            if error is not None:
                raise error
            return i + 1, time.monotonic() - start
        if max_iteration <= 0 or i + 1 < max_iteration:
            time.sleep(delay)
    assert error is not None
    raise error


@dataclass(frozen=True)
class _Step(Generic[T]):
    execute: Callable[[T], T]
    on_rollback: Callable[[T], T]


class Transaction(Generic[T]):
    """A saga: steps run in order and completed ones are rolled back on failure."""

    def __init__(self) -> None:
        self._steps: list[_Step[T]] = []

    def then(self, execute: Callable[[T], T], on_rollback: Callable[[T], T]) -> Transaction[T]:
        """Append a step and its compensation; returns the transaction."""
        self._steps.append(_Step(execute, on_rollback))
        return self

    def process(self, state: T) -> T:
        """Run every step on ``state`` and return the final state.

        If a step raises, the steps completed before it are rolled back in
        reverse order and the exception is re-raised, carrying the rolled-back
        state in its ``state`` attribute.
        """
        completed = 0
        try:
            for step in self._steps:
                state = step.execute(state)
                completed += 1
        except Exception as exc:
            for step in reversed(self._steps[:completed]):
                state = step.on_rollback(state)
            try:
                exc.state = state  # type: ignore[attr-defined]
            except AttributeError:
                pass
            raise
        return state


def new_transaction() -> Transaction:
    """Create an empty :class:`Transaction`."""
    return Transaction()