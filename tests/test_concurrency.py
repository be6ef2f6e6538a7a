import threading
import time

import pytest

from lotools.concurrency import (
    Synchronize,
    async_,
    synchronize,
    wait_for,
    wait_for_with_context,
)


def _timed_sleep(seconds):
    start = time.monotonic()
    time.sleep(seconds)
    return start, time.monotonic()


def test_synchronize_serialises_callbacks():
    sync = synchronize()
    spans = []

    start = time.monotonic()
    threads = [
        threading.Thread(
            target=lambda: sync.do(lambda: spans.append(_timed_sleep(0.005)))
        )
        for _ in range(10)
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    duration = time.monotonic() - start

    assert len(spans) == 10
    ordered = sorted(spans)
    for (_, previous_end), (next_start, _) in zip(ordered, ordered[1:]):
        assert previous_end <= next_start
    assert duration >= 0.05


def test_synchronize_holds_given_lock():
    lock = threading.Lock()
    sync = synchronize(lock)
    observed = []

    sync.do(lambda: observed.append(lock.acquire(blocking=False)))

    assert observed == [False]
    assert lock.acquire(blocking=False) is True
    lock.release()


def test_synchronize_swallows_errors_and_releases():
    lock = threading.Lock()
    sync = Synchronize(lock)

    def fail():
        raise RuntimeError("boom")

    sync.do(fail)
    assert lock.locked() is False


def test_synchronize_rejects_multiple_locks():
    lock = threading.Lock()
    with pytest.raises(ValueError, match="^unexpected arguments$"):
        synchronize(lock, lock, lock)


def test_async_returns_result():
    gate = threading.Event()

    def work():
        gate.wait()
        return 10

    future = async_(work)
    gate.set()
    assert future.result(timeout=1) == 10


def test_async_tuple_result():
    future = async_(lambda: (10, "Hello", True, 3.14, "World", 100))
    assert future.result(timeout=1) == (10, "Hello", True, 3.14, "World", 100)


def test_async_propagates_exception():
    def fail():
        raise KeyError("missing")

    future = async_(fail)
    with pytest.raises(KeyError):
        future.result(timeout=1)


def test_wait_for_condition_found():
    iterations, elapsed, ok = wait_for(lambda i: i >= 5, 1.0, 0.001)
    assert iterations == 6
    assert ok is True
    assert elapsed >= 0.006 - 0.001


def test_wait_for_counter_incremented():
    seen = []

    def always_false(i):
        seen.append(i)
        return False

    iterations, elapsed, ok = wait_for(always_false, 0.05, 0.01)
    assert ok is False
    assert iterations == len(seen)
    assert seen == list(range(len(seen)))
    assert elapsed >= 0.05


def test_wait_for_short_timeout():
    iterations, elapsed, ok = wait_for(lambda _: False, 0.02, 0.1)
    assert iterations == 0
    assert ok is False
    assert 0.02 <= elapsed < 0.1


def test_wait_for_first_condition():
    iterations, elapsed, ok = wait_for(lambda _: True, 0.5, 0.001)
    assert iterations == 1
    assert ok is True
    assert elapsed < 0.5


def test_wait_for_with_context_found():
    event = threading.Event()
    iterations, _, ok = wait_for_with_context(event, lambda _e, i: i >= 5, 1.0, 0.001)
    assert iterations == 6
    assert ok is True


def test_wait_for_with_context_passes_event():
    event = threading.Event()
    received = []

    def condition(ev, i):
        received.append(ev)
        return True

    wait_for_with_context(event, condition, 0.5, 0.001)
    assert received == [event]


def test_wait_for_with_context_cancellation_stops():
    event = threading.Event()
    timer = threading.Timer(0.125, event.set)
    timer.start()
    try:
        iterations, elapsed, ok = wait_for_with_context(
            event, lambda _e, _i: False, 1.0, 0.05
        )
    finally:
        timer.cancel()
    assert iterations == 2
    assert ok is False
    assert elapsed < 1.0


def test_wait_for_with_context_already_cancelled():
    event = threading.Event()
    event.set()
    iterations, elapsed, ok = wait_for_with_context(event, lambda _e, _i: True, 0.1, 0.001)
    assert iterations == 0
    assert ok is False
    assert elapsed < 0.01