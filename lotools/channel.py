"""Thread-safe channels and pipelines built on them.

A :class:`Channel` is a closable FIFO shared between threads, either buffered
with a fixed capacity or unbuffered (capacity 0), in which case every send
waits until a receiver has taken the item. Durations are in seconds.
"""

from __future__ import annotations

import random
import threading
import time
from collections import deque
from typing import Any, Callable, Generic, Iterable, Iterator, Sequence, TypeVar

from lotools.find import max_by, min_by
from lotools.numeric import range_

T = TypeVar("T")

DispatchingStrategy = Callable[[Any, int, Sequence["Channel"]], int]

_IDLE_PAUSE = 10e-6


class Channel(Generic[T]):
    """A closable, optionally bounded FIFO for passing items between threads."""

    def __init__(self, capacity: int = 0) -> None:
        if capacity < 0:
            raise ValueError(f"negative channel capacity {capacity}")
        self._capacity = capacity
        self._items: deque = deque()
        self._closed = False
        self._cond = threading.Condition()
        self._sent = 0
        self._received = 0

    @property
    def capacity(self) -> int:
        """The buffer capacity; 0 for an unbuffered channel."""
        return self._capacity

    @property
    def closed(self) -> bool:
        """Whether :meth:`close` has been called."""
        with self._cond:
            return self._closed

    def __len__(self) -> int:
        with self._cond:
            return min(len(self._items), self._capacity)

    def _has_room(self) -> bool:
        return len(self._items) < max(self._capacity, 1)

    def send(self, item: T) -> None:
        """Put ``item`` on the channel, blocking while it is full.

        Raises RuntimeError when the channel is or becomes closed.
        """
        with self._cond:
            while not self._closed and not self._has_room():
                self._cond.wait()
            if self._closed:
                raise RuntimeError("send on closed channel")
            self._items.append(item)
            self._sent += 1
            ticket = self._sent
            self._cond.notify_all()
            if self._capacity == 0:
                while self._received < ticket and not self._closed:
                    self._cond.wait()
                if self._received < ticket:
                    self._items.clear()
                    raise RuntimeError("send on closed channel")

    def receive(self, timeout: float | None = None) -> tuple[T | None, bool]:
        """Take the next item as ``(item, True)``.

        Returns ``(None, False)`` once the channel is closed and drained.
        Raises TimeoutError if nothing arrives within ``timeout`` seconds.
        """
        deadline = None if timeout is None else time.monotonic() + timeout
        with self._cond:
            while not self._items:
                if self._closed:
                    return None, False
                if deadline is None:
                    self._cond.wait()
                    continue
                remaining = deadline - time.monotonic()
                if remaining <= 0:
                    raise TimeoutError("channel receive timed out")
                self._cond.wait(remaining)
            item = self._items.popleft()
            self._received += 1
            self._cond.notify_all()
            return item, True

    def close(self) -> None:
        """Close the channel; buffered items can still be received."""
        with self._cond:
            if self._closed:
                raise RuntimeError("close of closed channel")
            self._closed = True
            self._cond.notify_all()

    def __iter__(self) -> Iterator[T]:
        while True:
            item, ok = self.receive()
            if not ok:
                return
            yield item  # type: ignore[misc]


def _start(target: Callable[[], None]) -> None:
    threading.Thread(target=target, daemon=True).start()


def _create_channels(count: int, capacity: int) -> list[Channel]:
    return [Channel(capacity) for _ in range(count)]


def _is_not_full(channel: Channel) -> bool:
    return channel.capacity == 0 or len(channel) < channel.capacity


def channel_dispatcher(
    stream: Channel, count: int, channel_buffer_cap: int, strategy: DispatchingStrategy
) -> list[Channel]:
    """Distribute items of ``stream`` into ``count`` new channels chosen by ``strategy``.

    Closing ``stream`` closes every child.
    """
    children = _create_channels(count, channel_buffer_cap)

    def run() -> None:
        try:
            for index, msg in enumerate(stream):
                destination = strategy(msg, index, children) % count
                children[destination].send(msg)
        finally:
            for child in children:
                child.close()

    _start(run)
    return children


def dispatching_strategy_round_robin(msg: Any, index: int, channels: Sequence[Channel]) -> int:
    """Pick channels in turn, skipping full ones."""
    while True:
        i = index % len(channels)
        if _is_not_full(channels[i]):
            return i
        index += 1
        time.sleep(_IDLE_PAUSE)


def dispatching_strategy_random(msg: Any, index: int, channels: Sequence[Channel]) -> int:
    """Pick a random channel that is not full."""
    while True:
        i = random.randrange(len(channels))
        if _is_not_full(channels[i]):
            return i
        time.sleep(_IDLE_PAUSE)


def dispatching_strategy_weighted_random(weights: Iterable[int]) -> DispatchingStrategy:
    """Build a strategy picking channel ``i`` with probability proportional to ``weights[i]``."""
    sequence = [i for i, weight in enumerate(weights) for _ in range(weight)]
    if not sequence:
        raise ValueError("weighted random dispatching needs a positive weight")

    def strategy(msg: Any, index: int, channels: Sequence[Channel]) -> int:
        while True:
            i = random.choice(sequence)
            if _is_not_full(channels[i]):
                return i
            time.sleep(_IDLE_PAUSE)

    return strategy


def dispatching_strategy_first(msg: Any, index: int, channels: Sequence[Channel]) -> int:
    """Pick the first channel that is not full."""
    while True:
        for i, channel in enumerate(channels):
            if _is_not_full(channel):
                return i
        time.sleep(_IDLE_PAUSE)


def dispatching_strategy_least(msg: Any, index: int, channels: Sequence[Channel]) -> int:
    """Pick the emptiest channel."""
    return min_by(range_(len(channels)), lambda item, best: len(channels[item]) < len(channels[best]))


def dispatching_strategy_most(msg: Any, index: int, channels: Sequence[Channel]) -> int:
    """Pick the fullest channel that still has room."""
    return max_by(
        range_(len(channels)),
        lambda item, best: len(channels[item]) > len(channels[best])
        and _is_not_full(channels[item]),
    )


def slice_to_channel(buffer_size: int, collection: Iterable[T]) -> Channel:
    """Return a channel fed with the items of ``collection``, closed afterwards."""
    channel: Channel = Channel(buffer_size)
    items = list(collection)

    def run() -> None:
        try:
            for item in items:
                channel.send(item)
        finally:
            channel.close()

    _start(run)
    return channel


def channel_to_slice(channel: Channel) -> list:
    """Collect every item until the channel closes."""
    return list(channel)


def generator(buffer_size: int, generate: Callable[[Callable[[Any], None]], Any]) -> Channel:
    """Run ``generate(send)`` in a thread; the channel closes when it returns."""
    channel: Channel = Channel(buffer_size)

    def run() -> None:
        try:
            generate(channel.send)
        finally:
            channel.close()

    _start(run)
    return channel


def buffer(channel: Channel, size: int) -> tuple[list, int, float, bool]:
    """Read up to ``size`` items.

    Returns ``(items, count, elapsed, ok)``; ``ok`` is False if the channel closed.
    """
    start = time.monotonic()
    items: list = []
    while len(items) < size:
        item, ok = channel.receive()
        if not ok:
            return items, len(items), time.monotonic() - start, False
        items.append(item)
    return items, len(items), time.monotonic() - start, True


def buffer_with_timeout(
    channel: Channel, size: int, timeout: float
) -> tuple[list, int, float, bool]:
    """Like :func:`buffer`, stopping when ``timeout`` seconds have passed."""
    start = time.monotonic()
    deadline = start + timeout
    items: list = []
    while len(items) < size:
        remaining = deadline - time.monotonic()
        if remaining <= 0:
            break
        try:
            item, ok = channel.receive(timeout=remaining)
        except TimeoutError:
            break
        if not ok:
            return items, len(items), time.monotonic() - start, False
        items.append(item)
    return items, len(items), time.monotonic() - start, True


def fan_in(channel_buffer_cap: int, *args: Channel) -> Channel:
    """Merge the given channels into one, closed when all of them are closed."""
    out: Channel = Channel(channel_buffer_cap)

    def forward(upstream: Channel) -> None:
        for item in upstream:
            out.send(item)

    workers = [threading.Thread(target=forward, args=(up,), daemon=True) for up in args]
    for worker in workers:
        worker.start()

    def closer() -> None:
        for worker in workers:
            worker.join()
        out.close()

    _start(closer)
    return out


def fan_out(count: int, channels_buffer_cap: int, upstream: Channel) -> list[Channel]:
    """Broadcast every item of ``upstream`` to ``count`` new channels."""
    downstreams = _create_channels(count, channels_buffer_cap)

    def run() -> None:
        try:
            for msg in upstream:
                for downstream in downstreams:
                    downstream.send(msg)
        finally:
            for downstream in downstreams:
                downstream.close()

    _start(run)
    return downstreams