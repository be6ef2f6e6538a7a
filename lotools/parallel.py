"""Collection helpers whose callbacks run concurrently in threads."""

from __future__ import annotations

from concurrent.futures import Future, ThreadPoolExecutor
from typing import Callable, Hashable, Iterable, Sequence, TypeVar

T = TypeVar("T")
R = TypeVar("R")
K = TypeVar("K", bound=Hashable)

_MAX_WORKERS = 32


def _run_all(calls: Sequence[Callable[[], R]]) -> list[R]:
    """Run every call concurrently and return the results in call order."""
    if not calls:
        return []
    with ThreadPoolExecutor(max_workers=min(len(calls), _MAX_WORKERS)) as pool:
        futures: list[Future] = [pool.submit(call) for call in calls]
        return [future.result() for future in futures]


def map_(collection: Iterable[T], iteratee: Callable[[T, int], R]) -> list[R]:
    """Apply ``iteratee(item, index)`` concurrently; results keep the input order."""
    return _run_all(
        [lambda item=item, i=i: iteratee(item, i) for i, item in enumerate(collection)]
    )


def for_each(collection: Iterable[T], iteratee: Callable[[T, int], object]) -> None:
    """Call ``iteratee(item, index)`` concurrently for every item and wait for all."""
    map_(collection, iteratee)


def times(count: int, iteratee: Callable[[int], R]) -> list[R]:
    """Call ``iteratee(index)`` concurrently ``count`` times; results in index order."""
    if count < 0:
        raise ValueError(f"times: negative count {count}")
    return _run_all([lambda i=i: iteratee(i) for i in range(count)])


def _keys(items: list[T], iteratee: Callable[[T], K]) -> list[K]:
    return _run_all([lambda item=item: iteratee(item) for item in items])


def group_by(collection: Iterable[T], iteratee: Callable[[T], K]) -> dict[K, list[T]]:
    """Group items by ``iteratee(item)``, computed concurrently."""
    items = list(collection)
    result: dict[K, list[T]] = {}
    for key, item in zip(_keys(items, iteratee), items):
        result.setdefault(key, []).append(item)
    return result


def partition_by(collection: Iterable[T], iteratee: Callable[[T], K]) -> list[list[T]]:
    """Split items into groups by ``iteratee(item)``, computed concurrently.

    Groups appear in the order their key is first seen.
    """
    return list(group_by(collection, iteratee).values())