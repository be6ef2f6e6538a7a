"""Searching sequences and mappings: indexes, predicates, extremes and samples.

Where there is nothing to return (an empty collection, no match), ``None``
takes the place of a missing value.
"""

from __future__ import annotations

import random
from collections import Counter
from typing import Any, Callable, Hashable, Iterable, Mapping, Sequence, TypeVar

T = TypeVar("T")
K = TypeVar("K")
V = TypeVar("V")


def index_of(collection: Sequence[T], element: T) -> int:
    """Index of the first occurrence of ``element``, or -1."""
    return next((i for i, item in enumerate(collection) if item == element), -1)


def last_index_of(collection: Sequence[T], element: T) -> int:
    """Index of the last occurrence of ``element``, or -1."""
    for i in reversed(range(len(collection))):
        if collection[i] == element:
            return i
    return -1


def find(collection: Iterable[T], predicate: Callable[[T], bool]) -> tuple[T | None, bool]:
    """Return ``(item, True)`` for the first item matching, else ``(None, False)``."""
    for item in collection:
        if predicate(item):
            return item, True
    return None, False


def find_index_of(
    collection: Iterable[T], predicate: Callable[[T], bool]
) -> tuple[T | None, int, bool]:
    """Return ``(item, index, True)`` for the first match, else ``(None, -1, False)``."""
    for i, item in enumerate(collection):
        if predicate(item):
            return item, i, True
    return None, -1, False


def find_last_index_of(
    collection: Sequence[T], predicate: Callable[[T], bool]
) -> tuple[T | None, int, bool]:
    """Return ``(item, index, True)`` for the last match, else ``(None, -1, False)``."""
    for i in reversed(range(len(collection))):
        item = collection[i]
        if predicate(item):
            return item, i, True
    return None, -1, False


def find_or_else(collection: Iterable[T], fallback: T, predicate: Callable[[T], bool]) -> T:
    """Return the first item matching ``predicate``, or ``fallback``."""
    return next((item for item in collection if predicate(item)), fallback)


def find_key(mapping: Mapping[K, V], value: V) -> tuple[K | None, bool]:
    """Return ``(key, True)`` for the first key holding ``value``, else ``(None, False)``."""
    for key, item in mapping.items():
        if item == value:
            return key, True
    return None, False


def find_key_by(
    mapping: Mapping[K, V], predicate: Callable[[K, V], bool]
) -> tuple[K | None, bool]:
    """Return ``(key, True)`` for the first entry matching ``predicate``."""
    for key, item in mapping.items():
        if predicate(key, item):
            return key, True
    return None, False


def _uniques(collection: Sequence[T], key: Callable[[T], Hashable]) -> list[T]:
    counts = Counter(key(item) for item in collection)
    return [item for item in collection if counts[key(item)] == 1]


def _duplicates(collection: Sequence[T], key: Callable[[T], Hashable]) -> list[T]:
    counts = Counter(key(item) for item in collection)
    emitted: set = set()
    result = []
    for item in collection:
        k = key(item)
        if counts[k] > 1 and k not in emitted:
            emitted.add(k)
            result.append(item)
    return result


def find_uniques(collection: Sequence[T]) -> list[T]:
    """Items occurring exactly once, in collection order."""
    return _uniques(collection, lambda item: item)


def find_uniques_by(collection: Sequence[T], iteratee: Callable[[T], Hashable]) -> list[T]:
    """Items whose ``iteratee`` key occurs exactly once, in collection order."""
    return _uniques(collection, iteratee)


def find_duplicates(collection: Sequence[T]) -> list[T]:
    """First occurrence of every item occurring more than once, in collection order."""
    return _duplicates(collection, lambda item: item)


def find_duplicates_by(collection: Sequence[T], iteratee: Callable[[T], Hashable]) -> list[T]:
    """First item of every ``iteratee`` key occurring more than once."""
    return _duplicates(collection, iteratee)


def _extreme_by(collection: Iterable[T], better: Callable[[T, T], bool]) -> T | None:
    iterator = iter(collection)
    try:
        best = next(iterator)
    except StopIteration:
        return None
    for item in iterator:
        if better(item, best):
            best = item
    return best


def min_(collection: Iterable[T]) -> T | None:
    """Smallest item (the first of equals), or None when empty."""
    return _extreme_by(collection, lambda a, b: a < b)


def min_by(collection: Iterable[T], comparison: Callable[[T, T], bool]) -> T | None:
    """Smallest item by ``comparison(item, current_min)``; first of equals wins."""
    return _extreme_by(collection, comparison)


def max_(collection: Iterable[T]) -> T | None:
    """Largest item (the first of equals), or None when empty."""
    return _extreme_by(collection, lambda a, b: a > b)


def max_by(collection: Iterable[T], comparison: Callable[[T, T], bool]) -> T | None:
    """Largest item by ``comparison(item, current_max)``; first of equals wins."""
    return _extreme_by(collection, comparison)


def earliest(*args: Any) -> Any:
    """Earliest of the given times, or None when none is given."""
    return _extreme_by(args, lambda a, b: a < b)


def latest(*args: Any) -> Any:
    """Latest of the given times, or None when none is given."""
    return _extreme_by(args, lambda a, b: a > b)


def _extreme_by_key(
    collection: Iterable[T], iteratee: Callable[[T], Any], better: Callable[[Any, Any], bool]
) -> T | None:
    best = None
    best_key = None
    for position, item in enumerate(collection):
        key = iteratee(item)
        if position == 0 or better(key, best_key):
            best, best_key = item, key
    return best


def earliest_by(collection: Iterable[T], iteratee: Callable[[T], Any]) -> T | None:
    """Item whose ``iteratee`` time is earliest, or None when empty."""
    return _extreme_by_key(collection, iteratee, lambda a, b: a < b)


def latest_by(collection: Iterable[T], iteratee: Callable[[T], Any]) -> T | None:
    """Item whose ``iteratee`` time is latest, or None when empty."""
    return _extreme_by_key(collection, iteratee, lambda a, b: a > b)


def first(collection: Sequence[T]) -> tuple[T | None, bool]:
    """Return ``(first_item, True)``, or ``(None, False)`` when empty."""
    if not collection:
        return None, False
    return collection[0], True


def first_or_empty(collection: Sequence[T]) -> T | None:
    """First item, or None when empty."""
    return first(collection)[0]


def first_or(collection: Sequence[T], fallback: T) -> T:
    """First item, or ``fallback`` when empty."""
    item, ok = first(collection)
    return item if ok else fallback  # type: ignore[return-value]


def last(collection: Sequence[T]) -> tuple[T | None, bool]:
    """Return ``(last_item, True)``, or ``(None, False)`` when empty."""
    if not collection:
        return None, False
    return collection[-1], True


def last_or_empty(collection: Sequence[T]) -> T | None:
    """Last item, or None when empty."""
    return last(collection)[0]


def last_or(collection: Sequence[T], fallback: T) -> T:
    """Last item, or ``fallback`` when empty."""
    item, ok = last(collection)
    return item if ok else fallback  # type: ignore[return-value]


def nth(collection: Sequence[T], n: int) -> T:
    """Item at index ``n``; negative ``n`` counts from the end.

    Raises IndexError when ``n`` is out of bounds.
    """
    n = int(n)
    length = len(collection)
    if n >= length or -n > length:
        raise IndexError(f"nth: {n} out of slice bounds")
    return collection[n]


def sample(collection: Sequence[T]) -> T | None:
    """A random item, or None when empty."""
    if not collection:
        return None
    return random.choice(collection)


def samples(collection: Sequence[T], count: int) -> list[T]:
    """Up to ``count`` random items, each position picked at most once."""
    return random.sample(list(collection), max(0, min(count, len(collection))))