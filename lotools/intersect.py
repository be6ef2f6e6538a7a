"""Membership tests and set-like operations on sequences, preserving order."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Sequence, TypeVar

T = TypeVar("T")


def contains(collection: Iterable[T], element: T) -> bool:
    """Return True if ``element`` is in ``collection``."""
    return any(item == element for item in collection)


def contains_by(collection: Iterable[T], predicate: Callable[[T], bool]) -> bool:
    """Return True if ``predicate`` holds for some item."""
    return any(predicate(item) for item in collection)


def every(collection: Sequence[T], subset: Iterable[T]) -> bool:
    """Return True if every item of ``subset`` is in ``collection`` (True when empty)."""
    return all(contains(collection, item) for item in subset)


def every_by(collection: Iterable[T], predicate: Callable[[T], bool]) -> bool:
    """Return True if ``predicate`` holds for all items (True when empty)."""
    return all(predicate(item) for item in collection)


def some(collection: Sequence[T], subset: Iterable[T]) -> bool:
    """Return True if at least one item of ``subset`` is in ``collection``."""
    return any(contains(collection, item) for item in subset)


def some_by(collection: Iterable[T], predicate: Callable[[T], bool]) -> bool:
    """Return True if ``predicate`` holds for any item (False when empty)."""
    return any(predicate(item) for item in collection)


def none(collection: Sequence[T], subset: Iterable[T]) -> bool:
    """Return True if no item of ``subset`` is in ``collection``."""
    return not some(collection, subset)


def none_by(collection: Iterable[T], predicate: Callable[[T], bool]) -> bool:
    """Return True if ``predicate`` holds for no item."""
    return not some_by(collection, predicate)


def intersect(list1: Iterable[T], list2: Iterable[T]) -> list[T]:
    """Return the items of ``list2`` that also appear in ``list1``."""
    seen = set(list1)
    return [item for item in list2 if item in seen]


def difference(list1: Sequence[T], list2: Sequence[T]) -> tuple[list[T], list[T]]:
    """Return (items of list1 absent from list2, items of list2 absent from list1)."""
    seen_left = set(list1)
    seen_right = set(list2)
    left = [item for item in list1 if item not in seen_right]
    right = [item for item in list2 if item not in seen_left]
    return left, right


def union(*args: Iterable[T]) -> list[T]:
    """Return all distinct items of the given collections in first-seen order."""
    return list(dict.fromkeys(item for collection in args for item in collection))


def without(collection: Iterable[T], *args: Any) -> list[T]:
    """Return ``collection`` with every value in ``args`` removed."""
    return [item for item in collection if not contains(args, item)]