"""Numeric ranges and aggregates."""

from __future__ import annotations

from typing import Callable, Iterable, Iterator, Sequence, TypeVar

T = TypeVar("T")
N = TypeVar("N", int, float)


def _progression(start, step, length: int) -> Iterator:
    value = start
    for _ in range(length):
        yield value
        value += step


def range_(element_num: int) -> list[int]:
    """Return ``abs(element_num)`` integers from 0, counting down if negative."""
    step = -1 if element_num < 0 else 1
    return list(_progression(0, step, abs(element_num)))


def range_from(start: N, element_num: int) -> list[N]:
    """Return ``abs(element_num)`` numbers from ``start``, counting down if negative."""
    step = -1 if element_num < 0 else 1
    return list(_progression(start, step, abs(element_num)))


def range_with_steps(start: N, end: N, step: N) -> list[N]:
    """Return numbers from ``start`` towards ``end`` (exclusive) by ``step``.

    An empty list is returned when ``step`` is zero or points away from ``end``.
    """
    result: list[N] = []
    if start == end or step == 0:
        return result
    if start < end:
        if step < 0:
            return result
        value = start
        while value < end:
            result.append(value)
            value += step
        return result
    if step > 0:
        return result
    value = start
    while value > end:
        result.append(value)
        value += step
    return result


def clamp(value, minimum, maximum):
    """Clamp ``value`` within the inclusive bounds."""
    if value < minimum:
        return minimum
    if value > maximum:
        return maximum
    return value


def sum_(collection: Iterable):
    """Sum the values; 0 for an empty collection."""
    return sum(collection, 0)


def sum_by(collection: Iterable[T], iteratee: Callable[[T], object]):
    """Sum ``iteratee`` applied to every item; 0 for an empty collection."""
    return sum((iteratee(item) for item in collection), 0)


def _divide(total, length: int):
    if isinstance(total, int):
        quotient = abs(total) // length
        return -quotient if total < 0 else quotient
    return total / length


def mean(collection: Sequence):
    """Mean of the values; integer sums truncate toward zero. 0 when empty."""
    if not collection:
        return 0
    return _divide(sum_(collection), len(collection))


def mean_by(collection: Sequence[T], iteratee: Callable[[T], object]):
    """Mean of ``iteratee`` applied to every item. 0 when empty."""
    if not collection:
        return 0
    return _divide(sum_by(collection, iteratee), len(collection))