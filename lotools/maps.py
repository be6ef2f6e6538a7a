"""Helpers for building, filtering and transforming mappings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Hashable, Iterable, Iterator, Mapping, TypeVar

K = TypeVar("K")
V = TypeVar("V")
R = TypeVar("R")


@dataclass(frozen=True)
class Entry(Generic[K, V]):
    """A key/value pair taken from a mapping."""

    key: K
    value: V

    def __iter__(self) -> Iterator[Any]:
        yield self.key
        yield self.value


def _new_like(mapping: Mapping) -> dict:
    """Return an empty mapping of the same dict type as ``mapping`` where possible."""
    if isinstance(mapping, dict):
        try:
            return type(mapping)()
        except TypeError:
            return {}
    return {}


def keys(*args: Mapping[K, Any]) -> list[K]:
    """Keys of all the given mappings, duplicates included."""
    return [key for mapping in args for key in mapping]


def uniq_keys(*args: Mapping[K, Any]) -> list[K]:
    """Distinct keys of all the given mappings, in first-seen order."""
    return list(dict.fromkeys(key for mapping in args for key in mapping))


def has_key(mapping: Mapping[K, Any], key: K) -> bool:
    """Return True if ``key`` is present."""
    return key in mapping


def values(*args: Mapping[Any, V]) -> list[V]:
    """Values of all the given mappings, duplicates included."""
    return [value for mapping in args for value in mapping.values()]


def uniq_values(*args: Mapping[Any, V]) -> list[V]:
    """Distinct values of all the given mappings, in first-seen order."""
    return list(dict.fromkeys(value for mapping in args for value in mapping.values()))


def value_or(mapping: Mapping[K, V], key: K, fallback: V) -> V:
    """Value under ``key``, or ``fallback`` when absent."""
    return mapping[key] if key in mapping else fallback


def pick_by(mapping: Mapping[K, V], predicate: Callable[[K, V], bool]) -> dict[K, V]:
    """Entries for which ``predicate(key, value)`` holds."""
    result = _new_like(mapping)
    result.update((k, v) for k, v in mapping.items() if predicate(k, v))
    return result


def pick_by_keys(mapping: Mapping[K, V], keys: Iterable[K]) -> dict[K, V]:
    """Entries whose key is among ``keys``."""
    result = _new_like(mapping)
    result.update((k, mapping[k]) for k in keys if k in mapping)
    return result


def pick_by_values(mapping: Mapping[K, V], values: Iterable[V]) -> dict[K, V]:
    """Entries whose value is among ``values``."""
    wanted = list(values)
    result = _new_like(mapping)
    result.update((k, v) for k, v in mapping.items() if v in wanted)
    return result


def omit_by(mapping: Mapping[K, V], predicate: Callable[[K, V], bool]) -> dict[K, V]:
    """Entries for which ``predicate(key, value)`` does not hold."""
    result = _new_like(mapping)
    result.update((k, v) for k, v in mapping.items() if not predicate(k, v))
    return result


def omit_by_keys(mapping: Mapping[K, V], keys: Iterable[K]) -> dict[K, V]:
    """Entries whose key is not among ``keys``."""
    result = _new_like(mapping)
    result.update(mapping)
    for key in keys:
        result.pop(key, None)
    return result


def omit_by_values(mapping: Mapping[K, V], values: Iterable[V]) -> dict[K, V]:
    """Entries whose value is not among ``values``."""
    unwanted = list(values)
    result = _new_like(mapping)
    result.update((k, v) for k, v in mapping.items() if v not in unwanted)
    return result


def entries(mapping: Mapping[K, V]) -> list[Entry[K, V]]:
    """The mapping as a list of :class:`Entry` pairs."""
    return [Entry(k, v) for k, v in mapping.items()]


def to_pairs(mapping: Mapping[K, V]) -> list[Entry[K, V]]:
    """Alias of :func:`entries`."""
    return entries(mapping)


def from_entries(entries: Iterable[Entry[K, V]]) -> dict[K, V]:
    """Build a dict from key/value pairs; later keys overwrite earlier ones."""
    return {key: value for key, value in entries}


def from_pairs(entries: Iterable[Entry[K, V]]) -> dict[K, V]:
    """Alias of :func:`from_entries`."""
    return from_entries(entries)


def invert(mapping: Mapping[K, V]) -> dict[V, K]:
    """Swap keys and values; for duplicate values the last key wins."""
    return {v: k for k, v in mapping.items()}


def assign(*args: Mapping[K, V]) -> dict[K, V]:
    """Merge mappings from left to right."""
    result = _new_like(args[0]) if args else {}
    for mapping in args:
        result.update(mapping)
    return result


def map_keys(mapping: Mapping[K, V], iteratee: Callable[[V, K], Hashable]) -> dict:
    """New dict keyed by ``iteratee(value, key)``, keeping the values."""
    return {iteratee(v, k): v for k, v in mapping.items()}


def map_values(mapping: Mapping[K, V], iteratee: Callable[[V, K], R]) -> dict[K, R]:
    """New dict with values replaced by ``iteratee(value, key)``."""
    return {k: iteratee(v, k) for k, v in mapping.items()}


def map_entries(mapping: Mapping[K, V], iteratee: Callable[[K, V], tuple]) -> dict:
    """New dict built from the ``(key, value)`` pairs ``iteratee(key, value)`` returns."""
    result = {}
    for k, v in mapping.items():
        new_key, new_value = iteratee(k, v)
        result[new_key] = new_value
    return result


def map_to_slice(mapping: Mapping[K, V], iteratee: Callable[[K, V], R]) -> list[R]:
    """List of ``iteratee(key, value)`` for every entry."""
    return [iteratee(k, v) for k, v in mapping.items()]