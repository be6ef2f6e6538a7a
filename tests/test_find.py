from dataclasses import dataclass
from datetime import datetime, timedelta

import pytest

from lotools.find import (
    earliest,
    earliest_by,
    find,
    find_duplicates,
    find_duplicates_by,
    find_index_of,
    find_key,
    find_key_by,
    find_last_index_of,
    find_or_else,
    find_uniques,
    find_uniques_by,
    first,
    first_or,
    first_or_empty,
    index_of,
    last,
    last_index_of,
    last_or,
    last_or_empty,
    latest,
    latest_by,
    max_,
    max_by,
    min_,
    min_by,
    nth,
    sample,
    samples,
)


def test_index_of():
    assert index_of([0, 1, 2, 1, 2, 3], 2) == 2
    assert index_of([0, 1, 2, 1, 2, 3], 6) == -1


def test_last_index_of():
    assert last_index_of([0, 1, 2, 1, 2, 3], 2) == 4
    assert last_index_of([0, 1, 2, 1, 2, 3], 6) == -1


def test_find_visits_in_order():
    seen = []

    def predicate(item):
        seen.append(item)
        return item == "b"

    assert find(["a", "b", "c", "d"], predicate) == ("b", True)
    assert seen == ["a", "b"]
    assert find(["foobar"], lambda item: item == "b") == (None, False)


def test_find_index_of():
    assert find_index_of(["a", "b", "c", "d", "b"], lambda i: i == "b") == ("b", 1, True)
    assert find_index_of(["foobar"], lambda i: i == "b") == (None, -1, False)


def test_find_last_index_of_visits_backwards():
    seen = []

    def predicate(item):
        seen.append(item)
        return item == "b"

    assert find_last_index_of(["a", "b", "c", "d", "b"], predicate) == ("b", 4, True)
    assert seen == ["b"]
    assert find_last_index_of(["foobar"], lambda i: i == "b") == (None, -1, False)


def test_find_or_else():
    assert find_or_else(["a", "b", "c", "d"], "x", lambda i: i == "b") == "b"
    assert find_or_else(["foobar"], "x", lambda i: i == "b") == "x"


@dataclass(frozen=True)
class _Wrapped:
    foobar: str


def test_find_key():
    data = {"foo": 1, "bar": 2, "baz": 3}
    assert find_key(data, 2) == ("bar", True)
    assert find_key(data, 42) == (None, False)

    wrapped = {"foo": _Wrapped("foo"), "bar": _Wrapped("bar"), "baz": _Wrapped("baz")}
    assert find_key(wrapped, _Wrapped("foo")) == ("foo", True)
    assert find_key(wrapped, _Wrapped("hello world")) == (None, False)


def test_find_key_by():
    data = {"foo": 1, "bar": 2, "baz": 3}
    assert find_key_by(data, lambda k, v: k == "foo") == ("foo", True)
    assert find_key_by(data, lambda k, v: False) == (None, False)


@pytest.mark.parametrize(
    "values, expected",
    [
        ([1, 2, 3], [1, 2, 3]),
        ([1, 2, 2, 3, 1, 2], [3]),
        ([1, 2, 2, 1], []),
        ([], []),
    ],
)
def test_find_uniques(values, expected):
    assert find_uniques(values) == expected


@pytest.mark.parametrize(
    "values, expected",
    [
        ([0, 1, 2], [0, 1, 2]),
        ([0, 1, 2, 3, 4], [2]),
        ([0, 1, 2, 3, 4, 5], []),
        ([], []),
    ],
)
def test_find_uniques_by(values, expected):
    assert find_uniques_by(values, lambda i: i % 3) == expected


def test_find_duplicates():
    assert find_duplicates([1, 2, 2, 1, 2, 3]) == [1, 2]
    assert find_duplicates([1, 2, 3]) == []
    assert find_duplicates([]) == []


def test_find_duplicates_by():
    assert find_duplicates_by([3, 4, 5, 6, 7], lambda i: i % 3) == [3, 4]
    assert find_duplicates_by([0, 1, 2, 3, 4], lambda i: i % 5) == []
    assert find_duplicates_by([], lambda i: i % 3) == []


def test_min():
    assert min_([1, 2, 3]) == 1
    assert min_([3, 2, 1]) == 1
    minute, hour = timedelta(minutes=1), timedelta(hours=1)
    assert min_([timedelta(seconds=1), minute, hour]) == timedelta(seconds=1)
    assert min_([]) is None


def test_min_by():
    shorter = lambda item, current: len(item) < len(current)  # noqa: E731
    assert min_by(["s1", "string2", "s3"], shorter) == "s1"
    assert min_by(["string1", "string2", "s3"], shorter) == "s3"
    assert min_by([], shorter) is None


def test_max():
    assert max_([1, 2, 3]) == 3
    assert max_([3, 2, 1]) == 3
    assert max_([timedelta(seconds=1), timedelta(minutes=1), timedelta(hours=1)]) == timedelta(hours=1)
    assert max_([]) is None


def test_max_by():
    longer = lambda item, current: len(item) > len(current)  # noqa: E731
    assert max_by(["s1", "string2", "s3"], longer) == "string2"
    assert max_by(["string1", "string2", "s3"], longer) == "string1"
    assert max_by([], longer) is None


def test_earliest_and_latest():
    a = datetime(2024, 1, 1, 12, 0)
    b = a + timedelta(hours=1)
    assert earliest(a, b) == a
    assert earliest() is None
    assert latest(a, b) == b
    assert latest() is None


@dataclass
class _Stamped:
    bar: datetime


def test_earliest_by():
    t1 = datetime(2024, 1, 1, 12, 0)
    t2 = t1 + timedelta(hours=1)
    t3 = t1 - timedelta(hours=1)
    items = [_Stamped(t1), _Stamped(t2), _Stamped(t3)]
    assert earliest_by(items, lambda i: i.bar) == _Stamped(t3)
    assert earliest_by([_Stamped(t1)], lambda i: i.bar) == _Stamped(t1)
    assert earliest_by([], lambda i: i.bar) is None


def test_latest_by():
    t1 = datetime(2024, 1, 1, 12, 0)
    t2 = t1 + timedelta(hours=1)
    t3 = t1 - timedelta(hours=1)
    items = [_Stamped(t1), _Stamped(t2), _Stamped(t3)]
    assert latest_by(items, lambda i: i.bar) == _Stamped(t2)
    assert latest_by([_Stamped(t1)], lambda i: i.bar) == _Stamped(t1)
    assert latest_by([], lambda i: i.bar) is None


def test_first_family():
    assert first([1, 2, 3]) == (1, True)
    assert first([]) == (None, False)
    assert first_or_empty([1, 2, 3]) == 1
    assert first_or_empty([]) is None
    assert first_or([1, 2, 3], 63) == 1
    assert first_or([], 23) == 23
    assert first_or([], "test") == "test"


def test_last_family():
    assert last([1, 2, 3]) == (3, True)
    assert last([]) == (None, False)
    assert last_or_empty([1, 2, 3]) == 3
    assert last_or_empty([]) is None
    assert last_or([1, 2, 3], 63) == 3
    assert last_or([], 23) == 23
    assert last_or([], "test") == "test"


def test_nth():
    assert nth([0, 1, 2, 3], 2) == 2
    assert nth([0, 1, 2, 3], -2) == 2
    assert nth([42], 0) == 42
    assert nth([42], -1) == 42


@pytest.mark.parametrize(
    "values, n, message",
    [([0, 1, 2, 3], 42, "nth: 42 out of slice bounds"), ([], 0, "nth: 0 out of slice bounds")],
)
def test_nth_out_of_bounds(values, n, message):
    with pytest.raises(IndexError) as info:
        nth(values, n)
    assert str(info.value) == message


def test_sample():
    assert sample(["a", "b", "c"]) in ["a", "b", "c"]
    assert sample([]) is None


def test_samples():
    assert sorted(samples(["a", "b", "c"], 3)) == ["a", "b", "c"]
    assert samples([], 3) == []
    picked = samples(["", "foo", "bar"], 2)
    assert len(picked) == 2
    assert len(set(picked)) == 2
    assert set(picked) <= {"", "foo", "bar"}