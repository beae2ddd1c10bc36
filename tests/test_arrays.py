from __future__ import annotations

import pytest

from utilkit.arrays import (
    ArrayDiffResult,
    chunk,
    count,
    count_by,
    count_by_many,
    difference,
    ensure_non_empty,
    flat_combine,
    group_by,
    insert_at,
    is_empty,
    is_not_empty,
    partition,
    reduce_while,
    remove_at,
    reorder,
    some_count,
    sum_of,
    sum_with,
    unique,
)
from utilkit.errors import OutOfRangeError


def test_unique_keeps_first_occurrence_order():
    assert unique([3, 1, 3, 2, 1]) == [3, 1, 2]
    assert unique(["a", None, "a", None]) == ["a", None]
    assert unique([]) == []


def test_flat_combine():
    assert flat_combine([["a", "b"], ["c"]]) == [["a", "c"], ["b", "c"]]
    assert flat_combine([["a", "b"], ["c", "d"]]) == [["a", "c"], ["b", "c"], ["a", "d"], ["b", "d"]]
    assert flat_combine([[1, 2]]) == [[1], [2]]
    assert flat_combine([]) == []
    assert flat_combine([[1], []]) == []


def test_partition():
    evens, odds = partition([1, 2, 3, 4, 5], lambda x: x % 2 == 0)
    assert evens == [2, 4]
    assert odds == [1, 3, 5]


def test_group_by_groups_adjacent_only():
    groups = group_by([1, 1, 2, 2, 2, 1], lambda a, b: a == b)
    assert groups == [[1, 1], [2, 2, 2], [1]]
    assert [x for g in groups for x in g] == [1, 1, 2, 2, 2, 1]
    assert group_by([], lambda a, b: True) == []


def test_group_by_keeps_falsy_first_elements():
    assert group_by([0, 0, None, None], lambda a, b: a == b) == [[0, 0], [None, None]]


def test_chunk():
    assert chunk(list(range(1, 10)), 4) == [[1, 2, 3, 4], [5, 6, 7, 8], [9]]
    assert chunk([], 3) == []
    assert chunk((1, 2), 5) == [[1, 2]]
    with pytest.raises(OutOfRangeError):
        chunk([1, 2], 0)
    with pytest.raises(OutOfRangeError):
        chunk([1, 2], -1)


def test_reorder():
    items = ["a", "b", "c", "d"]
    assert reorder(items, 0, 2) == ["b", "c", "a", "d"]
    assert reorder(items, 3, 1) == ["a", "d", "b", "c"]
    assert reorder(items, 1, 1) == items
    assert items == ["a", "b", "c", "d"]
    with pytest.raises(OutOfRangeError):
        reorder(items, 4, 0)
    with pytest.raises(OutOfRangeError):
        reorder(items, 0, -1)


def test_remove_at_and_insert_at():
    items = [1, 2, 3]
    assert remove_at(items, 1) == [1, 3]
    assert insert_at(items, 0, 0) == [0, 1, 2, 3]
    assert insert_at(items, 3, 4) == [1, 2, 3, 4]
    assert items == [1, 2, 3]
    with pytest.raises(OutOfRangeError):
        remove_at(items, 3)
    with pytest.raises(OutOfRangeError):
        remove_at([], 0)
    with pytest.raises(OutOfRangeError):
        insert_at(items, 4, 9)
    with pytest.raises(OutOfRangeError):
        insert_at(items, -1, 9)


def test_non_empty_checks():
    assert is_empty([])
    assert not is_empty([0])
    assert is_not_empty([None])
    items = [1]
    assert ensure_non_empty(items) is items
    assert ensure_non_empty([]) is None


def test_reduce_while_stops_early():
    visited = []

    def add(acc, x, i):
        visited.append(i)
        return acc + x

    assert reduce_while([5, 5, 5, 5], add, lambda acc: acc >= 10, 0) == 10
    assert visited == [0, 1]
    assert reduce_while([1, 2], add, lambda acc: True, 100) == 100


def test_sums_and_counts():
    assert sum_of([1, 2, 3.5]) == 6.5
    assert sum_of([]) == 0
    assert sum_with(["a", "bb"], lambda s, i: len(s) + i) == 4
    assert count([1, 2, 3, 4], lambda x, i: x > 2) == 2
    assert count_by(["apple", "avocado", "banana"], lambda s, i: s[0]) == {"a": 2, "b": 1}
    tags = [["x", "y", "x"], ["y"], []]
    assert count_by_many(tags, lambda t, i: t) == {"x": 1, "y": 2}


def test_some_count():
    assert some_count([1, 2, 3, 4], lambda x: x % 2 == 0, 2)
    assert not some_count([1, 2, 3], lambda x: x % 2 == 0, 2)
    assert some_count([], lambda x: True, 0)


def test_difference_counts_duplicates():
    result = difference([1, 1, 2], [1, 3])
    assert result == ArrayDiffResult(added=(3,), removed=(1, 2))
    assert difference(["a"], ["a"]) == ArrayDiffResult(added=(), removed=())
    assert difference([], [2, 2]).added == (2, 2)
