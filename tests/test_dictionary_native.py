from __future__ import annotations

import asyncio

from utilkit.dictionary import native
from utilkit.nullable import ABSENT


def test_get_has_and_get_map():
    d = {"a": 1, "n": None}
    assert native.get(d, "a") == 1
    assert native.get(d, "n") is None
    assert native.get(d, "x") is ABSENT
    assert native.has(d, "n")
    assert native.get_map(d, "a", lambda v: v + 1) == 2
    assert native.get_map(d, "x", lambda v: v + 1) is ABSENT


def test_set_and_remove_do_not_mutate():
    d = {"a": 1}
    d2 = native.set(d, "b", 2)
    assert d == {"a": 1}
    assert d2 == {"a": 1, "b": 2}
    d3 = native.remove(d2, "a")
    assert d3 == {"b": 2}
    assert d2 == {"a": 1, "b": 2}
    assert native.remove(d, "missing") is d


def test_modify():
    d = {"count": 1}
    assert native.modify(d, "count", lambda v: v + 1) == {"count": 2}
    assert native.modify(d, "count", lambda v: ABSENT) == {}
    assert native.modify(d, "new", lambda v: 0 if v is ABSENT else v) == {"count": 1, "new": 0}
    assert d == {"count": 1}


def test_queries():
    d = native.from_entries([("a", 1), ("b", 2), ("c", 3)])
    assert native.size(d) == 3
    assert native.keys(d) == ["a", "b", "c"]
    assert native.values(d) == [1, 2, 3]
    assert native.entries(d) == [("a", 1), ("b", 2), ("c", 3)]
    assert native.find(d, lambda v, k: v > 1) == 2
    assert native.find_key(d, lambda v, k: v > 1) == "b"
    assert native.find_entry(d, lambda v, k: k == "c") == ("c", 3)
    assert native.find(d, lambda v, k: v > 5) is ABSENT
    assert native.map_first(d, lambda v, k: k * v if v > 1 else ABSENT) == "bb"
    assert native.map(d, lambda v, k: v * 10) == {"a": 10, "b": 20, "c": 30}
    assert native.reduce(d, lambda acc, v, k: acc + k, "") == "abc"
    assert len(native.empty) == 0


def test_for_each_variants():
    d = {"a": 1, "b": 2}
    seen = []
    native.for_each(d, lambda v, k: seen.append((k, v)))
    assert seen == [("a", 1), ("b", 2)]

    visited = []

    async def visit(v, k):
        await asyncio.sleep(0)
        visited.append(k)

    asyncio.run(native.for_each_async(d, visit))
    assert visited == ["a", "b"]


def test_public_set_and_map_keep_builtins_usable():
    assert native.set is native._set
    assert native.map is native._map
    # modify goes through the module's own set, not the builtin
    assert native.modify({"a": 1}, "b", lambda v: 2) == {"a": 1, "b": 2}
    assert native.map({"a": 1}, lambda v, k: [v]) == {"a": [1]}
    assert set(native.keys({"a": 1, "b": 2})) == {"a", "b"}
