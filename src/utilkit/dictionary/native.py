"""Dictionary operations as free functions over plain read-only mappings.

These helpers mirror the `Dictionary` methods for code that keeps its data in
ordinary ``dict`` objects (for example payloads freshly decoded from JSON). No
function mutates its input; updates return a new ``dict``. Unlike `Dictionary`
an update copies the whole mapping, which is fine for the small payloads these
helpers are meant for.

Absence is reported with ``ABSENT``; a key bound to ``None`` is present.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import (
    Any,
    Awaitable,
    Callable,
    Dict,
    Iterable,
    List,
    Mapping,
    Tuple,
    TypeVar,
)

from ..nullable import ABSENT, Maybe

V = TypeVar("V")
U = TypeVar("U")
A = TypeVar("A")

__all__ = [
    "empty",
    "from_entries",
    "get",
    "get_map",
    "has",
    "set",
    "remove",
    "size",
    "entries",
    "values",
    "keys",
    "for_each",
    "for_each_async",
    "modify",
    "find",
    "find_key",
    "find_entry",
    "map_first",
    "map",
    "reduce",
]

empty: Mapping[str, Any] = MappingProxyType({})


def from_entries(pairs: Iterable[Tuple[str, V]]) -> Dict[str, V]:
    return dict(pairs)


def get(mapping: Mapping[str, V], key: str) -> Maybe[V]:
    return mapping[key] if key in mapping else ABSENT


def get_map(mapping: Mapping[str, V], key: str, fn: Callable[[V], U]) -> Maybe[U]:
    return fn(mapping[key]) if key in mapping else ABSENT


def has(mapping: Mapping[str, Any], key: str) -> bool:
    return key in mapping


def _set(mapping: Mapping[str, V], key: str, value: V) -> Dict[str, V]:
    """Return a copy of ``mapping`` with ``key`` bound to ``value``."""
    return {**mapping, key: value}


def remove(mapping: Mapping[str, V], key: str) -> Mapping[str, V]:
    """Return a copy without ``key``, or ``mapping`` itself when the key is missing."""
    if key not in mapping:
        return mapping
    return {k: v for k, v in mapping.items() if k != key}


def size(mapping: Mapping[str, Any]) -> int:
    return len(mapping)


def entries(mapping: Mapping[str, V]) -> List[Tuple[str, V]]:
    return list(mapping.items())


def values(mapping: Mapping[str, V]) -> List[V]:
    return list(mapping.values())


def keys(mapping: Mapping[str, Any]) -> List[str]:
    return list(mapping.keys())


def for_each(mapping: Mapping[str, V], fn: Callable[[V, str], Any]) -> None:
    for key, value in mapping.items():
        fn(value, key)


async def for_each_async(mapping: Mapping[str, V], fn: Callable[[V, str], Awaitable[Any]]) -> None:
    """Await ``fn(value, key)`` for each binding sequentially."""
    for key, value in list(mapping.items()):
        await fn(value, key)


def modify(
    mapping: Mapping[str, V], key: str, fn: Callable[[Maybe[V]], Maybe[V]]
) -> Mapping[str, V]:
    """Create, update or remove ``key`` depending on ``fn(current_or_ABSENT)``."""
    new_value = fn(get(mapping, key))
    if new_value is ABSENT:
        return remove(mapping, key)
    return _set(mapping, key, new_value)


def find_entry(
    mapping: Mapping[str, V], predicate: Callable[[V, str], bool]
) -> Maybe[Tuple[str, V]]:
    for key, value in mapping.items():
        if predicate(value, key):
            return key, value
    return ABSENT


def find(mapping: Mapping[str, V], predicate: Callable[[V, str], bool]) -> Maybe[V]:
    found = find_entry(mapping, predicate)
    return ABSENT if found is ABSENT else found[1]


def find_key(mapping: Mapping[str, V], predicate: Callable[[V, str], bool]) -> Maybe[str]:
    found = find_entry(mapping, predicate)
    return ABSENT if found is ABSENT else found[0]


def map_first(mapping: Mapping[str, V], fn: Callable[[V, str], Maybe[U]]) -> Maybe[U]:
    """Return the first non-``ABSENT`` result of ``fn(value, key)``; lazy."""
    for key, value in mapping.items():
        mapped = fn(value, key)
        if mapped is not ABSENT:
            return mapped
    return ABSENT


def _map(mapping: Mapping[str, V], fn: Callable[[V, str], U]) -> Dict[str, U]:
    return {key: fn(value, key) for key, value in mapping.items()}


def reduce(mapping: Mapping[str, V], fn: Callable[[A, V, str], A], initial: A) -> A:
    acc = initial
    for key, value in mapping.items():
        acc = fn(acc, value, key)
    return acc


# Public names mirror the Dictionary methods. They shadow the builtins, so they
# are bound only here and module code calls _set / _map.
set = _set
map = _map
