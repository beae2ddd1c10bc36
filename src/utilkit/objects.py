"""Helpers for plain ``dict`` records.

None of these functions mutate their arguments; each returns a new ``dict``
whose key order is documented per function.
"""
from __future__ import annotations

from functools import cmp_to_key
from typing import Any, Callable, Dict, Mapping, Optional, Sequence, TypeVar

from .nullable import ABSENT, Maybe

K = TypeVar("K")
V = TypeVar("V")
U = TypeVar("U")

__all__ = [
    "map_object",
    "sort_object_keys_by_index",
    "sort_object_keys",
    "merge_objects",
    "only_keys",
    "has_key",
    "omit_none_values",
    "omit_keys",
]


def map_object(obj: Mapping[K, V], fn: Callable[[V, K], Maybe[U]]) -> Dict[K, U]:
    """Map every value with ``fn(value, key)``; an ``ABSENT`` result drops the key."""
    result: Dict[K, U] = {}
    for key, value in obj.items():
        mapped = fn(value, key)
        if mapped is not ABSENT:
            result[key] = mapped
    return result


def sort_object_keys_by_index(obj: Mapping[str, V], keys: Sequence[str]) -> Dict[str, V]:
    """Reorder ``obj`` so that ``keys`` come first, in the given order.

    Listed keys missing from ``obj`` are skipped. Unlisted keys follow in
    their original order.
    """
    listed = set(keys)
    ordered = {key: obj[key] for key in keys if key in obj}
    ordered.update((key, value) for key, value in obj.items() if key not in listed)
    return ordered


def _compare_str(a: str, b: str) -> int:
    return (a > b) - (a < b)


def sort_object_keys(
    obj: Mapping[str, V], compare: Optional[Callable[[str, str], float]] = None
) -> Dict[str, V]:
    """Return ``obj`` with keys sorted by ``compare`` (code point order by default)."""
    key = cmp_to_key(compare or _compare_str)
    return {k: obj[k] for k in sorted(obj, key=key)}


def merge_objects(
    first: Mapping[K, V], second: Mapping[K, V], solve_conflict: Callable[[V, V], V]
) -> Dict[K, V]:
    """Merge two mappings; keys in both get ``solve_conflict(first_value, second_value)``."""
    merged = dict(first)
    for key, value in second.items():
        merged[key] = solve_conflict(merged[key], value) if key in merged else value
    return merged


def only_keys(obj: Mapping[K, V], *keys: K) -> Dict[K, V]:
    wanted = set(keys)
    return {key: value for key, value in obj.items() if key in wanted}


def has_key(obj: Mapping[Any, Any], key: Any) -> bool:
    return key in obj


def omit_none_values(obj: Mapping[K, Optional[V]]) -> Dict[K, V]:
    return {key: value for key, value in obj.items() if value is not None}


def omit_keys(obj: Mapping[K, V], *keys: K) -> Dict[K, V]:
    unwanted = set(keys)
    return {key: value for key, value in obj.items() if key not in unwanted}
