"""Comparator building blocks.

A `Compare` function returns a negative number when ``a`` sorts before ``b``,
a positive number when it sorts after, and zero for ties. Use
``functools.cmp_to_key`` to hand one to ``sorted``::

    sorted(people, key=cmp_to_key(reduce_compare(by_age, by_name)))
"""
from __future__ import annotations

from datetime import date, datetime
from typing import Callable, Optional, TypeVar, Union

T = TypeVar("T")

Compare = Callable[[T, T], float]

__all__ = [
    "Compare",
    "reduce_compare",
    "compare_number",
    "compare_date",
    "compare_nullish",
    "reverse",
]


def reduce_compare(*compares: Compare[T]) -> Compare[T]:
    """Chain comparators: the first non-zero result wins (primary, secondary, ...)."""

    def _compare(a: T, b: T) -> float:
        for compare in compares:
            result = compare(a, b)
            if result != 0:
                return result
        return 0

    return _compare


def compare_number(a: float, b: float) -> float:
    return a - b


def compare_date(a: Union[date, datetime], b: Union[date, datetime]) -> float:
    if isinstance(a, datetime) and isinstance(b, datetime):
        return (a - b).total_seconds()
    return (a > b) - (a < b)


def compare_nullish(compare: Compare[T]) -> Compare[Optional[T]]:
    """Extend ``compare`` to accept ``None`` values, which always sort last."""

    def _compare(a: Optional[T], b: Optional[T]) -> float:
        if a is None and b is None:
            return 0
        if a is None:
            return 1
        if b is None:
            return -1
        return compare(a, b)

    return _compare


def reverse(compare: Compare[T]) -> Compare[T]:
    def _compare(a: T, b: T) -> float:
        result = compare(a, b)
        return 0 if result == 0 else -result

    return _compare
