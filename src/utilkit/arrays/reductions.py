"""Reducing sequences to a single value."""
from __future__ import annotations

from typing import Callable, Dict, Hashable, Iterable, Sequence, TypeVar

from .filters import unique

T = TypeVar("T")
A = TypeVar("A")
K = TypeVar("K", bound=Hashable)

__all__ = [
    "reduce_while",
    "sum_of",
    "sum_with",
    "count",
    "count_by",
    "count_by_many",
    "some_count",
]


def reduce_while(
    items: Sequence[T],
    fn: Callable[[A, T, int], A],
    stop: Callable[[A], bool],
    initial: A,
) -> A:
    """Reduce like ``functools.reduce`` but stop early.

    ``stop`` is checked on the initial value and after every step; once it
    returns True the current accumulator is returned and no further element
    is visited.

    Args:
        items: Elements to fold over.
        fn: ``fn(acc, item, index)`` producing the next accumulator.
        stop: Predicate on the accumulator that ends the reduction.
        initial: Starting accumulator.
    """
    acc = initial
    for index, item in enumerate(items):
        if stop(acc):
            break
        acc = fn(acc, item, index)
    return acc


def sum_of(numbers: Iterable[float]) -> float:
    return sum(numbers, 0)


def sum_with(items: Iterable[T], fn: Callable[[T, int], float]) -> float:
    return sum((fn(item, index) for index, item in enumerate(items)), 0)


def count(items: Iterable[T], predicate: Callable[[T, int], bool]) -> int:
    return sum(1 for index, item in enumerate(items) if predicate(item, index))


def count_by(items: Iterable[T], fn: Callable[[T, int], K]) -> Dict[K, int]:
    """Count how many elements map to each key; keys appear in first-seen order."""
    counts: Dict[K, int] = {}
    for index, item in enumerate(items):
        key = fn(item, index)
        counts[key] = counts.get(key, 0) + 1
    return counts


def count_by_many(items: Iterable[T], fn: Callable[[T, int], Iterable[K]]) -> Dict[K, int]:
    """Like `count_by`, but each element may map to several keys (each counted once)."""
    counts: Dict[K, int] = {}
    for index, item in enumerate(items):
        for key in unique(fn(item, index)):
            counts[key] = counts.get(key, 0) + 1
    return counts


def some_count(items: Sequence[T], predicate: Callable[[T], bool], min_count: int) -> bool:
    """True if at least ``min_count`` elements satisfy ``predicate``; stops early."""
    found = reduce_while(
        items,
        lambda acc, item, _index: acc + 1 if predicate(item) else acc,
        lambda acc: acc >= min_count,
        0,
    )
    return found >= min_count
