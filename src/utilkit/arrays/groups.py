"""Splitting sequences into groups."""
from __future__ import annotations

from typing import Callable, Iterable, List, Sequence, Tuple, TypeVar

from ..equality import Equality
from ..errors import OutOfRangeError

T = TypeVar("T")

__all__ = ["partition", "group_by", "chunk"]


def partition(items: Iterable[T], predicate: Callable[[T], bool]) -> Tuple[List[T], List[T]]:
    """Split into ``(matching, not_matching)``, both in input order."""
    matching: List[T] = []
    rest: List[T] = []
    for item in items:
        (matching if predicate(item) else rest).append(item)
    return matching, rest


def group_by(items: Iterable[T], equal: Equality[T]) -> List[List[T]]:
    """Group adjacent elements that ``equal`` considers equal.

    Each element is compared with the first element of the current group.
    Concatenating the groups gives back the input.
    """
    groups: List[List[T]] = []
    for item in items:
        if groups and equal(groups[-1][0], item):
            groups[-1].append(item)
        else:
            groups.append([item])
    return groups


def chunk(items: Sequence[T], size: int) -> List[List[T]]:
    """Split into consecutive chunks of ``size`` elements; the last may be shorter.

    Raises:
        OutOfRangeError: ``size`` is not positive.
    """
    if size <= 0:
        raise OutOfRangeError("size", size, "a positive integer")
    return [list(items[i : i + size]) for i in range(0, len(items), size)]
