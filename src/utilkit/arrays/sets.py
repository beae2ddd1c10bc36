"""Multiset difference of two sequences."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, List, Sequence, Tuple, TypeVar

T = TypeVar("T")

__all__ = ["ArrayDiffResult", "difference"]


@dataclass(frozen=True)
class ArrayDiffResult(Generic[T]):
    """Elements only in the new sequence (``added``) and only in the old one (``removed``)."""

    added: Tuple[T, ...]
    removed: Tuple[T, ...]


def difference(old: Sequence[T], new: Sequence[T]) -> ArrayDiffResult[T]:
    """Diff two sequences as multisets, so duplicates are counted.

    ``difference([1, 1, 2], [1, 3])`` gives ``added=(3,)`` and
    ``removed=(1, 2)``. Both results keep the relative order of their source.
    """
    removed: List[T] = list(old)
    added: List[T] = []
    for item in new:
        try:
            removed.remove(item)
        except ValueError:
            added.append(item)
    return ArrayDiffResult(added=tuple(added), removed=tuple(removed))
