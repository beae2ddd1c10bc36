"""Copy-on-write positional edits of sequences.

Indices are checked eagerly and must be non-negative; Python's negative
indexing is not supported here.
"""
from __future__ import annotations

from typing import List, Sequence, TypeVar

from ..errors import OutOfRangeError

T = TypeVar("T")

__all__ = ["reorder", "remove_at", "insert_at"]


def _check_index(name: str, index: int, length: int, *, allow_end: bool = False) -> None:
    upper = length if allow_end else length - 1
    if not 0 <= index <= upper:
        raise OutOfRangeError(name, index, f"an index within 0...{upper} for length {length}")


def reorder(items: Sequence[T], source_index: int, target_index: int) -> List[T]:
    """Move the element at ``source_index`` so that it ends up at ``target_index``."""
    _check_index("source index", source_index, len(items))
    _check_index("target index", target_index, len(items))
    result = list(items)
    result.insert(target_index, result.pop(source_index))
    return result


def remove_at(items: Sequence[T], index: int) -> List[T]:
    _check_index("index", index, len(items))
    return [*items[:index], *items[index + 1 :]]


def insert_at(items: Sequence[T], index: int, item: T) -> List[T]:
    """Insert ``item`` before ``index``; ``index == len(items)`` appends."""
    _check_index("index", index, len(items), allow_end=True)
    return [*items[:index], item, *items[index:]]
