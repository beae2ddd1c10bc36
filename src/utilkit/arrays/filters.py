"""Filters over sequences."""
from __future__ import annotations

from typing import Hashable, Iterable, List, TypeVar

H = TypeVar("H", bound=Hashable)

__all__ = ["unique"]


def unique(items: Iterable[H]) -> List[H]:
    """Drop duplicates, keeping the first occurrence of each value.

    Values must be hashable; containers compared by content are not supported.
    """
    return list(dict.fromkeys(items))
