"""Checks for empty and non-empty sequences."""
from __future__ import annotations

from typing import Optional, Sequence, TypeVar

S = TypeVar("S", bound=Sequence)

__all__ = ["is_empty", "is_not_empty", "ensure_non_empty"]


def is_empty(items: Sequence) -> bool:
    return len(items) == 0


def is_not_empty(items: Sequence) -> bool:
    return len(items) > 0


def ensure_non_empty(items: S) -> Optional[S]:
    """Return ``items`` itself when it has at least one element, else None."""
    return items if is_not_empty(items) else None
