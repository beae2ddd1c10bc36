"""Functions that generate new lists from nested input."""
from __future__ import annotations

from typing import List, Sequence, TypeVar

T = TypeVar("T")

__all__ = ["flat_combine"]


def flat_combine(groups: Sequence[Sequence[T]]) -> List[List[T]]:
    """Return every combination that picks one element from each group.

    The first group varies fastest::

        flat_combine([["a", "b"], ["c", "d"]])
        # [["a", "c"], ["b", "c"], ["a", "d"], ["b", "d"]]

    No groups give no combinations; an empty group gives none either.
    """
    if not groups:
        return []
    combinations: List[List[T]] = [[item] for item in groups[0]]
    for group in groups[1:]:
        combinations = [prefix + [item] for item in group for prefix in combinations]
    return combinations
