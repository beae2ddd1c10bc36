"""Sequence helpers.

Modules:
    filters: Order-preserving de-duplication
    generators: Cartesian combinations of nested lists
    groups: partition, adjacent grouping and fixed-size chunks
    modify: Copy-on-write reorder / remove / insert by index
    non_empty: Empty / non-empty checks
    reductions: Early-stopping reduce, sums and counters
    sets: Multiset difference

Every function returns a new list (or value) and leaves its input untouched.
"""
from __future__ import annotations

from .filters import unique
from .generators import flat_combine
from .groups import chunk, group_by, partition
from .modify import insert_at, remove_at, reorder
from .non_empty import ensure_non_empty, is_empty, is_not_empty
from .reductions import count, count_by, count_by_many, reduce_while, some_count, sum_of, sum_with
from .sets import ArrayDiffResult, difference

__all__ = [
    "unique",
    "flat_combine",
    "chunk",
    "group_by",
    "partition",
    "insert_at",
    "remove_at",
    "reorder",
    "ensure_non_empty",
    "is_empty",
    "is_not_empty",
    "count",
    "count_by",
    "count_by_many",
    "reduce_while",
    "some_count",
    "sum_of",
    "sum_with",
    "ArrayDiffResult",
    "difference",
]
