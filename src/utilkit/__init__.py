"""utilkit: general-purpose helpers for everyday Python code.

Subpackages and modules:
    equality: Shallow "same value" and deep structural equality
    dictionary: Persistent immutable string-keyed `Dictionary`
    strings: Grapheme-aware case conversion, number formatting, format checks
    aio: Bounded-concurrency ordered async mapping
    arrays, objects, ranges, ordering, nullable, functional, numbers,
        type_safety: Small building blocks used alongside the above

Having this file allows relative imports across the package and the CLI usage
pattern ``python -m utilkit``.
"""
from __future__ import annotations

from .aio import map_async, wait
from .dictionary import Dictionary
from .equality import deep_equal, equal
from .errors import OutOfRangeError, UnreachableError, UtilkitError
from .nullable import ABSENT, Absent

__all__ = [
    "ABSENT",
    "Absent",
    "Dictionary",
    "OutOfRangeError",
    "UnreachableError",
    "UtilkitError",
    "deep_equal",
    "equal",
    "map_async",
    "wait",
]
