"""Inclusive integer ranges described by a ``(lower, upper)`` pair.

Every function accepts the bounds either as one ``RangeBounds`` tuple or, for
`int_range` and `int_range_safe`, as two separate integers::

    int_range((3, 5)) == int_range(3, 5) == [3, 4, 5]
"""
from __future__ import annotations

from typing import List, Optional, Tuple, Union

from .errors import OutOfRangeError

__all__ = [
    "RangeBounds",
    "int_range",
    "int_range_safe",
    "is_in_range",
    "index_in_range",
    "range_size",
]

# (lower bound, upper bound), both inclusive
RangeBounds = Tuple[int, int]


def _normalize(bounds: Union[RangeBounds, int], upper: Optional[int]) -> RangeBounds:
    if upper is None:
        if isinstance(bounds, int):
            raise TypeError("int_range() needs a (lower, upper) pair or two integers")
        lower, upper = bounds
        return lower, upper
    if not isinstance(bounds, int):
        raise TypeError("int_range() takes either a pair or two integers, not both")
    return bounds, upper


def int_range(bounds: Union[RangeBounds, int], upper: Optional[int] = None) -> List[int]:
    """Return every integer from lower to upper, both included.

    Raises:
        OutOfRangeError: ``upper < lower``.
    """
    lower, upper = _normalize(bounds, upper)
    if lower > upper:
        raise OutOfRangeError("upper bound", upper, f"a value >= lower bound {lower}")
    return list(range(lower, upper + 1))


def int_range_safe(bounds: Union[RangeBounds, int], upper: Optional[int] = None) -> List[int]:
    """Like `int_range`, but the bounds may be given in either order."""
    a, b = _normalize(bounds, upper)
    return int_range(min(a, b), max(a, b))


def is_in_range(bounds: RangeBounds, value: int) -> bool:
    return bounds[0] <= value <= bounds[1]


def index_in_range(bounds: RangeBounds, value: int) -> int:
    """Return the position of ``value`` within ``bounds`` (lower bound is 0).

    Raises:
        OutOfRangeError: ``value`` is not inside the bounds.
    """
    if not is_in_range(bounds, value):
        raise OutOfRangeError("value", value, f"a value within {bounds[0]}...{bounds[1]}")
    return value - bounds[0]


def range_size(bounds: RangeBounds) -> int:
    """Number of integers in ``bounds``; 0 when the bounds are inverted."""
    lower, upper = bounds
    return upper - lower + 1 if lower <= upper else 0
