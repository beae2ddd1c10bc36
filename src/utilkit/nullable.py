"""Absence sentinel and helpers for optional values.

``ABSENT`` is the explicit "no value" marker used throughout utilkit. It is
distinct from ``None`` so that a mapping can store ``None`` and still tell a
missing key apart from a key bound to ``None``.

Public API:
    Absent / ABSENT: Single-member enum used as the absence sentinel
    is_nullish / is_not_nullish: Test for ``None`` or ``ABSENT``
    map_nullable / map_nullable_default: Apply a function to present values
    nullable_to_list: ``[value]`` for present values, ``[]`` otherwise
    ensure: Keep a value only if it passes a predicate
"""
from __future__ import annotations

import enum
from typing import Any, Callable, Final, List, Literal, TypeVar, Union

T = TypeVar("T")
U = TypeVar("U")

__all__ = [
    "Absent",
    "ABSENT",
    "Maybe",
    "is_nullish",
    "is_not_nullish",
    "map_nullable",
    "map_nullable_default",
    "nullable_to_list",
    "ensure",
]


class Absent(enum.Enum):
    ABSENT = "ABSENT"

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "ABSENT"


ABSENT: Final = Absent.ABSENT

# A value of type T, or the absence marker.
Maybe = Union[T, Literal[Absent.ABSENT]]


def is_nullish(value: Any) -> bool:
    """Return True for ``None`` and ``ABSENT``."""
    return value is None or value is ABSENT


def is_not_nullish(value: Any) -> bool:
    return not is_nullish(value)


def map_nullable(value: Any, fn: Callable[[Any], U]) -> Any:
    """Apply ``fn`` to a present value; pass ``None`` / ``ABSENT`` through unchanged."""
    return value if is_nullish(value) else fn(value)


def map_nullable_default(value: Any, fn: Callable[[Any], U], default: U) -> U:
    """Apply ``fn`` to a present value, otherwise return ``default``."""
    return default if is_nullish(value) else fn(value)


def nullable_to_list(value: Any) -> List[Any]:
    """Return a one-element list for a present value, an empty list otherwise.

    Handy for splicing optional items into a literal::

        [1, *nullable_to_list(maybe_two)]
    """
    return [] if is_nullish(value) else [value]


def ensure(value: T, predicate: Callable[[T], bool]) -> Maybe[T]:
    """Return ``value`` if it satisfies ``predicate``, otherwise ``ABSENT``."""
    return value if predicate(value) else ABSENT
