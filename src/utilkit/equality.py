"""Shallow and deep value equality plus ordering predicates.

Shallow equality follows "same value" semantics rather than ``==``:

    - ``float("nan")`` equals ``float("nan")``
    - ``0.0`` and ``-0.0`` are different values
    - ``True`` is not the same value as ``1`` (bool is not treated as int)
    - scalars (None, bool, numbers, str, bytes) compare by value, every other
      object compares by identity

Deep equality is purely structural: two freshly built containers with the same
contents are equal even though they are different objects.

Public Functions:
    equal / not_equal: Shallow "same value" comparison
    array_equal: Element-wise shallow comparison of two sequences
    deep_equal: Recursive structural comparison of mappings, sequences and records
    lt / lte / gt / gte: Ordering predicates, building blocks for comparators

Design Invariant:
    ``deep_equal`` never short-circuits on container identity other than via
    ``equal``; behavior on cyclic structures is unspecified.
"""
from __future__ import annotations

import dataclasses
import math
from collections.abc import Mapping, Sequence
from typing import Any, Callable, TypeVar

T = TypeVar("T")

Equality = Callable[[T, T], bool]
NumberEquality = Callable[[float, float], bool]

__all__ = [
    "Equality",
    "NumberEquality",
    "lt",
    "lte",
    "gt",
    "gte",
    "equal",
    "not_equal",
    "array_equal",
    "deep_equal",
]

_SCALARS = (type(None), bool, int, float, complex, str, bytes)
_TEXT = (str, bytes, bytearray)


def lt(a: Any, b: Any) -> bool:
    return a < b


def lte(a: Any, b: Any) -> bool:
    return a <= b


def gt(a: Any, b: Any) -> bool:
    return a > b


def gte(a: Any, b: Any) -> bool:
    return a >= b


def _same_number(a: float, b: float) -> bool:
    if a != a and b != b:
        # both NaN
        return True
    if a == 0 and b == 0:
        # signed zeros
        return math.copysign(1.0, a) == math.copysign(1.0, b)
    return a == b


def equal(a: Any, b: Any) -> bool:
    """Check whether two values are the same value (shallow)."""
    if a is b:
        # NaN objects are identical to themselves; signed zeros never share an object
        return True
    if not (isinstance(a, _SCALARS) and isinstance(b, _SCALARS)):
        return False
    if isinstance(a, bool) or isinstance(b, bool):
        return isinstance(a, bool) and isinstance(b, bool) and a == b
    if isinstance(a, (int, float)) and isinstance(b, (int, float)):
        return _same_number(a, b)
    if isinstance(a, complex) or isinstance(b, complex):
        if not isinstance(a, (int, float, complex)) or not isinstance(b, (int, float, complex)):
            return False
        a_c, b_c = complex(a), complex(b)
        return _same_number(a_c.real, b_c.real) and _same_number(a_c.imag, b_c.imag)
    return type(a) is type(b) and a == b


def not_equal(a: Any, b: Any) -> bool:
    return not equal(a, b)


def array_equal(arr1: Sequence[Any], arr2: Sequence[Any]) -> bool:
    """Check two sequences for equality, comparing elements shallowly.

    Use `deep_equal` when the elements are themselves containers.
    """
    return len(arr1) == len(arr2) and all(equal(x, y) for x, y in zip(arr1, arr2))


def _is_array_like(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, _TEXT)


def _is_record(value: Any) -> bool:
    if isinstance(value, type) or callable(value):
        return False
    return dataclasses.is_dataclass(value) or hasattr(value, "__dict__")


def _record_fields(value: Any) -> Mapping[str, Any]:
    if dataclasses.is_dataclass(value):
        return {f.name: getattr(value, f.name) for f in dataclasses.fields(value)}
    return vars(value)


def deep_equal(a: Any, b: Any) -> bool:
    """Check two values for structural equality.

    Mappings are equal when they have exactly the same key set and every pair
    of values is deeply equal. Array-like values (non-text sequences such as
    lists and tuples) are equal when they have the same length and every pair
    of elements is deeply equal. Record-like objects of the same type
    (dataclass instances, pydantic models, plain objects with ``__dict__``)
    are compared field by field the same way. Other values of the same type
    (``date``, ``Decimal``, ``frozenset`` ...) fall back to ``==``.

    Args:
        a: First value.
        b: Second value.

    Returns:
        True if both values have the same structure and contents.
    """
    if equal(a, b):
        return True

    if isinstance(a, Mapping) and isinstance(b, Mapping):
        if len(a) != len(b):
            return False
        return all(key in b and deep_equal(value, b[key]) for key, value in a.items())

    if _is_array_like(a) and _is_array_like(b):
        if len(a) != len(b):
            return False
        return all(deep_equal(x, y) for x, y in zip(a, b))

    if type(a) is not type(b):
        return False

    if _is_record(a):
        return deep_equal(_record_fields(a), _record_fields(b))

    if isinstance(a, _SCALARS):
        return False
    return bool(a == b)
