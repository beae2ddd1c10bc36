"""Exception types raised by utilkit operations.

All validation failures are detected eagerly, before an operation does any
work. Lookups that find nothing never raise; they return the ``ABSENT``
sentinel (see ``utilkit.nullable``) instead.

Hierarchy:
    UtilkitError: Base class for every error raised by this package
    OutOfRangeError: An index, bound or size violates its legal range
    UnreachableError: A branch that should be impossible was reached
"""
from __future__ import annotations

from typing import Any

__all__ = ["UtilkitError", "OutOfRangeError", "UnreachableError"]


class UtilkitError(Exception):
    """Base class for errors raised by utilkit."""


class OutOfRangeError(UtilkitError, ValueError):
    """Raised when an argument lies outside its legal range.

    Subclasses ``ValueError`` so callers that only know the builtin hierarchy
    can still catch it.

    Attributes:
        name: Name of the offending argument (e.g. ``"size"``, ``"index"``).
        value: The rejected value.
        expected: Human-readable description of the legal range.
    """

    def __init__(self, name: str, value: Any, expected: str):
        self.name = name
        self.value = value
        self.expected = expected
        super().__init__(f"{name} {value!r} is out of range: expected {expected}")


class UnreachableError(UtilkitError):
    """Raised by ``assert_exhaustive`` when a supposedly exhaustive branch falls through."""
