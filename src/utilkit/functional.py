"""Small combinators for building callbacks."""
from __future__ import annotations

from typing import Any, Callable, TypeVar

T = TypeVar("T")
U = TypeVar("U")
V = TypeVar("V")

Predicate = Callable[[T], bool]

__all__ = ["constant", "and_every", "or_some", "negate", "on"]


def constant(value: T) -> Callable[..., T]:
    """Return a function that ignores its arguments and always returns ``value``."""
    return lambda *args, **kwargs: value


def and_every(*predicates: Predicate[T]) -> Predicate[T]:
    return lambda value: all(predicate(value) for predicate in predicates)


def or_some(*predicates: Predicate[T]) -> Predicate[T]:
    return lambda value: any(predicate(value) for predicate in predicates)


def negate(predicate: Callable[..., Any]) -> Callable[..., bool]:
    return lambda *args, **kwargs: not predicate(*args, **kwargs)


def on(accessor: Callable[[T], U], combinator: Callable[[U, U], V]) -> Callable[[T, T], V]:
    """Apply ``accessor`` to both arguments before combining them.

    ``on(len, compare_number)`` compares sequences by length.
    """
    return lambda a, b: combinator(accessor(a), accessor(b))
