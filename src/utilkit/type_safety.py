"""Helpers that make impossible branches and fallible calls explicit."""
from __future__ import annotations

import logging
from typing import Any, Callable, NoReturn, Optional, TypeVar

from .errors import UnreachableError

logger = logging.getLogger(__name__)

T = TypeVar("T")

__all__ = ["assert_exhaustive", "try_safe"]


def assert_exhaustive(value: Any, msg: str = "The match is not exhaustive.") -> NoReturn:
    """Mark the fall-through branch of a match/if chain that covers every case.

    Pass the matched value in the ``case _:`` branch; type checkers flag the
    call when the value's type is not ``Never`` there, and at runtime it
    always raises.

    Raises:
        UnreachableError: Always.
    """
    raise UnreachableError(f"{msg} (got {value!r})")


def try_safe(fn: Callable[[], T], default: Optional[T] = None) -> Optional[T]:
    """Call ``fn`` and return its result, or ``default`` if it raises an ``Exception``."""
    try:
        return fn()
    except Exception as exc:
        logger.debug("try_safe: %s raised %r; returning default", getattr(fn, "__name__", fn), exc)
        return default
