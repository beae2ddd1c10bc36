"""Integer helpers."""
from __future__ import annotations

import random

__all__ = ["random_int", "random_int_range", "even", "odd"]


def random_int(maximum: int) -> int:
    """Random integer between 0 and ``maximum``, both included."""
    return random.randint(0, maximum)


def random_int_range(minimum: int, maximum: int) -> int:
    """Random integer between ``minimum`` and ``maximum``, both included."""
    return random.randint(minimum, maximum)


def even(x: int) -> bool:
    return x % 2 == 0


def odd(x: int) -> bool:
    return x % 2 != 0
