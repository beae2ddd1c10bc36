"""Signed number formatting and strict integer parsing.

Formatting uses the typographic minus sign (U+2212) followed by a word joiner
(U+2060) so that a negative number never wraps between sign and digits.
Parsing only accepts canonical literals (see `utilkit.strings.patterns`) and
returns None instead of raising.
"""
from __future__ import annotations

from typing import Optional, Union

from .patterns import is_integer, is_natural_number

__all__ = [
    "MINUS",
    "PLUS_MINUS",
    "sign_ignore_zero",
    "sign",
    "sign_str",
    "parse_int",
    "parse_nat",
]

Number = Union[int, float]

MINUS = "\u2212"
PLUS_MINUS = "\u00b1"
_WORD_JOINER = "\u2060"


def _format(x: Number) -> str:
    if isinstance(x, float) and x.is_integer():
        return str(int(x))
    return str(x)


def sign_ignore_zero(x: Number) -> Optional[str]:
    """Format ``x`` with an explicit sign; None for zero."""
    if x > 0:
        return f"+{_format(x)}"
    if x < 0:
        return f"{MINUS}{_WORD_JOINER}{_format(abs(x))}"
    return None


def sign(x: Number) -> str:
    """Format ``x`` with an explicit sign; ``"0"`` for zero."""
    signed = sign_ignore_zero(x)
    return "0" if signed is None else signed


def sign_str(x: Number) -> Optional[str]:
    if x > 0:
        return "+"
    if x < 0:
        return MINUS
    return None


def parse_int(text: str) -> Optional[int]:
    return int(text, 10) if is_integer(text) else None


def parse_nat(text: str) -> Optional[int]:
    return int(text, 10) if is_natural_number(text) else None
