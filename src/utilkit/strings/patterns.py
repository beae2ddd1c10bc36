"""Checks whether strings match common textual formats."""
from __future__ import annotations

import re
from typing import Callable
from urllib.parse import urlsplit

__all__ = ["is_natural_number", "is_integer", "is_float", "is_empty_or", "is_url"]

_NATURAL_NUMBER = re.compile(r"(?:0|[1-9][0-9]*)")
_INTEGER = re.compile(r"(?:0|-?[1-9][0-9]*)")
# both "." and "," are accepted as decimal separator
_FLOAT = re.compile(r"(?:0|-?[1-9][0-9]*)(?:[.,][0-9]+)?")


def is_natural_number(text: str) -> bool:
    return _NATURAL_NUMBER.fullmatch(text) is not None


def is_integer(text: str) -> bool:
    """Check for a canonical integer literal: no leading zeros, no ``+``, no ``-0``."""
    return _INTEGER.fullmatch(text) is not None


def is_float(text: str) -> bool:
    return _FLOAT.fullmatch(text) is not None


def is_empty_or(check: Callable[[str], bool], text: str) -> bool:
    """True for ``""``, otherwise the result of ``check(text)``."""
    return text == "" or check(text)


def is_url(text: str) -> bool:
    """Check for an absolute URL, i.e. one with a scheme and something after it."""
    try:
        parts = urlsplit(text)
    except ValueError:
        return False
    if not parts.scheme or any(c.isspace() for c in text):
        return False
    return bool(parts.netloc or parts.path or parts.query)
