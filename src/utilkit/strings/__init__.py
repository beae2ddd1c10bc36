"""String helpers.

Modules:
    casing: Grapheme-aware word segmentation and case conversion
    number: Signed number formatting and strict integer parsing
    patterns: Format checks (numbers, URLs)
"""
from __future__ import annotations

from .casing import (
    common_prefix,
    is_non_empty_string,
    split_string_parts,
    to_camel_case,
    to_kebab_case,
    to_pascal_case,
    to_snake_case,
    to_title_case,
)

__all__ = [
    "common_prefix",
    "is_non_empty_string",
    "split_string_parts",
    "to_camel_case",
    "to_kebab_case",
    "to_pascal_case",
    "to_snake_case",
    "to_title_case",
]
