"""Word segmentation and case conversion for identifiers and labels.

Text is processed as a sequence of grapheme clusters (user-perceived
characters, via the ``regex`` module's ``\\X``), so combining marks and emoji
sequences are never split apart. Each cluster is classified by its first code
point:

    uppercase: ``str.isupper()``
    lowercase-or-digit: alphanumeric and not uppercase (caseless letters such
        as CJK count here)
    letter-or-digit: alphanumeric
    separator: everything else

Public Functions:
    split_string_parts: Split into word tokens by casing and separators
    to_pascal_case / to_camel_case / to_title_case / to_kebab_case /
        to_snake_case: Re-join the tokens in the given style
    common_prefix: Longest prefix shared by all inputs
    is_non_empty_string: ``str`` with at least one character

Design Invariant:
    ``"".join(split_string_parts(s))`` equals ``s`` with every separator
    cluster removed.
"""
from __future__ import annotations

from typing import Any, List, Optional, Sequence

import regex

__all__ = [
    "graphemes",
    "split_string_parts",
    "to_pascal_case",
    "to_camel_case",
    "to_kebab_case",
    "to_snake_case",
    "to_title_case",
    "common_prefix",
    "is_non_empty_string",
]

_GRAPHEME = regex.compile(r"\X")


def graphemes(text: str) -> List[str]:
    """Split ``text`` into extended grapheme clusters."""
    return _GRAPHEME.findall(text)


def _is_uppercase(cluster: str) -> bool:
    return cluster[0].isupper()


def _is_lowercase_or_digit(cluster: str) -> bool:
    first = cluster[0]
    return first.isalnum() and not first.isupper()


def _is_letter_or_digit(cluster: str) -> bool:
    return cluster[0].isalnum()


def is_non_empty_string(value: Any) -> bool:
    return isinstance(value, str) and len(value) > 0


def split_string_parts(text: str) -> List[str]:
    """Split a string into word tokens based on casing and separators.

    Runs of uppercase letters stay together as an acronym unless the last
    uppercase letter begins a new lower-case word (``"XMLParser"`` gives
    ``["XML", "Parser"]``). Separators only end the current token; they never
    appear in the output.

    Args:
        text: Input string, any script.

    Returns:
        Non-empty tokens in input order.
    """
    clusters = graphemes(text)
    # each token is a list of clusters; an empty list is an open placeholder
    tokens: List[List[str]] = []

    for i, cluster in enumerate(clusters):
        if not tokens:
            if _is_letter_or_digit(cluster):
                tokens.append([cluster])
            continue

        last = tokens[-1]
        if _is_uppercase(cluster):
            following: Optional[str] = clusters[i + 1] if i + 1 < len(clusters) else None
            if not last or (
                _is_uppercase(last[-1])
                and (following is None or not _is_lowercase_or_digit(following))
            ):
                last.append(cluster)
            else:
                tokens.append([cluster])
        elif _is_lowercase_or_digit(cluster):
            last.append(cluster)
        elif last:
            tokens.append([])

    if tokens and not tokens[-1]:
        tokens.pop()
    return ["".join(token) for token in tokens]


def _is_all_uppercase(text: str) -> bool:
    return text == text.upper()


def _capitalize(token: str) -> str:
    if _is_all_uppercase(token):
        return token
    clusters = graphemes(token)
    return clusters[0].upper() + "".join(clusters[1:]).lower()


def _normalized_parts(text: str) -> List[str]:
    return split_string_parts(text.lower() if _is_all_uppercase(text) else text)


def to_pascal_case(text: str) -> str:
    return "".join(_capitalize(part) for part in _normalized_parts(text))


def to_camel_case(text: str) -> str:
    parts = _normalized_parts(text)
    return "".join(
        part.lower() if i == 0 else _capitalize(part) for i, part in enumerate(parts)
    )


def to_title_case(text: str) -> str:
    return " ".join(_capitalize(part) for part in _normalized_parts(text))


def to_kebab_case(text: str) -> str:
    return "-".join(part.lower() for part in split_string_parts(text))


def to_snake_case(text: str) -> str:
    return "_".join(part.lower() for part in split_string_parts(text))


def common_prefix(*strings: str) -> str:
    """Return the longest prefix shared by all ``strings``; ``""`` for no input.

    Comparison is per grapheme cluster, so a prefix never ends inside a
    combined character.
    """
    if not strings:
        return ""
    prefix: Sequence[str] = graphemes(strings[0])
    for other in strings[1:]:
        other_clusters = graphemes(other)
        length = 0
        for mine, theirs in zip(prefix, other_clusters):
            if mine != theirs:
                break
            length += 1
        prefix = prefix[:length]
        if not prefix:
            break
    return "".join(prefix)
