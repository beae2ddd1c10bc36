"""Immutable string-keyed dictionaries.

Modules:
    immutable: The persistent `Dictionary` value type
    trie: Hash array mapped trie backing `Dictionary` (structural sharing)
    native: The same operations as free functions over plain ``dict`` objects

Design Invariants:
    - No operation mutates its receiver or argument
    - Missing keys are reported as ``ABSENT``, never raised (except ``d[key]``)
    - Setting a key to ``ABSENT`` removes it
"""
from __future__ import annotations

from . import native as native  # noqa: F401
from .immutable import Dictionary

__all__ = ["Dictionary", "native"]
