"""Immutable mapping from strings to values with copy-on-write updates.

`Dictionary` is a persistent value type: every update (``set``, ``remove``,
``modify``, ``map``) returns a new instance and leaves the receiver untouched.
Unchanged parts of the underlying hash array mapped trie (see
`utilkit.dictionary.trie`) are shared between versions, so an update costs
O(log32 n) instead of a full copy. Instances are safe to share by reference,
including between coroutines.

Absence is explicit: lookups that find nothing return ``ABSENT`` (never raise),
and setting a key to ``ABSENT`` removes it. ``None`` is an ordinary value.

Key order is implementation-defined (trie order). Only membership and the bound
values are meaningful; callers must not rely on insertion order.

Serialization:
    ``to_dict()`` produces a plain ``dict`` of exactly the current bindings.
    `Dictionary` also plugs into pydantic, so ``Dictionary[int]`` can be used
    as a model field type and is emitted as a plain JSON object by
    ``model_dump_json``. Pickling and ``copy`` rebuild the trie from the plain
    bindings, so unpickling in another process rehashes every key.
"""
from __future__ import annotations

from typing import (
    Any,
    Awaitable,
    Callable,
    Dict,
    Iterable,
    Iterator,
    List,
    Mapping,
    Optional,
    Tuple,
    TypeVar,
    Union,
    get_args,
)

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from ..nullable import ABSENT, Maybe
from . import trie

V = TypeVar("V")
U = TypeVar("U")
A = TypeVar("A")

__all__ = ["Dictionary"]


class Dictionary(Mapping[str, V]):
    """An immutable dictionary mapping strings to values."""

    __slots__ = ("_root", "_size", "_hash")

    _root: trie.BitmapNode
    _size: int
    _hash: Optional[int]

    def __init__(self, source: Union[Mapping[str, V], Iterable[Tuple[str, V]]] = ()):
        """Create a dictionary from a mapping or an iterable of key-value pairs.

        Later pairs overwrite earlier ones for the same key. Pairs whose value
        is ``ABSENT`` are skipped.
        """
        pairs = source.items() if isinstance(source, Mapping) else source
        root = trie.EMPTY_NODE
        size = 0
        for key, value in pairs:
            hash_ = trie.key_hash(key)
            if value is ABSENT:
                if trie.lookup(root, hash_, key) is not None:
                    root = trie.dissoc(root, hash_, key)
                    size -= 1
                continue
            root, added = trie.assoc(root, hash_, key, value)
            size += added
        self._root = root
        self._size = size
        self._hash = None

    @classmethod
    def _from_root(cls, root: trie.BitmapNode, size: int) -> Dictionary[Any]:
        instance = object.__new__(cls)
        instance._root = root
        instance._size = size
        instance._hash = None
        return instance

    @classmethod
    def empty(cls) -> Dictionary[Any]:
        """Return the shared zero-entry dictionary."""
        return _EMPTY

    @classmethod
    def from_entries(cls, entries: Iterable[Tuple[str, V]]) -> Dictionary[V]:
        """Construct a dictionary from key-value pairs; later duplicates win."""
        return cls(entries)

    # ------------------------------------------------------------------ queries

    def get(self, key: str, default: Any = ABSENT) -> Any:  # type: ignore[override]
        """Return the value for ``key``, or ``default`` (``ABSENT``) if missing."""
        entry = trie.lookup(self._root, trie.key_hash(key), key)
        return default if entry is None else entry.value

    def get_map(self, key: str, fn: Callable[[V], U]) -> Maybe[U]:
        """Return ``fn(value)`` for a present key, otherwise ``ABSENT``."""
        entry = trie.lookup(self._root, trie.key_hash(key), key)
        return ABSENT if entry is None else fn(entry.value)

    def has(self, key: str) -> bool:
        """Check membership; True even when the bound value is falsy or None."""
        if not isinstance(key, str):
            return False
        return trie.lookup(self._root, trie.key_hash(key), key) is not None

    @property
    def size(self) -> int:
        return self._size

    def entries(self) -> List[Tuple[str, V]]:
        return [(e.key, e.value) for e in trie.iter_entries(self._root)]

    # ------------------------------------------------------------------ updates

    def set(self, key: str, value: Maybe[V]) -> Dictionary[V]:
        """Return a dictionary with ``key`` bound to ``value``.

        Overwrites an existing binding. Setting ``ABSENT`` removes the key.
        """
        if value is ABSENT:
            return self.remove(key)
        root, added = trie.assoc(self._root, trie.key_hash(key), key, value)
        if root is self._root:
            return self
        return self._from_root(root, self._size + added)

    def remove(self, key: str) -> Dictionary[V]:
        """Return a dictionary without ``key``; the same instance if it was missing."""
        root = trie.dissoc(self._root, trie.key_hash(key), key)
        if root is self._root:
            return self
        return self._from_root(root, self._size - 1)

    def modify(self, key: str, fn: Callable[[Maybe[V]], Maybe[V]]) -> Dictionary[V]:
        """Create, update or remove the value for ``key`` based on its current value.

        ``fn`` receives the current value, or ``ABSENT`` when the key is
        missing. Returning ``ABSENT`` removes the key; any other result is
        stored.
        """
        return self.set(key, fn(self.get(key)))

    def map(self, fn: Callable[[V, str], U]) -> Dictionary[U]:
        """Apply ``fn(value, key)`` to every binding, keeping the key set exactly."""

        def _apply(value: V, key: str) -> U:
            result = fn(value, key)
            if result is ABSENT:
                raise TypeError(
                    f"map function returned ABSENT for key {key!r}; use modify() to remove keys"
                )
            return result

        return self._from_root(trie.map_values(self._root, _apply), self._size)

    # ---------------------------------------------------------------- traversal

    def find_entry(self, predicate: Callable[[V, str], bool]) -> Maybe[Tuple[str, V]]:
        """Return the first ``(key, value)`` pair matching ``predicate``, else ``ABSENT``."""
        for entry in trie.iter_entries(self._root):
            if predicate(entry.value, entry.key):
                return entry.key, entry.value
        return ABSENT

    def find(self, predicate: Callable[[V, str], bool]) -> Maybe[V]:
        found = self.find_entry(predicate)
        return ABSENT if found is ABSENT else found[1]

    def find_key(self, predicate: Callable[[V, str], bool]) -> Maybe[str]:
        found = self.find_entry(predicate)
        return ABSENT if found is ABSENT else found[0]

    def map_first(self, fn: Callable[[V, str], Maybe[U]]) -> Maybe[U]:
        """Return the first non-``ABSENT`` result of ``fn(value, key)``.

        Stops calling ``fn`` as soon as a result is found.
        """
        for entry in trie.iter_entries(self._root):
            mapped = fn(entry.value, entry.key)
            if mapped is not ABSENT:
                return mapped
        return ABSENT

    def reduce(self, fn: Callable[[A, V, str], A], initial: A) -> A:
        acc = initial
        for entry in trie.iter_entries(self._root):
            acc = fn(acc, entry.value, entry.key)
        return acc

    def for_each(self, fn: Callable[[V, str], Any]) -> None:
        for entry in trie.iter_entries(self._root):
            fn(entry.value, entry.key)

    async def for_each_async(self, fn: Callable[[V, str], Awaitable[Any]]) -> None:
        """Await ``fn(value, key)`` for every binding, strictly one after another."""
        for entry in trie.iter_entries(self._root):
            await fn(entry.value, entry.key)

    # ---------------------------------------------------------- mapping protocol

    def __getitem__(self, key: str) -> V:
        entry = trie.lookup(self._root, trie.key_hash(key), key)
        if entry is None:
            raise KeyError(key)
        return entry.value

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.has(key)

    def __iter__(self) -> Iterator[str]:
        for entry in trie.iter_entries(self._root):
            yield entry.key

    def __len__(self) -> int:
        return self._size

    def __hash__(self) -> int:
        if self._hash is None:
            self._hash = hash(frozenset(self.items()))
        return self._hash

    def __repr__(self) -> str:
        return f"Dictionary({self.to_dict()!r})"

    def __reduce__(self) -> Tuple[Any, ...]:
        # trie entries cache per-process string hashes; rebuild from plain bindings
        return (self.__class__, (self.to_dict(),))

    # ------------------------------------------------------------ serialization

    def to_dict(self) -> Dict[str, V]:
        """Return a fresh plain ``dict`` with exactly the current bindings."""
        return {e.key: e.value for e in trie.iter_entries(self._root)}

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        args = get_args(source_type)
        values_schema = handler.generate_schema(args[0]) if args else core_schema.any_schema()
        plain_schema = core_schema.dict_schema(
            keys_schema=core_schema.str_schema(), values_schema=values_schema
        )
        from_plain = core_schema.no_info_after_validator_function(cls, plain_schema)
        return core_schema.json_or_python_schema(
            json_schema=from_plain,
            python_schema=core_schema.union_schema(
                [core_schema.is_instance_schema(cls), from_plain]
            ),
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda instance: instance.to_dict(), return_schema=plain_schema
            ),
        )


_EMPTY: Dictionary[Any] = Dictionary._from_root(trie.EMPTY_NODE, 0)
