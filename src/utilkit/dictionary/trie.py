"""Persistent hash array mapped trie (HAMT) used as the backing store of `Dictionary`.

Every update returns a new root and copies only the nodes on the path from the
root to the affected entry; all other nodes are shared between the old and the
new version. Nothing in this module ever mutates a node after construction.

Node layout:
    Entry: One key/value binding plus the key's 32-bit hash
    BitmapNode: 32-bit ``bitmap`` of occupied slots and a dense ``children``
        tuple (size = popcount(bitmap)); a child is an Entry, a BitmapNode or
        a CollisionNode
    CollisionNode: Entries whose full 32-bit hashes are identical

Each trie level consumes 5 bits of the hash, starting from the least
significant bits, so lookups and updates touch O(log32 n) nodes.

Public Functions:
    lookup: Find the entry for a key
    assoc: Bind a key, returning ``(new_root, added)``
    dissoc: Unbind a key, returning the new root (or the same root if absent)
    map_values: Same-shaped copy with every value transformed
    iter_entries: Depth-first traversal of all entries

Design Invariant:
    The root is always a BitmapNode (``EMPTY_NODE`` for an empty trie). A
    subtree left holding a single Entry after a removal is collapsed into its
    parent slot, and an emptied subtree is unlinked from its parent.
"""
from __future__ import annotations

from typing import Any, Callable, Iterator, NamedTuple, Optional, Tuple, Union

__all__ = [
    "Entry",
    "BitmapNode",
    "CollisionNode",
    "EMPTY_NODE",
    "key_hash",
    "lookup",
    "assoc",
    "dissoc",
    "map_values",
    "iter_entries",
]

BITS = 5
MASK = (1 << BITS) - 1
HASH_BITS = 32
_HASH_MASK = (1 << HASH_BITS) - 1


class Entry(NamedTuple):
    hash: int
    key: str
    value: Any


class BitmapNode:
    __slots__ = ("bitmap", "children")

    def __init__(self, bitmap: int, children: Tuple[Node, ...]):
        self.bitmap = bitmap
        self.children = children

    def __repr__(self) -> str:
        return f"BitmapNode({self.bitmap:#034b}, {len(self.children)} children)"


class CollisionNode:
    __slots__ = ("hash", "entries")

    def __init__(self, hash: int, entries: Tuple[Entry, ...]):
        self.hash = hash
        self.entries = entries

    def __repr__(self) -> str:
        return f"CollisionNode({self.hash:#010x}, {len(self.entries)} entries)"


Node = Union[Entry, BitmapNode, CollisionNode]

EMPTY_NODE = BitmapNode(0, ())


def key_hash(key: str) -> int:
    return hash(key) & _HASH_MASK


def _bit(hash_: int, shift: int) -> int:
    return 1 << ((hash_ >> shift) & MASK)


def _index(bitmap: int, bit: int) -> int:
    return (bitmap & (bit - 1)).bit_count()


def _replace(children: Tuple[Node, ...], index: int, child: Node) -> Tuple[Node, ...]:
    return children[:index] + (child,) + children[index + 1 :]


def lookup(root: BitmapNode, hash_: int, key: str) -> Optional[Entry]:
    """Return the entry bound to ``key``, or None when the key is not present."""
    node: Node = root
    shift = 0
    while True:
        if isinstance(node, CollisionNode):
            for entry in node.entries:
                if entry.key == key:
                    return entry
            return None
        if isinstance(node, Entry):
            return node if node.key == key else None
        bit = _bit(hash_, shift)
        if not node.bitmap & bit:
            return None
        node = node.children[_index(node.bitmap, bit)]
        shift += BITS


def _merge(existing: Entry, entry: Entry, shift: int) -> Node:
    """Build the smallest subtree holding two entries with different keys."""
    if existing.hash == entry.hash:
        return CollisionNode(existing.hash, (existing, entry))
    existing_bit = _bit(existing.hash, shift)
    entry_bit = _bit(entry.hash, shift)
    if existing_bit == entry_bit:
        return BitmapNode(existing_bit, (_merge(existing, entry, shift + BITS),))
    pair = (existing, entry) if existing_bit < entry_bit else (entry, existing)
    return BitmapNode(existing_bit | entry_bit, pair)


def _assoc_collision(node: CollisionNode, entry: Entry, shift: int) -> Tuple[Node, bool]:
    if entry.hash != node.hash:
        # Push the collision node one level down behind a bitmap node and retry there.
        wrapper = BitmapNode(_bit(node.hash, shift), (node,))
        return _assoc_node(wrapper, entry, shift)
    for i, existing in enumerate(node.entries):
        if existing.key == entry.key:
            if existing.value is entry.value:
                return node, False
            entries = node.entries[:i] + (entry,) + node.entries[i + 1 :]
            return CollisionNode(node.hash, entries), False
    return CollisionNode(node.hash, node.entries + (entry,)), True


def _assoc_node(node: Node, entry: Entry, shift: int) -> Tuple[Node, bool]:
    if isinstance(node, CollisionNode):
        return _assoc_collision(node, entry, shift)
    if isinstance(node, Entry):
        if node.key == entry.key:
            return (node, False) if node.value is entry.value else (entry, False)
        return _merge(node, entry, shift), True

    bit = _bit(entry.hash, shift)
    index = _index(node.bitmap, bit)
    if not node.bitmap & bit:
        children = node.children[:index] + (entry,) + node.children[index:]
        return BitmapNode(node.bitmap | bit, children), True

    child = node.children[index]
    new_child, added = _assoc_node(child, entry, shift + BITS)
    if new_child is child:
        return node, False
    return BitmapNode(node.bitmap, _replace(node.children, index, new_child)), added


def assoc(root: BitmapNode, hash_: int, key: str, value: Any) -> Tuple[BitmapNode, bool]:
    """Bind ``key`` to ``value``.

    Args:
        root: Current root node.
        hash_: ``key_hash(key)``.
        key: Key to bind.
        value: Value to store.

    Returns:
        ``(new_root, added)`` where ``added`` is True when the key was not
        present before. ``new_root is root`` when the identical value was
        already bound.
    """
    new_root, added = _assoc_node(root, Entry(hash_, key, value), 0)
    assert isinstance(new_root, BitmapNode)
    return new_root, added


def _dissoc_node(node: Node, hash_: int, key: str, shift: int) -> Optional[Node]:
    """Return the node without ``key``: the same node if absent, None if emptied."""
    if isinstance(node, Entry):
        return None if node.key == key else node
    if isinstance(node, CollisionNode):
        remaining = tuple(e for e in node.entries if e.key != key)
        if len(remaining) == len(node.entries):
            return node
        if len(remaining) == 1:
            return remaining[0]
        return CollisionNode(node.hash, remaining)

    bit = _bit(hash_, shift)
    if not node.bitmap & bit:
        return node
    index = _index(node.bitmap, bit)
    child = node.children[index]
    new_child = _dissoc_node(child, hash_, key, shift + BITS)
    if new_child is child:
        return node
    if new_child is None:
        if node.bitmap == bit:
            return None
        return BitmapNode(node.bitmap ^ bit, node.children[:index] + node.children[index + 1 :])
    if (
        isinstance(new_child, BitmapNode)
        and len(new_child.children) == 1
        and isinstance(new_child.children[0], Entry)
    ):
        new_child = new_child.children[0]
    return BitmapNode(node.bitmap, _replace(node.children, index, new_child))


def dissoc(root: BitmapNode, hash_: int, key: str) -> BitmapNode:
    """Remove ``key``; returns ``root`` itself when the key is not present."""
    new_root = _dissoc_node(root, hash_, key, 0)
    if new_root is None:
        return EMPTY_NODE
    # only children are ever collapsed, so the root stays a bitmap node
    assert isinstance(new_root, BitmapNode)
    return new_root


def map_values(node: Node, fn: Callable[[Any, str], Any]) -> Any:
    """Rebuild ``node`` with the same shape, replacing each value by ``fn(value, key)``."""
    if isinstance(node, Entry):
        return Entry(node.hash, node.key, fn(node.value, node.key))
    if isinstance(node, CollisionNode):
        return CollisionNode(node.hash, tuple(map_values(e, fn) for e in node.entries))
    return BitmapNode(node.bitmap, tuple(map_values(child, fn) for child in node.children))


def iter_entries(node: Node) -> Iterator[Entry]:
    """Yield every entry below ``node`` in trie order."""
    if isinstance(node, Entry):
        yield node
    elif isinstance(node, CollisionNode):
        yield from node.entries
    else:
        for child in node.children:
            yield from iter_entries(child)
