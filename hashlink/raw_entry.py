"""Low-level lookup and entry handles for a linked hash map.

Like :mod:`hashlink.cursor`, these classes work on an owner exposing
``_table`` (a dict from key to node) and ``_list`` (the ordered
:class:`~hashlink.nodes.CircularList` of those nodes).
"""

from __future__ import annotations

from typing import Any, Callable, Optional, Tuple

from hashlink.cursor import CursorMut
from hashlink.nodes import Node


def _find_by_hash(table, hash_value: int, is_match: Callable[[Any], bool]) -> Optional[Node]:
    return next(
        (node for key, node in table.items() if hash(key) == hash_value and is_match(key)),
        None,
    )


class RawEntryBuilder:
    """Read-only lookups by key or by hash and predicate."""

    __slots__ = ("_owner",)

    def __init__(self, owner):
        self._owner = owner

    def from_key(self, key) -> Optional[Tuple[Any, Any]]:
        """Return the stored ``(key, value)`` equal to ``key``, or ``None``."""
        node = self._owner._table.get(key)
        return None if node is None else (node.key, node.value)

    def from_key_hashed_nocheck(self, hash_value, key):
        """Like :meth:`from_key`; ``hash_value`` is trusted to be ``hash(key)``."""
        return self.from_key(key)

    def from_hash(self, hash_value, is_match):
        """Return the first ``(key, value)`` whose key hashes to ``hash_value``
        and satisfies ``is_match``, or ``None``."""
        node = _find_by_hash(self._owner._table, hash_value, is_match)
        return None if node is None else (node.key, node.value)


class RawEntryBuilderMut:
    """Lookups that yield an occupied or vacant entry handle."""

    __slots__ = ("_owner",)

    def __init__(self, owner):
        self._owner = owner

    def _wrap(self, node: Optional[Node]):
        if node is None:
            return RawVacantEntryMut(self._owner)
        return RawOccupiedEntryMut(self._owner, node)

    def from_key(self, key):
        """Return the entry for ``key``."""
        return self._wrap(self._owner._table.get(key))

    def from_key_hashed_nocheck(self, hash_value, key):
        """Like :meth:`from_key`; ``hash_value`` is trusted to be ``hash(key)``."""
        return self.from_key(key)

    def from_hash(self, hash_value, is_match):
        """Return the entry whose key hashes to ``hash_value`` and satisfies ``is_match``."""
        return self._wrap(_find_by_hash(self._owner._table, hash_value, is_match))


class RawEntryMut:
    """Common behaviour of occupied and vacant raw entries."""

    __slots__ = ("_owner", "_node")

    def __init__(self, owner, node: Optional[Node]):
        self._owner = owner
        self._node = node

    def _insert_new(self, key, value):
        table = self._owner._table
        if key in table:
            raise ValueError(f"key {key!r} is already present")
        node = Node(key, value)
        self._owner._list.push_back(node)
        table[key] = node
        self._node = node
        return (node.key, node.value)

    def _move_to_back(self):
        entries = self._owner._list
        entries.detach(self._node)
        entries.push_back(self._node)

    def or_insert(self, default_key, default_value):
        """Return the stored ``(key, value)``, inserting the defaults if vacant.

        An occupied entry is moved to the back of the order.
        """
        if self._node is None:
            return self._insert_new(default_key, default_value)
        self._move_to_back()
        return (self._node.key, self._node.value)

    def or_insert_with(self, default):
        """Like :meth:`or_insert`, calling ``default()`` for the pair only if vacant."""
        if self._node is None:
            key, value = default()
            return self._insert_new(key, value)
        self._move_to_back()
        return (self._node.key, self._node.value)

    def and_modify(self, f):
        """If occupied, store ``f(key, value)`` as the new value; return self."""
        if self._node is not None:
            self._node.value = f(self._node.key, self._node.value)
        return self


class RawOccupiedEntryMut(RawEntryMut):
    """Handle on an entry present in the map."""

    __slots__ = ()

    def __init__(self, owner, node):
        super().__init__(owner, node)

    def key(self):
        return self._node.key

    def get(self):
        return self._node.value

    def get_key_value(self):
        return (self._node.key, self._node.value)

    def to_back(self):
        """Move this entry to the back of the order."""
        self._move_to_back()

    def to_front(self):
        """Move this entry to the front of the order."""
        entries = self._owner._list
        entries.detach(self._node)
        entries.push_front(self._node)

    def replace_value(self, value):
        """Store ``value`` and return the previous value, keeping the position."""
        previous = self._node.value
        self._node.value = value
        return previous

    def replace_key(self, key):
        """Swap in an equal ``key`` object and return the previous one.

        Raises ValueError if ``key`` is not equal to the stored key.
        """
        previous = self._node.key
        if key != previous:
            raise ValueError("replacement key must be equal to the stored key")
        table = self._owner._table
        del table[previous]
        self._node.key = key
        table[key] = self._node
        return previous

    def remove(self):
        """Remove the entry and return its value."""
        return self.remove_entry()[1]

    def remove_entry(self):
        """Remove the entry and return its ``(key, value)``."""
        node = self._node
        del self._owner._table[node.key]
        self._owner._list.detach(node)
        return (node.key, node.value)

    def cursor_mut(self):
        """Return a cursor positioned on this entry."""
        return CursorMut(self._owner, self._node)

    def __repr__(self):
        return f"RawOccupiedEntryMut(key={self._node.key!r}, value={self._node.value!r})"


class RawVacantEntryMut(RawEntryMut):
    """Handle on a key that is absent from the map."""

    __slots__ = ()

    def __init__(self, owner):
        super().__init__(owner, None)

    def insert(self, key, value):
        """Add ``key`` / ``value`` at the back and return the stored pair.

        Raises ValueError if the key is already present.
        """
        return self._insert_new(key, value)

    def insert_hashed_nocheck(self, hash_value, key, value):
        """Like :meth:`insert`; ``hash_value`` is trusted to be ``hash(key)``."""
        return self._insert_new(key, value)

    def __repr__(self):
        return "RawVacantEntryMut()"