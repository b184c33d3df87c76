"""Key-based entry handles returned by ``LinkedHashMap.entry``.

Entries work on an owner exposing ``_table`` (a dict from key to node) and
``_list`` (the ordered :class:`~hashlink.nodes.CircularList` of those
nodes).
"""

from __future__ import annotations

from typing import Any, Callable, Optional

from hashlink.cursor import CursorMut
from hashlink.nodes import Node


class Entry:
    """A view of one key of a map, which is either present or absent.

    Check with ``isinstance`` against :class:`OccupiedEntry` or
    :class:`VacantEntry` to tell the two cases apart.
    """

    __slots__ = ("_owner", "_key", "_node")

    def __init__(self, owner, key, node: Optional[Node]):
        self._owner = owner
        self._key = key
        self._node = node

    def key(self):
        """Return the stored key if present, else the key used for the lookup."""
        return self._key if self._node is None else self._node.key

    def _insert_new(self, value):
        table = self._owner._table
        if self._key in table:
            raise ValueError(f"key {self._key!r} is already present")
        node = Node(self._key, value)
        self._owner._list.push_back(node)
        table[self._key] = node
        self._node = node
        return value

    def _move_to_back(self):
        entries = self._owner._list
        entries.detach(self._node)
        entries.push_back(self._node)

    def or_insert(self, default):
        """Return the value, inserting ``default`` at the back if absent.

        A present entry is moved to the back of the order.
        """
        if self._node is None:
            return self._insert_new(default)
        self._move_to_back()
        return self._node.value

    def or_insert_with(self, default: Callable[[], Any]):
        """Like :meth:`or_insert`, calling ``default()`` only if the key is absent."""
        if self._node is None:
            return self._insert_new(default())
        self._move_to_back()
        return self._node.value

    def and_modify(self, f: Callable[[Any], Any]):
        """If present, store ``f(value)`` as the new value; return this entry."""
        if self._node is not None:
            self._node.value = f(self._node.value)
        return self


class OccupiedEntry(Entry):
    """An entry whose key is present in the map."""

    __slots__ = ()

    def __init__(self, owner, key, node):
        super().__init__(owner, key, node)

    def key(self):
        """Return the key stored in the map."""
        return self._node.key

    def get(self):
        """Return the stored value."""
        return self._node.value

    def set(self, value):
        """Store ``value`` without moving the entry."""
        self._node.value = value

    def to_back(self):
        """Move this entry to the back of the order."""
        self._move_to_back()

    def to_front(self):
        """Move this entry to the front of the order."""
        entries = self._owner._list
        entries.detach(self._node)
        entries.push_front(self._node)

    def insert(self, value):
        """Move the entry to the back, store ``value`` and return the old value."""
        self._move_to_back()
        previous = self._node.value
        self._node.value = value
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

    def insert_entry(self, value):
        """Like :meth:`replace_entry`, but also moves the entry to the back."""
        self._move_to_back()
        return self.replace_entry(value)

    def replace_entry(self, value):
        """Swap in the lookup key and ``value``; return the old ``(key, value)``.

        The entry keeps its position.
        """
        old_key = self._swap_key()
        old_value = self._node.value
        self._node.value = value
        return (old_key, old_value)

    def replace_key(self):
        """Swap in the lookup key and return the old stored key; position is kept."""
        return self._swap_key()

    def _swap_key(self):
        table = self._owner._table
        previous = self._node.key
        del table[previous]
        self._node.key = self._key
        table[self._key] = self._node
        return previous

    def cursor_mut(self):
        """Return a cursor positioned on this entry."""
        return CursorMut(self._owner, self._node)

    def __repr__(self):
        return f"OccupiedEntry(key={self._node.key!r}, value={self._node.value!r})"


class VacantEntry(Entry):
    """An entry whose key is absent from the map."""

    __slots__ = ()

    def __init__(self, owner, key):
        super().__init__(owner, key, None)

    def key(self):
        """Return the key used for the lookup."""
        return self._key

    def into_key(self):
        """Return the key used for the lookup."""
        return self._key

    def insert(self, value):
        """Add the key with ``value`` at the back of the order and return ``value``.

        Raises ValueError if the key was added to the map in the meantime.
        """
        return self._insert_new(value)

    def __repr__(self):
        return f"VacantEntry({self._key!r})"