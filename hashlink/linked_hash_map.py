"""A mapping that keeps its entries in a user controllable order."""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping

from hashlink.cursor import CursorMut
from hashlink.entry import OccupiedEntry, VacantEntry
from hashlink.iterators import Iter
from hashlink.nodes import CircularList, Node
from hashlink.raw_entry import RawEntryBuilder, RawEntryBuilderMut


def _pair(node):
    return (node.key, node.value)


def _key(node):
    return node.key


def _value(node):
    return node.value


class LinkedHashMap(MutableMapping):
    """A hash map whose entries keep an order the user can change.

    New entries go to the back.  :meth:`insert` also moves an existing entry
    to the back, while :meth:`replace` and item assignment keep its place.
    Entries can be moved explicitly with :meth:`to_front` and
    :meth:`to_back`.  Equality and ordering take the entry order into
    account.
    """

    __slots__ = ("_table", "_list", "_reserved")

    def __init__(self, items=None):
        self._table = {}
        self._list = CircularList()
        self._reserved = 0
        if items is not None:
            self.extend(items)

    @classmethod
    def with_capacity(cls, capacity):
        """Return an empty map with room for ``capacity`` entries."""
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        result = cls()
        result._reserved = capacity
        return result

    def __len__(self):
        return len(self._table)

    def __contains__(self, key):
        return key in self._table

    def __getitem__(self, key):
        return self._table[key].value

    def __setitem__(self, key, value):
        """Set the value for ``key``, keeping an existing entry's position."""
        self.replace(key, value)

    def __delitem__(self, key):
        node = self._table.pop(key)
        self._list.detach(node)

    def __iter__(self):
        return self.keys()

    def __reversed__(self):
        return self.keys().rev()

    def __eq__(self, other):
        if not isinstance(other, LinkedHashMap):
            return NotImplemented
        return len(self) == len(other) and list(self.items()) == list(other.items())

    def _ordered(self, other):
        if not isinstance(other, LinkedHashMap):
            return None
        return list(self.items()), list(other.items())

    def __lt__(self, other):
        pair = self._ordered(other)
        return NotImplemented if pair is None else pair[0] < pair[1]

    def __le__(self, other):
        pair = self._ordered(other)
        return NotImplemented if pair is None else pair[0] <= pair[1]

    def __gt__(self, other):
        pair = self._ordered(other)
        return NotImplemented if pair is None else pair[0] > pair[1]

    def __ge__(self, other):
        pair = self._ordered(other)
        return NotImplemented if pair is None else pair[0] >= pair[1]

    def __repr__(self):
        body = ", ".join(f"{k!r}: {v!r}" for k, v in self.items())
        return "{" + body + "}"

    def capacity(self):
        """Return how many entries fit before the map has to grow."""
        return max(self._reserved, len(self))

    def reserve(self, additional):
        """Make room for at least ``additional`` more entries."""
        if additional < 0:
            raise ValueError("additional must not be negative")
        self._reserved = max(self._reserved, len(self) + additional)

    def shrink_to_fit(self):
        """Drop any spare room beyond the current entries."""
        self._reserved = len(self)

    def clear(self):
        """Remove every entry."""
        self._table.clear()
        self._list.clear()

    def _iter(self, project):
        return Iter(self._list.first(), self._list.last(), len(self), project)

    def items(self):
        """Return a double-ended iterator over ``(key, value)`` in order."""
        return self._iter(_pair)

    def keys(self):
        """Return a double-ended iterator over the keys in order."""
        return self._iter(_key)

    def values(self):
        """Return a double-ended iterator over the values in order."""
        return self._iter(_value)

    def drain(self):
        """Empty the map at once and return an iterator over its former entries."""
        drained = Iter(self._list.first(), self._list.last(), len(self), _pair)
        self.clear()
        return drained

    def front(self):
        """Return the first ``(key, value)``, or ``None`` when empty."""
        return None if not self._table else _pair(self._list.first())

    def back(self):
        """Return the last ``(key, value)``, or ``None`` when empty."""
        return None if not self._table else _pair(self._list.last())

    def _discard(self, node):
        del self._table[node.key]
        self._list.detach(node)

    def retain(self, f):
        """Keep only the entries for which ``f(key, value)`` is true."""
        for node in list(self._table.values()):
            if not f(node.key, node.value):
                self._discard(node)

    def retain_with_order(self, f):
        """Like :meth:`retain`, calling ``f`` on the entries front to back."""
        for node in self._list.nodes():
            if not f(node.key, node.value):
                self._discard(node)

    def entry(self, key):
        """Return an :class:`OccupiedEntry` or :class:`VacantEntry` for ``key``."""
        node = self._table.get(key)
        if node is None:
            return VacantEntry(self, key)
        return OccupiedEntry(self, key, node)

    def raw_entry(self):
        """Return a builder for read-only raw lookups."""
        return RawEntryBuilder(self)

    def raw_entry_mut(self):
        """Return a builder for raw lookups yielding entry handles."""
        return RawEntryBuilderMut(self)

    def get(self, key, default=None):
        """Return the value for ``key``, or ``default`` if absent."""
        node = self._table.get(key)
        return default if node is None else node.value

    def get_key_value(self, key):
        """Return the stored ``(key, value)`` for ``key``, or ``None``."""
        node = self._table.get(key)
        return None if node is None else _pair(node)

    def insert(self, key, value):
        """Put ``key`` / ``value`` at the back; return the previous value or ``None``.

        An existing entry is moved to the back and keeps its stored key.
        """
        node = self._table.get(key)
        if node is None:
            self._append(key, value)
            return None
        self._list.detach(node)
        self._list.push_back(node)
        previous = node.value
        node.value = value
        return previous

    def replace(self, key, value):
        """Like :meth:`insert`, but an existing entry keeps its position."""
        node = self._table.get(key)
        if node is None:
            self._append(key, value)
            return None
        previous = node.value
        node.value = value
        return previous

    def _append(self, key, value):
        node = Node(key, value)
        self._list.push_back(node)
        self._table[key] = node

    def remove(self, key):
        """Remove ``key`` and return its value, or ``None`` if absent."""
        removed = self.remove_entry(key)
        return None if removed is None else removed[1]

    def remove_entry(self, key):
        """Remove ``key`` and return the stored ``(key, value)``, or ``None``."""
        node = self._table.get(key)
        if node is None:
            return None
        self._discard(node)
        return _pair(node)

    def pop_front(self):
        """Remove and return the first ``(key, value)``, or ``None`` when empty."""
        if not self._table:
            return None
        node = self._list.first()
        self._discard(node)
        return _pair(node)

    def pop_back(self):
        """Remove and return the last ``(key, value)``, or ``None`` when empty."""
        if not self._table:
            return None
        node = self._list.last()
        self._discard(node)
        return _pair(node)

    def to_front(self, key):
        """Move ``key`` to the front and return its value, or ``None`` if absent."""
        node = self._table.get(key)
        if node is None:
            return None
        self._list.detach(node)
        self._list.push_front(node)
        return node.value

    def to_back(self, key):
        """Move ``key`` to the back and return its value, or ``None`` if absent."""
        node = self._table.get(key)
        if node is None:
            return None
        self._list.detach(node)
        self._list.push_back(node)
        return node.value

    def cursor_front_mut(self):
        """Return a cursor on the first entry (on the guard when empty)."""
        cursor = CursorMut(self, self._list.guard)
        cursor.move_next()
        return cursor

    def cursor_back_mut(self):
        """Return a cursor on the last entry (on the guard when empty)."""
        cursor = CursorMut(self, self._list.guard)
        cursor.move_prev()
        return cursor

    def extend(self, items):
        """Insert every pair from a mapping or an iterable of pairs, in order."""
        if isinstance(items, Mapping):
            items = items.items()
        for key, value in items:
            self.insert(key, value)

    def copy(self):
        """Return a shallow copy with the same order."""
        result = type(self)(self.items())
        result._reserved = self._reserved
        return result