"""A least-recently-used cache built on :class:`LinkedHashMap`."""

from __future__ import annotations

import sys
from collections.abc import Mapping

from hashlink.linked_hash_map import LinkedHashMap

_UNBOUNDED = sys.maxsize


def _check_capacity(capacity):
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    return capacity


class LruCache:
    """A bounded map that evicts its least recently used entry.

    Entries are ordered from least to most recently used.  :meth:`insert`
    and :meth:`get` mark an entry as used; :meth:`peek` and membership
    tests do not.
    """

    __slots__ = ("_map", "_max_size")

    __hash__ = None

    def __init__(self, capacity):
        self._map = LinkedHashMap()
        self._max_size = _check_capacity(capacity)

    @classmethod
    def unbounded(cls):
        """Return a cache that never evicts entries on its own."""
        return cls(_UNBOUNDED)

    def capacity(self):
        """Return the largest number of entries the cache keeps."""
        return self._max_size

    def set_capacity(self, capacity):
        """Change the capacity, evicting least recently used entries as needed."""
        _check_capacity(capacity)
        for _ in range(capacity, len(self)):
            self.remove_lru()
        self._max_size = capacity

    def __len__(self):
        return len(self._map)

    def __contains__(self, key):
        return key in self._map

    def __iter__(self):
        return iter(self._map)

    def __repr__(self):
        body = ", ".join(f"{k!r}: {v!r}" for k, v in self._map.items().rev())
        return "{" + body + "}"

    def items(self):
        """Return a double-ended iterator over ``(key, value)``, least recent first."""
        return self._map.items()

    def clear(self):
        """Remove every entry."""
        self._map.clear()

    def drain(self):
        """Empty the cache and return an iterator over its former entries."""
        return self._map.drain()

    def retain(self, f):
        """Keep only the entries for which ``f(key, value)`` is true."""
        self._map.retain(f)

    def _make_room(self):
        if len(self) > self._max_size:
            self.remove_lru()

    def insert(self, key, value):
        """Store ``key`` / ``value`` as most recently used; return the old value.

        Evicts the least recently used entry when the cache grows too big.
        """
        previous = self._map.insert(key, value)
        self._make_room()
        return previous

    def peek(self, key):
        """Return the value for ``key`` without marking it used, or ``None``."""
        return self._map.get(key)

    def get(self, key):
        """Return the value for ``key`` and mark it most recently used, or ``None``."""
        return self._map.to_back(key)

    def entry(self, key):
        """Return an entry handle for ``key``.

        A vacant entry always has room for one value, so using it may exceed
        the capacity by one.  The entry is not moved automatically.
        """
        self._make_room()
        return self._map.entry(key)

    def raw_entry(self):
        """Return a builder for read-only raw lookups."""
        return self._map.raw_entry()

    def raw_entry_mut(self):
        """Return a builder for raw lookups; may exceed the capacity by one."""
        self._make_room()
        return self._map.raw_entry_mut()

    def remove(self, key):
        """Remove ``key`` and return its value, or ``None`` if absent."""
        return self._map.remove(key)

    def remove_entry(self, key):
        """Remove ``key`` and return the stored ``(key, value)``, or ``None``."""
        return self._map.remove_entry(key)

    def remove_lru(self):
        """Remove and return the least recently used ``(key, value)``, or ``None``."""
        return self._map.pop_front()

    def extend(self, items):
        """Insert every pair from a mapping or an iterable of pairs, in order."""
        if isinstance(items, Mapping):
            items = items.items()
        for key, value in items:
            self.insert(key, value)

    def copy(self):
        """Return a shallow copy with the same capacity and order."""
        result = type(self)(self._max_size)
        result._map = self._map.copy()
        return result