"""A set that keeps its elements in a user controllable order."""

from __future__ import annotations

from hashlink.entry import OccupiedEntry
from hashlink.linked_hash_map import LinkedHashMap


class LinkedHashSet:
    """A hash set whose elements keep an order the user can change.

    New elements go to the back, and :meth:`insert` moves an element that
    is already present to the back as well.  Elements can be moved with
    :meth:`to_front` and :meth:`to_back`.  Equality takes the order into
    account.
    """

    __slots__ = ("_map",)

    __hash__ = None

    def __init__(self, items=None):
        self._map = LinkedHashMap()
        if items is not None:
            self.extend(items)

    @classmethod
    def with_capacity(cls, capacity):
        """Return an empty set with room for ``capacity`` elements."""
        result = cls()
        result._map = LinkedHashMap.with_capacity(capacity)
        return result

    def __len__(self):
        return len(self._map)

    def __contains__(self, value):
        return value in self._map

    def __iter__(self):
        return self.iter()

    def __reversed__(self):
        return self.iter().rev()

    def __eq__(self, other):
        if not isinstance(other, LinkedHashSet):
            return NotImplemented
        return len(self) == len(other) and list(self) == list(other)

    def __repr__(self):
        return "{" + ", ".join(repr(value) for value in self) + "}"

    def __or__(self, other):
        if not isinstance(other, LinkedHashSet):
            return NotImplemented
        return LinkedHashSet(self.union(other))

    def __and__(self, other):
        if not isinstance(other, LinkedHashSet):
            return NotImplemented
        return LinkedHashSet(self.intersection(other))

    def __xor__(self, other):
        if not isinstance(other, LinkedHashSet):
            return NotImplemented
        return LinkedHashSet(self.symmetric_difference(other))

    def __sub__(self, other):
        if not isinstance(other, LinkedHashSet):
            return NotImplemented
        return LinkedHashSet(self.difference(other))

    def iter(self):
        """Return a double-ended iterator over the elements in order."""
        return self._map.keys()

    def capacity(self):
        """Return how many elements fit before the set has to grow."""
        return self._map.capacity()

    def reserve(self, additional):
        """Make room for at least ``additional`` more elements."""
        self._map.reserve(additional)

    def shrink_to_fit(self):
        """Drop any spare room beyond the current elements."""
        self._map.shrink_to_fit()

    def drain(self):
        """Empty the set at once and return a double-ended iterator over its former elements."""
        drained = self._map.keys()
        self._map.clear()
        return drained

    def clear(self):
        """Remove every element."""
        self._map.clear()

    def retain(self, f):
        """Keep only the elements for which ``f(value)`` is true."""
        self._map.retain(lambda key, _value: f(key))

    def retain_with_order(self, f):
        """Like :meth:`retain`, calling ``f`` on the elements front to back."""
        self._map.retain_with_order(lambda key, _value: f(key))

    def difference(self, other):
        """Yield the elements of this set that are not in ``other``, in order."""
        return (value for value in self if value not in other)

    def symmetric_difference(self, other):
        """Yield the elements in exactly one of the two sets, this set's first."""
        yield from self.difference(other)
        yield from other.difference(self)

    def intersection(self, other):
        """Yield the elements of this set that are also in ``other``, in order."""
        return (value for value in self if value in other)

    def union(self, other):
        """Yield this set's elements, then those of ``other`` not in this set."""
        yield from self
        yield from other.difference(self)

    def is_disjoint(self, other):
        """Return True if no element is shared with ``other``."""
        return all(value not in other for value in self)

    def is_subset(self, other):
        """Return True if every element is also in ``other``."""
        return all(value in other for value in self)

    def is_superset(self, other):
        """Return True if every element of ``other`` is in this set."""
        return other.is_subset(self)

    def get(self, value):
        """Return the stored element equal to ``value``, or ``None``."""
        found = self._map.raw_entry().from_key(value)
        return None if found is None else found[0]

    def get_or_insert(self, value):
        """Return the stored element equal to ``value``, adding ``value`` if absent.

        A present element is moved to the back.
        """
        return self._map.raw_entry_mut().from_key(value).or_insert(value, None)[0]

    def get_or_insert_with(self, value, f):
        """Like :meth:`get_or_insert`, storing ``f(value)`` only if absent."""
        entry = self._map.raw_entry_mut().from_key(value)
        return entry.or_insert_with(lambda: (f(value), None))[0]

    def insert(self, value):
        """Put ``value`` at the back; return True if it was not present before."""
        present = value in self._map
        self._map.insert(value, None)
        return not present

    def replace(self, value):
        """Add ``value``, swapping it in for an equal element if present.

        Returns the replaced element, or ``None``; the position is kept.
        """
        entry = self._map.entry(value)
        if isinstance(entry, OccupiedEntry):
            return entry.replace_key()
        entry.insert(None)
        return None

    def remove(self, value):
        """Remove ``value``; return True if it was present."""
        return self._map.remove_entry(value) is not None

    def take(self, value):
        """Remove and return the stored element equal to ``value``, or ``None``."""
        removed = self._map.remove_entry(value)
        return None if removed is None else removed[0]

    def front(self):
        """Return the first element, or ``None`` when empty."""
        pair = self._map.front()
        return None if pair is None else pair[0]

    def back(self):
        """Return the last element, or ``None`` when empty."""
        pair = self._map.back()
        return None if pair is None else pair[0]

    def pop_front(self):
        """Remove and return the first element, or ``None`` when empty."""
        pair = self._map.pop_front()
        return None if pair is None else pair[0]

    def pop_back(self):
        """Remove and return the last element, or ``None`` when empty."""
        pair = self._map.pop_back()
        return None if pair is None else pair[0]

    def to_front(self, value):
        """Move ``value`` to the front; return True if it was present."""
        if value not in self._map:
            return False
        self._map.to_front(value)
        return True

    def to_back(self, value):
        """Move ``value`` to the back; return True if it was present."""
        if value not in self._map:
            return False
        self._map.to_back(value)
        return True

    def extend(self, items):
        """Insert every element of ``items`` in order."""
        for value in items:
            self.insert(value)

    def copy(self):
        """Return a shallow copy with the same order."""
        result = type(self)()
        result._map = self._map.copy()
        return result