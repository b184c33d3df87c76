"""A movable position inside a linked hash map's entry list.

The cursor works on an *owner* object that exposes two attributes:
``_table``, a dict mapping each key to its :class:`~hashlink.nodes.Node`,
and ``_list``, the :class:`~hashlink.nodes.CircularList` holding those
nodes in order.
"""

from __future__ import annotations

from typing import Any, Optional, Tuple

from hashlink.nodes import Node


class CursorMut:
    """A cursor over the entries of a map, able to move in both directions.

    The entry list is circular with a guard node between its back and its
    front.  When the cursor sits on the guard, :meth:`current` returns
    ``None``; moving on from there wraps around to the other end.
    """

    __slots__ = ("_owner", "_cur")

    def __init__(self, owner, node: Node):
        self._owner = owner
        self._cur = node

    def _peek(self, node: Node) -> Optional[Tuple[Any, Any]]:
        if self._owner._list.is_guard(node):
            return None
        return (node.key, node.value)

    def current(self):
        """Return ``(key, value)`` at the cursor, or ``None`` on the guard."""
        return self._peek(self._cur)

    def set_value(self, value):
        """Replace the value at the cursor and return the previous one.

        Raises LookupError when the cursor sits on the guard position.
        """
        if self._owner._list.is_guard(self._cur):
            raise LookupError("cursor is not over an entry")
        previous = self._cur.value
        self._cur.value = value
        return previous

    def peek_next(self):
        """Return the entry after the cursor, or ``None`` if that is the guard."""
        return self._peek(self._cur.next)

    def peek_prev(self):
        """Return the entry before the cursor, or ``None`` if that is the guard."""
        return self._peek(self._cur.prev)

    def move_next(self):
        """Move the cursor one step towards the back."""
        self._cur = self._cur.next

    def move_prev(self):
        """Move the cursor one step towards the front."""
        self._cur = self._cur.prev

    def insert_before(self, key, value):
        """Put ``key`` / ``value`` immediately before the cursor.

        An existing entry with an equal key keeps its key, takes the new
        value and is moved to this position; its old value is returned.
        Otherwise a new entry is created and ``None`` is returned.
        """
        return self._insert(key, value, self._cur)

    def insert_after(self, key, value):
        """Put ``key`` / ``value`` immediately after the cursor.

        Behaves like :meth:`insert_before` in every other respect.
        """
        return self._insert(key, value, self._cur.next)

    def _insert(self, key, value, before: Node):
        table = self._owner._table
        entries = self._owner._list
        node = table.get(key)
        if node is not None:
            previous = node.value
            node.value = value
            if node is not before:
                entries.detach(node)
                entries.attach_before(node, before)
            return previous
        node = Node(key, value)
        entries.attach_before(node, before)
        table[key] = node
        return None