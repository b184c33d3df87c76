"""Doubly linked, circular node list with a guard node."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator, Optional


@dataclass(eq=False, slots=True)
class Node:
    """One key / value pair linked into a circular list."""

    key: Any = None
    value: Any = None
    prev: Optional["Node"] = field(default=None, repr=False)
    next: Optional["Node"] = field(default=None, repr=False)


class CircularList:
    """A circular doubly linked list anchored on a guard node.

    The guard never carries an entry.  ``guard.next`` is the first node and
    ``guard.prev`` the last one; in an empty list both point at the guard.
    """

    __slots__ = ("guard",)

    def __init__(self):
        self.guard = Node()
        self.guard.prev = self.guard
        self.guard.next = self.guard

    def is_guard(self, node):
        """Return True if ``node`` is this list's guard node."""
        return node is self.guard

    def first(self):
        """Return the first node, or the guard when the list is empty."""
        return self.guard.next

    def last(self):
        """Return the last node, or the guard when the list is empty."""
        return self.guard.prev

    def attach_before(self, node, before):
        """Link ``node`` into the list immediately before ``before``."""
        node.prev = before.prev
        node.next = before
        before.prev = node
        node.prev.next = node

    def detach(self, node):
        """Unlink ``node`` from its neighbours."""
        node.prev.next = node.next
        node.next.prev = node.prev

    def push_back(self, node):
        """Link ``node`` in as the last element."""
        self.attach_before(node, self.guard)

    def push_front(self, node):
        """Link ``node`` in as the first element."""
        self.attach_before(node, self.guard.next)

    def clear(self):
        """Forget every node, leaving the guard linked to itself."""
        self.guard.prev = self.guard
        self.guard.next = self.guard

    def nodes(self) -> Iterator[Node]:
        """Yield nodes front to back; the yielded node may be detached safely."""
        node = self.guard.next
        while node is not self.guard:
            following = node.next
            yield node
            node = following