"""Double-ended, exact-size iteration over a run of linked nodes."""

from __future__ import annotations

from typing import Any, Callable, Optional

from hashlink.nodes import Node


class Iter:
    """Walk ``remaining`` nodes from ``head`` forwards and from ``tail`` backwards.

    Each node is turned into an item by ``project``.  Items can be taken
    from either end; the iterator stops once ``remaining`` items were taken.
    """

    __slots__ = ("_head", "_tail", "_remaining", "_project")

    def __init__(
        self,
        head: Optional[Node],
        tail: Optional[Node],
        remaining: int,
        project: Callable[[Node], Any],
    ):
        if remaining < 0:
            raise ValueError("remaining must not be negative")
        self._head = head
        self._tail = tail
        self._remaining = remaining
        self._project = project

    def __iter__(self):
        return self

    def __next__(self):
        if self._remaining == 0:
            raise StopIteration
        self._remaining -= 1
        node = self._head
        self._head = node.next
        return self._project(node)

    def next_back(self):
        """Take the item at the back end; raise StopIteration when exhausted."""
        if self._remaining == 0:
            raise StopIteration
        self._remaining -= 1
        node = self._tail
        self._tail = node.prev
        return self._project(node)

    def __len__(self):
        return self._remaining

    def copy(self):
        """Return an independent iterator at the same position."""
        return Iter(self._head, self._tail, self._remaining, self._project)

    def rev(self):
        """Return an iterator that takes items from the back end first."""
        return _ReversedIter(self)

    def __repr__(self):
        return "[" + ", ".join(repr(item) for item in self.copy()) + "]"


class _ReversedIter:
    """View of an :class:`Iter` with its two ends swapped."""

    __slots__ = ("_inner",)

    def __init__(self, inner: Iter):
        self._inner = inner

    def __iter__(self):
        return self

    def __next__(self):
        return self._inner.next_back()

    def next_back(self):
        return next(self._inner)

    def __len__(self):
        return len(self._inner)

    def copy(self):
        return _ReversedIter(self._inner.copy())

    def rev(self):
        return self._inner

    def __repr__(self):
        return "[" + ", ".join(repr(item) for item in self.copy()) + "]"