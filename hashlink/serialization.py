"""Conversion of linked maps and sets to and from plain data.

Maps become ordered dicts and sets become lists, so the results can be
handed to any serializer that understands built-in containers.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from hashlink.linked_hash_map import LinkedHashMap
from hashlink.linked_hash_set import LinkedHashSet


def dump_map(mapping):
    """Return a dict holding the entries of ``mapping`` in their order."""
    return dict(mapping.items())


def load_map(data):
    """Build a :class:`LinkedHashMap` from a mapping, keeping its order.

    Raises TypeError if ``data`` is not a mapping.
    """
    if not isinstance(data, Mapping):
        raise TypeError(f"expected a map, got {type(data).__name__}")
    result = LinkedHashMap.with_capacity(len(data))
    for key, value in data.items():
        result.insert(key, value)
    return result


def dump_set(values):
    """Return a list holding the elements of ``values`` in their order."""
    return list(values)


def load_set(data):
    """Build a :class:`LinkedHashSet` from a sequence, keeping its order.

    Raises TypeError if ``data`` is a string, bytes, a mapping or not
    iterable at all.
    """
    if isinstance(data, (str, bytes, bytearray, Mapping)) or not isinstance(data, Iterable):
        raise TypeError(f"expected a sequence, got {type(data).__name__}")
    result = LinkedHashSet()
    for value in data:
        result.insert(value)
    return result