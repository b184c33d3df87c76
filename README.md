# hashlink

These containers work like a dictionary or a set, but you control the order of
their entries. The default order is insertion order. You can also move existing
entries to the front or to the back in constant time.

The package has these parts:

- `hashlink.linked_hash_map.LinkedHashMap` is an ordered mutable mapping. It has
  `to_front`, `to_back`, `pop_front` and `pop_back`, an entry API, a raw entry
  API and a mutable cursor.
- `hashlink.linked_hash_set.LinkedHashSet` is an ordered set built on the map. It
  has set algebra that keeps the order.
- `hashlink.lru_cache.LruCache` is a bounded least-recently-used cache built on
  the map.
- `hashlink.serialization` converts the containers to plain dicts and lists and
  back, and keeps their order.

The package has no dependencies outside the standard library.

## Installation

```
pip install hashlink
```

## Ordering rules

- `insert` adds a new entry at the back. If the key is already present,
  `insert` also moves the existing entry to the back.
- `replace` and item assignment (`m[key] = value`) update an existing key and
  leave it where it is. A new key goes to the back.
- `to_front` and `to_back` move an existing entry. They return its value, or
  `None` when the key is absent.

## LinkedHashMap

```python
from hashlink.linked_hash_map import LinkedHashMap

m = LinkedHashMap([(1, 10), (2, 20), (3, 30)])
m.insert(1, 11)          # returns 10, and 1 moves to the back
list(m.keys())           # [2, 3, 1]
m.replace(2, 22)         # returns 20, and the order does not change
m.to_front(3)            # returns 30
m.front()                # (3, 30)
m.pop_back()             # (1, 11)
m[2]                     # 22; a missing key raises KeyError
m.get(9, "none")         # "none"
```

`items()`, `keys()` and `values()` return double-ended iterators. These support
`next()` from the front, `next_back()` from the back, `len()`, `copy()` and
`rev()`. `reversed(m)` gives the keys from back to front.

`drain()` empties the map at once. It returns an iterator over the entries that
were in the map.

`retain(f)` keeps the entries for which `f(key, value)` is true.
`retain_with_order(f)` does the same and calls `f` on the entries from front to
back.

Two maps are equal only when they hold the same pairs in the same order. `<`,
`<=`, `>` and `>=` compare the ordered lists of pairs.

`with_capacity`, `reserve`, `shrink_to_fit` and `capacity` only record a size
hint. The map grows as needed in any case.

### Entries

`entry(key)` returns an `OccupiedEntry` or a `VacantEntry` from `hashlink.entry`:

```python
from hashlink.entry import OccupiedEntry

e = m.entry(3)
if isinstance(e, OccupiedEntry):
    e.to_back()
m.entry(7).or_insert(70)             # inserts, or moves an existing key to the back
m.entry(7).and_modify(lambda v: v + 1)
```

`raw_entry()` and `raw_entry_mut()` return the lower-level handles in
`hashlink.raw_entry`. These look up entries by key, or by a hash value together
with a predicate.

### Cursors

```python
c = m.cursor_front_mut()
c.current()              # (key, value) at the cursor, or None at the guard
c.insert_after(5, 50)    # returns the old value if 5 was already present
c.move_next()
c.set_value(51)          # returns the previous value
```

The cursor (`hashlink.cursor.CursorMut`) walks a circular list. The list has one
guard position between the back and the front. At the guard, `current()`
returns `None`, and the next move wraps around to the other end. On an empty
map the cursor always stays on the guard.

## LinkedHashSet

```python
from hashlink.linked_hash_set import LinkedHashSet

a = LinkedHashSet([1, 3, 5])
b = LinkedHashSet([3, 4])
list(a | b)              # [1, 3, 5, 4]
list(a & b)              # [3]
list(a - b)              # [1, 5]
list(a ^ b)              # [1, 5, 4]
a.insert(9)              # True when the value was new
a.to_front(5)
a.pop_front()            # 5
```

`union`, `intersection`, `difference` and `symmetric_difference` produce the
elements lazily and in order. The set also has `is_disjoint`, `is_subset`,
`is_superset`, `get`, `get_or_insert`, `get_or_insert_with`, `replace`, `take`,
`front`, `back` and `pop_back`.

## LruCache

```python
from hashlink.lru_cache import LruCache

cache = LruCache(2)
cache.insert("a", 1)
cache.insert("b", 2)
cache.get("a")           # 1, and "a" becomes the most recently used
cache.insert("c", 3)     # evicts "b"
cache.peek("a")          # reads the value and leaves the order unchanged
cache.remove_lru()       # ("a", 1)
cache.set_capacity(1)    # evicts entries until at most one is left
```

`LruCache.unbounded()` creates a cache that never evicts anything on its own.

The handles from `entry()` and `raw_entry_mut()` always leave room for one new
value. Through them, the cache can go over its capacity by one.

## Serialization

```python
from hashlink.serialization import dump_map, load_map, dump_set, load_set

data = dump_map(m)       # a dict with the entries in order
m2 = load_map(data)      # a LinkedHashMap in the same order
items = dump_set(a)      # a list with the elements in order
a2 = load_set(items)
```

If `load_map` is given something other than a mapping, it raises `TypeError`.
`load_set` raises `TypeError` for strings, bytes, mappings and non-iterables.

## What this package does not do

These helpers produce built-in dicts and lists only. The package does not
encode them to any file format and does not store them anywhere. To do that,
pass the result to a serializer such as `json`.

## Running the tests

```
pip install -e .[test]
pytest
```