import pytest

from hashlink.linked_hash_map import LinkedHashMap
from hashlink.raw_entry import RawOccupiedEntryMut, RawVacantEntryMut


def numbered(*keys):
    return LinkedHashMap((k, k * 10) for k in keys)


def test_index():
    m = LinkedHashMap()
    m.insert(1, 10)
    m.insert(2, 20)
    assert m[1] == 10
    m[2] = 22
    assert m[2] == 22


def test_getitem_missing_raises():
    m = numbered(1)
    with pytest.raises(KeyError):
        m[2]
    assert len(m) == 1
    assert m[1] == 10
    assert list(m.items()) == [(1, 10)]


def test_setitem_keeps_position():
    m = numbered(1, 2, 3)
    m[1] = 5
    m[4] = 40
    assert list(m.items()) == [(1, 5), (2, 20), (3, 30), (4, 40)]


def test_delitem():
    m = numbered(1, 2, 3)
    del m[2]
    assert list(m.keys()) == [1, 3]
    with pytest.raises(KeyError):
        del m[2]


def test_insert_and_get():
    m = LinkedHashMap()
    assert m.insert(1, 10) is None
    assert m.insert(2, 20) is None
    assert m.get(1) == 10
    assert m.get(2) == 20
    assert len(m) == 2


def test_get_default():
    m = numbered(1)
    assert m.get(7) is None
    assert m.get(7, "none") == "none"


def test_equal_hashing_keys():
    m = LinkedHashMap()
    m.insert(1, "a")
    assert m.get(1.0) == "a"
    assert m.get_key_value(1.0) == (1, "a")
    assert m.remove(1.0) == "a"
    assert m.remove(1) is None


def test_insert_update():
    m = LinkedHashMap()
    m.insert("1", [10, 10])
    assert m.insert("1", [10, 19]) == [10, 10]
    assert m.get("1") == [10, 19]
    assert len(m) == 1


def test_remove():
    m = numbered(1, 2, 3, 4, 5)
    assert m.remove(3) == 30
    assert m.remove(4) == 40
    assert m.get(3) is None
    assert m.get(4) is None
    m.insert(6, 60)
    m.insert(7, 70)
    m.insert(8, 80)
    assert m.get(6) == 60
    assert m.get(7) == 70
    assert m.get(8) == 80
    assert list(m.keys()) == [1, 2, 5, 6, 7, 8]


def test_remove_entry():
    m = numbered(1, 2)
    assert m.remove_entry(1) == (1, 10)
    assert m.remove_entry(1) is None
    assert list(m.items()) == [(2, 20)]


def test_pop():
    m = numbered(1, 2, 3, 4, 5)
    assert m.pop_front() == (1, 10)
    assert 1 not in m
    assert m.pop_back() == (5, 50)
    assert 5 not in m
    m.insert(6, 60)
    m.insert(7, 70)
    m.insert(8, 80)
    assert m.pop_front() == (2, 20)
    assert 2 not in m
    assert m.pop_back() == (8, 80)
    assert 8 not in m
    m.insert(3, 30)
    assert m.pop_front() == (4, 40)
    assert 4 not in m
    assert m.pop_back() == (3, 30)
    assert 3 not in m


def test_pop_empty():
    m = LinkedHashMap()
    assert m.pop_front() is None
    assert m.pop_back() is None


def test_front_back():
    m = numbered(1, 2, 3)
    assert m.front() == (1, 10)
    assert m.back() == (3, 30)
    assert LinkedHashMap().front() is None
    assert LinkedHashMap().back() is None


def test_to_front_to_back():
    m = numbered(1, 2, 3)
    assert m.to_front(3) == 30
    assert m.to_back(1) == 10
    assert m.to_front(9) is None
    assert list(m.keys()) == [3, 2, 1]


def test_clear():
    m = numbered(1, 2)
    m.clear()
    assert m.get(1) is None
    assert m.get(2) is None
    assert len(m) == 0
    m.insert(3, 30)
    assert list(m.items()) == [(3, 30)]


def test_iter():
    m = LinkedHashMap()
    with pytest.raises(StopIteration):
        next(m.items())

    m.insert("a", 10)
    m.insert("b", 20)
    m.insert("c", 30)

    it = m.items()
    assert next(it) == ("a", 10)
    assert next(it) == ("b", 20)
    assert next(it) == ("c", 30)
    with pytest.raises(StopIteration):
        next(it)

    it = m.items()
    assert next(it) == ("a", 10)
    clone = it.copy()
    assert next(it) == ("b", 20)
    assert next(clone) == ("b", 20)
    assert next(it) == ("c", 30)
    assert next(clone) == ("c", 30)

    assert list(m.items().rev()) == [("c", 30), ("b", 20), ("a", 10)]

    mixed = m.items()
    assert next(mixed) == ("a", 10)
    assert mixed.next_back() == ("c", 30)
    assert next(mixed) == ("b", 20)
    with pytest.raises(StopIteration):
        next(mixed)
    with pytest.raises(StopIteration):
        mixed.next_back()


def test_iteration_protocols():
    m = numbered(3, 1, 2)
    assert list(m) == [3, 1, 2]
    assert list(reversed(m)) == [2, 1, 3]
    assert list(m.values()) == [30, 10, 20]
    assert len(m.items()) == 3


def test_partial_items_repr():
    m = LinkedHashMap([("a", 10), ("c", 30), ("b", 20)])
    it = m.items()
    assert next(it) == ("a", 10)
    assert repr(it) == "[('c', 30), ('b', 20)]"
    rev = it.rev()
    assert next(rev) == ("b", 20)
    assert next(rev) == ("c", 30)
    with pytest.raises(StopIteration):
        next(rev)


def test_drain():
    m = LinkedHashMap([("a", 1), ("b", 2), ("c", 3)])
    d = m.drain()
    assert len(m) == 0
    assert next(d) == ("a", 1)
    assert d.next_back() == ("c", 3)
    assert d.next_back() == ("b", 2)
    with pytest.raises(StopIteration):
        next(d)
    with pytest.raises(StopIteration):
        d.next_back()

    m.insert("a", 1)
    m.insert("b", 2)
    m.insert("c", 3)
    assert list(m.drain()) == [("a", 1), ("b", 2), ("c", 3)]
    assert len(m) == 0

    m.insert("a", 1)
    m.drain()
    assert len(m) == 0
    assert "a" not in m


def test_drain_with_removed_entries():
    m = LinkedHashMap([("a", 10), ("c", 30), ("b", 20)])
    m.remove("a")
    m.remove("b")
    assert list(m.drain()) == [("c", 30)]


def test_retain():
    m = LinkedHashMap((str(i), i) for i in range(1, 7))
    m.retain(lambda k, v: v % 2 == 0)
    assert len(m) == 3
    assert list(m.items()) == [("2", 2), ("4", 4), ("6", 6)]


def test_retain_with_order():
    m = LinkedHashMap((i, i) for i in range(1, 7))
    dropped = []

    def keep(k, v):
        if k % 2 == 0:
            return True
        dropped.append(k)
        return False

    m.retain_with_order(keep)
    assert dropped == [1, 3, 5]
    assert list(m.keys()) == [2, 4, 6]


def test_order_equality():
    m1 = LinkedHashMap((str(i), i) for i in range(1, 7))
    m2 = LinkedHashMap((str(i), i) for i in range(1, 7))
    assert m1 == m2
    m1.to_front("4")
    assert m1 != m2
    m2.to_front("4")
    assert m1 == m2


def test_not_equal_to_dict():
    assert (LinkedHashMap([(1, 1)]) == {1: 1}) is False


def test_ordering():
    assert LinkedHashMap([(1, 1)]) < LinkedHashMap([(1, 2)])
    assert LinkedHashMap([(1, 1), (2, 2)]) > LinkedHashMap([(1, 1)])
    assert LinkedHashMap([(1, 1)]) <= LinkedHashMap([(1, 1)])
    assert LinkedHashMap([(2, 0)]) >= LinkedHashMap([(1, 9)])
    with pytest.raises(TypeError):
        LinkedHashMap() < 1


def test_replace():
    m = LinkedHashMap((i, i) for i in range(1, 5))
    assert list(m.items()) == [(1, 1), (2, 2), (3, 3), (4, 4)]
    assert m.insert(3, 5) == 3
    assert list(m.items()) == [(1, 1), (2, 2), (4, 4), (3, 5)]
    assert m.replace(2, 6) == 2
    assert list(m.items()) == [(1, 1), (2, 6), (4, 4), (3, 5)]
    assert m.replace(7, 7) is None
    assert m.back() == (7, 7)


def test_reserve():
    m = LinkedHashMap((i, i) for i in range(1, 5))
    assert m.capacity() - len(m) < 100
    m.reserve(100)
    assert m.capacity() - len(m) >= 100
    with pytest.raises(ValueError):
        m.reserve(-1)


def test_with_capacity():
    m = LinkedHashMap.with_capacity(10)
    assert m.capacity() == 10
    assert len(m) == 0
    with pytest.raises(ValueError):
        LinkedHashMap.with_capacity(-1)


def test_shrink_to_fit_resize():
    m = LinkedHashMap()
    m.shrink_to_fit()
    for i in range(100):
        m.insert(i, i)
    m.shrink_to_fit()
    for _ in range(50):
        m.pop_front()
        m.shrink_to_fit()
    assert len(m) == 50
    assert m.capacity() == 50
    for i in range(50, 100):
        assert m.get(i) == i


def test_cursor_front_mut():
    m = LinkedHashMap()
    cursor = m.cursor_front_mut()
    assert cursor.current() is None
    cursor.move_next()
    assert cursor.current() is None
    cursor.insert_after(1, 1)
    cursor.move_next()
    assert cursor.current() == (1, 1)
    cursor.move_next()
    assert cursor.current() is None
    assert list(m.items()) == [(1, 1)]

    m.insert(2, 2)
    m.insert(3, 3)
    assert m.cursor_front_mut().current() == (1, 1)


def test_cursor_back_mut():
    m = LinkedHashMap((i, i) for i in (1, 2, 3))
    assert m.cursor_back_mut().current() == (3, 3)


def test_raw_entry_lookups():
    m = numbered(1, 2)
    assert m.raw_entry().from_key(2) == (2, 20)
    assert m.raw_entry().from_key(5) is None
    assert isinstance(m.raw_entry_mut().from_key(1), RawOccupiedEntryMut)
    vacant = m.raw_entry_mut().from_key(5)
    assert isinstance(vacant, RawVacantEntryMut)
    assert vacant.insert(5, 50) == (5, 50)
    assert list(m.keys()) == [1, 2, 5]


def test_extend_and_init_from_mapping():
    m = LinkedHashMap({"a": 1, "b": 2})
    m.extend([("c", 3), ("a", 4)])
    assert list(m.items()) == [("b", 2), ("c", 3), ("a", 4)]
    other = LinkedHashMap(m)
    assert other == m


def test_copy_is_independent():
    m = numbered(1, 2)
    c = m.copy()
    c.insert(3, 30)
    c.to_front(2)
    assert list(m.items()) == [(1, 10), (2, 20)]
    assert list(c.items()) == [(2, 20), (1, 10), (3, 30)]


def test_repr():
    assert repr(LinkedHashMap()) == "{}"
    assert repr(LinkedHashMap([("a", 1), (2, "b")])) == "{'a': 1, 2: 'b'}"


def test_popitem_takes_front():
    m = numbered(1, 2)
    assert m.popitem() == (1, 10)
    assert list(m.items()) == [(2, 20)]