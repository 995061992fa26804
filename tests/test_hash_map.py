import pytest
from structures.hash_map import HashMap


def test_distinct_puts_and_last_value_wins():
    m = HashMap()
    for i in range(50):
        assert m.put(i, f"first {i}") is None
    for i in range(0, 50, 2):
        assert m.put(i, f"second {i}") == f"first {i}", "put should return the value it replaced"

    assert m.size() == 50
    assert len(m) == 50
    for i in range(50):
        expected = f"second {i}" if i % 2 == 0 else f"first {i}"
        assert m.get(i) == expected


def test_keys_compare_by_value():
    m = HashMap()
    m.put((1, 2), "a")
    key = tuple([1, 2])  # equal but not the same object
    assert m.get(key) == "a"
    assert m.contains_key(key)
    assert key in m
    assert m.put(key, "b") == "a"
    assert len(m) == 1


def test_missing_keys_return_none():
    m = HashMap()
    m.put("x", 1)
    assert m.get("y") is None
    assert m.get("y", 7) == 7
    assert m.remove("y") is None
    assert not m.contains_key("y")
    assert len(m) == 1


def test_none_key_rejected_without_side_effects():
    m = HashMap()
    m.put("a", 1)
    with pytest.raises(ValueError):
        m.put(None, 2)
    assert len(m) == 1
    assert m.get(None) is None
    assert not m.contains_key(None)


def test_invalid_construction():
    with pytest.raises(ValueError):
        HashMap(capacity=-1)
    with pytest.raises(ValueError):
        HashMap(load_factor=0)
    with pytest.raises(ValueError):
        HashMap(load_factor=-0.5)


def test_zero_capacity_promoted_to_one():
    m = HashMap(capacity=0)
    assert m.capacity == 1
    m.put("k", "v")
    assert m.get("k") == "v"


def test_growth_doubles_capacity_and_keeps_entries():
    m = HashMap(capacity=4, load_factor=0.75)
    m.put("a", 1)
    m.put("b", 2)
    assert m.capacity == 4
    m.put("c", 3)  # 3 >= 0.75 * 4
    assert m.capacity == 8
    assert (m.get("a"), m.get("b"), m.get("c")) == (1, 2, 3)


def test_shrink_after_removals_keeps_entries():
    m = HashMap()
    for i in range(100):
        m.put(i, i * i)
    grown = m.capacity
    assert grown >= 128

    for i in range(95):
        assert m.remove(i) == i * i

    assert len(m) == 5
    assert m.capacity < grown, "Capacity should shrink once the map is sparse"
    assert m.capacity >= 1
    for i in range(95, 100):
        assert m.get(i) == i * i
    for i in range(95):
        assert not m.contains_key(i)


def test_remove_everything_then_reuse():
    m = HashMap(capacity=2)
    for i in range(10):
        m.put(i, str(i))
    for i in range(10):
        m.remove(i)
    assert len(m) == 0
    assert m.capacity >= 1
    m.put("again", 1)
    assert m.get("again") == 1


def test_snapshots_are_not_live_views():
    m = HashMap()
    for i in range(5):
        m.put(i, -i)
    keys = m.keys()
    values = m.values()
    items = m.items()
    m.put(99, -99)
    m.remove(0)

    assert sorted(keys) == [0, 1, 2, 3, 4]
    assert sorted(values) == [-4, -3, -2, -1, 0]
    assert sorted(items) == [(0, 0), (1, -1), (2, -2), (3, -3), (4, -4)]
    assert sorted(m) == [1, 2, 3, 4, 99]


def test_colliding_keys_share_a_chain():
    m = HashMap(capacity=16)
    m.put(1, "one")
    m.put(17, "seventeen")  # same bucket as 1 with 16 buckets
    assert m.max_depth() == 2
    assert m.get(1) == "one"
    assert m.get(17) == "seventeen"
    assert m.remove(1) == "one"
    assert m.get(17) == "seventeen"


def test_negative_hashes():
    m = HashMap()
    for i in range(-20, 0):
        m.put(i, i)
    for i in range(-20, 0):
        assert m.get(i) == i


def test_clear():
    m = HashMap()
    for i in range(30):
        m.put(i, i)
    m.clear()
    assert len(m) == 0
    assert m.get(3) is None
    assert "bin 0:" in repr(m)
