import pytest

from dsakit.hashtable import HashTable, hash_combine, int_hash, str_hash


def _check_geometry(table):
    cap = table.capacity()
    assert cap & (cap - 1) == 0
    assert table.max_used() == (cap >> 1) + (cap >> 2)
    assert len(table) <= table.used() <= table.max_used()


def test_int_hash_reinterprets_as_unsigned():
    assert int_hash(5) == 5
    assert int_hash(-1) == 2**64 - 1


def test_str_hash_empty_and_single_char():
    assert str_hash("") == 0
    assert str_hash("a") == ord("a")


def test_str_hash_stops_at_nul():
    assert str_hash("abc\0def") == str_hash("abc")


def test_str_hash_distinguishes_order():
    assert str_hash("ab") != str_hash("ba")
    assert 0 <= str_hash("Burger" * 50) < 2**64


def test_hash_combine_constant():
    assert hash_combine(0, 0) == 0x9E3779B9
    assert 0 <= hash_combine(2**64 - 1, 2**64 - 1) < 2**64


def test_put_and_get_example():
    table = HashTable()
    assert table.put("Burger", 10) is True
    assert table["Burger"] == 10
    assert "Burger" in table
    assert len(table) == 1


def test_put_existing_keeps_value():
    table = HashTable()
    table.put("Burger", 10)
    assert table.put("Burger", 99) is False
    assert table["Burger"] == 10
    assert len(table) == 1


def test_setitem_overwrites():
    table = HashTable()
    table["k"] = 1
    table["k"] = 2
    assert table["k"] == 2
    assert len(table) == 1


def test_missing_key_raises():
    table = HashTable()
    with pytest.raises(KeyError):
        table["nope"]
    assert len(table) == 0
    table[1] = "one"
    with pytest.raises(KeyError):
        table[2]
    with pytest.raises(KeyError):
        del table[2]
    assert table[1] == "one"
    assert len(table) == 1
    assert list(table) == [1]


def test_many_int_keys_round_trip():
    table = HashTable()
    for i in range(500):
        table[i] = i * i
    assert len(table) == 500
    assert all(table[i] == i * i for i in range(500))
    assert sorted(table) == list(range(500))
    _check_geometry(table)


def test_delete_leaves_tombstone():
    table = HashTable()
    for i in range(10):
        table[i] = i
    used_before = table.used()
    del table[3]
    assert 3 not in table
    assert len(table) == 9
    assert table.used() == used_before


def test_colliding_keys_survive_deletion():
    table = HashTable(hash_func=lambda k: 0)
    for key in "abcdef":
        table[key] = key.upper()
    del table["b"]
    del table["d"]
    assert sorted(table) == ["a", "c", "e", "f"]
    assert table["f"] == "F"
    assert "d" not in table


def test_setitem_past_tombstone_does_not_duplicate():
    table = HashTable(hash_func=lambda k: 0)
    for key in "abc":
        table[key] = 0
    del table["a"]
    table["c"] = 5
    assert len(table) == 2
    assert list(table).count("c") == 1
    assert table["c"] == 5


def test_reinsert_into_tombstone_reuses_slot():
    table = HashTable(hash_func=lambda k: 0)
    for key in "abc":
        table[key] = 0
    del table["a"]
    used_before = table.used()
    table["z"] = 1
    assert table.used() == used_before
    assert sorted(table) == ["b", "c", "z"]


def test_delete_during_iteration():
    table = HashTable()
    for i in range(20):
        table[i] = i
    for key in table:
        if key % 2:
            del table[key]
    assert sorted(table) == list(range(0, 20, 2))


def test_clear_resets_counts_keeps_capacity():
    table = HashTable()
    for i in range(30):
        table[i] = i
    cap = table.capacity()
    table.clear()
    assert len(table) == 0
    assert table.used() == 0
    assert table.capacity() == cap
    assert list(table) == []
    table[7] = "seven"
    assert table[7] == "seven"


def test_empty_table_has_no_storage():
    table = HashTable()
    assert table.capacity() == 0
    assert table.max_used() == 0
    assert 1 not in table


def test_reserve_grows_geometry():
    table = HashTable()
    table.reserve(100)
    assert table.max_used() >= 100
    _check_geometry(table)
    cap = table.capacity()
    table.reserve(50)
    assert table.capacity() == cap


def test_reserve_preserves_entries():
    table = HashTable()
    for i in range(5):
        table[i] = str(i)
    table.reserve(1000)
    assert {k: table[k] for k in table} == {i: str(i) for i in range(5)}


@pytest.mark.parametrize("capacity", [2**64, 2**63 + 1])
def test_reserve_overflow(capacity):
    table = HashTable()
    with pytest.raises(OverflowError):
        table.reserve(capacity)


def test_custom_equality():
    table = HashTable(hash_func=lambda k: str_hash(k.lower()), eq_func=lambda a, b: a.lower() == b.lower())
    table["Burger"] = 10
    assert table["BURGER"] == 10
    assert table.put("burger", 3) is False
    assert len(table) == 1


def test_tuple_keys_with_default_hash():
    table = HashTable()
    table[(1, 2)] = "pair"
    assert table[(1, 2)] == "pair"
    assert (2, 1) not in table