import pytest

from pracollections.hash_table import HashTable

WORDS = [("One", 1), ("Two", 2), ("Three", 3), ("Four", 4), ("Five", 5), ("Six", 6)]


@pytest.fixture
def table():
    t = HashTable(3)
    for key, value in WORDS:
        t.insert(key, value)
    return t


def test_empty_table():
    t = HashTable(3)
    assert t.capacity() == 3
    assert t.entries() == 0
    assert str(t).startswith("HashTable [entries: 0, capacity: 3]")


def test_inserts_are_counted(table):
    assert table.entries() == len(WORDS)
    assert table.capacity() == 3


def test_search_and_getitem(table):
    assert table.search("One") == 1
    assert table["Four"] == 4
    for key, value in WORDS:
        assert table.search(key) == value


def test_remove_returns_value(table):
    assert table.remove("Three") == 3
    assert table.entries() == len(WORDS) - 1
    with pytest.raises(KeyError):
        table.search("Three")


def test_duplicate_insert_raises(table):
    with pytest.raises(ValueError):
        table.insert("One", 44)
    assert table.search("One") == 1
    assert table.entries() == len(WORDS)


def test_missing_key_errors(table):
    with pytest.raises(KeyError):
        table.search("Ten")
    with pytest.raises(KeyError):
        table.remove("Ten")
    with pytest.raises(KeyError):
        table["Ten"]


def test_str_lists_every_bucket_and_entry(table):
    text = str(table)
    assert text.count("== Bucket") == table.capacity()
    for key, value in WORDS:
        assert f"('{key}' => {value})" in text


def test_remove_then_reinsert(table):
    table.remove("Two")
    table.insert("Two", 22)
    assert table.search("Two") == 22
    assert table.entries() == len(WORDS)


def test_invalid_size():
    with pytest.raises(ValueError):
        HashTable(0)