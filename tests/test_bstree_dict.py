import pytest

from pracollections.bstree_dict import BSTreeDict

PAIRS = [("c", 3), ("f", 6), ("a", 1), ("b", 2), ("d", 4), ("e", 5)]


@pytest.fixture
def d():
    result = BSTreeDict()
    for key, value in PAIRS:
        result.insert(key, value)
    return result


def test_empty_dict():
    empty = BSTreeDict()
    assert empty.entries() == 0
    assert str(empty) == ""


def test_entries_after_inserts(d):
    assert d.entries() == len(PAIRS)


def test_search_and_getitem(d):
    assert d.search("a") == 1
    assert d["d"] == 4


def test_remove_returns_value(d):
    assert d.remove("c") == 3
    assert d.entries() == len(PAIRS) - 1
    with pytest.raises(KeyError):
        d.remove("c")


def test_duplicate_insert_raises(d):
    with pytest.raises(ValueError):
        d.insert("a", 44)
    assert d.search("a") == 1


def test_search_missing_raises(d):
    with pytest.raises(KeyError):
        d.search("j")
    with pytest.raises(KeyError):
        d["j"]


def test_str_is_ordered_by_key(d):
    text = str(d)
    positions = [text.index(f"('{k}' => {v})") for k, v in sorted(PAIRS)]
    assert positions == sorted(positions)


def test_all_values_reachable_after_removal(d):
    d.remove("c")
    for key, value in PAIRS:
        if key == "c":
            continue
        assert d.search(key) == value