import pytest

from pracollections.searching import (
    binary_search,
    count_ones,
    exponential_search,
    find_ceil,
    find_floor,
    find_peak,
    smallest_missing,
)

SORTED = [2, 3, 5, 6, 7, 8, 9]


@pytest.mark.parametrize("index", range(len(SORTED)))
def test_binary_search_finds_every_element(index):
    assert binary_search(SORTED, SORTED[index]) == index


@pytest.mark.parametrize("missing", [1, 4, 10])
def test_binary_search_missing(missing):
    assert binary_search(SORTED, missing) == -1


def test_binary_search_empty():
    assert binary_search([], 3) == -1


EXP = [2, 5, 6, 8, 9, 10]


@pytest.mark.parametrize("index", range(len(EXP)))
def test_exponential_search_finds_every_element(index):
    assert exponential_search(EXP, EXP[index]) == index


@pytest.mark.parametrize("missing", [1, 3, 7, 11])
def test_exponential_search_missing(missing):
    assert exponential_search(EXP, missing) == -1


def test_exponential_search_single_and_empty():
    assert exponential_search([4], 4) == 0
    assert exponential_search([], 4) == -1


def test_find_ceil():
    values = [1, 3, 5]
    assert find_ceil(values, 2) == 3
    assert find_ceil(values, 3) == 3
    assert find_ceil(values, 0) == 1
    assert find_ceil(values, 6) is None


def test_find_floor():
    values = [1, 3, 5]
    assert find_floor(values, 4) == 3
    assert find_floor(values, 5) == 5
    assert find_floor(values, 9) == 5
    assert find_floor(values, 0) is None


def test_find_peak_example():
    assert find_peak([5, 30, 50, 20, 65]) == 50


@pytest.mark.parametrize(
    "values", [[1], [1, 2], [2, 1], [1, 2, 3, 4], [4, 3, 2, 1], [1, 3, 2, 4, 1]]
)
def test_find_peak_is_local_maximum(values):
    peak = find_peak(values)
    index = values.index(peak)
    if index > 0:
        assert values[index - 1] <= peak
    if index < len(values) - 1:
        assert values[index + 1] <= peak


def test_find_peak_empty():
    with pytest.raises(ValueError):
        find_peak([])


def test_smallest_missing_complete_run():
    values = [0, 1, 2, 3, 4, 5, 6]
    assert smallest_missing(values) == len(values)


def test_smallest_missing_gap():
    assert smallest_missing([0, 1, 2, 4, 5]) == 3
    assert smallest_missing([1, 2, 3]) == 0


@pytest.mark.parametrize(
    "values", [[0, 0, 1, 1, 1, 1, 1], [0, 0, 0], [1, 1], [], [0, 1]]
)
def test_count_ones(values):
    assert count_ones(values) == values.count(1)