"""Sorting algorithms: merge sort, quicksort, bubble sort and interleaving."""

from __future__ import annotations

import argparse
import sys
from typing import Any, List, MutableSequence, Optional, Sequence


def merge(left: Sequence[Any], right: Sequence[Any]) -> List[Any]:
    """Merge two sorted sequences into one sorted list."""
    result: List[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            result.append(left[i])
            i += 1
        else:
            result.append(right[j])
            j += 1
    result.extend(left[i:])
    result.extend(right[j:])
    return result


def merge_sort(values: Sequence[Any]) -> List[Any]:
    """Return a sorted copy of ``values``."""
    if len(values) <= 1:
        return list(values)
    mid = (len(values) - 1) // 2 + 1
    return merge(merge_sort(values[:mid]), merge_sort(values[mid:]))


def interleave(values: Sequence[Any]) -> List[Any]:
    """Turn ``[a1..an, b1..bn]`` into ``[a1, b1, a2, b2, ..., an, bn]``."""
    if len(values) % 2:
        raise ValueError("interleaving needs an even number of elements")
    half = len(values) // 2
    return [item for pair in zip(values[:half], values[half:]) for item in pair]


def partition(values: MutableSequence[Any], low: int, high: int) -> int:
    """Partition ``values[low:high + 1]`` around its last element.

    Returns the pivot's final index; smaller-or-equal elements end up
    before it and greater ones after it.
    """
    if not 0 <= low <= high < len(values):
        raise IndexError("partition range out of bounds")
    pivot = values[high]
    store = low
    for j in range(low, high):
        if values[j] <= pivot:
            values[store], values[j] = values[j], values[store]
            store += 1
    values[store], values[high] = values[high], values[store]
    return store


def quick_sort(values: MutableSequence[Any]) -> None:
    """Sort ``values`` in place with quicksort."""
    pending = [(0, len(values) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            pivot = partition(values, low, high)
            pending.append((low, pivot - 1))
            pending.append((pivot + 1, high))


def bubble_sort(values: MutableSequence[Any]) -> None:
    """Sort ``values`` in place by repeatedly swapping adjacent pairs."""
    for end in range(len(values) - 1, 0, -1):
        swapped = False
        for j in range(end):
            if values[j] > values[j + 1]:
                values[j], values[j + 1] = values[j + 1], values[j]
                swapped = True
        if not swapped:
            break


def _read_numbers(parser: argparse.ArgumentParser) -> List[int]:
    tokens = sys.stdin.read().split()
    if not tokens:
        return []
    try:
        count, *rest = (int(token) for token in tokens)
    except ValueError:
        parser.error("input must be integers")
    if count < 0 or len(rest) < count:
        parser.error("fewer numbers than announced")
    return rest[:count]


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Sort integers given as arguments, or read a count and numbers from stdin."""
    parser = argparse.ArgumentParser(description="Sort integers with bubble sort.")
    parser.add_argument("numbers", nargs="*", type=int, metavar="N")
    args = parser.parse_args(argv)
    numbers = list(args.numbers) or _read_numbers(parser)
    bubble_sort(numbers)
    print("Result: " + " ".join(str(n) for n in numbers))
    return 0