"""Divide-and-conquer searches over sorted sequences."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from typing import Any, Optional, Sequence


def binary_search(values: Sequence[Any], target: Any) -> int:
    """Return an index of ``target`` in the sorted ``values``, or -1."""
    low, high = 0, len(values) - 1
    while low <= high:
        mid = (low + high) // 2
        if values[mid] < target:
            low = mid + 1
        elif values[mid] > target:
            high = mid - 1
        else:
            return mid
    return -1


def exponential_search(values: Sequence[Any], target: Any) -> int:
    """Return an index of ``target`` in the sorted ``values``, or -1.

    Each step first rejects targets outside the current range and checks
    both ends before halving the range.
    """
    low, high = 0, len(values) - 1
    while low <= high:
        if target < values[low] or target > values[high]:
            return -1
        if values[low] == target:
            return low
        if values[high] == target:
            return high
        mid = (low + high) // 2
        if values[mid] == target:
            return mid
        if values[mid] < target:
            low = mid + 1
        else:
            high = mid - 1
    return -1


def find_ceil(values: Sequence[Any], x: Any) -> Optional[Any]:
    """Return the smallest element of the sorted ``values`` that is >= ``x``."""
    index = bisect_left(values, x)
    return values[index] if index < len(values) else None


def find_floor(values: Sequence[Any], x: Any) -> Optional[Any]:
    """Return the largest element of the sorted ``values`` that is <= ``x``."""
    index = bisect_right(values, x)
    return values[index - 1] if index else None


def find_peak(values: Sequence[Any]) -> Any:
    """Return an element that is not smaller than its neighbours."""
    if not values:
        raise ValueError("cannot find a peak in an empty sequence")
    low, high = 0, len(values) - 1
    while low < high:
        mid = (low + high) // 2
        if values[mid] < values[mid + 1]:
            low = mid + 1
        else:
            high = mid
    return values[low]


def smallest_missing(values: Sequence[int]) -> int:
    """Return the smallest non-negative integer absent from the sorted,
    distinct, non-negative ``values``."""
    low, high = 0, len(values) - 1
    while low <= high:
        mid = low + (high - low) // 2
        if values[mid] == mid:
            low = mid + 1
        else:
            high = mid - 1
    return low


def count_ones(values: Sequence[int]) -> int:
    """Count the ones in a sorted sequence of zeros followed by ones."""
    return len(values) - bisect_left(values, 1)