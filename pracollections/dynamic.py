"""Divide-and-conquer and dynamic-programming problems."""

from __future__ import annotations

import math
from itertools import accumulate
from typing import List, Optional, Sequence


def max_subarray_sum(values: Sequence[int]) -> int:
    """Return the largest sum of a non-empty contiguous run of ``values``."""
    if not values:
        raise ValueError("values must not be empty")

    def best(low: int, high: int) -> int:
        if high <= low:
            return values[low]
        mid = (low + high) // 2
        left_max = max(accumulate(reversed(values[low:mid + 1])))
        right_max = max(accumulate(values[mid + 1:high + 1]))
        return max(best(low, mid), best(mid + 1, high), left_max + right_max)

    return best(0, len(values) - 1)


def power(base, exponent: int):
    """Raise ``base`` to a non-negative integer ``exponent`` by halving."""
    if exponent < 0:
        raise ValueError("exponent must be non-negative")
    if exponent == 0:
        return 1
    half = power(base, exponent // 2)
    result = half * half
    return result * base if exponent % 2 else result


def min_jumps(steps: Sequence[int], start: int = 0) -> int:
    """Walk the jump table from ``start`` to its last cell and count the
    one-cell jumps taken.

    A cell holding 1 moves one cell ahead and counts; a cell holding 0
    moves one cell ahead without counting; larger values jump that far.
    """
    if start < 0:
        raise ValueError("start must be non-negative")
    if any(step < 0 for step in steps):
        raise ValueError("steps must be non-negative")
    last = len(steps) - 1
    if start >= last:
        return 0
    counts: List[int] = [0] * len(steps)
    for i in range(last - 1, start - 1, -1):
        step = steps[i]
        target = i + (step or 1)
        follow = counts[target] if target <= last else 0
        counts[i] = follow + (1 if step == 1 else 0)
    return counts[start]


def knapsack(weights: Sequence[int], values: Sequence[int], capacity: int) -> int:
    """Return the best total value of items fitting in ``capacity`` (0/1 knapsack)."""
    if len(weights) != len(values):
        raise ValueError("weights and values must have the same length")
    if capacity < 0:
        raise ValueError("capacity must be non-negative")
    if any(weight < 0 for weight in weights):
        raise ValueError("weights must be non-negative")
    best = [0] * (capacity + 1)
    for weight, value in zip(weights, values):
        for room in range(capacity, weight - 1, -1):
            best[room] = max(best[room], best[room - weight] + value)
    return best[capacity]


def min_coins(coins: Sequence[int], amount: int) -> Optional[int]:
    """Return the fewest coins summing to ``amount``, or None if impossible."""
    if amount < 0:
        raise ValueError("amount must be non-negative")
    if any(coin <= 0 for coin in coins):
        raise ValueError("coin values must be positive")
    best: List[float] = [0.0] + [math.inf] * amount
    for total in range(1, amount + 1):
        best[total] = min(
            (best[total - coin] + 1 for coin in coins if coin <= total),
            default=math.inf,
        )
    result = best[amount]
    return None if math.isinf(result) else int(result)