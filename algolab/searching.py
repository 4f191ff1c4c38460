"""Searches over sorted sequences; each returns an index or None when absent."""

from __future__ import annotations

from collections.abc import Sequence
from math import isqrt


def _binary_search(values: Sequence[int], low: int, high: int, target: int) -> int | None:
    while low <= high:
        mid = low + (high - low) // 2
        if values[mid] == target:
            return mid
        if values[mid] > target:
            high = mid - 1
        else:
            low = mid + 1
    return None


def binary_search(values: Sequence[int], target: int) -> int | None:
    """Return an index of target in sorted values by halving the range."""
    return _binary_search(values, 0, len(values) - 1, target)


def jump_search(values: Sequence[int], target: int) -> int | None:
    """Return an index of target, jumping ahead in blocks of sqrt(n)."""
    size = len(values)
    if size == 0:
        return None
    step = isqrt(size)
    left, right = 0, step
    while right < size and values[right] <= target:
        left = right
        right += step
        if right > size - 1:
            right = size
    for index in range(left, min(right, size)):
        if values[index] == target:
            return index
    return None


def interpolation_search(values: Sequence[int], target: int) -> int | None:
    """Return an index of target, probing where a uniform spread would put it."""
    low, high = 0, len(values) - 1
    while low <= high and values[low] <= target <= values[high]:
        if low == high:
            return low if values[low] == target else None
        span = values[high] - values[low]
        if span == 0:
            return low
        pos = int(low + (high - low) / span * (target - values[low]))
        if values[pos] == target:
            return pos
        if values[pos] < target:
            low = pos + 1
        else:
            high = pos - 1
    return None


def exponential_search(values: Sequence[int], target: int) -> int | None:
    """Return an index of target, doubling the bound before a binary search."""
    size = len(values)
    if size == 0:
        return None
    if values[0] == target:
        return 0
    bound = 1
    while bound < size and values[bound] <= target:
        bound *= 2
    return _binary_search(values, bound // 2, min(bound, size - 1), target)