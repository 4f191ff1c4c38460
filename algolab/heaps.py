"""Heap-based algorithms: heap sort, greedy counting and a running median."""

from __future__ import annotations

import heapq
from collections.abc import Iterable


def _sift_down(items: list, size: int, index: int) -> None:
    while True:
        largest = index
        left, right = 2 * index + 1, 2 * index + 2
        if left < size and items[left] > items[largest]:
            largest = left
        if right < size and items[right] > items[largest]:
            largest = right
        if largest == index:
            return
        items[index], items[largest] = items[largest], items[index]
        index = largest


def heap_sort(values: Iterable[int]) -> list[int]:
    """Return the values in ascending order, sorted through a max-heap."""
    items = list(values)
    size = len(items)
    for index in range(size // 2 - 1, -1, -1):
        _sift_down(items, size, index)
    for end in range(size - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        _sift_down(items, end, 0)
    return items


def smallest_count_reaching(values: Iterable[int], k: int) -> int | None:
    """Return how many of the largest values are needed to reach a sum of k.

    Returns None when even all values together fall short.
    """
    heap = [-value for value in values]
    heapq.heapify(heap)
    total = 0
    count = 0
    while heap:
        total -= heapq.heappop(heap)
        count += 1
        if total >= k:
            break
    return count if total >= k else None


class RunningMedian:
    """Median of a stream, kept with a max-heap of the low half and a min-heap of the high half."""

    def __init__(self) -> None:
        self._low: list[int] = []  # negated, so the top is the largest low value
        self._high: list[int] = []

    def insert(self, x: int) -> None:
        """Add a value to the stream."""
        low, high = self._low, self._high
        if len(low) == len(high):
            if not low or x < -low[0]:
                heapq.heappush(low, -x)
            else:
                heapq.heappush(high, x)
        elif len(high) < len(low):
            if x >= -low[0]:
                heapq.heappush(high, x)
            else:
                heapq.heappush(high, -heapq.heappop(low))
                heapq.heappush(low, -x)
        else:
            if x <= high[0]:
                heapq.heappush(low, -x)
            else:
                heapq.heappush(low, -heapq.heappop(high))
                heapq.heappush(high, x)

    def median(self) -> float:
        """Return the median of the values inserted so far."""
        low, high = self._low, self._high
        if not low and not high:
            raise ValueError("no values inserted")
        if len(low) == len(high):
            return (high[0] - low[0]) / 2.0
        if len(low) > len(high):
            return float(-low[0])
        return float(high[0])