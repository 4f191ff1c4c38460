"""Dynamic-programming classics: Fibonacci, sums of squares, knapsack and LIS."""

from __future__ import annotations

from collections.abc import Sequence
from functools import lru_cache
from math import isqrt

# Memoised helpers are warmed up in steps of this size so that recursion never
# runs deeper than a few hundred frames, however large the argument is.
_WARMUP_STEP = 128

# Sentinel for "not yet computed" in the square-sum table.
_UNSET = 10**9 + 7


@lru_cache(maxsize=None)
def _fib(n: int) -> int:
    if n < 2:
        return n
    return _fib(n - 1) + _fib(n - 2)


def nth_fibonacci_memo(n: int) -> int:
    """Return the n-th Fibonacci number, counting 0 as the first (top-down)."""
    if n < 1:
        raise ValueError("n must be at least 1")
    for k in range(0, n - 1, _WARMUP_STEP):
        _fib(k)
    return _fib(n - 1)


def nth_fibonacci_table(n: int) -> int:
    """Return the n-th Fibonacci number, counting 0 as the first (bottom-up)."""
    if n < 0:
        raise ValueError("n must not be negative")
    if n < 3:
        return (0, 0, 1)[n]
    previous, current = 0, 1
    for _ in range(3, n + 1):
        previous, current = current, previous + current
    return current


@lru_cache(maxsize=None)
def _min_squares(n: int) -> int:
    if n <= 3:
        return n
    return min(1 + _min_squares(n - i * i) for i in range(1, isqrt(n) + 1))


def min_squares_memo(n: int) -> int:
    """Return the fewest perfect squares summing to n (top-down)."""
    if n < 0:
        raise ValueError("n must not be negative")
    for k in range(4, n, _WARMUP_STEP):
        _min_squares(k)
    return _min_squares(n)


def min_squares_table(n: int) -> int:
    """Return the fewest perfect squares summing to n (bottom-up)."""
    if n < 0:
        raise ValueError("n must not be negative")
    best = [_UNSET] * (n + 1)
    for k in range(min(n, 3) + 1):
        best[k] = k
    for root in range(1, isqrt(n) + 1):
        square = root * root
        for rest in range(n - square + 1):
            best[square + rest] = min(best[square + rest], 1 + best[rest])
    return best[n]


def knapsack(weights: Sequence[int], values: Sequence[int], capacity: int) -> int:
    """Return the best total value of a 0-1 knapsack of the given capacity."""
    if len(weights) != len(values):
        raise ValueError("weights and values must have the same length")
    items = list(zip(weights, values))

    @lru_cache(maxsize=None)
    def best(count: int, room: int) -> int:
        if room <= 0 or count <= 0:
            return 0
        weight, value = items[count - 1]
        if weight > room:
            return best(count - 1, room)
        return max(best(count - 1, room), best(count - 1, room - weight) + value)

    return best(len(items), capacity)


def lis_ending_at_last(values: Sequence[int]) -> int:
    """Return the length of the longest increasing subsequence ending at the last element."""
    items = list(values)
    if not items:
        raise ValueError("values must not be empty")

    @lru_cache(maxsize=None)
    def ending_at(index: int) -> int:
        return max(
            (1 + ending_at(j) for j in range(index) if items[index] > items[j]),
            default=1,
        )

    for index in range(len(items)):
        ending_at(index)
    return ending_at(len(items) - 1)


def longest_increasing_subsequence(values: Sequence[int]) -> int:
    """Return the length of the longest strictly increasing subsequence.

    Only subsequences ending after the first position are considered, so a
    single-element input yields 0.
    """
    items = list(values)
    best = [1] * len(items)
    answer = 0
    for i in range(1, len(items)):
        best[i] = max(
            (1 + best[j] for j in range(i) if items[i] > items[j]),
            default=1,
        )
        answer = max(answer, best[i])
    return answer