"""Problems solved with hash maps: frequencies, vertical order, windows, top-k."""

from __future__ import annotations

from collections import Counter, defaultdict
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from itertools import accumulate


@dataclass
class TreeNode:
    """A binary tree node."""

    key: int
    left: TreeNode | None = None
    right: TreeNode | None = None


def frequencies(values: Iterable[int]) -> dict[int, int]:
    """Return each value's count, ordered by value."""
    return dict(sorted(Counter(values).items()))


def vertical_order(root: TreeNode | None) -> dict[int, list[int]]:
    """Group keys by horizontal distance from the root, in pre-order within a column."""
    columns: defaultdict[int, list[int]] = defaultdict(list)
    stack = [(root, 0)] if root is not None else []
    while stack:
        node, distance = stack.pop()
        columns[distance].append(node.key)
        if node.right is not None:
            stack.append((node.right, distance + 1))
        if node.left is not None:
            stack.append((node.left, distance - 1))
    return dict(sorted(columns.items()))


def count_zero_sum_subarrays(values: Iterable[int]) -> int:
    """Return the number of contiguous subarrays whose sum is zero."""
    counts = Counter(accumulate(values))
    pairs = sum(c * (c - 1) // 2 for c in counts.values())
    return pairs + counts.get(0, 0)


def min_window_sum(values: Sequence[int], k: int) -> int:
    """Return the smallest sum of k consecutive values."""
    items = list(values)
    if not 1 <= k <= len(items):
        raise ValueError("k must be between 1 and the number of values")
    window = sum(items[:k])
    best = window
    for leaving, entering in zip(items, items[k:]):
        window += entering - leaving
        best = min(best, window)
    return best


def top_k_frequent(values: Iterable[int], k: int) -> list[tuple[int, int]]:
    """Count values until a (k+1)-th distinct one appears; rank them by frequency.

    Returns (value, count) pairs, highest count first; ties put the larger value first.
    """
    counts: dict[int, int] = {}
    for value in values:
        if value not in counts and len(counts) == k:
            break
        counts[value] = counts.get(value, 0) + 1
    ranked = sorted(((count, value) for value, count in counts.items()), reverse=True)
    return [(value, count) for count, value in ranked]