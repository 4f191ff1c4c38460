"""Small recursive exercises: sums, powers, strings, subsequences and counting problems."""

from __future__ import annotations

import math
from collections.abc import Iterator, Sequence
from itertools import groupby, pairwise, permutations, product
from typing import TypeVar

from algolab.dynamic import knapsack

T = TypeVar("T")

KEYPAD = ("", "", "abc", "def", "ghi", "jkl", "mno", "pqrs", "tuv", "wxyz")


def _require_non_negative(n: int) -> None:
    if n < 0:
        raise ValueError("argument must not be negative")


def sum_to(n: int) -> int:
    """Return 1 + 2 + ... + n."""
    _require_non_negative(n)
    return sum(range(n + 1))


def power(base: int, exponent: int) -> int:
    """Return base raised to a non-negative integer exponent."""
    _require_non_negative(exponent)
    result = 1
    for _ in range(exponent):
        result *= base
    return result


def factorial(n: int) -> int:
    """Return n!."""
    _require_non_negative(n)
    return math.factorial(n)


def fibonacci(n: int) -> int:
    """Return the n-th Fibonacci number, with fibonacci(0) == 0."""
    _require_non_negative(n)
    previous, current = 0, 1
    for _ in range(n):
        previous, current = current, previous + current
    return previous


def is_strictly_sorted(values: Sequence[int]) -> bool:
    """Tell whether every value is smaller than the next."""
    return all(a < b for a, b in pairwise(values))


def count_down(n: int) -> list[int]:
    """Return n, n-1, ..., 1."""
    return list(range(n, 0, -1))


def count_up(n: int) -> list[int]:
    """Return 1, 2, ..., n."""
    return list(range(1, n + 1))


def first_occurrence(values: Sequence[T], target: T) -> int | None:
    """Return the first index holding target, or None."""
    return next((i for i, value in enumerate(values) if value == target), None)


def last_occurrence(values: Sequence[T], target: T) -> int | None:
    """Return the last index holding target, or None."""
    return next((i for i in reversed(range(len(values))) if values[i] == target), None)


def reverse_string(s: str) -> str:
    """Return s reversed."""
    return s[::-1]


def replace_pi(s: str) -> str:
    """Replace every "pi" with "3.14", scanning left to right."""
    return s.replace("pi", "3.14")


def _hanoi(n: int, source: str, target: str, helper: str) -> Iterator[tuple[str, str]]:
    if n == 0:
        return
    yield from _hanoi(n - 1, source, helper, target)
    yield (source, target)
    yield from _hanoi(n - 1, helper, target, source)


def tower_of_hanoi(n: int, source: str, target: str, helper: str) -> list[tuple[str, str]]:
    """Return the moves, as (from, to) pairs, that carry n disks from source to target."""
    _require_non_negative(n)
    return list(_hanoi(n, source, target, helper))


def remove_consecutive_duplicates(s: str) -> str:
    """Collapse every run of equal adjacent characters into one."""
    return "".join(ch for ch, _ in groupby(s))


def move_x_to_end(s: str) -> str:
    """Move every 'x' to the end, keeping the other characters in order."""
    return s.replace("x", "") + "x" * s.count("x")


def _subsequences(rest: str, prefix: str, with_codes: bool) -> Iterator[str]:
    if not rest:
        yield prefix
        return
    ch, tail = rest[0], rest[1:]
    yield from _subsequences(tail, prefix, with_codes)
    yield from _subsequences(tail, prefix + ch, with_codes)
    if with_codes:
        yield from _subsequences(tail, prefix + str(ord(ch)), with_codes)


def subsequences(s: str) -> list[str]:
    """Return every subsequence of s, each character first left out, then kept."""
    return list(_subsequences(s, "", False))


def subsequences_with_ascii(s: str) -> list[str]:
    """Return subsequences where each character is left out, kept, or replaced by its code."""
    return list(_subsequences(s, "", True))


def keypad_words(digits: str) -> list[str]:
    """Return every word a phone keypad can spell for the digits."""
    if not all(d in "0123456789" for d in digits):
        raise ValueError("digits must contain only 0-9")
    return ["".join(letters) for letters in product(*(KEYPAD[int(d)] for d in digits))]


def string_permutations(s: str) -> list[str]:
    """Return every ordering of the characters of s, by position."""
    return ["".join(p) for p in permutations(s)]


def count_dice_paths(start: int, end: int) -> int:
    """Count the die-roll sequences (faces 1-6) that move from start exactly to end."""
    if start > end:
        return 0
    span = end - start
    ways = [0] * (span + 7)
    ways[span] = 1
    for offset in range(span - 1, -1, -1):
        ways[offset] = sum(ways[offset + 1 : offset + 7])
    return ways[0]


def count_grid_paths(n: int) -> int:
    """Count right/down paths from one corner of an n x n grid to the other."""
    if n < 1:
        return 0
    return math.comb(2 * (n - 1), n - 1)


def tiling_ways(n: int) -> int:
    """Count tilings of a 2 x n board with 2 x 1 tiles, taking zero ways for n == 0."""
    return fibonacci(n)


def friend_pairings(n: int) -> int:
    """Count the ways n friends can each stay single or pair up."""
    _require_non_negative(n)
    if n <= 2:
        return n
    before, last = 1, 2
    for k in range(3, n + 1):
        before, last = last, last + before * (k - 1)
    return last


def knapsack_recursive(values: Sequence[int], weights: Sequence[int], capacity: int) -> int:
    """Return the best total value of a 0-1 knapsack; values come before weights."""
    return knapsack(weights, values, capacity)