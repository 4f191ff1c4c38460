import random

import pytest

from algolab.sorting import insertion_sort, merge_sort, selection_sort

CASES = [
    [],
    [1],
    [2, 1],
    [5, 3, 5, 1, 3, 5],
    [-4, 10, 0, -4, 7, 2],
    list(range(20, 0, -1)),
    list(range(20)),
]


@pytest.mark.parametrize("data", CASES)
def test_selection_sort_matches_sorted(data):
    assert selection_sort(data) == sorted(data)


@pytest.mark.parametrize("data", CASES)
def test_insertion_sort_matches_sorted(data):
    assert insertion_sort(data) == sorted(data)


@pytest.mark.parametrize("data", CASES)
def test_merge_sort_matches_sorted(data):
    assert merge_sort(data) == sorted(data)


def test_random_lists():
    rng = random.Random(11)
    for size in range(50):
        data = [rng.randint(-1000, 1000) for _ in range(size)]
        expected = sorted(data)
        assert selection_sort(data) == expected
        assert insertion_sort(data) == expected
        assert merge_sort(data) == expected


def test_input_unchanged():
    data = [9, 4, 7, 1]
    assert selection_sort(data) == [1, 4, 7, 9]
    assert data == [9, 4, 7, 1]
    assert insertion_sort(data) == [1, 4, 7, 9]
    assert data == [9, 4, 7, 1]
    assert merge_sort(data) == [1, 4, 7, 9]
    assert data == [9, 4, 7, 1]


def test_accepts_any_iterable():
    data = (3, 1, 2)
    assert selection_sort(iter(data)) == [1, 2, 3]
    assert insertion_sort(iter(data)) == [1, 2, 3]
    assert merge_sort(iter(data)) == [1, 2, 3]