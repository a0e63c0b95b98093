import random

import pytest

from dsakit.sorting import (
    bubble_sort,
    insertion_sort,
    merge_sort,
    merge_sorted_in_place,
    quick_sort,
    quick_sort_first_pivot,
    recursive_bubble_sort,
    recursive_insertion_sort,
    selection_sort,
)


def _cases():
    rng = random.Random(1234)
    cases = [
        [64, 25, 12, 22, 11],
        [10, 7, 8, 9, 1, 5],
        [],
        list(range(300)),
        list(range(300))[::-1],
        [7] * 15,
        ["pear", "apple", "fig", "banana"],
    ]
    for size in (1, 2, 3, 7, 20, 64):
        cases.append([rng.randint(-50, 50) for _ in range(size)])
    cases.append([rng.randint(0, 3) for _ in range(40)])
    return cases


CASES = _cases()


@pytest.mark.parametrize("data", CASES)
def test_selection_sort(data):
    work = list(data)
    assert selection_sort(work) is None
    assert work == sorted(data)


@pytest.mark.parametrize("data", CASES)
def test_bubble_sort(data):
    work = list(data)
    assert bubble_sort(work) is None
    assert work == sorted(data)


@pytest.mark.parametrize("data", CASES)
def test_recursive_bubble_sort(data):
    work = list(data)
    assert recursive_bubble_sort(work) is None
    assert work == sorted(data)


@pytest.mark.parametrize("data", CASES)
def test_insertion_sort(data):
    work = list(data)
    assert insertion_sort(work) is None
    assert work == sorted(data)


@pytest.mark.parametrize("data", CASES)
def test_recursive_insertion_sort(data):
    work = list(data)
    assert recursive_insertion_sort(work) is None
    assert work == sorted(data)


@pytest.mark.parametrize("data", CASES)
def test_merge_sort(data):
    work = list(data)
    assert merge_sort(work) is None
    assert work == sorted(data)


@pytest.mark.parametrize("data", CASES)
def test_quick_sort(data):
    work = list(data)
    assert quick_sort(work) is None
    assert work == sorted(data)


@pytest.mark.parametrize("data", CASES)
def test_quick_sort_first_pivot(data):
    work = list(data)
    assert quick_sort_first_pivot(work) is None
    assert work == sorted(data)


def test_worked_examples():
    expected = [11, 12, 22, 25, 64]
    data = [64, 25, 12, 22, 11]
    selection_sort(data)
    assert data == expected
    data = [64, 25, 12, 22, 11]
    bubble_sort(data)
    assert data == expected
    data = [64, 25, 12, 22, 11]
    insertion_sort(data)
    assert data == expected
    data = [12, 11, 13, 5, 6]
    merge_sort(data)
    assert data == [5, 6, 11, 12, 13]
    data = [10, 7, 8, 9, 1, 5]
    quick_sort_first_pivot(data)
    assert data == [1, 5, 7, 8, 9, 10]
    data = [64, 34, 25, 12, 22, 11, 90]
    recursive_bubble_sort(data)
    assert data == [11, 12, 22, 25, 34, 64, 90]
    data = [12, 11, 13, 5, 6]
    recursive_insertion_sort(data)
    assert data == [5, 6, 11, 12, 13]
    data = [64, 25, 12, 22, 11]
    quick_sort(data)
    assert data == expected


def test_merge_sort_handles_large_input():
    rng = random.Random(99)
    data = [rng.random() for _ in range(5000)]
    expected = sorted(data)
    merge_sort(data)
    assert data == expected


@pytest.mark.parametrize(
    "first, second",
    [
        ([10, 12, 15], [5, 8, 20]),
        ([1, 4, 7], [2, 5, 6]),
        ([1, 2, 3], [4, 5, 6]),
        ([4, 5, 6], [1, 2, 3]),
        ([], [3, 1, 2]),
        ([2], []),
    ],
)
def test_merge_sorted_in_place(first, second):
    combined = sorted(first + second)
    n, m = len(first), len(second)
    merge_sorted_in_place(first, second)
    assert len(first) == n
    assert len(second) == m
    assert first + second == combined


def test_merge_sorted_in_place_already_separated_is_unchanged():
    first, second = [1, 2, 3], [4, 5, 6]
    merge_sorted_in_place(first, second)
    assert first == [1, 2, 3]
    assert second == [4, 5, 6]