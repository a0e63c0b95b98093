import statistics

import pytest

from dsakit.partition_search import (
    aggressive_cows,
    book_allocation,
    kth_element,
    median_sorted_arrays,
    minimize_max_gas_distance,
    painters_partition,
    split_array_largest_sum,
)


def test_aggressive_cows_worked_example():
    assert aggressive_cows([1, 2, 4, 8, 9], 3) == 3


def test_aggressive_cows_two_cows_take_the_ends():
    stalls = [5, 1, 9, 3]
    assert aggressive_cows(stalls, 2) == max(stalls) - min(stalls)


def test_aggressive_cows_leaves_input_alone():
    stalls = [9, 1, 4, 2, 8]
    aggressive_cows(stalls, 3)
    assert stalls == [9, 1, 4, 2, 8]


def test_aggressive_cows_more_cows_never_widen():
    stalls = [1, 2, 4, 8, 9, 13, 20]
    results = [aggressive_cows(stalls, c) for c in range(2, len(stalls) + 1)]
    assert results == sorted(results, reverse=True)


@pytest.mark.parametrize("cows", [0, 1, 6])
def test_aggressive_cows_rejects_bad_counts(cows):
    with pytest.raises(ValueError):
        aggressive_cows([1, 2, 4, 8, 9], cows)


def test_book_allocation_worked_example():
    assert book_allocation([12, 34, 67, 90], 2) == 113


def test_book_allocation_one_student_reads_everything():
    books = [12, 34, 67, 90]
    assert book_allocation(books, 1) == sum(books)


def test_book_allocation_many_students_bound_by_largest_book():
    books = [12, 34, 67, 90]
    assert book_allocation(books, len(books)) == max(books)
    assert book_allocation(books, len(books) + 3) == max(books)


def test_split_and_painters_agree_with_book_allocation():
    nums = [7, 2, 5, 10, 8]
    assert split_array_largest_sum(nums, 2) == book_allocation(nums, 2)
    boards = [10, 20, 30, 40]
    assert painters_partition(boards, 2) == book_allocation(boards, 2)


def test_book_allocation_errors():
    with pytest.raises(ValueError):
        book_allocation([], 2)
    with pytest.raises(ValueError):
        book_allocation([1, 2], 0)


def test_gas_stations_worked_example():
    stations = list(range(1, 11))
    assert minimize_max_gas_distance(stations, 9) == pytest.approx(0.5, abs=1e-5)


def test_gas_stations_without_new_ones_keeps_largest_gap():
    stations = [1, 4, 6]
    assert minimize_max_gas_distance(stations, 0) == pytest.approx(4 - 1, abs=1e-5)


def test_gas_stations_errors():
    with pytest.raises(ValueError):
        minimize_max_gas_distance([], 1)
    with pytest.raises(ValueError):
        minimize_max_gas_distance([1, 2], -1)


@pytest.mark.parametrize(
    "a, b",
    [
        ([1, 3], [2]),
        ([1, 2], [3, 4]),
        ([], [5]),
        ([1, 5, 9, 12], [2, 3]),
        ([7], []),
        ([-5, 0, 8], [-2, 4, 10, 11]),
    ],
)
def test_median_matches_statistics(a, b):
    assert median_sorted_arrays(a, b) == pytest.approx(statistics.median(a + b))


def test_median_of_nothing_is_an_error():
    with pytest.raises(ValueError):
        median_sorted_arrays([], [])


@pytest.mark.parametrize(
    "a, b",
    [([2, 3, 4, 10], [1, 5, 8, 9]), ([1], [2, 3, 4, 5]), ([], [3, 6]), ([4, 4], [4])],
)
def test_kth_element_matches_sorted_union(a, b):
    merged = sorted(a + b)
    for k in range(1, len(merged) + 1):
        assert kth_element(a, b, k) == merged[k - 1]


@pytest.mark.parametrize("k", [0, 4])
def test_kth_element_out_of_range(k):
    with pytest.raises(ValueError):
        kth_element([1, 2], [3], k)