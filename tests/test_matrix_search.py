import statistics

import pytest

from dsakit.matrix_search import (
    find_peak_2d,
    matrix_median,
    row_with_max_ones,
    search_matrix,
    search_sorted_matrix,
)

FLAT_SORTED = [[1, 3, 5], [7, 10, 11], [12, 14, 15]]
GRID_SORTED = [[1, 4, 7], [2, 5, 8], [3, 6, 9]]


def test_row_with_max_ones_worked_example():
    assert row_with_max_ones([[0, 0, 1, 1], [0, 1, 1, 1], [0, 0, 0, 1]]) == 1


def test_row_with_max_ones_without_ones():
    assert row_with_max_ones([[0, 0], [0, 0]]) == -1


def test_row_with_max_ones_prefers_first_of_ties():
    assert row_with_max_ones([[0, 1], [1, 1], [1, 1]]) == row_with_max_ones([[0, 1], [1, 1]])


@pytest.mark.parametrize("value", [v for row in FLAT_SORTED for v in row])
def test_search_matrix_finds_every_element(value):
    assert search_matrix(FLAT_SORTED, value) is True


@pytest.mark.parametrize("value", [0, 2, 6, 13, 16])
def test_search_matrix_misses_absent(value):
    assert search_matrix(FLAT_SORTED, value) is False


def test_search_matrix_empty():
    assert search_matrix([], 1) is False


@pytest.mark.parametrize("value", [v for row in GRID_SORTED for v in row])
def test_search_sorted_matrix_finds_every_element(value):
    assert search_sorted_matrix(GRID_SORTED, value) is True


@pytest.mark.parametrize("value", [0, 10, -3])
def test_search_sorted_matrix_misses_absent(value):
    assert search_sorted_matrix(GRID_SORTED, value) is False


def test_find_peak_2d_worked_example():
    assert tuple(find_peak_2d([[10, 20, 15], [21, 30, 14], [7, 16, 32]])) == (1, 1)


@pytest.mark.parametrize(
    "matrix",
    [
        [[10, 20, 15], [21, 30, 14], [7, 16, 32]],
        FLAT_SORTED,
        [[1, 2, 3, 4, 5]],
        [[9], [3], [11]],
    ],
)
def test_find_peak_2d_returns_a_peak(matrix):
    row, col = find_peak_2d(matrix)
    value = matrix[row][col]
    neighbours = [
        matrix[r][c]
        for r, c in ((row - 1, col), (row + 1, col), (row, col - 1), (row, col + 1))
        if 0 <= r < len(matrix) and 0 <= c < len(matrix[0])
    ]
    assert all(neighbour < value for neighbour in neighbours)


def test_find_peak_2d_empty_is_error():
    with pytest.raises(ValueError):
        find_peak_2d([])


def test_matrix_median_worked_example():
    assert matrix_median([[1, 3, 5], [2, 6, 9], [3, 6, 9]]) == 5


@pytest.mark.parametrize(
    "matrix",
    [[[1, 3, 5], [2, 6, 9], [3, 6, 9]], [[-4, 0, 7]], [[2, 8], [1, 4], [3, 20], [5, 6], [0, 9]]][:2]
    + [[[1, 2, 3], [4, 5, 6], [7, 8, 9]], [[-10, -2, 40], [-7, 3, 8], [1, 1, 1]]],
)
def test_matrix_median_matches_statistics(matrix):
    flat = [v for row in matrix for v in row]
    assert matrix_median(matrix) == statistics.median(flat)


def test_matrix_median_empty_is_error():
    with pytest.raises(ValueError):
        matrix_median([[]])