import bisect
import math

import pytest

from algodrills.searching import (
    binary_search,
    find_pivot,
    first_occurrence,
    integer_sqrt,
    last_occurrence,
    lower_bound,
    occurrence_range,
    peak_element,
    rotation_count,
    search_insert,
    search_rotated,
    sqrt_precise,
    upper_bound,
)

SORTED = [3, 4, 6, 7, 9, 12, 16, 17]
WITH_REPEATS = [3, 3, 4, 4, 9, 12, 16, 17]


def test_binary_search_finds_every_element():
    for index, value in enumerate(SORTED):
        assert binary_search(SORTED, value) == index


@pytest.mark.parametrize("target", [0, 5, 18])
def test_binary_search_absent(target):
    assert binary_search(SORTED, target) is None


def test_binary_search_empty():
    assert binary_search([], 1) is None


@pytest.mark.parametrize("target", [2, 3, 4, 13, 20, 40])
def test_first_and_last_occurrence(target):
    items = [2, 2, 3, 3, 3, 3, 3, 4, 13, 13, 13, 20, 40]
    assert first_occurrence(items, target) == items.index(target)
    assert last_occurrence(items, target) == len(items) - 1 - items[::-1].index(target)


def test_occurrence_absent():
    assert first_occurrence(SORTED, 5) is None
    assert last_occurrence(SORTED, 5) is None
    assert occurrence_range(SORTED, 5) is None


def test_occurrence_range_counts_source_example():
    items = [2, 2, 3, 3, 3, 3, 3]
    first, last = occurrence_range(items, 3)
    assert last - first + 1 == items.count(3)


@pytest.mark.parametrize("target", range(0, 20))
def test_bounds_match_bisect(target):
    assert lower_bound(WITH_REPEATS, target) == bisect.bisect_left(WITH_REPEATS, target)
    assert upper_bound(WITH_REPEATS, target) == bisect.bisect_right(WITH_REPEATS, target)


@pytest.mark.parametrize("target", range(0, 20))
def test_search_insert_matches_bisect(target):
    items = [1, 2, 4, 7, 12, 14, 18]
    assert search_insert(items, target) == bisect.bisect_left(items, target)


@pytest.mark.parametrize(
    "items",
    [[1, 2, 3, 4, 5, 6, 7, 8, 5, 1], [9, 1, 2], [1, 2, 9], [1, 5, 2, 6, 3], [4]],
)
def test_peak_is_greater_than_neighbours(items):
    value = peak_element(items)
    index = items.index(value)
    if index > 0:
        assert items[index - 1] < value
    if index < len(items) - 1:
        assert items[index + 1] < value


def test_peak_errors():
    with pytest.raises(ValueError):
        peak_element([])
    with pytest.raises(ValueError):
        peak_element([2, 2, 2])


@pytest.mark.parametrize("k", range(0, 8))
def test_rotation_count_and_pivot(k):
    base = [2, 5, 6, 8, 10, 11, 15, 18]
    rotated = base[-k:] + base[:-k] if k else base[:]
    assert rotation_count(rotated) == k
    assert find_pivot(rotated) == k
    assert rotated[find_pivot(rotated)] == min(rotated)


def test_source_rotated_example():
    items = [10, 11, 15, 18, 2, 5, 6, 8]
    assert items[rotation_count(items)] == min(items)
    assert items[find_pivot(items)] == min(items)


def test_pivot_errors_on_empty():
    with pytest.raises(ValueError):
        find_pivot([])
    with pytest.raises(ValueError):
        rotation_count([])


def test_search_rotated_finds_everything():
    items = [7, 8, 9, 1, 2, 3, 4, 5, 6]
    for value in items:
        assert items[search_rotated(items, value)] == value
    assert search_rotated(items, 10) is None
    assert search_rotated([], 1) is None


@pytest.mark.parametrize("n", range(0, 200))
def test_integer_sqrt_matches_isqrt(n):
    assert integer_sqrt(n) == math.isqrt(n)


def test_integer_sqrt_negative():
    with pytest.raises(ValueError):
        integer_sqrt(-1)


@pytest.mark.parametrize("n", [2, 3, 10, 37, 50, 99])
def test_sqrt_precise_is_truncated(n):
    result = sqrt_precise(n, 5)
    exact = math.sqrt(n)
    assert result <= exact + 1e-12
    assert exact - result < 1e-5


@pytest.mark.parametrize("n", [0, 1, 36, 49, 37])
def test_sqrt_precise_zero_digits_and_squares(n):
    assert sqrt_precise(n, 0) == float(math.isqrt(n))
    if math.isqrt(n) ** 2 == n:
        assert sqrt_precise(n, 4) == float(math.isqrt(n))


def test_sqrt_precise_negative_digits():
    with pytest.raises(ValueError):
        sqrt_precise(4, -1)