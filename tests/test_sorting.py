import random

import pytest

from algodrills import sorting

EXAMPLES = [
    [2, 8, 7, 3, 9, 4],
    [8, 1, 3, 4, 20, 50, 30],
    [56, 10, 2, 34, 45, 23, 1, 11],
    [],
    [5],
    [3, 3, 3],
    [5, 4, 3, 2, 1],
    [1, 2, 3, 4, 5],
    [-3, 7, -3, 0, 7, 2],
]


@pytest.mark.parametrize("items", EXAMPLES)
def test_sorts_examples(items):
    expected = sorted(items)
    assert sorting.merge_sort(items) == expected
    assert sorting.quick_sort(items) == expected
    assert sorting.bubble_sort(items) == expected
    assert sorting.selection_sort(items) == expected
    assert sorting.insertion_sort(items) == expected


def test_sorts_random():
    rng = random.Random(42)
    for _ in range(50):
        items = [rng.randint(-30, 30) for _ in range(rng.randint(0, 25))]
        expected = sorted(items)
        assert sorting.merge_sort(items) == expected
        assert sorting.quick_sort(items) == expected
        assert sorting.bubble_sort(items) == expected
        assert sorting.selection_sort(items) == expected
        assert sorting.insertion_sort(items) == expected


def test_input_left_untouched():
    items = [56, 10, 2, 34, 45, 23, 1, 11]
    original = list(items)
    expected = sorted(original)
    assert sorting.merge_sort(items) == expected
    assert items == original
    assert sorting.quick_sort(items) == expected
    assert items == original
    assert sorting.bubble_sort(items) == expected
    assert items == original
    assert sorting.selection_sort(items) == expected
    assert items == original
    assert sorting.insertion_sort(items) == expected
    assert items == original


def test_accepts_any_iterable():
    assert sorting.merge_sort(iter((3, 1, 2))) == [1, 2, 3]
    assert sorting.quick_sort(iter((3, 1, 2))) == [1, 2, 3]
    assert sorting.bubble_sort(iter((3, 1, 2))) == [1, 2, 3]
    assert sorting.selection_sort(iter((3, 1, 2))) == [1, 2, 3]
    assert sorting.insertion_sort(iter((3, 1, 2))) == [1, 2, 3]


def test_quick_sort_handles_long_sorted_input():
    items = list(range(2000))
    assert sorting.quick_sort(items) == items
    assert sorting.quick_sort(items[::-1]) == items


def test_merge_sort_is_stable():
    pairs = [(2, "a"), (1, "b"), (2, "c"), (1, "d")]

    class Keyed:
        def __init__(self, pair):
            self.pair = pair

        def __le__(self, other):
            return self.pair[0] <= other.pair[0]

    result = [k.pair for k in sorting.merge_sort([Keyed(p) for p in pairs])]
    assert result == sorted(pairs, key=lambda p: p[0])