import random

import pytest

from algokit.sorting import insertion_sort, radix_sort, selection_sort


def _random_lists(seed, count=40, low=0, high=999):
    rng = random.Random(seed)
    return [[rng.randint(low, high) for _ in range(rng.randint(0, 30))] for _ in range(count)]


def test_matches_builtin_sorted():
    for values in _random_lists(11):
        expected = sorted(values)
        assert insertion_sort(values) == expected
        assert selection_sort(values) == expected
        assert radix_sort(values) == expected


def test_input_not_modified():
    values = [5, 3, 9, 1]
    original = list(values)
    assert insertion_sort(values) == [1, 3, 5, 9]
    assert selection_sort(values) == [1, 3, 5, 9]
    assert radix_sort(values) == [1, 3, 5, 9]
    assert values == original


def test_empty_and_single():
    assert insertion_sort([]) == []
    assert selection_sort([]) == []
    assert radix_sort([]) == []
    assert insertion_sort([42]) == [42]
    assert selection_sort([42]) == [42]
    assert radix_sort([42]) == [42]


def test_duplicates_kept():
    values = [3, 1, 3, 0, 1, 3]
    expected = [0, 1, 1, 3, 3, 3]
    assert insertion_sort(values) == expected
    assert selection_sort(values) == expected
    assert radix_sort(values) == expected


def test_comparison_sorts_handle_negatives():
    for values in _random_lists(5, low=-500, high=500):
        expected = sorted(values)
        assert insertion_sort(values) == expected
        assert selection_sort(values) == expected


def test_comparison_sorts_accept_strings():
    words = ["pear", "apple", "fig", "banana"]
    expected = ["apple", "banana", "fig", "pear"]
    assert insertion_sort(words) == expected
    assert selection_sort(words) == expected


def test_insertion_sort_is_stable():
    class Item:
        def __init__(self, key, tag):
            self.key, self.tag = key, tag

        def __lt__(self, other):
            return self.key < other.key

    items = [Item(2, "a"), Item(1, "b"), Item(2, "c"), Item(1, "d")]
    assert [item.tag for item in insertion_sort(items)] == ["b", "d", "a", "c"]


def test_radix_sort_multi_digit():
    values = [170, 45, 75, 90, 802, 24, 2, 66]
    assert radix_sort(values) == [2, 24, 45, 66, 75, 90, 170, 802]


def test_radix_sort_zeros():
    assert radix_sort([0, 0, 0]) == [0, 0, 0]


def test_radix_sort_rejects_negatives():
    with pytest.raises(ValueError):
        radix_sort([3, -1, 2])


def test_accepts_iterables():
    assert selection_sort(iter([3, 2, 1])) == [1, 2, 3]
    assert insertion_sort(x for x in (3, 2, 1)) == [1, 2, 3]