import itertools

import pytest

from algokit.fenwick import FenwickTree, dynamic_range_sums, static_range_sums

VALUES = [3, 2, 4, 5, 1, 1, 5, 3]


def _assert_matches(tree, expected):
    for left, right in itertools.combinations_with_replacement(range(len(expected)), 2):
        assert tree.range_sum(left, right) == sum(expected[left : right + 1])


def test_prefix_sums_bounds():
    tree = FenwickTree.from_values(VALUES)
    assert tree.prefix_sum(0) == 0
    assert tree.prefix_sum(len(VALUES)) == sum(VALUES)


def test_prefix_sums_match_slices():
    tree = FenwickTree.from_values(VALUES)
    for count in range(len(VALUES) + 1):
        assert tree.prefix_sum(count) == sum(VALUES[:count])


def test_range_sums_match_every_range():
    _assert_matches(FenwickTree.from_values(VALUES), VALUES)


def test_add_updates_sums():
    tree = FenwickTree.from_values(VALUES)
    expected = list(VALUES)
    tree.add(3, -7)
    expected[3] += -7
    tree.add(0, 4)
    expected[0] += 4
    _assert_matches(tree, expected)


def test_new_tree_is_zero():
    tree = FenwickTree(5)
    assert len(tree) == 5
    assert tree.range_sum(0, 4) == 0


def test_from_values_length():
    assert len(FenwickTree.from_values(VALUES)) == len(VALUES)


def test_add_out_of_range():
    with pytest.raises(IndexError):
        FenwickTree(3).add(3, 1)


def test_prefix_out_of_range():
    with pytest.raises(IndexError):
        FenwickTree(3).prefix_sum(4)


def test_reversed_range_rejected():
    with pytest.raises(ValueError):
        FenwickTree.from_values(VALUES).range_sum(5, 2)


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        FenwickTree(-1)


def test_static_range_sums():
    queries = [(2, 5), (1, 8), (3, 3)]
    assert static_range_sums(VALUES, queries) == [
        sum(VALUES[a - 1 : b]) for a, b in queries
    ]


def test_dynamic_range_sums_sets_values():
    operations = [(2, 1, 3), (1, 2, 10), (2, 1, 3)]
    first = sum(VALUES[0:3])
    assert dynamic_range_sums(VALUES, operations) == [first, first - VALUES[1] + 10]


def test_dynamic_range_sums_repeated_set():
    operations = [(1, 1, 9), (1, 1, 9), (2, 1, 1)]
    assert dynamic_range_sums(VALUES, operations) == [9]