import random

import pytest

from contest_solvers.segment_tree import LazySegmentTree


def test_full_range_sum_matches_input():
    values = [5, -3, 8, 0, 12, 7]
    tree = LazySegmentTree(values)
    assert tree.sum(1, len(values)) == sum(values)


def test_single_positions_match_input():
    values = [4, 9, 1, 6]
    tree = LazySegmentTree(values)
    assert [tree.sum(i, i) for i in range(1, 5)] == values


def test_random_operations_agree_with_plain_list():
    rng = random.Random(1234)
    values = [rng.randint(-50, 50) for _ in range(37)]
    model = list(values)
    tree = LazySegmentTree(values)
    for _ in range(300):
        left = rng.randint(1, len(model))
        right = rng.randint(left, len(model))
        if rng.random() < 0.5:
            delta = rng.randint(-20, 20)
            tree.add(left, right, delta)
            for i in range(left - 1, right):
                model[i] += delta
        else:
            assert tree.sum(left, right) == sum(model[left - 1 : right])


def test_add_whole_range_scales_with_length():
    values = [1, 2, 3, 4, 5]
    tree = LazySegmentTree(values)
    tree.add(1, 5, 10)
    assert tree.sum(1, 5) == sum(values) + 10 * len(values)
    assert tree.sum(2, 2) == values[1] + 10


@pytest.mark.parametrize("left,right", [(0, 2), (2, 6), (3, 2)])
def test_bad_ranges_raise(left, right):
    tree = LazySegmentTree([1, 2, 3, 4, 5])
    with pytest.raises(IndexError):
        tree.sum(left, right)
    with pytest.raises(IndexError):
        tree.add(left, right, 1)


def test_empty_tree_rejects_queries():
    tree = LazySegmentTree([])
    with pytest.raises(IndexError):
        tree.sum(1, 1)