import random

import pytest

from contest_solvers.sparse_table import SparseTable


def test_all_ranges_match_max():
    rng = random.Random(3)
    values = [rng.randint(-1000, 1000) for _ in range(37)]
    table = SparseTable(values)
    for left in range(1, len(values) + 1):
        for right in range(left, len(values) + 1):
            assert table.query(left, right) == max(values[left - 1 : right])


def test_single_element():
    table = SparseTable([42])
    assert table.query(1, 1) == 42


@pytest.mark.parametrize("left,right", [(0, 2), (3, 2), (1, 6), (2, 9)])
def test_rejects_bad_range(left, right):
    table = SparseTable([1, 2, 3, 4, 5])
    with pytest.raises(IndexError):
        table.query(left, right)


def test_empty_table_rejects_queries():
    with pytest.raises(IndexError):
        SparseTable([]).query(1, 1)