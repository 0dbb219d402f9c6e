from collections import Counter

import pytest

from contest_solvers.backtracking import (
    best_mining_path,
    euler_letter_path,
    min_stick_length,
)

PAIRS = ["aZ", "tZ", "Xt", "aX", "Za", "bZ", "bt"]
MINES = [10, 8, 4, 7, 6]
LINKS = [(1, 2), (1, 3), (3, 4), (3, 5), (4, 5)]


def test_euler_sample():
    assert euler_letter_path(["aZ", "tZ", "Xt", "aX"]) == "XaZtX"


def test_euler_all_even_starts_at_smallest_letter():
    pairs = ["qr", "rs", "sq"]
    result = euler_letter_path(pairs)
    assert result[0] == min("qrs")
    assert result[0] == result[-1]


def test_euler_too_many_odd_vertices():
    assert euler_letter_path(["ab", "cd"]) is None


def test_euler_repeated_pair_has_no_path():
    assert euler_letter_path(["ab", "ab"]) is None


def test_euler_rejects_bad_pair():
    with pytest.raises(ValueError):
        euler_letter_path(["a1"])


def test_stick_sample():
    assert min_stick_length([5, 2, 1, 5, 2, 1, 5, 2, 1]) == 6


def test_stick_length_divides_total():
    pieces = [3, 7, 2, 8, 5, 5, 4, 6]
    result = min_stick_length(pieces)
    assert sum(pieces) % result == 0
    assert result >= max(pieces)


def test_identical_pieces_are_whole_sticks():
    assert min_stick_length([4, 4, 4, 4]) == 4


def test_stick_rejects_empty():
    with pytest.raises(ValueError):
        min_stick_length([])


def test_mining_sample():
    assert best_mining_path(MINES, LINKS) == ([1, 3, 4, 5], 27)


def test_mining_total_matches_path():
    mines = [3, 9, 1, 4, 8, 2]
    links = [(1, 2), (1, 4), (2, 3), (4, 5), (5, 6), (2, 6)]
    path, total = best_mining_path(mines, links)
    assert total == sum(mines[v - 1] for v in path)
    assert all(pair in links for pair in zip(path, path[1:]))


def test_mining_rejects_backward_link():
    with pytest.raises(ValueError):
        best_mining_path(MINES, [(3, 1)])