import math
import random
from itertools import combinations, permutations

import pytest

from contest_solvers.dynamic_programming import (
    edit_distance,
    largest_square,
    max_durability,
    max_idle_time,
    max_two_paths,
    max_weighable_after_removal,
    min_total_waiting,
    shortest_cheese_tour,
)


def test_min_total_waiting_sample():
    cats = [(1, 0), (2, 1), (4, 9), (1, 10), (2, 10), (3, 12)]
    assert min_total_waiting([1, 3, 5], cats, 2) == 3


def _waiting_by_partitions(distances, cats, feeders):
    offsets = [0, 0]
    for d in distances:
        offsets.append(offsets[-1] + d)
    a = sorted(t - offsets[h] for h, t in cats)
    best = None
    for groups in range(1, feeders + 1):
        for cuts in combinations(range(1, len(a)), groups - 1):
            bounds = (0, *cuts, len(a))
            cost = sum(
                max(a[lo:hi]) * (hi - lo) - sum(a[lo:hi]) for lo, hi in zip(bounds, bounds[1:])
            )
            best = cost if best is None else min(best, cost)
    return best


@pytest.mark.parametrize("seed", range(5))
@pytest.mark.parametrize("feeders", [1, 2, 3])
def test_min_total_waiting_matches_partition_search(seed, feeders):
    rng = random.Random(seed)
    distances = [rng.randint(0, 5) for _ in range(4)]
    cats = [(rng.randint(1, 5), rng.randint(0, 30)) for _ in range(7)]
    assert min_total_waiting(distances, cats, feeders) == _waiting_by_partitions(
        distances, cats, feeders
    )


def test_min_total_waiting_one_feeder_per_cat_is_free():
    cats = [(1, 4), (2, 9), (3, 2)]
    assert min_total_waiting([2, 2], cats, len(cats)) == 0


def test_min_total_waiting_rejects_unknown_hill():
    with pytest.raises(ValueError):
        min_total_waiting([1], [(3, 5)], 1)


def test_max_idle_time_sample():
    tasks = [(1, 2), (1, 6), (4, 11), (8, 5), (8, 1), (11, 5)]
    assert max_idle_time(15, tasks) == 4


def test_max_idle_time_without_tasks_is_whole_day():
    assert max_idle_time(10, []) == 10


def test_max_idle_time_task_filling_day():
    assert max_idle_time(8, [(1, 8)]) == 0


def test_max_idle_time_rejects_overlong_task():
    with pytest.raises(ValueError):
        max_idle_time(5, [(3, 10)])


def _square_by_search(grid):
    rows, cols = len(grid), len(grid[0])
    best = 0
    for r in range(rows):
        for c in range(cols):
            size = 1
            while r + size <= rows and c + size <= cols and all(
                grid[i][j] for i in range(r, r + size) for j in range(c, c + size)
            ):
                best = max(best, size)
                size += 1
    return best


@pytest.mark.parametrize("seed", range(6))
def test_largest_square_matches_search(seed):
    rng = random.Random(seed)
    grid = [[int(rng.random() < 0.75) for _ in range(7)] for _ in range(6)]
    assert largest_square(grid) == _square_by_search(grid)


def test_largest_square_uniform_grids():
    assert largest_square([[1] * 5 for _ in range(3)]) == 3
    assert largest_square([[0] * 4 for _ in range(4)]) == 0


def test_edit_distance_sample():
    assert edit_distance("horse", "ros") == 3


@pytest.mark.parametrize("a,b", [("kitten", "sitting"), ("", "abc"), ("flaw", "lawn")])
def test_edit_distance_properties(a, b):
    assert edit_distance(a, a) == 0
    assert edit_distance(a, "") == len(a)
    assert edit_distance(a, b) == edit_distance(b, a)
    assert edit_distance(a, b) <= max(len(a), len(b))


def test_max_durability_everything_fits():
    values = [3, 1, 4, 1, 5]
    expected = sum(v * i for i, v in enumerate(values, start=1))
    assert max_durability(values, len(values), len(values)) == expected


@pytest.mark.parametrize("seed", range(4))
def test_max_durability_grows_with_capacity(seed):
    rng = random.Random(seed)
    values = [rng.randint(1, 9) for _ in range(6)]
    results = [max_durability(values, w, 2) for w in range(1, 7)]
    assert results == sorted(results)


def test_max_weighable_after_removal_sample():
    assert max_weighable_after_removal([1, 2, 2, 3], 1) == 6


def test_max_weighable_after_removal_without_removal():
    weights = [1, 3, 7, 8]
    sums = {sum(c) for r in range(1, 5) for c in combinations(weights, r)}
    assert max_weighable_after_removal(weights, 0) == len(sums)


def test_max_weighable_after_removal_removing_too_many():
    assert max_weighable_after_removal([2, 5], 2) == 0


def test_shortest_cheese_tour_single_point():
    assert shortest_cheese_tour([(3.0, 4.0)]) == pytest.approx(5.0)


@pytest.mark.parametrize("seed", range(4))
def test_shortest_cheese_tour_matches_permutations(seed):
    rng = random.Random(seed)
    points = [(rng.uniform(-5, 5), rng.uniform(-5, 5)) for _ in range(5)]
    best = min(
        sum(math.dist(a, b) for a, b in zip(((0.0, 0.0), *order), order))
        for order in permutations(points)
    )
    assert shortest_cheese_tour(points) == pytest.approx(best)


def test_max_two_paths_two_by_two_takes_everything():
    matrix = [[1, 2], [3, 4]]
    assert max_two_paths(matrix) == sum(map(sum, matrix))


def test_max_two_paths_trivial_inputs():
    assert max_two_paths([[7]]) == 0
    assert max_two_paths([[0] * 4 for _ in range(4)]) == 0


@pytest.mark.parametrize("seed", range(4))
def test_max_two_paths_scales_linearly(seed):
    rng = random.Random(seed)
    n = 6
    matrix = [[rng.randint(0, 9) for _ in range(n)] for _ in range(n)]
    tripled = [[3 * v for v in row] for row in matrix]
    assert max_two_paths(tripled) == 3 * max_two_paths(matrix)


def test_max_two_paths_rejects_non_square():
    with pytest.raises(ValueError):
        max_two_paths([[1, 2, 3], [4, 5, 6]])