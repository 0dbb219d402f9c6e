"""Dynamic-programming puzzle solutions."""

from __future__ import annotations

import math
from collections import defaultdict, deque
from collections.abc import Iterable, Sequence
from itertools import accumulate, combinations


def min_total_waiting(
    distances: Sequence[int], cats: Iterable[tuple[int, int]], feeders: int
) -> int:
    """Return the least total waiting time of cats picked up by ``feeders`` feeders.

    ``distances`` holds the gaps between hills 1..n; each cat is (hill, time).
    """
    hill_offsets = [0, 0, *accumulate(distances)]
    hills = len(hill_offsets) - 1
    offsets = []
    for hill, time in cats:
        if not 1 <= hill <= hills:
            raise ValueError(f"hill {hill} outside 1..{hills}")
        offsets.append(time - hill_offsets[hill])
    if feeders < 1:
        raise ValueError("at least one feeder is required")
    a = [0, *sorted(offsets)]
    m = len(a) - 1
    if m == 0:
        return 0
    s = [0, *accumulate(a[1:])]
    rounds = min(feeders, m)
    best = [a[j] * j - s[j] for j in range(m + 1)]
    for _ in range(rounds - 1):
        y = [best[j] + s[j] for j in range(m + 1)]
        current = [0] * (m + 1)
        hull: deque[int] = deque([0])
        for j in range(1, m + 1):
            while len(hull) > 1 and y[hull[0]] - a[j] * hull[0] >= y[hull[1]] - a[j] * hull[1]:
                hull.popleft()
            k = hull[0]
            current[j] = a[j] * j - s[j] + y[k] - a[j] * k
            while len(hull) > 1:
                u, v = hull[-2], hull[-1]
                if (y[u] - y[v]) * (v - j) >= (y[v] - y[j]) * (u - v):
                    hull.pop()
                else:
                    break
            hull.append(j)
        best = current
    return best[m]


def max_idle_time(minutes: int, tasks: Iterable[tuple[int, int]]) -> int:
    """Return the most idle minutes when every task starting while free must be taken.

    Each task is (start, duration).
    """
    ends_by_start: dict[int, list[int]] = defaultdict(list)
    for start, duration in tasks:
        end = start + duration
        if not 1 <= start <= minutes or end > minutes + 1:
            raise ValueError(f"task ({start}, {duration}) does not fit in {minutes} minutes")
        ends_by_start[start].append(end)
    idle = [0] * (minutes + 2)
    for t in range(minutes, 0, -1):
        if t in ends_by_start:
            idle[t] = max(idle[end] for end in ends_by_start[t])
        else:
            idle[t] = 1 + idle[t + 1]
    return idle[1] if minutes >= 1 else 0


def largest_square(grid: Sequence[Sequence[int]]) -> int:
    """Return the side of the largest all-ones square in a 0/1 grid."""
    columns = len(grid[0]) if grid else 0
    previous = [0] * (columns + 1)
    best = 0
    for row in grid:
        if len(row) != columns:
            raise ValueError("all rows must have the same length")
        current = [0]
        for j, cell in enumerate(row, start=1):
            size = 1 + min(previous[j - 1], previous[j], current[j - 1]) if cell else 0
            current.append(size)
            best = max(best, size)
        previous = current
    return best


def edit_distance(first: str, second: str) -> int:
    """Return the Levenshtein distance between two strings."""
    previous = list(range(len(second) + 1))
    for i, a in enumerate(first, start=1):
        current = [i]
        for j, b in enumerate(second, start=1):
            if a == b:
                current.append(previous[j - 1])
            else:
                current.append(1 + min(current[j - 1], previous[j], previous[j - 1]))
        previous = current
    return previous[-1]


def max_durability(values: Sequence[int], capacity: int, step: int) -> int:
    """Return the best total durability when adding materials to a furnace.

    Material i is worth its value times the number of items in the furnace
    after it is added; before each addition up to ``step`` items may be taken out.
    """
    if capacity < 0 or step < 0:
        raise ValueError("capacity and step must not be negative")
    minus_inf = -math.inf
    row: list[float] = [minus_inf] * (capacity + 1)
    row[0] = 0
    for i, value in enumerate(values, start=1):
        nxt: list[float] = [minus_inf] * (capacity + 1)
        for j in range(min(i, capacity) + 1):
            low, high = max(j - 1, 0), min(capacity, j + step - 1)
            best = max(row[low:high + 1], default=minus_inf)
            nxt[j] = best + value * j
        row = nxt
    answer = max(row)
    if answer == minus_inf:
        raise ValueError("no valid way to place the materials")
    return int(answer)


def max_weighable_after_removal(weights: Iterable[int], remove: int) -> int:
    """Return the most distinct positive weighable amounts after dropping ``remove`` weights.

    The heaviest weight is always kept.
    """
    if remove < 0:
        raise ValueError("remove must not be negative")
    ordered = sorted(weights)
    best = 0
    for removed in combinations(range(len(ordered) - 1), remove):
        skipped = set(removed)
        reachable = 1
        for index, weight in enumerate(ordered):
            if index not in skipped:
                reachable |= reachable << weight
        best = max(best, bin(reachable).count("1") - 1)
    return best


def shortest_cheese_tour(points: Sequence[tuple[float, float]]) -> float:
    """Return the shortest route from the origin visiting every point."""
    n = len(points)
    if n == 0:
        return 0.0
    gaps = [[math.dist(p, q) for q in points] for p in points]
    full = 1 << n
    best = [[math.inf] * full for _ in range(n)]
    for i in range(n):
        best[i][1 << i] = 0.0
    for mask in range(1, full):
        for i in range(n):
            bit = 1 << i
            if not mask & bit or mask == bit:
                continue
            rest = mask ^ bit
            best[i][mask] = min(
                (best[j][rest] + gaps[i][j] for j in range(n) if rest >> j & 1),
                default=math.inf,
            )
    return min(math.hypot(*points[i]) + best[i][full - 1] for i in range(n))


def max_two_paths(matrix: Sequence[Sequence[int]]) -> int:
    """Return the best total of two distinct bouncing diagonal paths, cells counted once."""
    n = len(matrix)
    if any(len(row) != n for row in matrix):
        raise ValueError("the matrix must be square")
    if n < 2:
        return 0
    m = [[0] * (n + 2) for _ in range(n + 2)]
    for i, row in enumerate(matrix, start=1):
        m[i][1:n + 1] = row

    totals = [0] * (n + 1)
    totals[1] = sum(m[i][i] for i in range(1, n + 1))
    totals[n] = sum(m[n - i + 1][i] for i in range(1, n + 1))
    for start in range(2, n):
        total = 0
        x, y = 1, start
        while y <= n:
            x, y = x + 1, y + 1
            total += m[x][y]
        x, y = x - 1, y - 1
        while True:
            x, y = x + 1, y - 1
            total += m[x][y]
            if x > n:
                break
        x, y = x - 1, y + 1
        while True:
            x, y = x - 1, y - 1
            total += m[x][y]
            if y < 1:
                break
        x, y = x + 1, y + 1
        while True:
            x, y = x - 1, y + 1
            total += m[x][y]
            if x < 1:
                break
        totals[start] = total

    def shared(x: int, y: int) -> int:
        if (y - x) % 2:
            return 0
        if x == 1 and y == n:
            centre = (n + 1) // 2
            return m[centre][centre]
        if x == 1:
            a, b = (y + 1) // 2, (2 * n - y + 1) // 2
            return m[a][a] + m[b][b]
        if y == n:
            return m[(n - x) // 2 + 1][(n + x) // 2] + m[(n + x) // 2][(n - x) // 2 + 1]
        half_sum, half_gap = (x + y) // 2, (y - x) // 2
        return (
            m[half_sum][half_gap + 1]
            + m[half_gap + 1][half_sum]
            + m[n - half_gap][n - half_sum + 1]
            + m[n - half_sum + 1][n - half_gap]
        )

    return max(
        0,
        max(
            totals[i] + totals[j] - shared(i, j)
            for i, j in combinations(range(1, n + 1), 2)
        ),
    )