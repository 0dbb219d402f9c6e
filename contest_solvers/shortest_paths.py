"""Shortest-path counting, parity distances, negative cycles and doubling jumps."""

from __future__ import annotations

import math
from collections import deque
from collections.abc import Iterable

_PATH_COUNT_MOD = 100003
_DOUBLING_LEVELS = 64


def _check_vertex(v: int, n: int) -> None:
    if not 1 <= v <= n:
        raise ValueError(f"vertex {v} outside 1..{n}")


def _undirected(n: int, edges: Iterable[tuple[int, int]]) -> list[list[int]]:
    adjacency: list[list[int]] = [[] for _ in range(n + 1)]
    for u, v in edges:
        _check_vertex(u, n)
        _check_vertex(v, n)
        adjacency[u].append(v)
        adjacency[v].append(u)
    return adjacency


def count_shortest_paths(n: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """Return, for vertices 1..n, the number of shortest paths from 1 modulo 100003."""
    adjacency = _undirected(n, edges)
    dist = [math.inf] * (n + 1)
    count = [0] * (n + 1)
    dist[1], count[1] = 0, 1
    queue = deque([1])
    while queue:
        u = queue.popleft()
        d = dist[u] + 1
        for v in adjacency[u]:
            if d < dist[v]:
                dist[v] = d
                count[v] = count[u]
                queue.append(v)
            elif d == dist[v]:
                count[v] = (count[v] + count[u]) % _PATH_COUNT_MOD
    return count[1:]


def parity_distances(
    n: int, edges: Iterable[tuple[int, int]], source: int
) -> list[tuple[float, float]]:
    """Return, for vertices 1..n, the shortest even and odd walk lengths from ``source``.

    Lengths that cannot be reached are ``math.inf``.
    """
    adjacency = _undirected(n, edges)
    _check_vertex(source, n)
    dist = [[math.inf, math.inf] for _ in range(n + 1)]
    dist[source][0] = 0
    queue = deque([(source, 0)])
    while queue:
        u, parity = queue.popleft()
        d = dist[u][parity] + 1
        flipped = 1 - parity
        for v in adjacency[u]:
            if d < dist[v][flipped]:
                dist[v][flipped] = d
                queue.append((v, flipped))
    return [(even, odd) for even, odd in dist[1:]]


def can_supply(
    n: int, edges: Iterable[tuple[int, int]], queries: Iterable[tuple[int, int]]
) -> list[bool]:
    """For each (worker, level) tell whether worker 1 must supply materials."""
    dist = parity_distances(n, edges, 1)
    answers = []
    for worker, level in queries:
        _check_vertex(worker, n)
        answers.append(dist[worker - 1][level % 2] <= level)
    return answers


def has_negative_cycle(n: int, edges: Iterable[tuple[int, int, int]]) -> bool:
    """Tell whether a negative cycle is reachable from vertex 1.

    Edges with a non-negative weight are two-way, negative ones one-way.
    """
    adjacency: list[list[tuple[int, int]]] = [[] for _ in range(n + 1)]
    for u, v, w in edges:
        _check_vertex(u, n)
        _check_vertex(v, n)
        adjacency[u].append((v, w))
        if w >= 0:
            adjacency[v].append((u, w))
    dist = [math.inf] * (n + 1)
    dist[1] = 0
    in_queue = [False] * (n + 1)
    enqueued = [0] * (n + 1)
    queue = deque([1])
    in_queue[1] = True
    enqueued[1] = 1
    while queue:
        u = queue.popleft()
        in_queue[u] = False
        for v, w in adjacency[u]:
            if dist[u] + w < dist[v]:
                dist[v] = dist[u] + w
                if not in_queue[v]:
                    enqueued[v] += 1
                    if enqueued[v] >= n:
                        return True
                    queue.append(v)
                    in_queue[v] = True
    return False


def min_running_seconds(n: int, edges: Iterable[tuple[int, int]]) -> int | None:
    """Return the fewest seconds from 1 to n when any 2**k-edge walk takes one second.

    Edges are one-way; returns None when n cannot be reached.
    """
    level = [0] * (n + 1)
    for u, v in edges:
        _check_vertex(u, n)
        _check_vertex(v, n)
        level[u] |= 1 << v
    one_second = list(level)
    for _ in range(_DOUBLING_LEVELS - 1):
        doubled = [0] * (n + 1)
        for u, mask in enumerate(level):
            reach = 0
            while mask:
                low = mask & -mask
                reach |= level[low.bit_length() - 1]
                mask ^= low
            doubled[u] = reach
            one_second[u] |= reach
        if not any(doubled):
            break
        level = doubled
    dist = [
        [1 if one_second[u] >> v & 1 else math.inf for v in range(n + 1)]
        for u in range(n + 1)
    ]
    for k in range(1, n + 1):
        through = dist[k]
        for i in range(1, n + 1):
            to_k = dist[i][k]
            if to_k == math.inf:
                continue
            row = dist[i]
            for j in range(1, n + 1):
                if to_k + through[j] < row[j]:
                    row[j] = to_k + through[j]
    answer = dist[1][n]
    return None if answer == math.inf else int(answer)