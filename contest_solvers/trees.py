"""Dynamic programming over trees."""

from __future__ import annotations

import math
from collections import deque
from collections.abc import Iterable, Sequence


def _check_vertex(v: int, n: int) -> None:
    if not 1 <= v <= n:
        raise ValueError(f"vertex {v} outside 1..{n}")


def _adjacency(n: int, edges: Iterable[Sequence[int]]) -> list[list[int]]:
    adjacency: list[list[int]] = [[] for _ in range(n + 1)]
    for edge in edges:
        u, v = edge[0], edge[1]
        _check_vertex(u, n)
        _check_vertex(v, n)
        adjacency[u].append(v)
        adjacency[v].append(u)
    return adjacency


def _rooted(adjacency: Sequence[Sequence[int]], root: int) -> tuple[list[int], list[int]]:
    """Return the breadth-first order from ``root`` and each vertex's parent."""
    n = len(adjacency) - 1
    parent = [0] * (n + 1)
    seen = [False] * (n + 1)
    seen[root] = True
    order = []
    queue = deque([root])
    while queue:
        u = queue.popleft()
        order.append(u)
        for v in adjacency[u]:
            if not seen[v]:
                seen[v] = True
                parent[v] = u
                queue.append(v)
    if len(order) != n:
        raise ValueError("the tree is not connected")
    return order, parent


def count_book_locations(
    n: int, affected: Iterable[int], radius: int, edges: Iterable[tuple[int, int]]
) -> int:
    """Count vertices within ``radius`` of every affected vertex of a tree on 1..n."""
    if n < 1:
        raise ValueError("the tree needs at least one vertex")
    adjacency = _adjacency(n, edges)
    order, parent = _rooted(adjacency, 1)
    minus_inf = -math.inf
    first = [minus_inf] * (n + 1)
    second = [minus_inf] * (n + 1)
    for p in affected:
        _check_vertex(p, n)
        first[p] = second[p] = 0
    for v in reversed(order[1:]):
        u = parent[v]
        candidate = first[v] + 1
        if candidate >= first[u]:
            second[u] = first[u]
            first[u] = candidate
        else:
            second[u] = max(second[u], candidate)
    above = [minus_inf] * (n + 1)
    for v in order[1:]:
        u = parent[v]
        inside = second[u] if first[u] == first[v] + 1 else first[u]
        above[v] = max(above[u], inside) + 1
    count = int(first[1] <= radius and second[1] <= radius)
    count += sum(1 for v in order[1:] if first[v] <= radius and above[v] <= radius)
    return count


def max_subtree_sum(beauty: Sequence[int], edges: Iterable[tuple[int, int]]) -> int:
    """Return the largest total beauty of a connected piece of the tree."""
    n = len(beauty)
    if n < 1:
        raise ValueError("the tree needs at least one vertex")
    adjacency = _adjacency(n, edges)
    order, parent = _rooted(adjacency, 1)
    best = [0, *beauty]
    for v in reversed(order[1:]):
        if best[v] >= 0:
            best[parent[v]] += best[v]
    return max(best[1:])


def max_party_happiness(
    ratings: Sequence[int], relations: Iterable[tuple[int, int]]
) -> int:
    """Return the best total rating when nobody comes together with their direct boss.

    Each relation is (employee, boss).
    """
    n = len(ratings)
    if n < 1:
        raise ValueError("at least one employee is required")
    children: list[list[int]] = [[] for _ in range(n + 1)]
    has_boss = [False] * (n + 1)
    for employee, boss in relations:
        _check_vertex(employee, n)
        _check_vertex(boss, n)
        has_boss[employee] = True
        children[boss].append(employee)
    root = next((v for v in range(1, n + 1) if not has_boss[v]), None)
    if root is None:
        raise ValueError("nobody is without a boss")
    order = [root]
    for u in order:
        order.extend(children[u])
    absent = [0] * (n + 1)
    present = [0] * (n + 1)
    for u in reversed(order):
        present[u] = ratings[u - 1] + sum(absent[c] for c in children[u])
        absent[u] = sum(max(absent[c], present[c]) for c in children[u])
    return max(absent[root], present[root])


def max_apples(n: int, keep: int, edges: Iterable[tuple[int, int, int]]) -> int:
    """Return the most apples left on a binary tree rooted at 1 after keeping ``keep`` branches.

    Each edge is (a, b, apples); the kept branches must stay joined to the root.
    """
    if n < 1:
        raise ValueError("the tree needs at least one vertex")
    if keep < 0:
        raise ValueError("keep must not be negative")
    edge_list = list(edges)
    adjacency = _adjacency(n, edge_list)
    weight: dict[frozenset[int], int] = {frozenset((a, b)): s for a, b, s in edge_list}
    order, parent = _rooted(adjacency, 1)
    amount = [0] * (n + 1)
    children: list[list[int]] = [[] for _ in range(n + 1)]
    for v in order[1:]:
        u = parent[v]
        amount[v] = weight[frozenset((u, v))]
        children[u].append(v)
        if len(children[u]) > 2:
            raise ValueError(f"vertex {u} has more than two children")
    size = keep + 2
    empty = [0] * size
    best: list[list[int]] = [empty] * (n + 1)
    for u in reversed(order):
        kids = [best[c] for c in children[u]]
        if not kids:
            best[u] = [0] + [amount[u]] * (size - 1)
            continue
        left = kids[0]
        right = kids[1] if len(kids) > 1 else empty
        table = [0] * size
        for x in range(1, size):
            table[x] = amount[u] + max(left[k] + right[x - k - 1] for k in range(x))
        best[u] = table
    return best[1][keep + 1]