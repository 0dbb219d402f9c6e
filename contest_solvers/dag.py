"""Topological-order puzzles on directed graphs and minimum spanning trees."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence
from fractions import Fraction

from .disjoint_set import DisjointSet

_FOOD_CHAIN_MOD = 80112002


def _check_vertex(v: int, n: int) -> None:
    if not 1 <= v <= n:
        raise ValueError(f"vertex {v} outside 1..{n}")


def _directed(
    n: int, edges: Iterable[tuple[int, int]]
) -> tuple[list[list[int]], list[int]]:
    adjacency: list[list[int]] = [[] for _ in range(n + 1)]
    indegree = [0] * (n + 1)
    for u, v in edges:
        _check_vertex(u, n)
        _check_vertex(v, n)
        adjacency[u].append(v)
        indegree[v] += 1
    return adjacency, indegree


def _topological_order(adjacency: Sequence[Sequence[int]], indegree: Sequence[int]) -> list[int]:
    """Return the vertices that Kahn's algorithm manages to order."""
    remaining = list(indegree)
    queue = deque(v for v in range(1, len(adjacency)) if remaining[v] == 0)
    order = []
    while queue:
        u = queue.popleft()
        order.append(u)
        for v in adjacency[u]:
            remaining[v] -= 1
            if remaining[v] == 0:
                queue.append(v)
    return order


def can_make_acyclic(n: int, edges: Iterable[tuple[int, int]]) -> bool:
    """Tell whether removing at most one edge makes the directed graph acyclic."""
    adjacency, indegree = _directed(n, edges)
    if len(_topological_order(adjacency, indegree)) == n:
        return True
    for v in range(1, n + 1):
        if not indegree[v]:
            continue
        trial = list(indegree)
        trial[v] -= 1
        if len(_topological_order(adjacency, trial)) == n:
            return True
    return False


def count_food_chains(n: int, edges: Iterable[tuple[int, int]]) -> int:
    """Count paths from producers to top consumers modulo 80112002.

    An edge (a, b) means b eats a; the web must be acyclic.
    """
    adjacency, indegree = _directed(n, edges)
    order = _topological_order(adjacency, indegree)
    if len(order) != n:
        raise ValueError("the food web has a cycle")
    ways = [1 if indegree[v] == 0 else 0 for v in range(n + 1)]
    for u in order:
        for v in adjacency[u]:
            ways[v] = (ways[v] + ways[u]) % _FOOD_CHAIN_MOD
    return sum(ways[v] for v in range(1, n + 1) if not adjacency[v]) % _FOOD_CHAIN_MOD


def drainage_outputs(outlets: Sequence[Iterable[int]], sources: int) -> list[Fraction]:
    """Return the water reaching each final drain, in node order.

    ``outlets[i]`` lists where node i+1 drains to, splitting its water evenly;
    nodes 1..``sources`` each receive one unit.
    """
    n = len(outlets)
    if not 0 <= sources <= n:
        raise ValueError(f"source count {sources} outside 0..{n}")
    adjacency, indegree = _directed(
        n, ((u, v) for u, targets in enumerate(outlets, start=1) for v in targets)
    )
    order = _topological_order(adjacency, indegree)
    if len(order) != n:
        raise ValueError("the drainage network has a cycle")
    flow = [Fraction(1 if 1 <= v <= sources else 0) for v in range(n + 1)]
    for u in order:
        targets = adjacency[u]
        if not targets:
            continue
        share = flow[u] / len(targets)
        for v in targets:
            flow[v] += share
    return [flow[v] for v in range(1, n + 1) if not adjacency[v]]


def minimum_spanning_tree_weight(n: int, edges: Iterable[tuple[int, int, int]]) -> int:
    """Return the total weight of a minimum spanning tree over vertices 1..n."""
    if n < 1:
        raise ValueError("the graph needs at least one vertex")
    sets = DisjointSet()
    total = 0
    joined = 1
    for u, v, w in sorted(edges, key=lambda edge: edge[2]):
        _check_vertex(u, n)
        _check_vertex(v, n)
        if joined == n:
            break
        if not sets.connected(u, v):
            sets.union(u, v)
            total += w
            joined += 1
    if joined < n:
        raise ValueError("the graph is not connected")
    return total