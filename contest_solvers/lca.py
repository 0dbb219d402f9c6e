"""Offline lowest common ancestors and bottleneck path queries."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable, Sequence

from .disjoint_set import DisjointSet


def _check_vertex(v: int, n: int) -> None:
    if not 1 <= v <= n:
        raise ValueError(f"vertex {v} outside 1..{n}")


def _offline_lca(
    adjacency: Sequence[Sequence[int]],
    roots: Iterable[int],
    queries: Sequence[tuple[int, int]],
) -> list[int | None]:
    """Answer LCA queries over the trees grown from ``roots``; None where apart."""
    pending: dict[int, list[tuple[int, int]]] = defaultdict(list)
    answers: list[int | None] = [None] * len(queries)
    for i, (x, y) in enumerate(queries):
        if x == y:
            answers[i] = x
        else:
            pending[x].append((y, i))
            pending[y].append((x, i))
    state = [0] * len(adjacency)
    tree = [0] * len(adjacency)
    sets = DisjointSet()
    for label, root in enumerate(roots, start=1):
        if state[root]:
            continue
        state[root] = 1
        tree[root] = label
        work = [(root, iter(adjacency[root]))]
        while work:
            u, neighbours = work[-1]
            for v in neighbours:
                if not state[v]:
                    state[v] = 1
                    tree[v] = label
                    work.append((v, iter(adjacency[v])))
                    break
            else:
                work.pop()
                for other, i in pending[u]:
                    if state[other] == 2 and tree[other] == label:
                        answers[i] = sets.find(other)  # type: ignore[assignment]
                state[u] = 2
                if work:
                    sets.union(u, work[-1][0])
    return answers


def lowest_common_ancestors(
    n: int,
    root: int,
    edges: Iterable[tuple[int, int]],
    queries: Iterable[tuple[int, int]],
) -> list[int]:
    """Return the lowest common ancestor of each query pair in a tree on 1..n."""
    _check_vertex(root, n)
    adjacency: list[list[int]] = [[] for _ in range(n + 1)]
    for u, v in edges:
        _check_vertex(u, n)
        _check_vertex(v, n)
        adjacency[u].append(v)
        adjacency[v].append(u)
    pairs = list(queries)
    for x, y in pairs:
        _check_vertex(x, n)
        _check_vertex(y, n)
    answers = _offline_lca(adjacency, [root], pairs)
    if any(answer is None for answer in answers):
        raise ValueError("a queried vertex is not connected to the root")
    return [answer for answer in answers if answer is not None]


def minimax_path_weights(
    n: int,
    edges: Iterable[tuple[int, int, int]],
    queries: Iterable[tuple[int, int]],
) -> list[int | None]:
    """Return, per query, the least possible heaviest edge on a path between the pair.

    A vertex paired with itself gives 0; unconnected pairs give None.
    """
    size = 2 * n
    adjacency: list[list[int]] = [[] for _ in range(size)]
    value = [0] * size
    has_parent = [False] * size
    sets = DisjointSet()
    next_node = n + 1
    for u, v, w in sorted(edges, key=lambda edge: edge[2]):
        _check_vertex(u, n)
        _check_vertex(v, n)
        a, b = sets.find(u), sets.find(v)
        if a == b:
            continue
        node = next_node
        next_node += 1
        value[node] = w
        for child in (a, b):
            adjacency[node].append(child)  # type: ignore[arg-type]
            adjacency[child].append(node)  # type: ignore[index]
            has_parent[child] = True  # type: ignore[index]
            sets.union(child, node)
    pairs = list(queries)
    for x, y in pairs:
        _check_vertex(x, n)
        _check_vertex(y, n)
    roots = [v for v in range(1, next_node) if not has_parent[v]]
    answers = _offline_lca(adjacency, roots, pairs)
    return [
        None if meet is None else (0 if x == y else value[meet])
        for meet, (x, y) in zip(answers, pairs)
    ]