"""Strongly connected components, condensation paths and cut vertices."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def _check_vertex(v: int, n: int) -> None:
    if not 1 <= v <= n:
        raise ValueError(f"vertex {v} outside 1..{n}")


def strongly_connected_components(n: int, edges: Iterable[tuple[int, int]]) -> list[list[int]]:
    """Return the strongly connected components of a directed graph on 1..n.

    Components come out in reverse topological order: every edge leads from a
    component to itself or to one listed earlier.
    """
    adjacency: list[list[int]] = [[] for _ in range(n + 1)]
    for u, v in edges:
        _check_vertex(u, n)
        _check_vertex(v, n)
        adjacency[u].append(v)
    index = [0] * (n + 1)
    low = [0] * (n + 1)
    on_stack = [False] * (n + 1)
    stack: list[int] = []
    components: list[list[int]] = []
    counter = 0
    for root in range(1, n + 1):
        if index[root]:
            continue
        counter += 1
        index[root] = low[root] = counter
        stack.append(root)
        on_stack[root] = True
        work = [(root, iter(adjacency[root]))]
        while work:
            u, neighbours = work[-1]
            for v in neighbours:
                if not index[v]:
                    counter += 1
                    index[v] = low[v] = counter
                    stack.append(v)
                    on_stack[v] = True
                    work.append((v, iter(adjacency[v])))
                    break
                if on_stack[v]:
                    low[u] = min(low[u], index[v])
            else:
                work.pop()
                if work:
                    parent = work[-1][0]
                    low[parent] = min(low[parent], low[u])
                if low[u] == index[u]:
                    component = []
                    while True:
                        v = stack.pop()
                        on_stack[v] = False
                        component.append(v)
                        if v == u:
                            break
                    components.append(component)
    return components


def max_condensed_path_weight(weights: Sequence[int], edges: Iterable[tuple[int, int]]) -> int:
    """Return the heaviest walk's total, counting each vertex's weight once."""
    n = len(weights)
    edge_list = list(edges)
    components = strongly_connected_components(n, edge_list)
    owner = [0] * (n + 1)
    for number, component in enumerate(components):
        for v in component:
            owner[v] = number
    successors: list[set[int]] = [set() for _ in components]
    for u, v in edge_list:
        if owner[u] != owner[v]:
            successors[owner[u]].add(owner[v])
    best: list[int] = []
    for number, component in enumerate(components):
        own = sum(weights[v - 1] for v in component)
        best.append(own + max((best[d] for d in successors[number]), default=0))
    return max(best, default=0)


def articulation_points(n: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """Return the cut vertices of an undirected graph on 1..n, in ascending order."""
    adjacency: list[list[int]] = [[] for _ in range(n + 1)]
    for u, v in edges:
        _check_vertex(u, n)
        _check_vertex(v, n)
        if u != v:
            adjacency[u].append(v)
            adjacency[v].append(u)
    disc = [0] * (n + 1)
    low = [0] * (n + 1)
    is_cut = [False] * (n + 1)
    timer = 0
    for root in range(1, n + 1):
        if disc[root]:
            continue
        timer += 1
        disc[root] = low[root] = timer
        children = 0
        work = [(root, 0, iter(adjacency[root]))]
        while work:
            u, parent, neighbours = work[-1]
            for v in neighbours:
                if v == parent:
                    continue
                if not disc[v]:
                    timer += 1
                    disc[v] = low[v] = timer
                    work.append((v, u, iter(adjacency[v])))
                    break
                low[u] = min(low[u], disc[v])
            else:
                work.pop()
                if work:
                    p = work[-1][0]
                    low[p] = min(low[p], low[u])
                    if p == root:
                        children += 1
                    elif low[u] >= disc[p]:
                        is_cut[p] = True
        if children > 1:
            is_cut[root] = True
    return [v for v in range(1, n + 1) if is_cut[v]]