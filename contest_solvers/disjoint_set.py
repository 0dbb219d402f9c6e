"""Union-find and the puzzles solved with it."""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Sequence


class DisjointSet:
    """Union-find over arbitrary hashable items, created on first use."""

    def __init__(self) -> None:
        self._parent: dict[Hashable, Hashable] = {}

    def find(self, item: Hashable) -> Hashable:
        """Return the representative of the set holding ``item``."""
        parent = self._parent
        root = parent.setdefault(item, item)
        while parent[root] != root:
            root = parent[root]
        while item != root:
            parent[item], item = root, parent[item]
        return root

    def union(self, a: Hashable, b: Hashable) -> None:
        """Merge the sets holding ``a`` and ``b``."""
        self._parent[self.find(a)] = self.find(b)

    def connected(self, a: Hashable, b: Hashable) -> bool:
        """Tell whether ``a`` and ``b`` are in the same set."""
        return self.find(a) == self.find(b)


def min_prison_conflict(n: int, pairs: Iterable[tuple[int, int, int]]) -> int:
    """Split 1..n into two prisons minimising the largest conflict kept together.

    ``pairs`` holds (a, b, anger); the result is the anger of the worst pair
    that cannot be separated, or 0.
    """
    sets = DisjointSet()
    for a, b, anger in sorted(pairs, key=lambda pair: -pair[2]):
        if sets.connected(a, b):
            return anger
        sets.union(a, b + n)
        sets.union(b, a + n)
    return 0


def count_false_statements(n: int, statements: Iterable[tuple[int, int, int]]) -> int:
    """Count false statements in the three-species food chain puzzle.

    Each statement is (kind, x, y): kind 1 says x and y are the same species,
    kind 2 says x eats y.
    """
    sets = DisjointSet()
    twice = 2 * n
    false_count = 0
    for kind, x, y in statements:
        if kind not in (1, 2):
            raise ValueError(f"unknown statement kind {kind}")
        if x > n or y > n:
            false_count += 1
            continue
        if kind == 1:
            if sets.connected(x, y + n) or sets.connected(x, y + twice):
                false_count += 1
                continue
            sets.union(x, y)
            sets.union(x + n, y + n)
            sets.union(x + twice, y + twice)
        else:
            if sets.connected(x, y) or sets.connected(x, y + twice):
                false_count += 1
                continue
            sets.union(x, y + n)
            sets.union(x + n, y + twice)
            sets.union(x + twice, y)
    return false_count


def constraints_satisfiable(constraints: Iterable[tuple[int, int, int]]) -> bool:
    """Check equality (e true) and inequality (e false) constraints (i, j, e)."""
    sets = DisjointSet()
    unequal = []
    for i, j, equal in constraints:
        if equal:
            sets.union(i, j)
        else:
            unequal.append((i, j))
    return not any(sets.connected(i, j) for i, j in unequal)


def cheese_passable(
    height: int, radius: int, holes: Sequence[tuple[int, int, int]]
) -> bool:
    """Tell whether spherical holes of ``radius`` join the bottom to the top."""
    sets = DisjointSet()
    reach = 4 * radius * radius
    for index, (_, _, z) in enumerate(holes):
        if z <= radius:
            sets.union(index, "bottom")
        if z + radius >= height:
            sets.union(index, "top")
    for i, (xi, yi, zi) in enumerate(holes):
        for j in range(i + 1, len(holes)):
            xj, yj, zj = holes[j]
            if (xi - xj) ** 2 + (yi - yj) ** 2 + (zi - zj) ** 2 <= reach:
                sets.union(i, j)
                if sets.connected("bottom", "top"):
                    return True
    return sets.connected("bottom", "top")