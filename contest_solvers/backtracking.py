"""Search puzzles solved by backtracking and path enumeration."""

from __future__ import annotations

from collections import Counter, defaultdict
from collections.abc import Iterable, Sequence


def euler_letter_path(pairs: Iterable[str]) -> str | None:
    """Return the smallest letter string in which every pair appears as neighbours.

    Each pair must occur exactly once as adjacent letters; repeated pairs count
    as one link. Returns None when no such string exists.
    """
    adjacency: dict[str, set[str]] = defaultdict(set)
    degree: Counter[str] = Counter()
    count = 0
    for pair in pairs:
        if len(pair) != 2 or not all(ch.isascii() and ch.isalpha() for ch in pair):
            raise ValueError(f"pair must be two ASCII letters, got {pair!r}")
        a, b = pair
        adjacency[a].add(b)
        adjacency[b].add(a)
        degree[a] += 1
        degree[b] += 1
        count += 1
    if not count:
        return ""
    odd = sorted(letter for letter, d in degree.items() if d % 2)
    if odd and len(odd) != 2:
        return None
    start = odd[0] if odd else min(degree)
    stack = [start]
    path: list[str] = []
    while stack:
        x = stack[-1]
        if adjacency[x]:
            y = min(adjacency[x])
            adjacency[x].discard(y)
            adjacency[y].discard(x)
            stack.append(y)
        else:
            path.append(stack.pop())
    if len(path) != count + 1:
        return None
    return "".join(reversed(path))


def _can_split(lengths: Sequence[int], target: int) -> bool:
    """Tell whether descending ``lengths`` form sticks of exactly ``target``."""
    sticks = sum(lengths) // target
    used = [False] * len(lengths)

    def fill(done: int, room: int, start: int) -> bool:
        if room == 0:
            done += 1
            if done == sticks:
                return True
            return fill(done, target, 0)
        failed = None
        for i in range(start, len(lengths)):
            piece = lengths[i]
            if used[i] or piece > room or piece == failed:
                continue
            used[i] = True
            if fill(done, room - piece, i + 1):
                return True
            used[i] = False
            failed = piece
            if room == target or piece == room:
                return False
        return False

    return fill(0, target, 0)


def min_stick_length(pieces: Iterable[int]) -> int:
    """Return the smallest original length of equal sticks cut into ``pieces``."""
    lengths = sorted(pieces, reverse=True)
    if not lengths:
        raise ValueError("at least one piece is required")
    if lengths[-1] <= 0:
        raise ValueError("pieces must have positive length")
    total = sum(lengths)
    for target in range(lengths[0], total // 2 + 1):
        if total % target == 0 and _can_split(lengths, target):
            return target
    return total


def best_mining_path(
    mines: Sequence[int], links: Iterable[tuple[int, int]]
) -> tuple[list[int], int]:
    """Return the cellar path collecting most mines and its total.

    Links (u, v) with u < v lead from cellar u to cellar v; a path ends at a
    cellar with no onward link. Ties go to the lexicographically smallest path.
    """
    n = len(mines)
    if not n:
        raise ValueError("at least one cellar is required")
    successors: list[set[int]] = [set() for _ in range(n + 1)]
    for u, v in links:
        if not 1 <= u < v <= n:
            raise ValueError(f"link ({u}, {v}) must satisfy 1 <= u < v <= {n}")
        successors[u].add(v)
    best: list[tuple[int, list[int]]] = [(0, [])] * (n + 1)
    for x in range(n, 0, -1):
        chosen = None
        for y in sorted(successors[x]):
            if chosen is None or best[y][0] > best[chosen][0]:
                chosen = y
        total, path = mines[x - 1], [x]
        if chosen is not None:
            total += best[chosen][0]
            path += best[chosen][1]
        best[x] = (total, path)
    start = min(range(1, n + 1), key=lambda v: (-best[v][0], v))
    total, path = best[start]
    return path, total