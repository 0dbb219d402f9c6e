"""Breadth-first and shortest-path searches on grids and floors."""

from __future__ import annotations

import heapq
import math
from collections import deque
from collections.abc import Mapping, Sequence

_MOVES = ((1, 0), (0, 1), (-1, 0), (0, -1))


def count_reachable_cells(
    grid: Sequence[str], start: tuple[int, int], max_left: int, max_right: int
) -> int:
    """Count free ('.') cells reachable with at most ``max_left`` left and ``max_right`` right moves.

    ``start`` is a 0-based (row, column) pair; up and down moves are free.
    """
    rows = len(grid)
    r0, c0 = start
    if not (0 <= r0 < rows and 0 <= c0 < len(grid[r0])):
        raise ValueError(f"start {start} outside the grid")
    lefts: dict[tuple[int, int], int] = {start: 0}
    queue: deque[tuple[int, int]] = deque([start])
    while queue:
        r, c = queue.popleft()
        here = lefts[(r, c)]
        for dr, dc in ((0, -1), (0, 1), (-1, 0), (1, 0)):
            nr, nc = r + dr, c + dc
            if not (0 <= nr < rows and 0 <= nc < len(grid[nr])) or grid[nr][nc] != ".":
                continue
            cost = here + (1 if dc == -1 else 0)
            if cost < lefts.get((nr, nc), math.inf):
                lefts[(nr, nc)] = cost
                if dc == -1:
                    queue.append((nr, nc))
                else:
                    queue.appendleft((nr, nc))
    return sum(
        1
        for (_, c), left in lefts.items()
        if left <= max_left and left + c - c0 <= max_right
    )


def elevator_presses(jumps: Sequence[int], start: int, goal: int) -> int:
    """Return the fewest presses from floor ``start`` to ``goal``, or -1.

    On floor i (1-based) the lift moves up or down by ``jumps[i-1]`` floors.
    """
    n = len(jumps)
    for floor in (start, goal):
        if not 1 <= floor <= n:
            raise ValueError(f"floor {floor} outside 1..{n}")
    if start == goal:
        return 0
    seen = {start}
    queue: deque[tuple[int, int]] = deque([(start, 0)])
    while queue:
        floor, presses = queue.popleft()
        presses += 1
        for nxt in (floor - jumps[floor - 1], floor + jumps[floor - 1]):
            if 1 <= nxt <= n and nxt not in seen:
                if nxt == goal:
                    return presses
                seen.add(nxt)
                queue.append((nxt, presses))
    return -1


def corn_maze_time(grid: Sequence[str]) -> int | None:
    """Return the time from '@' to '=' in a maze with letter teleporters, or None.

    '#' marks walls; stepping onto a letter moves you to the other cell with
    the same letter before the next step.
    """
    start = exit_ = None
    portals: dict[str, list[tuple[int, int]]] = {}
    for r, row in enumerate(grid):
        for c, ch in enumerate(row):
            if ch == "@":
                start = (r, c)
            elif ch == "=":
                exit_ = (r, c)
            elif "A" <= ch <= "Z":
                ends = portals.setdefault(ch, [])
                if len(ends) < 2:
                    ends.append((r, c))
                else:
                    ends[1] = (r, c)
    if start is None or exit_ is None:
        raise ValueError("the maze needs both a start '@' and an exit '='")

    def passable(r: int, c: int) -> bool:
        return 0 <= r < len(grid) and 0 <= c < len(grid[r]) and grid[r][c] != "#"

    best: dict[tuple[int, int], int] = {start: 0}
    queue: deque[tuple[tuple[int, int], int]] = deque([(start, 0)])
    while queue:
        cell, time = queue.popleft()
        if time > best[cell]:
            continue
        ch = grid[cell[0]][cell[1]]
        if "A" <= ch <= "Z":
            ends = portals[ch]
            if cell == ends[0]:
                if len(ends) < 2:
                    continue
                cell = ends[1]
            else:
                cell = ends[0]
        nxt_time = time + 1
        for dr, dc in _MOVES:
            nxt = (cell[0] + dr, cell[1] + dc)
            if passable(*nxt) and nxt_time < best.get(nxt, math.inf):
                best[nxt] = nxt_time
                queue.append((nxt, nxt_time))
    return best.get(exit_)


def min_board_cost(size: int, colored: Mapping[tuple[int, int], int]) -> int:
    """Return the least coins to walk from (1, 1) to (size, size) on a coloured board, or -1.

    Moving to a cell of the same colour is free, to another colour costs 1;
    an uncoloured cell may be painted for 2, but never twice in a row.
    """
    for x, y in colored:
        if not (1 <= x <= size and 1 <= y <= size):
            raise ValueError(f"cell {(x, y)} outside the board")
    if (1, 1) not in colored:
        raise ValueError("the starting cell must be coloured")
    goal = (size, size)
    best: dict[tuple[int, int, int, bool], int] = {}
    heap = [(0, 1, 1, colored[(1, 1)], False)]
    while heap:
        cost, x, y, color, painted = heapq.heappop(heap)
        state = (x, y, color, painted)
        if state in best:
            continue
        best[state] = cost
        if (x, y) == goal:
            return cost
        for dx, dy in _MOVES:
            nx, ny = x + dx, y + dy
            if not (1 <= nx <= size and 1 <= ny <= size):
                continue
            other = colored.get((nx, ny))
            if other is not None:
                step = 0 if other == color else 1
                heapq.heappush(heap, (cost + step, nx, ny, other, False))
            elif not painted:
                heapq.heappush(heap, (cost + 2, nx, ny, color, True))
    return -1


def decompress_matrix(n: int, runs: Sequence[int]) -> list[str]:
    """Expand alternating run lengths of 0s and 1s (0s first) into ``n`` rows."""
    if any(run < 0 for run in runs):
        raise ValueError("run lengths must not be negative")
    if sum(runs) != n * n:
        raise ValueError(f"run lengths must add up to {n * n}")
    flat = "".join(("0", "1")[index % 2] * run for index, run in enumerate(runs))
    return [flat[start:start + n] for start in range(0, n * n, n)]