"""Segment tree with lazy range additions and range sums."""

from __future__ import annotations

from collections.abc import Sequence


class LazySegmentTree:
    """Range additions and range sums over 1-based inclusive positions."""

    def __init__(self, values: Sequence[int]) -> None:
        self.size = len(values)
        slots = 4 * max(self.size, 1)
        self._sums = [0] * slots
        self._pending = [0] * slots
        if self.size:
            self._build(1, 1, self.size, values)

    def _build(self, node: int, lo: int, hi: int, values: Sequence[int]) -> None:
        if lo == hi:
            self._sums[node] = values[lo - 1]
            return
        mid = (lo + hi) // 2
        self._build(2 * node, lo, mid, values)
        self._build(2 * node + 1, mid + 1, hi, values)
        self._sums[node] = self._sums[2 * node] + self._sums[2 * node + 1]

    def _push(self, node: int, lo: int, hi: int) -> None:
        delta = self._pending[node]
        if not delta:
            return
        mid = (lo + hi) // 2
        left, right = 2 * node, 2 * node + 1
        self._sums[left] += (mid - lo + 1) * delta
        self._pending[left] += delta
        self._sums[right] += (hi - mid) * delta
        self._pending[right] += delta
        self._pending[node] = 0

    def _check(self, left: int, right: int) -> None:
        if not 1 <= left <= right <= self.size:
            raise IndexError(f"range {left}..{right} outside 1..{self.size}")

    def add(self, left: int, right: int, delta: int) -> None:
        """Add ``delta`` to every position in left..right inclusive."""
        self._check(left, right)
        self._add(left, right, delta, 1, 1, self.size)

    def _add(self, left: int, right: int, delta: int, node: int, lo: int, hi: int) -> None:
        if left == lo and right == hi:
            self._sums[node] += (hi - lo + 1) * delta
            self._pending[node] += delta
            return
        self._push(node, lo, hi)
        mid = (lo + hi) // 2
        if right <= mid:
            self._add(left, right, delta, 2 * node, lo, mid)
        elif left > mid:
            self._add(left, right, delta, 2 * node + 1, mid + 1, hi)
        else:
            self._add(left, mid, delta, 2 * node, lo, mid)
            self._add(mid + 1, right, delta, 2 * node + 1, mid + 1, hi)
        self._sums[node] = self._sums[2 * node] + self._sums[2 * node + 1]

    def sum(self, left: int, right: int) -> int:
        """Return the sum of positions left..right inclusive."""
        self._check(left, right)
        return self._query(left, right, 1, 1, self.size)

    def _query(self, left: int, right: int, node: int, lo: int, hi: int) -> int:
        if left == lo and right == hi:
            return self._sums[node]
        self._push(node, lo, hi)
        mid = (lo + hi) // 2
        if right <= mid:
            return self._query(left, right, 2 * node, lo, mid)
        if left > mid:
            return self._query(left, right, 2 * node + 1, mid + 1, hi)
        return self._query(left, mid, 2 * node, lo, mid) + self._query(
            mid + 1, right, 2 * node + 1, mid + 1, hi
        )