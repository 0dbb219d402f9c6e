"""Static range-maximum queries."""

from __future__ import annotations

from collections.abc import Sequence


class SparseTable:
    """Answers maximum queries over 1-based inclusive ranges in constant time."""

    def __init__(self, values: Sequence[int]) -> None:
        self._levels = [list(values)]
        span = 1
        while 2 * span <= len(values):
            previous = self._levels[-1]
            self._levels.append(
                [max(previous[i], previous[i + span]) for i in range(len(previous) - span)]
            )
            span *= 2

    def query(self, left: int, right: int) -> int:
        """Return the maximum of positions left..right inclusive."""
        size = len(self._levels[0])
        if not 1 <= left <= right <= size:
            raise IndexError(f"range {left}..{right} outside 1..{size}")
        level = (right - left + 1).bit_length() - 1
        row = self._levels[level]
        return max(row[left - 1], row[right - (1 << level)])