"""Binary indexed trees with 1-based positions."""

from __future__ import annotations

from collections.abc import Sequence


class FenwickTree:
    """Point updates and prefix sums over positions 1..size."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self.size = size
        self._tree = [0] * (size + 1)

    def add(self, index: int, delta: int) -> None:
        """Add ``delta`` to the value at ``index``."""
        if not 1 <= index <= self.size:
            raise IndexError(f"index {index} outside 1..{self.size}")
        while index <= self.size:
            self._tree[index] += delta
            index += index & -index

    def prefix_sum(self, index: int) -> int:
        """Return the sum of positions 1..index."""
        if not 0 <= index <= self.size:
            raise IndexError(f"index {index} outside 0..{self.size}")
        total = 0
        while index:
            total += self._tree[index]
            index -= index & -index
        return total

    def range_sum(self, left: int, right: int) -> int:
        """Return the sum of positions left..right inclusive."""
        if left < 1:
            raise IndexError(f"left index {left} below 1")
        return self.prefix_sum(right) - self.prefix_sum(left - 1)


class RangeAddFenwick:
    """Range additions and point reads over positions 1..len(values)."""

    def __init__(self, values: Sequence[int]) -> None:
        self.size = len(values)
        self._diff = FenwickTree(self.size)
        previous = 0
        for index, value in enumerate(values, start=1):
            self._diff.add(index, value - previous)
            previous = value

    def add_range(self, left: int, right: int, delta: int) -> None:
        """Add ``delta`` to every position in left..right inclusive."""
        if not 1 <= left <= right <= self.size:
            raise IndexError(f"range {left}..{right} outside 1..{self.size}")
        self._diff.add(left, delta)
        if right < self.size:
            self._diff.add(right + 1, -delta)

    def value_at(self, index: int) -> int:
        """Return the current value at ``index``."""
        if not 1 <= index <= self.size:
            raise IndexError(f"index {index} outside 1..{self.size}")
        return self._diff.prefix_sum(index)