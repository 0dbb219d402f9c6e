"""Ordered multiset with rank queries and the query drivers built on it."""

from __future__ import annotations

from bisect import bisect_left, bisect_right, insort
from collections.abc import Iterable, Iterator

_NO_PREDECESSOR = -2147483647
_NO_SUCCESSOR = 2147483647


class OrderedMultiset:
    """A sorted multiset of integers supporting order-statistic queries."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._items = sorted(values)

    def insert(self, value: int) -> None:
        """Add one copy of ``value``."""
        insort(self._items, value)

    def remove(self, value: int) -> None:
        """Remove one copy of ``value``; raise KeyError if absent."""
        i = bisect_left(self._items, value)
        if i == len(self._items) or self._items[i] != value:
            raise KeyError(value)
        del self._items[i]

    def rank(self, value: int) -> int:
        """Return one more than the number of elements smaller than ``value``."""
        return bisect_left(self._items, value) + 1

    def kth(self, k: int) -> int:
        """Return the ``k``-th smallest element, counting from 1."""
        if not 1 <= k <= len(self._items):
            raise IndexError(f"rank {k} outside 1..{len(self._items)}")
        return self._items[k - 1]

    def predecessor(self, value: int) -> int:
        """Return the largest element strictly smaller than ``value``."""
        i = bisect_left(self._items, value)
        if i == 0:
            raise ValueError(f"no element below {value}")
        return self._items[i - 1]

    def successor(self, value: int) -> int:
        """Return the smallest element strictly greater than ``value``."""
        i = bisect_right(self._items, value)
        if i == len(self._items):
            raise ValueError(f"no element above {value}")
        return self._items[i]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __contains__(self, value: object) -> bool:
        i = bisect_left(self._items, value)  # type: ignore[arg-type]
        return i < len(self._items) and self._items[i] == value


def balanced_tree_queries(operations: Iterable[tuple[int, int]]) -> list[int]:
    """Run operations 1 insert, 2 delete, 3 rank, 4 k-th, 5 predecessor, 6 successor."""
    tree = OrderedMultiset()
    answers = []
    for opt, x in operations:
        match opt:
            case 1:
                tree.insert(x)
            case 2:
                tree.remove(x)
            case 3:
                answers.append(tree.rank(x))
            case 4:
                answers.append(tree.kth(x))
            case 5:
                answers.append(tree.predecessor(x))
            case 6:
                answers.append(tree.successor(x))
            case _:
                raise ValueError(f"unknown operation {opt}")
    return answers


def bst_queries(operations: Iterable[tuple[int, int]]) -> list[int]:
    """Run operations 1 rank, 2 k-th, 3 predecessor, 4 successor, 5 insert.

    A missing predecessor or successor is reported as -2147483647 or
    2147483647 respectively.
    """
    tree = OrderedMultiset()
    highest, lowest = _NO_PREDECESSOR, _NO_SUCCESSOR
    answers = []
    for opt, x in operations:
        match opt:
            case 1:
                answers.append(tree.rank(x))
            case 2:
                answers.append(tree.kth(x))
            case 3:
                answers.append(_NO_PREDECESSOR if x <= lowest else tree.predecessor(x))
            case 4:
                answers.append(_NO_SUCCESSOR if x >= highest else tree.successor(x))
            case 5:
                highest = max(highest, x)
                lowest = min(lowest, x)
                tree.insert(x)
            case _:
                raise ValueError(f"unknown operation {opt}")
    return answers