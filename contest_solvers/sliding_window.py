"""Sliding-window minima and maxima with monotonic queues."""

from __future__ import annotations

import operator
from collections import deque
from collections.abc import Callable, Iterable, Sequence


def _check_width(width: int, name: str) -> None:
    if width < 1:
        raise ValueError(f"{name} must be at least 1, got {width}")


def _window_best(
    values: Sequence[int], k: int, dominated: Callable[[int, int], bool]
) -> list[int]:
    """Return the best value of every full window of ``k`` items.

    ``dominated(old, new)`` tells whether an older value can never again be
    the answer once ``new`` has arrived.
    """
    window: deque[int] = deque()
    best = []
    for i, value in enumerate(values):
        while window and dominated(values[window[-1]], value):
            window.pop()
        window.append(i)
        while window[0] <= i - k:
            window.popleft()
        if i >= k - 1:
            best.append(values[window[0]])
    return best


def preceding_minima(values: Iterable[int], m: int) -> list[int]:
    """For each item, return the minimum of the up to ``m`` items before it.

    The first item has nothing before it and gets 0.
    """
    _check_width(m, "m")
    items = list(values)
    if not items:
        return []
    result = [0]
    window: deque[int] = deque()
    for i, value in enumerate(items[:-1]):
        while window and items[window[-1]] >= value:
            window.pop()
        window.append(i)
        while window[0] <= i - m:
            window.popleft()
        result.append(items[window[0]])
    return result


def window_extremes(values: Iterable[int], k: int) -> tuple[list[int], list[int]]:
    """Return the minima and the maxima of every window of ``k`` consecutive items."""
    _check_width(k, "k")
    items = list(values)
    return (
        _window_best(items, k, operator.ge),
        _window_best(items, k, operator.le),
    )


def window_maxima(values: Iterable[int], k: int) -> list[int]:
    """Return the maximum of every window of ``k`` consecutive items."""
    _check_width(k, "k")
    return _window_best(list(values), k, operator.le)