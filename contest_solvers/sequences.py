"""Puzzles about integer sequences."""

from __future__ import annotations

import math
from bisect import bisect_left, bisect_right
from collections.abc import Iterable, Sequence
from itertools import accumulate


def candy_transfer_cost(values: Iterable[int]) -> int:
    """Return the least candy moved around a circle so everyone ends with the average."""
    items = list(values)
    if not items:
        raise ValueError("at least one value is required")
    average = sum(items) // len(items)
    prefix = list(accumulate(value - average for value in items))
    median = sorted(prefix)[len(prefix) // 2]
    return sum(abs(balance - median) for balance in prefix)


def unique_in_order(values: Iterable[int]) -> list[int]:
    """Return the values with repeats dropped, keeping first occurrences."""
    return list(dict.fromkeys(values))


def max_forward_difference(values: Iterable[int]) -> int:
    """Return the largest ``later - earlier`` over all ordered pairs of positions."""
    iterator = iter(values)
    try:
        lowest = next(iterator)
    except StopIteration:
        raise ValueError("at least two values are required") from None
    best: int | None = None
    for value in iterator:
        difference = value - lowest
        if best is None or difference > best:
            best = difference
        lowest = min(lowest, value)
    if best is None:
        raise ValueError("at least two values are required")
    return best


def lcs_of_permutations(first: Sequence[int], second: Sequence[int]) -> int:
    """Return the length of the longest common subsequence of two permutations."""
    position = {value: index for index, value in enumerate(first)}
    if len(position) != len(first) or sorted(position) != sorted(second):
        raise ValueError("both sequences must be permutations of the same values")
    tails: list[int] = []
    for value in second:
        rank = position[value]
        index = bisect_left(tails, rank)
        if index == len(tails):
            tails.append(rank)
        else:
            tails[index] = rank
    return len(tails)


def splits_into_two_increasing(values: Iterable[int]) -> bool:
    """Tell whether the values split into two strictly increasing subsequences."""
    negated_tails: list[int] = []
    for value in values:
        if not negated_tails or -value >= negated_tails[-1]:
            negated_tails.append(-value)
        else:
            negated_tails[bisect_right(negated_tails, -value)] = -value
    return len(negated_tails) <= 2


def jump_counts(values: Sequence[int], queries: Iterable[tuple[int, int]]) -> list[int]:
    """Answer queries (p, k): count jumps p -> p + values[p] + k until p leaves 1..n."""
    n = len(values)
    limit = math.isqrt(n)
    tables: dict[int, list[int]] = {}

    def table(k: int) -> list[int]:
        if k not in tables:
            steps = [0] * (n + 2)
            for start in range(n, 0, -1):
                target = start + values[start - 1] + k
                steps[start] = 1 + (steps[target] if target <= n else 0)
            tables[k] = steps
        return tables[k]

    answers = []
    for p, k in queries:
        if not 1 <= p <= n:
            raise ValueError(f"position {p} outside 1..{n}")
        if k < 1:
            raise ValueError(f"k must be at least 1, got {k}")
        if k <= limit:
            answers.append(table(k)[p])
            continue
        count = 0
        while p <= n:
            p += values[p - 1] + k
            count += 1
        answers.append(count)
    return answers