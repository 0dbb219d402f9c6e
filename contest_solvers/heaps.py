"""Greedy solutions driven by priority queues."""

from __future__ import annotations

import heapq
from collections import deque
from collections.abc import Iterable, Sequence


def merge_cost(weights: Iterable[int]) -> int:
    """Return the least total cost of merging piles, each merge costing the sum."""
    heap = list(weights)
    heapq.heapify(heap)
    total = 0
    while len(heap) > 1:
        merged = heapq.heappop(heap) + heapq.heappop(heap)
        total += merged
        heapq.heappush(heap, merged)
    return total


def running_medians(values: Iterable[int]) -> list[int]:
    """Return the medians of the first 1, 3, 5, ... values."""
    lower: list[int] = []
    upper: list[int] = []
    medians = []
    for count, value in enumerate(values, start=1):
        if not lower or value <= -lower[0]:
            heapq.heappush(lower, -value)
        else:
            heapq.heappush(upper, value)
        if len(lower) > len(upper) + 1:
            heapq.heappush(upper, -heapq.heappop(lower))
        elif len(lower) < len(upper):
            heapq.heappush(lower, -heapq.heappop(upper))
        if count % 2:
            medians.append(-lower[0])
    return medians


def count_dictionary_lookups(capacity: int, words: Iterable[int]) -> int:
    """Count lookups with a first-in first-out memory of ``capacity`` words."""
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    memory: deque[int] = deque()
    stored: set[int] = set()
    lookups = 0
    for word in words:
        if word in stored:
            continue
        lookups += 1
        if capacity == 0:
            continue
        if len(memory) >= capacity:
            stored.discard(memory.popleft())
        memory.append(word)
        stored.add(word)
    return lookups


def min_toy_fetches(capacity: int, requests: Sequence[int]) -> int:
    """Return the fewest fetches to serve ``requests`` with room for ``capacity`` toys."""
    if capacity < 1:
        raise ValueError("capacity must be at least 1")
    never = float("inf")
    next_use: list[float] = [never] * len(requests)
    seen: dict[int, int] = {}
    for i in range(len(requests) - 1, -1, -1):
        toy = requests[i]
        next_use[i] = seen.get(toy, never)
        seen[toy] = i
    heap: list[tuple[float, int, int]] = []
    on_floor: set[int] = set()
    slots = capacity
    fetches = 0
    for i, toy in enumerate(requests):
        if toy in on_floor:
            slots += 1
        else:
            if len(heap) == slots:
                _, _, evicted = heapq.heappop(heap)
                on_floor.discard(evicted)
            on_floor.add(toy)
            fetches += 1
        heapq.heappush(heap, (-next_use[i], i, toy))
    return fetches


def plan_change(
    coins: int, prices: Sequence[int], dissatisfaction: Sequence[int]
) -> tuple[int, list[tuple[int, int]]]:
    """Plan daily payments with notes of 100 and coins to minimise dissatisfaction.

    Returns the total dissatisfaction and, for each day, the number of notes
    and coins handed over.
    """
    if len(prices) != len(dissatisfaction):
        raise ValueError("prices and dissatisfaction must have the same length")
    notes = [price // 100 for price in prices]
    change = [price % 100 for price in prices]
    heap: list[tuple[int, int]] = []
    total = 0
    for day, (rest, weight) in enumerate(zip(change, dissatisfaction)):
        if rest:
            heapq.heappush(heap, (weight * (100 - rest), day))
        coins -= rest
        if coins < 0:
            cost, chosen = heapq.heappop(heap)
            notes[chosen] += 1
            change[chosen] = 0
            coins += 100
            total += cost
    return total, list(zip(notes, change))