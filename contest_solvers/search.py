"""Binary and ternary search solutions."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence

_TRISECT_EPS = 1e-6
_AVERAGE_EPS = 1e-4
_AVERAGE_BOUND = 1e4
_SEGMENT_LIMIT = 10**9


def evaluate_polynomial(coefficients: Sequence[float], x: float) -> float:
    """Evaluate a polynomial given its coefficients from the highest degree down."""
    result = 0
    for coefficient in coefficients:
        result = result * x + coefficient
    return result


def trisect_maximum(coefficients: Sequence[float], low: float, high: float) -> float:
    """Locate the maximum of a unimodal polynomial on [low, high]."""
    mid = (low + high) / 2
    while high - low > _TRISECT_EPS:
        mid = (low + high) / 2
        if evaluate_polynomial(coefficients, mid - _TRISECT_EPS) <= evaluate_polynomial(
            coefficients, mid + _TRISECT_EPS
        ):
            low = mid
        else:
            high = mid
    return mid


def max_average_segment(values: Sequence[int], min_length: int, max_length: int) -> float:
    """Return the largest average of a contiguous segment whose length is within bounds."""
    if min_length < 1 or max_length < min_length:
        raise ValueError("lengths must satisfy 1 <= min_length <= max_length")
    n = len(values)

    def feasible(average: float) -> bool:
        prefix = [0.0]
        for value in values:
            prefix.append(prefix[-1] + value - average)
        window: deque[int] = deque()
        for i in range(min_length, n + 1):
            start = i - min_length
            while window and prefix[window[-1]] > prefix[start]:
                window.pop()
            window.append(start)
            if i - window[0] > max_length:
                window.popleft()
            if prefix[i] - prefix[window[0]] >= 0.0:
                return True
        return False

    low, high = -_AVERAGE_BOUND, _AVERAGE_BOUND
    while high - low > _AVERAGE_EPS:
        mid = (low + high) / 2.0
        if feasible(mid):
            low = mid
        else:
            high = mid
    return low


def min_max_segment_sum(values: Sequence[int], parts: int) -> int:
    """Split values into at most ``parts`` segments minimising the largest segment sum."""

    def fits(limit: int) -> bool:
        groups, room = 1, limit
        for value in values:
            if value > limit:
                return False
            if room < value:
                groups += 1
                room = limit
            room -= value
        return groups <= parts

    low, high = 0, _SEGMENT_LIMIT
    while low < high:
        mid = (low + high) // 2
        if fits(mid):
            high = mid
        else:
            low = mid + 1
    return low