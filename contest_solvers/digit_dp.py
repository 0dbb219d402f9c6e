"""Counting numbers divisible by each of their non-zero digits."""

from __future__ import annotations

from functools import lru_cache
from math import lcm

_MOD = 2520


@lru_cache(maxsize=None)
def _free(remaining: int, mod: int, lc: int) -> int:
    """Count digit completions of length ``remaining`` with no upper bound."""
    if remaining == 0:
        return 1 if mod % lc == 0 else 0
    return sum(
        _free(remaining - 1, (mod * 10 + d) % _MOD, lcm(lc, d) if d else lc)
        for d in range(10)
    )


def count_beautiful(n: int) -> int:
    """Count integers in [0, n] divisible by every one of their non-zero digits."""
    if n < 0:
        return 0
    digits = [int(ch) for ch in str(n)]
    total = 0
    mod, lc = 0, 1
    for position, top in enumerate(digits):
        remaining = len(digits) - position - 1
        for d in range(top):
            total += _free(remaining, (mod * 10 + d) % _MOD, lcm(lc, d) if d else lc)
        mod = (mod * 10 + top) % _MOD
        if top:
            lc = lcm(lc, top)
    if mod % lc == 0:
        total += 1
    return total


def count_beautiful_between(low: int, high: int) -> int:
    """Count beautiful integers in the closed interval [low, high]."""
    return count_beautiful(high) - count_beautiful(low - 1)