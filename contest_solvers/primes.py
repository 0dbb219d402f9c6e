"""Prime sieves, primality testing and modular binomials."""

from __future__ import annotations

import math
from collections.abc import Iterable

_WITNESSES = (2, 325, 9375, 28178, 450775, 9780504, 1795265022)


def sieve_primes(limit: int) -> list[int]:
    """Return all primes up to ``limit`` using a linear sieve."""
    if limit < 2:
        return []
    composite = bytearray(limit + 1)
    primes: list[int] = []
    for i in range(2, limit + 1):
        if not composite[i]:
            primes.append(i)
        for p in primes:
            if i * p > limit:
                break
            composite[i * p] = 1
            if i % p == 0:
                break
    return primes


def eratosthenes_primes(limit: int) -> list[int]:
    """Return all primes up to ``limit`` using the sieve of Eratosthenes."""
    if limit < 2:
        return []
    composite = bytearray(limit + 1)
    primes = []
    for i in range(2, limit + 1):
        if not composite[i]:
            primes.append(i)
            for j in range(i * i, limit + 1, i):
                composite[j] = 1
    return primes


def count_primes_in_range(low: int, high: int) -> int:
    """Count primes in the closed interval [low, high] with a segmented sieve."""
    if low < 1:
        raise ValueError("low must be at least 1")
    if high < low:
        return 0
    marked = bytearray(high - low + 1)
    for p in sieve_primes(math.isqrt(high)):
        start = max(-(-low // p) * p, 2 * p)
        for j in range(start, high + 1, p):
            marked[j - low] = 1
    count = marked.count(0)
    if low == 1:
        count -= 1
    return count


def is_prime(n: int) -> bool:
    """Deterministic Miller-Rabin test for 64-bit integers."""
    if n == 2:
        return True
    if n <= 1 or n % 2 == 0:
        return False
    exponent = n - 1
    shifts = (exponent & -exponent).bit_length() - 1
    odd = exponent >> shifts
    for witness in _WITNESSES:
        v = pow(witness, odd, n)
        if v <= 1 or v == n - 1:
            continue
        for i in range(1, shifts + 1):
            v = v * v % n
            if v == n - 1 and i != shifts:
                v = 1
                break
            if v == 1:
                return False
        if v != 1:
            return False
    return True


def binomial_mod(n: int, m: int, p: int) -> int:
    """Return C(n, m) modulo a prime ``p`` larger than ``n``."""
    if n < m:
        return 0
    m = min(m, n - m)
    numerator = denominator = 1
    for i in range(m):
        numerator = numerator * (n - i) % p
        denominator = denominator * (i + 1) % p
    return numerator * pow(denominator, p - 2, p) % p


def lucas(n: int, m: int, p: int) -> int:
    """Return C(n, m) modulo a prime ``p`` using Lucas' theorem."""
    result = 1
    while m:
        result = result * binomial_mod(n % p, m % p, p) % p
        n //= p
        m //= p
    return result


def min_currency_system(values: Iterable[int]) -> int:
    """Return the size of the smallest coin system that makes the same amounts."""
    coins = sorted(values)
    if not coins:
        return 0
    top = coins[-1]
    reachable = bytearray(top + 1)
    reachable[0] = 1
    count = 0
    for coin in coins:
        if reachable[coin]:
            continue
        count += 1
        for amount in range(coin, top + 1):
            if reachable[amount - coin]:
                reachable[amount] = 1
    return count