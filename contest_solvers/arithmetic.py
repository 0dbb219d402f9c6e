"""Arithmetic and number-theory puzzle solutions."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence

_DIGITS = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"
_PERMUTATION_MOD = 998244353


def factorial_sum(n: int) -> int:
    """Return 1! + 2! + ... + n!; values of n below 2 give 1."""
    total = term = 1
    for i in range(2, n + 1):
        term *= i
        total += term
    return total


def to_negative_base(n: int, base: int) -> list[int]:
    """Return the digits of ``n`` in a negative base, most significant first."""
    if base > -2:
        raise ValueError(f"base must be -2 or lower, got {base}")
    if n == 0:
        return [0]
    digits = []
    while n:
        n, rem = divmod(n, base)
        if rem < 0:
            rem -= base
            n += 1
        digits.append(rem)
    digits.reverse()
    return digits


def format_negative_base(n: int, base: int) -> str:
    """Render ``n`` as ``<n>=<digits>(base<base>)`` using letters for digits above 9."""
    digits = "".join(_DIGITS[d] for d in to_negative_base(n, base))
    return f"{n}={digits}(base{base})"


def convert_base(digits: str, from_base: int, to_base: int) -> str:
    """Convert a non-negative number written in ``from_base`` to ``to_base``."""
    for base in (from_base, to_base):
        if not 2 <= base <= len(_DIGITS):
            raise ValueError(f"unsupported base {base}")
    value = int(digits, from_base)
    if value < 0:
        raise ValueError("negative numbers are not supported")
    if value == 0:
        return "0"
    out = []
    while value:
        value, rem = divmod(value, to_base)
        out.append(_DIGITS[rem])
    return "".join(reversed(out))


def concatenation_mod9(low: int, high: int) -> int:
    """Return the number formed by writing low..high one after another, modulo 9."""
    return (low + high) % 9 * (high - low + 1) % 9 * 5 % 9


def count_beautiful_permutations(n: int) -> int:
    """Return ((n/2)!)^2 modulo 998244353 for even n, 0 for odd n."""
    if n % 2:
        return 0
    half = 1
    for i in range(2, n // 2 + 1):
        half = half * i % _PERMUTATION_MOD
    return half * half % _PERMUTATION_MOD


def is_reachable(a: int, b: int, x: int) -> bool:
    """Tell whether ``x`` appears while repeatedly replacing a pair by (|a-b|, b) steps."""
    if a < b:
        a, b = b, a
    while True:
        if x > a or b == 0:
            return False
        if (a - x) % b == 0:
            return True
        a, b = b, a % b


def operations_answer(a: int, b: int, c: int, d: int) -> int:
    """Answer the four-parameter operations puzzle."""
    if a == 0:
        return d if b else 0
    if a == b and c == 1:
        return c
    if c == 1:
        return (a + b) // 2 + d
    return c + d


def teleport_answers(values: Sequence[int], queries: Iterable[int]) -> list[int]:
    """For each limit m, find the largest k <= m with k >= max(values) and sum(v ^ k) <= m.

    A limit below the largest value gives -1; when no k qualifies the answer is
    one less than the largest value.
    """
    top = max(values, default=0)
    answers = []
    for limit in queries:
        if limit < top:
            answers.append(-1)
            continue
        answers.append(
            next(
                (k for k in range(limit, top - 1, -1) if sum(v ^ k for v in values) <= limit),
                top - 1,
            )
        )
    return answers


def shadow_length(lamp_height: float, person_height: float, distance: float) -> float:
    """Return the longest shadow a person can cast between a lamp and a wall."""
    big, small = lamp_height, person_height
    t1 = math.sqrt(distance * (big - small))
    t2 = distance * (big - small) / big
    if t1 <= t2:
        return distance - (big - small) * distance / big
    if t1 <= distance:
        return distance + big - 2.0 * t1
    return small


def count_addable_animals(animals: Iterable[int], required_bits: Iterable[int], k: int) -> int:
    """Count k-bit codes whose every set bit is owned already or needs no feed."""
    owned = 0
    for animal in animals:
        owned |= animal
    required = 0
    for bit in required_bits:
        required |= 1 << bit
    free = sum(1 for i in range(k) if owned >> i & 1 or not required >> i & 1)
    return 1 << free