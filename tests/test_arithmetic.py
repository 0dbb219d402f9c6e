import math

import pytest

from contest_solvers.arithmetic import (
    concatenation_mod9,
    convert_base,
    count_addable_animals,
    count_beautiful_permutations,
    factorial_sum,
    format_negative_base,
    is_reachable,
    operations_answer,
    shadow_length,
    teleport_answers,
    to_negative_base,
)


@pytest.mark.parametrize("n", range(2, 25))
def test_factorial_sum_grows_by_factorial(n):
    assert factorial_sum(n) - factorial_sum(n - 1) == math.factorial(n)


def test_factorial_sum_small_and_large():
    assert factorial_sum(0) == factorial_sum(1)
    assert factorial_sum(50) > 2**64


@pytest.mark.parametrize("base", [-2, -3, -10, -16, -20])
@pytest.mark.parametrize("n", [-15, -1, 1, 7, 30000, -30000, 123456])
def test_negative_base_round_trip(n, base):
    digits = to_negative_base(n, base)
    assert all(0 <= d < -base for d in digits)
    assert digits[0] != 0
    assert sum(d * base**i for i, d in enumerate(reversed(digits))) == n


def test_negative_base_zero():
    assert to_negative_base(0, -2) == [0]


@pytest.mark.parametrize("base", [-1, 0, 2])
def test_negative_base_rejects_bad_base(base):
    with pytest.raises(ValueError):
        to_negative_base(5, base)


@pytest.mark.parametrize("n,base", [(-15, -2), (12345, -16), (-20000, -7)])
def test_format_negative_base_layout(n, base):
    text = format_negative_base(n, base)
    prefix, suffix = f"{n}=", f"(base{base})"
    assert text.startswith(prefix)
    assert text.endswith(suffix)
    middle = text[len(prefix) : -len(suffix)]
    assert [int(ch, 36) for ch in middle] == to_negative_base(n, base)


def test_format_negative_base_example():
    assert format_negative_base(-15, -2) == "-15=110001(base-2)"


@pytest.mark.parametrize("number", ["0", "1", "255", "99999", "123456789"])
@pytest.mark.parametrize("base", [2, 7, 16])
def test_convert_base_round_trip(number, base):
    converted = convert_base(number, 10, base)
    assert int(converted, base) == int(number)
    assert convert_base(converted, base, 10) == number


def test_convert_base_accepts_lower_case():
    assert convert_base("ff", 16, 16) == convert_base("FF", 16, 16)


def test_convert_base_rejects_invalid():
    with pytest.raises(ValueError):
        convert_base("12", 1, 10)
    with pytest.raises(ValueError):
        convert_base("9", 8, 10)


@pytest.mark.parametrize("low,high", [(1, 1), (1, 9), (5, 17), (8, 8), (10, 123), (99, 210)])
def test_concatenation_mod9(low, high):
    joined = int("".join(str(i) for i in range(low, high + 1)))
    assert concatenation_mod9(low, high) == joined % 9


@pytest.mark.parametrize("n", [1, 3, 5, 99])
def test_beautiful_permutations_odd(n):
    assert count_beautiful_permutations(n) == 0


@pytest.mark.parametrize("n", range(2, 40, 2))
def test_beautiful_permutations_recurrence(n):
    half = (n + 2) // 2
    assert count_beautiful_permutations(n + 2) == (
        count_beautiful_permutations(n) * half * half % 998244353
    )


@pytest.mark.parametrize("a,b", [(6, 9), (15, 38), (7, 1), (100, 3)])
def test_is_reachable_symmetric_and_endpoints(a, b):
    assert is_reachable(a, b, a)
    assert is_reachable(a, b, b)
    assert is_reachable(a, b, abs(a - b))
    assert not is_reachable(a, b, max(a, b) + 1)
    for x in range(1, max(a, b) + 1):
        assert is_reachable(a, b, x) == is_reachable(b, a, x)


def test_operations_branches():
    assert operations_answer(0, 0, 4, 9) == 0
    assert operations_answer(0, 5, 2, 9) == 9
    assert operations_answer(3, 3, 1, 9) == 1
    assert operations_answer(4, 6, 1, 2) == (4 + 6) // 2 + 2
    assert operations_answer(4, 6, 3, 2) == 3 + 2


def test_teleport_below_maximum():
    assert teleport_answers([3, 8, 5], [7, 0]) == [-1, -1]


@pytest.mark.parametrize("limit", [8, 20, 30, 50, 100])
def test_teleport_answer_is_largest_valid(limit):
    values = [3, 8, 5]
    (answer,) = teleport_answers(values, [limit])
    assert answer >= max(values) - 1
    if answer >= max(values):
        assert sum(v ^ answer for v in values) <= limit
    for k in range(answer + 1, limit + 1):
        assert sum(v ^ k for v in values) > limit


def test_shadow_when_person_reaches_wall():
    assert shadow_length(2.0, 1.0, 0.1) == 1.0


def test_shadow_on_floor():
    assert shadow_length(2.0, 1.0, 10.0) == pytest.approx(5.0)


def test_shadow_middle_branch_bounds():
    result = shadow_length(10.0, 6.0, 5.0)
    assert 6.0 <= result <= 5.0 + 10.0


def test_count_addable_animals():
    k = 6
    assert count_addable_animals([], [], k) == 2**k
    assert count_addable_animals([], [1, 3], k) == 2 ** (k - 2)
    assert count_addable_animals([0b1000], [1, 3], k) == 2 ** (k - 1)