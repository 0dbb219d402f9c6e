import pytest

from contest_solvers.text_puzzles import (
    complete_brackets,
    count_added_males,
    expand_compressed,
)


def _balanced(text):
    stack = []
    pairs = {")": "(", "]": "["}
    for ch in text:
        if ch in "([":
            stack.append(ch)
        elif not stack or stack.pop() != pairs[ch]:
            return False
    return not stack


@pytest.mark.parametrize("text", ["()", "[()]", "([])[]", ""])
def test_complete_brackets_keeps_balanced_text(text):
    assert complete_brackets(text) == text


def test_complete_brackets_single_brackets():
    assert complete_brackets("(") == "()"
    assert complete_brackets("]") == "[]"


def test_complete_brackets_crossed_pairs():
    assert complete_brackets("([)]") == "()[()]"


@pytest.mark.parametrize("text", ["((", "][", "([)]", "[[(])", ")]([", "(()]"])
def test_complete_brackets_output_is_balanced(text):
    result = complete_brackets(text)
    assert _balanced(result)
    assert len(result) >= len(text)


def test_complete_brackets_rejects_other_characters():
    with pytest.raises(ValueError):
        complete_brackets("(a)")


def test_expand_compressed_simple_group():
    assert expand_compressed("[2AB]") == "AB" * 2


def test_expand_compressed_with_prefix_and_suffix():
    assert expand_compressed("AC[3FUN]Z") == "AC" + "FUN" * 3 + "Z"


def test_expand_compressed_nested_and_two_digit_counts():
    assert expand_compressed("[2[3A]B]") == ("A" * 3 + "B") * 2
    assert expand_compressed("[12X]") == "X" * 12


def test_expand_compressed_plain_text_unchanged():
    assert expand_compressed("HELLO") == "HELLO"


@pytest.mark.parametrize("text", ["[AB]", "[2AB", "X[3[2Y]"])
def test_expand_compressed_rejects_malformed(text):
    with pytest.raises(ValueError):
        expand_compressed(text)


def test_count_added_males_adjacent_females():
    assert count_added_males("000") == 4


def test_count_added_males_gap_of_one():
    assert count_added_males("010") == 1


@pytest.mark.parametrize("text", ["1111", "0", "0111", "01101", ""])
def test_count_added_males_needs_none(text):
    assert count_added_males(text) == 0