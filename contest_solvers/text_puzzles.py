"""Small string puzzles."""

from __future__ import annotations

from itertools import chain

_CLOSING = {")": "(", "]": "["}
_DIGITS = "0123456789"


def complete_brackets(text: str) -> str:
    """Pair each unmatched bracket with a partner so the result is balanced.

    A closing bracket matches only the most recent unmatched opening one;
    every unmatched round bracket becomes ``()`` and square one ``[]``.
    """
    matched = [False] * len(text)
    stack: list[int] = []
    for i, ch in enumerate(text):
        if ch in "([":
            stack.append(i)
        elif ch in _CLOSING:
            if stack and text[stack[-1]] == _CLOSING[ch]:
                matched[stack.pop()] = True
                matched[i] = True
        else:
            raise ValueError(f"unexpected character {ch!r}")
    return "".join(
        ch if ok else ("()" if ch in "()" else "[]") for ch, ok in zip(text, matched)
    )


def _unfold(text: str, pos: int) -> tuple[str, int]:
    """Expand the group opening at ``pos``; return it and the index after its ``]``."""
    pos += 1
    start = pos
    while pos < len(text) and pos - start < 2 and text[pos] in _DIGITS:
        pos += 1
    if pos == start:
        raise ValueError(f"missing repeat count at position {start}")
    count = int(text[start:pos])
    parts = []
    while pos < len(text):
        ch = text[pos]
        if ch == "[":
            piece, pos = _unfold(text, pos)
            parts.append(piece)
        elif ch == "]":
            return "".join(parts) * count, pos + 1
        else:
            parts.append(ch)
            pos += 1
    raise ValueError("unclosed group")


def expand_compressed(text: str) -> str:
    """Expand groups written ``[<count><text>]`` with a one- or two-digit count."""
    out = []
    pos = 0
    while pos < len(text):
        if text[pos] == "[":
            piece, pos = _unfold(text, pos)
            out.append(piece)
        else:
            out.append(text[pos])
            pos += 1
    return "".join(out)


def count_added_males(text: str) -> int:
    """Count the males (``1``) to add so every pair of females (``0``) is well separated."""
    total = 0
    for current, following, after in zip(text, text[1:], chain(text[2:], " ")):
        if current != "0":
            continue
        if following == "0":
            total += 2
        elif after == "0":
            total += 1
    return total