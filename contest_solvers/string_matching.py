"""Prefix-function matching, Aho-Corasick counting and rewrite search."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator, Sequence

_MAX_REWRITE_STEPS = 10


def prefix_function(pattern: str) -> list[int]:
    """Return, for every prefix of ``pattern``, the length of its longest proper border."""
    borders = [0] * len(pattern)
    j = 0
    for i, ch in enumerate(pattern[1:], start=1):
        while j and pattern[j] != ch:
            j = borders[j - 1]
        if pattern[j] == ch:
            j += 1
        borders[i] = j
    return borders


def find_occurrences(text: str, pattern: str) -> list[int]:
    """Return the 0-based start of every (possibly overlapping) occurrence of ``pattern``."""
    if not pattern:
        raise ValueError("pattern must not be empty")
    borders = prefix_function(pattern)
    found = []
    j = 0
    for i, ch in enumerate(text):
        while j and pattern[j] != ch:
            j = borders[j - 1]
        if pattern[j] == ch:
            j += 1
            if j == len(pattern):
                found.append(i - len(pattern) + 1)
                j = borders[j - 1]
    return found


class AhoCorasick:
    """Automaton counting how many of a set of patterns occur in a text."""

    def __init__(self, patterns: Iterable[str]) -> None:
        self._children: list[dict[str, int]] = [{}]
        self._fail: list[int] = [0]
        self._words: list[int] = [0]
        for pattern in patterns:
            self._insert(pattern)
        self._link()

    def _insert(self, pattern: str) -> None:
        if not pattern:
            return
        node = 0
        for ch in pattern:
            nxt = self._children[node].get(ch)
            if nxt is None:
                nxt = len(self._children)
                self._children.append({})
                self._fail.append(0)
                self._words.append(0)
                self._children[node][ch] = nxt
            node = nxt
        self._words[node] += 1

    def _link(self) -> None:
        queue = deque(self._children[0].values())
        while queue:
            node = queue.popleft()
            for ch, child in self._children[node].items():
                self._fail[child] = self._step(self._fail[node], ch) if node else 0
                queue.append(child)

    def _step(self, node: int, ch: str) -> int:
        while node and ch not in self._children[node]:
            node = self._fail[node]
        return self._children[node].get(ch, 0)

    def count_matches(self, text: str) -> int:
        """Count the patterns (duplicates included) that occur at least once in ``text``."""
        seen: set[int] = set()
        total = 0
        node = 0
        for ch in text:
            node = self._step(node, ch)
            k = node
            while k and k not in seen:
                seen.add(k)
                total += self._words[k]
                k = self._fail[k]
        return total


def count_pattern_hits(patterns: Iterable[str], text: str) -> int:
    """Count how many of ``patterns`` appear in ``text``."""
    return AhoCorasick(patterns).count_matches(text)


def _positions(text: str, pattern: str) -> Iterator[int]:
    pos = text.find(pattern)
    while pos != -1:
        yield pos
        pos = text.find(pattern, pos + 1)


def shortest_rewrite(
    start: str, target: str, rules: Sequence[tuple[str, str]]
) -> int | None:
    """Return the fewest single substring replacements turning ``start`` into ``target``.

    Each rule (pattern, replacement) may rewrite any one occurrence of its
    pattern. Returns None when no answer is found within the step limit.
    """
    seen: set[str] = set()
    queue: deque[tuple[str, int]] = deque([(start, 0)])
    while queue:
        current, step = queue.popleft()
        if step > _MAX_REWRITE_STEPS:
            return None
        step += 1
        for pattern, replacement in rules:
            for pos in _positions(current, pattern):
                rewritten = current[:pos] + replacement + current[pos + len(pattern):]
                if rewritten in seen:
                    continue
                if rewritten == target:
                    return step
                seen.add(rewritten)
                queue.append((rewritten, step))
    return None