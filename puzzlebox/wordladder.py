"""Shortest word ladder between two words."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable


def _one_apart(first: str, second: str) -> bool:
    """Return whether two words of equal length differ in exactly one place."""
    if len(first) != len(second):
        return False
    return sum(a != b for a, b in zip(first, second)) == 1


def word_ladder(start: str, end: str, dictionary: Iterable[str]) -> int:
    """Return the number of words in the shortest ladder from start to end.

    Each step changes one letter and must land on a word of the dictionary
    (or on ``end``). Returns 0 when no ladder exists.
    """
    words = list(dict.fromkeys([*dictionary, start, end]))
    seen = {start}
    queue = deque([(start, 1)])
    while queue:
        word, length = queue.popleft()
        if word == end:
            return length
        for candidate in words:
            if candidate not in seen and _one_apart(word, candidate):
                seen.add(candidate)
                queue.append((candidate, length + 1))
    return 0