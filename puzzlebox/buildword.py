"""Build a word out of the fewest fragments."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable


def _occurrences(word: str, fragment: str):
    """Yield start positions of non-overlapping occurrences, left to right."""
    position = word.find(fragment)
    while position != -1:
        yield position
        position = word.find(fragment, position + len(fragment))


def build_word(word: str, fragments: Iterable[str]) -> int:
    """Return the least number of fragments that spell ``word``, or 0."""
    edges: dict[int, list[int]] = {}
    for fragment in fragments:
        if not fragment:
            continue
        for start in _occurrences(word, fragment):
            edges.setdefault(start, []).append(start + len(fragment))

    target = len(word)
    seen = {0}
    queue = deque([(0, 0)])
    while queue:
        position, steps = queue.popleft()
        if position == target:
            return steps
        for nxt in edges.get(position, ()):
            if nxt not in seen:
                seen.add(nxt)
                queue.append((nxt, steps + 1))
    return 0