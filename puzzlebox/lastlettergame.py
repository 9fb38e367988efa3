"""Longest chain of words where each starts with the last letter of the one before."""

from __future__ import annotations

from collections.abc import Iterable


def sequence(words: Iterable[str]) -> list[str]:
    """Return the longest chain of distinct words from ``words``.

    Each word in the chain begins with the last letter of the previous one.
    Of several longest chains the first found in dictionary order wins.
    """
    dictionary = list(words)
    if any(not word for word in dictionary):
        raise ValueError("words must not be empty")

    successors = [
        [j for j, following in enumerate(dictionary)
         if word[-1] == following[0] and word != following]
        for word in dictionary
    ]
    visited = [False] * len(dictionary)
    path: list[int] = []
    best: list[int] = []

    def extend(candidates: list[int]) -> None:
        nonlocal best
        for index in candidates:
            if visited[index]:
                continue
            visited[index] = True
            path.append(index)
            extend(successors[index])
            if len(path) > len(best):
                best = list(path)
            path.pop()
            visited[index] = False

    extend(list(range(len(dictionary))))
    return [dictionary[index] for index in best]