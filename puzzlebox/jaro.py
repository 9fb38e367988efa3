"""Jaro similarity of two words."""

from __future__ import annotations


def distance(word1: str, word2: str) -> float:
    """Return the case-insensitive Jaro similarity of two words, in [0, 1]."""
    word1, word2 = word1.lower(), word2.lower()
    if not word1 and not word2:
        return 1.0
    if not word1 or not word2:
        return 0.0
    if word1 == word2:
        return 1.0

    len1, len2 = len(word1), len(word2)
    window = max(len1, len2) // 2
    if window > 0:
        window -= 1

    matched1 = [False] * len1
    matched2 = [False] * len2
    matches = 0
    for i, ch in enumerate(word1):
        start, end = i - window, i + window + 1
        if start >= len2:
            break
        for j in range(max(start, 0), min(end, len2)):
            if not matched2[j] and word2[j] == ch:
                matched1[i] = matched2[j] = True
                matches += 1
                break

    if matches == 0:
        return 0.0

    order1 = [ch for ch, hit in zip(word1, matched1) if hit]
    order2 = [ch for ch, hit in zip(word2, matched2) if hit]
    transpositions = sum(a != b for a, b in zip(order1, order2))

    numerator = (
        (len1 + len2) * matches * matches
        + len1 * len2 * (matches - transpositions // 2)
    )
    return numerator / (3 * len1 * len2 * matches)