"""Combinations, permutations and variations of index tuples."""

from __future__ import annotations

import math
from collections.abc import Iterator, Sequence
from itertools import combinations as _combinations


def combinations(n: int, k: int) -> Iterator[tuple[int, ...]]:
    """Yield every k-element combination of range(n) in lexicographic order."""
    return _combinations(range(n), k)


def _heap(work: list[int], n: int) -> Iterator[tuple[int, ...]]:
    if n == 1:
        yield tuple(work)
        return
    for i in range(n - 1):
        yield from _heap(work, n - 1)
        if n % 2 == 0:
            work[n - 1], work[i] = work[i], work[n - 1]
        else:
            work[n - 1], work[0] = work[0], work[n - 1]
    yield from _heap(work, n - 1)


def permutations(items: Sequence[int]) -> Iterator[tuple[int, ...]]:
    """Yield every permutation of ``items`` in the order of Heap's algorithm."""
    work = list(items)
    if len(work) <= 1:
        yield tuple(work)
        return
    yield from _heap(work, len(work))


def variations(n: int, k: int) -> Iterator[tuple[int, ...]]:
    """Yield every ordered selection of k distinct numbers from range(n)."""
    for chosen in combinations(n, k):
        yield from permutations(chosen)


def num_variations(n: int, k: int) -> int:
    """Return n! / (n - k)!, the number of variations of k out of n."""
    return math.perm(n, k)