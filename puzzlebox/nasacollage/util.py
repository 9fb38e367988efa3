"""Small helpers shared by the collage modules."""

from __future__ import annotations

from collections.abc import Callable, Iterable


def disjoint(a: Iterable[int] | None, b: Iterable[int] | None) -> bool:
    """Return whether the two collections have no element in common."""
    return set(a or ()).isdisjoint(b or ())


def min_index(n: int, key: Callable[[int], int]) -> int:
    """Return the first index in range(n) whose key is smallest."""
    if n <= 0:
        raise ValueError("no items to choose from")
    return min(range(n), key=key)


def max_index(n: int, key: Callable[[int], int]) -> int:
    """Return the first index in range(n) whose key is largest."""
    if n <= 0:
        raise ValueError("no items to choose from")
    return max(range(n), key=key)