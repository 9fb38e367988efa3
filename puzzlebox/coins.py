"""Count the ways to split coins into piles."""

from __future__ import annotations


def piles(n: int) -> int:
    """Return the number of ways to split ``n`` coins into unordered piles."""
    if n < 0:
        raise ValueError(f"number of coins must not be negative, got {n}")
    ways = [1] + [0] * n
    for size in range(1, n + 1):
        for total in range(size, n + 1):
            ways[total] += ways[total - size]
    return ways[n]