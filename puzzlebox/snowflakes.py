"""Count triangles overlaid a given number of levels deep in a snowflake."""

from __future__ import annotations

_GENERATORS = ((6, 6, 0), (-1, 1, 1))


def overlaid_triangles(n: int, m: int) -> int:
    """Return the number of triangles ``m`` levels deep after ``n`` iterations.

    An even ``m`` gives 0; an odd ``m`` must lie between 1 and n + 1.
    """
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    if m % 2 == 0:
        return 0
    if not 1 <= m <= n + 1:
        raise ValueError(f"m must be between 1 and {n + 1}, got {m}")

    levels = [0] * (n + 1)
    levels[0] = 1
    for k in range(n - 1):
        following = [0] * (n + 1)
        for j, amount in enumerate(levels[: k + 1]):
            offset = j & ~1
            for i, factor in enumerate(_GENERATORS[j & 1]):
                following[offset + i] += amount * factor
        levels = following
    return levels[m - 1]