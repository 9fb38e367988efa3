"""Find the two numbers missing from 1..n."""

from __future__ import annotations

from collections.abc import Sequence
from math import isqrt


def missing(numbers: Sequence[int]) -> list[int]:
    """Return, ascending, the two numbers of 1..len(numbers)+2 not present."""
    total = sum(numbers)
    total_squares = sum(n * n for n in numbers)

    n = len(numbers) + 2
    diff = n * (n + 1) // 2 - total
    diff_squares = n * (n + 1) * (2 * n + 1) // 6 - total_squares

    # x + y = diff and x^2 + y^2 = diff_squares give
    # 2x^2 - 2*diff*x + diff^2 - diff_squares = 0.
    a, b, c = 2, -2 * diff, diff * diff - diff_squares
    root = isqrt(b * b - 4 * a * c)
    return [(-b - root) // (2 * a), (-b + root) // (2 * a)]