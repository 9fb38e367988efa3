"""Floyd's triangle."""

from __future__ import annotations

from itertools import count, islice


def triangle(rows: int) -> list[list[int]]:
    """Return Floyd's triangle with ``rows`` rows."""
    if rows < 0:
        raise ValueError(f"rows must not be negative, got {rows}")
    numbers = count(1)
    return [list(islice(numbers, length)) for length in range(1, rows + 1)]