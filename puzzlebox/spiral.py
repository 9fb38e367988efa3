"""Print a square number spiral."""

from __future__ import annotations

import argparse
from collections.abc import Sequence


def element(n: int, x: int, y: int) -> int:
    """Return the number at column ``x`` and row ``y`` of the spiral of size ``n``.

    Numbers start at 0 in the centre and wind outwards; for an even size the
    largest number sits top left, for an odd size bottom right.
    """
    if not (0 <= x < n and 0 <= y < n):
        raise ValueError(f"position ({x}, {y}) lies outside a spiral of size {n}")
    while True:
        square = n * n
        if n % 2 == 0:
            if y == 0:
                return square - 1 - x
            if x == n - 1:
                return square - n - y
            y -= 1
        else:
            if y == n - 1:
                return square - n + x
            if x == 0:
                return square - n - (n - 1) + y
            x -= 1
        n -= 1


def render(n: int) -> str:
    """Return the spiral of size ``n`` as right-aligned text, one row per line."""
    if n <= 0:
        return ""
    width = len(str(n * n - 1))
    return "".join(
        "".join(f"{element(n, x, y):>{width}} " for x in range(n)) + "\n"
        for y in range(n)
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Print a spiral; the size defaults to 10."""
    parser = argparse.ArgumentParser(prog="spiral", description="Print a number spiral.")
    parser.add_argument("size", nargs="?", type=int, default=10)
    args = parser.parse_args(argv)
    print(render(args.size), end="")
    return 0