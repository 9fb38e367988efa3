"""Count byte warriors drawn with ones on a grid of digits."""

from __future__ import annotations

# Cells painted from a point: right, and the three cells of the next row.
_NEIGHBOURS = ((0, 0), (0, 1), (1, -1), (1, 0), (1, 1))


def _parse(image: str) -> list[list[int]]:
    return [[ord(ch) - ord("0") for ch in line] for line in image.split("\n")]


def _paint(color: int, row: int, col: int, grid: list[list[int]]) -> None:
    for d_row, d_col in _NEIGHBOURS:
        r, c = row + d_row, col + d_col
        if r < len(grid) and 0 <= c < len(grid[r]) and grid[r][c] == 1:
            grid[r][c] = color


def count(image: str) -> int:
    """Return the number of warriors in a newline-separated grid of digits.

    The grid is scanned row by row; each unseen '1' starts a warrior whose
    colour spreads to the touching cells to its right and below.
    """
    grid = _parse(image)
    color = 1
    for row_index, row in enumerate(grid):
        for col_index, cell in enumerate(row):
            if cell > 1:
                _paint(cell, row_index, col_index, grid)
            elif cell == 1:
                color += 1
                _paint(color, row_index, col_index, grid)
    return color - 1