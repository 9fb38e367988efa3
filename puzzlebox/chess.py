"""Knight attack check on a chess board."""

from __future__ import annotations


def _on_board(square: str) -> bool:
    return "a" <= square[0] <= "h" and "1" <= square[1] <= "8"


def can_knight_attack(white: str, black: str) -> bool:
    """Return whether knights on the two squares attack each other.

    Raises ValueError for malformed or off-board squares and for two
    knights on the same square.
    """
    if len(white) < 2 or len(black) < 2:
        raise ValueError("args too short")
    if not _on_board(white):
        raise ValueError("invalid white position")
    if not _on_board(black):
        raise ValueError("invalid black position")

    file_distance = abs(ord(white[0]) - ord(black[0]))
    rank_distance = abs(ord(white[1]) - ord(black[1]))

    if {file_distance, rank_distance} == {1, 2}:
        return True
    if file_distance == 0 and rank_distance == 0:
        raise ValueError("knights cannot share a square")
    return False