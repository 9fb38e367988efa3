"""Work out which nodes of a ring are broken from their reports."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import combinations


def _consistent(broken: Sequence[bool], reports: Sequence[bool]) -> bool:
    """Check a configuration against the reports.

    A working node reports truthfully whether its successor on the ring
    works; a broken node may report anything.
    """
    count = len(reports)
    for index, report in enumerate(reports):
        if broken[index]:
            continue
        if broken[(index + 1) % count] == report:
            return False
    return True


def find_broken_nodes(broken_nodes: int, reports: Sequence[bool]) -> str:
    """Return one character per node: 'B' broken, 'W' working, '?' unknown.

    Raises ValueError if the number of broken nodes is out of range or no
    configuration agrees with the reports.
    """
    count = len(reports)
    if not 0 <= broken_nodes <= count:
        raise ValueError(
            f"broken nodes must be between 0 and {count}, got {broken_nodes}"
        )

    result: list[str] | None = None
    for chosen in combinations(range(count), broken_nodes):
        chosen_set = set(chosen)
        broken = [index in chosen_set for index in range(count)]
        if not _consistent(broken, reports):
            continue
        marks = ["B" if flag else "W" for flag in broken]
        if result is None:
            result = marks
        else:
            result = [old if old == new else "?" for old, new in zip(result, marks)]

    if result is None:
        raise ValueError("no configuration is consistent with the reports")
    return "".join(result)