"""Merge sort of integer sequences."""

from __future__ import annotations

from collections.abc import Sequence


def _merge(left: list[int], right: list[int]) -> list[int]:
    merged: list[int] = []
    j = 0
    for value in left:
        while j < len(right) and right[j] <= value:
            merged.append(right[j])
            j += 1
        merged.append(value)
    merged.extend(right[j:])
    return merged


def merge_sort(values: Sequence[int]) -> list[int]:
    """Return a new list with ``values`` in ascending order."""
    items = list(values)
    if len(items) <= 1:
        return items
    middle = len(items) // 2
    return _merge(merge_sort(items[:middle]), merge_sort(items[middle:]))