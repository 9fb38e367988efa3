"""Enumerate all short strings over an alphabet."""

from __future__ import annotations


def generate_short_hashes(dictionary: str, length: int) -> list[str]:
    """Return every string of 1..``length`` characters from ``dictionary``.

    Strings come in depth-first order: each prefix before its extensions.
    """
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    if length == 0:
        return []
    tails = generate_short_hashes(dictionary, length - 1)
    result: list[str] = []
    for ch in dictionary:
        result.append(ch)
        result.extend(ch + tail for tail in tails)
    return result