"""Decode a message hidden in letter frequencies."""

from __future__ import annotations

from collections import Counter
from string import ascii_lowercase


def decode(encoded: str) -> str:
    """Return the letters seen at least as often as '_', most frequent first.

    Letters of equal frequency come in alphabetical order. Only lower-case
    ASCII letters and '_' are allowed in ``encoded``.
    """
    counts = Counter(encoded)
    invalid = set(counts) - set(ascii_lowercase) - {"_"}
    if invalid:
        raise ValueError(f"unexpected characters: {''.join(sorted(invalid))!r}")
    threshold = counts["_"]
    letters = [ch for ch in ascii_lowercase if counts[ch] >= threshold]
    return "".join(sorted(letters, key=lambda ch: -counts[ch]))