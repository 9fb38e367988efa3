"""Find anagrams of a phrase in a dictionary."""

from __future__ import annotations

from collections.abc import Iterable


def normalize(s: str) -> str:
    """Return the ASCII letters of ``s``, lower-cased and sorted."""
    letters = (ch for ch in s.lower() if "a" <= ch <= "z")
    return "".join(sorted(letters))


def find_anagrams(dictionary: Iterable[str], word: str) -> list[str]:
    """Return the dictionary entries that are anagrams of ``word``.

    Entries equal to ``word`` ignoring case are not anagrams of it.
    A word without any letters has no anagrams.
    """
    key = normalize(word)
    if not key:
        return []
    folded = word.casefold()
    return [
        entry
        for entry in dictionary
        if normalize(entry) == key and entry.casefold() != folded
    ]