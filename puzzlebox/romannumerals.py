"""Roman numeral encoding and decoding."""

from __future__ import annotations

_NUMERALS = (
    ("M", 1000),
    ("CM", 900),
    ("D", 500),
    ("CD", 400),
    ("C", 100),
    ("XC", 90),
    ("L", 50),
    ("XL", 40),
    ("X", 10),
    ("IX", 9),
    ("V", 5),
    ("IV", 4),
    ("I", 1),
)


def encode(n: int) -> str:
    """Return ``n`` as a Roman numeral; raise ValueError unless n is positive."""
    if n < 1:
        raise ValueError(f"cannot encode {n} as a roman numeral")
    parts = []
    for roman, value in _NUMERALS:
        repeat, n = divmod(n, value)
        parts.append(roman * repeat)
    return "".join(parts)


def decode(s: str) -> int:
    """Return the value of the Roman numeral ``s``; raise ValueError if invalid."""
    result = 0
    rest = s
    for roman, value in _NUMERALS:
        while rest.startswith(roman):
            rest = rest[len(roman) :]
            result += value
    if rest or result == 0:
        raise ValueError(f"invalid roman numeral: {s!r}")
    return result