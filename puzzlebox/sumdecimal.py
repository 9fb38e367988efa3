"""Sum the decimal digits of a square root."""

from __future__ import annotations

from math import isqrt

DIGITS = 1000


def sum_decimal(c: int) -> int:
    """Return the sum of the first 1000 decimal digits of sqrt(c).

    Digits are produced one at a time by long-hand square root extraction;
    perfect squares and values below 1 give 0.
    """
    if c < 1:
        return 0

    root = isqrt(c)
    remainder = c - root * root
    divisor = 20 * root
    total = 0
    for _ in range(DIGITS):
        digit, rest = divmod(remainder * 100, divisor)
        square = digit * digit
        remainder = rest - square
        if square > rest:
            digit -= 1
            remainder += divisor + 2 * digit + 1
        total += digit
        divisor = divisor * 10 + 20 * digit
    return total