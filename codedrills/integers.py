"""Drills on the decimal digits of integers."""

from __future__ import annotations

_UPPER = 2**31 - 1
_LOWER = -(2**31)


def is_palindrome(x: int) -> bool:
    """Tell whether ``x`` reads the same backwards; negatives never do."""
    if x < 0:
        return False
    digits = str(x)
    return digits == digits[::-1]


def reverse_integer(x: int) -> int:
    """Reverse the digits of ``x``, keeping its sign.

    Results at or beyond 2**31 - 1 or at or below -2**31 give 0.
    """
    sign = -1 if x < 0 else 1
    reversed_value = sign * int(str(abs(x))[::-1])
    if reversed_value >= _UPPER or reversed_value <= _LOWER:
        return 0
    return reversed_value