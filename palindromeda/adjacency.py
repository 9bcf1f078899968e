"""Adjacency engine: step to the neighbouring palindrome.

Both directions work on the digit half. A step that leaves the current
bracket (half 9 -> 10, 99 -> 100, or 10 -> 9) moves to the neighbouring total
digit count, and the new half and parity are both re-derived from that count:

    next:     9 -> 11,   99 -> 101,   999 -> 1001
    previous: 11 -> 9,   101 -> 99,   1001 -> 999
"""

from __future__ import annotations

from .digits import bracket_half_bounds, decode, first_half, last_half, mirror
from .errors import PalindromeOverflowError, PalindromeUnderflowError
from .types import DigitHalf, Palindrome
from .width import DEFAULT_WIDTH, IntWidth


def half_up(half: DigitHalf) -> DigitHalf:
    """Half of the palindrome immediately above the one *half* generates."""
    total = half.total_digits
    _, hi = bracket_half_bounds(total)
    if half.value < hi:
        return DigitHalf(half.value + 1, half.parity)
    return first_half(total + 1)


def half_down(half: DigitHalf) -> DigitHalf:
    """Half of the palindrome immediately below the one *half* generates.

    The caller must not pass the half of ``0``.
    """
    total = half.total_digits
    lo, _ = bracket_half_bounds(total)
    if half.value > lo:
        return DigitHalf(half.value - 1, half.parity)
    if total == 1:
        raise PalindromeUnderflowError("0 has no predecessor")
    return last_half(total - 1)


def next_palindrome(p: Palindrome, *, width: IntWidth = DEFAULT_WIDTH) -> Palindrome:
    """Smallest palindrome strictly greater than *p*.

    Raises:
        PalindromeOverflowError: *p* is the largest palindrome in *width*.
    """
    try:
        return mirror(half_up(decode(p.value)), width=width)
    except PalindromeOverflowError:
        raise PalindromeOverflowError(f"no palindrome after {p} fits in {width.bits} bits") from None


def previous_palindrome(p: Palindrome, *, width: IntWidth = DEFAULT_WIDTH) -> Palindrome:
    """Largest palindrome strictly smaller than *p*.

    Raises:
        PalindromeUnderflowError: *p* is 0.
        PalindromeOverflowError: *p* itself does not fit in *width*.
    """
    if not width.contains(p.value):
        raise PalindromeOverflowError(f"{p} exceeds {width.bits}-bit maximum {width.max_value}")
    return mirror(half_down(decode(p.value)), width=width)


def saturating_next(p: Palindrome, *, width: IntWidth = DEFAULT_WIDTH) -> Palindrome:
    """Like ``next_palindrome`` but returns *p* unchanged at the top of the width."""
    try:
        return next_palindrome(p, width=width)
    except PalindromeOverflowError:
        return p


def saturating_previous(p: Palindrome, *, width: IntWidth = DEFAULT_WIDTH) -> Palindrome:
    """Like ``previous_palindrome`` but returns ``0`` unchanged."""
    if p.value == 0:
        return p
    return previous_palindrome(p, width=width)
