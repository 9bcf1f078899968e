"""Rank mapper: zero-based ordinal <-> palindrome value.

Palindromes are grouped into brackets by total digit count ``d``. The
1-digit bracket holds ``0..9`` (10 values); any longer bracket holds
``9 * 10**(ceil(d/2) - 1)`` values, one per half with a non-zero leading
digit. Within a bracket, rank order is half order.
"""

from __future__ import annotations

from functools import lru_cache

from .digits import bracket_half_bounds, decode, half_length, mirror
from .errors import PalindromeOutOfRangeError
from .locator import max_palindrome
from .types import DigitHalf, Palindrome, Parity, _require_non_negative
from .width import DEFAULT_WIDTH, IntWidth


def bracket_count(total_digits: int) -> int:
    """Number of palindromes with exactly *total_digits* digits."""
    if total_digits < 1:
        raise ValueError(f"total_digits must be >= 1: {total_digits}")
    if total_digits == 1:
        return 10
    return 9 * 10 ** (half_length(total_digits) - 1)


def count_below_digits(total_digits: int) -> int:
    """Number of palindromes with fewer than *total_digits* digits.

    Closed form over ``m = total_digits - 1`` (``0`` included):
    ``2 * 10**k - 1`` for ``m = 2k`` and ``11 * 10**k - 1`` for ``m = 2k + 1``.
    """
    if total_digits < 1:
        raise ValueError(f"total_digits must be >= 1: {total_digits}")
    if total_digits == 1:
        return 0
    k, odd = divmod(total_digits - 1, 2)
    return (11 if odd else 2) * 10**k - 1


@lru_cache(maxsize=None)
def total_count(width: IntWidth = DEFAULT_WIDTH) -> int:
    """Number of palindromes representable in *width* (``0`` included)."""
    return to_n(max_palindrome(width)) + 1


def nth(index: int, *, width: IntWidth = DEFAULT_WIDTH) -> Palindrome:
    """The palindrome at zero-based *index* in ascending order.

    Raises:
        PalindromeOutOfRangeError: *index* is not below ``total_count(width)``.
    """
    _require_non_negative("index", index)
    if index >= total_count(width):
        raise PalindromeOutOfRangeError(
            f"index {index} out of range for {width.bits}-bit palindromes "
            f"(count {total_count(width)})"
        )
    d = 1
    remaining = index
    while remaining >= bracket_count(d):
        remaining -= bracket_count(d)
        d += 1
    lo, _ = bracket_half_bounds(d)
    return mirror(DigitHalf(lo + remaining, Parity.of(d)), width=width)


def to_n(p: Palindrome) -> int:
    """Zero-based rank of *p*; inverse of ``nth``."""
    half = decode(p.value)
    lo, _ = bracket_half_bounds(half.total_digits)
    return count_below_digits(half.total_digits) + half.value - lo
