"""Digit-half codec and mirror constructor.

Every other component works on ``DigitHalf`` values produced here:

- ``decode(n)`` splits ``n`` into its leading ``ceil(d/2)`` digits plus parity,
- ``mirror(half)`` appends the digit-reverse of the half (skipping the middle
  digit once for odd parity) and range-checks the result against the width.

Bracket helpers describe the set of halves that produce palindromes of a given
total digit count; the adjacency, locator and rank modules all step through
brackets with them.
"""

from __future__ import annotations

from .errors import PalindromeOverflowError
from .types import DigitHalf, Palindrome, Parity, _require_non_negative
from .width import DEFAULT_WIDTH, IntWidth


def digit_count(n: int) -> int:
    """Number of decimal digits of *n* (``0`` has one digit)."""
    return len(str(n))


def half_length(total_digits: int) -> int:
    return (total_digits + 1) // 2


def bracket_half_bounds(total_digits: int) -> tuple[int, int]:
    """Inclusive ``(lo, hi)`` half values for palindromes with *total_digits* digits."""
    if total_digits < 1:
        raise ValueError(f"total_digits must be >= 1: {total_digits}")
    k = half_length(total_digits)
    lo = 0 if total_digits == 1 else 10 ** (k - 1)
    return lo, 10**k - 1


def first_half(total_digits: int) -> DigitHalf:
    """Half of the smallest palindrome with *total_digits* digits."""
    return DigitHalf(bracket_half_bounds(total_digits)[0], Parity.of(total_digits))


def last_half(total_digits: int) -> DigitHalf:
    """Half of the largest palindrome with *total_digits* digits (all nines)."""
    return DigitHalf(bracket_half_bounds(total_digits)[1], Parity.of(total_digits))


def decode(value: int) -> DigitHalf:
    _require_non_negative("value", value)
    d = digit_count(value)
    return DigitHalf(value // 10 ** (d - half_length(d)), Parity.of(d))


def encode(half_value: int, total_digits: int) -> int:
    """Mirror *half_value* into a *total_digits*-digit integer (no range check)."""
    if digit_count(half_value) != half_length(total_digits):
        raise ValueError(
            f"half {half_value} does not fit a {total_digits}-digit palindrome"
        )
    result = half_value
    rest = half_value // 10 if total_digits % 2 else half_value
    while rest:
        result = result * 10 + rest % 10
        rest //= 10
    return result


def mirror(half: DigitHalf, *, width: IntWidth = DEFAULT_WIDTH) -> Palindrome:
    """Build the palindrome generated by *half*.

    Raises:
        PalindromeOverflowError: the palindrome does not fit in *width*.
    """
    value = encode(half.value, half.total_digits)
    if value > width.max_value:
        raise PalindromeOverflowError(
            f"palindrome {value} exceeds {width.bits}-bit maximum {width.max_value}"
        )
    return Palindrome(value)
