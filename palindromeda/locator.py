"""Range locator: nearest palindromes around an arbitrary integer.

``ge`` and ``le`` mirror the leading half of ``n`` into a same-length
candidate. When the candidate lands on the wrong side of ``n`` a single half
step fixes it: a strictly greater (or smaller) half dominates every digit at
or past the midpoint.
"""

from __future__ import annotations

from functools import lru_cache

from .adjacency import half_down, half_up
from .digits import decode, encode, mirror
from .errors import PalindromeOverflowError
from .types import Palindrome, _require_non_negative
from .width import DEFAULT_WIDTH, IntWidth


def _require_in_width(n: int, width: IntWidth) -> None:
    _require_non_negative("n", n)
    if not width.contains(n):
        raise PalindromeOverflowError(f"{n} exceeds {width.bits}-bit maximum {width.max_value}")


def ge(n: int, *, width: IntWidth = DEFAULT_WIDTH) -> Palindrome:
    """Smallest palindrome ``>= n``.

    Raises:
        PalindromeOverflowError: no palindrome ``>= n`` fits in *width*.
    """
    _require_in_width(n, width)
    half = decode(n)
    if encode(half.value, half.total_digits) < n:
        half = half_up(half)
    return mirror(half, width=width)


def le(n: int, *, width: IntWidth = DEFAULT_WIDTH) -> Palindrome:
    """Largest palindrome ``<= n``."""
    _require_in_width(n, width)
    half = decode(n)
    if encode(half.value, half.total_digits) > n:
        half = half_down(half)
    return mirror(half, width=width)


def closest(n: int, *, width: IntWidth = DEFAULT_WIDTH) -> Palindrome:
    """Palindrome nearest to *n*; an exact tie goes to the lower one."""
    lower = le(n, width=width)
    if lower.value == n:
        return lower
    try:
        upper = ge(n, width=width)
    except PalindromeOverflowError:
        return lower
    if n - lower.value <= upper.value - n:
        return lower
    return upper


@lru_cache(maxsize=None)
def max_palindrome(width: IntWidth = DEFAULT_WIDTH) -> Palindrome:
    """Largest palindrome representable in *width*."""
    return le(width.max_value, width=width)
