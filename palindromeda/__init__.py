"""`palindromeda`: compute and enumerate decimal palindromes without scanning.

Everything is built on the digit half of a number: a palindrome is fully
determined by its leading ``ceil(d/2)`` digits and the parity of ``d``.

- immutable values (frozen dataclasses),
- pure functions, safe to call from any thread,
- explicit errors at the edges of the configured integer width.

Public API:
- `is_palindrome(n) -> bool`
- `le(n)`, `ge(n)`, `closest(n) -> Palindrome`
- `next_palindrome(p)`, `previous_palindrome(p) -> Palindrome`
- `nth(index) -> Palindrome`, `to_n(p) -> int`
- `PalindromeIter.from_range / first_n / first_n_from / open_from`
"""

from .adjacency import next_palindrome, previous_palindrome, saturating_next, saturating_previous
from .errors import (
    NotAPalindromeError,
    PalindromeError,
    PalindromeOutOfRangeError,
    PalindromeOverflowError,
    PalindromeUnderflowError,
)
from .iterator import PalindromeIter
from .locator import closest, ge, le, max_palindrome
from .rank import bracket_count, nth, to_n, total_count
from .types import DigitHalf, IterState, Palindrome, Parity, is_palindrome
from .width import DEFAULT_WIDTH, U8, U16, U32, U64, U128, IntWidth

MIN = Palindrome(0)
MAX = max_palindrome(DEFAULT_WIDTH)

__all__ = [
    "is_palindrome",
    "le",
    "ge",
    "closest",
    "max_palindrome",
    "next_palindrome",
    "previous_palindrome",
    "saturating_next",
    "saturating_previous",
    "nth",
    "to_n",
    "bracket_count",
    "total_count",
    "PalindromeIter",
    "Palindrome",
    "DigitHalf",
    "Parity",
    "IterState",
    "IntWidth",
    "DEFAULT_WIDTH",
    "U8",
    "U16",
    "U32",
    "U64",
    "U128",
    "MIN",
    "MAX",
    "PalindromeError",
    "PalindromeOverflowError",
    "PalindromeUnderflowError",
    "PalindromeOutOfRangeError",
    "NotAPalindromeError",
]
