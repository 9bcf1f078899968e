"""Exception types for the palindrome engine.

Every error is raised synchronously at the point of computation; values are
immutable, so there is never partial state to roll back.
"""

from __future__ import annotations


class PalindromeError(Exception):
    """Base class for all palindrome engine errors."""


class PalindromeOverflowError(PalindromeError, OverflowError):
    """Raised when a value or result exceeds the configured integer width."""


class PalindromeUnderflowError(PalindromeError, ArithmeticError):
    """Raised when the predecessor of the smallest palindrome (0) is requested."""


class PalindromeOutOfRangeError(PalindromeError, IndexError):
    """Raised when a rank index is past the last representable palindrome."""


class NotAPalindromeError(PalindromeError, ValueError):
    """Raised when a ``Palindrome`` is built from a non-palindromic integer."""

    def __init__(self, value: int) -> None:
        self.value = value
        super().__init__(f"not a decimal palindrome: {value}")
