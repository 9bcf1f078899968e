"""Data types for the palindrome engine.

All types are frozen dataclasses or enums (immutable). ``Palindrome`` is the
only public value type; ``DigitHalf`` is the transient representation the
engine mirrors from.

Conventions:
- values are plain non-negative Python ints,
- width bounds are enforced by the operations, not by ``Palindrome`` itself.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, unique

from .errors import NotAPalindromeError


def _require_int(name: str, value: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")


def _require_non_negative(name: str, value: int) -> None:
    _require_int(name, value)
    if value < 0:
        raise ValueError(f"{name} must be non-negative: {value}")


def is_palindrome(value: int) -> bool:
    """True iff the decimal digits of *value* read the same both ways.

    Reverses only the low half of the digits and compares it with the high
    half, so the work is O(digit count) without building a string.
    """
    _require_non_negative("value", value)
    if value < 10:
        return True
    # Non-zero numbers ending in 0 would need a leading zero.
    if value % 10 == 0:
        return False

    rest = value
    rev = 0
    while rest > rev:
        rev = rev * 10 + rest % 10
        rest //= 10
    return rest == rev or rest == rev // 10


@unique
class Parity(Enum):
    """Whether a palindrome has an even or odd total digit count."""
    EVEN = "even"
    ODD = "odd"

    @classmethod
    def of(cls, total_digits: int) -> Parity:
        return cls.EVEN if total_digits % 2 == 0 else cls.ODD


@unique
class IterState(Enum):
    NOT_STARTED = "not_started"
    ACTIVE = "active"
    EXHAUSTED = "exhausted"


@dataclass(frozen=True)
class DigitHalf:
    """First ``ceil(d/2)`` digits of a ``d``-digit number, plus the parity of ``d``.

    ``DigitHalf(0, Parity.ODD)`` is the half of the single digit ``0``.
    """

    value: int
    parity: Parity

    def __post_init__(self) -> None:
        _require_non_negative("half value", self.value)
        if self.value == 0 and self.parity is Parity.EVEN:
            raise ValueError("half value 0 only exists with odd parity")

    @property
    def half_digits(self) -> int:
        return len(str(self.value))

    @property
    def total_digits(self) -> int:
        if self.parity is Parity.ODD:
            return 2 * self.half_digits - 1
        return 2 * self.half_digits


@dataclass(frozen=True, order=True)
class Palindrome:
    """A non-negative integer whose decimal digits form a palindrome.

    Equality and ordering follow the wrapped integer. There are no arithmetic
    operators: convert explicitly with ``to_int()`` / ``from_int()``.
    """

    value: int

    def __post_init__(self) -> None:
        if not is_palindrome(self.value):
            raise NotAPalindromeError(self.value)

    @classmethod
    def from_int(cls, value: int) -> Palindrome:
        return cls(value)

    def to_int(self) -> int:
        return self.value

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)
