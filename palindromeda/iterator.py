"""Bounded, restartable iterator over ascending palindromes.

State machine::

    NOT_STARTED --next--> ACTIVE(lower)
    ACTIVE(c)   --next--> ACTIVE(next_palindrome(c))
    ACTIVE(c)   ---------> EXHAUSTED   once c is the upper bound (or the width's MAX)

``len()`` is the configured length, computed from ranks in O(1);
``remaining()`` reports what is left.
"""

from __future__ import annotations

import logging
from typing import Iterator, Union

from .adjacency import next_palindrome
from .errors import PalindromeOutOfRangeError, PalindromeOverflowError
from .locator import ge, le, max_palindrome
from .rank import nth, to_n, total_count
from .types import IterState, Palindrome, _require_non_negative
from .width import DEFAULT_WIDTH, IntWidth

logger = logging.getLogger(__name__)

Bound = Union[int, Palindrome]


def _as_int(value: Bound) -> int:
    return value.value if isinstance(value, Palindrome) else value


class PalindromeIter(Iterator[Palindrome]):
    """Ascending palindromes from *lower* to *upper* (inclusive).

    ``upper=None`` means open-ended: the sequence stops at the width's largest
    palindrome. ``lower=None`` builds an empty sequence. Prefer the factory
    classmethods over calling the constructor directly.
    """

    def __init__(
        self,
        lower: Palindrome | None,
        upper: Palindrome | None = None,
        *,
        width: IntWidth = DEFAULT_WIDTH,
    ) -> None:
        self._lower = lower
        self._upper = upper
        self._width = width
        self._state = IterState.NOT_STARTED
        self._cursor: Palindrome | None = None
        self._length = self._compute_length()

    # -- Factories -------------------------------------------------------------

    @classmethod
    def from_range(cls, start: Bound, end: Bound, *, width: IntWidth = DEFAULT_WIDTH) -> PalindromeIter:
        """Palindromes in ``[start, end]``; the ends need not be palindromes."""
        start_n, end_n = _as_int(start), _as_int(end)
        _require_non_negative("start", start_n)
        _require_non_negative("end", end_n)
        end_n = min(end_n, width.max_value)
        if start_n > max_palindrome(width).value or start_n > end_n:
            logger.debug("empty palindrome range [%d, %d]", start_n, end_n)
            return cls(None, width=width)
        lower, upper = ge(start_n, width=width), le(end_n, width=width)
        logger.debug("palindrome range [%s, %s]", lower, upper)
        if lower > upper:
            return cls(None, width=width)
        return cls(lower, upper, width=width)

    @classmethod
    def first_n(cls, n: int, *, width: IntWidth = DEFAULT_WIDTH) -> PalindromeIter:
        """The first *n* palindromes, starting from 0."""
        return cls.first_n_from(n, Palindrome(0), width=width)

    @classmethod
    def first_n_from(cls, n: int, start: Palindrome, *, width: IntWidth = DEFAULT_WIDTH) -> PalindromeIter:
        """*n* consecutive palindromes starting at *start*.

        Raises:
            PalindromeOutOfRangeError: fewer than *n* palindromes remain in *width*.
        """
        _require_non_negative("n", n)
        if n == 0:
            return cls(None, width=width)
        last_rank = to_n(start) + n - 1
        if last_rank >= total_count(width):
            raise PalindromeOutOfRangeError(
                f"{n} palindromes from {start} run past {max_palindrome(width)}"
            )
        upper = nth(last_rank, width=width)
        logger.debug("first %d palindromes from %s end at %s", n, start, upper)
        return cls(start, upper, width=width)

    @classmethod
    def open_from(cls, start: Palindrome, *, width: IntWidth = DEFAULT_WIDTH) -> PalindromeIter:
        """Every palindrome from *start* up to the width's largest one."""
        return cls(start, None, width=width)

    # -- State -----------------------------------------------------------------

    @property
    def state(self) -> IterState:
        return self._state

    @property
    def lower(self) -> Palindrome | None:
        return self._lower

    @property
    def upper(self) -> Palindrome | None:
        return self._upper

    def reset(self) -> None:
        self._state = IterState.NOT_STARTED
        self._cursor = None

    def _last(self) -> Palindrome:
        return self._upper if self._upper is not None else max_palindrome(self._width)

    def _compute_length(self) -> int:
        if self._lower is None or self._lower > self._last():
            return 0
        return to_n(self._last()) - to_n(self._lower) + 1

    # -- Iterator protocol -----------------------------------------------------

    def __iter__(self) -> PalindromeIter:
        return self

    def __next__(self) -> Palindrome:
        if self._state is IterState.EXHAUSTED:
            raise StopIteration
        if self._cursor is None:
            if self._lower is None or self._length == 0:
                self._state = IterState.EXHAUSTED
                raise StopIteration
            cursor = self._lower
        else:
            try:
                cursor = next_palindrome(self._cursor, width=self._width)
            except PalindromeOverflowError:
                self._state = IterState.EXHAUSTED
                raise StopIteration from None

        self._cursor = cursor
        self._state = IterState.EXHAUSTED if cursor >= self._last() else IterState.ACTIVE
        return cursor

    def __len__(self) -> int:
        return self._length

    def remaining(self) -> int:
        """Palindromes not yet produced, computed from ranks."""
        if self._state is IterState.EXHAUSTED:
            return 0
        if self._cursor is None:
            return self._length
        return to_n(self._last()) - to_n(self._cursor)

    def __repr__(self) -> str:
        return (
            f"PalindromeIter(lower={self._lower}, upper={self._upper}, "
            f"bits={self._width.bits}, state={self._state.value})"
        )
