"""Tests for palindromeda/locator.py — le / ge / closest."""

import bisect

import pytest

from palindromeda.errors import PalindromeOverflowError
from palindromeda.locator import closest, ge, le, max_palindrome
from palindromeda.types import Palindrome
from palindromeda.width import U8, U16, U32, U64

U64_MAX = 2**64 - 1
U64_MAX_PALINDROME = 18446744066044764481

_PALS = [n for n in range(0, 60_001) if str(n) == str(n)[::-1]]


def _brute_le(n: int) -> int:
    return _PALS[bisect.bisect_right(_PALS, n) - 1]


def _brute_ge(n: int) -> int:
    return _PALS[bisect.bisect_left(_PALS, n)]


# ---------------------------------------------------------------------------
# le
# ---------------------------------------------------------------------------

class TestLe:
    @pytest.mark.parametrize(
        "n, expected",
        [
            (0, 0), (10, 9), (11, 11), (19, 11), (100, 99), (201, 191), (190, 181),
            (209, 202), (420, 414), (1990, 1881), (998001, 997799),
        ],
    )
    def test_known(self, n, expected):
        assert le(n) == Palindrome(expected)

    def test_matches_brute_force(self):
        for n in range(0, 50_000):
            assert le(n).value == _brute_le(n), n

    def test_u64_max(self):
        assert le(U64_MAX, width=U64).value == U64_MAX_PALINDROME

    def test_at_width_boundary(self):
        assert le(255, width=U8) == Palindrome(252)

    def test_above_width(self):
        with pytest.raises(PalindromeOverflowError):
            le(256, width=U8)

    def test_negative(self):
        with pytest.raises(ValueError):
            le(-1)


# ---------------------------------------------------------------------------
# ge
# ---------------------------------------------------------------------------

class TestGe:
    @pytest.mark.parametrize(
        "n, expected",
        [
            (0, 0), (10, 11), (11, 11), (19, 22), (100, 101), (190, 191), (199, 202),
            (209, 212), (1337, 1441), (1990, 1991), (998001, 998899), (999999, 999999),
            (1000000, 1000001),
        ],
    )
    def test_known(self, n, expected):
        assert ge(n) == Palindrome(expected)

    def test_matches_brute_force(self):
        for n in range(0, 50_000):
            assert ge(n).value == _brute_ge(n), n

    def test_at_max(self):
        assert ge(U64_MAX_PALINDROME, width=U64).value == U64_MAX_PALINDROME

    def test_above_max_overflows(self):
        with pytest.raises(PalindromeOverflowError):
            ge(U64_MAX_PALINDROME + 1, width=U64)

    def test_above_max_overflows_u8(self):
        with pytest.raises(PalindromeOverflowError):
            ge(253, width=U8)

    def test_overflow_is_builtin_overflow(self):
        with pytest.raises(OverflowError):
            ge(U64_MAX, width=U64)


# ---------------------------------------------------------------------------
# closest
# ---------------------------------------------------------------------------

class TestClosest:
    def test_known(self):
        assert closest(5340) == Palindrome(5335)

    def test_exact(self):
        assert closest(8008) == Palindrome(8008)

    def test_tie_goes_low(self):
        # 9 and 11 are both 1 away from 10.
        assert closest(10) == Palindrome(9)
        # 101 and 111 are both 5 away from 106.
        assert closest(106) == Palindrome(101)

    def test_upper_wins_when_nearer(self):
        assert closest(107) == Palindrome(111)

    def test_above_max_returns_max(self):
        assert closest(253, width=U8) == Palindrome(252)
        assert closest(U64_MAX, width=U64).value == U64_MAX_PALINDROME

    def test_matches_brute_force(self):
        for n in range(0, 20_000):
            lo, hi = _brute_le(n), _brute_ge(n)
            expected = lo if n - lo <= hi - n else hi
            assert closest(n).value == expected, n


# ---------------------------------------------------------------------------
# max_palindrome
# ---------------------------------------------------------------------------

class TestMaxPalindrome:
    @pytest.mark.parametrize(
        "width, expected",
        [(U8, 252), (U16, 65456), (U32, 4294884924), (U64, U64_MAX_PALINDROME)],
    )
    def test_known(self, width, expected):
        assert max_palindrome(width).value == expected

    def test_not_above_width(self):
        for width in (U8, U16, U32, U64):
            assert max_palindrome(width).value <= width.max_value
