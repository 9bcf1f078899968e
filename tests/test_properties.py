"""Property tests for the palindrome engine (Hypothesis).

Checks the inverse and ordering laws over the full 64-bit range, plus a
small-width exhaustive sweep where brute force is cheap.
"""

from __future__ import annotations

import importlib.util

import pytest

if importlib.util.find_spec("hypothesis") is None:  # pragma: no cover
    pytest.skip("hypothesis not installed", allow_module_level=True)

import hypothesis.strategies as st
from hypothesis import given, settings

from palindromeda import (
    PalindromeIter,
    closest,
    ge,
    is_palindrome,
    le,
    max_palindrome,
    next_palindrome,
    nth,
    previous_palindrome,
    to_n,
    total_count,
)
from palindromeda.width import U16, U64

U64_MAX_PALINDROME = 18446744066044764481

u64_values = st.integers(min_value=0, max_value=U64.max_value)
u64_ranks = st.integers(min_value=0, max_value=total_count(U64) - 1)
u64_palindromes = u64_ranks.map(lambda i: nth(i, width=U64))


@settings(max_examples=500)
@given(n=u64_values)
def test_is_palindrome_matches_string_reversal(n: int) -> None:
    s = str(n)
    assert is_palindrome(n) == (s == s[::-1])


@settings(max_examples=500)
@given(i=u64_ranks)
def test_to_n_inverts_nth(i: int) -> None:
    assert to_n(nth(i, width=U64)) == i


@settings(max_examples=500)
@given(p=u64_palindromes)
def test_nth_inverts_to_n(p) -> None:
    assert nth(to_n(p), width=U64) == p


@settings(max_examples=500)
@given(p=u64_palindromes)
def test_next_previous_inverse(p) -> None:
    if p.value != 0:
        assert next_palindrome(previous_palindrome(p, width=U64), width=U64) == p
    if p.value != U64_MAX_PALINDROME:
        assert previous_palindrome(next_palindrome(p, width=U64), width=U64) == p


@settings(max_examples=500)
@given(p=u64_palindromes)
def test_next_is_rank_successor(p) -> None:
    if p.value != U64_MAX_PALINDROME:
        assert to_n(next_palindrome(p, width=U64)) == to_n(p) + 1


@settings(max_examples=500)
@given(n=u64_values)
def test_le_ge_bracket_n(n: int) -> None:
    lower = le(n, width=U64)
    assert lower.value <= n
    if lower.value != n and lower.value != U64_MAX_PALINDROME:
        # Nothing strictly between le(n) and n.
        assert next_palindrome(lower, width=U64).value > n
    if n <= U64_MAX_PALINDROME:
        upper = ge(n, width=U64)
        assert upper.value >= n
        if upper.value != n:
            assert previous_palindrome(upper, width=U64).value < n


@settings(max_examples=500)
@given(n=st.integers(min_value=0, max_value=U64_MAX_PALINDROME))
def test_closest_is_nearest(n: int) -> None:
    c = closest(n, width=U64)
    lower, upper = le(n, width=U64), ge(n, width=U64)
    assert c in (lower, upper)
    assert abs(c.value - n) == min(n - lower.value, upper.value - n)
    if n - lower.value == upper.value - n:
        assert c == lower


@settings(max_examples=50, deadline=None)
@given(a=st.integers(min_value=0, max_value=U16.max_value), b=st.integers(min_value=0, max_value=U16.max_value))
def test_range_iterator_len_matches_contents(a: int, b: int) -> None:
    it = PalindromeIter.from_range(a, b, width=U16)
    values = [p.value for p in it]
    assert len(it) == len(values)
    assert values == [n for n in range(a, min(b, max_palindrome(U16).value) + 1) if is_palindrome(n)]
