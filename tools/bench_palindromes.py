#!/usr/bin/env python3
"""
Micro-benchmarks for the palindrome engine.

Times each public operation on fixed inputs and prints a markdown table.
Nothing is cached between operations except what the library caches itself
(`max_palindrome` / `total_count` per width).
"""

from __future__ import annotations

import argparse
import time
from dataclasses import dataclass
from typing import Callable, Iterable, List

from palindromeda import (
    PalindromeIter,
    closest,
    ge,
    is_palindrome,
    le,
    next_palindrome,
    nth,
    previous_palindrome,
    to_n,
)


@dataclass(frozen=True)
class BenchResult:
    name: str
    iters: int
    total_ns: int

    @property
    def per_call_ns(self) -> float:
        return self.total_ns / self.iters if self.iters else 0.0


def _cases() -> list[tuple[str, Callable[[], object]]]:
    p_to_n = closest(100080001)
    p_next = closest(23347574332)
    p_is = closest(289734)
    start, end = closest(289734), closest(2894545734)
    p_from = closest(9734)
    it_len = PalindromeIter.first_n_from(83345654, closest(98723))
    return [
        ("closest", lambda: closest(289374)),
        ("nth", lambda: nth(2837498)),
        ("to_n", lambda: to_n(p_to_n)),
        ("previous", lambda: previous_palindrome(p_to_n)),
        ("next", lambda: next_palindrome(p_next)),
        ("le", lambda: le(928374923)),
        ("ge", lambda: ge(928374923)),
        ("is_palindrome(Palindrome)", lambda: is_palindrome(p_is.value)),
        ("is_palindrome(int)", lambda: is_palindrome(92730489)),
        ("iter_from(Palindrome)", lambda: PalindromeIter.from_range(start, end)),
        ("iter_from(int)", lambda: PalindromeIter.from_range(289734, 2894545734)),
        ("iter_first_n", lambda: PalindromeIter.first_n(987324)),
        ("iter_first_n_from", lambda: PalindromeIter.first_n_from(987324, p_from)),
        ("iter_len", lambda: len(it_len)),
    ]


def _run(name: str, fn: Callable[[], object], iters: int) -> BenchResult:
    for _ in range(min(iters, 100)):
        fn()
    t0 = time.perf_counter_ns()
    for _ in range(iters):
        fn()
    return BenchResult(name=name, iters=iters, total_ns=time.perf_counter_ns() - t0)


def _markdown_table(rows: Iterable[List[str]]) -> str:
    rows = list(rows)
    if not rows:
        return ""
    header = rows[0]
    out = ["| " + " | ".join(header) + " |", "| " + " | ".join(["---"] * len(header)) + " |"]
    for r in rows[1:]:
        out.append("| " + " | ".join(r) + " |")
    return "\n".join(out) + "\n"


def main() -> int:
    ap = argparse.ArgumentParser(description="Benchmark palindromeda operations.")
    ap.add_argument("--iters", type=int, default=10_000, help="Calls per operation (default: 10000).")
    ap.add_argument("--only", action="append", default=[], help="Run only the named operation (repeatable).")
    args = ap.parse_args()

    if args.iters <= 0:
        ap.error("--iters must be positive")

    cases = _cases()
    if args.only:
        wanted = set(args.only)
        unknown = wanted - {name for name, _ in cases}
        if unknown:
            ap.error(f"unknown operation(s): {', '.join(sorted(unknown))}")
        cases = [(name, fn) for name, fn in cases if name in wanted]

    results = [_run(name, fn, args.iters) for name, fn in cases]
    rows = [["operation", "iters", "ns/call"]]
    rows.extend([r.name, str(r.iters), f"{r.per_call_ns:.1f}"] for r in results)
    print(_markdown_table(rows), end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
