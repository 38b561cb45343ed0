"""Fibonacci numbers and the series command."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence


def fibonacci(n: int) -> int:
    """Return the n-th Fibonacci number, with fibonacci(0) == 0 and fibonacci(1) == 1."""
    if n < 0:
        raise ValueError(f"Fibonacci index must be non-negative, got {n}")
    previous, current = 0, 1
    for _ in range(n):
        previous, current = current, previous + current
    return previous


def fibonacci_series(count: int) -> list[int]:
    """Return the first ``count`` Fibonacci numbers; a count below one gives an empty list."""
    series: list[int] = []
    previous, current = 0, 1
    for _ in range(max(count, 0)):
        series.append(previous)
        previous, current = current, previous + current
    return series


def main(argv: Sequence[str] | None = None) -> int:
    """Print the requested number of Fibonacci terms."""
    parser = argparse.ArgumentParser(description="Print the Fibonacci series.")
    parser.add_argument("count", nargs="?", type=int, help="number of terms to print")
    args = parser.parse_args(argv)

    count = args.count
    if count is None:
        reply = input("Enter the number of terms of series to be printed: ")
        try:
            count = int(reply.strip())
        except ValueError:
            print(f"not a whole number: {reply!r}", file=sys.stderr)
            return 1

    terms = "".join(f" {term}" for term in fibonacci_series(count))
    print(f"\n Fibonacci Series is: {terms}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())