"""Collatz sequence lengths with a memo of previously measured starts."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence


def collatz_step(n: int) -> int:
    """One Collatz step: halve even numbers, map odd n to 3n + 1."""
    return n // 2 if n % 2 == 0 else 3 * n + 1


class CollatzCache:
    """Measures Collatz lengths, remembering the length of each start value.

    The memo starts with 1 mapped to 1.  Only starting values are stored,
    and measuring 1 itself records 0 for it.
    """

    def __init__(self) -> None:
        self._lengths: dict[int, int] = {1: 1}

    def length(self, n: int) -> int:
        """Length of the Collatz sequence starting at ``n``."""
        if n < 1:
            raise ValueError(f"Collatz start must be positive, got {n}")
        steps = 0
        current = n
        while current != 1:
            following = collatz_step(current)
            cached = self._lengths.get(following)
            if cached is not None:
                steps += cached + 1
                break
            current = following
            steps += 1
        self._lengths[n] = steps
        return steps

    def longest_below(self, limit: int) -> tuple[int, int]:
        """Return ``(number, length)`` of the longest sequence below ``limit``."""
        best_number, best_length = 0, 0
        for number in range(1, limit):
            length = self.length(number)
            if length > best_length:
                best_number, best_length = number, length
        return best_number, best_length


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the length for one start and the longest sequence below a limit."""
    parser = argparse.ArgumentParser(
        prog="codedrills-collatz", description="Collatz sequence lengths."
    )
    parser.add_argument("--n", type=int, default=13)
    parser.add_argument("--limit", type=int, default=1_000_000)
    args = parser.parse_args(argv)

    cache = CollatzCache()
    print(
        f"The length of the Collatz sequence for {args.n} is {cache.length(args.n)}"
    )
    number, length = cache.longest_below(args.limit)
    print(
        f"The number under {args.limit:,} with the longest Collatz sequence "
        f"is {number} with a length of {length}"
    )
    return 0