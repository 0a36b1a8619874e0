"""Prime sums, circular primes and the 10,001st prime."""

from __future__ import annotations

import argparse
import time
from typing import Collection, Iterable, Optional, Sequence

from codedrills.euler import sieve_of_eratosthenes


def is_circular(n: int, primes: Collection[int]) -> bool:
    """True if every rotation of the digits of ``n`` is in ``primes``."""
    digits = str(n)
    return all(
        int(digits[i:] + digits[:i]) in primes for i in range(len(digits))
    )


def count_circular_primes(primes: Iterable[int]) -> int:
    """Number of circular primes among ``primes``."""
    ordered = list(primes)
    lookup = set(ordered)
    return sum(1 for p in ordered if is_circular(p, lookup))


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print prime statistics up to a limit."""
    parser = argparse.ArgumentParser(
        prog="codedrills-primes", description="Prime number statistics."
    )
    parser.add_argument("--limit", type=int, default=1_000_000)
    args = parser.parse_args(argv)

    start = time.perf_counter()
    primes = sieve_of_eratosthenes(args.limit)
    print(f"Sum of primes below {args.limit}: {sum(primes)}")
    print(
        f"Number of circular primes below {args.limit}: "
        f"{count_circular_primes(primes)}"
    )
    print(f"Time taken: {time.perf_counter() - start:.6f}s")

    if len(primes) <= 10000:
        parser.error(f"fewer than 10,001 primes below {args.limit}")
    print(f"The 10,001st prime number is {primes[10000]}")
    return 0