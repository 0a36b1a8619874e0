"""Solutions to a selection of Project Euler problems."""

from __future__ import annotations

import argparse
import math
from pathlib import Path
from typing import Callable, Iterator, Optional, Sequence


def sum_multiples_of_3_or_5(limit: int = 1000) -> int:
    """Sum of the natural numbers below ``limit`` divisible by 3 or 5."""
    return sum(i for i in range(1, limit) if i % 3 == 0 or i % 5 == 0)


def _fibonacci_terms(limit: int) -> Iterator[int]:
    """Yield 1, 2, 3, 5, ... ; the first two terms are always yielded."""
    previous, current = 1, 2
    yield previous
    yield current
    while (following := previous + current) <= limit:
        yield following
        previous, current = current, following


def even_fibonacci_sum(limit: int = 4_000_000) -> int:
    """Sum of the even Fibonacci terms (starting 1, 2) not exceeding ``limit``."""
    return sum(term for term in _fibonacci_terms(limit) if term % 2 == 0)


def sieve_of_eratosthenes(n: int) -> list[int]:
    """Return every prime up to and including ``n``."""
    if n < 1:
        raise ValueError(f"sieve bound must be at least 1, got {n}")
    flags = bytearray([1]) * (n + 1)
    flags[0] = flags[1] = 0
    for i in range(2, math.isqrt(n) + 1):
        if flags[i]:
            flags[i * i :: i] = bytes(len(range(i * i, n + 1, i)))
    return [i for i, is_prime in enumerate(flags) if is_prime]


def largest_prime_factor(number: int = 600851475143) -> Optional[int]:
    """Largest prime factor of ``number`` not above its square root, if any."""
    bound = math.isqrt(number)
    if bound < 1:
        return None
    primes = sieve_of_eratosthenes(bound)
    return next((p for p in reversed(primes) if number % p == 0), None)


def is_palindrome(n: int) -> bool:
    """True when the decimal digits of ``n`` read the same both ways."""
    text = str(n)
    return text == text[::-1]


def largest_palindrome_product(low: int = 100, high: int = 1000) -> int:
    """Largest palindromic product of two factors in ``range(low, high)``."""
    products = (i * j for i in range(low, high) for j in range(low, high))
    return max(filter(is_palindrome, products), default=0)


def read_digits(path: str | Path) -> str:
    """Read a file of digits, dropping all whitespace."""
    return "".join(ch for ch in Path(path).read_text() if not ch.isspace())


def largest_adjacent_product(digits: str, length: int = 13) -> int:
    """Largest product of ``length`` adjacent digits.

    Windows start at every position before ``len(digits) - length``, so the
    window that ends on the final digit is not considered.
    """
    bad = next((ch for ch in digits if ch not in "0123456789"), None)
    if bad is not None:
        raise ValueError(f"not a decimal digit: {bad!r}")
    if len(digits) < length:
        raise ValueError(
            f"need at least {length} digits, got {len(digits)}"
        )
    values = [int(ch) for ch in digits]
    windows = (values[start : start + length] for start in range(len(values) - length))
    return max((math.prod(window) for window in windows), default=0)


def pythagorean_triplet_product(total: int = 1000) -> Optional[int]:
    """Product a*b*c of the first triplet a <= b with a+b+c == total."""
    for a in range(1, total):
        for b in range(a, total - a):
            c = total - a - b
            if a * a + b * b == c * c:
                return a * b * c
    return None


def factorial_digit_sum(n: int = 100) -> int:
    """Sum of the decimal digits of ``n!``."""
    return sum(int(ch) for ch in str(math.factorial(n)))


def divisors(n: int) -> list[int]:
    """Proper divisors of ``n`` (every divisor below ``n``)."""
    return [i for i in range(1, n) if n % i == 0]


def amicable_sum(limit: int = 10000) -> int:
    """Sum of all amicable numbers found among ``1 .. limit - 1``."""
    sums = [0] * max(limit, 0)
    for i in range(1, limit):
        for multiple in range(2 * i, limit, i):
            sums[multiple] += i
    divisor_sums = {number: sums[number] for number in range(1, limit)}

    amicable: set[int] = set()
    for number, partner in divisor_sums.items():
        if partner != number and divisor_sums.get(partner) == number:
            amicable.update((number, partner))
    return sum(amicable)


def first_fibonacci_with_digits(digits: int = 1000) -> int:
    """Index of the first Fibonacci term beyond the second with ``digits`` digits."""
    index, previous, current = 2, 1, 1
    while True:
        following = previous + current
        index += 1
        if len(str(following)) >= digits:
            return index
        previous, current = current, following


def reverse_number(n: int) -> int:
    """Reverse the decimal digits of ``n``; leading zeros vanish."""
    return int(str(n)[::-1])


def is_lychrel(n: int, iterations: int = 50) -> bool:
    """True if reverse-and-add never yields a palindrome within ``iterations``."""
    for _ in range(iterations):
        n += reverse_number(n)
        if is_palindrome(n):
            return False
    return True


def count_lychrel(limit: int = 10000) -> int:
    """Number of Lychrel candidates below ``limit``."""
    return sum(1 for n in range(1, limit) if is_lychrel(n))


_SOLVERS: dict[int, Callable[[], Optional[int]]] = {
    1: sum_multiples_of_3_or_5,
    2: even_fibonacci_sum,
    3: largest_prime_factor,
    4: largest_palindrome_product,
    9: pythagorean_triplet_product,
    20: factorial_digit_sum,
    21: amicable_sum,
    25: first_fibonacci_with_digits,
    55: count_lychrel,
}

_PROBLEMS = sorted({*_SOLVERS, 8})


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Solve one problem and print its answer."""
    parser = argparse.ArgumentParser(
        prog="codedrills-euler", description="Solve a Project Euler problem."
    )
    parser.add_argument("problem", type=int, choices=_PROBLEMS)
    parser.add_argument(
        "--input",
        default="src/bin/problem8.txt",
        help="digit file for problem 8",
    )
    args = parser.parse_args(argv)

    if args.problem == 8:
        digits = read_digits(args.input)
        print(f"Parsed Input: {digits}")
        answer: Optional[int] = largest_adjacent_product(digits)
    else:
        answer = _SOLVERS[args.problem]()

    if answer is not None:
        print(f"Answer: {answer}")
    return 0