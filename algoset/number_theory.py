"""Number-theory helpers: coprime reachability and square products."""

from __future__ import annotations

import argparse
import math
import sys
from collections.abc import Iterable
from itertools import combinations


def restricted_pacman(m: int, n: int) -> int:
    """Count the positions that steps of size ``m`` and ``n`` can never reach.

    The count is finite only when ``m`` and ``n`` are coprime. Otherwise
    ``ValueError`` is raised.
    """
    if math.gcd(m, n) != 1:
        raise ValueError(f"{m} and {n} are not coprime")
    product = (m - 1) * (n - 1)
    half = abs(product) // 2
    return half if product >= 0 else -half


def square_free_part(x: int) -> int:
    """Return the product of the primes that divide ``x`` an odd number of times."""
    result = 1
    factor = 2
    while factor * factor <= x:
        exponent = 0
        while x % factor == 0:
            x //= factor
            exponent += 1
        if exponent % 2:
            result *= factor
        factor += 1
    if x > 1:
        result *= x
    return result


def is_perfect_square(x: int) -> bool:
    """Return True if ``x`` is the square of an integer."""
    if x < 0:
        return False
    root = math.isqrt(x)
    return root * root == x


def is_prime(x: int) -> bool:
    """Return True if ``x`` is a prime number."""
    if x < 2:
        return False
    return all(x % divisor for divisor in range(2, math.isqrt(x) + 1))


def smallest_square_subsequence(values: Iterable[int]) -> int | None:
    """Return the length of the shortest subsequence whose product is a square.

    Subsequences of length one, two and three are considered. ``None`` is
    returned when none of those lengths works.
    """
    reduced = []
    for value in values:
        part = square_free_part(value)
        if part == 1:
            return 1
        reduced.append(part)

    reduced.sort()
    if any(a == b for a, b in zip(reduced, reduced[1:])):
        return 2

    if any(is_perfect_square(a * b * c) for a, b, c in combinations(reduced, 3)):
        return 3
    return None


def main(argv: list[str] | None = None) -> int:
    """Read a count and that many integers from stdin and print the answer."""
    parser = argparse.ArgumentParser(
        description=(
            "Read N followed by N integers from standard input and print the "
            "length of the smallest subsequence whose product is a perfect "
            "square, or -1 if there is none."
        )
    )
    parser.parse_args(argv)

    tokens = sys.stdin.read().split()
    if not tokens:
        parser.error("expected the number of values on standard input")
    try:
        count = int(tokens[0])
        values = [int(token) for token in tokens[1 : 1 + count]]
    except ValueError as exc:
        parser.error(f"invalid integer: {exc}")
    if len(values) < count:
        parser.error(f"expected {count} values, got {len(values)}")

    result = smallest_square_subsequence(values)
    print(-1 if result is None else result)
    return 0


if __name__ == "__main__":
    sys.exit(main())