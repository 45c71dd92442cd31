"""Number theory and matrix helpers."""

from __future__ import annotations

from collections.abc import Sequence
from math import gcd, isqrt

Matrix = list[list[int]]


def interesting_count(n: int) -> int:
    """Count x in 1..n whose digit sum drops from x to x + 1.

    Those are exactly the numbers ending in 9.
    """
    sign = -1 if n < 0 else 1
    tens, last = divmod(abs(n), 10)
    count = sign * tens
    return count + 1 if last == 9 else count


def min_ops_for_gcd(a: int, b: int) -> int:
    """Return the fewest increments of a or b making gcd(a, b) exceed 1."""
    if gcd(a, b) > 1:
        return 0
    if a % 2 != b % 2:
        return 1
    if gcd(a + 1, b) > 1 or gcd(a, b + 1) > 1:
        return 1
    return 2


def matrix_multiply(a: Sequence[Sequence[int]], b: Sequence[Sequence[int]]) -> Matrix:
    """Return the matrix product ``a @ b``."""
    if not a or not b:
        raise ValueError("matrices must not be empty")
    inner = len(b)
    if any(len(row) != inner for row in a):
        raise ValueError("column count of a must equal row count of b")
    columns = list(zip(*b))
    return [[sum(x * y for x, y in zip(row, col)) for col in columns] for row in a]


def matrix_power(matrix: Sequence[Sequence[int]], n: int) -> Matrix:
    """Raise a square matrix to the non-negative power ``n`` by squaring."""
    if n < 0:
        raise ValueError("n must be non-negative")
    size = len(matrix)
    if size == 0 or any(len(row) != size for row in matrix):
        raise ValueError("matrix must be square and non-empty")
    result: Matrix = [[int(i == j) for j in range(size)] for i in range(size)]
    base: Matrix = [list(row) for row in matrix]
    while n:
        if n % 2:
            result = matrix_multiply(result, base)
            n -= 1
        else:
            base = matrix_multiply(base, base)
            n //= 2
    return result


def sieve(n: int) -> list[int]:
    """Return all primes up to and including ``n``."""
    if n < 2:
        return []
    is_prime = [True] * (n + 1)
    is_prime[0] = is_prime[1] = False
    for p in range(2, isqrt(n) + 1):
        if is_prime[p]:
            is_prime[p * p::p] = [False] * len(range(p * p, n + 1, p))
    return [p for p, flag in enumerate(is_prime) if flag]