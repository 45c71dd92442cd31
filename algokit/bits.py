"""Bit manipulation helpers."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from functools import reduce
from operator import xor
from typing import Any


def is_power_of_two(n: int) -> bool:
    """Return True when ``n & (n - 1)`` is zero; zero counts as True."""
    return not (n & (n - 1))


def single_unique(values: Iterable[int]) -> int:
    """Return the one value that is not repeated when all others occur twice."""
    items = list(values)
    if not items:
        raise ValueError("values must not be empty")
    return reduce(xor, items)


def _lowest_set_bit(n: int) -> int:
    return (n & -n).bit_length() - 1


def two_uniques(values: Iterable[int]) -> tuple[int, int]:
    """Return the two values that occur once when all others occur twice.

    The second element is the one with the lowest differing bit set.
    """
    items = list(values)
    if not items:
        raise ValueError("values must not be empty")
    combined = reduce(xor, items)
    if combined == 0:
        raise ValueError("values hold no two distinct unique numbers")
    mask = 1 << _lowest_set_bit(combined)
    with_bit = reduce(xor, (v for v in items if v & mask), 0)
    return combined ^ with_bit, with_bit


def get_bit(n: int, pos: int) -> int:
    """Return 1 if bit ``pos`` of ``n`` is set, else 0."""
    if pos < 0:
        raise ValueError("pos must be non-negative")
    shifted = n >> pos
    return shifted & 1


def set_bit(n: int, pos: int) -> int:
    """Return ``n`` with bit ``pos`` set."""
    return n | (1 << pos)


def toggle_bit(n: int, pos: int) -> int:
    """Return ``n`` with bit ``pos`` flipped."""
    return n ^ (1 << pos)


def update_bit(n: int, clear_pos: int, set_pos: int) -> int:
    """Return ``n`` with bit ``clear_pos`` cleared, then bit ``set_pos`` set."""
    return (n & ~(1 << clear_pos)) | (1 << set_pos)


def count_ones(n: int) -> int:
    """Count set bits of a non-negative integer."""
    if n < 0:
        raise ValueError("n must be non-negative")
    count = 0
    while n:
        n &= n - 1
        count += 1
    return count


def hamming_distance(a: int, b: int) -> int:
    """Return the number of bit positions in which ``a`` and ``b`` differ."""
    return count_ones(a ^ b)


def count_within_distance(values: Iterable[int], key: int, k: int) -> int:
    """Count values differing from ``key`` in at most ``k`` bits."""
    return sum(1 for v in values if hamming_distance(v, key) <= k)


def subsets(values: Sequence[Any]) -> list[list[Any]]:
    """Return every subset of ``values``, ordered by bitmask 0 .. 2**n - 1."""
    n = len(values)
    return [[values[j] for j in range(n) if mask & (1 << j)] for mask in range(1 << n)]