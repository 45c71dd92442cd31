"""Small recursive exercises on sequences and strings."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from itertools import pairwise
from typing import Any


def is_sorted(values: Sequence[Any]) -> bool:
    """Return True when ``values`` is in non-decreasing order."""
    return all(a <= b for a, b in pairwise(values))


def _spaced(text: str) -> Iterator[str]:
    if len(text) <= 1:
        yield text
        return
    for separator in (" ", ""):
        for tail in _spaced(text[1:]):
            yield text[0] + separator + tail


def spaced_combinations(text: str) -> list[str]:
    """Return ``text`` with every choice of a space or nothing between characters.

    Choices with a space come before those without at each gap.
    """
    return list(_spaced(text))


def _subsequences(rest: str, built: str) -> Iterator[str]:
    if not rest:
        yield built
        return
    yield from _subsequences(rest[1:], built)
    yield from _subsequences(rest[1:], built + rest[0])


def subsequences(text: str) -> list[str]:
    """Return all 2**n subsequences, leaving a character out before taking it."""
    return list(_subsequences(text, ""))


def _ascii_subsequences(rest: str, built: str) -> Iterator[str]:
    if not rest:
        yield built
        return
    ch, tail = rest[0], rest[1:]
    yield from _ascii_subsequences(tail, built)
    yield from _ascii_subsequences(tail, built + str(ord(ch)))
    yield from _ascii_subsequences(tail, built + ch)


def ascii_subsequences(text: str) -> list[str]:
    """Return subsequences where each character is left out, written as its code, or kept."""
    return list(_ascii_subsequences(text, ""))


def down_and_up(n: int) -> list[int]:
    """Return ``n`` down to 1, then 1 up to ``n``, as printed around one recursion."""
    if n < 0:
        raise ValueError("n must be non-negative")
    if n == 0:
        return []
    return [n, *down_and_up(n - 1), n]


def replace_pi(text: str) -> str:
    """Replace every ``pi``, scanning left to right, with ``3.14``."""
    if not text:
        return ""
    if text.startswith("pi"):
        return "3.14" + replace_pi(text[2:])
    return text[0] + replace_pi(text[1:])


def reverse_string(text: str) -> str:
    """Return ``text`` reversed."""
    if not text:
        return ""
    return reverse_string(text[1:]) + text[0]


def tower_of_hanoi(
    n: int, source: str = "A", target: str = "C", spare: str = "B"
) -> list[tuple[str, str]]:
    """Return the moves, as (from, to) pegs, carrying ``n`` discs to ``target``."""
    if n < 0:
        raise ValueError("n must be non-negative")
    if n == 0:
        return []
    return [
        *tower_of_hanoi(n - 1, source, spare, target),
        (source, target),
        *tower_of_hanoi(n - 1, spare, target, source),
    ]