"""String and score puzzles."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import accumulate


def _counted_stages(stages: int) -> int:
    return stages - stages // 4


def min_extra_stages(ours: Sequence[int], theirs: Sequence[int]) -> int:
    """Return how many more stages are needed for our total to catch up.

    Each stage scores 0..100; the total counts the best ``k - k // 4`` of
    ``k`` stages. In every extra stage we score 100 and the rival scores 0.
    """
    n = len(ours)
    if n == 0 or len(theirs) != n:
        raise ValueError("score lists must be non-empty and of equal length")
    mine = list(accumulate(sorted(ours, reverse=True)))
    rival = list(accumulate(sorted(theirs, reverse=True)))
    k = _counted_stages(n)
    if mine[k - 1] >= rival[k - 1]:
        return 0
    ours_total, theirs_total = mine[k - 1], rival[k - 1]
    extra = 0
    while ours_total < theirs_total:
        extra += 1
        k = _counted_stages(n + extra)
        index = k - 1 - extra
        ours_total = (mine[index] if index >= 0 else mine[0]) + 100 * extra
        theirs_total = rival[-1] if k > n else rival[k - 1]
    return extra


def max_pawns_reaching(enemy: str, ours: str) -> int:
    """Count our pawns that reach the enemy row.

    Both rows are strings of '0' and '1'. A pawn moves straight up into an
    empty cell or captures an enemy pawn diagonally; each target is used once.
    """
    n = len(enemy)
    if n < 2 or len(ours) != n:
        raise ValueError("rows must be of equal length, at least 2")
    row = list(enemy)
    reached = 0

    def take(index: int, wanted: str) -> bool:
        nonlocal reached
        if row[index] == wanted:
            row[index] = "2"
            reached += 1
            return True
        return False

    if ours[0] == "1":
        take(1, "1") or take(0, "0")
    for i in range(1, n - 1):
        if ours[i] == "1":
            take(i - 1, "1") or take(i + 1, "1") or take(i, "0")
    if ours[n - 1] == "1":
        take(n - 2, "1") or take(n - 1, "0")
    return reached


def is_palindrome(text: str) -> bool:
    """Return True when ``text`` reads the same backwards."""
    return text == text[::-1]