"""Array puzzles: runs, prefixes, range queries and two-pointer scans."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from itertools import accumulate


def longest_arithmetic_subarray(values: Sequence[int]) -> int:
    """Return the length of the longest contiguous arithmetic run.

    Any two neighbours form a run, so the answer is at least 2.
    """
    if len(values) < 2:
        raise ValueError("need at least two values")
    diffs = [b - a for a, b in zip(values, values[1:])]
    best = run = 1
    for previous, current in zip(diffs, diffs[1:]):
        run = run + 1 if current == previous else 1
        best = max(best, run)
    return best + 1


def max_of_prefix(values: Sequence[int], k: int) -> int:
    """Return the largest of the first ``k`` values, never less than 0."""
    if not 0 <= k <= len(values):
        raise ValueError(f"k must be between 0 and {len(values)}")
    return max(0, *values[:k]) if k else 0


def even_sum_triplets(
    values: Sequence[int], queries: Iterable[tuple[int, int]]
) -> list[int]:
    """For each 1-based inclusive range, count triples with an even sum.

    A triple sums to an even number when it holds three even values, or
    one even value and two odd ones.
    """
    evens = [0, *accumulate(1 if v % 2 == 0 else 0 for v in values)]
    n = len(values)
    answers = []
    for left, right in queries:
        if not 1 <= left <= right <= n:
            raise ValueError(f"query ({left}, {right}) is outside 1..{n}")
        e = evens[right] - evens[left - 1]
        o = (right - left + 1) - e
        answers.append(e * (e - 1) * (e - 2) // 6 + o * (o - 1) // 2 * e)
    return answers


def first_repeated(values: Sequence[int]) -> tuple[int, int] | None:
    """Return the earliest value that occurs more than once, with its count.

    Returns None when every value is distinct.
    """
    counts = Counter(values)
    return next(((v, counts[v]) for v in values if counts[v] > 1), None)


def running_pair_sums(values: Sequence[int]) -> list[int]:
    """Return the running totals produced by the nested pair accumulation.

    A single accumulator ``s`` grows by ``values[i]`` on each outer step and
    by ``values[j]`` on each inner step (``j > i``); after each inner step the
    total ``k`` grows by ``s`` and is recorded.
    """
    s = k = 0
    totals = []
    for i, outer in enumerate(values):
        s += outer
        for inner in values[i + 1:]:
            s += inner
            k += s
            totals.append(k)
    return totals


def subarray_with_sum(values: Sequence[int], target: int) -> tuple[int, int] | None:
    """Find a run of at least two values adding up to ``target``.

    Returns 1-based inclusive ``(start, end)`` positions, or None.
    """
    n = len(values)
    if n < 2:
        raise ValueError("need at least two values")
    for start in range(n - 1):
        end = start + 1
        total = values[start] + values[end]
        while total < target and end + 1 < n:
            end += 1
            total += values[end]
        if total == target:
            return start + 1, end + 1
    return None