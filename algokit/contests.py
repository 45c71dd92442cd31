"""Solutions to assorted contest problems."""

from __future__ import annotations

from bisect import bisect_left
from collections import deque
from collections.abc import Iterable, Sequence


def badge_students(parents: Sequence[int]) -> list[int]:
    """For each starting student, return who receives the second hole.

    ``parents[i - 1]`` is the 1-based student that student ``i`` blames.
    """
    n = len(parents)
    if any(not 1 <= p <= n for p in parents):
        raise ValueError(f"every parent must be between 1 and {n}")
    results = []
    for start in range(1, n + 1):
        visited = {start}
        node = parents[start - 1]
        while True:
            visited.add(node)
            nxt = parents[node - 1]
            if nxt in visited:
                results.append(nxt)
                break
            node = nxt
    return results


def closest_pair_with_sum(
    prices: Iterable[int], budget: int
) -> tuple[int, int] | None:
    """Return two prices adding up to ``budget`` with the smallest gap.

    The pair is returned in ascending order, or None if there is none.
    """
    items = sorted(prices)
    best: tuple[int, int] | None = None
    for i, price in enumerate(items[:-1]):
        if price > budget:
            break
        wanted = budget - price
        j = bisect_left(items, wanted, i + 1)
        if j < len(items) and items[j] == wanted:
            if best is None or wanted - price < best[1] - best[0]:
                best = (price, wanted)
    return best


def rank_qualifiers(
    min_score: int, entries: Iterable[tuple[str, int]]
) -> list[tuple[str, int]]:
    """Return entries scoring at least ``min_score``.

    Ordered by score descending, then by name ascending.
    """
    ranked = sorted(entries, key=lambda entry: (-entry[1], entry[0]))
    return [entry for entry in ranked if entry[1] >= min_score]


def sliding_window_max(values: Sequence[int], k: int) -> list[int]:
    """Return the maximum of every window of ``k`` consecutive values."""
    if not 1 <= k <= len(values):
        raise ValueError(f"k must be between 1 and {len(values)}")
    window: deque[int] = deque()
    result = []
    for i, value in enumerate(values):
        if window and window[0] <= i - k:
            window.popleft()
        while window and value > values[window[-1]]:
            window.pop()
        window.append(i)
        if i >= k - 1:
            result.append(values[window[0]])
    return result


def unique_permutations(text: str) -> list[str]:
    """Return every distinct permutation of ``text`` in lexicographic order."""
    results: list[str] = []

    def walk(rest: str, built: str) -> None:
        if not rest:
            results.append(built)
            return
        for i, ch in enumerate(rest):
            if ch in rest[i + 1:]:
                continue
            walk(rest[:i] + rest[i + 1:], built + ch)

    walk("".join(sorted(text)), "")
    return results