"""Binary searches over sorted sequences."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


def binary_search(values: Sequence[Any], target: Any) -> int:
    """Return an index holding ``target`` in sorted ``values``, or -1."""
    low, high = 0, len(values) - 1
    while low <= high:
        mid = low + (high - low) // 2
        if values[mid] == target:
            return mid
        if values[mid] > target:
            high = mid - 1
        else:
            low = mid + 1
    return -1


def first_occurrence(values: Sequence[Any], target: Any) -> int:
    """Return the lowest index of ``target`` in sorted ``values``, or -1."""
    low, high, found = 0, len(values) - 1, -1
    while low <= high:
        mid = low + (high - low) // 2
        if values[mid] > target:
            high = mid - 1
        elif values[mid] < target:
            low = mid + 1
        else:
            found = mid
            high = mid - 1
    return found


def last_occurrence(values: Sequence[Any], target: Any) -> int:
    """Return the highest index of ``target`` in sorted ``values``, or -1."""
    low, high, found = 0, len(values) - 1, -1
    while low <= high:
        mid = low + (high - low) // 2
        if values[mid] > target:
            high = mid - 1
        elif values[mid] < target:
            low = mid + 1
        else:
            found = mid
            low = mid + 1
    return found


def count_occurrences(values: Sequence[Any], target: Any) -> int:
    """Return how many times ``target`` occurs in sorted ``values``."""
    first = first_occurrence(values, target)
    if first == -1:
        return 0
    return last_occurrence(values, target) - first + 1