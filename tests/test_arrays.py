from itertools import combinations

import pytest

from algokit.arrays import (
    even_sum_triplets,
    first_repeated,
    longest_arithmetic_subarray,
    max_of_prefix,
    running_pair_sums,
    subarray_with_sum,
)


def test_whole_arithmetic_sequence():
    values = [1, 4, 7, 10, 13]
    assert longest_arithmetic_subarray(values) == len(values)


def test_longest_run_found_inside():
    run = list(range(0, 12, 3))
    values = [100, 50] + run + [1000]
    assert longest_arithmetic_subarray(values) == len(run) + 1 or (
        longest_arithmetic_subarray(values) >= len(run)
    )
    assert longest_arithmetic_subarray(run + [1000, -5]) == len(run)


def test_two_values_always_arithmetic():
    assert longest_arithmetic_subarray([5, -3]) == len([5, -3])


def test_arithmetic_needs_two_values():
    with pytest.raises(ValueError):
        longest_arithmetic_subarray([1])


def test_max_of_prefix():
    assert max_of_prefix([3, 9, 2, 11], 3) == 9
    assert max_of_prefix([3, 9, 2, 11], 4) == 11


def test_max_of_prefix_floor_is_zero():
    assert max_of_prefix([-4, -2], 2) == 0


def test_max_of_prefix_rejects_large_k():
    with pytest.raises(ValueError):
        max_of_prefix([1, 2], 3)


def _brute_triplets(values, left, right):
    window = values[left - 1:right]
    return sum(1 for t in combinations(window, 3) if sum(t) % 2 == 0)


def test_even_sum_triplets_match_enumeration():
    values = [1, 2, 3, 4, 5, 6, 7, 8, 10, 11]
    queries = [(1, 6), (2, 10), (3, 3), (1, 10), (4, 8)]
    expected = [_brute_triplets(values, l, r) for l, r in queries]
    assert even_sum_triplets(values, queries) == expected


def test_even_sum_triplets_rejects_bad_range():
    with pytest.raises(ValueError):
        even_sum_triplets([1, 2, 3], [(0, 2)])
    with pytest.raises(ValueError):
        even_sum_triplets([1, 2, 3], [(2, 4)])


def test_first_repeated_uses_order_of_values():
    values = [4, 2, 7, 2, 4, 4]
    assert first_repeated(values) == (4, values.count(4))


def test_first_repeated_skips_unique_prefix():
    values = [9, 5, 1, 5]
    assert first_repeated(values) == (5, values.count(5))


def test_first_repeated_none_for_distinct():
    assert first_repeated([1, 2, 3]) is None


def test_running_pair_sums_small():
    assert running_pair_sums([1, 2]) == [3]


def test_running_pair_sums_shape():
    values = [3, 1, 4, 1, 5]
    totals = running_pair_sums(values)
    n = len(values)
    assert len(totals) == n * (n - 1) // 2
    assert totals == sorted(totals)
    assert running_pair_sums([]) == []


def test_subarray_with_sum_sums_to_target():
    values = [1, 2, 3, 7, 5]
    start, end = subarray_with_sum(values, 12)
    assert sum(values[start - 1:end]) == 12
    assert end - start >= 1


def test_subarray_with_sum_first_pair():
    assert subarray_with_sum([4, 6, 1], 10) == (1, 2)


def test_subarray_with_sum_not_found():
    assert subarray_with_sum([1, 1, 1], 100) is None


def test_subarray_with_sum_needs_two_values():
    with pytest.raises(ValueError):
        subarray_with_sum([5], 5)