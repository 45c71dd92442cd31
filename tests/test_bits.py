import random

import pytest

from algokit.bits import (
    count_ones,
    count_within_distance,
    get_bit,
    hamming_distance,
    is_power_of_two,
    set_bit,
    single_unique,
    subsets,
    toggle_bit,
    two_uniques,
    update_bit,
)


@pytest.mark.parametrize("exp", range(0, 40))
def test_powers_of_two(exp):
    assert is_power_of_two(1 << exp) is True
    if exp >= 2:
        assert is_power_of_two((1 << exp) + 1) is False
        assert is_power_of_two((1 << exp) - 1) is False


def test_zero_counts_as_power_of_two():
    assert is_power_of_two(0) is True


def test_single_unique():
    pairs = [3, 8, 15, 42]
    data = pairs + [99] + pairs[::-1]
    assert single_unique(data) == 99


def test_single_unique_empty():
    with pytest.raises(ValueError):
        single_unique([])


@pytest.mark.parametrize("a,b", [(5, 9), (2, 7), (1, 64), (12, 13)])
def test_two_uniques(a, b):
    pairs = [4, 11, 30]
    data = pairs + [a] + pairs + [b]
    result = two_uniques(data)
    assert set(result) == {a, b}
    low = (a ^ b) & -(a ^ b)
    assert result[1] & low


def test_two_uniques_without_distinct_pair():
    with pytest.raises(ValueError):
        two_uniques([6, 6, 2, 2])
    with pytest.raises(ValueError):
        two_uniques([])


@pytest.mark.parametrize("n", [0, 1, 5, 170, 1023, 123456])
def test_get_set_toggle_agree_with_binary(n):
    for pos in range(20):
        assert get_bit(n, pos) == (n >> pos) & 1
        assert get_bit(set_bit(n, pos), pos) == 1
        assert toggle_bit(toggle_bit(n, pos), pos) == n
        assert get_bit(toggle_bit(n, pos), pos) == 1 - get_bit(n, pos)


def test_update_bit():
    n = 0b1011
    result = update_bit(n, 0, 2)
    assert get_bit(result, 0) == 0
    assert get_bit(result, 2) == 1
    assert get_bit(result, 1) == get_bit(n, 1)
    assert get_bit(result, 3) == get_bit(n, 3)


def test_count_ones_matches_bin():
    rng = random.Random(7)
    for _ in range(200):
        n = rng.randint(0, 1 << 48)
        assert count_ones(n) == bin(n).count("1")


def test_count_ones_negative():
    with pytest.raises(ValueError):
        count_ones(-1)


def test_hamming_distance():
    rng = random.Random(8)
    for _ in range(100):
        a, b = rng.randint(0, 5000), rng.randint(0, 5000)
        assert hamming_distance(a, b) == bin(a ^ b).count("1")
        assert hamming_distance(a, b) == hamming_distance(b, a)
        assert hamming_distance(a, a) == 0


def test_count_within_distance():
    values = [0, 1, 3, 7, 15]
    key = 0
    for k in range(5):
        expected = sum(1 for v in values if bin(v).count("1") <= k)
        assert count_within_distance(values, key, k) == expected


def test_subsets_order_and_size():
    values = [1, 2, 3]
    result = subsets(values)
    assert result == [[], [1], [2], [1, 2], [3], [1, 3], [2, 3], [1, 2, 3]]


def test_subsets_invariants():
    values = list("abcde")
    result = subsets(values)
    assert len(result) == 2 ** len(values)
    assert len({tuple(s) for s in result}) == len(result)
    assert result[0] == []
    assert result[-1] == values
    assert subsets([]) == [[]]