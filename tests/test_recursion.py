from itertools import combinations

import pytest

from algokit.recursion import (
    ascii_subsequences,
    down_and_up,
    is_sorted,
    replace_pi,
    reverse_string,
    spaced_combinations,
    subsequences,
    tower_of_hanoi,
)


def test_is_sorted_source_examples():
    assert is_sorted([1, 2, 3, 4, 5]) is True
    assert is_sorted([3, 4, 5, 1, 2]) is False


def test_is_sorted_trivial_cases():
    assert is_sorted([]) is True
    assert is_sorted([7]) is True
    assert is_sorted([2, 2, 2]) is True


def test_spaced_combinations_source_input():
    result = spaced_combinations("1214")
    assert len(result) == 8
    assert result[0] == "1 2 1 4"
    assert result[-1] == "1214"
    assert len(set(result)) == 8
    assert all(r.replace(" ", "") == "1214" for r in result)


def test_spaced_combinations_short():
    assert spaced_combinations("7") == ["7"]
    assert spaced_combinations("") == [""]


def test_subsequences_count_and_ends():
    result = subsequences("abcdabcd")
    assert len(result) == 256
    assert result[0] == ""
    assert result[-1] == "abcdabcd"


def test_subsequences_match_combinations():
    text = "abcd"
    expected = {
        "".join(c) for r in range(len(text) + 1) for c in combinations(text, r)
    }
    result = subsequences(text)
    assert set(result) == expected
    assert len(result) == len(expected)


def test_ascii_subsequences_source_input():
    result = ascii_subsequences("BA")
    assert len(result) == 9
    assert result[0] == ""
    assert result[-1] == "BA"
    assert "6665" in result
    assert "B65" in result
    assert "66A" in result


def test_down_and_up():
    result = down_and_up(4)
    assert result[:4] == [4, 3, 2, 1]
    assert result[4:] == [1, 2, 3, 4]
    assert down_and_up(0) == []


def test_down_and_up_negative():
    with pytest.raises(ValueError):
        down_and_up(-1)


def test_replace_pi_source_input():
    assert replace_pi("pippxxppiixipi") == "3.14ppxxp3.14ixi3.14"


def test_replace_pi_without_pi():
    assert replace_pi("xyz") == "xyz"
    assert replace_pi("") == ""


def test_reverse_string_source_input():
    assert reverse_string("kuchipuddi") == "iddupihcuk"


def test_reverse_string_round_trip():
    text = "recursion"
    assert reverse_string(reverse_string(text)) == text


@pytest.mark.parametrize("n", [1, 2, 3, 5])
def test_tower_of_hanoi_solves_puzzle(n):
    moves = tower_of_hanoi(n)
    assert len(moves) == 2**n - 1
    pegs = {"A": list(range(n, 0, -1)), "B": [], "C": []}
    for src, dst in moves:
        disc = pegs[src].pop()
        assert not pegs[dst] or pegs[dst][-1] > disc
        pegs[dst].append(disc)
    assert pegs["C"] == list(range(n, 0, -1))
    assert pegs["A"] == [] and pegs["B"] == []


def test_tower_of_hanoi_single_move():
    assert tower_of_hanoi(1) == [("A", "C")]
    assert tower_of_hanoi(0) == []