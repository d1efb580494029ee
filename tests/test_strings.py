from collections import Counter
from itertools import zip_longest

import pytest

from algodrills.strings import (
    build_array,
    convert,
    count_homogenous,
    count_palindromic_subsequence,
    find_different_binary_string,
    find_different_binary_string_by_search,
    int_to_roman,
    letter_combinations,
    longest_palindrome,
    my_atoi,
    remove_duplicate_letters,
    sort_vowels,
    winner_of_game,
)

_ROMAN_VALUES = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}
_VOWELS = set("aeiouAEIOU")


def _roman_value(text):
    total = 0
    for char, following in zip_longest(text, text[1:]):
        value = _ROMAN_VALUES[char]
        if following is not None and _ROMAN_VALUES[following] > value:
            total -= value
        else:
            total += value
    return total


def _is_subsequence(small, big):
    remaining = iter(big)
    return all(char in remaining for char in small)


def test_count_homogenous_distinct_neighbours():
    s = "abcabc"
    assert count_homogenous(s) == len(s)


def test_count_homogenous_adds_runs():
    assert count_homogenous("aaabb") == count_homogenous("aaa") + count_homogenous("bb")


def test_count_homogenous_is_reduced():
    result = count_homogenous("z" * 200_000)
    assert 0 <= result < 1_000_000_007
    assert result == count_homogenous("y" * 200_000)


@pytest.mark.parametrize(
    "nums",
    [["0"], ["01", "10"], ["00", "01"], ["111", "011", "001"], ["000", "001", "010"]],
)
def test_find_different_binary_string_is_new(nums):
    for finder in (find_different_binary_string, find_different_binary_string_by_search):
        result = finder(nums)
        assert len(result) == len(nums)
        assert result not in nums
        assert set(result) <= {"0", "1"}


def test_search_returns_smallest_missing():
    nums = ["000", "001", "011", "111"]
    result = find_different_binary_string_by_search(nums)
    assert result not in nums
    assert all(format(value, "03b") in nums for value in range(int(result, 2)))


def test_binary_string_of_nothing():
    assert find_different_binary_string([]) == find_different_binary_string_by_search([]) == ""


@pytest.mark.parametrize(
    "num, expected",
    [(4, "IV"), (40, "XL"), (400, "CD"), (1000, "M"), (5, "V"), (50, "L"), (500, "D")],
)
def test_int_to_roman_symbols(num, expected):
    assert int_to_roman(num) == expected


def test_int_to_roman_round_trip():
    for num in range(1, 4000):
        assert _roman_value(int_to_roman(num)) == num


def test_int_to_roman_zero_is_empty():
    assert int_to_roman(0) == ""


@pytest.mark.parametrize("num", [-1, 4000, 10_000])
def test_int_to_roman_out_of_range(num):
    with pytest.raises(ValueError):
        int_to_roman(num)


def test_letter_combinations_single_digit():
    assert letter_combinations("2") == list("abc")
    assert letter_combinations("9") == list("wxyz")


def test_letter_combinations_two_digits():
    result = letter_combinations("23")
    assert len(result) == len("abc") * len("def")
    assert len(set(result)) == len(result)
    assert result == sorted(result)
    assert all(first in "abc" and second in "def" for first, second in result)


def test_letter_combinations_empty_cases():
    assert letter_combinations("") == []
    assert letter_combinations("12") == []


def test_letter_combinations_rejects_zero():
    with pytest.raises(ValueError):
        letter_combinations("20")


@pytest.mark.parametrize("s", ["babad", "cbbd", "forgeeksskeegfor", "a", "abacdfgdcaba", "aaaa"])
def test_longest_palindrome_invariants(s):
    result = longest_palindrome(s)
    assert result == result[::-1]
    assert result in s
    longest = max(
        len(s[i:j])
        for i in range(len(s))
        for j in range(i + 1, len(s) + 1)
        if s[i:j] == s[i:j][::-1]
    )
    assert len(result) == longest


def test_longest_palindrome_keeps_first():
    s = "abc"
    assert longest_palindrome(s) == s[0]
    assert longest_palindrome("") == ""


def test_winner_of_game():
    assert winner_of_game("AAABB")
    assert not winner_of_game("ABBBA")
    assert not winner_of_game("")
    assert not winner_of_game("AB")


@pytest.mark.parametrize("colors", ["AAABBB", "AAAABBB", "ABABAB", "BBBBBAAAA", "A"])
def test_winner_of_game_not_both_sides(colors):
    swapped = colors.translate(str.maketrans("AB", "BA"))
    assert not (winner_of_game(colors) and winner_of_game(swapped))


def test_remove_duplicate_letters_example():
    assert remove_duplicate_letters("bcabc") == "abc"


@pytest.mark.parametrize("s", ["cbacdcbc", "abacb", "zyxzyx", "a", "leetcode"])
def test_remove_duplicate_letters_invariants(s):
    result = remove_duplicate_letters(s)
    assert sorted(result) == sorted(set(s))
    assert _is_subsequence(result, s)


def test_remove_duplicate_letters_empty():
    assert remove_duplicate_letters("") == ""


@pytest.mark.parametrize("s", ["lEetcOde", "lYmpH", "UuAaIiOoEe", "xyz"])
def test_sort_vowels_invariants(s):
    result = sort_vowels(s)
    assert len(result) == len(s)
    for original, changed in zip(s, result):
        assert (original in _VOWELS) == (changed in _VOWELS)
        if original not in _VOWELS:
            assert original == changed
    vowels = [char for char in result if char in _VOWELS]
    assert vowels == sorted(vowels)
    assert Counter(vowels) == Counter(char for char in s if char in _VOWELS)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("2147483647", 2147483647),
        ("-2147483648", -2147483648),
        ("91283472332", 2147483647),
        ("-91283472332", -2147483648),
        ("   -42", -42),
        ("4193 with words", 4193),
        ("words and 987", 0),
        ("+-12", 0),
        ("- 5", 0),
        ("  +7", 7),
        ("000123", 123),
    ],
)
def test_my_atoi(text, expected):
    assert my_atoi(text) == expected


@pytest.mark.parametrize("value", [0, 1, -1, 987654, -2147483648, 2147483647, 31337])
def test_my_atoi_round_trip(value):
    assert my_atoi(str(value)) == value


def test_count_palindromic_subsequence_inner_letters():
    middle = "bcd"
    assert count_palindromic_subsequence("a" + middle + "a") == len(set(middle))
    assert count_palindromic_subsequence("abcde") == count_palindromic_subsequence("")


def test_count_palindromic_subsequence_bound():
    s = "bbcbaba" * 5
    assert 0 < count_palindromic_subsequence(s) <= len(set(s)) ** 2


def test_convert_example():
    assert convert("PAYPALISHIRING", 3) == "PAHNAPLSIIGYIR"


@pytest.mark.parametrize("rows", [1, 2, 3, 4, 5, 14, 20])
def test_convert_is_permutation(rows):
    s = "PAYPALISHIRING"
    result = convert(s, rows)
    assert sorted(result) == sorted(s)


def test_convert_trivial_layouts():
    s = "ABCDEF"
    assert convert(s, 1) == s
    assert convert(s, len(s)) == s
    assert convert(s, 2) == s[0::2] + s[1::2]


def test_convert_rejects_no_rows():
    with pytest.raises(ValueError):
        convert("abc", 0)


def test_build_array_example():
    assert build_array([1, 3], 3) == ["Push", "Push", "Pop", "Push"]


@pytest.mark.parametrize(
    "target, n", [([1, 2, 3], 3), ([1, 2], 4), ([2, 5, 6], 8), ([4], 4)]
)
def test_build_array_replays_to_target(target, n):
    operations = build_array(target, n)
    stack = []
    numbers = iter(range(1, n + 1))
    for operation in operations:
        if operation == "Push":
            stack.append(next(numbers))
        else:
            assert operation == "Pop"
            stack.pop()
    assert stack == target
    assert operations.count("Push") == target[-1]