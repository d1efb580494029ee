"""String problems: counting, building, rearranging and parsing text."""

from __future__ import annotations

import re
from collections.abc import Sequence
from itertools import groupby, product, zip_longest

_MOD = 1_000_000_007
_INT32_MAX = 2**31 - 1
_INT32_MIN = -(2**31)

_KEYPAD = {
    "1": "",
    "2": "abc",
    "3": "def",
    "4": "ghi",
    "5": "jkl",
    "6": "mno",
    "7": "pqrs",
    "8": "tuv",
    "9": "wxyz",
}

# One and five symbols for units, tens, hundreds; thousands only have a one.
_ROMAN_PLACES = ("IV", "XL", "CD", "M")

_VOWELS = frozenset("aeiouAEIOU")

# Leading spaces, then an optional sign that must be followed directly by digits.
_ATOI_PATTERN = re.compile(r" *([+-]?[0-9]+)")


def count_homogenous(s: str) -> int:
    """Count the substrings made of a single repeated character, modulo 1e9+7."""
    total = 0
    for _, run in groupby(s):
        length = sum(1 for _ in run)
        total = (total + length * (length + 1) // 2) % _MOD
    return total


def find_different_binary_string(nums: Sequence[str]) -> str:
    """Return a binary string of length len(nums) that differs from each one on the diagonal."""
    return "".join("1" if row[index] == "0" else "0" for index, row in enumerate(nums))


def find_different_binary_string_by_search(nums: Sequence[str]) -> str:
    """Return the smallest binary string of length len(nums) that is not among nums."""
    n = len(nums)
    if n == 0:
        return ""
    taken = {int(row[:n], 2) for row in nums}
    for value in range(2**n):
        if value not in taken:
            return format(value, f"0{n}b")
    raise ValueError("every binary string of that length is taken")


def int_to_roman(num: int) -> str:
    """Write num, between 0 and 3999, in Roman numerals (0 gives an empty string)."""
    if not 0 <= num <= 3999:
        raise ValueError("num must lie between 0 and 3999")
    digits = str(num)
    parts: list[str] = []
    for offset, char in enumerate(digits):
        place = len(digits) - 1 - offset
        digit = int(char)
        one = _ROMAN_PLACES[place][0]
        if digit == 9:
            parts.append(one + _ROMAN_PLACES[place + 1][0])
        elif digit >= 5:
            parts.append(_ROMAN_PLACES[place][1] + one * (digit - 5))
        elif digit == 4:
            parts.append(one + _ROMAN_PLACES[place][1])
        else:
            parts.append(one * digit)
    return "".join(parts)


def letter_combinations(digits: str) -> list[str]:
    """Return every letter string the phone keypad digits can spell, in keypad order."""
    if not digits:
        return []
    try:
        groups = [_KEYPAD[digit] for digit in digits]
    except KeyError as error:
        raise ValueError(f"digit {error.args[0]!r} has no letters on the keypad") from None
    return ["".join(letters) for letters in product(*groups)]


def _expand(s: str, left: int, right: int) -> tuple[int, int]:
    while left >= 0 and right < len(s) and s[left] == s[right]:
        left -= 1
        right += 1
    return left + 1, right - 1


def longest_palindrome(s: str) -> str:
    """Return the first longest palindromic substring of s."""
    best = ""
    for centre in range(len(s)):
        for left, right in (_expand(s, centre, centre), _expand(s, centre, centre + 1)):
            if right - left + 1 > len(best):
                best = s[left:right + 1]
    return best


def winner_of_game(colors: str) -> bool:
    """Tell whether Alice wins the game of removing pieces flanked by their own colour."""
    alice = bob = 0
    for before, piece, after in zip(colors, colors[1:], colors[2:]):
        if before == piece == after:
            if piece == "A":
                alice += 1
            elif piece == "B":
                bob += 1
    return alice > bob


def remove_duplicate_letters(s: str) -> str:
    """Keep one of each letter so that the result is the smallest in lexicographic order."""
    last_index = {char: index for index, char in enumerate(s)}
    stack: list[str] = []
    kept: set[str] = set()
    for index, char in enumerate(s):
        if char in kept:
            continue
        while stack and char < stack[-1] and index < last_index[stack[-1]]:
            kept.discard(stack.pop())
        stack.append(char)
        kept.add(char)
    return "".join(stack)


def sort_vowels(s: str) -> str:
    """Sort the vowels of s by character code, leaving every other character in place."""
    vowels = iter(sorted(char for char in s if char in _VOWELS))
    return "".join(next(vowels) if char in _VOWELS else char for char in s)


def my_atoi(s: str) -> int:
    """Read a signed 32-bit integer from the start of s, clamping values out of range."""
    match = _ATOI_PATTERN.match(s)
    if match is None:
        return 0
    value = int(match.group(1))
    return max(_INT32_MIN, min(_INT32_MAX, value))


def count_palindromic_subsequence(s: str) -> int:
    """Count the distinct palindromes of length three that are subsequences of s."""
    return sum(len(set(s[s.index(char) + 1:s.rindex(char)])) for char in set(s))


def convert(s: str, num_rows: int) -> str:
    """Write s in a zigzag over num_rows rows and read it back row by row."""
    if num_rows < 1:
        raise ValueError("num_rows must be at least 1")
    gap = max(1, 2 * num_rows - 2)
    rows: list[str] = []
    for row in range(num_rows):
        if row in (0, num_rows - 1):
            rows.append(s[row::gap])
        else:
            rows.extend(
                down + (up or "")
                for down, up in zip_longest(s[row::gap], s[gap - row::gap])
            )
    return "".join(rows)


def build_array(target: Sequence[int], n: int) -> list[str]:
    """Return the Push and Pop operations that leave target on a stack, reading 1..n."""
    operations: list[str] = []
    wanted_values = iter(target)
    wanted = next(wanted_values, None)
    for number in range(1, n + 1):
        if wanted is None:
            break
        operations.append("Push")
        if number == wanted:
            wanted = next(wanted_values, None)
        else:
            operations.append("Pop")
    return operations