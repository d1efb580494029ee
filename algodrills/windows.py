"""Problems solved with two pointers or sliding windows."""

from __future__ import annotations

from collections.abc import Sequence

_VOWELS = frozenset("aeiou")


def max_area(height: Sequence[int]) -> int:
    """Return the most water two of the vertical lines can hold."""
    left, right = 0, len(height) - 1
    best = 0
    while left < right:
        best = max(best, (right - left) * min(height[left], height[right]))
        if height[left] < height[right]:
            left += 1
        else:
            right -= 1
    return best


def number_of_subarrays(nums: Sequence[int], k: int) -> int:
    """Count the subarrays that hold exactly k odd numbers."""
    if k < 1:
        raise ValueError("k must be at least 1")
    n = len(nums)
    odds = [-1, *(i for i, value in enumerate(nums) if value % 2 == 1), n]
    return sum(
        (odds[w] - odds[w - 1]) * (odds[w + k] - odds[w + k - 1])
        for w in range(1, len(odds) - k)
    )


def max_satisfied(customers: Sequence[int], grumpy: Sequence[int], minutes: int) -> int:
    """Return the most satisfied customers when the owner holds back for `minutes` minutes."""
    n = len(customers)
    if not 1 <= minutes <= n:
        raise ValueError("minutes must lie between 1 and the number of customers")
    base = sum(count for count, mood in zip(customers, grumpy) if mood != 1)
    gains = [count if mood == 1 else 0 for count, mood in zip(customers, grumpy)]
    window = sum(gains[:minutes])
    best = window
    for leaving, entering in zip(gains, gains[minutes:]):
        window += entering - leaving
        best = max(best, window)
    return base + best


def max_vowels(s: str, k: int) -> int:
    """Return the most vowels found in any substring of length k."""
    count = sum(char in _VOWELS for char in s[:k])
    best = count
    for leaving, entering in zip(s, s[k:]):
        count += (entering in _VOWELS) - (leaving in _VOWELS)
        best = max(best, count)
    return best


def _most_in_window(nums: Sequence[int], size: int, target: int) -> int:
    if size == 0:
        return 0
    count = sum(value == target for value in nums[:size])
    best = count
    for leaving, entering in zip(nums, nums[size:]):
        count += (entering == target) - (leaving == target)
        best = max(best, count)
    return best


def min_swaps(nums: Sequence[int]) -> int:
    """Return the fewest swaps that gather all ones together in the circular array."""
    zeros = sum(value == 0 for value in nums)
    ones = len(nums) - zeros
    return min(
        zeros - _most_in_window(nums, zeros, 0),
        ones - _most_in_window(nums, ones, 1),
    )


def length_of_longest_substring(s: str) -> int:
    """Return the length of the longest substring without a repeated character."""
    last_seen: dict[str, int] = {}
    start = 0
    best = 0
    for index, char in enumerate(s):
        if last_seen.get(char, -1) >= start:
            start = last_seen[char] + 1
        last_seen[char] = index
        best = max(best, index - start + 1)
    return best