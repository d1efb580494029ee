"""Array problems solved by sorting or by working on sorted input."""

from __future__ import annotations

from bisect import insort_right
from collections.abc import Sequence
from itertools import accumulate, groupby


def search_range(nums: Sequence[int], target: int) -> list[int]:
    """Return the first and last index of target in sorted nums, or [-1, -1]."""
    n = len(nums)
    left, right = 0, n - 1
    index = -1
    while left <= right:
        middle = (left + right) // 2
        value = nums[middle]
        if value == target:
            index = middle
            break
        if value < target:
            left = middle + 1
        else:
            right = middle - 1
    if index == -1:
        return [-1, -1]

    reach = n // 2
    start = next(
        (j for j in range(max(0, index - reach), index) if nums[j] == target),
        index,
    )
    end = next(
        (j for j in range(min(n - 1, index + reach), index, -1) if nums[j] == target),
        index,
    )
    return [start, end]


def sort_array(nums: Sequence[int]) -> list[int]:
    """Return nums in ascending order, built by binary insertion."""
    result: list[int] = []
    for value in nums:
        insort_right(result, value)
    return result


def find_score(nums: Sequence[int]) -> int:
    """Repeatedly take the smallest unmarked value, marking it and its neighbours."""
    n = len(nums)
    marked = [False] * n
    score = 0
    for value, index in sorted((value, index) for index, value in enumerate(nums)):
        if marked[index]:
            continue
        score += value
        for neighbour in (index - 1, index, index + 1):
            if 0 <= neighbour < n:
                marked[neighbour] = True
    return score


def eliminate_maximum(dist: Sequence[int], speed: Sequence[int]) -> int:
    """Count the monsters shot, one per minute, before any of them arrives."""
    arrivals = sorted(-(-distance // pace) for distance, pace in zip(dist, speed))
    return next(
        (minute for minute, arrival in enumerate(arrivals) if arrival <= minute),
        len(arrivals),
    )


def maximum_element_after_decrementing_and_rearranging(arr: Sequence[int]) -> int:
    """Return the largest value reachable when the array starts at 1 and steps by at most 1."""
    best = 1
    for value in sorted(arr)[1:]:
        if value >= best + 1:
            best += 1
    return best


def max_coins(piles: Sequence[int]) -> int:
    """Return the coins collected by always taking the second largest of each triple."""
    ordered = sorted(piles)
    n = len(ordered)
    return sum(ordered[n - 2 - 2 * turn] for turn in range(n // 3))


def min_pair_sum(nums: Sequence[int]) -> int:
    """Return the smallest possible maximum pair sum when nums is split into pairs."""
    if len(nums) < 2:
        raise ValueError("at least two numbers are needed to form a pair")
    ordered = sorted(nums)
    half = len(ordered) // 2
    return max(low + high for low, high in zip(ordered[:half], reversed(ordered)))


def reduction_operations(nums: Sequence[int]) -> int:
    """Count the steps that lower the largest value to the next one until all are equal."""
    counts = [len(list(run)) for _, run in groupby(sorted(nums))]
    operations = 0
    above = 0
    for count in reversed(counts[1:]):
        above += count
        operations += above
    return operations


def max_frequency(nums: Sequence[int], k: int) -> int:
    """Return the highest frequency of one value after at most k increments."""
    ordered = sorted(nums)
    window_total = 0
    start = 0
    for end, value in enumerate(ordered):
        window_total += value
        if value * (end - start + 1) - window_total > k:
            window_total -= ordered[start]
            start += 1
    return len(ordered) - start


def get_sum_absolute_differences(nums: Sequence[int]) -> list[int]:
    """For each element of sorted nums, sum its absolute differences to all others."""
    n = len(nums)
    prefix = list(accumulate(nums))
    total = prefix[-1] if prefix else 0
    return [
        (i + 1) * value - prefix[i] + (total - prefix[i]) - (n - i - 1) * value
        for i, value in enumerate(nums)
    ]