"""Assorted array problems: patterns, voting, reconstruction and simulation."""

from __future__ import annotations

import math
from collections import Counter, defaultdict, deque
from collections.abc import Sequence
from itertools import accumulate, pairwise

_MOD = 1_000_000_007


def find_132_pattern(nums: Sequence[int]) -> bool:
    """Tell whether indices i < j < k exist with nums[i] < nums[k] < nums[j]."""
    if len(nums) < 3:
        return False
    k_number = -math.inf
    stack: list[int] = []
    for number in reversed(nums):
        if number < k_number:
            return True
        while stack and stack[-1] < number:
            k_number = stack.pop()
        stack.append(number)
    return False


def majority_element(nums: Sequence[int]) -> list[int]:
    """Return the values that occur more than len(nums) // 3 times."""
    first, second = 0, 1
    first_count = second_count = 0
    for value in nums:
        if first_count == 0 and value != second:
            first, first_count = value, 1
        elif second_count == 0 and value != first:
            second, second_count = value, 1
        elif value == first:
            first_count += 1
        elif value == second:
            second_count += 1
        else:
            first_count -= 1
            second_count -= 1

    counts = Counter(nums)
    threshold = len(nums) // 3
    return [candidate for candidate in (first, second) if counts[candidate] > threshold]


def _is_arithmetic(values: Sequence[int]) -> bool:
    steps = {later - earlier for earlier, later in pairwise(sorted(values))}
    return len(steps) <= 1


def check_arithmetic_subarrays(
    nums: Sequence[int], l: Sequence[int], r: Sequence[int]
) -> list[bool]:
    """For each range [l[i], r[i]], tell whether its values can form an arithmetic sequence."""
    return [_is_arithmetic(nums[start:end + 1]) for start, end in zip(l, r)]


def find_diagonal_order(nums: Sequence[Sequence[int]]) -> list[int]:
    """Read a ragged grid along its anti-diagonals, each from bottom to top."""
    diagonals: defaultdict[int, list[int]] = defaultdict(list)
    for row_index in range(len(nums) - 1, -1, -1):
        for column_index, value in enumerate(nums[row_index]):
            diagonals[row_index + column_index].append(value)
    return [value for key in sorted(diagonals) for value in diagonals[key]]


def find_array(pref: Sequence[int]) -> list[int]:
    """Recover the array whose running XOR gives pref."""
    result: list[int] = []
    mask = 0
    for prefix in pref:
        value = prefix ^ mask
        result.append(value)
        mask ^= value
    return result


def restore_array(adjacent_pairs: Sequence[Sequence[int]]) -> list[int]:
    """Rebuild an array of distinct values from every pair of neighbours in it."""
    neighbours: defaultdict[int, list[int]] = defaultdict(list)
    for a, b in adjacent_pairs:
        neighbours[a].append(b)
        neighbours[b].append(a)
    start = next((value for value in sorted(neighbours) if len(neighbours[value]) == 1), None)
    if start is None:
        return []

    result: list[int] = []
    visited: set[int] = set()
    queue = deque([start])
    while queue:
        value = queue.popleft()
        visited.add(value)
        result.append(value)
        queue.extend(other for other in neighbours[value] if other not in visited)
    return result


def get_winner(arr: Sequence[int], k: int) -> int:
    """Return the value that first wins k rounds in a row of the array game."""
    if not arr:
        raise ValueError("the array must not be empty")
    if k >= len(arr):
        return max(arr)
    queue = deque(arr)
    current = queue.popleft()
    wins = 0
    while wins < k:
        opponent = queue.popleft()
        if current >= opponent:
            queue.append(opponent)
            wins += 1
        else:
            # The beaten champion leaves; the new one also goes to the back.
            wins = 1
            current = opponent
            queue.append(current)
    return current


def _reverse_digits(n: int) -> int:
    if n < 0:
        return -int(str(-n)[::-1])
    return int(str(n)[::-1])


def count_nice_pairs(nums: Sequence[int]) -> int:
    """Count pairs i < j with nums[i] + rev(nums[j]) == nums[j] + rev(nums[i]), modulo 1e9+7."""
    seen: Counter[int] = Counter()
    pairs = 0
    for value in nums:
        key = value - _reverse_digits(value)
        pairs = (pairs + seen[key]) % _MOD
        seen[key] += 1
    return pairs


def average_waiting_time(customers: Sequence[Sequence[int]]) -> float:
    """Return the mean time customers wait, given (arrival, preparation) pairs in order."""
    if not customers:
        raise ValueError("there must be at least one customer")
    clock = 0
    waited = 0
    for arrival, preparation in customers:
        clock = max(arrival, clock) + preparation
        waited += clock - arrival
    return waited / len(customers)


def get_last_moment(n: int, left: Sequence[int], right: Sequence[int]) -> int:
    """Return the moment the last ant falls off a plank of length n (-1 with no ants)."""
    return max(
        (*left, *(n - position for position in right)),
        default=-1,
    )


def garbage_collection(garbage: Sequence[str], travel: Sequence[int]) -> int:
    """Return the minutes three trucks need to collect all metal, paper and glass."""
    last_distance = {"M": 0, "P": 0, "G": 0}
    units = 0
    for house, distance in zip(garbage, accumulate(travel, initial=0)):
        for kind in house:
            if kind in last_distance:
                last_distance[kind] = distance
        units += len(house)
    return sum(last_distance.values()) + units


def maximum_importance(n: int, roads: Sequence[Sequence[int]]) -> int:
    """Return the greatest total road importance after numbering cities 1..n."""
    degree = [0] * n
    for a, b in roads:
        degree[a] += 1
        degree[b] += 1
    return sum(rank * count for rank, count in enumerate(sorted(degree), start=1))