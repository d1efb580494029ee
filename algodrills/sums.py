"""Problems about choosing numbers that add up to a target."""

from __future__ import annotations

from collections.abc import Sequence

_UINT32 = 0xFFFFFFFF


def three_sum(nums: Sequence[int]) -> list[list[int]]:
    """Return every distinct ascending triple that sums to zero, using a seen set."""
    ordered = sorted(nums)
    found: set[tuple[int, int, int]] = set()
    for i, first in enumerate(ordered[:-2]):
        remain = -first
        seen: set[int] = set()
        for value in ordered[i + 1:]:
            wanted = remain - value
            if wanted in seen:
                found.add((first, wanted, value))
            seen.add(value)
    return [list(triple) for triple in sorted(found)]


def three_sum_two_pointer(nums: Sequence[int]) -> list[list[int]]:
    """Return every distinct ascending triple that sums to zero, using two pointers."""
    ordered = sorted(nums)
    found: set[tuple[int, int, int]] = set()
    for i, first in enumerate(ordered[:-2]):
        remain = -first
        left, right = i + 1, len(ordered) - 1
        while left < right:
            pair = ordered[left] + ordered[right]
            if pair == remain:
                found.add((first, ordered[left], ordered[right]))
                left += 1
            elif pair > remain:
                right -= 1
            else:
                left += 1
    return [list(triple) for triple in sorted(found)]


def three_sum_closest(nums: Sequence[int], target: int) -> int:
    """Return the sum of three numbers closest to target (0 for fewer than three)."""
    ordered = sorted(nums)
    best = 0
    best_gap: float = float("inf")
    for i, first in enumerate(ordered):
        left, right = i + 1, len(ordered) - 1
        while left < right:
            total = first + ordered[left] + ordered[right]
            gap = abs(target - total)
            if gap < best_gap:
                best_gap = gap
                best = total
            if total > target:
                right -= 1
            else:
                left += 1
    return best


def four_sum(nums: Sequence[int], target: int) -> list[list[int]]:
    """Return every distinct ascending quadruple that sums to target."""
    ordered = sorted(nums)
    n = len(ordered)
    found: set[tuple[int, int, int, int]] = set()
    for i in range(n - 3):
        for j in range(i + 1, n - 2):
            wanted = target - ordered[i] - ordered[j]
            left, right = j + 1, n - 1
            while left < right:
                pair = ordered[left] + ordered[right]
                if pair == wanted:
                    found.add((ordered[i], ordered[j], ordered[left], ordered[right]))
                    left += 1
                    while left < right and ordered[left] == ordered[left - 1]:
                        left += 1
                    right -= 1
                    while left < right and ordered[right] == ordered[right + 1]:
                        right -= 1
                elif pair < wanted:
                    left += 1
                else:
                    right -= 1
    return [list(quad) for quad in sorted(found)]


def combination_sum2(candidates: Sequence[int], target: int) -> list[list[int]]:
    """Return each distinct combination of candidates, each used once, summing to target."""
    ordered = sorted(candidates)
    found: list[list[int]] = []

    def extend(start: int, remaining: int, chosen: list[int]) -> None:
        value = ordered[start]
        left = remaining - value
        if left < 0:
            return
        chosen = [*chosen, value]
        if left == 0:
            found.append(chosen)
            return
        previous = None
        for index, candidate in enumerate(ordered[start + 1:], start + 1):
            if candidate == previous:
                continue
            extend(index, left, chosen)
            previous = candidate

    previous = None
    for index, candidate in enumerate(ordered):
        if candidate == previous:
            continue
        extend(index, target, [])
        previous = candidate
    return found


def combination_sum4(nums: Sequence[int], target: int) -> int:
    """Count the ordered sequences of nums that add up to target.

    Counts are kept modulo 2**32, as the answer is expected to fit in 32 bits.
    """
    if target < 0:
        raise ValueError("target must not be negative")
    ways = [1] + [0] * target
    for amount in range(1, target + 1):
        ways[amount] = sum(ways[amount - n] for n in nums if 0 < n <= amount) & _UINT32
    return ways[target]