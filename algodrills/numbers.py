"""Counting and number puzzles solved with recurrences."""

from __future__ import annotations

from collections.abc import Sequence

_MOD = 1_000_000_007
_INT32_MAX = 2**31 - 1
_INT32_MIN = -(2**31)

# Digits a chess knight can jump to from each key of a phone keypad.
_KNIGHT_MOVES = {
    0: (4, 6),
    1: (6, 8),
    2: (7, 9),
    3: (4, 8),
    4: (0, 3, 9),
    5: (),
    6: (0, 1, 7),
    7: (2, 6),
    8: (1, 3),
    9: (2, 4),
}


def num_factored_binary_trees(arr: Sequence[int]) -> int:
    """Count binary trees whose inner nodes are products of their children, modulo 1e9+7."""
    ordered = sorted(arr)
    if ordered and ordered[0] < 2:
        raise ValueError("every value must be at least 2")
    present = set(ordered)
    trees: dict[int, int] = {}
    for value in ordered:
        if value in trees:
            continue
        count = 1
        for factor in ordered:
            if factor * factor > value:
                break
            other, remainder = divmod(value, factor)
            if remainder or other not in present:
                continue
            if other == factor:
                count += trees[factor] * trees[factor]
            else:
                count += 2 * trees[factor] * trees[other]
        trees[value] = count % _MOD
    return sum(trees[value] for value in arr) % _MOD


def integer_break(n: int) -> int:
    """Return the largest product of at least two positive integers that add up to n."""
    if n < 0:
        raise ValueError("n must not be negative")
    # best[m] is the largest product of one or more parts adding up to m.
    best = [0] * max(n, 1)
    for m in range(1, n):
        best[m] = max(m, max((part * best[m - part] for part in range(1, m)), default=0))
    return max((part * best[n - part] for part in range(1, n)), default=0)


def kth_grammar(n: int, k: int) -> int:
    """Return the k-th symbol (1-based) of row n of the 0 -> 01, 1 -> 10 grammar."""
    if n < 1 or not 1 <= k <= 2 ** (n - 1):
        raise ValueError("k must lie between 1 and 2**(n-1) for n of at least 1")
    symbol = 0
    while n > 1:
        half = 2 ** (n - 2)
        if k > half:
            k -= half
            symbol ^= 1
        n -= 1
    return symbol


def knight_dialer(n: int) -> int:
    """Count the phone numbers of length n a knight can dial, modulo 1e9+7."""
    if n < 1:
        raise ValueError("n must be at least 1")
    counts = [1] * 10
    for _ in range(n - 1):
        counts = [
            sum(counts[source] for source in _KNIGHT_MOVES[digit]) % _MOD
            for digit in range(10)
        ]
    return sum(counts) % _MOD


def reverse_integer(x: int) -> int:
    """Reverse the digits of a 32-bit integer, giving 0 when the result overflows."""
    if not _INT32_MIN <= x <= _INT32_MAX:
        raise ValueError("x must be a signed 32-bit integer")
    sign = -1 if x < 0 else 1
    remaining = abs(x)
    result = 0
    while remaining:
        if result > _INT32_MAX // 10:
            return 0
        remaining, digit = divmod(remaining, 10)
        result = result * 10 + digit
    return sign * result


def reverse_integer_by_digits(x: int) -> int:
    """Reverse the digits of any integer, giving 0 when the result leaves the 32-bit range."""
    magnitude = int(str(abs(x))[::-1])
    if x < 0:
        return 0 if magnitude > -_INT32_MIN else -magnitude
    return 0 if magnitude > _INT32_MAX else magnitude


def find_the_winner(n: int, k: int) -> int:
    """Return the friend left when every k-th of n friends in a circle leaves."""
    if n < 1 or k < 1:
        raise ValueError("n and k must both be at least 1")
    survivor = 0
    for size in range(2, n + 1):
        survivor = (survivor + k) % size
    return survivor + 1