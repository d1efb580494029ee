"""Small stateful data structures."""

from __future__ import annotations

import heapq
from collections import deque
from collections.abc import Iterable, Iterator
from typing import Union

NestedValue = Union[int, Iterable["NestedValue"]]


class SeatManager:
    """Hands out the lowest numbered free seat among seats 1..n."""

    def __init__(self, n: int) -> None:
        # An ascending list already satisfies the heap invariant.
        self._free = list(range(1, n + 1))

    def reserve(self) -> int:
        """Reserve and return the smallest free seat number."""
        if not self._free:
            raise IndexError("no unreserved seats left")
        return heapq.heappop(self._free)

    def unreserve(self, seat_number: int) -> None:
        """Make the given seat free again."""
        heapq.heappush(self._free, seat_number)


def _flatten(items: Iterable[NestedValue]) -> Iterator[int]:
    for item in items:
        if isinstance(item, int):
            yield item
        else:
            yield from _flatten(item)


class NestedIterator:
    """Iterates over the integers of an arbitrarily nested list, depth first."""

    def __init__(self, nested_list: Iterable[NestedValue]) -> None:
        self._values = deque(_flatten(nested_list))

    def __iter__(self) -> NestedIterator:
        return self

    def __next__(self) -> int:
        if not self._values:
            raise StopIteration
        return self._values.popleft()

    def has_next(self) -> bool:
        """Tell whether another integer remains."""
        return bool(self._values)