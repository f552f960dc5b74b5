"""Searching in sorted sequences, min/max by divide and conquer, and a linear-probing hash table."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import Any


def binary_search(items: Sequence[Any], target: Any) -> int | None:
    """Return the index of ``target`` in sorted ``items``, or None if absent."""
    low, high = 0, len(items) - 1
    while low <= high:
        middle = low + (high - low) // 2
        value = items[middle]
        if value == target:
            return middle
        if value < target:
            low = middle + 1
        else:
            high = middle - 1
    return None


def interpolation_search(items: Sequence[int], target: int) -> int | None:
    """Return the index of ``target`` in sorted integer ``items``, or None if absent."""
    low, high = 0, len(items) - 1
    while low <= high and items[low] <= target <= items[high]:
        span = items[high] - items[low]
        if span == 0:
            position = low
        else:
            position = low + int((high - low) / span * (target - items[low]))
        value = items[position]
        if value == target:
            return position
        if value < target:
            low = position + 1
        else:
            high = position - 1
    return None


def _min_max(values: list[Any], first: int, last: int) -> tuple[Any, Any]:
    if first == last:
        return values[first], values[first]
    if first == last - 1:
        a, b = values[first], values[last]
        return (a, b) if a < b else (b, a)
    middle = (first + last) // 2
    low1, high1 = _min_max(values, first, middle)
    low2, high2 = _min_max(values, middle + 1, last)
    return (low1 if low1 < low2 else low2), (high2 if high1 < high2 else high1)


def min_max(items: Iterable[Any]) -> tuple[Any, Any]:
    """Return ``(minimum, maximum)`` of ``items`` found by divide and conquer."""
    values = list(items)
    if not values:
        raise ValueError("min_max() of an empty sequence")
    return _min_max(values, 0, len(values) - 1)


class HashTable:
    """Fixed-size integer hash table with linear probing.

    An item's home slot is ``item % size - 1``, wrapping to the last slot
    when the remainder is zero.
    """

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError("hash table size must be positive")
        self.size = size
        self._slots: list[int | None] = [None] * size

    def _probe(self, item: int) -> Iterator[int]:
        home = (item % self.size - 1) % self.size
        yield from range(home, self.size)
        yield from range(home)

    def insert(self, item: int) -> int:
        """Store ``item`` and return the slot it landed in."""
        for slot in self._probe(item):
            if self._slots[slot] is None:
                self._slots[slot] = item
                return slot
        raise OverflowError("hash table is full")

    def search(self, item: int) -> int | None:
        """Return the slot holding ``item``, or None if it is not stored."""
        for slot in self._probe(item):
            if self._slots[slot] == item:
                return slot
        return None

    def rows(self) -> list[tuple[int, int | None]]:
        """Return ``(label, element)`` per slot; empty slots hold None."""
        return [((slot - 1) % self.size, value) for slot, value in enumerate(self._slots)]