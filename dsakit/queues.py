"""Linear array queue, linked queue and a stable priority queue."""

from __future__ import annotations

import bisect
from collections import deque
from collections.abc import Iterator
from typing import Any


class QueueOverflowError(OverflowError):
    """Raised when adding to a queue that has no free slot."""


class QueueUnderflowError(IndexError):
    """Raised when reading from an empty queue."""


class ArrayQueue:
    """Linear queue over a fixed number of slots.

    Slots freed by dequeuing are not reused until the queue becomes empty,
    at which point all slots are available again.
    """

    def __init__(self, capacity: int = 10) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._items: deque[Any] = deque()
        self._used = 0

    def enqueue(self, item: Any) -> None:
        if self._used >= self.capacity:
            raise QueueOverflowError("queue overflow")
        self._items.append(item)
        self._used += 1

    def dequeue(self) -> Any:
        if not self._items:
            raise QueueUnderflowError("queue underflow")
        item = self._items.popleft()
        if not self._items:
            self._used = 0
        return item

    def peek(self) -> Any:
        if not self._items:
            raise QueueUnderflowError("queue is empty")
        return self._items[0]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate from front to rear."""
        return iter(self._items)


class LinkedQueue:
    """Unbounded first-in first-out queue."""

    def __init__(self) -> None:
        self._items: deque[Any] = deque()

    def enqueue(self, item: Any) -> None:
        self._items.append(item)

    def dequeue(self) -> Any:
        if not self._items:
            raise QueueUnderflowError("queue underflow")
        return self._items.popleft()

    def peek(self) -> Any:
        if not self._items:
            raise QueueUnderflowError("queue is empty")
        return self._items[0]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate from front to rear."""
        return iter(self._items)


class PriorityQueue:
    """Queue ordered by ascending priority number; equal priorities keep insertion order."""

    def __init__(self) -> None:
        self._entries: list[tuple[Any, int]] = []

    def insert(self, value: Any, priority: int) -> None:
        bisect.insort_right(self._entries, (value, priority), key=lambda entry: entry[1])

    def pop(self) -> Any:
        """Remove and return the value with the lowest priority number."""
        if not self._entries:
            raise QueueUnderflowError("priority queue underflow")
        value, _ = self._entries.pop(0)
        return value

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[tuple[Any, int]]:
        """Iterate over ``(value, priority)`` pairs in removal order."""
        return iter(list(self._entries))