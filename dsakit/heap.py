"""Binary max-heap supporting insertion and removal of the root."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any


class MaxHeap:
    """Max-heap stored level by level in a list."""

    def __init__(self) -> None:
        self._items: list[Any] = []

    def insert(self, value: Any) -> None:
        """Add ``value`` and sift it up towards the root."""
        items = self._items
        items.append(value)
        index = len(items) - 1
        while index > 0:
            parent = (index - 1) // 2
            if items[parent] >= items[index]:
                return
            items[parent], items[index] = items[index], items[parent]
            index = parent

    def delete_root(self) -> Any:
        """Remove and return the largest value."""
        items = self._items
        if not items:
            raise IndexError("heap is empty")
        root = items[0]
        last = items.pop()
        if not items:
            return root
        items[0] = last
        size = len(items)
        index = 0
        while True:
            left, right = 2 * index + 1, 2 * index + 2
            if left >= size:
                return root
            child = left
            if right < size and items[right] > items[left]:
                child = right
            if items[index] >= items[child]:
                return root
            items[index], items[child] = items[child], items[index]
            index = child

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate in storage order, root first."""
        return iter(list(self._items))