"""Bounded array-backed and unbounded linked stacks."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any


class StackOverflowError(OverflowError):
    """Raised when pushing onto a full stack."""


class StackUnderflowError(IndexError):
    """Raised when reading from an empty stack."""


class ArrayStack:
    """Stack with a fixed capacity."""

    def __init__(self, capacity: int = 10) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._items: list[Any] = []

    def push(self, item: Any) -> None:
        if len(self._items) >= self.capacity:
            raise StackOverflowError("stack overflow")
        self._items.append(item)

    def pop(self) -> Any:
        if not self._items:
            raise StackUnderflowError("stack underflow")
        return self._items.pop()

    def peek(self) -> Any:
        if not self._items:
            raise StackUnderflowError("stack is empty")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the top of the stack down."""
        return reversed(self._items)


class _Node:
    __slots__ = ("data", "next")

    def __init__(self, data: Any, next_node: _Node | None) -> None:
        self.data = data
        self.next = next_node


class LinkedStack:
    """Unbounded stack built from linked nodes."""

    def __init__(self) -> None:
        self._top: _Node | None = None
        self._size = 0

    def push(self, item: Any) -> None:
        self._top = _Node(item, self._top)
        self._size += 1

    def pop(self) -> Any:
        if self._top is None:
            raise StackUnderflowError("stack is empty")
        node = self._top
        self._top = node.next
        self._size -= 1
        return node.data

    def peek(self) -> Any:
        if self._top is None:
            raise StackUnderflowError("stack is empty")
        return self._top.data

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the top of the stack down."""
        node = self._top
        while node is not None:
            yield node.data
            node = node.next