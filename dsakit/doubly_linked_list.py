"""Linear doubly linked list and the operations shared by the linked list variants."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable, Iterator
from typing import Any, Optional


class _Node:
    __slots__ = ("data", "prev", "next")

    def __init__(self, data: Any) -> None:
        self.data = data
        self.prev: Optional[_Node] = None
        self.next: Optional[_Node] = None


class _LinkedSequence(ABC):
    """List operations built on a few navigation and linking primitives."""

    _ENDING = ""

    def __init__(self, items: Iterable[Any]) -> None:
        self._size = 0
        for item in items:
            self._insert_end(item)

    @abstractmethod
    def _first(self) -> Optional[_Node]:
        """Return the first node, or None when empty."""

    @abstractmethod
    def _last(self) -> Optional[_Node]:
        """Return the last node, or None when empty."""

    @abstractmethod
    def _next(self, node: _Node) -> Optional[_Node]:
        """Return the node linked after ``node``."""

    @abstractmethod
    def _prev(self, node: _Node) -> Optional[_Node]:
        """Return the node linked before ``node``."""

    @abstractmethod
    def _link(self, previous: Optional[_Node], node: _Node) -> None:
        """Link ``node`` after ``previous``, or at the front when ``previous`` is None."""

    @abstractmethod
    def _unlink(self, node: _Node) -> None:
        """Detach ``node`` from the list."""

    def _walk(self, start: Optional[_Node], step: Callable[[_Node], Optional[_Node]]) -> Iterator[_Node]:
        node = start
        while node is not None:
            yield node
            node = step(node)
            if node is start:
                return

    def _require_items(self) -> _Node:
        first = self._first()
        if first is None:
            raise IndexError("list is empty")
        return first

    def _find(self, value: Any) -> _Node:
        for node in self._walk(self._require_items(), self._next):
            if node.data == value:
                return node
        raise ValueError(f"{value!r} is not in the list")

    def _add(self, previous: Optional[_Node], item: Any) -> None:
        self._link(previous, _Node(item))
        self._size += 1

    def _remove(self, node: _Node) -> Any:
        self._unlink(node)
        self._size -= 1
        return node.data

    def _remove_neighbour(self, item: Any, step: Callable[[_Node], Optional[_Node]], side: str) -> Any:
        node = self._find(item)
        neighbour = step(node)
        if neighbour is None or neighbour is node:
            raise ValueError(f"no node {side} {item!r}")
        return self._remove(neighbour)

    def _insert_beginning(self, item: Any) -> None:
        self._add(None, item)

    def _insert_end(self, item: Any) -> None:
        self._add(self._last(), item)

    def _insert_before(self, value: Any, item: Any) -> None:
        node = self._find(value)
        self._add(None if node is self._first() else self._prev(node), item)

    def _insert_after(self, value: Any, item: Any) -> None:
        self._add(self._find(value), item)

    def _delete_beginning(self) -> Any:
        return self._remove(self._require_items())

    def _delete_end(self) -> Any:
        self._require_items()
        return self._remove(self._last())

    def _delete(self, item: Any) -> Any:
        return self._remove(self._find(item))

    def _delete_before(self, item: Any) -> Any:
        return self._remove_neighbour(item, self._prev, "before")

    def _delete_after(self, item: Any) -> Any:
        return self._remove_neighbour(item, self._next, "after")

    def _forward(self) -> Iterator[Any]:
        return (node.data for node in self._walk(self._first(), self._next))

    def _backward(self) -> Iterator[Any]:
        return (node.data for node in self._walk(self._last(), self._prev))

    def _describe(self) -> str:
        if not self._size:
            return "Empty list"
        return "->".join(str(value) for value in self._forward()) + self._ENDING


class DoublyLinkedList(_LinkedSequence):
    """List whose nodes link both forward and backward, ending in None on each side."""

    _ENDING = "->end"

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        super().__init__(items)

    def _first(self) -> Optional[_Node]:
        return self._head

    def _last(self) -> Optional[_Node]:
        return self._tail

    def _next(self, node: _Node) -> Optional[_Node]:
        return node.next

    def _prev(self, node: _Node) -> Optional[_Node]:
        return node.prev

    def _link(self, previous: Optional[_Node], node: _Node) -> None:
        after = self._head if previous is None else previous.next
        node.prev = previous
        node.next = after
        if previous is None:
            self._head = node
        else:
            previous.next = node
        if after is None:
            self._tail = node
        else:
            after.prev = node

    def _unlink(self, node: _Node) -> None:
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev

    def insert_beginning(self, item: Any) -> None:
        """Insert ``item`` at the front."""
        self._insert_beginning(item)

    def insert_end(self, item: Any) -> None:
        """Append ``item`` at the back."""
        self._insert_end(item)

    def insert_before(self, value: Any, item: Any) -> None:
        """Insert ``item`` in front of the first node holding ``value``."""
        self._insert_before(value, item)

    def insert_after(self, value: Any, item: Any) -> None:
        """Insert ``item`` right after the first node holding ``value``."""
        self._insert_after(value, item)

    def delete_beginning(self) -> Any:
        """Remove and return the first item."""
        return self._delete_beginning()

    def delete_end(self) -> Any:
        """Remove and return the last item."""
        return self._delete_end()

    def delete(self, item: Any) -> Any:
        """Remove the first node holding ``item`` and return its value."""
        return self._delete(item)

    def delete_before(self, item: Any) -> Any:
        """Remove and return the node preceding the first node holding ``item``."""
        return self._delete_before(item)

    def delete_after(self, item: Any) -> Any:
        """Remove and return the node following the first node holding ``item``."""
        return self._delete_after(item)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        return self._forward()

    def __reversed__(self) -> Iterator[Any]:
        return self._backward()

    def __str__(self) -> str:
        return self._describe()