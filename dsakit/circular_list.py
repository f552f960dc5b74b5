"""Singly linked circular list."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any, Optional

from dsakit.doubly_linked_list import _LinkedSequence, _Node


class CircularLinkedList(_LinkedSequence):
    """Circular list in which the last node links back to the first.

    Only a reference to the last node is kept; the first node is its successor.
    Removing before an item wraps from the first node to the last, and removing
    after an item wraps from the last node to the first.
    """

    _ENDING = "->"

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._tail: Optional[_Node] = None
        super().__init__(items)

    def _first(self) -> Optional[_Node]:
        return None if self._tail is None else self._tail.next

    def _last(self) -> Optional[_Node]:
        return self._tail

    def _next(self, node: _Node) -> Optional[_Node]:
        return node.next

    def _prev(self, node: _Node) -> Optional[_Node]:
        previous = node
        while previous.next is not node:
            previous = previous.next
        return previous

    def _link(self, previous: Optional[_Node], node: _Node) -> None:
        if self._tail is None:
            node.next = node
            self._tail = node
            return
        anchor = self._tail if previous is None else previous
        node.next = anchor.next
        anchor.next = node
        if previous is self._tail:
            self._tail = node

    def _unlink(self, node: _Node) -> None:
        previous = self._prev(node)
        if previous is node:
            self._tail = None
            return
        previous.next = node.next
        if node is self._tail:
            self._tail = previous

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