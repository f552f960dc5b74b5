"""Doubly linked circular list."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any, Optional

from dsakit.doubly_linked_list import _LinkedSequence, _Node


class DoublyCircularLinkedList(_LinkedSequence):
    """Circular list whose nodes link both forward and backward.

    Removing before an item wraps from the first node to the last, and removing
    after an item wraps from the last node to the first.
    """

    _ENDING = ""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._head: Optional[_Node] = None
        super().__init__(items)

    def _first(self) -> Optional[_Node]:
        return self._head

    def _last(self) -> Optional[_Node]:
        return None if self._head is None else self._head.prev

    def _next(self, node: _Node) -> Optional[_Node]:
        return node.next

    def _prev(self, node: _Node) -> Optional[_Node]:
        return node.prev

    def _link(self, previous: Optional[_Node], node: _Node) -> None:
        if self._head is None:
            node.prev = node.next = node
            self._head = node
            return
        before = self._head.prev if previous is None else previous
        after = before.next
        node.prev, node.next = before, after
        before.next = node
        after.prev = node
        if previous is None:
            self._head = node

    def _unlink(self, node: _Node) -> None:
        if node.next is node:
            self._head = None
            return
        node.prev.next = node.next
        node.next.prev = node.prev
        if node is self._head:
            self._head = node.next

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