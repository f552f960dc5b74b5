"""Binary search tree with insertion, deletion, searching and traversals."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class Node:
    """A tree node holding one value and links to its two subtrees."""

    data: Any
    left: Node | None = None
    right: Node | None = None


class BinarySearchTree:
    """Unbalanced binary search tree; inserting a value already present does nothing."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.root: Node | None = None
        for item in items:
            self.insert(item)

    def insert(self, item: Any) -> None:
        """Add ``item`` unless it is already stored."""
        if self.root is None:
            self.root = Node(item)
            return
        node = self.root
        while True:
            if item < node.data:
                if node.left is None:
                    node.left = Node(item)
                    return
                node = node.left
            elif item > node.data:
                if node.right is None:
                    node.right = Node(item)
                    return
                node = node.right
            else:
                return

    def _find(self, item: Any) -> tuple[Node | None, Node | None]:
        """Return ``(parent, node)`` for ``item``; node is None when absent."""
        parent: Node | None = None
        node = self.root
        while node is not None and node.data != item:
            parent = node
            node = node.left if item < node.data else node.right
        return parent, node

    def delete(self, item: Any) -> None:
        """Remove ``item``; a node with two children takes its in-order successor's value."""
        parent, node = self._find(item)
        if node is None:
            raise KeyError(item)
        if node.left is not None and node.right is not None:
            successor_parent, successor = node, node.right
            while successor.left is not None:
                successor_parent, successor = successor, successor.left
            node.data = successor.data
            parent, node = successor_parent, successor
        child = node.left if node.left is not None else node.right
        if parent is None:
            self.root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child

    def search(self, item: Any) -> Node | None:
        """Return the node holding ``item``, or None if it is not stored."""
        return self._find(item)[1]

    def parent(self, item: Any) -> Any:
        """Return the value of the parent of ``item``, or None if ``item`` is the root."""
        parent, node = self._find(item)
        if node is None:
            raise KeyError(item)
        return None if parent is None else parent.data

    def children(self, item: Any) -> tuple[Any, Any]:
        """Return ``(left, right)`` child values of ``item``; a missing child is None."""
        node = self.search(item)
        if node is None:
            raise KeyError(item)
        left = None if node.left is None else node.left.data
        right = None if node.right is None else node.right.data
        return left, right

    def inorder(self) -> list[Any]:
        result: list[Any] = []
        stack: list[Node] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            result.append(node.data)
            node = node.right
        return result

    def preorder(self) -> list[Any]:
        result: list[Any] = []
        stack = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            result.append(node.data)
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return result

    def postorder(self) -> list[Any]:
        result: list[Any] = []
        stack = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            result.append(node.data)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        result.reverse()
        return result

    def __contains__(self, item: Any) -> bool:
        return self.search(item) is not None