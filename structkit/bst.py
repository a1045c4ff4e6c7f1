"""An unbalanced binary search tree of integers that allows duplicates."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Optional


@dataclass(eq=False)
class BSTNode:
    """One node of a binary search tree."""

    value: int
    left: Optional[BSTNode] = field(default=None, repr=False)
    right: Optional[BSTNode] = field(default=None, repr=False)


def _attach(head: Optional[BSTNode], node: Optional[BSTNode]) -> Optional[BSTNode]:
    """Hang the subtree ``node`` below ``head`` where its root value belongs."""
    if head is None:
        return node
    if node is None:
        return head
    current = head
    while True:
        if node.value < current.value:
            if current.left is None:
                current.left = node
                return head
            current = current.left
        else:
            if current.right is None:
                current.right = node
                return head
            current = current.right


class BinarySearchTree:
    """Binary search tree; equal values go to the right subtree."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.root: Optional[BSTNode] = None
        for value in values:
            self.insert(value)

    def insert(self, value: int) -> BSTNode:
        """Insert ``value`` and return the new node."""
        node = BSTNode(value)
        self.root = _attach(self.root, node)
        return node

    def search(self, value: int) -> Optional[BSTNode]:
        """Return the first node holding ``value`` on its search path, or None."""
        current = self.root
        while current is not None:
            if current.value == value:
                return current
            current = current.left if value < current.value else current.right
        return None

    def _parent_of(self, node: BSTNode) -> Optional[BSTNode]:
        current = self.root
        while current is not None:
            if current.left is node or current.right is node:
                return current
            current = current.left if node.value < current.value else current.right
        return None

    def delete(self, node: Optional[BSTNode]) -> None:
        """Remove ``node`` from the tree.

        The left subtree of the removed node is re-attached inside its right
        subtree. A node that does not belong to this tree is left alone.
        """
        root = self.root
        if node is None or root is None:
            return
        if node is root:
            self.root = _attach(root.right, root.left)
            return
        if node.left is None and node.right is None:
            parent = self._parent_of(node)
            if parent is None:
                return
            if parent.left is node:
                parent.left = None
            else:
                parent.right = None
            return
        replacement = _attach(node.right, node.left)
        assert replacement is not None
        node.value = replacement.value
        node.left = replacement.left
        node.right = replacement.right

    def min(self) -> int:
        """Return the smallest value; raise ValueError if the tree is empty."""
        if self.root is None:
            raise ValueError("min() of an empty tree")
        current = self.root
        while current.left is not None:
            current = current.left
        return current.value

    def max(self) -> int:
        """Return the largest value; raise ValueError if the tree is empty."""
        if self.root is None:
            raise ValueError("max() of an empty tree")
        current = self.root
        while current.right is not None:
            current = current.right
        return current.value

    def __iter__(self) -> Iterator[int]:
        """Yield the values in order."""
        stack: list[BSTNode] = []
        current = self.root
        while stack or current is not None:
            while current is not None:
                stack.append(current)
                current = current.left
            current = stack.pop()
            yield current.value
            current = current.right

    def __contains__(self, value: object) -> bool:
        return isinstance(value, int) and self.search(value) is not None