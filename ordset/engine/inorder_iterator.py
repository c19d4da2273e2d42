"""
In-order (ascending) iteration over an AVL subtree using an explicit stack.
"""

from collections.abc import Callable, Iterator
from typing import Any

from ordset.models.node import Node


class NodeIterator(Iterator[Node]):
    """
    Lazy in-order walk over the nodes of a subtree.

    Time Complexity: O(1) amortized per step, O(N) for the whole walk
    Space Complexity: O(height) for the stack

    The walk never mutates the tree. An optional `version` callable lets the
    owner of the tree detect mutation: it is sampled on creation, and if it
    returns a different number on a later step the iterator raises
    RuntimeError instead of yielding from a reshaped tree.
    """

    def __init__(
        self, root: Node | None, version: Callable[[], int] | None = None
    ) -> None:
        """
        Initialize the iterator.

        Args:
            root: Root of the subtree to walk.
            version: Returns the owner's modification counter.
        """
        self._stack: list[Node] = []
        self._version = version
        self._expected_version = version() if version is not None else 0

        self._push_left_path(root)

    def __iter__(self) -> "NodeIterator":
        return self

    def __next__(self) -> Node:
        if not self._stack:
            raise StopIteration

        if self._version is not None and self._version() != self._expected_version:
            self._stack.clear()
            raise RuntimeError("AVLTree mutated during iteration")

        node = self._stack.pop()

        # Push right subtree's left path
        self._push_left_path(node.right)

        return node

    def _push_left_path(self, node: Node | None) -> None:
        while node is not None:
            self._stack.append(node)
            node = node.left


class ValueIterator(Iterator[Any]):
    """Iterator over the values of a subtree in ascending order."""

    def __init__(
        self, root: Node | None, version: Callable[[], int] | None = None
    ) -> None:
        self._nodes = NodeIterator(root, version)

    def __iter__(self) -> "ValueIterator":
        return self

    def __next__(self) -> Any:
        return next(self._nodes).value
