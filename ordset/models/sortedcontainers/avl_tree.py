"""
AVL Tree implementation for sorted storage of unique values.

Balanced on every insert and remove, so lookups stay O(log N).
"""

import logging
from collections.abc import Iterable
from typing import Any

from ordset.engine import mutation
from ordset.engine.inorder_iterator import NodeIterator, ValueIterator
from ordset.engine.validator import check_invariants
from ordset.interfaces.ordered_set import OrderedSet
from ordset.models.node import Node, height

logger = logging.getLogger(__name__)


class AVLTree(OrderedSet):
    """
    AVL Tree implementation of OrderedSet.

    Properties maintained:
    1. Every value in a left subtree is less than its node's value
    2. Every value in a right subtree is greater than its node's value
    3. Subtree heights of every node differ by at most one
    4. Cached node heights are exact

    Values only need to support `<` and `>` with a total order.
    Iterators fail with RuntimeError if the tree changes under them.
    """

    def __init__(self, values: Iterable[Any] | None = None) -> None:
        """
        Initialize the tree.

        Args:
            values: Optional values to insert in order. Duplicates are ignored.
        """
        self._root: Node | None = None
        self._size: int = 0
        self._version: int = 0

        if values is not None:
            self.update(values)

    @classmethod
    def from_iterable(cls, values: Iterable[Any]) -> "AVLTree":
        return cls(values)

    def update(self, values: Iterable[Any]) -> int:
        """
        Insert every value of an iterable.

        Returns:
            The number of values that were not yet present.
        """
        seen = 0
        added = 0
        for value in values:
            seen += 1
            if self.insert(value):
                added += 1

        logger.debug(
            f"Bulk insert: {added} of {seen} values added, size now {self._size}"
        )
        return added

    def insert(self, value: Any) -> bool:
        """Add a value. O(log N)"""
        self._root, inserted = mutation.insert(self._root, value)
        if inserted:
            self._size += 1
            self._version += 1
        return inserted

    def remove(self, value: Any) -> bool:
        """Remove a value. O(log N)"""
        self._root, removed = mutation.remove(self._root, value)
        if removed:
            self._size -= 1
            self._version += 1
        return removed

    def contains(self, value: Any) -> bool:
        current = self._root
        while current is not None:
            if value < current.value:
                current = current.left
            elif value > current.value:
                current = current.right
            else:
                return True
        return False

    def size(self) -> int:
        return self._size

    def height(self) -> int:
        """Height of the tree; 0 when empty."""
        return height(self._root)

    def iter(self) -> ValueIterator:
        return ValueIterator(self._root, self._current_version)

    def node_iter(self) -> NodeIterator:
        """Iterate over the tree's nodes in ascending order of value."""
        return NodeIterator(self._root, self._current_version)

    def check_invariants(self) -> int:
        """
        Verify every structural invariant of the tree.

        Returns:
            The number of nodes.

        Raises:
            TreeInvariantError: If any invariant is broken.
        """
        return check_invariants(self._root, self._size)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self.iter())!r})"

    def _current_version(self) -> int:
        return self._version
