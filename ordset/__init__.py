"""
AVL tree based ordered set.

This package provides a self-balancing container of unique values with:
- insert(value) - O(log N)
- remove(value) - O(log N)
- contains(value) - O(log N)
- iter() - Ascending traversal, O(N)
"""

from ordset.interfaces import OrderedSet
from ordset.models.exceptions import TreeInvariantError
from ordset.models.sortedcontainers import AVLTree

__all__ = ["AVLTree", "OrderedSet", "TreeInvariantError"]
