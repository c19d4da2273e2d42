"""
Sorted container implementations for the ordered set.
"""

from ordset.models.sortedcontainers.avl_tree import AVLTree

__all__ = ["AVLTree"]
