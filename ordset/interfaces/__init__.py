"""
Abstract base classes for the ordered set.
"""

from ordset.interfaces.ordered_set import OrderedSet

__all__ = ["OrderedSet"]
