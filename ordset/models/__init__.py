"""
Data models for the ordered set.
"""

from ordset.models.exceptions import TreeInvariantError
from ordset.models.node import Node, Side, height

__all__ = [
    "Node",
    "Side",
    "height",
    "TreeInvariantError",
]
