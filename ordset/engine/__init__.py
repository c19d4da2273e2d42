"""
Tree algorithms: rebalancing, mutation, traversal and validation.
"""

from ordset.engine.inorder_iterator import NodeIterator, ValueIterator
from ordset.engine.mutation import insert, merge, remove, take_min
from ordset.engine.rebalance import rebalance, rotate
from ordset.engine.validator import check_invariants

__all__ = [
    "NodeIterator",
    "ValueIterator",
    "insert",
    "remove",
    "merge",
    "take_min",
    "rebalance",
    "rotate",
    "check_invariants",
]
