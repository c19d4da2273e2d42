"""
Custom exceptions for the ordered set.
"""

from typing import Any


class TreeInvariantError(AssertionError):
    """
    Raised when a structural invariant of the AVL tree does not hold.

    This signals a defect in the tree implementation, never a caller error,
    so it derives from AssertionError.
    """

    def __init__(self, value: Any, reason: str):
        """
        Initialize invariant error.

        Args:
            value: Value stored in the node where the violation was found.
            reason: Which invariant is broken and how.
        """
        self.value = value
        self.reason = reason
        super().__init__(f"AVL invariant violated at node {value!r}: {reason}")
