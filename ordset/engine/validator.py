"""
Structural invariant checks for AVL subtrees.
"""

import logging
from typing import Any

from ordset.models.exceptions import TreeInvariantError
from ordset.models.node import Node, height

logger = logging.getLogger(__name__)


def check_invariants(root: Node | None, expected_length: int | None = None) -> int:
    """
    Verify order, balance and cached heights of every node under `root`.

    Args:
        root: Root of the subtree to check.
        expected_length: If given, the node count must match it.

    Returns:
        The number of nodes in the subtree.

    Raises:
        TreeInvariantError: On the first violation found.
    """
    try:
        count = _check(root, None, None)[1]
        if expected_length is not None and count != expected_length:
            raise TreeInvariantError(
                root.value if root is not None else None,
                f"tracked length {expected_length} but {count} nodes are reachable",
            )
    except TreeInvariantError as e:
        logger.debug(f"Invariant check failed: {e}")
        raise
    return count


def _check(node: Node | None, low: Any, high: Any) -> tuple[int, int]:
    """Return (height, count) of a subtree whose values lie strictly in (low, high)."""
    if node is None:
        return 0, 0

    if low is not None and not low < node.value:
        raise TreeInvariantError(node.value, f"not greater than ancestor {low!r}")
    if high is not None and not node.value < high:
        raise TreeInvariantError(node.value, f"not less than ancestor {high!r}")

    left_height, left_count = _check(node.left, low, node.value)
    right_height, right_count = _check(node.right, node.value, high)

    if abs(right_height - left_height) > 1:
        raise TreeInvariantError(
            node.value,
            f"unbalanced: left height {left_height}, right height {right_height}",
        )

    actual = 1 + max(left_height, right_height)
    if node.height != actual:
        raise TreeInvariantError(
            node.value, f"cached height {node.height} but subtree height is {actual}"
        )

    return height(node), 1 + left_count + right_count
