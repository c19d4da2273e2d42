"""
Recursive insert, remove and merge for AVL subtrees.

Each operation returns the new root of the subtree it was given, together
with a flag telling whether the tree changed. Every node on the way back up
from a change is rebalanced before it is returned.
"""

from typing import Any

from ordset.engine.rebalance import rebalance
from ordset.models.node import Node


def insert(node: Node | None, value: Any) -> tuple[Node, bool]:
    """
    Insert a value into a subtree. O(log N)

    Args:
        node: Root of the subtree, or None for an empty slot.
        value: The value to insert.

    Returns:
        (new subtree root, True if the value was absent).
    """
    if node is None:
        return Node(value=value), True

    if value < node.value:
        node.left, inserted = insert(node.left, value)
    elif value > node.value:
        node.right, inserted = insert(node.right, value)
    else:
        return node, False

    if inserted:
        node = rebalance(node)
    return node, inserted


def remove(node: Node | None, value: Any) -> tuple[Node | None, bool]:
    """
    Remove a value from a subtree. O(log N)

    Args:
        node: Root of the subtree, or None for an empty slot.
        value: The value to remove.

    Returns:
        (new subtree root, True if the value was present).
    """
    if node is None:
        return None, False

    if value < node.value:
        node.left, removed = remove(node.left, value)
    elif value > node.value:
        node.right, removed = remove(node.right, value)
    else:
        return _detach(node), True

    if removed:
        node = rebalance(node)
    return node, removed


def _detach(node: Node) -> Node | None:
    """Return what takes the place of a deleted node."""
    left, right = node.left, node.right
    node.left = node.right = None

    if left is None:
        return right
    if right is None:
        return left
    return merge(left, right)


def take_min(node: Node) -> tuple[Node | None, Node]:
    """
    Detach the smallest node of a non-empty subtree.

    The detached node is replaced by its right child, and every ancestor on
    the left chain is rebalanced.

    Returns:
        (remaining subtree root, detached minimum node).
    """
    assert node is not None, "take_min on an empty subtree"

    if node.left is None:
        rest = node.right
        node.right = None
        return rest, node

    node.left, smallest = take_min(node.left)
    return rebalance(node), smallest


def merge(left: Node, right: Node) -> Node:
    """
    Join two subtrees where every value of `left` is below every value of `right`.

    The minimum of `right` becomes the new root with both subtrees attached.
    """
    rest, root = take_min(right)
    root.left = left
    root.right = rest
    return rebalance(root)
