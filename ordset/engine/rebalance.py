"""
Rotations and local rebalancing for AVL subtrees.

Every function takes the root of a subtree and returns the root of the
(possibly reshaped) subtree. The caller stores the result back into the
slot the subtree came from.
"""

from ordset.models.node import Node, Side


def rotate(node: Node, side: Side) -> Node:
    """
    Rotate a subtree toward `side`.

    The child on the opposite side (the pivot) becomes the new subtree root,
    the pivot's child on `side` moves under the old root, and both heights
    are recomputed bottom-up.

    Args:
        node: Root of the subtree. Must have a child opposite to `side`.
        side: Direction of the rotation.

    Returns:
        The new subtree root (the former pivot).
    """
    pivot = node.child(side.opposite)
    assert pivot is not None, "rotation requires a child to lift"

    node.set_child(side.opposite, pivot.child(side))
    node.update_height()

    pivot.set_child(side, node)
    pivot.update_height()
    return pivot


def heavy_side(node: Node) -> Side | None:
    """Return the side exceeding the balance bound, or None if balanced."""
    factor = node.balance_factor()
    if -1 <= factor <= 1:
        return None

    # Children are always balanced before their parent is repaired.
    assert factor in (-2, 2), f"balance factor {factor} out of range"
    return Side.LEFT if factor < 0 else Side.RIGHT


def rebalance(node: Node) -> Node:
    """
    Restore the AVL balance bound at `node`. O(1)

    Called on every node on the path back up from a structural change.

    Returns:
        The root of the balanced subtree.
    """
    node.update_height()
    side = heavy_side(node)
    if side is None:
        return node

    child = node.child(side)
    assert child is not None

    # Zig-zag: heavy child leans toward the light side
    lean = child.balance_factor()
    if (side is Side.LEFT and lean == 1) or (side is Side.RIGHT and lean == -1):
        node.set_child(side, rotate(child, side))

    return rotate(node, side.opposite)
