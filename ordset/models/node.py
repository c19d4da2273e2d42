"""
Node and Side for the AVL tree.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Any


class Side(IntEnum):
    """Child slot of a Node."""

    LEFT = 0
    RIGHT = 1

    @property
    def opposite(self) -> "Side":
        return Side.RIGHT if self is Side.LEFT else Side.LEFT


@dataclass
class Node:
    """
    Node in the AVL tree.

    Attributes:
        value: The stored value. Never changes once the node is created.
        height: Height of the subtree rooted here (a leaf has height 1).
        left: Subtree of smaller values.
        right: Subtree of greater values.
    """

    value: Any
    height: int = 1
    left: "Node | None" = None
    right: "Node | None" = None

    def child(self, side: Side) -> "Node | None":
        return self.left if side is Side.LEFT else self.right

    def set_child(self, side: Side, node: "Node | None") -> None:
        if side is Side.LEFT:
            self.left = node
        else:
            self.right = node

    def child_height(self, side: Side) -> int:
        return height(self.child(side))

    def balance_factor(self) -> int:
        """Height of the right subtree minus height of the left subtree."""
        return self.child_height(Side.RIGHT) - self.child_height(Side.LEFT)

    def update_height(self) -> None:
        """Recompute `height` from the children's cached heights."""
        self.height = 1 + max(
            self.child_height(Side.LEFT), self.child_height(Side.RIGHT)
        )

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


def height(node: Node | None) -> int:
    """Height of a subtree; an absent subtree has height 0."""
    return node.height if node is not None else 0
