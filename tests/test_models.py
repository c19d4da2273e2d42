"""
Tests for data models: Node, Side and TreeInvariantError.
"""

from ordset.models.exceptions import TreeInvariantError
from ordset.models.node import Node, Side, height


class TestSide:
    """Tests for Side."""

    def test_opposite(self):
        """Test that each side mirrors to the other."""
        assert Side.LEFT.opposite is Side.RIGHT
        assert Side.RIGHT.opposite is Side.LEFT


class TestNode:
    """Tests for Node."""

    def test_new_node_is_leaf(self):
        """Test defaults of a freshly created node."""
        node = Node(value=5)
        assert node.height == 1
        assert node.left is None
        assert node.right is None
        assert node.is_leaf()

    def test_child_by_side(self):
        """Test reading and writing children through Side."""
        node = Node(value=5)
        left, right = Node(value=3), Node(value=8)

        node.set_child(Side.LEFT, left)
        node.set_child(Side.RIGHT, right)

        assert node.child(Side.LEFT) is left
        assert node.child(Side.RIGHT) is right
        assert node.left is left
        assert node.right is right
        assert not node.is_leaf()

    def test_height_of_absent_subtree(self):
        """Test that a missing subtree has height 0."""
        assert height(None) == 0
        assert height(Node(value=1, height=4)) == 4

    def test_update_height(self):
        """Test height recomputation from children."""
        node = Node(value=5, left=Node(value=3, height=2), right=Node(value=8))
        node.update_height()
        assert node.height == 3

    def test_balance_factor(self):
        """Test balance factor sign convention (right minus left)."""
        left_heavy = Node(value=5, left=Node(value=3, height=2))
        right_heavy = Node(value=5, right=Node(value=8))
        even = Node(value=5, left=Node(value=3), right=Node(value=8))

        assert left_heavy.balance_factor() == -2
        assert right_heavy.balance_factor() == 1
        assert even.balance_factor() == 0


class TestTreeInvariantError:
    """Tests for TreeInvariantError."""

    def test_attributes_and_message(self):
        """Test that the error carries the offending value and reason."""
        error = TreeInvariantError(7, "unbalanced")

        assert isinstance(error, AssertionError)
        assert error.value == 7
        assert error.reason == "unbalanced"
        assert "7" in str(error)
        assert "unbalanced" in str(error)
