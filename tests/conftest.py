"""
Shared pytest fixtures for ordered set tests.
"""

import random

import pytest

from ordset import AVLTree
from ordset.engine.mutation import insert
from ordset.models.node import Node


def build(values) -> Node | None:
    """Build a subtree by inserting values in order."""
    root = None
    for value in values:
        root, _ = insert(root, value)
    return root


def inorder(node: Node | None) -> list:
    """Collect subtree values recursively, independent of the iterators."""
    if node is None:
        return []
    return inorder(node.left) + [node.value] + inorder(node.right)


@pytest.fixture
def empty_tree():
    """Provide a fresh empty AVLTree."""
    return AVLTree()


@pytest.fixture
def ascending_tree():
    """Provide a tree built from 1..7 in ascending order."""
    return AVLTree(range(1, 8))


@pytest.fixture
def descending_tree():
    """Provide a tree built from 7..1 in descending order."""
    return AVLTree(range(7, 0, -1))


@pytest.fixture
def rng():
    """Provide a seeded random generator."""
    return random.Random(1234)


@pytest.fixture
def shuffled_values(rng):
    """Provide 500 distinct values in random order."""
    values = list(range(500))
    rng.shuffle(values)
    return values
