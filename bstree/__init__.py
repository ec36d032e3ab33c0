"""
Unbalanced binary search tree terminated by Empty nodes.

This package provides an ordered, duplicate-free key container with:
- insert(tree, key) - O(depth), returns whether the key was added
- contains(tree, key) - O(depth)
- to_sequence(tree) - ascending keys, O(N)
- from_sequence(keys) - build from a non-empty sequence
- describe(tree) - nested-bracket rendering of the tree's shape
"""

from bstree.models.binary_search_tree import BinarySearchTree
from bstree.models.exceptions import EmptyInputError
from bstree.models.nodes import (
    EmptyNode,
    OccupiedNode,
    Tree,
    contains,
    describe,
    empty,
    from_sequence,
    insert,
    leaf,
    to_sequence,
)

__all__ = [
    "BinarySearchTree",
    "EmptyInputError",
    "EmptyNode",
    "OccupiedNode",
    "Tree",
    "contains",
    "describe",
    "empty",
    "from_sequence",
    "insert",
    "leaf",
    "to_sequence",
]
