"""
Data models for the binary search tree.
"""

from bstree.models.exceptions import EmptyInputError
from bstree.models.nodes import EmptyNode, OccupiedNode, Tree
from bstree.models.binary_search_tree import BinarySearchTree

__all__ = [
    "EmptyInputError",
    "EmptyNode",
    "OccupiedNode",
    "Tree",
    "BinarySearchTree",
]
