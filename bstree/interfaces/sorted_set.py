"""
SortedSet abstract base class for ordered, duplicate-free key containers.
"""

from abc import abstractmethod
from typing import Any

from bstree.interfaces.in_order_iterable import InOrderIterable


class SortedSet(InOrderIterable):
    """
    Abstract base class for ordered sets of keys.

    Keys must be totally ordered through ``<`` and ``>``.
    Inherits in-order traversal from InOrderIterable.

    Implementations:
    - BinarySearchTree: unbalanced, terminated by Empty nodes
    """

    @abstractmethod
    def insert(self, key: Any) -> bool:
        """
        Add a key if it is not already present.

        Args:
            key: The key to insert.

        Returns:
            True if the key was added, False if it was already present.

        Time complexity: O(depth)
        """
        pass

    @abstractmethod
    def contains(self, key: Any) -> bool:
        """
        Check if a key is present.

        Args:
            key: The key to check.

        Returns:
            True if the key is present, False otherwise.

        Time complexity: O(depth)
        """
        pass

    @abstractmethod
    def to_sequence(self) -> list[Any]:
        """
        Return all keys in ascending order.

        Returns:
            A new list; the original insertion order is not recoverable.

        Time complexity: O(N)
        """
        pass

    @abstractmethod
    def describe(self) -> str:
        """
        Return a diagnostic rendering of the structure's shape.
        """
        pass

    @abstractmethod
    def size(self) -> int:
        """
        Return the number of keys.

        Returns:
            The count of keys in the container.
        """
        pass

    @abstractmethod
    def depth(self) -> int:
        """
        Return the number of nodes on the longest root-to-leaf path.

        Returns:
            0 for an empty container.
        """
        pass
