"""
Binary Search Tree container over OccupiedNode/EmptyNode.

No rebalancing: sorted insertion order degenerates the tree into a chain.
"""

import logging
from collections.abc import AsyncIterator, Iterable, Iterator
from typing import Any

from bstree.interfaces.sorted_set import SortedSet
from bstree.models import nodes
from bstree.models.nodes import OccupiedNode, Tree

logger = logging.getLogger(__name__)


class BinarySearchTree(SortedSet):
    """
    Unbalanced binary search tree implementation of SortedSet.

    Properties maintained:
    1. Every key in a left subtree is less than its parent's key
    2. Every key in a right subtree is greater than its parent's key
    3. Duplicates are rejected, never stored
    4. Every position is an OccupiedNode or the EmptyNode sentinel
    """

    def __init__(self, keys: Iterable[Any] | None = None) -> None:
        """
        Initialize the tree.

        Args:
            keys: Optional keys to build from. When given, they must not be
                  empty (raises EmptyInputError). When None, the tree starts
                  out empty.
        """
        self._root: Tree = nodes.empty()
        self._size: int = 0

        if keys is not None:
            self._root = nodes.from_sequence(keys)
            self._size = self._root.size()
            logger.debug(f"Built tree with {self._size} keys from sequence")

    @classmethod
    def from_sequence(cls, items: Iterable[Any]) -> "BinarySearchTree":
        """Build a tree from a non-empty sequence of keys."""
        return cls(keys=items)

    @property
    def root(self) -> Tree:
        return self._root

    @property
    def is_empty(self) -> bool:
        return self._root.is_empty

    def insert(self, key: Any) -> bool:
        """Add key if absent. O(depth)"""
        self._root, inserted = nodes.insert(self._root, key)
        if inserted:
            self._size += 1
        else:
            logger.debug(f"Rejected duplicate key {key!r}")
        return inserted

    def insert_all(self, keys: Iterable[Any]) -> list[bool]:
        """
        Insert multiple keys in order.

        Args:
            keys: Keys to insert.

        Returns:
            List of insertion results, one per key.
        """
        results = []
        for key in keys:
            results.append(self.insert(key))
        return results

    def contains(self, key: Any) -> bool:
        return self._root.contains(key)

    def to_sequence(self) -> list[Any]:
        return self._root.to_sequence()

    def describe(self) -> str:
        return self._root.describe()

    def size(self) -> int:
        return self._size

    def depth(self) -> int:
        return self._root.depth()

    def __contains__(self, key: Any) -> bool:
        return self.contains(key)

    def __len__(self) -> int:
        return self._size

    def __str__(self) -> str:
        return self.describe()

    def __repr__(self) -> str:
        return f"BinarySearchTree({self.to_sequence()!r})"

    def __iter__(self) -> Iterator[Any]:
        return iter(self._root)

    def __aiter__(self) -> AsyncIterator[Any]:
        return _AsyncInOrderIterator(self._root)


class _AsyncInOrderIterator(AsyncIterator[Any]):
    """Async iterator for in-order traversal (in-memory, no I/O)."""

    def __init__(self, root: Tree) -> None:
        self._stack: list[OccupiedNode] = []
        self._push_left_path(root)

    def __aiter__(self) -> "_AsyncInOrderIterator":
        return self

    async def __anext__(self) -> Any:
        if not self._stack:
            raise StopAsyncIteration

        node = self._stack.pop()

        # Push right subtree's left path
        self._push_left_path(node.right)

        return node.key

    def _push_left_path(self, node: Tree) -> None:
        while not node.is_empty:
            self._stack.append(node)
            node = node.left
