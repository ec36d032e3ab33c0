"""
Tree nodes for the binary search tree.

A position in the tree is either an OccupiedNode holding a key and two
subtrees, or the EmptyNode sentinel. Leaves point at EmptyNode instead of
None, so every operation can be dispatched on the node itself.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any

from bstree.models.exceptions import EmptyInputError


class Tree(ABC):
    """
    Base class for both node variants.

    Keys must be totally ordered through ``<`` and ``>``. A comparison that
    raises propagates to the caller unchanged.
    """

    @property
    @abstractmethod
    def is_empty(self) -> bool:
        pass

    @abstractmethod
    def insert(self, key: Any) -> bool:
        """Add key below this node. Returns True if the tree grew."""
        pass

    @abstractmethod
    def contains(self, key: Any) -> bool:
        pass

    @abstractmethod
    def describe(self) -> str:
        """Render the shape as nested ``{key:left|right}`` brackets."""
        pass

    def to_sequence(self) -> list[Any]:
        """Return all keys in ascending order. O(N)"""
        return list(self)

    def size(self) -> int:
        return sum(1 for _ in self)

    def depth(self) -> int:
        """Number of nodes on the longest path down from this node."""
        deepest = 0
        stack: list[tuple[Tree, int]] = [(self, 1)]
        while stack:
            node, level = stack.pop()
            if node.is_empty:
                continue
            deepest = max(deepest, level)
            stack.append((node.left, level + 1))
            stack.append((node.right, level + 1))
        return deepest

    def __iter__(self) -> Iterator[Any]:
        return _InOrderIterator(self)

    def __str__(self) -> str:
        return self.describe()


class EmptyNode(Tree):
    """
    Sentinel for "no key here, and nothing below".

    Stateless, so a single shared instance terminates every leaf.
    """

    @property
    def is_empty(self) -> bool:
        return True

    def insert(self, key: Any) -> bool:
        # Holds no key, so it cannot grow in place. The owner of this
        # reference swaps it for leaf(key).
        return False

    def contains(self, key: Any) -> bool:
        return False

    def describe(self) -> str:
        return "{}"

    def __repr__(self) -> str:
        return "EmptyNode()"


_EMPTY = EmptyNode()


def empty() -> EmptyNode:
    """Return the Empty sentinel."""
    return _EMPTY


@dataclass(eq=False, repr=False)
class OccupiedNode(Tree):
    """Node holding a key and its two subtrees."""

    key: Any
    left: Tree = field(default_factory=empty)
    right: Tree = field(default_factory=empty)

    @property
    def is_empty(self) -> bool:
        return False

    def insert(self, key: Any) -> bool:
        """Insert key, replacing an Empty child slot with a leaf. O(depth)"""
        current = self
        while True:
            if key < current.key:
                if current.left.is_empty:
                    current.left = leaf(key)
                    return True
                current = current.left
            elif key > current.key:
                if current.right.is_empty:
                    current.right = leaf(key)
                    return True
                current = current.right
            else:
                # Already present
                return False

    def contains(self, key: Any) -> bool:
        """Membership check. O(depth)"""
        current: Tree = self
        while not current.is_empty:
            if key < current.key:
                current = current.left
            elif key > current.key:
                current = current.right
            else:
                return True
        return current.contains(key)

    def describe(self) -> str:
        parts: list[str] = []
        stack: list[Tree | str] = [self]
        while stack:
            item = stack.pop()
            if isinstance(item, str):
                parts.append(item)
            elif item.is_empty:
                parts.append(item.describe())
            else:
                # Pushed in reverse of output order
                stack.extend(["}", item.right, "|", item.left, f"{{{item.key}:"])
        return "".join(parts)

    def __repr__(self) -> str:
        return f"OccupiedNode({self.describe()})"


def leaf(key: Any) -> OccupiedNode:
    """Return an OccupiedNode holding key with two Empty children."""
    return OccupiedNode(key=key)


def from_sequence(items: Iterable[Any]) -> OccupiedNode:
    """
    Build a tree by inserting items in order.

    The first item seeds the root and is then offered again like every
    other item, where it is rejected as a duplicate. The resulting shape
    depends on the order of items; only the set of keys is canonical.

    Args:
        items: Keys to insert. May be a one-shot iterator.

    Returns:
        The root node.

    Raises:
        EmptyInputError: If items yields no keys.
    """
    iterator = iter(items)
    try:
        first = next(iterator)
    except StopIteration:
        raise EmptyInputError() from None

    root = leaf(first)
    root.insert(first)
    for item in iterator:
        root.insert(item)
    return root


def insert(tree: Tree, key: Any) -> tuple[Tree, bool]:
    """
    Insert key into tree.

    Returns:
        (root, inserted). root is a new leaf when tree was Empty, otherwise
        the same tree, grown in place.
    """
    if tree.is_empty:
        return leaf(key), True
    return tree, tree.insert(key)


def contains(tree: Tree, key: Any) -> bool:
    return tree.contains(key)


def to_sequence(tree: Tree) -> list[Any]:
    return tree.to_sequence()


def describe(tree: Tree) -> str:
    return tree.describe()


class _InOrderIterator(Iterator[Any]):
    """Iterator for in-order traversal, using an explicit stack."""

    def __init__(self, root: Tree) -> None:
        self._stack: list[OccupiedNode] = []
        self._push_left_path(root)

    def __iter__(self) -> Iterator[Any]:
        return self

    def __next__(self) -> Any:
        if not self._stack:
            raise StopIteration

        node = self._stack.pop()

        # Push right subtree's left path
        self._push_left_path(node.right)

        return node.key

    def _push_left_path(self, node: Tree) -> None:
        while not node.is_empty:
            self._stack.append(node)
            node = node.left
