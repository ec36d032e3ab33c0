"""
Shared pytest fixtures for binary search tree tests.
"""

import pytest

from bstree import BinarySearchTree, from_sequence


@pytest.fixture
def sample_keys():
    """Provide the insertion order used by the worked example."""
    return [10, 5, 15, 3]


@pytest.fixture
def sample_root(sample_keys):
    """Provide a node-level tree built from sample_keys."""
    return from_sequence(sample_keys)


@pytest.fixture
def sample_tree(sample_keys):
    """Provide a BinarySearchTree built from sample_keys."""
    return BinarySearchTree(sample_keys)


@pytest.fixture
def empty_tree():
    """Provide a fresh, empty BinarySearchTree."""
    return BinarySearchTree()


@pytest.fixture
def large_shuffled_keys():
    """Provide a larger, deterministically shuffled key set."""
    keys = list(range(1000))
    # Fixed permutation: 7919 is prime and coprime to 1000
    return [(i * 7919) % 1000 for i in keys]
