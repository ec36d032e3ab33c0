"""
Property tests for ordering, membership and insertion invariants.
"""

import pytest
from hypothesis import given, strategies as st

from bstree import BinarySearchTree, EmptyInputError, from_sequence


keys = st.lists(st.integers())
non_empty_keys = st.lists(st.integers(), min_size=1)


class TestTreeProperties:
    """Invariants that hold for any insertion order."""

    @given(keys)
    def test_to_sequence_strictly_ascending(self, xs):
        """Test that conversion is strictly ascending after any inserts."""
        tree = BinarySearchTree()
        tree.insert_all(xs)

        result = tree.to_sequence()
        assert all(a < b for a, b in zip(result, result[1:]))

    @given(non_empty_keys)
    def test_round_trip_is_sorted_set(self, xs):
        """Test that building then converting gives the sorted, deduplicated keys."""
        assert from_sequence(xs).to_sequence() == sorted(set(xs))

    @given(st.sets(st.integers(), min_size=1), st.randoms())
    def test_result_is_order_independent(self, s, rnd):
        """Test that every permutation of a key set converts to the same list."""
        shuffled = list(s)
        rnd.shuffle(shuffled)
        assert from_sequence(shuffled).to_sequence() == sorted(s)

    @given(non_empty_keys, st.integers())
    def test_membership(self, xs, other):
        """Test that stored keys are found and absent keys are not."""
        root = from_sequence(xs)

        for x in xs:
            assert root.contains(x)
        assert root.contains(other) == (other in xs)

    @given(keys, st.integers())
    def test_insert_is_idempotent(self, xs, key):
        """Test that a second insert of a key returns False and changes nothing."""
        tree = BinarySearchTree()
        tree.insert_all(xs)

        tree.insert(key)
        before = tree.to_sequence()

        assert not tree.insert(key)
        assert tree.contains(key)
        assert tree.to_sequence() == before

    @given(keys)
    def test_size_matches_successful_inserts(self, xs):
        """Test that the size counter equals the number of unique keys."""
        tree = BinarySearchTree()
        results = tree.insert_all(xs)

        assert len(tree) == sum(results) == len(set(xs))
        assert tree.root.size() == len(tree)

    @given(st.lists(st.text()))
    def test_text_keys(self, xs):
        """Test ordering with string keys."""
        tree = BinarySearchTree()
        tree.insert_all(xs)
        assert list(tree) == sorted(set(xs))


def test_from_sequence_rejects_empty():
    """Test that an empty sequence raises EmptyInputError."""
    with pytest.raises(EmptyInputError):
        from_sequence([])
