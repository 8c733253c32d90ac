"""Tests for the persistent binary tree."""

import pytest

from fpbook.data_structures.tree import Branch, Leaf, branch, leaf


@pytest.fixture
def sample_tree():
    """Branch(Branch(Leaf(1), Leaf(7)), Leaf(3))."""
    return branch(branch(leaf(1), leaf(7)), leaf(3))


class TestTreeFold:
    """Test the generalized fold and operations built on it."""

    def test_fold_on_a_leaf(self):
        assert leaf(5).fold(lambda a: a * 2, lambda l, r: l + r) == 10

    def test_fold_combines_subtrees(self, sample_tree):
        assert sample_tree.fold(lambda a: a, lambda l, r: l + r) == 11

    def test_size_counts_leaves_and_branches(self, sample_tree):
        assert leaf(1).size() == 1
        assert sample_tree.size() == 5

    def test_maximum(self, sample_tree):
        assert leaf(-4).maximum() == -4
        assert sample_tree.maximum() == 7

    def test_depth_counts_nodes(self, sample_tree):
        assert leaf(1).depth() == 1
        assert branch(leaf(1), leaf(2)).depth() == 2
        assert sample_tree.depth() == 3

    def test_fold_on_a_deep_left_spine(self):
        tree = leaf(0)
        for i in range(1, 50):
            tree = branch(tree, leaf(i))
        assert tree.fold(lambda a: a, lambda l, r: l + r) == sum(range(50))
        assert tree.depth() == 50

    def test_map_preserves_shape(self, sample_tree):
        mapped = sample_tree.map(str)
        assert mapped == Branch(Branch(Leaf("1"), Leaf("7")), Leaf("3"))
        assert mapped.size() == sample_tree.size()
        assert mapped.depth() == sample_tree.depth()


class TestTreeValues:
    """Test equality and immutability."""

    def test_structural_equality(self):
        assert branch(leaf(1), leaf(2)) == branch(leaf(1), leaf(2))
        assert branch(leaf(1), leaf(2)) != branch(leaf(2), leaf(1))
        assert leaf(1) != branch(leaf(1), leaf(1))

    def test_hashable(self):
        assert len({leaf(1), leaf(1), branch(leaf(1), leaf(1))}) == 2

    def test_frozen(self):
        with pytest.raises(AttributeError):
            leaf(1).value = 2  # type: ignore[misc]
