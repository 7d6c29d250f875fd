"""Tests for structural quadtree transforms."""

import numpy as np
import pytest

from quadimg.color import Color
from quadimg.encoder import matrix_to_quadtree
from quadimg.renderer import make_matrix, render_matrix, tree_to_matrix
from quadimg.transforms import apply_transforms, invert_tree, rotate_left, rotate_right
from quadimg.tree import Leaf, Node

B = Leaf(Color.BLACK)
W = Leaf(Color.WHITE)

SAMPLE = [
    [1, 1, 0, 0],
    [1, 0, 0, 0],
    [0, 0, 1, 1],
    [0, 0, 1, 0],
]


def _random_trees(count=15, size=8, seed=3):
    rng = np.random.default_rng(seed)
    return [matrix_to_quadtree(rng.integers(0, 2, size=(size, size))) for _ in range(count)]


class TestRotateLeft:
    def test_leaf_unchanged(self):
        assert rotate_left(B) == B

    def test_permutes_children(self):
        tree = Node(Color.WHITE, B, W, W, W)  # black in NW
        assert rotate_left(tree) == Node(Color.WHITE, W, W, B, W)  # black in SW

    def test_keeps_summary_color(self):
        assert rotate_left(Node(Color.BLACK, B, W, W, W)).color is Color.BLACK

    def test_sample_rendering(self):
        rotated = rotate_left(matrix_to_quadtree(SAMPLE))
        assert tree_to_matrix(make_matrix(4, 4), rotated) == [
            [0, 0, 1, 0],
            [0, 0, 1, 1],
            [1, 0, 0, 0],
            [1, 1, 0, 0],
        ]

    def test_matches_counter_clockwise_rotation(self):
        rng = np.random.default_rng(11)
        for _ in range(10):
            grid = rng.integers(0, 2, size=(8, 8))
            rotated = render_matrix(rotate_left(matrix_to_quadtree(grid)), 8, 8)
            assert np.array_equal(rotated, np.rot90(grid))

    def test_four_turns_identity(self):
        for tree in _random_trees():
            assert rotate_left(rotate_left(rotate_left(rotate_left(tree)))) == tree

    def test_input_untouched(self):
        tree = matrix_to_quadtree(SAMPLE)
        rotate_left(tree)
        assert tree == matrix_to_quadtree(SAMPLE)


class TestRotateRight:
    def test_leaf_unchanged(self):
        assert rotate_right(W) == W

    def test_permutes_children(self):
        tree = Node(Color.WHITE, B, W, W, W)  # black in NW
        assert rotate_right(tree) == Node(Color.WHITE, W, B, W, W)  # black in NE

    def test_matches_clockwise_rotation(self):
        rng = np.random.default_rng(12)
        for _ in range(10):
            grid = rng.integers(0, 2, size=(8, 8))
            rotated = render_matrix(rotate_right(matrix_to_quadtree(grid)), 8, 8)
            assert np.array_equal(rotated, np.rot90(grid, k=-1))

    def test_inverse_of_rotate_left(self):
        for tree in _random_trees():
            assert rotate_right(rotate_left(tree)) == tree
            assert rotate_left(rotate_right(tree)) == tree


class TestInvertTree:
    def test_leaf(self):
        assert invert_tree(B) == W

    def test_node_summary_color_inverted(self):
        assert invert_tree(Node(Color.WHITE, B, W, W, W)) == Node(Color.BLACK, W, B, B, B)

    def test_involution(self):
        for tree in _random_trees():
            assert invert_tree(invert_tree(tree)) == tree

    def test_sample_rendering(self):
        inverted = invert_tree(matrix_to_quadtree(SAMPLE))
        assert tree_to_matrix(make_matrix(4, 4), inverted) == [
            [0, 0, 1, 1],
            [0, 1, 1, 1],
            [1, 1, 0, 0],
            [1, 1, 0, 1],
        ]

    def test_commutes_with_rotation(self):
        for tree in _random_trees(count=5):
            assert invert_tree(rotate_left(tree)) == rotate_left(invert_tree(tree))


class TestApplyTransforms:
    def test_empty_sequence_is_identity(self):
        tree = matrix_to_quadtree(SAMPLE)
        assert apply_transforms(tree, []) == tree

    def test_applies_in_order(self):
        tree = matrix_to_quadtree(SAMPLE)
        result = apply_transforms(tree, ["invert", "rotate_left"])
        assert result == rotate_left(invert_tree(tree))

    def test_cancelling_sequence(self):
        tree = matrix_to_quadtree(SAMPLE)
        ops = ["rotate_left", "invert", "rotate_right", "invert"]
        assert apply_transforms(tree, ops) == tree

    def test_unknown_name_raises(self):
        with pytest.raises(ValueError, match="Unknown transform"):
            apply_transforms(B, ["flip"])
