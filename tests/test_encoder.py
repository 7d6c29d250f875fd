"""Tests for the quadtree builder."""

import numpy as np
import pytest

from quadimg.color import Color
from quadimg.encoder import matrix_to_quadtree, validate_grid
from quadimg.tree import DEFAULT_SUMMARY_COLOR, Leaf, Node

B = Leaf(Color.BLACK)
W = Leaf(Color.WHITE)

SAMPLE = [
    [1, 1, 0, 0],
    [1, 0, 0, 0],
    [0, 0, 1, 1],
    [0, 0, 1, 0],
]


def _no_uniform_nodes(tree) -> bool:
    """True if no node anywhere has four same-coloured leaf children."""
    if isinstance(tree, Leaf):
        return True
    children = tree.children
    if all(isinstance(c, Leaf) for c in children) and len({c.color for c in children}) == 1:
        return False
    return all(_no_uniform_nodes(c) for c in children)


class TestMatrixToQuadtree:
    def test_single_pixel_black(self):
        assert matrix_to_quadtree([[1]]) == B

    def test_single_pixel_white(self):
        assert matrix_to_quadtree([[0]]) == W

    def test_uniform_black_collapses(self):
        assert matrix_to_quadtree([[1, 1], [1, 1]]) == B

    def test_uniform_grids_collapse_to_one_leaf(self):
        for size in (1, 2, 4, 8, 16):
            for value, color in ((0, Color.WHITE), (1, Color.BLACK)):
                grid = [[value] * size for _ in range(size)]
                assert matrix_to_quadtree(grid) == Leaf(color)

    def test_sample_structure(self):
        corner = Node(DEFAULT_SUMMARY_COLOR, B, B, B, W)
        expected = Node(DEFAULT_SUMMARY_COLOR, corner, W, W, corner)
        assert matrix_to_quadtree(SAMPLE) == expected

    def test_quadrant_order(self):
        tree = matrix_to_quadtree([[1, 0], [0, 0]])
        assert tree == Node(DEFAULT_SUMMARY_COLOR, B, W, W, W)
        tree = matrix_to_quadtree([[0, 0], [0, 1]])
        assert tree.se == B

    def test_nested_collapse(self):
        grid = [[1, 1, 0, 0], [1, 1, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]]
        assert matrix_to_quadtree(grid) == Node(DEFAULT_SUMMARY_COLOR, B, W, W, W)

    def test_compression_invariant_on_random_grids(self):
        rng = np.random.default_rng(7)
        for _ in range(20):
            grid = rng.integers(0, 2, size=(8, 8))
            assert _no_uniform_nodes(matrix_to_quadtree(grid))

    def test_accepts_numpy_array(self):
        assert matrix_to_quadtree(np.array(SAMPLE)) == matrix_to_quadtree(SAMPLE)

    def test_does_not_mutate_input(self):
        grid = [row[:] for row in SAMPLE]
        matrix_to_quadtree(grid)
        assert grid == SAMPLE


class TestValidateGrid:
    def test_empty_raises(self):
        with pytest.raises(ValueError, match="at least one row"):
            validate_grid([])

    def test_empty_row_raises(self):
        with pytest.raises(ValueError, match="at least one row"):
            validate_grid([[]])

    def test_ragged_raises(self):
        with pytest.raises(ValueError, match="not rectangular"):
            validate_grid([[1, 0], [1]])

    def test_non_binary_raises(self):
        with pytest.raises(ValueError, match="0 or 1"):
            validate_grid([[1, 2], [0, 0]])

    def test_non_power_of_two_raises(self):
        with pytest.raises(ValueError, match="3x3"):
            validate_grid([[0] * 3 for _ in range(3)])

    def test_non_square_raises(self):
        with pytest.raises(ValueError, match="4x2"):
            matrix_to_quadtree([[0] * 4 for _ in range(2)])

    def test_returns_array(self):
        pixels = validate_grid(SAMPLE)
        assert pixels.shape == (4, 4)
