#!/usr/bin/env python3
"""Basic usage example for Quadimg.

Demonstrates building a quadtree from a pixel grid, transforming it,
measuring it, and rendering it back to P1 text.

Usage:
    python examples/basic_usage.py
"""

import io
import os
import sys

# Add parent directory to path for direct script execution
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from quadimg.encoder import matrix_to_quadtree
from quadimg.metrics import tree_stats
from quadimg.pbm import format_pbm, print_matrix_p1, read_pbm
from quadimg.renderer import make_matrix, tree_to_matrix
from quadimg.transforms import invert_tree, rotate_left, rotate_right

SAMPLE = [
    [1, 1, 0, 0],
    [1, 0, 0, 0],
    [0, 0, 1, 1],
    [0, 0, 1, 0],
]


def example_invert():
    """Build a tree, invert it and print the rendered result."""
    print("=" * 60)
    print("Example 1: Invert")
    print("=" * 60)

    tree = matrix_to_quadtree(SAMPLE)
    inverted = invert_tree(tree)
    print_matrix_p1(tree_to_matrix(make_matrix(4, 4), inverted))
    print()


def example_rotations():
    """Rotate left and right and check they cancel out."""
    print("=" * 60)
    print("Example 2: Rotations")
    print("=" * 60)

    tree = matrix_to_quadtree(SAMPLE)
    left = rotate_left(tree)
    print("  Rotated left:")
    for row in tree_to_matrix(make_matrix(4, 4), left):
        print(f"    {row}")
    print(f"  Left then right is identity: {rotate_right(left) == tree}")
    print()


def example_stats():
    """Print structural metrics."""
    print("=" * 60)
    print("Example 3: Structural Metrics")
    print("=" * 60)

    stats = tree_stats(matrix_to_quadtree(SAMPLE))
    print(f"  Leaves:      {stats.leaves}")
    print(f"  Nodes:       {stats.nodes}")
    print(f"  Min branch:  {stats.min_branch}")
    print(f"  Max branch:  {stats.max_branch}")
    print()


def example_pbm_roundtrip():
    """Write a grid as P1 text and read it back."""
    print("=" * 60)
    print("Example 4: P1 Roundtrip")
    print("=" * 60)

    text = format_pbm(SAMPLE, trailing_delimiter=True)
    grid = read_pbm(io.StringIO(text))
    print(f"  Text length: {len(text)} chars")
    print(f"  Match:       {grid == SAMPLE}")
    print()


if __name__ == "__main__":
    example_invert()
    example_rotations()
    example_stats()
    example_pbm_roundtrip()
    print("All examples completed successfully.")
