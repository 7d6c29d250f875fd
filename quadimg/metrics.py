"""Structural metrics computed directly on quadtrees."""

from __future__ import annotations

from dataclasses import dataclass

from .tree import Leaf, Quadtree


def count_leaves(tree: Quadtree) -> int:
    """Number of uniform regions (leaves) in the tree."""
    if isinstance(tree, Leaf):
        return 1
    return sum(count_leaves(child) for child in tree.children)


def count_nodes(tree: Quadtree) -> int:
    """Number of internal (non-leaf) nodes in the tree."""
    if isinstance(tree, Leaf):
        return 0
    return 1 + sum(count_nodes(child) for child in tree.children)


def min_branch_length(tree: Quadtree) -> int:
    """Edge count of the shortest path from the root to a leaf."""
    if isinstance(tree, Leaf):
        return 0
    return 1 + min(min_branch_length(child) for child in tree.children)


def max_branch_length(tree: Quadtree) -> int:
    """Edge count of the longest path from the root to a leaf."""
    if isinstance(tree, Leaf):
        return 0
    return 1 + max(max_branch_length(child) for child in tree.children)


@dataclass(frozen=True)
class TreeStats:
    """All structural metrics of one tree.

    Attributes:
        leaves: Leaf count.
        nodes: Internal node count.
        min_branch: Shortest root-to-leaf path, in edges.
        max_branch: Longest root-to-leaf path, in edges.
    """

    leaves: int
    nodes: int
    min_branch: int
    max_branch: int

    @property
    def total(self) -> int:
        """Leaves plus internal nodes."""
        return self.leaves + self.nodes


def tree_stats(tree: Quadtree) -> TreeStats:
    """Compute every structural metric of a tree in one bundle."""
    return TreeStats(
        leaves=count_leaves(tree),
        nodes=count_nodes(tree),
        min_branch=min_branch_length(tree),
        max_branch=max_branch_length(tree),
    )
