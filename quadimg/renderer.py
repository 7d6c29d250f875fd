"""Pixel-grid rendering for quadtrees.

Paints a quadtree back into a grid of 0/1 pixels by walking the tree with
the same halving rule the builder uses: every leaf fills its whole
quadrant rectangle (1 for black, 0 for white), every node recurses into
its four quadrants in (nw, ne, sw, se) order.
"""

from __future__ import annotations

from collections.abc import MutableSequence

import numpy as np
import structlog

from .color import color_to_pixel
from .encoder import grid_dimensions
from .tree import Leaf, Quadtree

logger = structlog.get_logger(__name__)


def make_matrix(width: int, height: int, fill: int = 0) -> list[list[int]]:
    """Allocate a ``height`` x ``width`` grid filled with ``fill``."""
    if width <= 0 or height <= 0:
        raise ValueError(f"Grid dimensions must be positive, got {width}x{height}")
    return [[fill] * width for _ in range(height)]


def tree_to_matrix(grid: MutableSequence | np.ndarray, tree: Quadtree):
    """Render a quadtree into a pre-allocated grid.

    The grid is overwritten in place and also returned, so both
    ``tree_to_matrix(make_matrix(4, 4), tree)`` and mutating an existing
    buffer work.

    Args:
        grid: Target rows (list of lists or 2-D numpy array). Its size
            decides the size of every quadrant.
        tree: Quadtree built for a grid of this size.

    Returns:
        The same grid object, filled with 0/1 pixels.

    Raises:
        ValueError: If the grid is empty or ragged, or the tree splits
            deeper than the grid has pixels or splits a region with an
            odd side.
    """
    width, height = grid_dimensions(grid)

    def paint(x: int, y: int, w: int, h: int, node: Quadtree) -> None:
        if isinstance(node, Leaf):
            pixel = color_to_pixel(node.color)
            for i in range(y, y + h):
                row = grid[i]
                for j in range(x, x + w):
                    row[j] = pixel
            return

        if w < 2 or h < 2:
            raise ValueError(
                f"Tree is too deep for a {width}x{height} grid: "
                f"cannot split a {w}x{h} region at ({x}, {y})"
            )
        if w % 2 or h % 2:
            raise ValueError(
                f"Tree does not fit a {width}x{height} grid: "
                f"cannot split a {w}x{h} region at ({x}, {y}) evenly"
            )
        half_w = w // 2
        half_h = h // 2
        paint(x, y, half_w, half_h, node.nw)
        paint(x + half_w, y, half_w, half_h, node.ne)
        paint(x, y + half_h, half_w, half_h, node.sw)
        paint(x + half_w, y + half_h, half_w, half_h, node.se)

    paint(0, 0, width, height, tree)

    logger.debug("matrix_rendered", width=width, height=height)
    return grid


def render_matrix(tree: Quadtree, width: int, height: int) -> np.ndarray:
    """Render a quadtree into a fresh ``uint8`` array of the given size."""
    if width <= 0 or height <= 0:
        raise ValueError(f"Grid dimensions must be positive, got {width}x{height}")
    return tree_to_matrix(np.zeros((height, width), dtype=np.uint8), tree)
