"""Quadtree builder for binary raster grids.

Converts a rectangular grid of 0/1 pixels into a compressed quadtree.

Encoding algorithm:
1. Validate the grid (rectangular, binary, square power-of-two side)
2. Split the region into four quadrants at half width / half height
3. Recurse until a quadrant is a single pixel (1 -> black, 0 -> white)
4. Merge four same-coloured leaves back into one leaf on the way up

Step 4 is what keeps the tree minimal: no node ever has four identical
leaf children, at any level.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np
import structlog

from .color import BLACK_PIXEL, WHITE_PIXEL, color_from_pixel
from .tree import DEFAULT_SUMMARY_COLOR, Leaf, Node, Quadtree

logger = structlog.get_logger(__name__)


def _is_power_of_two(n: int) -> bool:
    return n > 0 and n & (n - 1) == 0


def grid_dimensions(grid: Sequence[Sequence[int]] | np.ndarray) -> tuple[int, int]:
    """Return (width, height) of a non-empty rectangular grid.

    Raises:
        ValueError: If the grid is empty or its rows differ in length.
    """
    height = len(grid)
    if height == 0 or len(grid[0]) == 0:
        raise ValueError("Grid must have at least one row and one column")
    width = len(grid[0])
    for row_idx, row in enumerate(grid):
        if len(row) != width:
            raise ValueError(
                f"Grid is not rectangular: row {row_idx} has {len(row)} values (expected {width})"
            )
    return width, height


def validate_grid(grid: Sequence[Sequence[int]] | np.ndarray) -> np.ndarray:
    """Check that a grid can be encoded and return it as a 2-D array.

    The halving recursion only reaches 1x1 on both axes at the same time
    when width and height are the same power of two.

    Args:
        grid: Rows of 0/1 pixel values.

    Returns:
        The grid as a 2-D integer numpy array.

    Raises:
        ValueError: If the grid is empty, ragged, non-binary, or its
            dimensions are not a square power of two.
    """
    width, height = grid_dimensions(grid)
    pixels = np.asarray(grid)
    if pixels.ndim != 2:
        raise ValueError(f"Grid must be 2-dimensional, got {pixels.ndim} dimensions")

    if not np.isin(pixels, (WHITE_PIXEL, BLACK_PIXEL)).all():
        bad = pixels[~np.isin(pixels, (WHITE_PIXEL, BLACK_PIXEL))].flat[0]
        raise ValueError(f"Pixel values must be 0 or 1, got {bad!r}")

    if width != height or not _is_power_of_two(width):
        raise ValueError(
            f"Grid dimensions must be an equal power of two, got {width}x{height}"
        )
    return pixels


def matrix_to_quadtree(grid: Sequence[Sequence[int]] | np.ndarray) -> Quadtree:
    """Build a compressed quadtree from a binary pixel grid.

    Args:
        grid: Rows of 0/1 integers (list of lists or 2-D numpy array).
            Width is ``len(grid[0])``, height is ``len(grid)``.

    Returns:
        Root of the quadtree. A uniform grid yields a single Leaf.

    Raises:
        ValueError: If the grid fails :func:`validate_grid`.
    """
    pixels = validate_grid(grid)
    height, width = pixels.shape

    def build(x: int, y: int, w: int, h: int) -> Quadtree:
        if w == 1 and h == 1:
            return Leaf(color_from_pixel(int(pixels[y, x])))

        half_w = w // 2
        half_h = h // 2
        nw = build(x, y, half_w, half_h)
        ne = build(x + half_w, y, half_w, half_h)
        sw = build(x, y + half_h, half_w, half_h)
        se = build(x + half_w, y + half_h, half_w, half_h)

        if all(isinstance(child, Leaf) for child in (nw, ne, sw, se)):
            if nw.color == ne.color == sw.color == se.color:
                return Leaf(nw.color)
        return Node(DEFAULT_SUMMARY_COLOR, nw, ne, sw, se)

    tree = build(0, 0, width, height)

    logger.debug("quadtree_built", width=width, height=height, leaf=isinstance(tree, Leaf))
    return tree
