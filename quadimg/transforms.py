"""Structural transforms on quadtrees.

Every transform is a pure recursive map: it returns a brand new tree and
leaves its input untouched. Rotations only permute quadrant roles, so
they work for any region shape; rendering a quarter-turned tree needs
the width and height swapped.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

import structlog

from .color import invert_color
from .tree import Leaf, Node, Quadtree

logger = structlog.get_logger(__name__)


def rotate_left(tree: Quadtree) -> Quadtree:
    """Rotate the represented image 90 degrees counter-clockwise.

    The old NE quadrant becomes the new NW, SE becomes NE, NW becomes SW
    and SW becomes SE, each rotated recursively.
    """
    if isinstance(tree, Leaf):
        return tree
    return Node(
        tree.color,
        rotate_left(tree.ne),
        rotate_left(tree.se),
        rotate_left(tree.nw),
        rotate_left(tree.sw),
    )


def rotate_right(tree: Quadtree) -> Quadtree:
    """Rotate the represented image 90 degrees clockwise.

    Inverse permutation of :func:`rotate_left`: the old SW quadrant
    becomes the new NW, NW becomes NE, SE becomes SW and NE becomes SE.
    """
    if isinstance(tree, Leaf):
        return tree
    return Node(
        tree.color,
        rotate_right(tree.sw),
        rotate_right(tree.nw),
        rotate_right(tree.se),
        rotate_right(tree.ne),
    )


def invert_tree(tree: Quadtree) -> Quadtree:
    """Swap black and white everywhere, summary colours included."""
    if isinstance(tree, Leaf):
        return Leaf(invert_color(tree.color))
    return Node(
        invert_color(tree.color),
        invert_tree(tree.nw),
        invert_tree(tree.ne),
        invert_tree(tree.sw),
        invert_tree(tree.se),
    )


TRANSFORMS: dict[str, Callable[[Quadtree], Quadtree]] = {
    "rotate_left": rotate_left,
    "rotate_right": rotate_right,
    "invert": invert_tree,
}

# Transforms that turn the image a quarter, swapping width and height
QUARTER_TURNS = frozenset({"rotate_left", "rotate_right"})


def apply_transforms(tree: Quadtree, names: Iterable[str]) -> Quadtree:
    """Apply named transforms left to right.

    Args:
        tree: Input quadtree.
        names: Transform names from :data:`TRANSFORMS`.

    Returns:
        The transformed tree.

    Raises:
        ValueError: If a name is not a known transform.
    """
    applied: list[str] = []
    for name in names:
        transform = TRANSFORMS.get(name)
        if transform is None:
            raise ValueError(
                f"Unknown transform: {name}. Valid transforms: {', '.join(TRANSFORMS)}"
            )
        tree = transform(tree)
        applied.append(name)

    logger.debug("transforms_applied", transforms=applied)
    return tree
