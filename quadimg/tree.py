"""Quadtree data structures for binary images.

A quadtree is either a uniform :class:`Leaf` or a :class:`Node` that
splits its region into four quadrants. Children are always stored in the
fixed order northwest, northeast, southwest, southeast; every builder,
transform, metric and renderer in this package depends on that order.

Trees are frozen dataclasses, so they compare structurally, hash, and
can be shared freely between readers once built.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

from .color import Color

# Summary colour stored at every internal node. It is a placeholder, not
# an aggregate of the children, and must never be used to reconstruct pixels.
DEFAULT_SUMMARY_COLOR = Color.WHITE


@dataclass(frozen=True)
class Leaf:
    """A region of one uniform colour.

    Attributes:
        color: Colour of every pixel in the region.
    """

    color: Color


@dataclass(frozen=True)
class Node:
    """An internal node with exactly four children.

    Attributes:
        color: Summary colour (decorative, see DEFAULT_SUMMARY_COLOR).
        nw: Northwest quadrant.
        ne: Northeast quadrant.
        sw: Southwest quadrant.
        se: Southeast quadrant.
    """

    color: Color
    nw: Quadtree
    ne: Quadtree
    sw: Quadtree
    se: Quadtree

    @property
    def children(self) -> tuple[Quadtree, Quadtree, Quadtree, Quadtree]:
        """Children in (nw, ne, sw, se) order."""
        return (self.nw, self.ne, self.sw, self.se)


Quadtree = Union[Leaf, Node]


def tree_to_dict(tree: Quadtree) -> dict[str, Any]:
    """Convert a quadtree to nested plain dicts (JSON friendly).

    A leaf becomes ``{"color": "black"}``; a node additionally carries a
    ``children`` list in (nw, ne, sw, se) order.
    """
    if isinstance(tree, Leaf):
        return {"color": tree.color.value}
    return {
        "color": tree.color.value,
        "children": [tree_to_dict(child) for child in tree.children],
    }


def tree_from_dict(data: dict[str, Any]) -> Quadtree:
    """Rebuild a quadtree from the output of :func:`tree_to_dict`.

    Args:
        data: Nested dict with ``color`` and optional ``children``.

    Returns:
        The equivalent Leaf or Node.

    Raises:
        ValueError: If a colour is unknown or a node does not have exactly
            four children.
    """
    if not isinstance(data, dict):
        raise ValueError(f"Tree entries must be objects, got {type(data).__name__}")
    try:
        color = Color(data.get("color"))
    except ValueError:
        raise ValueError(f"Unknown color: {data.get('color')!r}") from None

    children = data.get("children")
    if children is None:
        return Leaf(color)
    if not isinstance(children, list) or len(children) != 4:
        raise ValueError("Tree nodes must have exactly 4 children")
    nw, ne, sw, se = (tree_from_dict(child) for child in children)
    return Node(color, nw, ne, sw, se)
