"""Two-colour model for binary raster images.

Pixels are stored as plain integers in grids: 1 is black, 0 is white.
Trees store :class:`Color` values instead so they can be inverted without
caring about the pixel encoding.
"""

from __future__ import annotations

from enum import Enum

BLACK_PIXEL = 1
WHITE_PIXEL = 0


class Color(Enum):
    """Colour of a uniform quadtree region."""

    BLACK = "black"
    WHITE = "white"


def invert_color(color: Color) -> Color:
    """Return the complementary colour."""
    return Color.WHITE if color is Color.BLACK else Color.BLACK


def color_from_pixel(value: int) -> Color:
    """Map a pixel value (1 = black, 0 = white) to a Color.

    Raises:
        ValueError: If the value is neither 0 nor 1.
    """
    if value == BLACK_PIXEL:
        return Color.BLACK
    if value == WHITE_PIXEL:
        return Color.WHITE
    raise ValueError(f"Pixel values must be 0 or 1, got {value!r}")


def color_to_pixel(color: Color) -> int:
    """Map a Color back to its pixel value."""
    return BLACK_PIXEL if color is Color.BLACK else WHITE_PIXEL
