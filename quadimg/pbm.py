"""ASCII raster codec for the plain ``P1`` bitmap format.

Layout::

    P1
    <width> <height>
    <row 0: width values, 0 or 1, whitespace separated>
    ...
    <row height-1>

The codec only deals in plain grids (lists of int rows); it never sees a
quadtree.
"""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import TextIO

import structlog

logger = structlog.get_logger(__name__)

PBM_MAGIC = "P1"


class RasterFormatError(ValueError):
    """Raised when raster text cannot be parsed."""


def _parse_int(token: str, what: str, line_no: int) -> int:
    try:
        return int(token)
    except ValueError:
        raise RasterFormatError(f"Line {line_no}: invalid {what} {token!r}") from None


def parse_pbm(text: str) -> list[list[int]]:
    """Parse ``P1`` text into a grid of rows.

    Args:
        text: Full raster text.

    Returns:
        ``height`` rows of ``width`` 0/1 integers.

    Raises:
        RasterFormatError: On an unsupported magic token, a malformed
            header, a malformed or out-of-range pixel, a row with the wrong
            number of values, or missing/extra rows.
    """
    lines = text.splitlines()
    # Blank lines before the magic and after the last row are tolerated
    while lines and not lines[-1].strip():
        lines.pop()
    start = 0
    while start < len(lines) and not lines[start].strip():
        start += 1
    if start == len(lines):
        raise RasterFormatError("Empty raster input")

    magic = lines[start].strip()
    if magic != PBM_MAGIC:
        raise RasterFormatError(f"Unsupported raster format: {magic!r} (expected {PBM_MAGIC!r})")

    if start + 1 >= len(lines):
        raise RasterFormatError("Missing width/height header")
    header_no = start + 2
    header = lines[start + 1].split()
    if len(header) != 2:
        raise RasterFormatError(
            f"Line {header_no}: header must contain width and height, got {len(header)} values"
        )
    width = _parse_int(header[0], "width", header_no)
    height = _parse_int(header[1], "height", header_no)
    if width <= 0 or height <= 0:
        raise RasterFormatError(f"Line {header_no}: dimensions must be positive, got {width}x{height}")

    rows = lines[start + 2 :]
    if len(rows) < height:
        raise RasterFormatError(f"Expected {height} rows, got {len(rows)}")
    if len(rows) > height:
        raise RasterFormatError(f"Expected {height} rows, got {len(rows)} (extra data after image)")

    grid: list[list[int]] = []
    for row_idx, line in enumerate(rows):
        line_no = header_no + 1 + row_idx
        tokens = line.split()
        if len(tokens) != width:
            raise RasterFormatError(f"Line {line_no}: expected {width} values, got {len(tokens)}")
        row = [_parse_int(token, "pixel", line_no) for token in tokens]
        for value in row:
            if value not in (0, 1):
                raise RasterFormatError(f"Line {line_no}: pixel values must be 0 or 1, got {value}")
        grid.append(row)

    logger.debug("pbm_parsed", width=width, height=height)
    return grid


def read_pbm(stream: TextIO) -> list[list[int]]:
    """Read a ``P1`` raster from a text stream."""
    return parse_pbm(stream.read())


def format_pbm(grid: Sequence[Sequence[int]], trailing_delimiter: bool = False) -> str:
    """Format a grid as ``P1`` text.

    Args:
        grid: Rows of 0/1 integers (list of lists or 2-D numpy array).
        trailing_delimiter: Append a space after the last value of every
            row, byte-compatible with writers that always emit a separator.

    Returns:
        Raster text ending with a newline.
    """
    height = len(grid)
    width = len(grid[0]) if height else 0
    lines = [PBM_MAGIC, f"{width} {height}"]
    suffix = " " if trailing_delimiter else ""
    for row in grid:
        lines.append(" ".join(str(int(value)) for value in row) + suffix)
    return "\n".join(lines) + "\n"


def write_pbm(
    grid: Sequence[Sequence[int]],
    stream: TextIO,
    trailing_delimiter: bool = False,
) -> None:
    """Write a grid to a text stream in ``P1`` format."""
    stream.write(format_pbm(grid, trailing_delimiter=trailing_delimiter))


def print_matrix_p1(grid: Sequence[Sequence[int]]) -> None:
    """Print a grid to stdout in ``P1`` format."""
    write_pbm(grid, sys.stdout)
