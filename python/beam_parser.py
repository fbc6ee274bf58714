"""
Grid parsing utilities for beamgrid.

Format:
- One row per line; row index becomes y, column index becomes x
- One character per cell:
  * '\\': Mirror(LEFT)
  * '/': Mirror(RIGHT)
  * '-': Splitter(HORIZONTAL)
  * '|': Splitter(VERTICAL)
  * '.': Empty cell (no entry in the grid mapping)
"""

from __future__ import annotations

import logging
from pathlib import Path
from types import MappingProxyType

from beam_types import (
    Bounds,
    CellContent,
    ConfigurationError,
    Coordinate,
    Grid,
    Mirror,
    MirrorOrientation,
    ParseError,
    Splitter,
    SplitterOrientation,
)

__all__ = ["load", "parse_grid", "load_grid"]

logger = logging.getLogger(__name__)

EMPTY_CHAR = "."

CELL_CHARS: dict[str, CellContent] = {
    MirrorOrientation.LEFT.symbol: Mirror(MirrorOrientation.LEFT),
    MirrorOrientation.RIGHT.symbol: Mirror(MirrorOrientation.RIGHT),
    SplitterOrientation.HORIZONTAL.symbol: Splitter(SplitterOrientation.HORIZONTAL),
    SplitterOrientation.VERTICAL.symbol: Splitter(SplitterOrientation.VERTICAL),
}


def _check_bounds(bounds: Bounds, rows: list[str]) -> None:
    """Raise ConfigurationError if explicit bounds cannot hold the input rows."""
    if bounds.width <= 0 or bounds.height <= 0:
        raise ConfigurationError(
            f"Bounds must be positive, got {bounds.width}x{bounds.height}"
        )

    cols = len(rows[0]) if rows else 0
    if len(rows) > bounds.height or cols > bounds.width:
        raise ConfigurationError(
            f"Input does not fit in configured bounds\n"
            f"  Input: {cols}x{len(rows)}\n"
            f"  Bounds: {bounds.width}x{bounds.height}"
        )


def parse_grid(text: str, bounds: Bounds | None = None) -> Grid:
    """
    Parse a grid from its character block.

    Example:
        ".-.\\n|/|"
        Creates a 3x2 grid with:
        - (1, 0): Splitter(HORIZONTAL)
        - (0, 1): Splitter(VERTICAL)
        - (1, 1): Mirror(RIGHT)
        - (2, 1): Splitter(VERTICAL)

    Args:
        text: Rows separated by newlines; trailing blank lines are ignored
        bounds: Explicit bounds; inferred from the input when None

    Returns:
        Grid holding only the non-empty cells

    Raises:
        ParseError: If a character is unknown or rows differ in length
        ConfigurationError: If explicit bounds are not positive or too small
    """
    rows = text.splitlines()
    while rows and not rows[-1]:
        rows.pop()

    cells: dict[Coordinate, CellContent] = {}
    for y, row in enumerate(rows):
        for x, char in enumerate(row):
            if char == EMPTY_CHAR:
                continue
            content = CELL_CHARS.get(char)
            if content is None:
                raise ParseError(
                    f"Unknown character {char!r} at ({x}, {y})\n"
                    f"  Row {y}: \"{row}\"\n"
                    f"  Valid characters: \\ / - | .",
                    char=char,
                    position=Coordinate(x, y),
                )
            cells[Coordinate(x, y)] = content

    # Validate all rows have same length
    if rows:
        cols = len(rows[0])
        mismatched = [(i, len(row)) for i, row in enumerate(rows) if len(row) != cols]
        if mismatched:
            error_msg = (
                f"Inconsistent row lengths\n"
                f"  Expected: {cols} columns (from row 0)\n"
                f"  Mismatched rows:\n"
            )
            for row_idx, actual_cols in mismatched:
                error_msg += f"    Row {row_idx}: {actual_cols} columns\n"
            error_msg += "  All rows must have the same number of cells"
            raise ParseError(error_msg)

    if bounds is None:
        bounds = Bounds(len(rows[0]) if rows else 0, len(rows))
    else:
        _check_bounds(bounds, rows)

    logger.debug(
        "parse_grid: %dx%d bounds, %d non-empty cells",
        bounds.width,
        bounds.height,
        len(cells),
    )
    return Grid(MappingProxyType(cells), bounds)


load = parse_grid


def load_grid(path: str | Path, bounds: Bounds | None = None) -> Grid:
    """Read a grid file and parse it."""
    text = Path(path).read_text(encoding="utf-8")
    return parse_grid(text, bounds)
