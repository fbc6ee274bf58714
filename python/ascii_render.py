"""
ASCII rendering for beamgrid results.

Provides two rendering approaches:
1. Energized map - plain '#'/'.' rows, one character per cell
2. Board view - bordered grid showing mirrors and splitters over the energized cells
"""

from __future__ import annotations

from collections.abc import Set
from typing import Callable

import simple_chalk as chalk  # type: ignore[import-untyped]

from beam_types import Bounds, Coordinate, Direction, Grid, Pass

ENERGIZED_CHAR = "#"
DARK_CHAR = "."

ARROWS = {
    Direction.N: "^",
    Direction.E: ">",
    Direction.S: "v",
    Direction.W: "<",
}


def render_energized(bounds: Bounds, energized: Set[Coordinate]) -> str:
    """
    Render an energized set as `height` rows of `width` characters.

    '#' marks an energized cell and '.' any other cell, rows top to bottom.
    """
    lines = []
    for y in range(bounds.height):
        lines.append(
            "".join(
                ENERGIZED_CHAR if Coordinate(x, y) in energized else DARK_CHAR
                for x in range(bounds.width)
            )
        )
    return "\n".join(lines)


def render_board(
    grid: Grid,
    energized: Set[Coordinate] = frozenset(),
    entry: Pass | None = None,
    color: bool = True,
) -> str:
    """
    Render a grid with its contents over the energized cells.

    Args:
        grid: The grid to render
        energized: Cells to mark as lit
        entry: Optional start pass; its cell shows the entry arrow, highlighted
        color: Colorize with ANSI escapes (plain text when False)

    Returns:
        Rendered string including a box border
    """
    plain: Callable[[str], str] = lambda s: s
    lit: Callable[[str], str] = chalk.yellowBright if color else plain
    content_lit: Callable[[str], str] = chalk.yellow if color else plain
    content_dark: Callable[[str], str] = chalk.blue if color else plain
    border: Callable[[str], str] = chalk.white if color else plain

    lines: list[str] = [border("┌" + "─" * grid.width + "┐")]

    for y in range(grid.height):
        line_parts = [border("│")]
        for x in range(grid.width):
            pos = Coordinate(x, y)
            content = grid.get(pos)
            is_lit = pos in energized

            if entry is not None and entry.position == pos and content is None:
                char = ARROWS[entry.direction]
            elif content is not None:
                char = content.symbol
            else:
                char = ENERGIZED_CHAR if is_lit else DARK_CHAR

            if entry is not None and entry.position == pos:
                char = chalk.bgWhite.black(char) if color else char
            elif content is not None:
                char = content_lit(char) if is_lit else content_dark(char)
            elif is_lit:
                char = lit(char)

            line_parts.append(char)
        line_parts.append(border("│"))
        lines.append("".join(line_parts))

    lines.append(border("└" + "─" * grid.width + "┘"))
    return "\n".join(lines)
