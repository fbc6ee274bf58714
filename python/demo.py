#!/usr/bin/env python3
"""
Run the beam simulation over a grid file or the built-in sample.

Usage:
    python demo.py                         # built-in 10x10 sample
    python demo.py input.txt               # bounds inferred from the file
    python demo.py input.txt --bounds 110x110
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from ascii_render import render_board, render_energized
from beam_parser import load_grid, parse_grid
from beam_types import (
    Bounds,
    ConfigurationError,
    Coordinate,
    Direction,
    EdgeEnumeration,
    Grid,
    ParseError,
    Pass,
    RuleSet,
)
from beamgrid import find_best_start, traverse

logger = logging.getLogger(__name__)

SAMPLE = r"""
.|...\....
|.-.\.....
.....|-...
........|.
..........
.........\
..../.\\..
.-.-/..|..
.|....-|.\
..//.|....
""".lstrip("\n")


def parse_bounds(value: str) -> Bounds:
    """Parse a WIDTHxHEIGHT argument."""
    try:
        width, height = (int(part) for part in value.lower().split("x"))
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"Invalid bounds {value!r}, expected WIDTHxHEIGHT (e.g. 110x110)"
        ) from None
    return Bounds(width, height)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Count energized tiles for a grid of mirrors and splitters",
    )
    parser.add_argument("input", type=Path, nargs="?", default=None,
                        help="Grid file (default: built-in sample)")
    parser.add_argument("--bounds", type=parse_bounds, default=None,
                        help="Explicit grid bounds as WIDTHxHEIGHT (default: inferred)")
    parser.add_argument("--square-edges", action="store_true", default=False,
                        help="Enumerate edge entries as if the grid were square")
    parser.add_argument("-v", "--verbose", action="store_true", default=False,
                        help="Log search details")
    return parser.parse_args(argv)


def show_result(console: Console, title: str, grid: Grid, start: Pass) -> None:
    """Print the energized count, the board and the plain energized map."""
    energized = traverse(grid, start.position, start.direction)
    console.print(f"{title}: found [bold]{len(energized)}[/bold] energized tiles starting on {start}")
    console.print(Panel(Text.from_ansi(render_board(grid, energized, start), no_wrap=True), expand=False))
    print(render_energized(grid.bounds, energized))


def run(grid: Grid, rules: RuleSet, console: Console) -> None:
    """Run the canonical entry and the best-of-edges search."""
    console.print()
    show_result(console, "Part 1", grid, Pass(Coordinate(0, 0), Direction.E))

    best = find_best_start(grid, rules)
    console.print()
    if best is None:
        console.print("Part 2: grid has no edge cells")
        return
    show_result(console, "Part 2", grid, best[0])


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )
    console = Console()

    try:
        if args.input is None:
            grid = parse_grid(SAMPLE, args.bounds)
        else:
            grid = load_grid(args.input, args.bounds)
    except FileNotFoundError:
        print(f"Error: Grid file not found: {args.input}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Error: Cannot read grid file {args.input}: {e}", file=sys.stderr)
        return 1
    except (ParseError, ConfigurationError, UnicodeDecodeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    logger.info("Loaded %dx%d grid", grid.width, grid.height)
    rules = RuleSet(
        edge_enumeration=EdgeEnumeration.REFERENCE if args.square_edges
        else EdgeEnumeration.RECTANGULAR
    )

    start_time = time.perf_counter()
    run(grid, rules, console)
    elapsed_ms = (time.perf_counter() - start_time) * 1000
    console.print(f"Done in {elapsed_ms:.0f} ms")
    return 0


if __name__ == "__main__":
    sys.exit(main())
