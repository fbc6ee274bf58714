"""
Interactive explorer for beamgrid edge entries.
Display the grid and step the beam's entry point around the edge with keyboard commands.
"""

from __future__ import annotations

import logging
import sys

import readchar
from rich.console import Console
from rich.live import Live
from rich.panel import Panel
from rich.text import Text

from ascii_render import render_board
from beam_parser import load_grid, parse_grid
from beam_types import Grid, Pass, RuleSet
from beamgrid import edge_passes, find_best_start, traverse
from demo import SAMPLE


class InteractiveDemo:
    """Interactive explorer over the edge entries of a grid."""

    def __init__(self, grid: Grid, rules: RuleSet = RuleSet()) -> None:
        self.grid = grid
        self.rules = rules
        self.entries = edge_passes(grid.bounds, rules)
        self.index = 0
        self.console = Console()
        self.status_message = "Ready"

    @property
    def entry(self) -> Pass | None:
        """Currently selected entry pass."""
        if not self.entries:
            return None
        return self.entries[self.index]

    def generate_display(self) -> Panel:
        """Generate the current display with board and status."""
        entry = self.entry

        if entry is None:
            status = Text()
            status.append("ERROR: Grid has no edge cells!\n", style="bold red")
            return Panel(status, title="Beamgrid - Error", border_style="red")

        energized = traverse(self.grid, entry.position, entry.direction)

        status = Text()
        status.append("Entry: ", style="bold")
        status.append(f"{entry} [{self.index + 1}/{len(self.entries)}]\n")
        status.append("Energized: ", style="bold")
        status.append(f"{len(energized)}\n\n")

        status.append(Text.from_ansi(render_board(self.grid, energized, entry)))
        status.append("\n\n")
        status.append("Keys:\n", style="bold cyan")
        status.append("  D - Next entry\n")
        status.append("  A - Previous entry\n")
        status.append("  B - Jump to best entry\n")
        status.append("  Q - Quit\n\n")

        # Status line at the bottom
        status.append("─" * 40 + "\n", style="dim")
        status.append("Status: ", style="bold")
        status.append(self.status_message)

        return Panel(status, title="Beamgrid Entry Explorer", border_style="green", width=80)

    def select_next(self) -> None:
        """Move to the next edge entry, wrapping around."""
        if self.entries:
            self.index = (self.index + 1) % len(self.entries)
            self.status_message = f"Selected {self.entry}"

    def select_previous(self) -> None:
        """Move to the previous edge entry, wrapping around."""
        if self.entries:
            self.index = (self.index - 1) % len(self.entries)
            self.status_message = f"Selected {self.entry}"

    def select_best(self) -> None:
        """Jump to the entry that energizes the most cells."""
        best = find_best_start(self.grid, self.rules)
        if best is None:
            self.status_message = "No edge entries"
            return
        start, count = best
        self.index = self.entries.index(start)
        self.status_message = f"✓ Best entry {start} energizes {count} tiles"

    def run(self) -> None:
        """Run the interactive explorer."""
        with Live(self.generate_display(), console=self.console, refresh_per_second=4) as live:
            try:
                while True:
                    live.update(self.generate_display())

                    key = readchar.readkey()

                    if key.lower() == 'q':
                        self.status_message = "Quitting..."
                        live.update(self.generate_display())
                        break
                    elif key.lower() == 'd' or key == readchar.key.RIGHT:
                        self.select_next()
                    elif key.lower() == 'a' or key == readchar.key.LEFT:
                        self.select_previous()
                    elif key.lower() == 'b':
                        self.select_best()
                    else:
                        self.status_message = f"Unknown key: {repr(key)}"

            except KeyboardInterrupt:
                self.status_message = "Interrupted by user"
                live.update(self.generate_display())


if __name__ == "__main__":
    logging.basicConfig(level=logging.WARNING, format='%(levelname)s: %(message)s')
    grid = load_grid(sys.argv[1]) if len(sys.argv) > 1 else parse_grid(SAMPLE)
    InteractiveDemo(grid).run()
