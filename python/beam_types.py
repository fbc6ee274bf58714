"""
Shared type definitions for the beamgrid system.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum


class Direction(Enum):
    """Cardinal direction a beam is heading."""

    N = "N"  # Up (decreasing y)
    E = "E"  # Right (increasing x)
    S = "S"  # Down (increasing y)
    W = "W"  # Left (decreasing x)


class MirrorOrientation(Enum):
    """Orientation of a mirror, keyed by its source character."""

    LEFT = "\\"
    RIGHT = "/"

    @property
    def symbol(self) -> str:
        return self.value


class SplitterOrientation(Enum):
    """Orientation of a splitter, keyed by its source character."""

    HORIZONTAL = "-"
    VERTICAL = "|"

    @property
    def symbol(self) -> str:
        return self.value


class EdgeEnumeration(Enum):
    """How edge entry passes are laid out for the best-start search."""

    RECTANGULAR = "rectangular"  # Bottom row at height-1, right column at width-1
    REFERENCE = "reference"  # Bottom row at width-1, right column at height-1 (square grids only)


@dataclass(frozen=True)
class RuleSet:
    """Rules governing search behavior."""

    edge_enumeration: EdgeEnumeration = EdgeEnumeration.RECTANGULAR


# =============================================================================
# Errors
# =============================================================================


class ParseError(ValueError):
    """Grid text could not be turned into a grid."""

    def __init__(
        self,
        message: str,
        char: str | None = None,
        position: Coordinate | None = None,
    ) -> None:
        super().__init__(message)
        self.char = char
        self.position = position


class ConfigurationError(ValueError):
    """Explicit bounds disagree with the grid input."""


# =============================================================================
# Grid Definition Types
# =============================================================================


@dataclass(frozen=True)
class Coordinate:
    """A cell position, x rightward and y downward."""

    x: int
    y: int


@dataclass(frozen=True)
class Bounds:
    """The valid rectangle [0, width) x [0, height)."""

    width: int
    height: int

    def contains(self, pos: Coordinate) -> bool:
        return 0 <= pos.x < self.width and 0 <= pos.y < self.height


@dataclass(frozen=True)
class Mirror:
    """A cell that reflects a beam by 90 degrees."""

    orientation: MirrorOrientation

    @property
    def symbol(self) -> str:
        return self.orientation.symbol


@dataclass(frozen=True)
class Splitter:
    """A cell that passes a beam through or splits it in two."""

    orientation: SplitterOrientation

    @property
    def symbol(self) -> str:
        return self.orientation.symbol


CellContent = Mirror | Splitter


@dataclass(frozen=True)
class Pass:
    """A beam entering a cell while heading in a direction."""

    position: Coordinate
    direction: Direction

    def __str__(self) -> str:
        return f"({self.position.x}, {self.position.y}) heading {self.direction.value}"


@dataclass(frozen=True)
class Grid:
    """A bounded 2D grid; only non-empty cells are present in `cells`."""

    cells: Mapping[Coordinate, CellContent]
    bounds: Bounds

    @property
    def width(self) -> int:
        return self.bounds.width

    @property
    def height(self) -> int:
        return self.bounds.height

    def contains(self, pos: Coordinate) -> bool:
        return self.bounds.contains(pos)

    def get(self, pos: Coordinate) -> CellContent | None:
        return self.cells.get(pos)
