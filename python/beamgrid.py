"""
Light-beam propagation through a grid of mirrors and splitters.
Beam physics (pure direction tables) -> traversal (work-list DFS over passes)
-> best-start search over every edge entry.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from beam_types import (
    Bounds,
    CellContent,
    Coordinate,
    Direction,
    EdgeEnumeration,
    Grid,
    Mirror,
    MirrorOrientation,
    Pass,
    RuleSet,
    Splitter,
    SplitterOrientation,
)

logger = logging.getLogger(__name__)


# =============================================================================
# Beam Physics
# =============================================================================


# Direction deltas: (x_delta, y_delta)
DELTAS = {
    Direction.N: (0, -1),
    Direction.E: (1, 0),
    Direction.S: (0, 1),
    Direction.W: (-1, 0),
}

REFLECTIONS = {
    MirrorOrientation.RIGHT: {
        Direction.N: Direction.E,
        Direction.E: Direction.N,
        Direction.S: Direction.W,
        Direction.W: Direction.S,
    },
    MirrorOrientation.LEFT: {
        Direction.N: Direction.W,
        Direction.W: Direction.N,
        Direction.S: Direction.E,
        Direction.E: Direction.S,
    },
}

HORIZONTAL_DIRECTIONS = frozenset({Direction.E, Direction.W})


def step(pos: Coordinate, direction: Direction) -> Coordinate:
    """Return the neighbouring coordinate one cell in `direction`."""
    dx, dy = DELTAS[direction]
    return Coordinate(pos.x + dx, pos.y + dy)


def reflect(orientation: MirrorOrientation, direction: Direction) -> Direction:
    """Return the direction a beam heads in after bouncing off a mirror."""
    return REFLECTIONS[orientation][direction]


def split(orientation: SplitterOrientation, direction: Direction) -> tuple[Direction, ...]:
    """
    Return the directions a beam heads in after meeting a splitter.

    A beam travelling along the splitter passes through unchanged; a beam
    hitting its flat side splits into both perpendicular directions.
    """
    horizontal = direction in HORIZONTAL_DIRECTIONS
    match orientation:
        case SplitterOrientation.HORIZONTAL:
            return (direction,) if horizontal else (Direction.E, Direction.W)
        case SplitterOrientation.VERTICAL:
            return (Direction.N, Direction.S) if horizontal else (direction,)
    raise ValueError(f"Unknown splitter orientation: {orientation}")


def deflect(content: CellContent | None, direction: Direction) -> tuple[Direction, ...]:
    """Return the outgoing directions for a beam entering a cell."""
    match content:
        case None:
            return (direction,)
        case Mirror(orientation=orientation):
            return (reflect(orientation, direction),)
        case Splitter(orientation=orientation):
            return split(orientation, direction)
        case _:
            raise ValueError(f"Unknown cell content: {content}")


# =============================================================================
# Traversal
# =============================================================================


@dataclass
class TraversalState:
    """
    Mutable state of a single traversal run.

    Created fresh by explore() and owned by that run only.
    """

    energized: set[Coordinate] = field(default_factory=set)
    visited: set[Pass] = field(default_factory=set)


def explore(grid: Grid, start: Coordinate, direction: Direction) -> TraversalState:
    """
    Follow every beam from a start pass and collect the cells it touches.

    Depth-first over (position, direction) passes using an explicit stack.
    A pass already visited, or one outside the grid, ends that branch, so
    cyclic beam paths terminate after at most width * height * 4 passes.

    Args:
        grid: The grid to traverse
        start: Coordinate the beam enters
        direction: Direction the beam is heading on entry

    Returns:
        TraversalState with the energized cells and visited passes
    """
    state = TraversalState()
    stack = [Pass(start, direction)]

    while stack:
        current = stack.pop()
        if current in state.visited or not grid.contains(current.position):
            continue

        state.energized.add(current.position)
        state.visited.add(current)

        content = grid.get(current.position)
        for outgoing in deflect(content, current.direction):
            stack.append(Pass(step(current.position, outgoing), outgoing))

    logger.debug(
        "explore: start=%s energized=%d passes=%d",
        Pass(start, direction),
        len(state.energized),
        len(state.visited),
    )
    return state


def traverse(grid: Grid, start: Coordinate, direction: Direction) -> frozenset[Coordinate]:
    """Return the set of energized cells for a beam entering at `start`."""
    return frozenset(explore(grid, start, direction).energized)


def count_energized(grid: Grid, start: Pass) -> int:
    """Return how many cells a start pass energizes."""
    return len(explore(grid, start.position, start.direction).energized)


# =============================================================================
# Best-Start Search
# =============================================================================


def edge_passes(bounds: Bounds, rules: RuleSet = RuleSet()) -> list[Pass]:
    """
    Enumerate every pass entering the grid from its edge.

    Order: for each x, the top cell heading S then the bottom cell heading N;
    then for each y, the left cell heading E then the right cell heading W.

    With EdgeEnumeration.REFERENCE the bottom row is placed at width - 1 and
    the right column at height - 1, which only lines up with the grid edge
    when the grid is square.
    """
    if rules.edge_enumeration == EdgeEnumeration.REFERENCE:
        bottom, right = bounds.width - 1, bounds.height - 1
    else:
        bottom, right = bounds.height - 1, bounds.width - 1

    passes: list[Pass] = []
    for x in range(bounds.width):
        passes.append(Pass(Coordinate(x, 0), Direction.S))
        passes.append(Pass(Coordinate(x, bottom), Direction.N))
    for y in range(bounds.height):
        passes.append(Pass(Coordinate(0, y), Direction.E))
        passes.append(Pass(Coordinate(right, y), Direction.W))
    return passes


def find_best_start(grid: Grid, rules: RuleSet = RuleSet()) -> tuple[Pass, int] | None:
    """
    Find the edge entry that energizes the most cells.

    Ties go to the candidate enumerated first by edge_passes().
    Returns (start_pass, energized_count) or None if the grid has no edge.
    """
    best: tuple[Pass, int] | None = None
    candidates = edge_passes(grid.bounds, rules)

    for candidate in candidates:
        count = count_energized(grid, candidate)
        if best is None or count > best[1]:
            best = (candidate, count)

    if best is not None:
        logger.info(
            "find_best_start: %s energizes %d cells (%d candidates)",
            best[0],
            best[1],
            len(candidates),
        )
    return best
