"""Tests for beam_parser module."""

from pathlib import Path

import pytest

from beam_parser import load, load_grid, parse_grid
from beam_types import (
    Bounds,
    ConfigurationError,
    Coordinate,
    Direction,
    Mirror,
    MirrorOrientation,
    ParseError,
    Pass,
    Splitter,
    SplitterOrientation,
)
from beamgrid import find_best_start, traverse


class TestParseGrid:
    """Tests for parsing grid text."""

    def test_small_grid(self) -> None:
        """Parse a 3x2 grid with splitters and a mirror."""
        grid = parse_grid(".-.\n|/|")

        assert grid.bounds == Bounds(3, 2)
        assert grid.get(Coordinate(1, 0)) == Splitter(SplitterOrientation.HORIZONTAL)
        assert grid.get(Coordinate(0, 1)) == Splitter(SplitterOrientation.VERTICAL)
        assert grid.get(Coordinate(1, 1)) == Mirror(MirrorOrientation.RIGHT)
        assert grid.get(Coordinate(2, 1)) == Splitter(SplitterOrientation.VERTICAL)

    def test_empty_cells_have_no_entry(self) -> None:
        """Dots are not stored in the cell mapping."""
        grid = parse_grid(".-.\n|/|")

        assert Coordinate(0, 0) not in grid.cells
        assert Coordinate(2, 0) not in grid.cells
        assert len(grid.cells) == 4

    def test_left_mirror(self) -> None:
        """Backslash parses to a LEFT mirror."""
        grid = parse_grid("\\")
        assert grid.get(Coordinate(0, 0)) == Mirror(MirrorOrientation.LEFT)

    def test_load_alias(self) -> None:
        """load is the same operation as parse_grid."""
        assert load(".|") == parse_grid(".|")

    def test_trailing_newlines_ignored(self) -> None:
        """Trailing blank lines do not add rows."""
        grid = parse_grid("..\n..\n\n")
        assert grid.bounds == Bounds(2, 2)

    def test_crlf_line_endings(self) -> None:
        """Windows line endings split rows the same way."""
        grid = parse_grid(".-\r\n/.\r\n")
        assert grid.bounds == Bounds(2, 2)
        assert grid.get(Coordinate(0, 1)) == Mirror(MirrorOrientation.RIGHT)

    def test_empty_text(self) -> None:
        """Empty input gives an empty grid."""
        grid = parse_grid("")
        assert grid.bounds == Bounds(0, 0)
        assert len(grid.cells) == 0

    def test_grid_is_read_only(self) -> None:
        """The cell mapping cannot be modified after parsing."""
        grid = parse_grid("/")
        with pytest.raises(TypeError):
            grid.cells[Coordinate(0, 0)] = Mirror(MirrorOrientation.LEFT)  # type: ignore[index]


class TestParseErrors:
    """Tests for rejected input."""

    def test_unknown_character(self) -> None:
        """An unknown character reports itself and its position."""
        with pytest.raises(ParseError) as exc_info:
            parse_grid("..\n.X")

        assert exc_info.value.char == "X"
        assert exc_info.value.position == Coordinate(1, 1)
        assert "'X'" in str(exc_info.value)
        assert "(1, 1)" in str(exc_info.value)

    def test_parse_error_is_value_error(self) -> None:
        """ParseError can be caught as ValueError."""
        with pytest.raises(ValueError):
            parse_grid("#")

    def test_inconsistent_row_lengths(self) -> None:
        """Ragged rows are rejected."""
        with pytest.raises(ParseError) as exc_info:
            parse_grid("...\n..")

        assert "Inconsistent row lengths" in str(exc_info.value)
        assert "Row 1: 2 columns" in str(exc_info.value)


class TestExplicitBounds:
    """Tests for configured bounds."""

    def test_bounds_override_inferred(self) -> None:
        """Explicit bounds larger than the input are kept."""
        grid = parse_grid("./\n..", Bounds(110, 110))

        assert grid.bounds == Bounds(110, 110)
        assert grid.contains(Coordinate(109, 109))
        assert grid.get(Coordinate(1, 0)) == Mirror(MirrorOrientation.RIGHT)

    def test_beam_crosses_padding(self) -> None:
        """A beam keeps going through the empty area beyond the input."""
        grid = parse_grid("\\.", Bounds(5, 5))

        energized = traverse(grid, Coordinate(0, 0), Direction.E)
        assert energized == {Coordinate(0, y) for y in range(5)}

    def test_best_start_spans_padding(self) -> None:
        """The search enumerates entries along the configured edges."""
        grid = parse_grid("..", Bounds(5, 3))

        result = find_best_start(grid)
        assert result == (Pass(Coordinate(0, 0), Direction.E), 5)

    def test_bounds_matching_input(self) -> None:
        """Explicit bounds equal to the input are accepted."""
        grid = parse_grid("..\n..", Bounds(2, 2))
        assert grid.bounds == Bounds(2, 2)

    def test_bounds_too_small(self) -> None:
        """Bounds that cannot hold the input are rejected."""
        with pytest.raises(ConfigurationError) as exc_info:
            parse_grid("...\n...", Bounds(2, 2))

        assert "Input: 3x2" in str(exc_info.value)
        assert "Bounds: 2x2" in str(exc_info.value)

    def test_bounds_not_positive(self) -> None:
        """Zero or negative bounds are rejected."""
        with pytest.raises(ConfigurationError):
            parse_grid(".", Bounds(0, 1))
        with pytest.raises(ConfigurationError):
            parse_grid(".", Bounds(1, -1))


class TestLoadGrid:
    """Tests for reading grid files."""

    def test_load_from_file(self, tmp_path: Path) -> None:
        """A grid file parses like its text."""
        path = tmp_path / "grid.txt"
        path.write_text(".|\n-.\n", encoding="utf-8")

        grid = load_grid(path)
        assert grid.bounds == Bounds(2, 2)
        assert grid.get(Coordinate(1, 0)) == Splitter(SplitterOrientation.VERTICAL)
        assert grid.get(Coordinate(0, 1)) == Splitter(SplitterOrientation.HORIZONTAL)

    def test_load_with_bounds(self, tmp_path: Path) -> None:
        """Bounds passed to load_grid are applied."""
        path = tmp_path / "grid.txt"
        path.write_text("..\n", encoding="utf-8")

        grid = load_grid(str(path), Bounds(5, 5))
        assert grid.bounds == Bounds(5, 5)

    def test_missing_file(self, tmp_path: Path) -> None:
        """A missing file propagates FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_grid(tmp_path / "missing.txt")
