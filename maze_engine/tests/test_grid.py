"""Tests for maze parsing, tile lookup and rendering."""

import pytest

from maze_engine.entities.grid import Grid
from maze_engine.utils.enums import Heading, Tile
from maze_engine.utils.errors import (
    EmptyGrid,
    InvariantViolation,
    MissingEnd,
    MissingStart,
    MultipleEnd,
    MultipleStart,
    ParseError,
    RaggedGrid,
    UnknownTile,
)
from maze_engine.utils.types import Position


class TestParse:
    def test_dimensions_and_markers(self, grid_1):
        assert (grid_1.height, grid_1.width) == (15, 15)
        assert grid_1.start == Position(13, 1)
        assert grid_1.end == Position(1, 13)

    def test_tile_classification(self, grid_1):
        assert grid_1.tile_at(0, 0) is Tile.WALL
        assert grid_1.tile_at(1, 1) is Tile.OPEN
        assert grid_1.tile_at(13, 1) is Tile.START
        assert grid_1.tile_at(1, 13) is Tile.END

    def test_crlf_and_surrounding_blank_lines(self):
        grid = Grid.parse("\n\r\n#####\r\n#S.E#\r\n#####\r\n\n")
        assert (grid.height, grid.width) == (3, 5)
        assert grid.start == Position(1, 1)

    def test_trailing_whitespace_ignored(self):
        grid = Grid.parse("#####\n#S.E# \n#####\t\n")
        assert (grid.height, grid.width) == (3, 5)
        assert grid.tile_at(1, 3) is Tile.END

    def test_leading_whitespace_is_not_a_tile(self):
        with pytest.raises(UnknownTile):
            Grid.parse("#####\n #S.E\n#####")

    def test_grid_without_border(self):
        grid = Grid.parse("S.E")
        assert (grid.height, grid.width) == (1, 3)
        assert not grid.in_bounds(0, 3)

    @pytest.mark.parametrize(
        "text, error",
        [
            ("", EmptyGrid),
            ("\n\n", EmptyGrid),
            ("#.E#", MissingStart),
            ("#S.#", MissingEnd),
            ("#S.S#\n#..E#", MultipleStart),
            ("#S.E#\n#E..#", MultipleEnd),
            ("#S.E#\n#..#", RaggedGrid),
            ("#S.E#\n#.x.#", UnknownTile),
        ],
    )
    def test_parse_errors(self, text, error):
        with pytest.raises(error):
            Grid.parse(text)

    def test_parse_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            Grid.parse("#.#")
        assert issubclass(MissingStart, ParseError)

    def test_ragged_error_reports_row(self):
        with pytest.raises(RaggedGrid) as exc:
            Grid.parse("#S.E#\n#...#\n#.#")
        assert exc.value.row == 2
        assert (exc.value.expected, exc.value.found) == (5, 3)

    def test_multiple_start_reports_both_positions(self):
        with pytest.raises(MultipleStart) as exc:
            Grid.parse("S..\n.SE")
        assert exc.value.positions == (Position(0, 0), Position(1, 1))


class TestLookup:
    def test_out_of_bounds_is_invariant_violation(self, corridor_grid):
        with pytest.raises(InvariantViolation):
            corridor_grid.tile_at(3, 0)
        with pytest.raises(InvariantViolation):
            corridor_grid.tile_at(0, -1)

    def test_is_passable_checks_bounds_first(self, corridor_grid):
        assert corridor_grid.is_passable(1, 2)
        assert not corridor_grid.is_passable(0, 2)
        assert not corridor_grid.is_passable(-1, 2)
        assert not corridor_grid.is_passable(1, 5)


class TestRender:
    def test_round_trips_without_marks(self, sample_1, grid_1):
        assert grid_1.render() == sample_1.rstrip("\n")

    def test_marks_open_cells_only(self, corridor_grid):
        marked = [Position(1, 1), Position(1, 2), Position(1, 3)]
        assert corridor_grid.render(marked).splitlines()[1] == "#SOE#"


class TestHeading:
    def test_clockwise_cycle(self):
        assert [h.clockwise() for h in Heading] == [Heading.EAST, Heading.SOUTH, Heading.WEST, Heading.NORTH]

    def test_adjacent_excludes_reverse(self):
        for heading in Heading:
            assert heading.opposite() not in heading.adjacent()
            assert heading not in heading.adjacent()
            assert len(set(heading.adjacent())) == 2

    def test_from_name(self):
        assert Heading.from_name("east") is Heading.EAST
        assert Heading.from_name(" N ") is Heading.NORTH
        with pytest.raises(ValueError):
            Heading.from_name("up")
