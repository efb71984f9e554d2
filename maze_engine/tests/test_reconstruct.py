"""Tests for optimal-path union reconstruction and single-path tracing."""

import pytest

from maze_engine.pathfinding.dijkstra import solve
from maze_engine.pathfinding.maze_solver import MazeSolver, solve_maze
from maze_engine.pathfinding.reconstruct import reconstruct, trace_single_path
from maze_engine.utils.consts import MOVE_COST, TURN_COST
from maze_engine.utils.enums import Heading
from maze_engine.utils.errors import InvariantViolation, MissingEnd
from maze_engine.utils.types import Position, State


class TestReferenceMazes:
    def test_sample_1_tile_count(self, grid_1):
        result = solve(grid_1)
        assert len(reconstruct(result.score_table, result.end_states)) == 45

    def test_sample_2_tile_count(self, grid_2):
        result = solve(grid_2)
        assert len(reconstruct(result.score_table, result.end_states)) == 64

    @pytest.mark.parametrize("grid_name", ["grid_1", "grid_2"])
    def test_union_contains_start_and_end(self, request, grid_name):
        grid = request.getfixturevalue(grid_name)
        result = solve(grid)
        tiles = reconstruct(result.score_table, result.end_states)
        assert grid.start in tiles
        assert grid.end in tiles

    @pytest.mark.parametrize("grid_name", ["grid_1", "grid_2"])
    def test_single_path_is_subset_of_union(self, request, grid_name):
        grid = request.getfixturevalue(grid_name)
        result = solve(grid)
        tiles = reconstruct(result.score_table, result.end_states)
        for end_state in result.end_states:
            path = trace_single_path(result.score_table, end_state)
            assert {s.position for s in path} <= tiles

    def test_union_is_deterministic(self, grid_1):
        first = solve(grid_1)
        second = solve(grid_1)
        assert reconstruct(first.score_table, first.end_states) == reconstruct(second.score_table, second.end_states)


class TestTies:
    def test_every_tied_end_heading_contributes(self, twin_grid):
        result = solve(twin_grid)
        tiles = reconstruct(result.score_table, result.end_states)
        # Both ways round the pillar: every open cell
        assert len(tiles) == 8

    def test_single_end_heading_covers_one_route(self, twin_grid):
        result = solve(twin_grid)
        one_side = reconstruct(result.score_table, result.end_states[:1])
        assert len(one_side) == 5

    def test_duplicate_seeds_are_harmless(self, twin_grid):
        result = solve(twin_grid)
        assert reconstruct(result.score_table, result.end_states * 2) == \
            reconstruct(result.score_table, result.end_states)


class TestEdgeCases:
    def test_start_on_end_is_one_tile(self, corridor_grid):
        end = corridor_grid.end
        result = solve(corridor_grid, State(end.row, end.col, Heading.NORTH))
        assert result.min_score == 0
        assert reconstruct(result.score_table, result.end_states) == {end}

    def test_unreached_seed_rejected(self, corridor_grid):
        result = solve(corridor_grid)
        with pytest.raises(InvariantViolation):
            reconstruct(result.score_table, [State(1, 3, Heading.WEST)])


class TestTraceSinglePath:
    def test_path_runs_start_to_end(self, grid_1):
        result = solve(grid_1)
        path = trace_single_path(result.score_table, result.end_states[0])
        assert path[0] == State(13, 1, Heading.EAST)
        assert path[-1] == result.end_states[0]

    def test_path_cost_matches_min_score(self, grid_2):
        result = solve(grid_2)
        path = trace_single_path(result.score_table, result.end_states[0])
        cost = sum(
            MOVE_COST if prev.heading == curr.heading else TURN_COST
            for prev, curr in zip(path, path[1:])
        )
        assert cost == result.min_score

    def test_corridor_facing_north(self, corridor_grid):
        result = solve(corridor_grid, State(1, 1, Heading.NORTH))
        assert trace_single_path(result.score_table, result.end_states[0]) == [
            State(1, 1, Heading.NORTH),
            State(1, 1, Heading.EAST),
            State(1, 2, Heading.EAST),
            State(1, 3, Heading.EAST),
        ]


class TestMazeSolver:
    def test_report(self, sample_1):
        report = solve_maze(sample_1)
        assert report.min_score == 7036
        assert report.tile_count == 45
        assert report.tiles == sorted(report.tiles)
        assert report.path[0].position == Position(13, 1)

    def test_unreachable_returns_none(self, walled_grid):
        assert MazeSolver(walled_grid).solve() is None

    def test_start_heading(self, corridor_grid):
        report = MazeSolver(corridor_grid).solve(Heading.WEST)
        assert report.min_score == 2 * TURN_COST + 2 * MOVE_COST
        assert report.tile_count == 3

    def test_parse_errors_propagate(self):
        with pytest.raises(MissingEnd):
            solve_maze("#S..#")
