import logging
from dataclasses import dataclass
from typing import List, Optional

from maze_engine.entities.grid import Grid
from maze_engine.pathfinding.dijkstra import Dijkstra
from maze_engine.pathfinding.reconstruct import reconstruct, trace_single_path
from maze_engine.utils.consts import DEFAULT_HEADING
from maze_engine.utils.enums import Heading
from maze_engine.utils.types import Found, Position, SearchStats, State

logger = logging.getLogger(__name__)


@dataclass
class MazeReport:
    min_score: int
    tiles: List[Position]       # Optimal-path union, sorted row-major
    path: List[State]           # One optimal path, start first
    end_states: List[State]
    stats: SearchStats

    @property
    def tile_count(self) -> int:
        return len(self.tiles)


class MazeSolver:
    """
    Runs the search and, when the end is reachable, the reconstruction.

    The grid is read-only and no state is kept between solve() calls, so one
    solver may be reused for several start headings.
    """

    def __init__(self, grid: Grid):
        self.grid = grid
        self.dijkstra = Dijkstra(grid)

    def solve(
        self,
        start_heading: Heading = DEFAULT_HEADING,
        settle_ties: bool = False,
        start: Optional[State] = None,
    ) -> Optional[MazeReport]:
        """
        start: full start state; overrides the maze start and start_heading.
        Returns None when the end cannot be reached.
        """
        if start is None:
            start = State(self.grid.start.row, self.grid.start.col, start_heading)

        result = self.dijkstra.search(start, settle_ties=settle_ties)
        if not isinstance(result, Found):
            return None

        tiles = reconstruct(result.score_table, result.end_states)
        path = trace_single_path(result.score_table, result.end_states[0])
        logger.info("Solved %r from %r: score %d, %d optimal tiles",
                    self.grid, start, result.min_score, len(tiles))
        return MazeReport(
            min_score=result.min_score,
            tiles=sorted(tiles),
            path=path,
            end_states=result.end_states,
            stats=result.stats,
        )


def solve_maze(text: str, start_heading: Heading = DEFAULT_HEADING, settle_ties: bool = False) -> Optional[MazeReport]:
    """Parse `text` and solve it. Parse errors propagate to the caller."""
    return MazeSolver(Grid.parse(text)).solve(start_heading, settle_ties=settle_ties)
