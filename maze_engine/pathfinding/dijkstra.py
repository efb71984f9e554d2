import heapq
import logging
from typing import List, Optional, Tuple

from maze_engine.entities.grid import Grid
from maze_engine.utils.consts import DEFAULT_HEADING, MOVE_COST, TURN_COST
from maze_engine.utils.enums import Tile
from maze_engine.utils.errors import InvariantViolation
from maze_engine.utils.types import Found, ScoreTable, SearchStats, SolveResult, State, Unreachable

logger = logging.getLogger(__name__)


class Dijkstra:
    """
    Label-setting search over the implicit (row, col, heading) state graph.

    Edges are generated on the fly: a forward move to the next cell (MOVE_COST)
    and an in-place turn to either adjacent heading (TURN_COST). All weights
    are non-negative, so the first settled End state is optimal.
    """

    def __init__(self, grid: Grid):
        self.grid = grid

    def default_start(self) -> State:
        return State(self.grid.start.row, self.grid.start.col, DEFAULT_HEADING)

    def get_neighbors(self, state: State) -> List[Tuple[State, int]]:
        neighbors = []

        # --- 1. MOVE ---
        ahead = state.forward()
        if self.grid.is_passable(ahead.row, ahead.col):
            neighbors.append((ahead, MOVE_COST))

        # --- 2. TURN ---
        for heading in state.heading.adjacent():
            neighbors.append((state.turned(heading), TURN_COST))

        return neighbors

    def search(self, start: Optional[State] = None, settle_ties: bool = False) -> SolveResult:
        """
        Run the search from `start` (default: the maze start facing East).

        Returns Found with the minimum score, the score table and every End
        state tied at that score, or Unreachable when the frontier runs dry.
        With settle_ties the frontier keeps draining entries at the minimum
        score before returning.
        """
        if start is None:
            start = self.default_start()
        if not self.grid.is_passable(start.row, start.col):
            raise InvariantViolation(f"Start {start!r} is a wall or outside the grid")

        scores = ScoreTable(self.grid.height, self.grid.width)
        stats = SearchStats()
        scores.relax(start, 0)
        frontier: List[Tuple[int, State]] = [(0, start)]
        stats.pushes += 1
        min_score: Optional[int] = None

        while frontier:
            score, curr = heapq.heappop(frontier)

            if score > scores[curr]:
                stats.stale += 1
                continue
            if min_score is not None and score > min_score:
                break
            stats.settled += 1

            if self.grid.tile_at(curr.row, curr.col) is Tile.END:
                if min_score is None:
                    min_score = score
                if not settle_ties:
                    break
                continue

            for next_s, cost in self.get_neighbors(curr):
                if scores.relax(next_s, score + cost):
                    heapq.heappush(frontier, (score + cost, next_s))
                    stats.pushes += 1

        if min_score is None:
            logger.info("End %s unreachable from %r (%d states settled)",
                        tuple(self.grid.end), start, stats.settled)
            return Unreachable(stats=stats)

        end = self.grid.end
        end_states = [State(end.row, end.col, h) for h in scores.headings_at(end, min_score)]
        logger.debug("Reached end with score %d via %s; settled=%d pushes=%d stale=%d",
                     min_score, [h.name for _, _, h in end_states],
                     stats.settled, stats.pushes, stats.stale)
        return Found(min_score=min_score, score_table=scores, end_states=end_states, stats=stats)


def solve(grid: Grid, start_state: Optional[State] = None, settle_ties: bool = False) -> SolveResult:
    return Dijkstra(grid).search(start_state, settle_ties=settle_ties)
