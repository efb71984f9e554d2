# IN THIS FILE: POSITION, STATE, SCORE TABLE, SOLVE RESULTS

from dataclasses import dataclass, field
from typing import Iterator, List, NamedTuple, Tuple, Union

import numpy as np

from maze_engine.utils.consts import HEADING_COUNT, INFINITY
from maze_engine.utils.enums import Heading
from maze_engine.utils.errors import InvariantViolation


class Position(NamedTuple):
    """A grid cell, heading ignored."""
    row: int
    col: int


class State(NamedTuple):
    """
    The unit of search: a cell plus the heading the agent faces there.
    Two agents on the same cell facing different ways are different states.
    """
    row: int
    col: int
    heading: Heading

    @property
    def position(self) -> Position:
        return Position(self.row, self.col)

    def forward(self) -> 'State':
        dr, dc = self.heading.delta
        return State(self.row + dr, self.col + dc, self.heading)

    def backward(self) -> 'State':
        """The state one step behind, same heading (the move predecessor)."""
        dr, dc = self.heading.delta
        return State(self.row - dr, self.col - dc, self.heading)

    def turned(self, heading: Heading) -> 'State':
        return State(self.row, self.col, heading)

    def get_dict(self) -> dict:
        """Convert to dictionary for JSON serialization"""
        return {"row": self.row, "col": self.col, "d": self.heading.name}

    def __repr__(self) -> str:
        return f"State(r={self.row}, c={self.col}, d={self.heading.name})"


class ScoreTable:
    """
    Best known score per state, stored as a dense rows x cols x 4 int64 array.

    Unreached states hold INFINITY. Entries only ever change through relax(),
    which accepts strict improvements, so no entry can increase.
    """

    def __init__(self, height: int, width: int):
        self.height = height
        self.width = width
        self._scores = np.full((height, width, HEADING_COUNT), INFINITY, dtype=np.int64)

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.height and 0 <= col < self.width

    def _check(self, state: State) -> None:
        if not self.contains(state.row, state.col):
            raise InvariantViolation(f"{state!r} outside {self.height}x{self.width} score table")

    def __getitem__(self, state: State) -> int:
        self._check(state)
        return int(self._scores[state.row, state.col, int(state.heading)])

    def is_reached(self, state: State) -> bool:
        return self[state] < INFINITY

    def relax(self, state: State, score: int) -> bool:
        """Record `score` for `state` if it strictly improves the entry. Returns True on update."""
        if score < 0:
            raise InvariantViolation(f"Negative score {score} proposed for {state!r}")
        if score >= INFINITY:
            raise InvariantViolation(f"Score overflow proposing {score} for {state!r}")
        if score >= self[state]:
            return False
        self._scores[state.row, state.col, int(state.heading)] = score
        return True

    def headings_at(self, position: Position, score: int) -> List[Heading]:
        """Headings at `position` whose entry equals `score`."""
        cell = self._scores[position.row, position.col]
        return [Heading(int(i)) for i in np.flatnonzero(cell == score)]

    def reached(self) -> Iterator[Tuple[State, int]]:
        for r, c, h in np.argwhere(self._scores < INFINITY):
            state = State(int(r), int(c), Heading(int(h)))
            yield state, int(self._scores[r, c, h])

    def as_array(self) -> np.ndarray:
        """Read-only view of the raw table, indexed [row, col, heading]."""
        view = self._scores.view()
        view.flags.writeable = False
        return view


@dataclass
class SearchStats:
    settled: int = 0   # States popped with a current score
    pushes: int = 0    # Frontier insertions, one per successful relaxation
    stale: int = 0     # Outdated frontier entries discarded


@dataclass
class Found:
    min_score: int
    score_table: ScoreTable
    # Every (End, heading) state whose score equals min_score
    end_states: List[State]
    stats: SearchStats = field(default_factory=SearchStats)

    @property
    def reachable(self) -> bool:
        return True


@dataclass
class Unreachable:
    stats: SearchStats = field(default_factory=SearchStats)

    @property
    def reachable(self) -> bool:
        return False


SolveResult = Union[Found, Unreachable]
