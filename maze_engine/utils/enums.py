# IN THIS FILE: HEADINGS and TILES
from enum import Enum
from typing import Tuple


class Heading(int, Enum):
    """
    Agent facing direction.
    Values run clockwise and double as the heading axis index of the score table.
    """
    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3

    def __int__(self):
        return self.value

    @property
    def delta(self) -> Tuple[int, int]:
        """(d_row, d_col) of one forward step. Rows grow southwards."""
        return _DELTAS[self.value]

    def clockwise(self) -> 'Heading':
        return Heading((self.value + 1) % 4)

    def counter_clockwise(self) -> 'Heading':
        return Heading((self.value - 1) % 4)

    def opposite(self) -> 'Heading':
        return Heading((self.value + 2) % 4)

    def adjacent(self) -> Tuple['Heading', 'Heading']:
        """The two headings reachable with a single in-place turn (never the reverse)."""
        return self.counter_clockwise(), self.clockwise()

    @classmethod
    def from_name(cls, name: str) -> 'Heading':
        """Accepts full names or initials, case-insensitive ("east", "E")."""
        key = name.strip().upper()
        for heading in cls:
            if key in (heading.name, heading.name[0]):
                return heading
        raise ValueError(f"Unknown heading: {name!r}")


_DELTAS = ((-1, 0), (0, 1), (1, 0), (0, -1))


class Tile(str, Enum):
    """
    Maze tile classification.
    Value is the character used in the textual maze.
    """
    OPEN = "."
    WALL = "#"
    START = "S"
    END = "E"
