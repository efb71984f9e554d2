# maze_engine/entities/grid.py

import logging
from typing import Iterable, List, Optional

from maze_engine.utils.consts import PATH_MARK
from maze_engine.utils.enums import Tile
from maze_engine.utils.errors import (
    EmptyGrid,
    InvariantViolation,
    MissingEnd,
    MissingStart,
    MultipleEnd,
    MultipleStart,
    RaggedGrid,
    UnknownTile,
)
from maze_engine.utils.types import Position

logger = logging.getLogger(__name__)

_TILES = {tile.value: tile for tile in Tile}


class Grid:
    """
    Immutable maze map.
    Tiles are kept in a row-major flat list indexed by row * width + col,
    bounds are fixed at parse time.
    """

    def __init__(self, tiles: List[Tile], width: int, height: int, start: Position, end: Position):
        if len(tiles) != width * height:
            raise InvariantViolation(f"{len(tiles)} tiles for a {height}x{width} grid")
        self._tiles = tuple(tiles)
        self.width = width
        self.height = height
        self.start = start
        self.end = end

    @classmethod
    def parse(cls, text: str) -> 'Grid':
        """
        Build a grid from maze text ('#' wall, '.' open, 'S' start, 'E' end).

        Raises a ParseError subclass when the text is empty, rows differ in
        length, a character is not a tile, or there is not exactly one start
        and one end.
        """
        lines = [line.rstrip() for line in text.splitlines()]
        while lines and not lines[-1].strip():
            lines.pop()
        while lines and not lines[0].strip():
            lines.pop(0)
        if not lines:
            raise EmptyGrid()

        width = len(lines[0])
        tiles: List[Tile] = []
        start: Optional[Position] = None
        end: Optional[Position] = None

        for r, line in enumerate(lines):
            if len(line) != width:
                raise RaggedGrid(r, width, len(line))
            for c, ch in enumerate(line):
                tile = _TILES.get(ch)
                if tile is None:
                    raise UnknownTile(ch, r, c)
                if tile is Tile.START:
                    if start is not None:
                        raise MultipleStart(start, Position(r, c))
                    start = Position(r, c)
                elif tile is Tile.END:
                    if end is not None:
                        raise MultipleEnd(end, Position(r, c))
                    end = Position(r, c)
                tiles.append(tile)

        if start is None:
            raise MissingStart()
        if end is None:
            raise MissingEnd()

        logger.debug("Parsed %dx%d maze, start=%s end=%s", len(lines), width, start, end)
        return cls(tiles, width, len(lines), start, end)

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.height and 0 <= col < self.width

    def tile_at(self, row: int, col: int) -> Tile:
        if not self.in_bounds(row, col):
            raise InvariantViolation(f"Tile lookup ({row}, {col}) outside {self.height}x{self.width} grid")
        return self._tiles[row * self.width + col]

    def is_wall(self, row: int, col: int) -> bool:
        return self.tile_at(row, col) is Tile.WALL

    def is_passable(self, row: int, col: int) -> bool:
        """In bounds and not a wall. Safe to call with any coordinates."""
        return self.in_bounds(row, col) and not self.is_wall(row, col)

    def render(self, marked: Optional[Iterable[Position]] = None) -> str:
        """
        Maze text with every marked open cell drawn as 'O'.
        Start and end keep their letters so they stay visible.
        """
        marked = set(marked or ())
        rows = []
        for r in range(self.height):
            chars = []
            for c in range(self.width):
                tile = self.tile_at(r, c)
                if (r, c) in marked and tile is Tile.OPEN:
                    chars.append(PATH_MARK)
                else:
                    chars.append(tile.value)
            rows.append("".join(chars))
        return "\n".join(rows)

    def __repr__(self) -> str:
        return f"Grid({self.height}x{self.width}, start={tuple(self.start)}, end={tuple(self.end)})"
