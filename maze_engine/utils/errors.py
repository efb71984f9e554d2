# IN THIS FILE: PARSE ERRORS and ENGINE INVARIANT VIOLATIONS


class ParseError(ValueError):
    """Maze text could not be turned into a grid. Raised before any search."""


class EmptyGrid(ParseError):
    def __init__(self):
        super().__init__("Maze has no rows")


class RaggedGrid(ParseError):
    def __init__(self, row: int, expected: int, found: int):
        self.row = row
        self.expected = expected
        self.found = found
        super().__init__(f"Row {row} has width {found}, expected {expected}")


class UnknownTile(ParseError):
    def __init__(self, char: str, row: int, col: int):
        self.char = char
        self.row = row
        self.col = col
        super().__init__(f"Unknown tile {char!r} at ({row}, {col})")


class MissingStart(ParseError):
    def __init__(self):
        super().__init__("No start tile found in maze")


class MissingEnd(ParseError):
    def __init__(self):
        super().__init__("No end tile found in maze")


class MultipleStart(ParseError):
    def __init__(self, first, second):
        self.positions = (first, second)
        super().__init__(f"Multiple start tiles found in maze: {first} and {second}")


class MultipleEnd(ParseError):
    def __init__(self, first, second):
        self.positions = (first, second)
        super().__init__(f"Multiple end tiles found in maze: {first} and {second}")


class InvariantViolation(RuntimeError):
    """A defect inside the engine. Never a property of the input maze."""
