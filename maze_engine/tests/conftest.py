from pathlib import Path

import pytest

from maze_engine.entities.grid import Grid

MAZE_DIR = Path(__file__).resolve().parents[2] / "mazes"

# Two ways round a pillar, equal cost, arriving at E from opposite sides.
TWIN_ROUTES = """\
#####
#...#
#S#E#
#...#
#####
"""

CORRIDOR = """\
#####
#S.E#
#####
"""

WALLED_OFF = """\
#######
#S..#E#
#######
"""


@pytest.fixture
def sample_1() -> str:
    """15x15 reference maze: score 7036, 45 best-path tiles."""
    return (MAZE_DIR / "sample_1.txt").read_text()


@pytest.fixture
def sample_2() -> str:
    """17x17 reference maze: score 11048, 64 best-path tiles."""
    return (MAZE_DIR / "sample_2.txt").read_text()


@pytest.fixture
def grid_1(sample_1) -> Grid:
    return Grid.parse(sample_1)


@pytest.fixture
def grid_2(sample_2) -> Grid:
    return Grid.parse(sample_2)


@pytest.fixture
def twin_grid() -> Grid:
    return Grid.parse(TWIN_ROUTES)


@pytest.fixture
def corridor_grid() -> Grid:
    return Grid.parse(CORRIDOR)


@pytest.fixture
def walled_grid() -> Grid:
    return Grid.parse(WALLED_OFF)


@pytest.fixture
def corridor_text() -> str:
    return CORRIDOR


@pytest.fixture
def walled_text() -> str:
    return WALLED_OFF
