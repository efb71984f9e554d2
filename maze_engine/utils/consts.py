# IN THIS FILE: ALL CONSTANTS
import os

from maze_engine.utils.enums import Heading

# -----------------------------------------------------------------------------
# 1. MOVEMENT COSTS
# -----------------------------------------------------------------------------
MOVE_COST = 1           # One cell forward
TURN_COST = 1000        # One quarter turn in place (no U-turn primitive)

# -----------------------------------------------------------------------------
# 2. SEARCH
# -----------------------------------------------------------------------------
HEADING_COUNT = 4
# The reindeer always starts facing East.
DEFAULT_HEADING = Heading.EAST

# Score table sentinel for "not reached". int64 leaves room for any grid whose
# rows * cols * HEADING_COUNT * TURN_COST fits well below it.
INFINITY = 2 ** 62

# -----------------------------------------------------------------------------
# 3. RENDERING
# -----------------------------------------------------------------------------
PATH_MARK = "O"

# -----------------------------------------------------------------------------
# 4. SERVICE
# -----------------------------------------------------------------------------
API_HOST = os.environ.get("MAZE_API_HOST", "0.0.0.0")
API_PORT = int(os.environ.get("MAZE_API_PORT", "5000"))
API_URL = os.environ.get("MAZE_API_URL", f"http://localhost:{API_PORT}/solve")
