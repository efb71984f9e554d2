# main.py
import logging
from typing import List, Optional

import uvicorn
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from maze_engine.commands.generator import CommandGenerator
from maze_engine.entities.grid import Grid
from maze_engine.pathfinding.maze_solver import MazeSolver
from maze_engine.utils.consts import API_HOST, API_PORT, DEFAULT_HEADING
from maze_engine.utils.enums import Heading
from maze_engine.utils.errors import ParseError

logger = logging.getLogger(__name__)

app = FastAPI(title="Reindeer Maze Server")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# =============================================================================
# PYDANTIC MODELS
# =============================================================================

class MazeInput(BaseModel):
    maze: str
    start_heading: Optional[str] = DEFAULT_HEADING.name
    settle_ties: Optional[bool] = False

class Cell(BaseModel):
    row: int
    col: int

class PathPoint(BaseModel):
    row: int
    col: int
    d: str

class SolveOutput(BaseModel):
    reachable: bool
    min_score: Optional[int] = None
    tile_count: Optional[int] = None
    tiles: List[Cell] = []
    path: List[PathPoint] = []
    commands: List[str] = []
    rendered: str = ""


# =============================================================================
# CORE ALGORITHM
# =============================================================================

def run_algorithm(maze: str, start_heading: str, settle_ties: bool) -> dict:
    """
    1. Parse the maze (ParseError propagates)
    2. Dijkstra over (row, col, heading) + optimal-tile reconstruction
    3. Convert one optimal path to commands
    """
    grid = Grid.parse(maze)
    heading = Heading.from_name(start_heading or DEFAULT_HEADING.name)

    report = MazeSolver(grid).solve(heading, settle_ties=bool(settle_ties))
    if report is None:
        return {"reachable": False, "rendered": grid.render()}

    commands = CommandGenerator().generate_commands(report.path)
    return {
        "reachable": True,
        "min_score": report.min_score,
        "tile_count": report.tile_count,
        "tiles": [{"row": p.row, "col": p.col} for p in report.tiles],
        "path": [s.get_dict() for s in report.path],
        "commands": commands,
        "rendered": grid.render(report.tiles),
    }


# =============================================================================
# ENDPOINTS
# =============================================================================

@app.get("/status")
def health_check():
    return {"status": "ok", "message": "Maze server is running"}


@app.post("/solve", response_model=SolveOutput)
def solve(input_data: MazeInput):
    try:
        return run_algorithm(input_data.maze, input_data.start_heading, input_data.settle_ties)
    except ParseError as e:
        raise HTTPException(status_code=400, detail=f"Invalid maze: {e}")
    except ValueError as e:
        # Unknown heading name
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.exception("Solve failed")
        raise HTTPException(status_code=500, detail=str(e))


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    uvicorn.run(app, host=API_HOST, port=API_PORT)
