import argparse
import logging
import sys

from maze_engine.entities.grid import Grid
from maze_engine.pathfinding.maze_solver import MazeSolver
from maze_engine.utils.consts import DEFAULT_HEADING
from maze_engine.utils.enums import Heading
from maze_engine.utils.errors import ParseError

logger = logging.getLogger("solve_maze")


def run(maze_path, heading, render=False, settle_ties=False):
    """
    Solves the maze stored at `maze_path` and prints both answers.

    Returns the process exit status: 0 when solved, 1 on a bad maze file or
    when the end cannot be reached.
    """
    try:
        with open(maze_path) as f:
            text = f.read()
    except OSError as e:
        print(f"Error reading maze {maze_path}: {e}", file=sys.stderr)
        return 1

    try:
        grid = Grid.parse(text)
    except ParseError as e:
        print(f"Error: invalid maze {maze_path}: {e}", file=sys.stderr)
        return 1
    logger.debug("Loaded %r from %s", grid, maze_path)

    report = MazeSolver(grid).solve(heading, settle_ties=settle_ties)
    if report is None:
        print(f"No path from {tuple(grid.start)} to {tuple(grid.end)}", file=sys.stderr)
        return 1

    print(f"Part 1: {report.min_score}")
    print(f"Part 2: {report.tile_count}")
    if render:
        print(grid.render(report.tiles))
    return 0


def main(argv=None):
    parser = argparse.ArgumentParser(description="Find the lowest score through a reindeer maze and count its best-path tiles.")
    parser.add_argument("maze_path", help="Path to a maze text file ('#' wall, '.' open, 'S' start, 'E' end).")
    parser.add_argument("--heading", default=DEFAULT_HEADING.name, type=Heading.from_name, metavar="HEADING",
                        help="Heading at the start tile: a name or its initial, any case (default: %(default)s).")
    parser.add_argument("--render", action="store_true", help="Print the maze with best-path tiles marked 'O'.")
    parser.add_argument("--settle-ties", action="store_true", help="Keep settling states tied at the minimum score.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return run(args.maze_path, args.heading, render=args.render, settle_ties=args.settle_ties)


if __name__ == "__main__":
    sys.exit(main())
