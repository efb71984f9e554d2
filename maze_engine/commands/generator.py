# maze_engine/commands/generator.py
from typing import List, Tuple

from maze_engine.utils.errors import InvariantViolation
from maze_engine.utils.types import State


class CommandGenerator:
    """
    Converts a state path into agent commands:
        FW<n>  move n cells forward
        TR90   quarter turn clockwise
        TL90   quarter turn counter-clockwise
        FIN    end of path
    """

    def generate_commands(self, path: List[State]) -> List[str]:
        commands = []
        for i in range(1, len(path)):
            prev = path[i - 1]
            curr = path[i]

            if prev.heading == curr.heading:
                # STRAIGHT
                if curr == prev.forward():
                    commands.append("FW1")
                elif curr != prev:
                    raise InvariantViolation(f"{prev!r} -> {curr!r} is not a forward move")
            else:
                # TURNING (in place)
                if curr.position != prev.position:
                    raise InvariantViolation(f"{prev!r} -> {curr!r} turns while moving")
                if curr.heading == prev.heading.clockwise():
                    commands.append("TR90")
                elif curr.heading == prev.heading.counter_clockwise():
                    commands.append("TL90")
                else:
                    # Not produced by the search, kept for hand-built paths
                    commands.extend(["TR90", "TR90"])

        commands.append("FIN")
        return self.compress_commands(commands)

    def compress_commands(self, commands: List[str]) -> List[str]:
        """Merge runs of forward moves: FW1 FW1 FW1 -> FW3."""
        compressed: List[str] = []
        run = 0

        def parse(c: str) -> Tuple[str, int]:
            if c.startswith("FW"):
                return "FW", int(c[2:])
            return c, 0

        for cmd in commands:
            type_str, val = parse(cmd)
            if type_str == "FW":
                run += val
                continue
            if run:
                compressed.append(f"FW{run}")
                run = 0
            compressed.append(cmd)

        if run:
            compressed.append(f"FW{run}")
        return compressed
