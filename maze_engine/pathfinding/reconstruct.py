import logging
from collections import deque
from typing import Iterable, List, Set, Tuple

from maze_engine.utils.consts import MOVE_COST, TURN_COST
from maze_engine.utils.errors import InvariantViolation
from maze_engine.utils.types import Position, ScoreTable, State

logger = logging.getLogger(__name__)


def predecessors(scores: ScoreTable, state: State) -> List[Tuple[State, int]]:
    """
    States that could have relaxed `state`, with the cost of that edge.
    Turn predecessors come first, then the move predecessor if it is on the table.
    """
    preds = [(state.turned(heading), TURN_COST) for heading in state.heading.adjacent()]
    behind = state.backward()
    if scores.contains(behind.row, behind.col):
        preds.append((behind, MOVE_COST))
    return preds


def _on_optimal_path(scores: ScoreTable, pred: State, cost: int, score: int) -> bool:
    return scores[pred] == score - cost


def reconstruct(scores: ScoreTable, end_states: Iterable[State]) -> Set[Position]:
    """
    Every cell lying on at least one minimum-cost path into `end_states`.

    Walks the settled table backwards from all tied end states at once,
    following every predecessor edge whose score delta equals its cost.
    Visited states stop requeueing; visited positions are the answer.
    """
    queue = deque()
    seen_states: Set[State] = set()
    positions: Set[Position] = set()

    for state in end_states:
        if not scores.is_reached(state):
            raise InvariantViolation(f"Reconstruction seeded with unreached {state!r}")
        if state not in seen_states:
            seen_states.add(state)
            positions.add(state.position)
            queue.append(state)

    while queue:
        state = queue.popleft()
        score = scores[state]
        if score == 0:
            continue

        for pred, cost in predecessors(scores, state):
            if pred in seen_states or not _on_optimal_path(scores, pred, cost, score):
                continue
            seen_states.add(pred)
            positions.add(pred.position)
            queue.append(pred)

    logger.debug("Optimal-path union: %d cells from %d states", len(positions), len(seen_states))
    return positions


def trace_single_path(scores: ScoreTable, end_state: State) -> List[State]:
    """
    One minimum-cost path ending at `end_state`, start first.
    Follows the first matching predecessor at each step.
    """
    if not scores.is_reached(end_state):
        raise InvariantViolation(f"Cannot trace a path to unreached {end_state!r}")

    path = [end_state]
    state = end_state
    score = scores[state]
    while score > 0:
        for pred, cost in predecessors(scores, state):
            if _on_optimal_path(scores, pred, cost, score):
                state, score = pred, score - cost
                break
        else:
            raise InvariantViolation(f"No predecessor for {state!r} at score {score}")
        path.append(state)
    return path[::-1]
