"""Iterative-deepening A* for boards too large for an open/closed table.

Memory is bounded by the current path: each attempt is a depth-first walk
that prunes at ``g + h > threshold``, and the next attempt raises the
threshold to the smallest f-value that was pruned.
"""

from __future__ import annotations

import logging
import math

from slidecore.engine.heuristic import manhattan
from slidecore.engine.moves import successors
from slidecore.engine.search.state import (
    Phase,
    SearchResult,
    SearchState,
    SearchTimeout,
)
from slidecore.models.board import Direction, State, goal_state

logger = logging.getLogger(__name__)

ALGORITHM = "IDA*"

# (bound, reversed moves). Moves are set only when the goal was reached.
Outcome = tuple[float, list[Direction] | None]


def ida_star(start: State, size: int, deadline: float | None = None) -> SearchResult:
    """Return a move sequence from *start* to the goal.

    ``moves`` is ``None`` when an attempt rejects nothing (the space is
    exhausted) or *deadline* (a ``time.monotonic()`` value) passes.
    """
    stats = SearchState(deadline=deadline)
    goal = goal_state(size)
    path: list[State] = [start]
    on_path: set[State] = {start}

    def dfs(g: int, threshold: int) -> Outcome:
        node = path[-1]
        f = g + manhattan(node, size)
        if f > threshold:
            return f, None
        if node == goal:
            return f, []

        stats.check_deadline()
        children = successors(node, size)
        stats.record_expansion(len(children))

        min_bound = math.inf
        for s2, direction in children:
            if s2 in on_path:
                continue
            path.append(s2)
            on_path.add(s2)
            bound, moves = dfs(g + 1, threshold)
            path.pop()
            on_path.discard(s2)
            if moves is not None:
                moves.append(direction)
                return bound, moves
            if bound < min_bound:
                min_bound = bound
        return min_bound, None

    threshold = manhattan(start, size)
    stats.threshold = threshold
    stats.advance(Phase.EXPANDING)
    moves: list[Direction] | None = None
    try:
        while True:
            stats.iterations += 1
            bound, found = dfs(0, threshold)
            if found is not None:
                found.reverse()
                moves = found
                stats.advance(Phase.GOAL_FOUND)
                break
            if bound == math.inf:
                stats.advance(Phase.EXHAUSTED)
                break
            logger.debug(
                "%s raising threshold %d -> %d after %d expansions",
                ALGORITHM, threshold, bound, stats.expanded,
            )
            threshold = int(bound)
            stats.threshold = threshold
            stats.advance(Phase.EXPANDING)
    except SearchTimeout:
        stats.advance(Phase.TIMED_OUT)

    logger.debug(
        "%s finished: %s after %d iterations, %d expansions (%.3fs)",
        ALGORITHM, stats.phase, stats.iterations, stats.expanded, stats.elapsed_time,
    )
    return SearchResult(algorithm=ALGORITHM, moves=moves, state=stats)
