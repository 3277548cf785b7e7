"""Best-first (A*) search, optimal under the Manhattan heuristic.

Open entries sit in a binary heap; a ``best_g`` map keyed by arrangement plays
the role of the heap's index, and entries whose cost has since improved are
skipped when popped. Nodes live in an arena and point at their parent by
index, so the whole tree is dropped with the arena once the search returns.
"""

from __future__ import annotations

import heapq
import itertools
import logging
from dataclasses import dataclass

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

ALGORITHM = "A*"


@dataclass
class Node:
    state: State
    g: int
    h: int
    parent: int | None = None
    move: Direction | None = None

    @property
    def f(self) -> int:
        return self.g + self.h


def reconstruct_moves(arena: list[Node], index: int) -> list[Direction]:
    """Follow parent links from *index* back to the root; root→goal order."""
    moves: list[Direction] = []
    node = arena[index]
    while node.parent is not None:
        moves.append(node.move)  # type: ignore[arg-type]
        node = arena[node.parent]
    moves.reverse()
    return moves


def a_star(start: State, size: int, deadline: float | None = None) -> SearchResult:
    """Return the shortest move sequence from *start* to the goal.

    ``moves`` is ``None`` when the reachable space is exhausted (the board is
    unsolvable) or *deadline* (a ``time.monotonic()`` value) passes.
    """
    stats = SearchState(deadline=deadline)
    goal = goal_state(size)
    arena: list[Node] = []
    counter = itertools.count()

    h0 = manhattan(start, size)
    arena.append(Node(state=start, g=0, h=h0))
    open_heap: list[tuple[int, int, int, int]] = [(h0, h0, next(counter), 0)]
    best_g: dict[State, int] = {start: 0}
    closed: set[State] = set()

    stats.advance(Phase.EXPANDING)
    moves: list[Direction] | None = None
    try:
        while open_heap:
            _, _, _, index = heapq.heappop(open_heap)
            node = arena[index]
            if node.state in closed or node.g > best_g[node.state]:
                continue

            if node.state == goal:
                moves = reconstruct_moves(arena, index)
                stats.advance(Phase.GOAL_FOUND)
                break

            stats.check_deadline()
            closed.add(node.state)
            children = successors(node.state, size)
            stats.record_expansion(len(children))

            g2 = node.g + 1
            for s2, direction in children:
                if s2 in closed:
                    continue
                if g2 >= best_g.get(s2, g2 + 1):
                    continue
                best_g[s2] = g2
                h2 = manhattan(s2, size)
                arena.append(Node(state=s2, g=g2, h=h2, parent=index, move=direction))
                heapq.heappush(open_heap, (g2 + h2, h2, next(counter), len(arena) - 1))
        else:
            stats.advance(Phase.EXHAUSTED)
    except SearchTimeout:
        stats.advance(Phase.TIMED_OUT)

    logger.debug(
        "%s finished: %s after %d expansions (%.3fs)",
        ALGORITHM, stats.phase, stats.expanded, stats.elapsed_time,
    )
    return SearchResult(algorithm=ALGORITHM, moves=moves, state=stats)
