"""Sliding puzzle solver — picks a search strategy by board size."""

from __future__ import annotations

import time
from enum import StrEnum
from typing import Sequence

from slidecore.engine.search import SearchResult, a_star, ida_star
from slidecore.models.board import Board, Direction

# Largest side length still solved with A*; above it the open/closed table
# outgrows memory and IDA* takes over.
BEST_FIRST_MAX_SIZE = 3


class Strategy(StrEnum):
    BEST_FIRST = "best-first"
    ITERATIVE_DEEPENING = "iterative-deepening"


class Solver:
    """Stateless solver — all methods are static."""

    @staticmethod
    def strategy_for(size: int, best_first_max_size: int = BEST_FIRST_MAX_SIZE) -> Strategy:
        if size <= best_first_max_size:
            return Strategy.BEST_FIRST
        return Strategy.ITERATIVE_DEEPENING

    @staticmethod
    def search(
        board: Board,
        timeout: float | None = None,
        best_first_max_size: int = BEST_FIRST_MAX_SIZE,
    ) -> SearchResult:
        """Run the strategy for *board* and return the result with its stats.

        *timeout* is a wall-clock budget in seconds; ``None`` never stops early.
        """
        deadline = time.monotonic() + timeout if timeout is not None else None
        strategy = Solver.strategy_for(board.size, best_first_max_size)
        if strategy is Strategy.BEST_FIRST:
            return a_star(board.tiles, board.size, deadline=deadline)
        return ida_star(board.tiles, board.size, deadline=deadline)

    @staticmethod
    def solve(
        board: Board,
        timeout: float | None = None,
        best_first_max_size: int = BEST_FIRST_MAX_SIZE,
    ) -> list[Direction] | None:
        """Return a move sequence that solves *board*, or ``None`` if none was found."""
        if board.is_solved():
            return []
        return Solver.search(board, timeout, best_first_max_size).moves

    @staticmethod
    def hint(board: Board, timeout: float | None = None) -> Direction | None:
        """Return the single best next move, or ``None`` if solved / unsolvable."""
        if board.is_solved():
            return None
        moves = Solver.solve(board, timeout)
        return moves[0] if moves else None


def solve(
    tiles: Sequence[int], size: int, timeout: float | None = None
) -> list[Direction] | None:
    """Solve a flat row-major board; ``None`` means no solution was found."""
    return Solver.solve(Board.from_flat(size, tiles), timeout)
