"""Generates reachable sliding puzzle boards."""

from __future__ import annotations

import random

from slidecore.engine.moves import apply_move, successors
from slidecore.models.board import Board


class GameGenerator:
    """Creates solvable puzzles by walking the blank away from the solved state."""

    @staticmethod
    def solved(size: int) -> Board:
        """Return the goal-state board (all tiles in order, blank bottom-right)."""
        return Board.goal(size)

    @staticmethod
    def scramble(board: Board, moves: int, rng: random.Random | None = None) -> Board:
        """Return *board* after *moves* random blank moves.

        The walk never undoes the move it just made.
        """
        rng = rng or random.Random()
        tiles = board.tiles
        prev = None

        for _ in range(moves):
            options = [d for _, d in successors(tiles, board.size)]
            if prev is not None and prev.inverse in options and len(options) > 1:
                options.remove(prev.inverse)
            prev = rng.choice(options)
            tiles = apply_move(tiles, board.size, prev)  # type: ignore[assignment]

        return Board(size=board.size, tiles=tiles)

    @staticmethod
    def generate(size: int, moves: int | None = None, seed: int | None = None) -> Board:
        """Return a random reachable board of the given size.

        *moves* defaults to ``size * size * 100`` shuffles.
        """
        rng = random.Random(seed)
        if moves is None:
            moves = size * size * 100
        board = GameGenerator.scramble(GameGenerator.solved(size), moves, rng)

        # Ensure the board is not already solved
        while moves > 0 and board.is_solved():
            board = GameGenerator.scramble(board, moves, rng)

        return board
