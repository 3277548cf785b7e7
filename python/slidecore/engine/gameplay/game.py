"""Replays move sequences on a board and checks the win condition."""

from __future__ import annotations

from slidecore.engine.moves import apply_move
from slidecore.models.board import Board, Direction


class GamePlay:
    """Walks a board forward one blank move at a time."""

    def __init__(self, board: Board) -> None:
        self.size = board.size
        self.board = board
        self.moves: int = 0

    @classmethod
    def from_board(cls, board: Board) -> "GamePlay":
        return cls(board)

    # -- movement (direction = where the *blank* moves) -----------------------

    def move(self, direction: Direction) -> bool:
        """Move the blank one cell in *direction*.

        E.g. ``Direction.UP`` slides the tile **above** the blank downward.
        Returns True if the move was valid.
        """
        tiles = apply_move(self.board.tiles, self.size, direction)
        if tiles is None:
            return False

        self.board = Board(size=self.size, tiles=tiles)
        self.moves += 1
        return True

    # -- queries --------------------------------------------------------------

    @property
    def is_won(self) -> bool:
        return self.board.is_solved()
