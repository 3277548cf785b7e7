"""Board generator: reachability, determinism, and the no-back-step walk."""

from __future__ import annotations

import random

from slidecore.engine.gamegenerator import GameGenerator
from slidecore.models.board import Board, State


def test_solved_board() -> None:
    assert GameGenerator.solved(4) == Board.goal(4)


def test_generated_boards_are_reachable(distances_3x3: dict[State, int]) -> None:
    for seed in range(20):
        board = GameGenerator.generate(3, seed=seed)
        assert board.tiles in distances_3x3
        assert not board.is_solved()


def test_seed_is_deterministic() -> None:
    assert GameGenerator.generate(4, moves=50, seed=5) == GameGenerator.generate(4, moves=50, seed=5)


def test_scramble_zero_moves_is_identity() -> None:
    board = Board.goal(3)
    assert GameGenerator.scramble(board, 0) == board


def test_scramble_does_not_touch_input() -> None:
    board = Board.goal(5)
    GameGenerator.scramble(board, 30, random.Random(0))
    assert board.is_solved()


def test_single_move_never_returns_goal() -> None:
    # A one-step walk from the goal cannot come back.
    for seed in range(10):
        assert not GameGenerator.generate(3, moves=1, seed=seed).is_solved()


def test_two_moves_never_undo_each_other(distances_3x3: dict[State, int]) -> None:
    for seed in range(20):
        board = GameGenerator.generate(3, moves=2, seed=seed)
        assert distances_3x3[board.tiles] == 2
