"""Board model: construction, goal, keys and immutability."""

from __future__ import annotations

import dataclasses

import pytest

from slidecore.exceptions import InvalidBoardError
from slidecore.models.board import Board, Direction, goal_state, state_key


@pytest.mark.parametrize("size", [3, 4, 5])
def test_goal_is_ascending_with_blank_last(size: int) -> None:
    goal = goal_state(size)
    assert len(goal) == size * size
    assert list(goal[:-1]) == list(range(1, size * size))
    assert goal[-1] == 0
    assert Board.goal(size).is_solved()


def test_key_is_delimited() -> None:
    assert state_key((1, 2, 3, 0)) == "1,2,3,0"
    # Without a separator these two would collide.
    assert state_key((1, 23)) != state_key((12, 3))
    assert Board.from_flat(2, [1, 2, 3, 0]).key == "1,2,3,0"


def test_equality_is_elementwise() -> None:
    a = Board.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 0, 8])
    b = Board.from_flat(3, (1, 2, 3, 4, 5, 6, 7, 0, 8))
    c = Board.from_flat(3, [1, 2, 3, 4, 5, 6, 0, 7, 8])
    assert a == b
    assert hash(a) == hash(b)
    assert a != c


def test_from_flat_rejects_wrong_length() -> None:
    with pytest.raises(InvalidBoardError):
        Board.from_flat(3, [1, 2, 3, 0])
    # Also usable as a plain ValueError.
    with pytest.raises(ValueError):
        Board.from_flat(4, list(range(9)))


def test_from_grid_flattens_and_maps_null_to_blank() -> None:
    board = Board.from_grid([[1, 2, 3], [4, 5, 6], [7, 8, None]])
    assert board.size == 3
    assert board.tiles == (1, 2, 3, 4, 5, 6, 7, 8, 0)
    assert board.is_solved()


def test_from_grid_accepts_flat_input() -> None:
    board = Board.from_grid([1, 2, 3, 0], size=2)
    assert board.tiles == (1, 2, 3, 0)


def test_blank_position_and_rows() -> None:
    board = Board.from_flat(3, [1, 2, 3, 4, 0, 5, 6, 7, 8])
    assert board.blank_index == 4
    assert board.blank_pos == (1, 1)
    assert board.rows() == [[1, 2, 3], [4, 0, 5], [6, 7, 8]]
    assert board.get_tile(2, 0) == 6


def test_is_tile_correct() -> None:
    board = Board.from_flat(3, [1, 2, 3, 4, 0, 5, 6, 7, 8])
    assert board.is_tile_correct(0, 0)
    assert board.is_tile_correct(1, 0)
    assert not board.is_tile_correct(1, 1)  # blank belongs bottom-right
    assert not board.is_tile_correct(1, 2)


def test_board_is_immutable() -> None:
    board = Board.goal(3)
    with pytest.raises(dataclasses.FrozenInstanceError):
        board.size = 4  # type: ignore[misc]


@pytest.mark.parametrize("direction", list(Direction))
def test_direction_inverse_round_trips(direction: Direction) -> None:
    assert direction.inverse.inverse is direction
    dr, dc = direction.offset
    ir, ic = direction.inverse.offset
    assert (dr + ir, dc + ic) == (0, 0)


def test_direction_labels() -> None:
    assert [d.value for d in Direction] == ["LEFT", "RIGHT", "UP", "DOWN"]
