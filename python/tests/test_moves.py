"""Move generator: successor counts, purity, inverses and replay."""

from __future__ import annotations

import pytest

from slidecore.engine.moves import apply_move, replay, successors
from slidecore.exceptions import IllegalMoveError
from slidecore.models.board import Direction, State, goal_state


# -- helpers ------------------------------------------------------------------


def _with_blank_at(size: int, index: int) -> State:
    tiles = [v for v in goal_state(size) if v != 0]
    tiles.insert(index, 0)
    return tuple(tiles)


def _expected_count(size: int, index: int) -> int:
    r, c = divmod(index, size)
    edges = (r in (0, size - 1)) + (c in (0, size - 1))
    return 4 - edges


def _cases() -> list[tuple[int, int]]:
    return [(size, i) for size in (3, 4, 5) for i in range(size * size)]


# -- tests --------------------------------------------------------------------


@pytest.mark.parametrize("size,index", _cases(), ids=lambda v: str(v))
def test_successor_count_by_blank_position(size: int, index: int) -> None:
    state = _with_blank_at(size, index)
    assert len(successors(state, size)) == _expected_count(size, index)


@pytest.mark.parametrize("size", [3, 4, 5])
def test_corner_edge_interior_counts(size: int) -> None:
    last = size * size - 1
    assert len(successors(_with_blank_at(size, 0), size)) == 2
    assert len(successors(_with_blank_at(size, last), size)) == 2
    assert len(successors(_with_blank_at(size, 1), size)) == 3
    assert len(successors(_with_blank_at(size, size + 1), size)) == 4


def test_successors_are_tagged_in_fixed_order() -> None:
    state = (1, 2, 3, 4, 0, 5, 6, 7, 8)
    result = successors(state, 3)
    assert [d for _, d in result] == [
        Direction.LEFT, Direction.RIGHT, Direction.UP, Direction.DOWN,
    ]
    by_dir = dict((d, s) for s, d in result)
    assert by_dir[Direction.LEFT] == (1, 2, 3, 0, 4, 5, 6, 7, 8)
    assert by_dir[Direction.RIGHT] == (1, 2, 3, 4, 5, 0, 6, 7, 8)
    assert by_dir[Direction.UP] == (1, 0, 3, 4, 2, 5, 6, 7, 8)
    assert by_dir[Direction.DOWN] == (1, 2, 3, 4, 7, 5, 6, 0, 8)


@pytest.mark.parametrize("size", [3, 4, 5])
def test_move_then_inverse_is_identity(size: int) -> None:
    for index in range(size * size):
        state = _with_blank_at(size, index)
        for s2, direction in successors(state, size):
            assert apply_move(s2, size, direction.inverse) == state


def test_apply_move_off_board_returns_none() -> None:
    goal = goal_state(3)
    assert apply_move(goal, 3, Direction.RIGHT) is None
    assert apply_move(goal, 3, Direction.DOWN) is None
    assert apply_move(goal, 3, Direction.LEFT) == (1, 2, 3, 4, 5, 6, 7, 0, 8)


def test_replay_applies_moves_in_order() -> None:
    start = (1, 2, 3, 4, 5, 6, 0, 7, 8)
    assert replay(start, 3, [Direction.RIGHT, Direction.RIGHT]) == goal_state(3)


def test_replay_rejects_off_board_move() -> None:
    with pytest.raises(IllegalMoveError):
        replay(goal_state(3), 3, [Direction.LEFT, Direction.DOWN])
