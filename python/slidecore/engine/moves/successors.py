"""Legal blank moves and the arrangements they produce."""

from __future__ import annotations

from typing import Iterable

from slidecore.exceptions import IllegalMoveError
from slidecore.models.board import Direction, State

# Fixed expansion order.
ORDER = (Direction.LEFT, Direction.RIGHT, Direction.UP, Direction.DOWN)


def _swap(state: State, i: int, j: int) -> State:
    lst = list(state)
    lst[i], lst[j] = lst[j], lst[i]
    return tuple(lst)


def successors(state: State, size: int) -> list[tuple[State, Direction]]:
    """Return ``(next_state, direction)`` for every move the blank can make.

    Corner blanks yield 2 successors, edge blanks 3, interior blanks 4.
    """
    z = state.index(0)
    br, bc = divmod(z, size)
    out: list[tuple[State, Direction]] = []
    for direction in ORDER:
        dr, dc = direction.offset
        nr, nc = br + dr, bc + dc
        if 0 <= nr < size and 0 <= nc < size:
            out.append((_swap(state, z, nr * size + nc), direction))
    return out


def apply_move(state: State, size: int, direction: Direction) -> State | None:
    """Return the arrangement after moving the blank, or ``None`` if off-board."""
    z = state.index(0)
    br, bc = divmod(z, size)
    dr, dc = direction.offset
    nr, nc = br + dr, bc + dc
    if not (0 <= nr < size and 0 <= nc < size):
        return None
    return _swap(state, z, nr * size + nc)


def replay(state: State, size: int, moves: Iterable[Direction]) -> State:
    """Apply *moves* in order and return the final arrangement."""
    for i, direction in enumerate(moves):
        nxt = apply_move(state, size, direction)
        if nxt is None:
            raise IllegalMoveError(
                f"Move {i} ({direction.value}) leaves the board at blank "
                f"{divmod(state.index(0), size)}."
            )
        state = nxt
    return state
