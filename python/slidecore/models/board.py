"""Board model for the sliding puzzle solver."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Iterable, Sequence

from slidecore.exceptions import InvalidBoardError

State = tuple[int, ...]


class Direction(StrEnum):
    """Direction the *blank* travels.

    Equivalently, ``LEFT`` slides the tile left of the blank to the right.
    """

    LEFT = "LEFT"
    RIGHT = "RIGHT"
    UP = "UP"
    DOWN = "DOWN"

    @property
    def offset(self) -> tuple[int, int]:
        return _OFFSETS[self]

    @property
    def inverse(self) -> Direction:
        return _INVERSES[self]


_OFFSETS = {
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
}

_INVERSES = {
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
}


def goal_state(size: int) -> State:
    """Return ``(1, 2, ..., size*size - 1, 0)``."""
    return tuple(range(1, size * size)) + (0,)


def state_key(state: Iterable[int]) -> str:
    """Canonical, order-sensitive key of an arrangement, e.g. ``"1,2,3,0"``."""
    return ",".join(str(v) for v in state)


@dataclass(frozen=True)
class Board:
    """An immutable sliding puzzle arrangement.

    Tiles are stored flat in row-major order. 0 represents the blank space.
    """

    size: int
    tiles: State

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_flat(cls, size: int, flat: Sequence[int]) -> Board:
        """Create a board from a flat row-major tile list.

        Example::

            Board.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 0, 8])
        """
        if len(flat) != size * size:
            raise InvalidBoardError(
                f"Expected {size * size} tiles for a {size}×{size} board, "
                f"got {len(flat)}."
            )
        return cls(size=size, tiles=tuple(flat))

    @classmethod
    def from_grid(cls, grid: Sequence, size: int | None = None) -> Board:
        """Create a board from rows, mapping ``None`` cells to the blank.

        A grid that is already flat is taken as-is. When *size* is omitted
        it is inferred from the number of rows.
        """
        flat: list[int] = []
        for cell in grid:
            if isinstance(cell, (list, tuple)):
                flat.extend(0 if v is None else v for v in cell)
            else:
                flat.append(0 if cell is None else cell)
        if size is None:
            size = len(grid)
        return cls.from_flat(size, flat)

    @classmethod
    def goal(cls, size: int) -> Board:
        return cls(size=size, tiles=goal_state(size))

    # -- queries --------------------------------------------------------------

    @property
    def key(self) -> str:
        return state_key(self.tiles)

    @property
    def blank_index(self) -> int:
        return self.tiles.index(0)

    @property
    def blank_pos(self) -> tuple[int, int]:
        return divmod(self.blank_index, self.size)

    def rows(self) -> list[list[int]]:
        n = self.size
        return [list(self.tiles[r * n : (r + 1) * n]) for r in range(n)]

    def get_tile(self, row: int, col: int) -> int:
        return self.tiles[row * self.size + col]

    def is_solved(self) -> bool:
        """Check if all tiles are in their goal positions."""
        return self.tiles == goal_state(self.size)

    def is_tile_correct(self, row: int, col: int) -> bool:
        """Check if a specific tile is in its goal position."""
        val = self.get_tile(row, col)
        if val == 0:
            return row == self.size - 1 and col == self.size - 1
        expected_row = (val - 1) // self.size
        expected_col = (val - 1) % self.size
        return row == expected_row and col == expected_col
