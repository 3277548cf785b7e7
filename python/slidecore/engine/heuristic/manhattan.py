"""Manhattan-distance heuristic."""

from __future__ import annotations

from slidecore.models.board import State


def manhattan(state: State, size: int) -> int:
    """Sum of row and column offsets of every numbered tile from its goal cell.

    Never overestimates the remaining move count, and changes by exactly one
    per move, so it is safe both for A* and as an IDA* bound.
    """
    dist = 0
    for idx, tile in enumerate(state):
        if tile == 0:
            continue
        r, c = divmod(idx, size)
        gr, gc = divmod(tile - 1, size)
        dist += abs(r - gr) + abs(c - gc)
    return dist
