"""Manhattan heuristic: known values and admissibility on 3×3."""

from __future__ import annotations

import random

import pytest

from slidecore.engine.heuristic import manhattan
from slidecore.engine.moves import successors
from slidecore.models.board import State, goal_state


@pytest.mark.parametrize("size", [3, 4, 5])
def test_goal_has_zero_distance(size: int) -> None:
    assert manhattan(goal_state(size), size) == 0


def test_blank_is_ignored() -> None:
    # Only tile 8 is off by one; the blank's own offset does not count.
    assert manhattan((1, 2, 3, 4, 5, 6, 7, 0, 8), 3) == 1


def test_known_values() -> None:
    # 5, 7 and 8 are one cell off, 6 is three.
    assert manhattan((1, 2, 3, 4, 0, 5, 6, 7, 8), 3) == 6
    # 8 and 1 swapped: each is three cells from home.
    assert manhattan((8, 2, 3, 4, 5, 6, 7, 1, 0), 3) == 6


def test_admissible_on_random_reachable_boards(
    distances_3x3: dict[State, int], reachable_3x3: list[State]
) -> None:
    sample = random.Random(7).sample(reachable_3x3, 1000)
    for state in sample:
        assert manhattan(state, 3) <= distances_3x3[state], state


def test_changes_by_one_per_move(rng: random.Random, reachable_3x3: list[State]) -> None:
    for state in rng.sample(reachable_3x3, 200):
        h = manhattan(state, 3)
        for s2, _ in successors(state, 3):
            assert abs(manhattan(s2, 3) - h) == 1
