"""Shared fixtures: an exhaustive breadth-first distance table for 3×3."""

from __future__ import annotations

import random
from collections import deque

import pytest

from slidecore.engine.moves import successors
from slidecore.models.board import State, goal_state


def bfs_distances(size: int) -> dict[State, int]:
    """Shortest move count from every reachable arrangement to the goal.

    Moves are reversible, so a single sweep outward from the goal suffices.
    """
    goal = goal_state(size)
    dist: dict[State, int] = {goal: 0}
    queue = deque([goal])
    while queue:
        s = queue.popleft()
        d = dist[s] + 1
        for s2, _ in successors(s, size):
            if s2 not in dist:
                dist[s2] = d
                queue.append(s2)
    return dist


@pytest.fixture(scope="session")
def distances_3x3() -> dict[State, int]:
    return bfs_distances(3)


@pytest.fixture(scope="session")
def reachable_3x3(distances_3x3: dict[State, int]) -> list[State]:
    # Sorted so that seeded sampling is reproducible.
    return sorted(distances_3x3)


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)
