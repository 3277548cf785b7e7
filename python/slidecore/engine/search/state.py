"""Tracks the mutable state of a search in progress."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from enum import StrEnum

from slidecore.exceptions import SearchStateError
from slidecore.models.board import Direction


class Phase(StrEnum):
    INITIALIZED = "initialized"
    EXPANDING = "expanding"
    GOAL_FOUND = "goal_found"
    EXHAUSTED = "exhausted"
    TIMED_OUT = "timed_out"


_TRANSITIONS: dict[Phase, frozenset[Phase]] = {
    Phase.INITIALIZED: frozenset({Phase.EXPANDING}),
    Phase.EXPANDING: frozenset(
        {Phase.EXPANDING, Phase.GOAL_FOUND, Phase.EXHAUSTED, Phase.TIMED_OUT}
    ),
    Phase.GOAL_FOUND: frozenset(),
    Phase.EXHAUSTED: frozenset(),
    Phase.TIMED_OUT: frozenset(),
}


class SearchTimeout(Exception):
    """Unwinds a search whose deadline has passed. Never escapes the engine."""


class SearchState:
    """Holds the phase, counters, and elapsed time of one search call."""

    def __init__(self, deadline: float | None = None) -> None:
        self.phase = Phase.INITIALIZED
        self.expanded: int = 0
        self.generated: int = 0
        self.iterations: int = 0
        self.threshold: float | None = None
        self.deadline = deadline
        self._start_time: float = time.monotonic()
        self._end_time: float | None = None

    # -- time tracking --------------------------------------------------------

    @property
    def elapsed_time(self) -> float:
        end = self._end_time if self._end_time is not None else time.monotonic()
        return end - self._start_time

    @property
    def expired(self) -> bool:
        return self.deadline is not None and time.monotonic() >= self.deadline

    def check_deadline(self) -> None:
        if self.expired:
            raise SearchTimeout

    # -- phases ---------------------------------------------------------------

    def advance(self, phase: Phase) -> None:
        if phase not in _TRANSITIONS[self.phase]:
            raise SearchStateError(f"Cannot move from {self.phase} to {phase}.")
        self.phase = phase
        if self.is_finished:
            self._end_time = time.monotonic()

    @property
    def is_finished(self) -> bool:
        return not _TRANSITIONS[self.phase]

    # -- counters -------------------------------------------------------------

    def record_expansion(self, generated: int) -> None:
        self.expanded += 1
        self.generated += generated


@dataclass
class SearchResult:
    algorithm: str
    moves: list[Direction] | None
    state: SearchState = field(repr=False)

    @property
    def solved(self) -> bool:
        return self.moves is not None
