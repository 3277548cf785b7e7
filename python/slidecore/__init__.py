"""Optimal and near-optimal solver for the N×N sliding-tile puzzle."""

from slidecore.engine.gamesolver import Solver, Strategy, solve
from slidecore.models import Board, Direction

__all__ = ["Board", "Direction", "Solver", "Strategy", "solve"]
