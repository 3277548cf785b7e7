from slidecore.engine.gamesolver.solver import Solver, Strategy, solve

__all__ = ["Solver", "Strategy", "solve"]
