from slidecore.engine.heuristic.manhattan import manhattan

__all__ = ["manhattan"]
