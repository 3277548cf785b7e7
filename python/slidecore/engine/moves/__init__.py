from slidecore.engine.moves.successors import apply_move, replay, successors

__all__ = ["apply_move", "replay", "successors"]
