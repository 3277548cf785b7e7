from slidecore.models.board import Board, Direction, State, goal_state, state_key

__all__ = ["Board", "Direction", "State", "goal_state", "state_key"]
