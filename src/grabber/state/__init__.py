from .game_state import GamePhase, GameState, MoveOutcome, MoveResult

__all__ = ["GamePhase", "GameState", "MoveOutcome", "MoveResult"]
