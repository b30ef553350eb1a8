"""Fish Grabber: collect every fish in a fixed maze."""

from .errors import GameNotInitializedError, GrabberError, PlacementError
from .game import GrabberGame
from .state import GamePhase, GameState, MoveOutcome, MoveResult

__all__ = [
    "GameNotInitializedError",
    "GamePhase",
    "GameState",
    "GrabberError",
    "GrabberGame",
    "MoveOutcome",
    "MoveResult",
    "PlacementError",
]

__version__ = "0.1.0"
