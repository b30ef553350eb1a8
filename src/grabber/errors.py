class GrabberError(Exception):
    """Base exception for the Fish Grabber project."""


class PlacementError(GrabberError):
    """Raised when no floor cell is left to place an item or the agent on."""


class GameNotInitializedError(GrabberError):
    """Raised when input arrives before the game has been initialized."""
