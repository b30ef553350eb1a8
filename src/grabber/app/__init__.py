from .wiring import build_game

__all__ = ["build_game"]
