from .board import Bead, BoardBuffer

__all__ = ["Bead", "BoardBuffer"]
