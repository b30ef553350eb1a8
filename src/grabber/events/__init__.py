from .bus import EventBus
from .types import BOARD_RESET, ITEM_COLLECTED, MARKER_MOVED, VICTORY

__all__ = ["BOARD_RESET", "EventBus", "ITEM_COLLECTED", "MARKER_MOVED", "VICTORY"]
