from __future__ import annotations

from enum import Enum, auto
from typing import Dict, Optional, Tuple


class InputAction(Enum):
    """Logical input actions, independent of the physical key pressed."""

    MOVE_UP = auto()
    MOVE_DOWN = auto()
    MOVE_LEFT = auto()
    MOVE_RIGHT = auto()


# Grid y grows downwards, so "up" is a negative dy.
DIRECTIONS: Dict[InputAction, Tuple[int, int]] = {
    InputAction.MOVE_UP: (0, -1),
    InputAction.MOVE_DOWN: (0, 1),
    InputAction.MOVE_LEFT: (-1, 0),
    InputAction.MOVE_RIGHT: (1, 0),
}


def direction_for(action: Optional[InputAction]) -> Optional[Tuple[int, int]]:
    """Return the (dx, dy) unit vector for a movement action, or None."""
    if action is None:
        return None
    return DIRECTIONS.get(action)


__all__ = ["DIRECTIONS", "InputAction", "direction_for"]
