from __future__ import annotations

from enum import Enum
from typing import Set


class Cell(Enum):
    """Enumeration for cell codes in the maze grid.

    AGENT only mirrors where the grabber stands; the authoritative position is
    kept by the game state.
    """

    WALL = 0
    FLOOR = 1
    ITEM = 2
    AGENT = 3


# Everything except walls can be stepped on.
WALKABLE_CELLS: Set[Cell] = {Cell.FLOOR, Cell.ITEM, Cell.AGENT}


def is_walkable_cell(cell: Cell) -> bool:
    """Return True if the provided cell code can be entered by the agent.

    Args:
        cell: A Cell enum member.

    Returns:
        bool: Whether the cell is traversable.
    """

    return cell in WALKABLE_CELLS
