from .grid import MazeGrid, Size
from .layouts import DEFAULT_LAYOUT
from .maze import MazeModel
from .tiles import Cell, WALKABLE_CELLS, is_walkable_cell

__all__ = [
    "Cell",
    "DEFAULT_LAYOUT",
    "MazeGrid",
    "MazeModel",
    "Size",
    "WALKABLE_CELLS",
    "is_walkable_cell",
]
