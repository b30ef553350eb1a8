from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Generator, List, Optional, Sequence, Tuple

from .tiles import Cell, is_walkable_cell

logger = logging.getLogger(__name__)

DEFAULT_CHAR_MAPPING: Dict[str, Cell] = {
    "#": Cell.WALL,
    ".": Cell.FLOOR,
    "o": Cell.ITEM,
    "@": Cell.AGENT,
}


@dataclass(frozen=True)
class Size:
    width: int
    height: int


class MazeGrid:
    """A bounds-checked 2D grid of cell codes.

    All maze access goes through this class. Lookups that must not fail
    (movement checks) use is_within/safe_get/is_walkable; authoring code uses
    get/set, which raise on out-of-bounds coordinates.
    """

    __slots__ = ("_w", "_h", "_cells")

    def __init__(self, width: int, height: int, default_cell: Cell = Cell.FLOOR) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("MazeGrid dimensions must be positive")
        self._w = int(width)
        self._h = int(height)
        # cells[y][x]
        self._cells: List[List[Cell]] = [[default_cell for _ in range(self._w)] for _ in range(self._h)]
        logger.debug("Initialized MazeGrid %dx%d with default cell %s", self._w, self._h, default_cell.name)

    @property
    def size(self) -> Size:
        return Size(self._w, self._h)

    @property
    def width(self) -> int:
        return self._w

    @property
    def height(self) -> int:
        return self._h

    def is_within(self, x: int, y: int) -> bool:
        """Check if coordinates are within the grid bounds. Never raises."""
        return 0 <= x < self._w and 0 <= y < self._h

    def get(self, x: int, y: int) -> Cell:
        """Return the cell code at (x, y).

        Raises IndexError if out of bounds.
        """
        if not self.is_within(x, y):
            raise IndexError(f"Coordinates out of bounds: ({x}, {y}) for grid {self._w}x{self._h}")
        return self._cells[y][x]

    def safe_get(self, x: int, y: int) -> Optional[Cell]:
        """Return the cell code, or None when out of bounds."""
        if not self.is_within(x, y):
            return None
        return self._cells[y][x]

    def set(self, x: int, y: int, cell: Cell) -> None:
        """Set the cell code at (x, y).

        Raises IndexError if out of bounds and TypeError for non-Cell values.
        """
        if not isinstance(cell, Cell):
            raise TypeError("cell must be a Cell enum member")
        if not self.is_within(x, y):
            raise IndexError(f"Coordinates out of bounds: ({x}, {y}) for grid {self._w}x{self._h}")
        self._cells[y][x] = cell

    def is_walkable(self, x: int, y: int) -> bool:
        """Return True if (x, y) is in bounds and not a wall. Never raises."""
        cell = self.safe_get(x, y)
        if cell is None:
            return False
        return is_walkable_cell(cell)

    def coords_of(self, cell: Cell) -> Generator[Tuple[int, int], None, None]:
        """Yield every (x, y) holding the given cell code, row by row."""
        for y, row in enumerate(self._cells):
            for x, value in enumerate(row):
                if value is cell:
                    yield (x, y)

    def count(self, cell: Cell) -> int:
        return sum(row.count(cell) for row in self._cells)

    @classmethod
    def from_lines(cls, lines: Sequence[str], mapping: Optional[Dict[str, Cell]] = None) -> "MazeGrid":
        """Create a MazeGrid from an ASCII representation.

        Args:
            lines: Each string is a row, top to bottom. All rows must have the
                   same length.
            mapping: Optional mapping of characters to Cell members.
                     Defaults: '#' -> WALL, '.' -> FLOOR, 'o' -> ITEM, '@' -> AGENT.
                     Unknown characters become WALL.

        Returns:
            MazeGrid instance initialized with the given layout.
        """
        if not lines:
            raise ValueError("lines must not be empty")
        width = len(lines[0])
        if width == 0:
            raise ValueError("line width must be positive")
        for i, row in enumerate(lines):
            if len(row) != width:
                raise ValueError(f"All rows must have equal width; row 0 has {width}, row {i} has {len(row)}")

        mapping = mapping or DEFAULT_CHAR_MAPPING

        grid = cls(width, len(lines), default_cell=Cell.WALL)
        for y, row in enumerate(lines):
            for x, ch in enumerate(row):
                grid.set(x, y, mapping.get(ch, Cell.WALL))
        return grid

    def to_lines(self, reverse_mapping: Optional[Dict[Cell, str]] = None) -> List[str]:
        """Convert the grid to an ASCII representation (for debugging/testing)."""
        reverse_mapping = reverse_mapping or {cell: ch for ch, cell in DEFAULT_CHAR_MAPPING.items()}
        return [
            "".join(reverse_mapping.get(cell, "?") for cell in row)
            for row in self._cells
        ]

    def __repr__(self) -> str:
        return f"MazeGrid(width={self._w}, height={self._h})"
