from __future__ import annotations

import logging
from typing import List, Sequence, Tuple

from ..constants import MAX_PLACEMENT_ATTEMPTS
from ..errors import PlacementError
from ..ports import RandomSource
from .grid import MazeGrid
from .tiles import Cell

logger = logging.getLogger(__name__)


class MazeModel:
    """Owns the maze grid and places things on random floor cells.

    Placement uses rejection sampling over the whole grid. After
    ``max_attempts`` misses it scans the grid for the remaining floor cells and
    picks one of those, so a crowded maze still yields a uniform choice and an
    exhausted one fails with PlacementError instead of spinning forever.
    """

    def __init__(self, grid: MazeGrid, rng: RandomSource, max_attempts: int = MAX_PLACEMENT_ATTEMPTS) -> None:
        if max_attempts < 0:
            raise ValueError("max_attempts must not be negative")
        self.grid = grid
        self._rng = rng
        self._max_attempts = int(max_attempts)

    @classmethod
    def from_layout(
        cls,
        lines: Sequence[str],
        rng: RandomSource,
        max_attempts: int = MAX_PLACEMENT_ATTEMPTS,
    ) -> "MazeModel":
        return cls(MazeGrid.from_lines(lines), rng, max_attempts=max_attempts)

    @property
    def width(self) -> int:
        return self.grid.width

    @property
    def height(self) -> int:
        return self.grid.height

    def cell_at(self, x: int, y: int) -> Cell:
        """Bounds-checked lookup; raises IndexError when out of range."""
        return self.grid.get(x, y)

    def set_cell(self, x: int, y: int, cell: Cell) -> None:
        """Bounds-checked mutation; raises IndexError when out of range."""
        self.grid.set(x, y, cell)

    def floor_count(self) -> int:
        return self.grid.count(Cell.FLOOR)

    def place_random(self, cell: Cell) -> Tuple[int, int]:
        """Put ``cell`` on a random FLOOR cell and return its (x, y).

        Raises:
            PlacementError: if no FLOOR cell remains.
        """
        for _ in range(self._max_attempts):
            x = self._rng.random_int(self.grid.width)
            y = self._rng.random_int(self.grid.height)
            if self.grid.get(x, y) is Cell.FLOOR:
                self.grid.set(x, y, cell)
                logger.debug("Placed %s at (%d,%d)", cell.name, x, y)
                return (x, y)

        free: List[Tuple[int, int]] = list(self.grid.coords_of(Cell.FLOOR))
        if not free:
            raise PlacementError(f"No floor cell left to place {cell.name}")
        logger.warning(
            "Sampling missed %d times placing %s; choosing among %d remaining floor cells",
            self._max_attempts,
            cell.name,
            len(free),
        )
        x, y = free[self._rng.random_int(len(free))]
        self.grid.set(x, y, cell)
        return (x, y)

    def __repr__(self) -> str:
        return f"MazeModel(grid={self.grid!r}, floor={self.floor_count()})"
