from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import List, Optional

from ..constants import COLOR_FLOOR, COLOR_WALL
from ..ports import Color

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Bead:
    """Visual state of one board cell."""

    color: Color = COLOR_FLOOR
    glyph: Optional[str] = None
    glyph_color: Color = COLOR_WALL


class BoardBuffer:
    """In-memory RenderPort: remembers what each bead should look like.

    The arcade window paints from this buffer every frame; tests read it back
    directly.
    """

    def __init__(self, width: int, height: int, background: Color = COLOR_FLOOR) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("BoardBuffer dimensions must be positive")
        self.width = int(width)
        self.height = int(height)
        self._beads: List[List[Bead]] = [[Bead(color=background) for _ in range(self.width)] for _ in range(self.height)]
        self.status_text: str = ""

    def _check(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"Bead out of bounds: ({x}, {y}) for board {self.width}x{self.height}")

    def cell(self, x: int, y: int) -> Bead:
        self._check(x, y)
        return self._beads[y][x]

    # RenderPort
    def set_cell_color(self, x: int, y: int, color: Color) -> None:
        self._check(x, y)
        self._beads[y][x] = replace(self._beads[y][x], color=tuple(color))

    def set_glyph(self, x: int, y: int, glyph: Optional[str]) -> None:
        self._check(x, y)
        self._beads[y][x] = replace(self._beads[y][x], glyph=glyph or None)

    def set_glyph_color(self, x: int, y: int, color: Color) -> None:
        self._check(x, y)
        self._beads[y][x] = replace(self._beads[y][x], glyph_color=tuple(color))

    def set_status_text(self, text: str) -> None:
        self.status_text = str(text)
        logger.debug("Status: %s", self.status_text)

    def glyph_cells(self):
        """Yield (x, y, bead) for every bead currently showing a glyph."""
        for y, row in enumerate(self._beads):
            for x, bead in enumerate(row):
                if bead.glyph:
                    yield x, y, bead
