from __future__ import annotations

import logging
from typing import Tuple

from .constants import (
    AGENT_GLYPH,
    COLOR_AGENT_GLYPH,
    COLOR_FLOOR,
    COLOR_ITEM_GLYPH,
    COLOR_WALL,
    ITEM_GLYPH,
    SOUND_COLLECT,
    SOUND_WIN,
    STATUS_SCORE,
    STATUS_WIN,
)
from .events import BOARD_RESET, ITEM_COLLECTED, MARKER_MOVED, VICTORY, EventBus
from .map.maze import MazeModel
from .map.tiles import Cell
from .ports import AudioPort, RenderPort

logger = logging.getLogger(__name__)


class BoardPresenter:
    """Turns game events into drawing and sound calls on the host ports."""

    def __init__(self, render: RenderPort, audio: AudioPort) -> None:
        self.render = render
        self.audio = audio

    def attach(self, bus: EventBus) -> None:
        bus.subscribe(BOARD_RESET, self.on_board_reset)
        bus.subscribe(ITEM_COLLECTED, self.on_item_collected)
        bus.subscribe(VICTORY, self.on_victory)
        bus.subscribe(MARKER_MOVED, self.on_marker_moved)

    def on_board_reset(self, maze: MazeModel, position: Tuple[int, int], status: str) -> None:
        grid = maze.grid
        for y in range(grid.height):
            for x in range(grid.width):
                cell = grid.get(x, y)
                self.render.set_cell_color(x, y, COLOR_WALL if cell is Cell.WALL else COLOR_FLOOR)
                self.render.set_glyph(x, y, None)
                if cell is Cell.ITEM:
                    self.render.set_glyph(x, y, ITEM_GLYPH)
                    self.render.set_glyph_color(x, y, COLOR_ITEM_GLYPH)
        self._draw_agent(*position)
        self.render.set_status_text(status)
        logger.debug("Board drawn; agent at %s", position)

    def on_item_collected(self, score: int, **_: object) -> None:
        self.render.set_status_text(STATUS_SCORE.format(score=score))
        self.audio.play_sound(SOUND_COLLECT)

    def on_victory(self, score: int, **_: object) -> None:
        self.render.set_status_text(STATUS_WIN.format(score=score))
        self.audio.play_sound(SOUND_WIN)

    def on_marker_moved(self, previous: Tuple[int, int], position: Tuple[int, int]) -> None:
        px, py = previous
        self.render.set_cell_color(px, py, COLOR_FLOOR)
        self.render.set_glyph(px, py, None)
        self._draw_agent(*position)

    def _draw_agent(self, x: int, y: int) -> None:
        self.render.set_glyph(x, y, AGENT_GLYPH)
        self.render.set_glyph_color(x, y, COLOR_AGENT_GLYPH)
