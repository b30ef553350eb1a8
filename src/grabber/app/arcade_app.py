from __future__ import annotations

import logging
from typing import Dict, Optional, Tuple

import arcade

from ..game import GrabberGame
from ..input import InputMapper, direction_for
from ..render.board import BoardBuffer
from ..settings import TOPIC_WINDOW, Settings
from .wiring import build_game

logger = logging.getLogger(__name__)

TITLE = "Fish Grabber"
BACKGROUND_COLOR: Tuple[int, int, int] = (24, 24, 32)
STATUS_COLOR: Tuple[int, int, int] = (235, 235, 235)
STATUS_FONT_SIZE = 16

_ARROW_KEYS = ("UP", "DOWN", "LEFT", "RIGHT")


class MazeWindow(arcade.Window):
    """Arcade window that paints a BoardBuffer and feeds key presses to the game.

    Board row 0 is drawn at the top; the status line sits below the board.
    When the window is larger than the board (fullscreen), the board is
    centred in the space above the status line.
    """

    def __init__(
        self,
        game: GrabberGame,
        board: BoardBuffer,
        settings: Settings,
        mapper: Optional[InputMapper] = None,
    ) -> None:
        width, height = self._window_size(board, settings)
        super().__init__(width=width, height=height, title=TITLE, fullscreen=settings.fullscreen)
        self.background_color = BACKGROUND_COLOR
        self.game = game
        self.board = board
        self.settings = settings

        self.mapper = mapper or InputMapper.default()
        for name in _ARROW_KEYS:
            self.mapper.set_alias(getattr(arcade.key, name), name)

        self._status = arcade.Text(
            "",
            0,
            0,
            STATUS_COLOR,
            STATUS_FONT_SIZE,
            anchor_x="center",
            anchor_y="center",
        )
        self._glyphs: Dict[Tuple[int, int], arcade.Text] = {}
        self._apply_layout()
        settings.subscribe(TOPIC_WINDOW, self.on_window_settings)
        logger.debug("Initialized MazeWindow %dx%d (tile=%d)", self.width, self.height, self.tile_size)

    @staticmethod
    def _window_size(board: BoardBuffer, settings: Settings) -> Tuple[int, int]:
        return (
            board.width * settings.tile_size,
            board.height * settings.tile_size + settings.status_height,
        )

    def _apply_layout(self) -> None:
        self.tile_size = self.settings.tile_size
        self.margin = self.settings.margin
        self.status_height = self.settings.status_height
        board_w = self.board.width * self.tile_size
        board_h = self.board.height * self.tile_size
        self.origin_x = max(0, (self.width - board_w) / 2)
        self.origin_y = self.status_height + max(0, (self.height - self.status_height - board_h) / 2)
        self._status.x = self.width / 2
        self._status.y = self.status_height / 2
        self._glyphs.clear()

    def on_window_settings(self, settings: Settings) -> None:
        """Follow tile size, margin, status bar and fullscreen changes."""
        if settings.fullscreen != self.fullscreen:
            self.set_fullscreen(settings.fullscreen)
        elif not settings.fullscreen:
            self.set_size(*self._window_size(self.board, settings))
        self._apply_layout()
        logger.debug("Window layout updated: %dx%d tile=%d", self.width, self.height, self.tile_size)

    def on_resize(self, width: int, height: int):
        result = super().on_resize(width, height)
        if getattr(self, "_status", None) is not None:
            self._apply_layout()
        return result

    def _cell_center(self, x: int, y: int) -> Tuple[float, float]:
        cx = self.origin_x + x * self.tile_size + self.tile_size / 2
        cy = self.origin_y + (self.board.height - 1 - y) * self.tile_size + self.tile_size / 2
        return cx, cy

    def _glyph_text(self, x: int, y: int) -> arcade.Text:
        text = self._glyphs.get((x, y))
        if text is None:
            cx, cy = self._cell_center(x, y)
            text = arcade.Text(
                "",
                cx,
                cy,
                STATUS_COLOR,
                int(self.tile_size * 0.6),
                anchor_x="center",
                anchor_y="center",
            )
            self._glyphs[(x, y)] = text
        return text

    def on_draw(self) -> None:
        self.clear()
        half = self.tile_size / 2 - self.margin
        for y in range(self.board.height):
            for x in range(self.board.width):
                cx, cy = self._cell_center(x, y)
                arcade.draw_lrbt_rectangle_filled(
                    cx - half, cx + half, cy - half, cy + half, self.board.cell(x, y).color
                )
        for x, y, bead in self.board.glyph_cells():
            text = self._glyph_text(x, y)
            text.text = bead.glyph
            text.color = bead.glyph_color
            text.draw()
        self._status.text = self.board.status_text
        self._status.draw()

    def on_key_press(self, symbol: int, modifiers: int) -> None:
        direction = direction_for(self.mapper.translate_key(symbol))
        if direction is None:
            return
        self.game.handle_direction(*direction)


def run(settings: Optional[Settings] = None) -> None:
    """Launch the interactive window."""
    settings = settings or Settings.from_sources()
    game, board, _ = build_game(settings)
    MazeWindow(game, board, settings)
    logger.info("Starting %s", TITLE)
    arcade.run()
