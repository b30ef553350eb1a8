"""Fixed game rules and presentation constants."""
from __future__ import annotations

from typing import Tuple

Color = Tuple[int, int, int]

# Grid
WIDTH: int = 20
HEIGHT: int = 20

# Items
ITEM_MAX: int = 15  # number of fish placed; collecting all of them wins
ITEM_VALUE: int = 1  # score per fish

# Rejection sampling budget before placement falls back to a full scan
MAX_PLACEMENT_ATTEMPTS: int = 1000

# Colors (RGB)
COLOR_FLOOR: Color = (75, 0, 130)  # indigo
COLOR_WALL: Color = (0, 0, 0)
COLOR_ITEM_GLYPH: Color = (192, 192, 192)
COLOR_AGENT_GLYPH: Color = (255, 192, 64)

# Glyphs
ITEM_GLYPH: str = "⤕"
AGENT_GLYPH: str = "ᗢ"

# Audio cue names
SOUND_COLLECT: str = "fx_coin7"
SOUND_WIN: str = "fx_tada"

# Status line
STATUS_INTRO: str = "Use arrows/WASD to grab fish"
STATUS_SCORE: str = "Score = {score}"
STATUS_WIN: str = "You win with {score} fish!"
