from __future__ import annotations

import logging
from typing import Optional, Tuple

from ..audio.sfx import SFXManager
from ..config.loader import load_sound_config
from ..core.rng import RNG
from ..events import EventBus
from ..game import GrabberGame
from ..presenter import BoardPresenter
from ..render.board import BoardBuffer
from ..settings import TOPIC_AUDIO, Settings

logger = logging.getLogger(__name__)


def build_game(
    settings: Settings,
    sfx: Optional[SFXManager] = None,
) -> Tuple[GrabberGame, BoardBuffer, SFXManager]:
    """Wire game, board, presenter and audio together and initialize the game.

    Needs no display, so headless runs and tests can drive the returned game
    and read the board directly.
    """
    bus = EventBus()
    game = GrabberGame(rng=RNG(settings.seed), bus=bus)
    board = BoardBuffer(game.width, game.height)
    if sfx is None:
        sound_config = load_sound_config()
        sfx = SFXManager(sound_config.cues)
    settings.apply_to_audio(sfx)
    settings.subscribe(TOPIC_AUDIO, lambda s: s.apply_to_audio(sfx))
    BoardPresenter(board, sfx).attach(bus)
    game.initialize()
    logger.debug("Game wired with seed=%s", settings.seed)
    return game, board, sfx
