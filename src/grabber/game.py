from __future__ import annotations

import logging
from typing import Optional, Sequence

from .constants import ITEM_MAX, ITEM_VALUE, MAX_PLACEMENT_ATTEMPTS, STATUS_INTRO
from .core.rng import RNG
from .errors import GameNotInitializedError
from .events import BOARD_RESET, ITEM_COLLECTED, MARKER_MOVED, VICTORY, EventBus
from .map.layouts import DEFAULT_LAYOUT
from .map.maze import MazeModel
from .map.tiles import Cell
from .ports import RandomSource
from .state.game_state import GameState, MoveOutcome, MoveResult

logger = logging.getLogger(__name__)


class GrabberGame:
    """Host-facing entry points: initialize() once, then handle_direction()
    for every directional input.

    State changes are announced on the event bus; see grabber.events.types for
    the channels and payloads.
    """

    def __init__(
        self,
        rng: Optional[RandomSource] = None,
        bus: Optional[EventBus] = None,
        layout: Sequence[str] = DEFAULT_LAYOUT,
        item_max: int = ITEM_MAX,
        item_value: int = ITEM_VALUE,
        max_placement_attempts: int = MAX_PLACEMENT_ATTEMPTS,
    ) -> None:
        self.rng: RandomSource = rng if rng is not None else RNG()
        self.bus = bus if bus is not None else EventBus()
        self._layout = list(layout)
        self._item_max = item_max
        self._item_value = item_value
        self._max_placement_attempts = max_placement_attempts
        self._maze: Optional[MazeModel] = None
        self._state: Optional[GameState] = None

    @property
    def width(self) -> int:
        return len(self._layout[0]) if self._layout else 0

    @property
    def height(self) -> int:
        return len(self._layout)

    @property
    def maze(self) -> MazeModel:
        if self._maze is None:
            raise GameNotInitializedError("Game has not been initialized")
        return self._maze

    @property
    def state(self) -> GameState:
        if self._state is None:
            raise GameNotInitializedError("Game has not been initialized")
        return self._state

    @property
    def initialized(self) -> bool:
        return self._state is not None

    def initialize(self) -> GameState:
        """Build the maze, scatter the items, drop the agent and announce the board.

        Raises:
            PlacementError: if the layout has fewer floor cells than items + 1.
        """
        maze = MazeModel.from_layout(self._layout, self.rng, max_attempts=self._max_placement_attempts)
        for _ in range(self._item_max):
            maze.place_random(Cell.ITEM)
        start = maze.place_random(Cell.AGENT)

        self._maze = maze
        self._state = GameState(maze, start, item_max=self._item_max, item_value=self._item_value)
        logger.info("Game initialized: %dx%d maze, %d items, agent at %s", maze.width, maze.height, self._item_max, start)
        self.bus.emit(BOARD_RESET, maze=maze, position=start, status=STATUS_INTRO)
        return self._state

    def handle_direction(self, dx: int, dy: int) -> MoveResult:
        """Apply one directional input and publish what changed."""
        result = self.state.attempt_move(dx, dy)
        if result.outcome is MoveOutcome.BLOCKED:
            return result

        payload = dict(score=result.score, items_collected=result.items_collected, position=result.position)
        if result.outcome is MoveOutcome.WON:
            self.bus.emit(VICTORY, **payload)
        elif result.outcome is MoveOutcome.COLLECTED:
            self.bus.emit(ITEM_COLLECTED, **payload)
        self.bus.emit(MARKER_MOVED, previous=result.previous, position=result.position)
        return result
