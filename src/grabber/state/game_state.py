from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Dict, Tuple

from ..constants import ITEM_MAX, ITEM_VALUE
from ..map.maze import MazeModel
from ..map.tiles import Cell

logger = logging.getLogger(__name__)

Point = Tuple[int, int]


class GamePhase(Enum):
    PLAYING = auto()
    WON = auto()


class MoveOutcome(Enum):
    """What a single move request did."""

    BLOCKED = auto()  # out of bounds, wall, or not a cardinal step
    MOVED = auto()  # plain floor step
    COLLECTED = auto()  # stepped on an item
    WON = auto()  # stepped on the last item


@dataclass(frozen=True)
class MoveResult:
    outcome: MoveOutcome
    previous: Point
    position: Point
    score: int
    items_collected: int
    phase: GamePhase

    @property
    def moved(self) -> bool:
        return self.outcome is not MoveOutcome.BLOCKED

    @property
    def won(self) -> bool:
        return self.phase is GamePhase.WON


class GameState:
    """Agent position, score and win status for one game session.

    All mutation goes through attempt_move, which only touches the maze and
    this object. Rendering and audio are the caller's business: the returned
    MoveResult says which side effects apply.
    """

    def __init__(
        self,
        maze: MazeModel,
        start: Point,
        item_max: int = ITEM_MAX,
        item_value: int = ITEM_VALUE,
    ) -> None:
        sx, sy = start
        if not maze.grid.is_walkable(sx, sy):
            raise ValueError(f"Start position {start} is not a walkable cell")
        if item_max <= 0:
            raise ValueError("item_max must be positive")
        self.maze = maze
        self.item_max = int(item_max)
        self.item_value = int(item_value)
        self._x, self._y = int(sx), int(sy)
        self.score: int = 0
        self.items_collected: int = 0
        self.phase: GamePhase = GamePhase.PLAYING
        logger.info("Initialized GameState with agent at (%d,%d), %d items to collect", sx, sy, item_max)

    @property
    def position(self) -> Point:
        return self._x, self._y

    @property
    def won(self) -> bool:
        return self.phase is GamePhase.WON

    def _result(self, outcome: MoveOutcome, previous: Point) -> MoveResult:
        return MoveResult(
            outcome=outcome,
            previous=previous,
            position=self.position,
            score=self.score,
            items_collected=self.items_collected,
            phase=self.phase,
        )

    def attempt_move(self, dx: int, dy: int) -> MoveResult:
        """Attempt to move the agent by (dx, dy).

        Blocked moves (off the grid, into a wall, or anything other than a
        single cardinal step or (0, 0)) leave the state untouched and are not
        errors. Stepping on an item turns it into floor and scores it, unless
        the game is already won.

        Args:
            dx: Horizontal delta; positive is right.
            dy: Vertical delta; positive is down.

        Returns:
            MoveResult describing the outcome and the resulting state.
        """
        previous = self.position
        if abs(dx) + abs(dy) > 1:
            logger.debug("Rejected non-cardinal move (%d, %d) from %s", dx, dy, previous)
            return self._result(MoveOutcome.BLOCKED, previous)

        nx = self._x + dx
        ny = self._y + dy
        cell = self.maze.grid.safe_get(nx, ny)
        if cell is None:
            logger.debug("Blocked move to (%d,%d): out of bounds", nx, ny)
            return self._result(MoveOutcome.BLOCKED, previous)
        if cell is Cell.WALL:
            logger.debug("Blocked move to (%d,%d): wall", nx, ny)
            return self._result(MoveOutcome.BLOCKED, previous)

        outcome = MoveOutcome.MOVED
        if cell is Cell.ITEM:
            self.maze.set_cell(nx, ny, Cell.FLOOR)
            if self.phase is GamePhase.PLAYING:
                self.score += self.item_value
                self.items_collected += 1
                if self.items_collected >= self.item_max:
                    self.phase = GamePhase.WON
                    outcome = MoveOutcome.WON
                    logger.info("All %d items collected; final score %d", self.item_max, self.score)
                else:
                    outcome = MoveOutcome.COLLECTED
                    logger.debug("Collected item at (%d,%d); score=%d", nx, ny, self.score)

        self.maze.set_cell(self._x, self._y, Cell.FLOOR)
        self.maze.set_cell(nx, ny, Cell.AGENT)
        self._x, self._y = nx, ny
        logger.debug("Agent moved from %s to %s", previous, self.position)
        return self._result(outcome, previous)

    def snapshot(self) -> Dict[str, Any]:
        return {
            "position": self.position,
            "score": self.score,
            "items_collected": self.items_collected,
            "item_max": self.item_max,
            "phase": self.phase.name,
        }

    def __repr__(self) -> str:
        return (
            f"GameState(position={self.position}, score={self.score}, "
            f"items_collected={self.items_collected}/{self.item_max}, phase={self.phase.name})"
        )
