import pytest

from grabber import GameNotInitializedError, GrabberGame, MoveOutcome, PlacementError
from grabber.constants import (
    AGENT_GLYPH,
    COLOR_AGENT_GLYPH,
    COLOR_FLOOR,
    COLOR_WALL,
    ITEM_GLYPH,
    ITEM_MAX,
    ITEM_VALUE,
    STATUS_INTRO,
)
from grabber.core.rng import RNG
from grabber.events import BOARD_RESET, ITEM_COLLECTED, MARKER_MOVED, VICTORY, EventBus
from grabber.map.grid import MazeGrid
from grabber.map.layouts import DEFAULT_LAYOUT
from grabber.map.tiles import Cell
from grabber.presenter import BoardPresenter
from grabber.render.board import BoardBuffer

# 16 floor cells in one corridor: 15 fish plus the grabber fill it exactly.
CORRIDOR = [
    "##################",
    "#................#",
    "##################",
]


class RecordingAudio:
    def __init__(self):
        self.played = []

    def play_sound(self, name):
        self.played.append(name)


def make_game(layout=DEFAULT_LAYOUT, seed=7):
    bus = EventBus()
    game = GrabberGame(rng=RNG(seed=seed), bus=bus, layout=layout)
    board = BoardBuffer(game.width, game.height)
    audio = RecordingAudio()
    BoardPresenter(board, audio).attach(bus)
    return game, board, audio


def sweep_corridor(game):
    """Walk to the left wall, then to the right wall."""
    results = [game.handle_direction(-1, 0) for _ in range(16)]
    results += [game.handle_direction(1, 0) for _ in range(16)]
    return results


def test_initialize_places_items_and_agent_on_floor():
    game, board, _ = make_game(seed=11)
    state = game.initialize()

    grid = game.maze.grid
    layout = MazeGrid.from_lines(DEFAULT_LAYOUT)
    assert grid.count(Cell.ITEM) == ITEM_MAX
    assert grid.count(Cell.AGENT) == 1
    assert grid.count(Cell.WALL) == layout.count(Cell.WALL)
    for x, y in grid.coords_of(Cell.ITEM):
        assert layout.get(x, y) is Cell.FLOOR
    ax, ay = state.position
    assert layout.get(ax, ay) is Cell.FLOOR
    assert grid.get(ax, ay) is Cell.AGENT
    assert (state.score, state.items_collected, state.won) == (0, 0, False)


def test_initialize_draws_the_board():
    game, board, audio = make_game(seed=5)
    state = game.initialize()
    grid = game.maze.grid

    assert board.status_text == STATUS_INTRO
    for y in range(grid.height):
        for x in range(grid.width):
            expected = COLOR_WALL if grid.get(x, y) is Cell.WALL else COLOR_FLOOR
            assert board.cell(x, y).color == expected
    for x, y in grid.coords_of(Cell.ITEM):
        assert board.cell(x, y).glyph == ITEM_GLYPH
    ax, ay = state.position
    assert board.cell(ax, ay).glyph == AGENT_GLYPH
    assert board.cell(ax, ay).glyph_color == COLOR_AGENT_GLYPH
    assert len(list(board.glyph_cells())) == ITEM_MAX + 1
    assert audio.played == []


def test_handle_direction_before_initialize_raises():
    game, _, _ = make_game()
    with pytest.raises(GameNotInitializedError):
        game.handle_direction(1, 0)


def test_collect_all_fish_scenario():
    game, board, audio = make_game(layout=CORRIDOR)
    game.initialize()
    statuses = []
    game.bus.subscribe(ITEM_COLLECTED, lambda **kw: statuses.append(board.status_text))

    sweep_corridor(game)

    state = game.state
    assert state.items_collected == ITEM_MAX
    assert state.score == ITEM_MAX * ITEM_VALUE
    assert state.won is True
    assert statuses == [f"Score = {n}" for n in range(1, ITEM_MAX)]
    assert board.status_text == "You win with 15 fish!"
    assert audio.played == ["fx_coin7"] * (ITEM_MAX - 1) + ["fx_tada"]


def test_first_collection_updates_status_and_plays_collect_cue():
    game, board, audio = make_game(layout=CORRIDOR)
    game.initialize()

    results = sweep_corridor(game)
    first = next(r for r in results if r.outcome is MoveOutcome.COLLECTED)

    assert first.score == 1
    assert first.items_collected == 1
    assert audio.played[0] == "fx_coin7"


def test_event_sequence_per_outcome():
    game, _, _ = make_game(layout=CORRIDOR)
    events = []
    for name in (BOARD_RESET, ITEM_COLLECTED, VICTORY, MARKER_MOVED):
        game.bus.subscribe(name, lambda _name=name, **kw: events.append(_name))
    game.initialize()
    assert events == [BOARD_RESET]

    events.clear()
    game.handle_direction(0, -1)  # wall above
    assert events == []

    events.clear()
    results = sweep_corridor(game)
    assert events.count(ITEM_COLLECTED) == ITEM_MAX - 1
    assert events.count(VICTORY) == 1
    moved = sum(1 for r in results if r.moved)
    assert events.count(MARKER_MOVED) == moved
    # victory is announced before the marker moves onto the last fish
    last_victory = events.index(VICTORY)
    assert events[last_victory + 1] == MARKER_MOVED


def test_marker_moves_on_board():
    game, board, _ = make_game(layout=CORRIDOR)
    state = game.initialize()
    start = state.position
    dx = -1 if start[0] > 1 else 1

    result = game.handle_direction(dx, 0)

    sx, sy = start
    nx, ny = result.position
    assert board.cell(sx, sy).glyph is None
    assert board.cell(sx, sy).color == COLOR_FLOOR
    assert board.cell(nx, ny).glyph == AGENT_GLYPH


def test_blocked_move_draws_nothing():
    game, board, audio = make_game(layout=CORRIDOR)
    game.initialize()
    calls = []
    game.bus.subscribe(MARKER_MOVED, lambda **kw: calls.append(kw))

    result = game.handle_direction(0, 1)  # wall below

    assert result.outcome is MoveOutcome.BLOCKED
    assert calls == []
    assert audio.played == []
    assert board.status_text == STATUS_INTRO


def test_random_walk_keeps_invariants():
    game, _, _ = make_game(seed=2024)
    game.initialize()
    state = game.state
    grid = game.maze.grid
    rng = RNG(seed=99)
    directions = [(0, 1), (0, -1), (1, 0), (-1, 0)]
    last_score = 0
    was_won = False

    for _ in range(3000):
        before = (state.score, state.items_collected)
        result = game.handle_direction(*directions[rng.random_int(4)])

        x, y = state.position
        assert grid.is_within(x, y)
        assert grid.get(x, y) is Cell.AGENT
        assert state.score >= last_score
        assert state.score == state.items_collected * ITEM_VALUE
        assert grid.count(Cell.ITEM) + state.items_collected == ITEM_MAX
        assert state.won == (state.items_collected == ITEM_MAX)
        if was_won:
            assert state.won
        if result.outcome is MoveOutcome.BLOCKED:
            assert (state.score, state.items_collected) == before
        was_won = state.won
        last_score = state.score


def test_layout_too_small_raises_placement_error():
    game, _, _ = make_game(layout=["#....#"])
    with pytest.raises(PlacementError):
        game.initialize()
    assert game.initialized is False
