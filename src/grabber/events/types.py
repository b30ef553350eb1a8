"""Event channel names published by GrabberGame.

Payloads (keyword arguments):
    board_reset:    maze, position, status
    item_collected: score, items_collected, position
    victory:        score, items_collected, position
    marker_moved:   previous, position
"""

BOARD_RESET = "board_reset"
ITEM_COLLECTED = "item_collected"
VICTORY = "victory"
MARKER_MOVED = "marker_moved"
