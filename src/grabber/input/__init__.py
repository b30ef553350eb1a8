from .actions import DIRECTIONS, InputAction, direction_for
from .mapping import InputMapper

__all__ = ["DIRECTIONS", "InputAction", "InputMapper", "direction_for"]
