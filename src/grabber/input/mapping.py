from __future__ import annotations

import logging
from typing import Dict, Optional

from .actions import InputAction

logger = logging.getLogger(__name__)


class InputMapper:
    """Rebindable mapping from physical keys to logical actions.

    Keys are strings normalized to uppercase, so bindings are
    case-insensitive. Backends that report integer key codes register aliases
    from those codes to canonical names.

    Example usage:
        mapper = InputMapper.default()
        action = mapper.translate_key("w")   # -> InputAction.MOVE_UP
        action = mapper.translate_key(87)    # -> InputAction.MOVE_UP ('W')
    """

    def __init__(self, bindings: Optional[Dict[str, InputAction]] = None) -> None:
        # Internal storage uses canonical uppercase string keys
        self._bindings: Dict[str, InputAction] = {}
        if bindings:
            for key, action in bindings.items():
                self.bind(key, action)

        # Backend specific keys (strings or ints) -> canonical key strings.
        self._aliases: Dict[str, str] = {}

    @staticmethod
    def _normalize(key: str | int) -> Optional[str]:
        """Normalize a key into a canonical uppercase string.

        Ints are converted to their decimal string. Returns None for
        unsupported or empty inputs.
        """
        if key is None:
            return None
        if isinstance(key, bool):
            return None
        if isinstance(key, int):
            return str(key)
        if not isinstance(key, str):
            return None
        k = key.strip()
        if not k:
            return None
        return k.upper()

    def bind(self, key: str | int, action: InputAction) -> None:
        """Bind a single key to an action."""
        nk = self._normalize(key)
        if nk is None:
            logger.warning("Attempted to bind invalid key: %r", key)
            return
        self._bindings[nk] = action

    def unbind(self, key: str | int) -> None:
        nk = self._normalize(key)
        if nk is not None:
            self._bindings.pop(nk, None)

    def set_alias(self, physical: str | int, canonical_name: str) -> None:
        """Register an alias from a backend-specific key to a canonical name.

        Example: set_alias(65362, "UP") for pyglet's arrow-up code.
        """
        nk = self._normalize(physical)
        cn = self._normalize(canonical_name)
        if nk and cn:
            self._aliases[nk] = cn

    def translate_key(self, key: str | int) -> Optional[InputAction]:
        """Translate a physical key into a logical action or None."""
        nk = self._normalize(key)
        if nk is None:
            return None
        canonical = self._aliases.get(nk, nk)
        return self._bindings.get(canonical)

    @classmethod
    def default(cls) -> "InputMapper":
        """Create a mapper with arrow keys and WASD bound to movement.

        ASCII codes of both letter cases are aliased to the letter names so
        hosts that report raw character codes (87 and 119 for W) work too.
        """
        mapper = cls()

        mapper.bind("UP", InputAction.MOVE_UP)
        mapper.bind("DOWN", InputAction.MOVE_DOWN)
        mapper.bind("LEFT", InputAction.MOVE_LEFT)
        mapper.bind("RIGHT", InputAction.MOVE_RIGHT)

        mapper.bind("W", InputAction.MOVE_UP)
        mapper.bind("S", InputAction.MOVE_DOWN)
        mapper.bind("A", InputAction.MOVE_LEFT)
        mapper.bind("D", InputAction.MOVE_RIGHT)

        for letter in "WASD":
            mapper.set_alias(ord(letter), letter)
            mapper.set_alias(ord(letter.lower()), letter)

        return mapper


__all__ = ["InputMapper"]
