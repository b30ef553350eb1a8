from __future__ import annotations

from typing import Optional, Protocol, Tuple

Color = Tuple[int, int, int]


class RandomSource(Protocol):
    """Uniform integer source used for maze placement."""

    def random_int(self, n: int) -> int:
        """Return an integer in [0, n)."""
        ...


class RenderPort(Protocol):
    """Drawing capabilities the game needs from its host.

    Implementations paint a W x H board of beads addressed by (x, y), with
    (0, 0) at the top-left. Each bead has a fill color and an optional
    overlay glyph with its own color.
    """

    def set_cell_color(self, x: int, y: int, color: Color) -> None: ...
    def set_glyph(self, x: int, y: int, glyph: Optional[str]) -> None: ...
    def set_glyph_color(self, x: int, y: int, color: Color) -> None: ...
    def set_status_text(self, text: str) -> None: ...


class AudioPort(Protocol):
    """Fire-and-forget sound cue playback."""

    def play_sound(self, name: str) -> None: ...


__all__ = ["AudioPort", "Color", "RandomSource", "RenderPort"]
