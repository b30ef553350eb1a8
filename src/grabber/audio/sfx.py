import logging
import os
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Union

from ..constants import SOUND_COLLECT, SOUND_WIN

logger = logging.getLogger(__name__)

# Paths with this prefix are arcade's bundled assets, resolved by arcade itself.
RESOURCE_PREFIX = ":resources:"


class SFXEvent(str, Enum):
    """Sound cues the game fires."""

    COLLECT = SOUND_COLLECT
    WIN = SOUND_WIN

    def __str__(self) -> str:
        return self.value


@dataclass
class _SoundWrapper:
    """A thin wrapper around a backend sound object to normalize interface."""

    obj: Any

    def play(self, volume: float) -> None:
        play = getattr(self.obj, "play", None)
        if not callable(play):
            logger.warning("SFX: sound object %r has no play()", self.obj)
            return
        try:
            play(volume=volume)
        except TypeError:
            play(volume)


class SFXManager:
    """Loads and plays sound effects; the AudioPort used by the game.

    Key guarantees:
    - Graceful degradation: if the backend or an asset is missing, nothing
      escapes the public methods. play() returns False when nothing played.
    - Cues are plain names (see SFXEvent); the mapping from cue to asset comes
      from config and can be changed without touching game code.
    """

    def __init__(
        self,
        cues: Optional[Mapping[str, str]] = None,
        *,
        enabled: bool = True,
        volume: float = 1.0,
        backend: Optional[Any] = None,
        auto_load: bool = True,
    ) -> None:
        """Create a new SFX manager.

        Args:
            cues: Optional mapping of cue name -> sound path.
            enabled: Whether playback is enabled.
            volume: SFX volume [0.0, 1.0].
            backend: Optional backend module (e.g., arcade). If None, the
                     manager imports arcade when first needed. Tests inject a
                     fake backend.
            auto_load: If True, loads the cues immediately.
        """
        self._enabled = bool(enabled)
        self._volume = self._clamp_volume(volume)
        self._backend = backend
        self._cues: Dict[str, str] = dict(cues or {})
        self._sounds: Dict[str, _SoundWrapper] = {}

        if auto_load and self._cues:
            self.reload()

    @property
    def enabled(self) -> bool:
        return self._enabled

    @enabled.setter
    def enabled(self, value: bool) -> None:
        self._enabled = bool(value)

    @property
    def volume(self) -> float:
        return self._volume

    @volume.setter
    def volume(self, value: float) -> None:
        self._volume = self._clamp_volume(value)

    def set_sfx_volume(self, value: float) -> None:
        self.volume = value

    def reload(self, cues: Optional[Mapping[str, str]] = None) -> None:
        """(Re)load sounds for every configured cue.

        Assets that cannot be loaded are logged and left unregistered.
        """
        if cues is not None:
            self._cues = dict(cues)
        self._sounds.clear()
        for key, path in self._cues.items():
            self.register_path(key, path)

    def play(self, event: Union[SFXEvent, str]) -> bool:
        """Attempt to play the sound for the cue. Returns True on success.

        This never raises; it logs and returns False on failure or when disabled.
        """
        key = str(event)
        if not self._enabled:
            logger.debug("SFX: Playback disabled (event=%s)", key)
            return False
        snd = self._sounds.get(key)
        if snd is None:
            logger.debug("SFX: No sound registered for event '%s'", key)
            return False
        try:
            snd.play(self._volume)
            return True
        except Exception:  # noqa: BLE001
            logger.exception("SFX: Unexpected error while playing '%s'", key)
            return False

    def play_sound(self, name: str) -> None:
        """AudioPort entry point: fire and forget."""
        self.play(name)

    def register_sound(self, event: Union[SFXEvent, str], sound_obj: Any) -> None:
        """Register a pre-constructed backend sound object for a cue."""
        key = str(event)
        self._sounds[key] = _SoundWrapper(sound_obj)
        logger.debug("SFX: Registered sound object for '%s'", key)

    def register_path(self, event: Union[SFXEvent, str], path: str) -> bool:
        """Register a path and try to load an audio object via the backend.

        Returns True if the sound was loaded. A missing backend or file is
        tolerated; the cue will simply not play.
        """
        key = str(event)
        wrapper = self._create_sound_wrapper(path)
        if wrapper is None:
            logger.info("SFX: Could not load sound for '%s' from '%s'", key, path)
            return False
        self._sounds[key] = wrapper
        logger.debug("SFX: Registered sound path for '%s' -> %s", key, path)
        return True

    def _create_sound_wrapper(self, path: str) -> Optional[_SoundWrapper]:
        resolved = path
        if not resolved.startswith(RESOURCE_PREFIX):
            resolved = os.path.abspath(os.path.expanduser(resolved))
            if not os.path.exists(resolved):
                logger.info("SFX: Asset not found at %s", resolved)
                return None
        backend = self._ensure_backend()
        if backend is None:
            logger.info("SFX: No audio backend available; cannot load %s", resolved)
            return None
        try:
            sound = backend.Sound(resolved, streaming=False)
        except Exception:  # noqa: BLE001
            logger.exception("SFX: Backend failed to load %s", resolved)
            return None
        return _SoundWrapper(sound)

    def _ensure_backend(self) -> Optional[Any]:
        if self._backend is not None:
            return self._backend
        try:
            import importlib

            self._backend = importlib.import_module("arcade")
        except ImportError:
            self._backend = None
            logger.warning("SFX: arcade is not installed; running in silent mode")
        return self._backend

    @staticmethod
    def _clamp_volume(v: float) -> float:
        try:
            fv = float(v)
        except (TypeError, ValueError):
            return 1.0
        if fv != fv:  # NaN
            return 0.0
        return max(0.0, min(1.0, fv))
