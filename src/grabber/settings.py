from __future__ import annotations

import dataclasses
import logging
import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, Mapping, Optional, Set

logger = logging.getLogger(__name__)


# Event topics used for observer callbacks
TOPIC_WINDOW = "window"
TOPIC_AUDIO = "audio"
TOPIC_ALL = "all"

_WINDOW_FIELDS = ("tile_size", "margin", "status_height", "fullscreen")
_AUDIO_FIELDS = ("master_volume", "sfx_volume", "sfx_enabled")


def _as_bool(value: Any) -> bool:
    """Interpret common truthy/falsey values into a bool.

    Accepts: True/False, 1/0, "true"/"false", "yes"/"no", "on"/"off" (case-insensitive).
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return bool(value)
    if isinstance(value, str):
        v = value.strip().lower()
        if v in {"1", "true", "yes", "y", "on"}:
            return True
        if v in {"0", "false", "no", "n", "off"}:
            return False
        # Non-empty strings default to True to avoid silent misconfig.
        return True
    return bool(value)


def _as_seed(value: Any) -> Optional[int]:
    if value is None:
        return None
    if isinstance(value, str) and value.strip().lower() in {"", "none", "random"}:
        return None
    return int(value)


def _clamp(value: float, min_value: float, max_value: float) -> float:
    return max(min_value, min(max_value, value))


@dataclass
class Settings:
    """Presentation settings for the window, audio and RNG seed.

    Game rules (grid size, item count, item value) are fixed constants and are
    not part of the settings.

    Sources, lowest to highest precedence:
    - dataclass defaults
    - a TOML file (env GRABBER_SETTINGS_FILE, or configs/settings.toml if present)
    - environment variables (prefix: GRABBER_)

    Observers can subscribe to topics (window, audio, or all) to be notified when settings change.
    """

    # Window/display
    tile_size: int = 32
    margin: int = 0
    status_height: int = 40
    fullscreen: bool = False

    # Audio volumes (0.0 - 1.0)
    master_volume: float = 1.0
    sfx_volume: float = 0.8
    sfx_enabled: bool = True

    # Fixed seed for reproducible item/agent placement; None draws a fresh one.
    seed: Optional[int] = None

    # Internal: observer callbacks per topic
    _observers: Dict[str, Set[Callable[["Settings"], None]]] = field(
        default_factory=lambda: {TOPIC_WINDOW: set(), TOPIC_AUDIO: set(), TOPIC_ALL: set()},
        init=False,
        repr=False,
    )

    @property
    def effective_sfx_volume(self) -> float:
        return _clamp(self.master_volume, 0.0, 1.0) * _clamp(self.sfx_volume, 0.0, 1.0)

    def validate(self) -> None:
        """Validate and normalize settings to safe values."""
        if int(self.tile_size) < 4:
            logger.warning("Invalid tile size %s; resetting to 32", self.tile_size)
            self.tile_size = 32
        self.tile_size = int(self.tile_size)
        self.margin = int(_clamp(int(self.margin), 0, self.tile_size // 4))
        if int(self.status_height) < 0:
            logger.warning("Invalid status bar height %s; resetting to 40", self.status_height)
            self.status_height = 40
        self.status_height = int(self.status_height)
        self.master_volume = _clamp(float(self.master_volume), 0.0, 1.0)
        self.sfx_volume = _clamp(float(self.sfx_volume), 0.0, 1.0)
        self.fullscreen = _as_bool(self.fullscreen)
        self.sfx_enabled = _as_bool(self.sfx_enabled)
        self.seed = _as_seed(self.seed)

    def as_dict(self) -> Dict[str, Any]:
        return {
            "tile_size": self.tile_size,
            "margin": self.margin,
            "status_height": self.status_height,
            "fullscreen": self.fullscreen,
            "master_volume": self.master_volume,
            "sfx_volume": self.sfx_volume,
            "sfx_enabled": self.sfx_enabled,
            "seed": self.seed,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Settings":
        allowed = {f.name for f in dataclasses.fields(cls) if f.init}
        filtered = {k: v for k, v in data.items() if k in allowed}
        obj = cls(**filtered)
        obj.validate()
        return obj

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
        env = os.environ if env is None else env
        mapping = {
            "GRABBER_TILE_SIZE": ("tile_size", int),
            "GRABBER_MARGIN": ("margin", int),
            "GRABBER_STATUS_HEIGHT": ("status_height", int),
            "GRABBER_FULLSCREEN": ("fullscreen", _as_bool),
            "GRABBER_MASTER_VOLUME": ("master_volume", float),
            "GRABBER_SFX_VOLUME": ("sfx_volume", float),
            "GRABBER_SFX_ENABLED": ("sfx_enabled", _as_bool),
            "GRABBER_SEED": ("seed", _as_seed),
        }
        out: Dict[str, Any] = {}
        for env_key, (field_name, caster) in mapping.items():
            if env_key in env and env[env_key] != "":
                try:
                    out[field_name] = caster(env[env_key])
                except ValueError as exc:
                    logger.error("Invalid env for %s=%r: %s", env_key, env[env_key], exc)
        return out

    @classmethod
    def from_toml_file(cls, path: Path) -> Dict[str, Any]:
        if not path.exists():
            logger.debug("Settings file not found: %s", path)
            return {}
        try:
            with path.open("rb") as f:
                doc = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as exc:
            logger.error("Failed to read settings TOML %s: %s", path, exc)
            return {}
        # Flatten [window]/[audio]/[game] sections and top-level keys
        flat: Dict[str, Any] = {}
        for section in ("window", "audio", "game"):
            if isinstance(doc.get(section), dict):
                flat.update(doc[section])
        for k, v in doc.items():
            if isinstance(v, dict):
                continue
            flat[k] = v
        return flat

    @classmethod
    def discover_config_path(cls, env: Optional[Mapping[str, str]] = None) -> Optional[Path]:
        env = os.environ if env is None else env
        env_path = env.get("GRABBER_SETTINGS_FILE")
        if env_path:
            return Path(env_path).expanduser().resolve()
        default_path = Path.cwd() / "configs" / "settings.toml"
        if default_path.exists():
            return default_path
        return None

    @classmethod
    def from_sources(
        cls,
        *,
        env: Optional[Mapping[str, str]] = None,
        file_path: Optional[Path | str] = None,
    ) -> "Settings":
        # Order of precedence (lowest to highest): defaults < file < env
        data: Dict[str, Any] = {}
        if file_path is not None:
            chosen_path: Optional[Path] = Path(file_path).expanduser().resolve()
        else:
            chosen_path = cls.discover_config_path(env)
        if chosen_path is not None:
            data.update(cls.from_toml_file(chosen_path))
        data.update(cls.from_env(env))
        return cls.from_dict(data)

    def subscribe(self, topic: str, callback: Callable[["Settings"], None]) -> None:
        if topic not in self._observers:
            raise ValueError(f"Unknown settings topic: {topic}")
        self._observers[topic].add(callback)

    def unsubscribe(self, topic: str, callback: Callable[["Settings"], None]) -> None:
        if topic in self._observers:
            self._observers[topic].discard(callback)

    def _notify(self, topics: Iterable[str]) -> None:
        notified: Set[Callable[["Settings"], None]] = set()
        for topic in set(topics) | {TOPIC_ALL}:
            for cb in self._observers.get(topic, ()):
                if cb in notified:
                    continue
                try:
                    cb(self)
                except Exception:
                    logger.exception("Settings observer failed for topic '%s'", topic)
                notified.add(cb)

    def update(self, **changes: Any) -> None:
        """Update settings in place, validate, and notify relevant topics.

        Only provided fields are changed. Observers are notified for the minimal set of topics.
        """
        if not changes:
            return

        before = self.as_dict()
        for k, v in changes.items():
            if k not in before:
                raise AttributeError(f"Unknown settings field: {k}")
            setattr(self, k, v)
        self.validate()

        topics: Set[str] = set()
        if any(before[k] != getattr(self, k) for k in _WINDOW_FIELDS):
            topics.add(TOPIC_WINDOW)
        if any(before[k] != getattr(self, k) for k in _AUDIO_FIELDS):
            topics.add(TOPIC_AUDIO)
        if topics:
            self._notify(topics)

    def apply_to_audio(self, audio_system: Any) -> None:
        """Push audio settings to an SFX manager.

        Expected interface: an ``enabled`` attribute and set_sfx_volume(float).
        """
        if hasattr(audio_system, "set_sfx_volume"):
            audio_system.set_sfx_volume(float(self.effective_sfx_volume))
        if hasattr(audio_system, "enabled"):
            audio_system.enabled = bool(self.sfx_enabled)


__all__ = [
    "Settings",
    "TOPIC_WINDOW",
    "TOPIC_AUDIO",
    "TOPIC_ALL",
]
