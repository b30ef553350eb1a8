from __future__ import annotations

import logging
from dataclasses import dataclass, field
from importlib.resources import files as resource_files
from typing import Dict, Optional

import yaml

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SoundConfig:
    cues: Dict[str, str] = field(default_factory=dict)


def load_sound_config(path: Optional[str] = None) -> SoundConfig:
    """Load the sound cue -> asset mapping from YAML.

    If path is None, loads the embedded default resource at
    grabber/config/sounds.yaml.
    """
    if path is None:
        data = resource_files("grabber.config").joinpath("sounds.yaml").read_text(encoding="utf-8")
        logger.debug("Loaded embedded sound config resource")
    else:
        with open(path, "r", encoding="utf-8") as f:
            data = f.read()
        logger.debug("Loaded sound config from path: %s", path)

    raw = yaml.safe_load(data) or {}
    if not isinstance(raw, dict):
        raise ValueError("Sound config must be a mapping at the top level")
    cues_raw = raw.get("cues") or {}
    if not isinstance(cues_raw, dict):
        raise ValueError("Sound config 'cues' must be a mapping of cue name to asset path")
    cues = {str(k): str(v) for k, v in cues_raw.items()}
    unknown = sorted(str(k) for k in raw if k != "cues")
    if unknown:
        # Volume lives in settings.toml ([audio] master_volume / sfx_volume).
        logger.warning("Ignoring unknown sound config keys: %s", unknown)
    logger.info("Sound cues: %s", sorted(cues))
    return SoundConfig(cues=cues)
