import logging
import os
from typing import Optional


def configure_logging(default_level: int = logging.INFO, level_name: Optional[str] = None) -> None:
    """Configure root logger with a sane default format.

    An explicit level_name wins, then the GRABBER_LOG_LEVEL env var, then
    default_level.
    """
    level_name = level_name or os.getenv("GRABBER_LOG_LEVEL")
    level = default_level
    if level_name:
        named = logging.getLevelName(level_name.upper())
        if isinstance(named, int):
            level = named
    logging.basicConfig(
        level=level,
        format="[%(asctime)s] [%(levelname)s] %(name)s: %(message)s",
        force=True,
    )
