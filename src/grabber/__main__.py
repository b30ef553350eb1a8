from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from . import __version__
from .errors import GrabberError
from .logging_config import configure_logging
from .settings import Settings

logger = logging.getLogger("grabber")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="fish-grabber",
        description="Fish Grabber - collect every fish in the maze",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--settings",
        dest="settings_path",
        type=Path,
        default=None,
        help="Path to a settings TOML file (overrides configs/settings.toml).",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for item and agent placement")
    parser.add_argument("--log-level", default=None, help="Logging level (DEBUG, INFO, WARNING, ...)")
    return parser.parse_args(argv)


def load_settings(args: argparse.Namespace) -> Settings:
    settings = Settings.from_sources(file_path=args.settings_path)
    if args.seed is not None:
        settings.update(seed=args.seed)
    return settings


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    configure_logging(level_name=args.log_level)
    try:
        settings = load_settings(args)
    except (TypeError, ValueError) as exc:
        logger.error("Invalid settings: %s", exc)
        return 1
    logger.info("Starting Fish Grabber %s (seed=%s)", __version__, settings.seed)

    try:
        from .app.arcade_app import run

        run(settings)
        return 0
    except GrabberError as exc:
        logger.error("Game setup failed: %s", exc)
        return 1
    except Exception as exc:
        logger.exception("Unhandled exception in game loop: %s", exc)
        return 1


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
