"""Command line entry point: ``gol [-f <filename>]``."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Sequence

from loguru import logger

from .board import load_board
from .errors import GameOfLifeError, UsageError
from .log import configure_logging
from .settings import Settings, load_settings
from .simulation import run

USAGE = "Usage: gol [-f <filename>]"


def parse_config_path(argv: Sequence[str], settings: Settings) -> Path:
    """Resolve the configuration path from ``argv`` (without the program name)."""
    if not argv:
        print(f'-> Info: Using standard configuration file "{settings.default_config}"')
        return settings.default_config

    # Only the exact shape "-f <path>" is accepted; the path may start with a dash
    if len(argv) != 2 or argv[0] != "-f":
        raise UsageError(f"unexpected arguments: {' '.join(argv)}")
    path = Path(argv[1])
    print(f"-> Using configuration file: {path}")
    return path


def main(argv: Sequence[str] | None = None) -> int:
    argv = sys.argv[1:] if argv is None else argv

    try:
        settings = load_settings()
        configure_logging(settings.log_level, settings.log_file)
        path = parse_config_path(argv, settings)
        board = load_board(path, max_dimension=settings.max_dimension)
    except UsageError as e:
        logger.debug(f"Bad arguments: {e}")
        print(USAGE)
        return 1
    except GameOfLifeError as e:
        print(f"-> Error: {e}")
        return 1

    print(f"-> Info: Rows = {board.height}, Columns = {board.width}")
    try:
        run(board, interval=settings.interval, initial_delay=settings.initial_delay)
    except KeyboardInterrupt:
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
