"""loguru sink setup."""

from __future__ import annotations

import sys
from pathlib import Path

from loguru import logger

from .errors import SettingsError


def configure_logging(level: str = "WARNING", log_file: Path | None = None) -> None:
    logger.remove()  # Remove default handler
    logger.add(sys.stderr, level=level)
    if log_file is not None:
        # loguru opens the file straight away
        try:
            logger.add(log_file, rotation="10 MB", retention="30 days", level="DEBUG")
        except OSError as e:
            raise SettingsError(f"Could not open log file {log_file}: {e}") from e
