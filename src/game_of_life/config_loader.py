"""Validation of text board configurations.

A configuration is a plain text file of ``height`` lines, each exactly
``width`` characters long, drawn from ``#`` (alive) and ``.`` (dead). The
final line may omit its terminator; ``\\n`` and ``\\r\\n`` are both accepted.
"""

from __future__ import annotations

from pathlib import Path
from typing import NamedTuple

from loguru import logger

from .errors import (
    BoardTooLargeError,
    ConfigFileNotFoundError,
    ConfigFileUnreadableError,
    GameOfLifeError,
    InconsistentRowLengthError,
    InvalidCharacterError,
)

ALIVE_SYMBOL: str = "#"
DEAD_SYMBOL: str = "."
CELL_SYMBOLS: frozenset[str] = frozenset((ALIVE_SYMBOL, DEAD_SYMBOL))

DEFAULT_MAX_DIMENSION: int = 4096


class BoardShape(NamedTuple):
    height: int
    width: int


def read_source(path: str | Path) -> str:
    """Read the whole configuration file, mapping OS failures to config errors."""
    path = Path(path)
    try:
        with path.open("rb") as f:
            raw = f.read()
    except FileNotFoundError:
        raise ConfigFileNotFoundError(path) from None
    except OSError as e:
        raise ConfigFileUnreadableError(path, e.strerror or str(e)) from e
    # Undecodable bytes become U+FFFD and are reported as invalid characters.
    return raw.decode("ascii", errors="replace")


def scan_dimensions(text: str) -> BoardShape:
    """Single validating pass over configuration text.

    Raises on the first invalid character or the first row whose length
    differs from the first row. A trailing terminator does not add a row.
    """
    expected: int | None = None
    rows = 0
    column = 0
    i = 0
    n = len(text)

    while i < n:
        char = text[i]
        if char == "\r" and i + 1 < n and text[i + 1] == "\n":
            i += 1
            char = "\n"

        if char == "\n":
            expected = _check_row(rows + 1, column, expected)
            rows += 1
            column = 0
        elif char in CELL_SYMBOLS:
            column += 1
        else:
            raise InvalidCharacterError(char, rows + 1, column + 1)
        i += 1

    # Final row without a terminator must still match the first row.
    if column:
        expected = _check_row(rows + 1, column, expected)
        rows += 1

    return BoardShape(rows, expected or 0)


def _check_row(row: int, length: int, expected: int | None) -> int:
    if expected is None:
        return length
    if length != expected:
        raise InconsistentRowLengthError(row, expected, length)
    return expected


def load_config(
    path: str | Path, max_dimension: int = DEFAULT_MAX_DIMENSION
) -> BoardShape:
    """Validate the configuration file at ``path`` and return its dimensions."""
    try:
        shape = scan_dimensions(read_source(path))
        if shape.height > max_dimension or shape.width > max_dimension:
            raise BoardTooLargeError(shape.height, shape.width, max_dimension)
    except GameOfLifeError as e:
        logger.error(f"Rejected configuration {path}: {e}")
        raise

    logger.info(f"Validated {path}: rows={shape.height}, columns={shape.width}")
    return shape
