"""Double-buffered Game of Life board backed by numpy."""

from __future__ import annotations

import hashlib
from pathlib import Path
from typing import Sequence

import numpy as np
from loguru import logger

from .config_loader import (
    ALIVE_SYMBOL,
    DEAD_SYMBOL,
    DEFAULT_MAX_DIMENSION,
    BoardShape,
    load_config,
    read_source,
)
from .errors import (
    BoardAllocationError,
    ConfigError,
    InconsistentRowLengthError,
    InvalidCharacterError,
)

ALIVE: int = 1
DEAD: int = 0


class Board:
    """A fixed ``height × width`` grid of cells.

    ``current`` holds the visible generation and is the only buffer read by
    neighbour counting and rendering. ``next`` is written by the update engine
    and copied into ``current`` once a whole generation has been computed.
    """

    def __init__(self, cells: np.ndarray):
        if cells.ndim != 2:
            raise ValueError(f"Board cells must be 2-dimensional, got {cells.ndim}")
        height, width = cells.shape
        try:
            self.current = (cells != DEAD).astype(np.uint8)
            self.next = self.current.copy()
        except MemoryError:
            raise BoardAllocationError(height, width) from None
        self.height = height
        self.width = width

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> "Board":
        """Build a board from lines of ``#`` and ``.`` characters."""
        height = len(rows)
        width = len(rows[0]) if rows else 0
        try:
            cells = np.zeros((height, width), dtype=np.uint8)
        except MemoryError:
            raise BoardAllocationError(height, width) from None

        for r, line in enumerate(rows):
            if len(line) != width:
                raise InconsistentRowLengthError(r + 1, width, len(line))
            for c, char in enumerate(line):
                if char == ALIVE_SYMBOL:
                    cells[r, c] = ALIVE
                elif char != DEAD_SYMBOL:
                    raise InvalidCharacterError(char, r + 1, c + 1)
        return cls(cells)

    @classmethod
    def from_file(cls, path: str | Path, shape: BoardShape) -> "Board":
        """Populate a board of ``shape`` from a second read of ``path``.

        The file is reopened rather than continued from the validation pass.
        """
        text = read_source(path)
        rows = [line.removesuffix("\r") for line in text.split("\n")]
        if rows and rows[-1] == "":
            rows.pop()

        if len(rows) != shape.height:
            raise ConfigError(
                f'Configuration file "{path}" changed while loading '
                f"(expected {shape.height} rows, found {len(rows)})!"
            )
        board = cls.from_rows(rows)
        if board.width != shape.width:
            raise InconsistentRowLengthError(1, shape.width, board.width)
        return board

    @property
    def shape(self) -> BoardShape:
        return BoardShape(self.height, self.width)

    def is_alive(self, row: int, column: int) -> bool:
        return bool(self.current[row, column] == ALIVE)

    def population(self) -> int:
        return int(self.current.sum())

    def to_rows(self) -> list[str]:
        return [
            "".join(ALIVE_SYMBOL if cell == ALIVE else DEAD_SYMBOL for cell in row)
            for row in self.current
        ]

    def fingerprint(self) -> str:
        """Return SHA-256 hex digest of the board as a flat string of 0s and 1s"""
        flat_str = "".join("1" if cell else "0" for cell in self.current.flat)
        return hashlib.sha256(flat_str.encode("utf-8")).hexdigest()

    def __str__(self) -> str:
        return "\n".join(self.to_rows())

    def __repr__(self) -> str:
        return f"Board({self.height}×{self.width}, alive={self.population()})"


def load_board(
    path: str | Path, max_dimension: int = DEFAULT_MAX_DIMENSION
) -> Board:
    """Validate ``path`` and build the board it describes."""
    shape = load_config(path, max_dimension=max_dimension)
    board = Board.from_file(path, shape)
    logger.debug(f"Built {board!r} from {path}")
    return board
