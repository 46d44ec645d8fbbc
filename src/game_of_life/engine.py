"""Generation update for bounded (non-wrapping) Game of Life boards."""

from __future__ import annotations

import numpy as np

from .board import ALIVE, Board

NEIGHBOUR_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
)

SURVIVE_COUNTS: tuple[int, ...] = (2, 3)
BIRTH_COUNTS: tuple[int, ...] = (3,)


def live_neighbour_counts(cells: np.ndarray) -> np.ndarray:
    """Count live neighbours of every cell, ignoring positions off the board.

    Each offset adds the overlapping slice of ``cells`` shifted by that
    offset, so edge and corner cells only ever see in-bounds neighbours.
    """
    height, width = cells.shape
    counts = np.zeros((height, width), dtype=np.uint8)

    for dr, dc in NEIGHBOUR_OFFSETS:
        dst_rows = slice(max(0, -dr), height - max(0, dr))
        src_rows = slice(max(0, dr), height - max(0, -dr))
        dst_cols = slice(max(0, -dc), width - max(0, dc))
        src_cols = slice(max(0, dc), width - max(0, -dc))
        counts[dst_rows, dst_cols] += cells[src_rows, src_cols]

    return counts


def advance(board: Board) -> Board:
    """Move ``board`` forward one generation in place and return it."""
    counts = live_neighbour_counts(board.current)
    alive = board.current == ALIVE

    survives = alive & np.isin(counts, SURVIVE_COUNTS)
    born = ~alive & np.isin(counts, BIRTH_COUNTS)
    board.next[...] = survives | born

    # Publish the whole generation at once
    np.copyto(board.current, board.next)
    return board
