"""Console rendering of board frames."""

from __future__ import annotations

from .board import ALIVE, Board

ALIVE_GLYPH = "■"
DEAD_GLYPH = "·"

HORIZONTAL = "═"
VERTICAL = "║"
TOP_LEFT, TOP_RIGHT = "╔", "╗"
BOTTOM_LEFT, BOTTOM_RIGHT = "╚", "╝"


def render_frame(board: Board) -> str:
    """Return the framed picture of ``board.current``; the board is not touched."""
    rule = HORIZONTAL * board.width
    lines = [f"{TOP_LEFT}{rule}{TOP_RIGHT}"]
    for row in board.current:
        cells = "".join(ALIVE_GLYPH if cell == ALIVE else DEAD_GLYPH for cell in row)
        lines.append(f"{VERTICAL}{cells}{VERTICAL}")
    lines.append(f"{BOTTOM_LEFT}{rule}{BOTTOM_RIGHT}")
    return "\n".join(lines)


def render_step(step: int, board: Board) -> str:
    return f"Step: {step}\n{render_frame(board)}"
