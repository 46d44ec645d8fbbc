"""Conway's Game of Life on a bounded board, printed to the console."""

from .board import Board, load_board
from .config_loader import BoardShape, load_config
from .engine import advance
from .render import render_frame, render_step
from .simulation import run

__all__ = [
    "Board",
    "BoardShape",
    "advance",
    "load_board",
    "load_config",
    "render_frame",
    "render_step",
    "run",
]
