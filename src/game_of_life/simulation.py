"""The perpetual render/advance loop.

There is no convergence detection: a stable, oscillating or extinct board
keeps being printed until the process is killed.
"""

from __future__ import annotations

import time
from typing import Callable

from loguru import logger

from .board import Board
from .engine import advance
from .render import render_step

BANNER = "============ GOL - Game Of Life ============"


def _print(text: str) -> None:
    print(text, flush=True)


def run(
    board: Board,
    interval: float = 1.0,
    initial_delay: float = 1.0,
    max_steps: int | None = None,
    sleep: Callable[[float], None] = time.sleep,
    out: Callable[[str], None] = _print,
) -> int:
    """Render and advance ``board`` every ``interval`` seconds.

    ``max_steps`` bounds the loop for callers that need it to return; the
    default of ``None`` runs forever. Returns the number of completed steps.
    """
    step = 0
    sleep(initial_delay)
    out(f"\n{BANNER}")
    logger.info(f"Starting simulation of {board!r}, interval={interval}s")

    while max_steps is None or step < max_steps:
        out(render_step(step, board))
        advance(board)
        step += 1
        logger.debug(f"Step {step}: population={board.population()}")
        sleep(interval)

    return step

