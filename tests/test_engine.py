"""Generation update rules on hard-edged boards."""

from __future__ import annotations

import random

import numpy as np
import pytest

from game_of_life.board import Board
from game_of_life.engine import advance, live_neighbour_counts


def reference_advance(rows: list[str]) -> list[str]:
    """Plain Python rule application, used as a parity reference."""
    height = len(rows)
    width = len(rows[0]) if rows else 0
    result = []
    for r in range(height):
        line = []
        for c in range(width):
            n = sum(
                rows[r + dr][c + dc] == "#"
                for dr in (-1, 0, 1)
                for dc in (-1, 0, 1)
                if (dr, dc) != (0, 0)
                and 0 <= r + dr < height
                and 0 <= c + dc < width
            )
            alive = rows[r][c] == "#"
            line.append("#" if (alive and n in (2, 3)) or (not alive and n == 3) else ".")
        result.append("".join(line))
    return result


def test_all_dead_board_stays_dead():
    board = Board.from_rows(["......"] * 4)
    advance(board)
    assert board.population() == 0


def test_lone_cell_dies():
    board = Board.from_rows(["...", ".#.", "..."])
    advance(board)
    assert board.population() == 0


@pytest.mark.parametrize("rows", [
    ["......", "..##..", "..##..", "......"],
    ["##", "##"],
])
def test_block_is_a_still_life(rows):
    board = Board.from_rows(rows)
    advance(board)
    assert board.to_rows() == rows


def test_blinker_has_period_two():
    horizontal = [".....", ".....", ".###.", ".....", "....."]
    vertical = [".....", "..#..", "..#..", "..#..", "....."]
    board = Board.from_rows(horizontal)

    advance(board)
    assert board.to_rows() == vertical

    advance(board)
    assert board.to_rows() == horizontal


def test_glider_translates_diagonally():
    board = Board.from_rows([
        ".#......",
        "..#.....",
        "###.....",
        "........",
        "........",
        "........",
    ])
    for _ in range(4):
        advance(board)

    assert board.to_rows() == [
        "........",
        "..#.....",
        "...#....",
        ".###....",
        "........",
        "........",
    ]


def test_edges_only_count_in_bounds_neighbours():
    counts = live_neighbour_counts(np.ones((3, 3), dtype=np.uint8))

    assert counts.tolist() == [
        [3, 5, 3],
        [5, 8, 5],
        [3, 5, 3],
    ]


def test_corner_cell_sees_three_neighbours_not_wraparound():
    # With wraparound the far corners would give (0, 0) more neighbours
    board = Board.from_rows([
        ".#..#",
        "##...",
        ".....",
        "#...#",
    ])
    counts = live_neighbour_counts(board.current)
    assert counts[0, 0] == 3

    advance(board)
    assert board.is_alive(0, 0)
    assert not board.is_alive(3, 4)


def test_update_reads_only_pre_update_state():
    # Sequential in-place updating would let (0, 0)'s death change (0, 1)
    board = Board.from_rows(["###"])
    advance(board)
    assert board.to_rows() == [".#."]


def test_next_buffer_is_published_into_current():
    board = Board.from_rows([".....", ".###.", "....."])
    advance(board)
    assert np.array_equal(board.current, board.next)


def test_empty_board_advances():
    board = Board.from_rows([])
    assert advance(board) is board
    assert board.shape == (0, 0)


def test_single_row_and_column_boards():
    row = Board.from_rows(["#.##"])
    advance(row)
    assert row.to_rows() == reference_advance(["#.##"])

    column = Board.from_rows(["#", "#", "#"])
    advance(column)
    assert column.to_rows() == [".", "#", "."]


def test_matches_reference_over_many_generations():
    random.seed(42)
    rows = ["".join(random.choice("#.") for _ in range(48)) for _ in range(32)]
    board = Board.from_rows(rows)

    for _ in range(60):
        rows = reference_advance(rows)
        advance(board)

    assert board.fingerprint() == Board.from_rows(rows).fingerprint()
