
"""Board helpers: empty board, lookups, full rows, sweep"""
import logging
from typing import List, Optional, Tuple

from tetris_config import COLS, ROWS, GRID_SIZE

log = logging.getLogger(__name__)

Color = Tuple[int, int, int]
# board[y][x] holds the color of a locked cell, None when free
Board = List[List[Optional[Color]]]


def empty_board() -> Board:
    return [[None] * GRID_SIZE for _ in range(GRID_SIZE)]


def clear(board: Board) -> None:
    for row in board:
        for x in range(len(row)):
            row[x] = None


def in_grid(x: int, y: int) -> bool:
    return 0 <= x < GRID_SIZE and 0 <= y < GRID_SIZE


def is_locked(board: Board, x: int, y: int) -> bool:
    if not in_grid(x, y):
        return False
    return board[y][x] is not None


def locked_cells(board: Board) -> List[Tuple[int, int, Color]]:
    return [(x, y, c) for y, row in enumerate(board) for x, c in enumerate(row) if c is not None]


def full_rows(board: Board) -> List[int]:
    """Visible rows where every column is locked, bottom to top."""
    return [y for y in range(ROWS) if all(board[y][x] is not None for x in range(COLS))]


def sweep(board: Board) -> int:
    """Clear full rows, compact the rows above them and return the cleared count.

    Every surviving cell's destination is computed from the full-row set taken
    before anything is removed, and the whole board is rebuilt from that
    mapping in one pass, so compaction never reads a row it already wrote.
    """
    rows = full_rows(board)
    if not rows:
        return 0
    cleared = set(rows)
    new_y = [y - sum(1 for r in rows if r < y) for y in range(GRID_SIZE)]

    compacted = empty_board()
    for y, row in enumerate(board):
        if y in cleared:
            continue
        for x, c in enumerate(row):
            if c is not None:
                compacted[new_y[y]][x] = c
    board[:] = compacted
    log.info("cleared %d line(s): rows %s", len(rows), rows)
    return len(rows)
