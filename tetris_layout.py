# tetris_layout.py
from dataclasses import dataclass
from typing import Tuple
from tetris_config import CONFIG, COLS, ROWS


@dataclass
class Dims:
    cell: int
    margin: int
    board_w: int
    board_h: int
    total_w: int
    total_h: int
    board_x: int
    board_y: int


def compute_dims() -> Dims:
    cell = int(CONFIG["CELL_SIZE"])
    margin = int(CONFIG["MARGIN"])

    board_w = COLS * cell
    board_h = ROWS * cell

    total_w = board_w + margin
    total_h = board_h + margin

    # centre the grid in the window
    board_x = margin // 2
    board_y = margin // 2

    return Dims(
        cell=cell, margin=margin,
        board_w=board_w, board_h=board_h,
        total_w=total_w, total_h=total_h,
        board_x=board_x, board_y=board_y,
    )


def cell_rect(dims: Dims, x: int, y: int) -> Tuple[int, int, int, int]:
    """Screen rectangle (left, top, w, h) for board position (x, y).

    Board rows count up from the bottom while screen rows count down, so
    rows at or above ROWS land above the window and get clipped.
    """
    left = dims.board_x + x * dims.cell
    top = dims.board_y + (ROWS - 1 - y) * dims.cell
    return left, top, dims.cell, dims.cell
