
"""Movement helpers: horizontal shift, hard drop, fall, lock"""
import logging

from tetris_board import Board, is_locked
from tetris_config import COLS, ROWS
from tetris_piece import Piece

log = logging.getLogger(__name__)

LEFT, RIGHT = -1, 1


def can_shift(board: Board, piece: Piece, dx: int) -> bool:
    for c in piece.cells:
        nx = c.x + dx
        if nx < 0 or nx >= COLS:
            return False
        # above the visible band only the walls count
        if c.y < ROWS and is_locked(board, nx, c.y):
            return False
    return True


def shift(board: Board, piece: Piece, dx: int) -> bool:
    if piece.landed or not can_shift(board, piece, dx):
        return False
    for c in piece.cells:
        c.x += dx
    return True


def drop_distance(board: Board, piece: Piece) -> int:
    """Largest d >= 0 the piece can move straight down without hitting
    the floor or a locked cell."""
    down = 0
    collide = False
    while not collide:
        down += 1
        for c in piece.cells:
            if c.y - down < 0 or is_locked(board, c.x, c.y - down):
                collide = True
                break
    return down - 1


def hard_drop(board: Board, piece: Piece) -> bool:
    """Drop the piece as far as it goes and mark its cells in the board.

    The distance is measured against the board as it was before the drop;
    the piece's own cells are only written afterwards. The piece stays the
    active one, landed, until the next fall retires it.
    """
    if piece.landed:
        return False
    down = drop_distance(board, piece)
    for c in piece.cells:
        c.y -= down
        board[c.y][c.x] = piece.color
    piece.landed = True
    log.debug("hard drop by %d to %s", down, piece.positions())
    return True


def can_fall(board: Board, piece: Piece) -> bool:
    return all(c.y > 0 and not is_locked(board, c.x, c.y - 1) for c in piece.cells)


def fall(piece: Piece) -> None:
    for c in piece.cells:
        c.y -= 1


def lock(board: Board, piece: Piece) -> None:
    for c in piece.cells:
        board[c.y][c.x] = piece.color
    log.debug("locked %s", piece.positions())
