
"""Piece model, catalog, fixed -90 degree rotation"""
import logging
from dataclasses import dataclass, field
from typing import List, Sequence, Tuple

from tetris_board import Board, Color, is_locked
from tetris_config import COLS, ROWS

log = logging.getLogger(__name__)

Offset = Tuple[int, int]

# Each shape is 4 offsets around the anchor (0, 0); y grows upward.
PATTERNS: List[List[Offset]] = [
    [(0, 0), (0, -1), (0, 1), (0, 2)],   # I
    [(0, 0), (0, -1), (0, 1), (-1, 1)],  # L
    [(0, 0), (0, -1), (0, 1), (1, 1)],   # mirrored L
    [(0, 0), (0, -1), (1, 0), (1, 1)],   # S
    [(0, 0), (1, 0), (0, 1), (1, -1)],   # Z
    [(0, 0), (0, 1), (1, 0), (1, 1)],    # square
    [(0, 0), (-1, 0), (1, 0), (0, 1)],   # T
]

COLORS: List[Color] = [
    (64, 230, 99),
    (217, 64, 89),
    (69, 150, 209),
    (227, 230, 69),
    (33, 227, 240),
    (240, 140, 69),
]

# cos, -sin / sin, cos for -90 degrees
ROT = ((0, 1), (-1, 0))

# keeps spawned and rotated cells inside the storage grid
MAX_OFFSET = 3


def validate_patterns(patterns: Sequence[Sequence[Offset]]) -> None:
    if not patterns:
        raise ValueError("piece catalog is empty")
    for i, p in enumerate(patterns):
        offsets = [tuple(o) for o in p]
        if len(offsets) != 4:
            raise ValueError(f"pattern {i} has {len(offsets)} offsets, expected 4")
        if (0, 0) not in offsets:
            raise ValueError(f"pattern {i} has no (0, 0) anchor")
        if len(set(offsets)) != 4:
            raise ValueError(f"pattern {i} repeats an offset")
        if any(abs(v) > MAX_OFFSET for o in offsets for v in o):
            raise ValueError(f"pattern {i} reaches further than {MAX_OFFSET} from the anchor")


def validate_colors(colors: Sequence[Color]) -> None:
    if not colors:
        raise ValueError("color palette is empty")


validate_patterns(PATTERNS)
validate_colors(COLORS)


@dataclass
class Cell:
    x: int
    y: int
    rot_x: int
    rot_y: int

    @property
    def anchor(self) -> Tuple[int, int]:
        return self.x - self.rot_x, self.y - self.rot_y


@dataclass
class Piece:
    """The falling piece: 4 cells that move, rotate and lock as one unit.

    ``landed`` is set by a hard drop once the cells have been written into the
    board; a landed piece no longer moves and is retired on the next fall.
    """
    cells: List[Cell]
    color: Color
    landed: bool = field(default=False)

    @staticmethod
    def spawn(pattern: Sequence[Offset], color: Color, x: int, y: int) -> "Piece":
        return Piece([Cell(x + rx, y + ry, rx, ry) for rx, ry in pattern], color)

    def positions(self) -> List[Tuple[int, int]]:
        return [(c.x, c.y) for c in self.cells]

    def offsets(self) -> List[Offset]:
        return [(c.rot_x, c.rot_y) for c in self.cells]


def rotate_offset(rx: int, ry: int) -> Offset:
    return (ROT[0][0] * rx + ROT[0][1] * ry,
            ROT[1][0] * rx + ROT[1][1] * ry)


def rotated(cell: Cell) -> Cell:
    ax, ay = cell.anchor
    nrx, nry = rotate_offset(cell.rot_x, cell.rot_y)
    return Cell(ax + nrx, ay + nry, nrx, nry)


def try_rotate(board: Board, piece: Piece) -> bool:
    """Rotate the piece about its anchor; all 4 cells or none.

    Rotation is only allowed when every new position is inside the visible
    playfield and not locked. There is no kick search.
    """
    if piece.landed:
        return False
    new_cells = [rotated(c) for c in piece.cells]
    for c in new_cells:
        if not (0 <= c.x < COLS and 0 <= c.y < ROWS) or is_locked(board, c.x, c.y):
            log.debug("rotation rejected at (%d, %d)", c.x, c.y)
            return False
    piece.cells = new_cells
    return True
