
"""Game state: spawn, gravity, line clear and game over, run in a fixed order per tick.

One ``Game`` owns the board and the active piece. ``tick`` is the only entry
point the host needs; the individual steps are public so they can be driven
one at a time.

Tick order:
  1. pending work  (sweep full rows, spawn if requested, restart on game over)
  2. input         (rate-gated shift, hard drop, rotate)
  3. gravity       (fall one row or lock and request a spawn)
  4. pending work  again, so a lock or restart never leaves a frame without
                   an active piece

The board and piece are plain values mutated only from inside ``tick``; a
host that drives a game from more than one thread has to hold one lock
around each call.
"""
import logging
from typing import Callable, List, Optional, Sequence, Tuple

from tetris_board import Board, Color, clear, empty_board, is_locked, locked_cells, sweep
from tetris_config import CONFIG, COLS, ROWS
from tetris_input import InputState, ShiftRepeat
from tetris_move import can_fall, fall, hard_drop, lock, shift
from tetris_piece import COLORS, PATTERNS, Offset, Piece, try_rotate, validate_colors, validate_patterns
from tetris_rng import PieceRandom
from tetris_timer import RepeatTimer

log = logging.getLogger(__name__)

SPAWN_X, SPAWN_Y = COLS // 2, ROWS

Listener = Callable[[str, dict], None]


class Game:
    def __init__(self, patterns: Sequence[Sequence[Offset]] = PATTERNS,
                 colors: Sequence[Color] = COLORS, seed: Optional[int] = None,
                 rng: Optional[PieceRandom] = None):
        validate_patterns(patterns)
        validate_colors(colors)
        self.patterns = [list(p) for p in patterns]
        self.colors = list(colors)
        self.rng = rng or PieceRandom(seed if seed is not None else CONFIG["SEED"])

        self.board: Board = empty_board()
        self.piece: Optional[Piece] = None
        self.spawn_requested = True
        self.game_over = False

        self.fall_timer = RepeatTimer(CONFIG["FALL_MS"])
        self.shift_repeat = ShiftRepeat()
        self.listeners: List[Listener] = []

    def emit(self, name: str, **data):
        for fn in self.listeners:
            fn(name, data)

    # ---------- spawn ----------
    def spawn(self, pattern: Optional[Sequence[Offset]] = None,
              color: Optional[Color] = None) -> bool:
        """Create the next piece at (COLS/2, ROWS), or flag game over.

        Nothing is created when any target position is already locked.
        """
        self.spawn_requested = False
        if pattern is None:
            pattern = self.rng.next_pattern(self.patterns)
        if color is None:
            color = self.rng.next_color(self.colors)

        if any(is_locked(self.board, SPAWN_X + rx, SPAWN_Y + ry) for rx, ry in pattern):
            log.info("Game Over")
            self.game_over = True
            self.emit("game_over")
            return False

        self.piece = Piece.spawn(pattern, color, SPAWN_X, SPAWN_Y)
        log.debug("spawned %s at (%d, %d)", list(pattern), SPAWN_X, SPAWN_Y)
        self.emit("spawn", cells=self.piece.positions())
        return True

    # ---------- input ----------
    def shift(self, dx: int) -> bool:
        return self.piece is not None and shift(self.board, self.piece, dx)

    def hard_drop(self) -> bool:
        if self.piece is None or not hard_drop(self.board, self.piece):
            return False
        # the cells are in the board from here on, so this is the lock
        self.emit("lock", cells=self.piece.positions())
        return True

    def rotate(self) -> bool:
        return self.piece is not None and try_rotate(self.board, self.piece)

    # ---------- gravity ----------
    def fall(self) -> bool:
        """One gravity step. Returns True if the piece moved down."""
        p = self.piece
        if p is None:
            return False
        if p.landed:
            # locked and announced by the hard drop
            self._request_spawn()
            return False
        if can_fall(self.board, p):
            fall(p)
            return True
        lock(self.board, p)
        self.emit("lock", cells=p.positions())
        self._request_spawn()
        return False

    def _request_spawn(self):
        self.piece = None
        self.spawn_requested = True
        self.emit("spawn_requested")

    # ---------- line clear ----------
    def clear_lines(self) -> int:
        n = sweep(self.board)
        if n:
            self.emit("lines", count=n)
        return n

    # ---------- game over ----------
    def restart(self):
        """Silent full reset: every cell goes, then a fresh spawn is requested."""
        clear(self.board)
        self.game_over = False
        self.fall_timer.reset()
        self.shift_repeat.timer.reset()
        log.info("board reset, restarting")
        self._request_spawn()

    def _pending(self):
        self.clear_lines()
        if self.spawn_requested:
            self.spawn()
        if self.game_over:
            self.restart()
            self.spawn()

    def tick(self, dt: float, inputs: Optional[InputState] = None):
        if dt < 0:
            raise ValueError(f"negative elapsed time: {dt}")
        inputs = inputs or InputState()
        self.fall_timer.duration_ms = CONFIG["FALL_MS"]
        self.fall_timer.tick(dt)
        steps = self.shift_repeat.update(dt, inputs.left, inputs.right)

        self._pending()

        for dx in steps:
            self.shift(dx)
        if inputs.drop:
            self.hard_drop()
        if inputs.rotate:
            self.rotate()

        if self.fall_timer.finished:
            self.fall()

        self._pending()

    def live_cells(self) -> List[Tuple[int, int, Color]]:
        """Every cell to draw: locked cells plus the falling piece."""
        cells = locked_cells(self.board)
        if self.piece is not None and not self.piece.landed:
            cells.extend((c.x, c.y, self.piece.color) for c in self.piece.cells)
        return cells
