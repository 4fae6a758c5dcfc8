
"""
Rendering helpers for the Tetris project.

- Pre-render the static background (grid) once per Dims.
- Pre-render one block surface per palette color and blit it for every live cell.
"""
from __future__ import annotations
import pygame
from typing import Dict, Iterable, Tuple
from tetris_board import Color
from tetris_config import COLS, ROWS
from tetris_layout import Dims, cell_rect


BG_COLOR = (10, 13, 34)
GRID_COLOR = (40, 50, 90)


class RenderAssets:
    """Holds pre-rendered assets for fast blitting."""
    def __init__(self, dims: Dims):
        self.dims = dims
        self._make_static()
        self.cell_surf: Dict[Color, pygame.Surface] = {}

    # ---------- Static background (grid) ----------
    def _make_static(self):
        d = self.dims
        self.bg = pygame.Surface((d.total_w, d.total_h))
        self.bg.fill(BG_COLOR)
        for x in range(COLS + 1):
            X = d.board_x + x * d.cell
            pygame.draw.line(self.bg, GRID_COLOR, (X, d.board_y), (X, d.board_y + d.board_h))
        for y in range(ROWS + 1):
            Y = d.board_y + y * d.cell
            pygame.draw.line(self.bg, GRID_COLOR, (d.board_x, Y), (d.board_x + d.board_w, Y))

    # ---------- Block sprites, built lazily per color ----------
    def block(self, color: Color) -> pygame.Surface:
        s = self.cell_surf.get(color)
        if s is None:
            c = self.dims.cell
            s = pygame.Surface((c - 2, c - 2))
            s.fill(color)
            self.cell_surf[color] = s
        return s

    def rect(self, x: int, y: int) -> pygame.Rect:
        return pygame.Rect(cell_rect(self.dims, x, y))

    def draw(self, screen: pygame.Surface, cells: Iterable[Tuple[int, int, Color]]):
        screen.blit(self.bg, (0, 0))
        for x, y, color in cells:
            if y >= ROWS:
                continue
            screen.blit(self.block(color), self.rect(x, y).inflate(-2, -2).topleft)
