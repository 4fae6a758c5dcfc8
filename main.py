import logging
import sys

import pygame

from tetris_config import CONFIG
from tetris_game import Game
from tetris_input import InputState
from tetris_layout import compute_dims
from tetris_overlay import Overlay
from tetris_render import RenderAssets

log = logging.getLogger(__name__)


def recreate_window(dims, flags=pygame.DOUBLEBUF):
    return pygame.display.set_mode((dims.total_w, dims.total_h), flags, vsync=1)


def main():
    logging.basicConfig(level=CONFIG["LOG_LEVEL"], format='[TETRIS] %(asctime)s - %(message)s')
    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN, pygame.KEYUP])

    dims = compute_dims()
    screen = recreate_window(dims)
    pygame.display.set_caption("my tetris")
    font = pygame.font.SysFont(None, 22)

    render = RenderAssets(dims)
    clock = pygame.time.Clock()
    overlay = Overlay()
    game = Game()
    log.info("started, seed=%s", game.rng.seed)

    def refresh_assets_if_cell_changed():
        nonlocal dims, screen, render
        new_dims = compute_dims()
        if new_dims.cell != dims.cell:
            dims = new_dims
            screen = recreate_window(dims)
            render = RenderAssets(dims)

    while True:
        dt = clock.tick(60)
        inputs = InputState()

        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                pygame.quit(); sys.exit()
            if e.type == pygame.KEYDOWN:
                if e.key == pygame.K_F1:
                    overlay.toggle(); continue
                if overlay.active:
                    overlay.handle(e); continue
                if e.key == pygame.K_UP:
                    inputs.rotate = True
                if e.key == pygame.K_DOWN:
                    inputs.drop = True

        refresh_assets_if_cell_changed()

        if not overlay.active:
            keys = pygame.key.get_pressed()
            inputs.left = bool(keys[pygame.K_LEFT])
            inputs.right = bool(keys[pygame.K_RIGHT])
            game.tick(dt, inputs)

        render.draw(screen, game.live_cells())
        overlay.draw(screen, font, dims.total_w, dims.total_h)
        pygame.display.flip()


if __name__ == '__main__':
    main()
