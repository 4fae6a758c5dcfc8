
"""F1 overlay for retuning CONFIG while the game is paused"""
from typing import List, NamedTuple

import pygame

from tetris_config import CONFIG

PANEL_COLOR = (20, 25, 40, 230)
TEXT_COLOR = (200, 210, 235)
SELECTED_COLOR = (255, 255, 255)


class Setting(NamedTuple):
    key: str
    label: str
    lo: int
    hi: int
    step: int

    def nudge(self, direction: int) -> None:
        CONFIG[self.key] = min(self.hi, max(self.lo, CONFIG[self.key] + direction * self.step))


SETTINGS: List[Setting] = [
    Setting("FALL_MS", "Fall (ms)", 50, 2000, 25),
    Setting("INPUT_REPEAT_MS", "Repeat (ms)", 20, 500, 10),
    Setting("CELL_SIZE", "Cell size", 16, 64, 2),
]

NUDGE_KEYS = {pygame.K_LEFT: -1, pygame.K_RIGHT: 1}
SELECT_KEYS = {pygame.K_UP: -1, pygame.K_DOWN: 1}


class Overlay:
    def __init__(self, settings: List[Setting] = SETTINGS):
        self.settings = settings
        self.active = False
        self.index = 0

    def toggle(self):
        self.active = not self.active

    @property
    def selected(self) -> Setting:
        return self.settings[self.index]

    def handle(self, event: pygame.event.Event):
        if event.key in (pygame.K_ESCAPE, pygame.K_F1):
            self.toggle()
        elif event.key in SELECT_KEYS:
            self.index = (self.index + SELECT_KEYS[event.key]) % len(self.settings)
        elif event.key in NUDGE_KEYS:
            self.selected.nudge(NUDGE_KEYS[event.key])

    def draw(self, screen: pygame.Surface, font: pygame.font.Font, w: int, h: int):
        if not self.active:
            return
        panel = pygame.Surface((w - 40, h - 40), pygame.SRCALPHA)
        panel.fill(PANEL_COLOR)
        screen.blit(panel, (20, 20))
        screen.blit(font.render("F1/Esc to close", True, SELECTED_COLOR), (40, 40))
        for i, s in enumerate(self.settings):
            color = SELECTED_COLOR if i == self.index else TEXT_COLOR
            screen.blit(font.render(f"{s.label}: {CONFIG[s.key]}", True, color), (40, 80 + 30 * i))
