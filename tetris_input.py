
"""Input gating: fixed-rate horizontal repeat, edge-triggered rotate/drop"""
from dataclasses import dataclass
from typing import List

from tetris_config import CONFIG
from tetris_timer import RepeatTimer


@dataclass
class InputState:
    left: bool = False
    right: bool = False
    rotate: bool = False   # key went down this frame
    drop: bool = False     # key went down this frame


class ShiftRepeat:
    """Held left/right repeat at INPUT_REPEAT_MS, not once per frame."""
    def __init__(self):
        self.timer = RepeatTimer(CONFIG["INPUT_REPEAT_MS"])

    def update(self, dt: float, left: bool, right: bool) -> List[int]:
        self.timer.duration_ms = CONFIG["INPUT_REPEAT_MS"]
        if not self.timer.tick(dt):
            return []
        steps = []
        if left: steps.append(-1)
        if right: steps.append(1)
        return steps
