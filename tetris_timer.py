
"""Repeating interval timer driven by elapsed milliseconds"""


class RepeatTimer:
    def __init__(self, duration_ms: float):
        self.duration_ms = duration_ms
        self.elapsed = 0.0
        self.finished = False

    def tick(self, dt_ms: float) -> bool:
        """Advance by dt; ``finished`` is True only on ticks that cross an interval."""
        if dt_ms < 0:
            raise ValueError(f"negative elapsed time: {dt_ms}")
        self.elapsed += dt_ms
        self.finished = self.duration_ms <= 0 or self.elapsed >= self.duration_ms
        if self.finished:
            self.elapsed = self.elapsed % self.duration_ms if self.duration_ms > 0 else 0.0
        return self.finished

    def reset(self):
        self.elapsed = 0.0
        self.finished = False
