
"""Piece and color randomizer"""
import random
from typing import Optional, Sequence, TypeVar

T = TypeVar("T")


class PieceRandom:
    """Uniform draws with replacement; the same shape can come up twice in a row.

    Pass a seed for reproducible sequences, None for an unseeded generator.
    """
    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._rng = random.Random(seed)

    def _pick(self, items: Sequence[T]) -> T:
        return items[self._rng.randrange(len(items))]

    def next_pattern(self, patterns: Sequence[T]) -> T:
        return self._pick(patterns)

    def next_color(self, colors: Sequence[T]) -> T:
        return self._pick(colors)
