
"""Uniform piece randomizer"""
import random
from typing import Optional
from tetris_piece import PIECES

class UniformRandom:
    """Every type equally likely on every draw, no history."""
    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._rng = random.Random(seed)

    def next_piece(self) -> str:
        return self._rng.choice(PIECES)
