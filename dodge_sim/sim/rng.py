# dodge_sim/sim/rng.py
import random
from typing import Optional


class RNG:
    """Seedable random source handed to the world and the step functions."""

    def __init__(self, seed: Optional[int] = None):
        self._rng = random.Random(seed)

    def seed(self, s: int):
        self._rng.seed(s)

    def uniform(self, a: float, b: float) -> float:
        return self._rng.uniform(a, b)

    def coin(self) -> bool:
        return self._rng.uniform(0.0, 1.0) > 0.5
