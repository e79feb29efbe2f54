"""Pseudo-random source used by the stochastic generators."""

from typing import Protocol

import numpy as np

SEED_MAX = 2**32


class RandomSource(Protocol):
    """Capability the room placer and blob spawner draw from."""

    def next_uniform(self) -> float:
        """Return a float in [0, 1)."""
        ...

    def next_range(self, lo: int, hi: int) -> int:
        """Return an int in [lo, hi)."""
        ...

    def next_bool(self, p: float) -> bool:
        """Return True with probability p."""
        ...


class NumpyRandomSource:
    """RandomSource backed by a seeded numpy Generator."""

    def __init__(self, seed: int | None = None):
        self.seed = seed
        self._rng = np.random.default_rng(seed)

    def next_uniform(self) -> float:
        return float(self._rng.random())

    def next_range(self, lo: int, hi: int) -> int:
        if hi <= lo:
            raise ValueError(f"Empty range [{lo}, {hi})")
        return int(self._rng.integers(lo, hi))

    def next_bool(self, p: float) -> bool:
        return self.next_uniform() < p


def random_seed() -> int:
    """Draw a fresh 32-bit seed from OS entropy."""
    return int(np.random.default_rng().integers(0, SEED_MAX))
