"""Shared test fixtures for map generation tests."""

import pytest
import structlog

from procgen.grid import Grid


class ScriptedRandom:
    """RandomSource replaying fixed values.

    ``ranges`` feeds next_range (each value must fall in the requested
    range); ``uniforms`` feeds next_uniform and next_bool.
    """

    def __init__(self, ranges=(), uniforms=()):
        self.ranges = list(ranges)
        self.uniforms = list(uniforms)

    def next_uniform(self) -> float:
        return self.uniforms.pop(0)

    def next_range(self, lo: int, hi: int) -> int:
        value = self.ranges.pop(0)
        assert lo <= value < hi, f"scripted {value} outside [{lo}, {hi})"
        return value

    def next_bool(self, p: float) -> bool:
        return self.next_uniform() < p


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo any structlog configuration a test applied."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def scripted():
    """Factory for scripted random sources."""
    return ScriptedRandom


@pytest.fixture
def empty_grid() -> Grid:
    """40x10 grid of zeros."""
    return Grid(40, 10)


@pytest.fixture
def small_grid() -> Grid:
    """5x5 grid of zeros."""
    return Grid(5, 5)
