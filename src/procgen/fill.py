"""Noise fill: classify a noise field into tile bands."""

from typing import Callable, Sequence

import numpy as np
import structlog

from .grid import Grid, TILE_DTYPE
from .noise import NoiseField

logger = structlog.get_logger()

Classifier = Callable[[float], int]


def band_classifier(thresholds: Sequence[float], tiles: Sequence[int]) -> Classifier:
    """Build a classifier from descending thresholds.

    A value strictly above ``thresholds[i]`` (checked in order) maps to
    ``tiles[i]``; values at or below every threshold map to ``tiles[-1]``.

    Example:
        ``band_classifier([0.66, 0.33], [2, 1, 0])`` maps 0.7 -> 2,
        0.5 -> 1 and 0.2 -> 0.
    """
    if len(tiles) != len(thresholds) + 1:
        raise ValueError(
            f"Expected {len(thresholds) + 1} tiles for {len(thresholds)} "
            f"thresholds, got {len(tiles)}"
        )
    bands = list(zip(thresholds, tiles))
    fallback = tiles[-1]

    def classify(value: float) -> int:
        for threshold, tile in bands:
            if value > threshold:
                return tile
        return fallback

    return classify


def sample_grid(width: int, height: int, field: NoiseField) -> np.ndarray:
    """Sample a field over every cell of a width x height grid.

    Both axes are normalized by ``width`` so a cell's noise coordinate does
    not depend on the grid height.

    Returns:
        Array of shape (height, width) with values in [0, 1].
    """
    frequency = field.options.frequency
    xs = np.arange(width, dtype=np.float64) / width
    ys = np.arange(height, dtype=np.float64) / width
    nx, ny = np.meshgrid(xs * frequency, ys * frequency)
    return field.sample(nx, ny)


def fill_noise(grid: Grid, field: NoiseField, classify: Classifier) -> Grid:
    """Overwrite every cell with the classified noise value.

    Args:
        grid: Grid to fill in place.
        field: Noise field supplying values in [0, 1].
        classify: Pure mapping from a noise value to a tile value.

    Returns:
        The same grid.
    """
    values = sample_grid(grid.width, grid.height, field)
    classified = np.vectorize(classify, otypes=[TILE_DTYPE])(values)
    grid.tiles[:] = classified

    logger.debug(
        "noise_filled",
        width=grid.width,
        height=grid.height,
        octaves=field.options.octaves,
        frequency=field.options.frequency,
    )
    return grid
