"""Tests for classified noise fill."""

import numpy as np
import pytest

from procgen.config import NoiseOptions
from procgen.fill import band_classifier, fill_noise, sample_grid
from procgen.grid import Grid
from procgen.noise import NoiseField

REFERENCE_BANDS = band_classifier([0.66, 0.33], [2, 1, 0])

# 40x10, seed 0, single octave, bands v > 0.66 -> 2, v > 0.33 -> 1, else 0
REFERENCE_MAP = [
    "1111111111111122222222222222222222111111",
    "1111111111111222222222222222222222111111",
    "1111111111112222222222222222222222111111",
    "1111111111122222222222222222222222111111",
    "1111111111222222222222222222222222111111",
    "1111111112222222222222222222222222111111",
    "1111111122222222222222222222222221111111",
    "1111111222222222222222222222222221111111",
    "1111122222222222222222222222222211111111",
    "1111122222222222222222222222222111111111",
]


class TestBandClassifier:
    """Tests for threshold classifiers."""

    @pytest.mark.parametrize(
        "value,expected",
        [(0.0, 0), (0.33, 0), (0.34, 1), (0.66, 1), (0.67, 2), (1.0, 2)],
    )
    def test_reference_bands(self, value: float, expected: int) -> None:
        """Values strictly above a threshold take its tile."""
        assert REFERENCE_BANDS(value) == expected

    def test_mismatched_lengths_rejected(self) -> None:
        """One more tile than thresholds is required."""
        with pytest.raises(ValueError):
            band_classifier([0.5], [1])


class TestFillNoise:
    """Tests for filling a grid from a noise field."""

    def test_matches_direct_sampling(self) -> None:
        """Each cell is classify(sample(x / width * f, y / width * f))."""
        options = NoiseOptions(frequency=3.0, octaves=2)
        field = NoiseField(17, options)
        grid = fill_noise(Grid(12, 5), field, lambda v: int(v * 100))

        for y in range(5):
            for x in range(12):
                value = field.value(x / 12 * 3.0, y / 12 * 3.0)
                assert grid.get(x, y) == int(value * 100)

    def test_reference_map_seed_zero(self) -> None:
        """40x10 seed 0 reproduces the recorded map."""
        grid = fill_noise(Grid(40, 10), NoiseField(0), REFERENCE_BANDS)
        assert ["".join(map(str, row)) for row in grid.rows()] == REFERENCE_MAP

    def test_rows_independent_of_height(self) -> None:
        """Both axes normalize by width, so taller grids extend the pattern."""
        field = NoiseField(4, NoiseOptions(frequency=2.0))
        short = fill_noise(Grid(20, 6), field, lambda v: int(v * 1000))
        tall = fill_noise(Grid(20, 15), field, lambda v: int(v * 1000))
        np.testing.assert_array_equal(short.tiles, tall.tiles[:6])

    def test_classifier_sees_unit_interval(self) -> None:
        """Every value handed to the classifier lies in [0, 1]."""
        seen: list[float] = []

        def record(value: float) -> int:
            seen.append(value)
            return 0

        options = NoiseOptions(frequency=8.0, octaves=5, redistribution=2.5)
        fill_noise(Grid(30, 30), NoiseField(123, options), record)
        assert len(seen) >= 900
        assert min(seen) >= 0.0
        assert max(seen) <= 1.0

    def test_overwrites_existing_cells(self) -> None:
        """Noise fill replaces whatever the grid held."""
        grid = Grid(8, 8)
        grid.cells[:] = 9
        fill_noise(grid, NoiseField(1), lambda v: 0)
        assert grid.count(0) == 64

    def test_sample_grid_shape(self) -> None:
        """Sampled values come back shaped (height, width)."""
        assert sample_grid(9, 4, NoiseField(2)).shape == (4, 9)
