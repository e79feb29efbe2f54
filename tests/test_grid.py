"""Tests for the tile grid."""

import numpy as np
import pytest

from procgen.exceptions import ConfigError, OutOfBoundsError
from procgen.grid import Grid


class TestGridSize:
    """Tests for sizing and resizing."""

    def test_cells_match_size(self) -> None:
        """Flat buffer has width * height zero cells."""
        grid = Grid(7, 3)
        assert len(grid.cells) == 21
        assert len(grid) == 21
        assert grid.tiles.shape == (3, 7)
        assert np.all(grid.cells == 0)

    def test_with_size_clears_contents(self) -> None:
        """Resizing discards prior values."""
        grid = Grid(4, 4)
        grid.set(1, 1, 9)
        grid.with_size(6, 2)
        assert (grid.width, grid.height) == (6, 2)
        assert len(grid.cells) == 12
        assert np.all(grid.cells == 0)

    def test_with_size_same_dimensions_still_clears(self) -> None:
        """Resizing to the same size also re-zeroes."""
        grid = Grid(3, 3)
        grid.set(2, 2, 4)
        grid.with_size(3, 3)
        assert grid.get(2, 2) == 0

    @pytest.mark.parametrize("width,height", [(0, 5), (5, 0), (-1, 3)])
    def test_non_positive_size_rejected(self, width: int, height: int) -> None:
        """Non-positive dimensions raise ConfigError."""
        with pytest.raises(ConfigError):
            Grid(width, height)


class TestGridAccess:
    """Tests for get/set and views."""

    def test_row_major_indexing(self) -> None:
        """index = x + y * width."""
        grid = Grid(5, 4)
        grid.set(3, 2, 7)
        assert grid.cells[3 + 2 * 5] == 7
        assert grid.tiles[2, 3] == 7
        assert grid.get(3, 2) == 7

    def test_cells_view_writes_through(self) -> None:
        """Writing the flat view updates the 2D tiles."""
        grid = Grid(3, 2)
        grid.cells[4] = 5
        assert grid.get(1, 1) == 5

    @pytest.mark.parametrize("x,y", [(-1, 0), (0, -1), (5, 0), (0, 4)])
    def test_out_of_bounds(self, x: int, y: int) -> None:
        """Coordinates outside the grid raise instead of wrapping."""
        grid = Grid(5, 4)
        with pytest.raises(OutOfBoundsError):
            grid.get(x, y)
        with pytest.raises(IndexError):
            grid.set(x, y, 1)

    def test_rows(self) -> None:
        """rows() returns height lists of width values."""
        grid = Grid(3, 2)
        grid.set(0, 1, 2)
        assert grid.rows() == [[0, 0, 0], [2, 0, 0]]

    def test_fill_rect(self) -> None:
        """fill_rect stamps exactly the rectangle."""
        grid = Grid(6, 5)
        grid.fill_rect(1, 2, 3, 2, 4)
        assert grid.count(4) == 6
        assert grid.get(1, 2) == 4
        assert grid.get(3, 3) == 4
        assert grid.get(4, 3) == 0
        assert grid.get(1, 4) == 0

    def test_fill_rect_outside_rejected(self) -> None:
        """Rectangles past the edge raise."""
        grid = Grid(6, 5)
        with pytest.raises(OutOfBoundsError):
            grid.fill_rect(4, 0, 3, 1, 1)

    def test_copy_is_independent(self) -> None:
        """Copies do not share storage."""
        grid = Grid(2, 2)
        clone = grid.copy()
        clone.set(0, 0, 1)
        assert grid.get(0, 0) == 0
