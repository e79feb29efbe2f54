"""Tile grid storage."""

import numpy as np
from numpy.typing import NDArray

from .exceptions import ConfigError, OutOfBoundsError

TILE_DTYPE = np.int64


class Grid:
    """Rectangular grid of integer tile values.

    Tiles are stored in a numpy array of shape (height, width). The flat,
    row-major view used by the generation algorithms is exposed as ``cells``,
    where ``index = x + y * width``.
    """

    def __init__(self, width: int, height: int):
        self.width = 0
        self.height = 0
        self.tiles: NDArray[np.int64] = np.zeros((0, 0), dtype=TILE_DTYPE)
        self.with_size(width, height)

    def with_size(self, width: int, height: int) -> "Grid":
        """Resize the grid, discarding prior contents.

        Args:
            width: New width in tiles.
            height: New height in tiles.

        Returns:
            The grid itself, zero-filled.

        Raises:
            ConfigError: If either dimension is not positive.
        """
        if width <= 0 or height <= 0:
            raise ConfigError(f"Grid size must be positive, got {width}x{height}")
        self.width = int(width)
        self.height = int(height)
        self.tiles = np.zeros((self.height, self.width), dtype=TILE_DTYPE)
        return self

    @property
    def cells(self) -> NDArray[np.int64]:
        """Flat row-major view of the tiles (writes go through)."""
        return self.tiles.reshape(-1)

    @property
    def size(self) -> int:
        """Total number of cells."""
        return self.width * self.height

    def __len__(self) -> int:
        return self.size

    def in_bounds(self, x: int, y: int) -> bool:
        """Check if (x, y) is within grid bounds."""
        return 0 <= x < self.width and 0 <= y < self.height

    def index(self, x: int, y: int) -> int:
        """Flat index of (x, y).

        Raises:
            OutOfBoundsError: If the coordinate is outside the grid.
        """
        if not self.in_bounds(x, y):
            raise OutOfBoundsError(
                f"({x}, {y}) outside grid of size {self.width}x{self.height}"
            )
        return x + y * self.width

    def get(self, x: int, y: int) -> int:
        """Return the tile value at (x, y)."""
        return int(self.cells[self.index(x, y)])

    def set(self, x: int, y: int, value: int) -> None:
        """Set the tile value at (x, y)."""
        self.cells[self.index(x, y)] = value

    def fill_rect(self, x: int, y: int, width: int, height: int, value: int) -> None:
        """Stamp a rectangle fully inside the grid with a tile value."""
        if not (self.in_bounds(x, y) and self.in_bounds(x + width - 1, y + height - 1)):
            raise OutOfBoundsError(
                f"Rectangle ({x}, {y}, {width}x{height}) exceeds grid "
                f"{self.width}x{self.height}"
            )
        self.tiles[y : y + height, x : x + width] = value

    def rows(self) -> list[list[int]]:
        """Represent the grid as a list of rows.

        Prefer ``tiles`` or ``cells`` for anything performance sensitive.
        """
        return self.tiles.tolist()

    def count(self, value: int) -> int:
        """Number of cells holding the given tile value."""
        return int(np.count_nonzero(self.tiles == value))

    def copy(self) -> "Grid":
        """Return an independent copy of this grid."""
        clone = Grid(self.width, self.height)
        clone.tiles[:] = self.tiles
        return clone

    def __repr__(self) -> str:
        return f"Grid(width={self.width}, height={self.height})"
