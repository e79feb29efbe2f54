"""Fluent map generator.

Usage::

    generator = (
        Generator(seed=0)
        .with_size(40, 10)
        .spawn_perlin(band_classifier([0.66, 0.33], [2, 1, 0]))
        .spawn_rooms(3, 5, RoomSize(min_size=(4, 4), max_size=(10, 10)))
    )
    generator.show()
"""

from .blobs import spawn_blobs
from .config import NoiseOptions, RoomSize
from .exceptions import ConfigError
from .fill import Classifier, fill_noise
from .grid import Grid
from .noise import NoiseField
from .random_source import SEED_MAX, NumpyRandomSource, random_seed
from .render import render_grid
from .rooms import Room, place_rooms


class Generator:
    """Owns a grid plus the seed, noise options and room history used on it.

    Every ``with_*`` and ``spawn_*`` method mutates the generator and returns
    it for chaining. Rooms accumulate across ``spawn_rooms`` calls, so later
    rooms never overlap earlier ones. The room and blob steps share one
    random stream that restarts whenever the seed is set.
    """

    def __init__(self, seed: int | None = None, width: int = 1, height: int = 1):
        self.grid = Grid(width, height)
        self.noise_options = NoiseOptions()
        self.rooms: list[Room] = []
        self.room_tiles: dict[Room, int] = {}
        self.blob_origins: list[int] = []
        self.with_seed(random_seed() if seed is None else seed)

    @property
    def width(self) -> int:
        return self.grid.width

    @property
    def height(self) -> int:
        return self.grid.height

    @property
    def map(self) -> list[int]:
        """Flat row-major tile values."""
        return self.grid.cells.tolist()

    def with_seed(self, seed: int) -> "Generator":
        """Set the seed for reproducible results.

        Raises:
            ConfigError: If the seed is not a 32-bit unsigned value.
        """
        if not 0 <= seed < SEED_MAX:
            raise ConfigError(f"Seed must be in [0, {SEED_MAX}), got {seed}")
        self.seed = seed
        self._rng = NumpyRandomSource(seed)
        return self

    def with_options(self, options: NoiseOptions) -> "Generator":
        """Change how noise is generated."""
        self.noise_options = options
        return self

    def with_size(self, width: int, height: int) -> "Generator":
        """Set the map size, clearing the map and its room history."""
        self.grid.with_size(width, height)
        self.rooms = []
        self.room_tiles = {}
        self.blob_origins = []
        return self

    def spawn_perlin(self, classify: Classifier) -> "Generator":
        """Fill the whole map with classified noise.

        ``classify`` receives a value in [0, 1] for every cell and returns
        the tile value to store there.
        """
        field = NoiseField(self.seed, self.noise_options)
        fill_noise(self.grid, field, classify)
        return self

    def spawn_rooms(self, tile: int, count: int, size: RoomSize) -> "Generator":
        """Attempt to place ``count`` rooms filled with ``tile``.

        Useful for points of interest. Colliding rooms are skipped, so fewer
        rooms than requested may appear.
        """
        placed = place_rooms(self.grid, self.rooms, tile, count, size, self._rng)
        self.room_tiles.update((room, tile) for room in placed)
        return self

    def spawn_terrain(
        self,
        tile: int,
        seeds: int,
        probability: float = 1.0,
        decay: float = 0.5,
    ) -> "Generator":
        """Grow ``seeds`` organic blobs of ``tile`` from random cells."""
        origins = spawn_blobs(self.grid, tile, seeds, self._rng, probability, decay)
        self.blob_origins.extend(origins)
        return self

    def get(self, x: int, y: int) -> int:
        """Return the tile value at (x, y)."""
        return self.grid.get(x, y)

    def set(self, x: int, y: int, value: int) -> None:
        """Set the tile value at (x, y)."""
        self.grid.set(x, y, value)

    def rows(self) -> list[list[int]]:
        """The map as a list of rows."""
        return self.grid.rows()

    def show(self, colors: bool = True) -> None:
        """Print the map to stdout."""
        print(render_grid(self.grid, colors=colors), end="")

    def __str__(self) -> str:
        return render_grid(self.grid)
