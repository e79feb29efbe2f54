"""Generation configuration models and TOML loading."""

import tomllib
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError, model_validator

from .exceptions import ConfigError
from .random_source import SEED_MAX

MAX_DECAY = 0.5


class ConfigModel(BaseModel):
    """Base for config models: invalid values raise ConfigError."""

    def __init__(self, **data):
        try:
            super().__init__(**data)
        except ValidationError as e:
            raise ConfigError(f"Invalid {type(self).__name__}: {e}") from e


class NoiseOptions(ConfigModel, frozen=True):
    """How noise should behave.

    See https://www.redblobgames.com/maps/terrain-from-noise/ for background
    on each option.
    """

    frequency: float = Field(
        default=1.0, gt=0, description="Higher frequency zooms out of the noise"
    )
    redistribution: float = Field(
        default=1.0,
        ge=0,
        description="Values above 1 pull toward the middle band, below 1 "
        "toward the extremes",
    )
    octaves: int = Field(default=1, ge=1, description="More octaves add detail")
    fallout: float = Field(
        default=0.5, gt=0, lt=1, description="Amplitude multiplier per octave"
    )


class RoomSize(ConfigModel, frozen=True):
    """Size constraints for spawning rooms.

    Sampled widths and heights are drawn from ``[min_size, max_size)``;
    tuples are ``(width, height)``.
    """

    min_size: tuple[int, int]
    max_size: tuple[int, int]

    @model_validator(mode="after")
    def _check_bounds(self) -> "RoomSize":
        if min(self.min_size) < 1:
            raise ValueError(f"min_size must be at least 1, got {self.min_size}")
        if not (
            self.min_size[0] < self.max_size[0] and self.min_size[1] < self.max_size[1]
        ):
            raise ValueError(
                f"min_size {self.min_size} must be less than max_size "
                f"{self.max_size} componentwise"
            )
        return self


class NoiseLayerConfig(ConfigModel):
    """Noise fill classified into bands.

    A value above ``thresholds[i]`` (checked in order) becomes ``tiles[i]``;
    anything below every threshold becomes ``tiles[-1]``.
    """

    options: NoiseOptions = Field(default_factory=NoiseOptions)
    thresholds: list[float] = Field(default_factory=lambda: [0.66, 0.33])
    tiles: list[int] = Field(default_factory=lambda: [2, 1, 0])

    @model_validator(mode="after")
    def _check_bands(self) -> "NoiseLayerConfig":
        if len(self.tiles) != len(self.thresholds) + 1:
            raise ValueError(
                f"Expected {len(self.thresholds) + 1} tiles for "
                f"{len(self.thresholds)} thresholds, got {len(self.tiles)}"
            )
        return self


class RoomLayerConfig(ConfigModel):
    """A batch of room placement attempts."""

    tile: int = Field(default=1, ge=0, description="Tile value stamped into rooms")
    count: int = Field(default=5, ge=0, description="Number of placement attempts")
    min_size: tuple[int, int] = (4, 4)
    max_size: tuple[int, int] = (10, 10)

    @property
    def size(self) -> RoomSize:
        return RoomSize(min_size=self.min_size, max_size=self.max_size)

    @model_validator(mode="after")
    def _check_size(self) -> "RoomLayerConfig":
        RoomSize(min_size=self.min_size, max_size=self.max_size)
        return self


class BlobLayerConfig(ConfigModel):
    """A batch of organic blobs grown from random seed cells."""

    tile: int = Field(default=3, ge=0, description="Tile value painted by blobs")
    seeds: int = Field(default=3, ge=0, description="Number of blob origins")
    probability: float = Field(
        default=1.0, ge=0, le=1, description="Spread probability of first ring"
    )
    decay: float = Field(
        default=0.5,
        ge=0,
        le=MAX_DECAY,
        description="Probability multiplier per ring, at most halving",
    )


class MapConfig(ConfigModel):
    """Complete map generation configuration."""

    seed: int | None = Field(
        default=None, ge=0, lt=SEED_MAX, description="Seed, random when omitted"
    )
    width: int = Field(default=40, gt=0, description="Map width in tiles")
    height: int = Field(default=10, gt=0, description="Map height in tiles")

    noise: NoiseLayerConfig | None = None
    rooms: list[RoomLayerConfig] = []
    blobs: list[BlobLayerConfig] = []


def parse_config(data: dict) -> MapConfig:
    """Validate a raw mapping into a MapConfig.

    Raises:
        ConfigError: If the mapping does not describe a valid config.
    """
    try:
        return MapConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid map config: {e}") from e


def load_config(config_path: Path) -> MapConfig:
    """Load configuration from a TOML file.

    Args:
        config_path: Path to the TOML config file.

    Returns:
        Parsed MapConfig object.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        ConfigError: If TOML is malformed or values are invalid.
    """
    with open(config_path, "rb") as f:
        try:
            data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Malformed TOML in {config_path}: {e}") from e
    return parse_config(data)


def _configs_dir() -> Path:
    return Path(__file__).parent.parent.parent / "configs"


def find_config(name: str) -> Path:
    """Find a config file by name.

    Searches in the following order:
    1. Exact path if name contains path separator or ends with .toml
    2. configs/{name}.toml

    Raises:
        FileNotFoundError: If config file is not found.
    """
    if "/" in name or name.endswith(".toml"):
        path = Path(name)
        if path.exists():
            return path
        raise FileNotFoundError(f"Config file not found: {name}")

    config_path = _configs_dir() / f"{name}.toml"
    if config_path.exists():
        return config_path

    raise FileNotFoundError(
        f"Config '{name}' not found in {_configs_dir()}. "
        f"Available configs: {list_configs()}"
    )


def list_configs() -> list[str]:
    """List available config names."""
    configs_dir = _configs_dir()
    if not configs_dir.exists():
        return []
    return sorted(p.stem for p in configs_dir.glob("*.toml"))
