"""Config-driven map generation."""

from dataclasses import dataclass

import numpy as np
import structlog

from .config import MapConfig
from .fill import band_classifier
from .generator import Generator
from .grid import Grid
from .random_source import random_seed
from .rooms import Room
from .validation import ValidationResult, validate_map

logger = structlog.get_logger()


@dataclass
class GenerationResult:
    """Result of map generation."""

    grid: Grid
    rooms: list[Room]
    blob_origins: list[int]
    seed: int
    config: MapConfig
    validation: ValidationResult


def generate_map(config: MapConfig) -> GenerationResult:
    """Generate a map from configuration.

    Layers run in a fixed order: noise fill, then each room layer, then each
    blob layer. Later layers overwrite earlier ones where they overlap.

    Args:
        config: Map generation configuration.

    Returns:
        GenerationResult with the filled grid and placement history.
    """
    seed = random_seed() if config.seed is None else config.seed
    generator = Generator(seed=seed).with_size(config.width, config.height)

    logger.info(
        "map_generation_started", width=config.width, height=config.height, seed=seed
    )

    if config.noise is not None:
        generator.with_options(config.noise.options).spawn_perlin(
            band_classifier(config.noise.thresholds, config.noise.tiles)
        )

    for layer in config.rooms:
        generator.spawn_rooms(layer.tile, layer.count, layer.size)

    for layer in config.blobs:
        generator.spawn_terrain(layer.tile, layer.seeds, layer.probability, layer.decay)

    _log_tile_stats(generator.grid)
    validation = validate_map(generator.grid, generator.rooms, generator.room_tiles)

    return GenerationResult(
        grid=generator.grid,
        rooms=list(generator.rooms),
        blob_origins=list(generator.blob_origins),
        seed=seed,
        config=config,
        validation=validation,
    )


def tile_counts(grid: Grid) -> dict[int, int]:
    """Count cells per tile value."""
    values, counts = np.unique(grid.tiles, return_counts=True)
    return {int(v): int(c) for v, c in zip(values, counts)}


def _log_tile_stats(grid: Grid) -> None:
    total = grid.size
    counts = tile_counts(grid)
    logger.info("map_generated", tiles=total, distinct=len(counts))
    for value, count in counts.items():
        logger.debug("tile_share", tile=value, count=count, share=f"{count / total:.1%}")
