"""Procedural tile map generation.

Fills a grid of integer tile values with classified Perlin noise, rooms
placed without overlap, and organic blobs grown by randomized flood fill.
"""

from .blobs import spawn_blobs
from .config import MapConfig, NoiseOptions, RoomSize, load_config
from .exceptions import ConfigError, OutOfBoundsError, ProcgenError
from .fill import band_classifier, fill_noise
from .generator import Generator
from .grid import Grid
from .noise import NoiseField
from .pipeline import GenerationResult, generate_map
from .random_source import NumpyRandomSource, RandomSource
from .render import render_grid
from .rooms import Room, place_rooms
from .validation import ValidationResult, validate_map

__all__ = [
    "ConfigError",
    "GenerationResult",
    "Generator",
    "Grid",
    "MapConfig",
    "NoiseField",
    "NoiseOptions",
    "NumpyRandomSource",
    "OutOfBoundsError",
    "ProcgenError",
    "RandomSource",
    "Room",
    "RoomSize",
    "ValidationResult",
    "band_classifier",
    "fill_noise",
    "generate_map",
    "load_config",
    "place_rooms",
    "render_grid",
    "spawn_blobs",
    "validate_map",
]
