"""Post-generation validation."""

import numpy as np
import structlog
from scipy import ndimage

from .grid import Grid
from .rooms import Room

logger = structlog.get_logger()

# 4-connected neighbourhood, matching blob expansion
_CROSS = ndimage.generate_binary_structure(2, 1)


class ValidationResult:
    """Result of map validation."""

    def __init__(self) -> None:
        self.errors: list[str] = []
        self.warnings: list[str] = []
        self.passed = True

    def add_error(self, message: str) -> None:
        """Add validation error."""
        self.errors.append(message)
        self.passed = False

    def add_warning(self, message: str) -> None:
        """Add validation warning."""
        self.warnings.append(message)


def validate_map(
    grid: Grid,
    rooms: list[Room],
    room_tiles: dict[Room, int] | None = None,
) -> ValidationResult:
    """Validate a generated grid against its room history.

    Args:
        grid: Generated grid.
        rooms: Accepted rooms, in placement order.
        room_tiles: Optional tile value each room was stamped with; rooms
            whose cells no longer all carry it are reported as warnings.

    Returns:
        ValidationResult with any errors/warnings.
    """
    result = ValidationResult()

    _check_containment(grid, rooms, result)
    _check_overlap(rooms, result)
    if room_tiles:
        _check_room_tiles(grid, room_tiles, result)

    if result.passed:
        logger.info("map_validation_passed", rooms=len(rooms))
    else:
        logger.warning("map_validation_failed", errors=result.errors)
    for warning in result.warnings:
        logger.warning("map_validation_warning", message=warning)

    return result


def _check_containment(grid: Grid, rooms: list[Room], result: ValidationResult) -> None:
    """Check every room lies inside the grid."""
    for room in rooms:
        if not room.within(grid.width, grid.height):
            result.add_error(f"Room {room} extends outside {grid.width}x{grid.height}")


def _check_overlap(rooms: list[Room], result: ValidationResult) -> None:
    """Check no two rooms intersect."""
    for i, a in enumerate(rooms):
        for b in rooms[i + 1 :]:
            if a.intersects(b):
                result.add_error(f"Rooms {a} and {b} overlap")


def _check_room_tiles(
    grid: Grid, room_tiles: dict[Room, int], result: ValidationResult
) -> None:
    """Warn about rooms partially overwritten by later layers."""
    for room, tile in room_tiles.items():
        if not room.within(grid.width, grid.height):
            continue
        region = grid.tiles[room.y : room.y2, room.x : room.x2]
        changed = int(np.count_nonzero(region != tile))
        if changed:
            result.add_warning(f"Room {room} has {changed} overwritten cells")


def label_components(grid: Grid, tile: int) -> tuple[np.ndarray, int]:
    """Label 4-connected regions of a tile value.

    Returns:
        Tuple of (label array shaped like the grid, number of components).
    """
    labeled, count = ndimage.label(grid.tiles == tile, structure=_CROSS)
    return labeled, int(count)


def count_components(grid: Grid, tile: int) -> int:
    """Number of 4-connected regions holding a tile value."""
    return label_components(grid, tile)[1]
