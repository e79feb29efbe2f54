"""Room placement: non-overlapping rectangles stamped into a grid."""

from dataclasses import dataclass

import structlog

from .config import RoomSize
from .exceptions import ConfigError
from .grid import Grid
from .random_source import RandomSource

logger = structlog.get_logger()


@dataclass(frozen=True)
class Room:
    """Axis-aligned room with top-left corner (x, y)."""

    x: int
    y: int
    width: int
    height: int

    @property
    def x2(self) -> int:
        """Exclusive right bound."""
        return self.x + self.width

    @property
    def y2(self) -> int:
        """Exclusive bottom bound."""
        return self.y + self.height

    def intersects(self, other: "Room") -> bool:
        """Inclusive overlap test: rooms that merely touch also intersect."""
        return (
            self.x <= other.x2
            and self.x2 >= other.x
            and self.y <= other.y2
            and self.y2 >= other.y
        )

    def within(self, width: int, height: int) -> bool:
        """Check the room lies fully inside a width x height grid."""
        return self.x >= 0 and self.y >= 0 and self.x2 <= width and self.y2 <= height

    def cells(self):
        """Yield every (x, y) covered by the room."""
        for y in range(self.y, self.y2):
            for x in range(self.x, self.x2):
                yield x, y


def _check_fits(grid: Grid, size: RoomSize) -> None:
    # Largest sampled room is max_size - 1 on each axis
    max_w = size.max_size[0] - 1
    max_h = size.max_size[1] - 1
    if max_w > grid.width or max_h > grid.height:
        raise ConfigError(
            f"Rooms up to {max_w}x{max_h} cannot fit in grid "
            f"{grid.width}x{grid.height}"
        )


def spawn_room(
    grid: Grid,
    rooms: list[Room],
    tile: int,
    size: RoomSize,
    rng: RandomSource,
) -> Room | None:
    """Attempt to place a single room.

    Returns:
        The placed room, or None if the candidate collided.
    """
    x = rng.next_range(0, grid.width)
    y = rng.next_range(0, grid.height)
    width = rng.next_range(size.min_size[0], size.max_size[0])
    height = rng.next_range(size.min_size[1], size.max_size[1])

    # Shift the room back onto the grid rather than shrinking it
    if x + width > grid.width:
        x = grid.width - width
    if y + height > grid.height:
        y = grid.height - height

    room = Room(x, y, width, height)
    for other in rooms:
        if room.intersects(other):
            logger.debug("room_rejected_overlap", room=room, other=other)
            return None

    grid.fill_rect(room.x, room.y, room.width, room.height, tile)
    rooms.append(room)
    return room


def place_rooms(
    grid: Grid,
    rooms: list[Room],
    tile: int,
    count: int,
    size: RoomSize,
    rng: RandomSource,
) -> list[Room]:
    """Make ``count`` best-effort placement attempts.

    Colliding candidates are discarded without retry, so fewer than
    ``count`` rooms may be placed. Accepted rooms are appended to ``rooms``,
    which callers keep across calls so later rooms avoid earlier ones.

    Args:
        grid: Grid to stamp rooms into.
        rooms: Room history checked for overlap and extended in place.
        tile: Tile value written into every room cell.
        count: Number of placement attempts.
        size: Bounds for sampled room dimensions.
        rng: Random source.

    Returns:
        Rooms placed by this call, in placement order.

    Raises:
        ConfigError: If rooms could not fit in the grid or inputs are negative.
    """
    if tile < 0:
        raise ConfigError(f"Tile value must be non-negative, got {tile}")
    if count < 0:
        raise ConfigError(f"Room count must be non-negative, got {count}")
    _check_fits(grid, size)

    placed: list[Room] = []
    for _ in range(count):
        room = spawn_room(grid, rooms, tile, size, rng)
        if room is not None:
            placed.append(room)

    logger.info(
        "rooms_placed",
        tile=tile,
        attempted=count,
        placed=len(placed),
        total=len(rooms),
    )
    return placed
