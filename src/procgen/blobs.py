"""Organic terrain blobs grown by randomized flood fill.

From each origin the four neighbours are tried in turn; a neighbour that
passes its Bernoulli draw is painted and expanded with the probability
multiplied by ``decay`` (at most 0.5). Expansion runs off an explicit stack in the same
depth-first order a recursive fill would use, so random draws are consumed
identically without recursion limits.

Eligibility keeps a long-standing edge quirk: a candidate is rejected when
its column is 0, so column 0 only ever receives paint as a blob origin.
"""

import structlog

from .config import MAX_DECAY
from .exceptions import ConfigError
from .grid import Grid
from .random_source import RandomSource

logger = structlog.get_logger()


def _candidates(index: int, width: int) -> list[int]:
    """Neighbour indices in draw order: left, right, up, down."""
    return [max(index - 1, 0), index + 1, max(index - width, 0), index + width]


def _check_spread(probability: float, decay: float) -> None:
    if not 0.0 <= probability <= 1.0:
        raise ConfigError(f"Probability must be in [0, 1], got {probability}")
    # Above halving the worklist can grow exponentially
    if not 0.0 <= decay <= MAX_DECAY:
        raise ConfigError(f"Decay must be in [0, {MAX_DECAY}], got {decay}")


def _eligible(index: int, candidate: int, width: int, size: int) -> bool:
    if not 0 < candidate < size:
        return False
    if candidate % width == 0:
        return False
    # Horizontal steps must stay on the same row
    if abs(candidate - index) == 1 and candidate // width != index // width:
        return False
    return True


def grow_blob(
    grid: Grid,
    origin: int,
    tile: int,
    rng: RandomSource,
    probability: float = 1.0,
    decay: float = 0.5,
) -> int:
    """Paint a blob starting at a flat cell index.

    Returns:
        Number of paint operations performed, origin included.

    Raises:
        ConfigError: If probability or decay are out of range.
    """
    _check_spread(probability, decay)
    cells = grid.cells
    width = grid.width
    size = grid.size

    cells[origin] = tile
    painted = 1

    # Each entry is (parent index, candidate index, probability), pushed in
    # reverse so pops follow draw order.
    stack = [(origin, c, probability) for c in reversed(_candidates(origin, width))]
    while stack:
        parent, candidate, p = stack.pop()
        if not _eligible(parent, candidate, width, size):
            continue
        if not rng.next_bool(p):
            continue
        cells[candidate] = tile
        painted += 1
        child_p = p * decay
        stack.extend(
            (candidate, c, child_p) for c in reversed(_candidates(candidate, width))
        )
    return painted


def spawn_blobs(
    grid: Grid,
    tile: int,
    seed_count: int,
    rng: RandomSource,
    probability: float = 1.0,
    decay: float = 0.5,
) -> list[int]:
    """Grow ``seed_count`` blobs from uniformly random origins.

    Args:
        grid: Grid to paint in place.
        tile: Tile value painted by every blob.
        seed_count: Number of blobs to grow.
        rng: Random source.
        probability: Spread probability for the origin's neighbours.
        decay: Multiplier applied to the probability at each ring.

    Returns:
        Flat indices of the blob origins, in spawn order.

    Raises:
        ConfigError: If counts are negative or probabilities out of range.
    """
    if tile < 0:
        raise ConfigError(f"Tile value must be non-negative, got {tile}")
    if seed_count < 0:
        raise ConfigError(f"Seed count must be non-negative, got {seed_count}")
    _check_spread(probability, decay)

    origins: list[int] = []
    painted = 0
    for _ in range(seed_count):
        origin = rng.next_range(0, grid.size)
        origins.append(origin)
        painted += grow_blob(grid, origin, tile, rng, probability, decay)

    logger.info("blobs_spawned", tile=tile, seeds=seed_count, painted=painted)
    return origins
