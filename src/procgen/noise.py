"""Perlin-style gradient noise with fractal octave combination.

The lattice hash uses a seeded permutation of ``0..255`` duplicated to 512
entries so corner lookups never wrap. Gradients are the simplified one-bit
set: even hashes select ``-dx``, odd hashes select ``dy``.

All functions accept scalars or numpy arrays and broadcast.
"""

import math

import numpy as np
from numpy.typing import ArrayLike, NDArray

from .config import NoiseOptions
from .random_source import NumpyRandomSource

PERMUTATION_SIZE = 256

# Empirical remap of the summed octaves onto [0, 1], measured for four
# octaves with fallout 0.5: (sum - 0.35) / 0.25 with amplitudes 0.5..0.0625.
_REFERENCE_AMPLITUDES = [0.5 * 0.5**i for i in range(4)]
_REFERENCE_LOW = 0.35
_REFERENCE_SPAN = 0.25
_CENTER_RATIO = (_REFERENCE_LOW + _REFERENCE_SPAN / 2) / sum(_REFERENCE_AMPLITUDES)
_SPREAD_RATIO = (_REFERENCE_SPAN / 2) / math.sqrt(
    sum(a * a for a in _REFERENCE_AMPLITUDES)
)


def fade(t: ArrayLike) -> NDArray[np.float64]:
    """Quintic fade curve 6t^5 - 15t^4 + 10t^3."""
    t = np.asarray(t, dtype=np.float64)
    return t * t * t * (t * (t * 6.0 - 15.0) + 10.0)


def lerp(t: ArrayLike, a: ArrayLike, b: ArrayLike) -> NDArray[np.float64]:
    """Linear interpolation from a to b."""
    return np.asarray(a + t * (np.asarray(b) - a), dtype=np.float64)


def grad(hash_: ArrayLike, dx: ArrayLike, dy: ArrayLike) -> NDArray[np.float64]:
    """Gradient contribution of a lattice corner."""
    odd = (np.asarray(hash_) & 1) == 1
    return np.where(odd, dy, np.negative(dx)).astype(np.float64)


def calibration(octaves: int, fallout: float) -> tuple[float, float]:
    """Return (low, span) mapping an octave sum onto [0, 1].

    The reference four-octave constants are scaled to other settings: the
    center follows the total amplitude and the spread follows the
    root-sum-square amplitude, since octaves add roughly independent
    variance. For four octaves of fallout 0.5 this yields exactly the
    reference remap (scaled by the starting amplitude).

    Args:
        octaves: Number of octaves summed.
        fallout: Amplitude multiplier between octaves.

    Returns:
        Tuple of (low, span) so that ``(sum - low) / span`` lands in [0, 1].
    """
    amplitudes = [fallout**i for i in range(octaves)]
    center = _CENTER_RATIO * sum(amplitudes)
    half_span = _SPREAD_RATIO * math.sqrt(sum(a * a for a in amplitudes))
    return center - half_span, 2.0 * half_span


def redistribute(value: ArrayLike, exponent: float) -> NDArray[np.float64]:
    """Apply a sign-preserving power to a [0, 1] value around its midpoint.

    The value is mapped to [-1, 1], raised to ``exponent`` keeping its sign,
    and mapped back. Exponents above 1 push values toward the middle band,
    below 1 toward the extremes.
    """
    signed = 2.0 * np.asarray(value, dtype=np.float64) - 1.0
    shaped = np.sign(signed) * np.abs(signed) ** exponent
    return (shaped + 1.0) / 2.0


def _shuffled_permutation(seed: int) -> list[int]:
    rng = NumpyRandomSource(seed)
    perm = list(range(PERMUTATION_SIZE))
    for i in range(PERMUTATION_SIZE - 1, 0, -1):
        j = rng.next_range(0, i + 1)
        perm[i], perm[j] = perm[j], perm[i]
    return perm


class NoiseField:
    """Deterministic 2D noise field.

    Immutable after construction: sampling is a pure function of the
    coordinates, so it is safe to evaluate over any partition of the grid.
    """

    def __init__(
        self,
        seed: int,
        options: NoiseOptions | None = None,
        permutation: list[int] | None = None,
    ):
        """Initialize NoiseField.

        Args:
            seed: Seed for the permutation shuffle.
            options: Octave and redistribution settings.
            permutation: Explicit permutation of 0..255, overriding the seed.
        """
        if permutation is None:
            permutation = _shuffled_permutation(seed)
        elif sorted(permutation) != list(range(PERMUTATION_SIZE)):
            raise ValueError(
                f"Permutation must contain each of 0..{PERMUTATION_SIZE - 1} once"
            )
        self.seed = seed
        self.options = options or NoiseOptions()
        self.perm = np.array(list(permutation) * 2, dtype=np.int64)
        self.perm.setflags(write=False)
        self._low, self._span = calibration(
            self.options.octaves, self.options.fallout
        )

    def noise(self, x: ArrayLike, y: ArrayLike) -> NDArray[np.float64]:
        """Single-octave noise, roughly in [-1, 1]."""
        x = np.asarray(x, dtype=np.float64)
        y = np.asarray(y, dtype=np.float64)
        x_floor = np.floor(x)
        y_floor = np.floor(y)
        x0 = x_floor.astype(np.int64) & 255
        y0 = y_floor.astype(np.int64) & 255
        dx = x - x_floor
        dy = y - y_floor

        fx = fade(dx)
        fy = fade(dy)
        perm = self.perm
        p0 = perm[x0] + y0
        p1 = perm[x0 + 1] + y0

        return lerp(
            fy,
            lerp(fx, grad(perm[p0], dx, dy), grad(perm[p1], dx - 1.0, dy)),
            lerp(
                fx,
                grad(perm[p0 + 1], dx, dy - 1.0),
                grad(perm[p1 + 1], dx - 1.0, dy - 1.0),
            ),
        )

    def octave_sum(self, x: ArrayLike, y: ArrayLike) -> NDArray[np.float64]:
        """Raw fBm sum: each octave doubles frequency and scales amplitude."""
        x = np.asarray(x, dtype=np.float64)
        y = np.asarray(y, dtype=np.float64)
        total = np.zeros(np.broadcast(x, y).shape, dtype=np.float64)
        amplitude = 1.0
        k = 1.0
        for _ in range(self.options.octaves):
            total += amplitude * ((1.0 + self.noise(k * x, k * y)) / 2.0)
            amplitude *= self.options.fallout
            k *= 2.0
        return total

    def sample(self, x: ArrayLike, y: ArrayLike) -> NDArray[np.float64]:
        """Octave-combined, calibrated and redistributed noise in [0, 1].

        Coordinates are used as given; callers apply frequency.
        """
        normalized = np.clip(
            (self.octave_sum(x, y) - self._low) / self._span, 0.0, 1.0
        )
        return redistribute(normalized, self.options.redistribution)

    def value(self, x: float, y: float) -> float:
        """Scalar convenience wrapper around ``sample``."""
        return float(self.sample(x, y))
