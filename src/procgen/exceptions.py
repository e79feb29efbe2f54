"""Custom exceptions for tile map generation."""


class ProcgenError(Exception):
    """Base exception for map generation errors."""

    pass


class ConfigError(ProcgenError, ValueError):
    """Raised when generation parameters are invalid."""

    pass


class OutOfBoundsError(ProcgenError, IndexError):
    """Raised when a coordinate falls outside the grid."""

    pass
