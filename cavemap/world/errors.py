"""Exceptions raised by the map-generation engine."""


class MapError(Exception):
    """Base exception for map generation errors."""


class InvalidDimensionsError(MapError, ValueError):
    """Raised when a grid is requested with a non-positive height or width."""


class OutOfBoundsError(MapError, IndexError):
    """Raised when a coordinate falls outside the grid.

    Neighbour resolution never produces such coordinates, so seeing this
    error means a caller has a logic bug.
    """


class UnknownPipelineError(MapError, KeyError):
    """Raised when a generation pipeline is requested by an unknown name."""
