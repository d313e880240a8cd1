"""Exceptions raised by the navigation grid and path search."""

from typing import Optional, Tuple


class NavGridError(Exception):
    """Base class for navigation grid errors."""


class TerrainError(NavGridError):
    """Raised when no usable grid can be built from the terrain source.

    This is fatal: nothing else in the package can operate without a grid.
    """


class InvalidCoordinateError(NavGridError, IndexError):
    """Raised when a start or goal coordinate lies outside the grid."""

    def __init__(self, coord: Tuple[int, int], bounds: Optional[Tuple[int, int]] = None):
        self.coord = coord
        self.bounds = bounds
        if bounds is None:
            message = f"Invalid grid coordinate {coord}"
        else:
            message = f"Grid coordinate {coord} outside bounds {bounds[0]}x{bounds[1]}"
        super().__init__(message)
