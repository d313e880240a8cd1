"""
Navigation grid built over a heightmapped terrain.

Cell data is kept in per-cell NumPy arrays indexed by ``(column, row)``,
the same way the map graphs keep ``heights`` and friends. Topology
(positions) is written once at build time; only the search-state arrays
(walkability, distance, parent, display state) change afterwards.
"""

import operator
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterator, Optional, Tuple

import numpy as np
import structlog

from .errors import InvalidCoordinateError, TerrainError
from .neighbors import Coord, GridBounds

logger = structlog.get_logger()

NO_PARENT = -1


class CellState(IntEnum):
    """Display state of a cell after a search pass."""
    DEFAULT = 0   # Walkable, not on the path
    BLOCKED = 1   # Rejected by the walkability oracle
    ON_PATH = 2   # Part of the reconstructed chain


@dataclass(frozen=True)
class Cell:
    """Read-only snapshot of one grid cell."""
    coordinates: Coord
    world_position: Tuple[float, float, float]  # (x, elevation, z)
    walkable: bool
    distance: float
    parent: Optional[Coord]
    state: CellState


@dataclass
class NavGrid:
    """Fixed-size grid of navigation cells.

    Use :meth:`build` to create one from a terrain source.
    """
    step: float
    height_offset: float

    positions: np.ndarray  # (width, height, 3) world positions (x, y, z)
    walkable: np.ndarray   # (width, height) bool
    distance: np.ndarray   # (width, height) float, +inf when unreached
    parents: np.ndarray    # (width, height, 2) parent coords, NO_PARENT when none
    states: np.ndarray     # (width, height) CellState values

    @classmethod
    def build(cls, terrain, step: float, height_offset: float) -> "NavGrid":
        """
        Build the grid by sampling terrain elevation at every cell.

        Args:
            terrain: Terrain provider with ``extent`` and ``sample_height``
            step: Spacing between cells in world units
            height_offset: Height added to every sampled elevation

        Returns:
            New grid with every cell unwalkable and unreached

        Raises:
            TerrainError: If there is no terrain, the step is not positive
                or the terrain is smaller than one step
        """
        if terrain is None:
            logger.error("Cannot build navigation grid without terrain")
            raise TerrainError("No terrain source provided")
        if step <= 0:
            logger.error("Invalid grid step", step=step)
            raise TerrainError(f"Grid step must be positive, got {step}")

        size_x, size_z = terrain.extent
        width = int(np.floor(size_x / step))
        height = int(np.floor(size_z / step))
        if width <= 0 or height <= 0:
            logger.error("Terrain too small for grid", extent=(size_x, size_z), step=step)
            raise TerrainError(
                f"Terrain extent ({size_x}, {size_z}) yields an empty grid at step {step}"
            )

        logger.info("Building navigation grid", width=width, height=height, step=step)

        positions = np.zeros((width, height, 3), dtype=np.float64)
        for c in range(width):
            for r in range(height):
                x = c * step
                z = r * step
                positions[c, r] = (x, terrain.sample_height(x, z) + height_offset, z)

        grid = cls(
            step=float(step),
            height_offset=float(height_offset),
            positions=positions,
            walkable=np.zeros((width, height), dtype=bool),
            distance=np.full((width, height), np.inf, dtype=np.float64),
            parents=np.full((width, height, 2), NO_PARENT, dtype=np.int64),
            states=np.full((width, height), CellState.DEFAULT, dtype=np.int8),
        )

        logger.info(
            "Navigation grid built",
            cells=width * height,
            min_elevation=float(positions[:, :, 1].min()),
            max_elevation=float(positions[:, :, 1].max()),
        )
        return grid

    @classmethod
    def from_settings(cls, terrain, settings) -> "NavGrid":
        """Build a grid using ``grid_step`` and ``height_offset`` from settings."""
        return cls.build(terrain, settings.grid_step, settings.height_offset)

    @property
    def width(self) -> int:
        return self.positions.shape[0]

    @property
    def height(self) -> int:
        return self.positions.shape[1]

    @property
    def bounds(self) -> GridBounds:
        return GridBounds(self.width, self.height)

    def in_bounds(self, coord: Coord) -> bool:
        return self.bounds.contains(coord)

    def validate(self, coord: Coord) -> Coord:
        """Return ``coord`` as an int pair, raising if it is off the grid.

        Components must be integers; fractional values are rejected, not truncated.
        """
        try:
            x, y = coord
            x, y = operator.index(x), operator.index(y)
        except (TypeError, ValueError):
            raise InvalidCoordinateError(coord, self.bounds) from None
        if not self.in_bounds((x, y)):
            raise InvalidCoordinateError((x, y), self.bounds)
        return x, y

    def coordinates(self) -> Iterator[Coord]:
        """Iterate over every cell coordinate, column by column."""
        for c in range(self.width):
            for r in range(self.height):
                yield c, r

    def position(self, coord: Coord) -> Tuple[float, float, float]:
        c, r = self.validate(coord)
        x, y, z = self.positions[c, r]
        return float(x), float(y), float(z)

    def parent_of(self, coord: Coord) -> Optional[Coord]:
        c, r = self.validate(coord)
        px, py = self.parents[c, r]
        if px == NO_PARENT:
            return None
        return int(px), int(py)

    def set_parent(self, coord: Coord, parent: Optional[Coord]) -> None:
        c, r = self.validate(coord)
        if parent is None:
            self.parents[c, r] = NO_PARENT
        else:
            self.parents[c, r] = self.validate(parent)

    def cell(self, coord: Coord) -> Cell:
        """Snapshot of the cell at ``coord``."""
        c, r = self.validate(coord)
        return Cell(
            coordinates=(c, r),
            world_position=self.position((c, r)),
            walkable=bool(self.walkable[c, r]),
            distance=float(self.distance[c, r]),
            parent=self.parent_of((c, r)),
            state=CellState(int(self.states[c, r])),
        )

    def reset_search_state(self) -> None:
        """Clear distances, parents and display states before a search pass."""
        self.distance.fill(np.inf)
        self.parents.fill(NO_PARENT)
        self.states.fill(CellState.DEFAULT)
