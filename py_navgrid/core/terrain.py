"""
Terrain height sources for navigation grid construction.

A terrain provider exposes its horizontal extent and a height sampler.
The grid samples it once per cell when it is built and never again.
"""

from typing import Protocol, Tuple

import numpy as np
import structlog

from .errors import TerrainError

logger = structlog.get_logger()


class TerrainProvider(Protocol):
    """Anything the grid can be built over."""

    @property
    def extent(self) -> Tuple[float, float]:
        """Terrain size as (size_x, size_z) in world units."""
        ...

    def sample_height(self, x: float, z: float) -> float:
        """Elevation at world position (x, z)."""
        ...


class FlatTerrain:
    """Terrain with a single constant elevation."""

    def __init__(self, size_x: float, size_z: float, elevation: float = 0.0):
        if size_x <= 0 or size_z <= 0:
            raise TerrainError(f"Terrain extent must be positive, got ({size_x}, {size_z})")
        self.size_x = float(size_x)
        self.size_z = float(size_z)
        self.elevation = float(elevation)

    @property
    def extent(self) -> Tuple[float, float]:
        return self.size_x, self.size_z

    def sample_height(self, x: float, z: float) -> float:
        return self.elevation


class HeightmapTerrain:
    """
    Heightmap stretched over a rectangular extent.

    The heightmap is indexed as ``heights[ix, iz]``: the first axis runs along
    world x and the second along world z. Sample ``(0, 0)`` sits at the world
    origin and the last sample sits at ``(size_x, size_z)``.

    Heights between samples are bilinearly interpolated. Positions outside
    the extent are clamped to the nearest edge.
    """

    def __init__(self, heights: np.ndarray, size_x: float, size_z: float):
        """
        Initialize the terrain.

        Args:
            heights: 2D array of elevations, at least 1x1
            size_x: World extent along x
            size_z: World extent along z

        Raises:
            TerrainError: If the heightmap is not a non-empty 2D array or
                the extent is not positive
        """
        heights = np.asarray(heights, dtype=np.float64)
        if heights.ndim != 2 or heights.size == 0:
            raise TerrainError(f"Heightmap must be a non-empty 2D array, got shape {heights.shape}")
        if size_x <= 0 or size_z <= 0:
            raise TerrainError(f"Terrain extent must be positive, got ({size_x}, {size_z})")

        self.heights = heights
        self.size_x = float(size_x)
        self.size_z = float(size_z)

        logger.debug(
            "Heightmap terrain created",
            samples=heights.shape,
            extent=(self.size_x, self.size_z),
            min_height=float(heights.min()),
            max_height=float(heights.max()),
        )

    @property
    def extent(self) -> Tuple[float, float]:
        return self.size_x, self.size_z

    def _to_sample_space(self, value: float, size: float, samples: int) -> float:
        """Map a world coordinate onto fractional sample indices."""
        if samples == 1:
            return 0.0
        t = min(max(value / size, 0.0), 1.0)
        return t * (samples - 1)

    def sample_height(self, x: float, z: float) -> float:
        """
        Sample the interpolated elevation at a world position.

        Args:
            x: World x coordinate
            z: World z coordinate

        Returns:
            Elevation at (x, z)
        """
        nx, nz = self.heights.shape
        fx = self._to_sample_space(x, self.size_x, nx)
        fz = self._to_sample_space(z, self.size_z, nz)

        x0 = int(np.floor(fx))
        z0 = int(np.floor(fz))
        x1 = min(x0 + 1, nx - 1)
        z1 = min(z0 + 1, nz - 1)
        tx = fx - x0
        tz = fz - z0

        h00 = self.heights[x0, z0]
        h10 = self.heights[x1, z0]
        h01 = self.heights[x0, z1]
        h11 = self.heights[x1, z1]

        near = h00 * (1 - tx) + h10 * tx
        far = h01 * (1 - tx) + h11 * tx
        return float(near * (1 - tz) + far * tz)
