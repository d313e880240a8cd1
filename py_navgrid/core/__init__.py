"""
Core navigation grid and path search functionality.
"""

from .errors import NavGridError, TerrainError, InvalidCoordinateError
from .terrain import TerrainProvider, FlatTerrain, HeightmapTerrain
from .neighbors import GridBounds, get_neighbors
from .nav_grid import NavGrid, Cell, CellState
from .walkability import (
    tag_walkability, never_blocked, SphereOverlapOracle, SphereObstacle, BoxObstacle
)
from .path_search import (
    PathSearch, PathResult, SearchStrategy, SearchStatus, edge_cost, path_cost, run_search
)

__all__ = ['NavGridError', 'TerrainError', 'InvalidCoordinateError',
           'TerrainProvider', 'FlatTerrain', 'HeightmapTerrain',
           'GridBounds', 'get_neighbors', 'NavGrid', 'Cell', 'CellState',
           'tag_walkability', 'never_blocked', 'SphereOverlapOracle', 'SphereObstacle', 'BoxObstacle',
           'PathSearch', 'PathResult', 'SearchStrategy', 'SearchStatus', 'edge_cost', 'path_cost',
           'run_search']
