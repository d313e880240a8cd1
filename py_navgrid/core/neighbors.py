"""Moore-neighborhood lookup on a rectangular grid."""

from typing import List, NamedTuple, Tuple

Coord = Tuple[int, int]

# Offsets in lookup order: x outer, z inner, both ascending
NEIGHBOR_OFFSETS: Tuple[Coord, ...] = tuple(
    (dx, dy) for dx in (-1, 0, 1) for dy in (-1, 0, 1) if (dx, dy) != (0, 0)
)


class GridBounds(NamedTuple):
    """Grid dimensions in cells."""
    width: int
    height: int

    def contains(self, coord: Coord) -> bool:
        x, y = coord
        return 0 <= x < self.width and 0 <= y < self.height


def get_neighbors(coord: Coord, bounds: GridBounds) -> List[Coord]:
    """
    Get the in-bounds neighbors of a grid cell.

    Returns up to 8 coordinates differing from ``coord`` by -1, 0 or +1 on
    each axis, excluding ``coord`` itself. The order is fixed so that
    searches break ties the same way on every run.

    Args:
        coord: (column, row) of the cell
        bounds: Grid dimensions

    Returns:
        List of neighbor coordinates
    """
    x, y = coord
    neighbors = []
    for dx, dy in NEIGHBOR_OFFSETS:
        nx, ny = x + dx, y + dy
        if 0 <= nx < bounds.width and 0 <= ny < bounds.height:
            neighbors.append((nx, ny))
    return neighbors
