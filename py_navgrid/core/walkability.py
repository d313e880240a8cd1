"""
Walkability tagging for navigation cells.

The grid does not know how obstacles are detected. Before every search pass
each cell's world position is handed to an ``is_blocked`` predicate and the
verdict is stored as the cell's walkability for that pass.

A simple sphere-overlap oracle is provided for hosts without a physics
engine of their own.
"""

import math
from dataclasses import dataclass
from typing import Callable, Iterable, List, Sequence, Tuple, Union

import structlog

from .nav_grid import CellState, NavGrid

logger = structlog.get_logger()

Position = Tuple[float, float, float]
BlockedPredicate = Callable[[Position], bool]


def never_blocked(position: Position) -> bool:
    """Predicate treating every position as free."""
    return False


def tag_walkability(grid: NavGrid, is_blocked: BlockedPredicate) -> int:
    """
    Re-tag every cell of the grid as walkable or blocked.

    The predicate is called exactly once per cell. Any exception it raises
    propagates to the caller.

    Args:
        grid: Grid to tag
        is_blocked: Predicate returning True when a world position is obstructed

    Returns:
        Number of blocked cells
    """
    blocked = 0
    for c, r in grid.coordinates():
        if is_blocked(grid.position((c, r))):
            grid.walkable[c, r] = False
            grid.states[c, r] = CellState.BLOCKED
            blocked += 1
        else:
            grid.walkable[c, r] = True
            grid.states[c, r] = CellState.DEFAULT

    logger.debug("Walkability tagged", cells=grid.width * grid.height, blocked=blocked)
    return blocked


@dataclass(frozen=True)
class SphereObstacle:
    """Spherical obstacle."""
    center: Position
    radius: float

    def overlaps_sphere(self, point: Position, radius: float) -> bool:
        return math.dist(self.center, point) <= self.radius + radius


@dataclass(frozen=True)
class BoxObstacle:
    """Axis-aligned box obstacle given by its two opposite corners."""
    min_corner: Position
    max_corner: Position

    def overlaps_sphere(self, point: Position, radius: float) -> bool:
        # Squared distance from the point to the closest point of the box
        dist_sq = 0.0
        for p, lo, hi in zip(point, self.min_corner, self.max_corner):
            if p < lo:
                dist_sq += (lo - p) ** 2
            elif p > hi:
                dist_sq += (p - hi) ** 2
        return dist_sq <= radius * radius


Obstacle = Union[SphereObstacle, BoxObstacle]


class SphereOverlapOracle:
    """
    Blocks a position when a probe sphere around it touches any obstacle.

    Instances are callable and can be passed directly as the ``is_blocked``
    predicate of a search.
    """

    def __init__(self, obstacles: Iterable[Obstacle] = (), probe_radius: float = 1.0):
        if probe_radius < 0:
            raise ValueError(f"probe_radius must be non-negative, got {probe_radius}")
        self.obstacles: List[Obstacle] = list(obstacles)
        self.probe_radius = probe_radius

    def add(self, obstacle: Obstacle) -> None:
        self.obstacles.append(obstacle)

    def remove(self, obstacle: Obstacle) -> None:
        self.obstacles.remove(obstacle)

    def clear(self) -> None:
        self.obstacles.clear()

    def __call__(self, position: Sequence[float]) -> bool:
        point = tuple(position)
        return any(o.overlaps_sphere(point, self.probe_radius) for o in self.obstacles)
