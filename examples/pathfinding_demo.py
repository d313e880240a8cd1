#!/usr/bin/env python3
"""
Demo script comparing the three search strategies on a small terrain.

The terrain is a plain split by a ridge with a single low pass, with a few
obstacles scattered around. The grid is drawn as text after each search:
``.`` walkable, ``#`` blocked, ``*`` on the path.
"""

import numpy as np

from py_navgrid.config import settings
from py_navgrid.core import (
    BoxObstacle,
    CellState,
    HeightmapTerrain,
    NavGrid,
    PathSearch,
    SearchStrategy,
    SphereObstacle,
    SphereOverlapOracle,
    path_cost,
)
from py_navgrid.utils.logging import configure_logging

SYMBOLS = {
    CellState.DEFAULT: ".",
    CellState.BLOCKED: "#",
    CellState.ON_PATH: "*",
}


def make_terrain(size: float = 2000.0, samples: int = 41) -> HeightmapTerrain:
    """Plain with a north-south ridge at x = size/2 and a pass near the middle."""
    heights = np.zeros((samples, samples))
    ridge = samples // 2
    heights[ridge - 1:ridge + 2, :] = 40.0
    pass_z = samples // 2
    heights[ridge - 1:ridge + 2, pass_z - 2:pass_z + 3] = 0.0
    return HeightmapTerrain(heights, size, size)


def render(grid: NavGrid) -> str:
    rows = []
    for r in reversed(range(grid.height)):
        rows.append("".join(SYMBOLS[CellState(int(grid.states[c, r]))] for c in range(grid.width)))
    return "\n".join(rows)


def timer_updates(search, obstacles, start, goal, interval, updates=3):
    """
    Recompute the path every ``interval`` frames, like a host frame loop.

    A new obstacle is dropped in the middle of the map on the second update.

    Returns:
        List of (frame, PathResult) pairs
    """
    results = []
    update_at_frame = 0
    for frame in range(updates * interval):
        if frame < update_at_frame:
            continue
        update_at_frame = frame + interval
        if frame == interval:
            obstacles.add(SphereObstacle(center=(1000.0, 25.0, 1000.0), radius=120.0))
        results.append((frame, search.run(start, goal, settings.strategy)))
    return results


def main():
    """Run each strategy once and then simulate a few timer-driven updates."""
    configure_logging(settings)

    print("Py-NavGrid Pathfinding Demo")
    print("=" * 40)

    terrain = make_terrain()
    grid = NavGrid.from_settings(terrain, settings)
    print(f"\nGrid: {grid.width}x{grid.height} cells, step {grid.step}")

    obstacles = SphereOverlapOracle(
        [
            SphereObstacle(center=(500.0, 25.0, 500.0), radius=150.0),
            BoxObstacle(min_corner=(1300.0, 0.0, 1200.0), max_corner=(1500.0, 100.0, 1900.0)),
        ],
        probe_radius=settings.probe_radius,
    )
    search = PathSearch(grid, obstacles)

    start = (0, 0)
    goal = (grid.width - 1, grid.height - 1)

    for strategy in SearchStrategy:
        result = search.run(start, goal, strategy)
        print(f"\n{strategy.value.upper()}:")
        print("-" * 30)
        if result.reached:
            print(f"  Cells on path: {len(result)}")
            print(f"  Path cost: {path_cost(grid, result.path):.1f}")
            print(f"  Stored goal distance: {result.distance:.1f}")
        else:
            print("  Goal unreachable")
        print(f"  Expanded: {result.expanded}, blocked cells: {result.blocked}")
        print(render(grid))

    # Host loop: recompute every update_interval_frames frames
    print(f"\nTimer-driven updates every {settings.update_interval_frames} frames")
    for frame, result in timer_updates(search, obstacles, start, goal, settings.update_interval_frames):
        status = "reached" if result.reached else "unreached"
        print(f"  frame {frame}: {settings.strategy.value} {status}, {len(result)} cells")


if __name__ == "__main__":
    main()
