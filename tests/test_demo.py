"""Tests for the timer-driven update loop in the pathfinding demo."""

import importlib.util
from pathlib import Path

import pytest

from py_navgrid.core.nav_grid import NavGrid
from py_navgrid.core.path_search import PathSearch
from py_navgrid.core.terrain import FlatTerrain
from py_navgrid.core.walkability import SphereOverlapOracle

DEMO_PATH = Path(__file__).resolve().parent.parent / "examples" / "pathfinding_demo.py"


@pytest.fixture(scope="module")
def demo():
    spec = importlib.util.spec_from_file_location("pathfinding_demo", DEMO_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


class TestTimerUpdates:
    """Test the host-style recompute loop."""

    @pytest.fixture
    def search(self):
        grid = NavGrid.build(FlatTerrain(2000, 2000), step=100, height_offset=0)
        oracle = SphereOverlapOracle(probe_radius=1.0)
        return PathSearch(grid, oracle), oracle

    def test_runs_once_per_interval(self, demo, search):
        path_search, oracle = search
        results = demo.timer_updates(path_search, oracle, (0, 0), (19, 19), interval=5)
        assert [frame for frame, _ in results] == [0, 5, 10]
        assert all(result.reached for _, result in results)

    def test_obstacle_added_once(self, demo, search):
        path_search, oracle = search
        results = demo.timer_updates(path_search, oracle, (0, 0), (19, 19), interval=5, updates=4)

        assert len(oracle.obstacles) == 1
        assert results[0][1].blocked == 0
        blocked_after = [result.blocked for _, result in results[1:]]
        assert blocked_after[0] > 0
        assert len(set(blocked_after)) == 1
