"""
Shortest-path search over a navigation grid.

Three strategies share a single search loop and differ only in how the
frontier is ordered and in the threshold used to relax a neighbor:

- ``UNWEIGHTED``: FIFO frontier, relaxation against true edge costs. This is
  a weak, approximate mode. It finds the fewest-cells path when every edge
  costs the same, and otherwise only guarantees *some* walkable chain.
- ``DIJKSTRA``: min-distance frontier, uniform-cost relaxation. Optimal.
- ``ASTAR``: min-distance frontier, with the straight-line distance to the
  goal added to the relaxation threshold *and stored in the cell's
  distance*. The stored distance is therefore not a pure path cost once a
  cell has been relaxed, and later comparisons in the same pass build on
  the inflated value. This differs from textbook A* and is kept as is.

Edge cost between adjacent cells A and B::

    cost(A, B) = |A - B| + 1000 * |A.y - B.y|

where ``|A - B|`` is the full 3D distance, so elevation change is counted
both inside the distance and again through the penalty term.

The frontier keeps duplicates: a cell is re-queued every time its distance
improves, and there is no visited set.
"""

import heapq
import math
from collections import deque
from dataclasses import dataclass
from enum import Enum
from itertools import count
from typing import Callable, Deque, Dict, List, Optional, Sequence, Tuple, Union

import structlog

from .nav_grid import CellState, NavGrid
from .neighbors import Coord, get_neighbors
from .walkability import BlockedPredicate, never_blocked, tag_walkability

logger = structlog.get_logger()

ELEVATION_PENALTY = 1000.0

Position = Sequence[float]


class SearchStrategy(str, Enum):
    """Available search strategies."""
    UNWEIGHTED = "unweighted"
    DIJKSTRA = "dijkstra"
    ASTAR = "astar"

    @classmethod
    def parse(cls, value: Union["SearchStrategy", str]) -> "SearchStrategy":
        """Accept a strategy member or its (case-insensitive) name."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            names = ", ".join(s.value for s in cls)
            raise ValueError(f"Unknown search strategy {value!r}, expected one of: {names}") from None


class SearchStatus(str, Enum):
    """Lifecycle of a search pass."""
    IDLE = "idle"
    RUNNING = "running"
    DONE = "done"
    UNREACHED = "unreached"


def edge_cost(a: Position, b: Position) -> float:
    """Cost of moving between two adjacent world positions."""
    return math.dist(a, b) + ELEVATION_PENALTY * abs(a[1] - b[1])


def path_cost(grid: NavGrid, path: Sequence[Coord]) -> float:
    """Sum of edge costs along a chain of cells, without any heuristic."""
    total = 0.0
    for a, b in zip(path, path[1:]):
        total += edge_cost(grid.position(a), grid.position(b))
    return total


class FifoFrontier:
    """Insertion-ordered frontier."""

    def __init__(self):
        self._queue: Deque[Coord] = deque()

    def push(self, coord: Coord, distance: float) -> None:
        self._queue.append(coord)

    def pop(self) -> Coord:
        return self._queue.popleft()

    def __len__(self) -> int:
        return len(self._queue)


class PriorityFrontier:
    """Frontier ordered by distance at insertion time, ties by insertion order."""

    def __init__(self):
        self._heap: List[Tuple[float, int, Coord]] = []
        self._counter = count()

    def push(self, coord: Coord, distance: float) -> None:
        heapq.heappush(self._heap, (distance, next(self._counter), coord))

    def pop(self) -> Coord:
        return heapq.heappop(self._heap)[2]

    def __len__(self) -> int:
        return len(self._heap)


# (current distance, edge cost, neighbor position, goal position) -> candidate distance
Threshold = Callable[[float, float, Position, Position], float]


def uniform_cost_threshold(current_distance: float, step: float,
                           neighbor: Position, goal: Position) -> float:
    return current_distance + step


def heuristic_threshold(current_distance: float, step: float,
                        neighbor: Position, goal: Position) -> float:
    return current_distance + step + math.dist(neighbor, goal)


@dataclass(frozen=True)
class StrategyPolicy:
    """Frontier ordering and relaxation threshold for one strategy."""
    frontier: Callable[[], Union[FifoFrontier, PriorityFrontier]]
    threshold: Threshold


STRATEGY_POLICIES: Dict[SearchStrategy, StrategyPolicy] = {
    SearchStrategy.UNWEIGHTED: StrategyPolicy(FifoFrontier, uniform_cost_threshold),
    SearchStrategy.DIJKSTRA: StrategyPolicy(PriorityFrontier, uniform_cost_threshold),
    SearchStrategy.ASTAR: StrategyPolicy(PriorityFrontier, heuristic_threshold),
}


@dataclass(frozen=True)
class PathResult:
    """Outcome of a single search pass."""
    strategy: SearchStrategy
    status: SearchStatus
    start: Coord
    goal: Coord
    path: Tuple[Coord, ...]  # start -> goal, empty when unreached
    distance: float          # Goal's stored distance (heuristic-inflated for A*)
    expanded: int            # Frontier pops
    blocked: int             # Cells tagged blocked this pass

    @property
    def reached(self) -> bool:
        return self.status == SearchStatus.DONE

    def __len__(self) -> int:
        return len(self.path)


class PathSearch:
    """
    Runs search passes over a navigation grid.

    Each pass resets the grid's search state, re-tags walkability through
    ``is_blocked`` and expands from the start until the goal is popped or
    the frontier runs dry.
    """

    def __init__(self, grid: NavGrid, is_blocked: BlockedPredicate = never_blocked):
        """
        Initialize the search.

        Args:
            grid: Grid to search; its search-state arrays are overwritten by every pass
            is_blocked: Walkability predicate, called once per cell per pass
        """
        self.grid = grid
        self.is_blocked = is_blocked
        self.status = SearchStatus.IDLE
        self.last_result: Optional[PathResult] = None

    def run(self, start: Coord, goal: Coord,
            strategy: Union[SearchStrategy, str] = SearchStrategy.ASTAR) -> PathResult:
        """
        Compute a path from ``start`` to ``goal``.

        Args:
            start: (column, row) of the start cell
            goal: (column, row) of the goal cell
            strategy: Strategy member or name

        Returns:
            PathResult; check ``reached`` before using the path

        Raises:
            InvalidCoordinateError: If start or goal lies outside the grid
            ValueError: If the strategy is unknown
        """
        strategy = SearchStrategy.parse(strategy)
        start = self.grid.validate(start)
        goal = self.grid.validate(goal)
        policy = STRATEGY_POLICIES[strategy]
        grid = self.grid

        self.status = SearchStatus.RUNNING
        grid.reset_search_state()
        try:
            blocked = tag_walkability(grid, self.is_blocked)
        except Exception:
            self.status = SearchStatus.IDLE
            raise

        grid.distance[start] = 0.0
        grid.set_parent(start, None)

        frontier = policy.frontier()
        frontier.push(start, 0.0)

        positions = grid.positions.tolist()
        goal_pos = positions[goal[0]][goal[1]]
        bounds = grid.bounds
        expanded = 0

        while len(frontier):
            current = frontier.pop()
            expanded += 1
            if current == goal:
                self.status = SearchStatus.DONE
                break

            current_distance = grid.distance[current]
            current_pos = positions[current[0]][current[1]]
            for neighbor in get_neighbors(current, bounds):
                if not grid.walkable[neighbor]:
                    continue
                neighbor_pos = positions[neighbor[0]][neighbor[1]]
                candidate = policy.threshold(
                    current_distance, edge_cost(current_pos, neighbor_pos), neighbor_pos, goal_pos
                )
                if grid.distance[neighbor] > candidate:
                    grid.set_parent(neighbor, current)
                    grid.distance[neighbor] = candidate
                    frontier.push(neighbor, candidate)
        else:
            self.status = SearchStatus.UNREACHED

        path = self._reconstruct(goal) if self.status == SearchStatus.DONE else ()

        result = PathResult(
            strategy=strategy,
            status=self.status,
            start=start,
            goal=goal,
            path=path,
            distance=float(grid.distance[goal]),
            expanded=expanded,
            blocked=blocked,
        )
        self.last_result = result

        if result.reached:
            logger.info(
                "Path search completed",
                strategy=strategy.value,
                start=start,
                goal=goal,
                cells=len(path),
                distance=result.distance,
                expanded=expanded,
            )
        else:
            logger.warning(
                "Goal unreachable",
                strategy=strategy.value,
                start=start,
                goal=goal,
                blocked=blocked,
                expanded=expanded,
            )
        return result

    def _reconstruct(self, goal: Coord) -> Tuple[Coord, ...]:
        """Walk parent links back from the goal and mark the chain on the grid."""
        chain = []
        node: Optional[Coord] = goal
        while node is not None:
            chain.append(node)
            self.grid.states[node] = CellState.ON_PATH
            node = self.grid.parent_of(node)
        chain.reverse()
        return tuple(chain)


def run_search(grid: NavGrid, is_blocked: BlockedPredicate,
               strategy: Union[SearchStrategy, str], start: Coord, goal: Coord) -> PathResult:
    """Run one search pass without keeping a PathSearch around."""
    return PathSearch(grid, is_blocked).run(start, goal, strategy)
