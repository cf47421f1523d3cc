from __future__ import annotations

import heapq
import itertools
import logging
import math
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

from DeliveryTSP.config import ASTAR_GOAL_TOLERANCE, ASTAR_GRID_SIZE, ASTAR_STEP
from DeliveryTSP.geometry import Point, distance
from DeliveryTSP.solvers.base import (
    STATUS_COMPLETE,
    STATUS_FALLBACK,
    BaseSolver,
    RouteResult,
    current_time,
    elapsed_ms,
    trivial_result,
)
from DeliveryTSP.utils.taxonomy import AlgorithmFamily, AlgorithmType

logger = logging.getLogger(__name__)

LABEL = "A* Pathfinding"
DIRECT_LABEL = "A* Pathfinding (Direct)"
MULTI_POINT_LABEL = "A* Pathfinding (Multi-point)"

DIRECTIONS: Tuple[Tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)


@dataclass
class _Node:
    point: Point
    g: float
    parent: Optional["_Node"] = None


def _cell(x: float, y: float) -> Tuple[int, int]:
    # Round half up, so 2.5 lands in cell 3.
    return math.floor(x + 0.5), math.floor(y + 0.5)


def _key(x: float, y: float) -> Tuple[float, float]:
    return round(x, 6), round(y, 6)


def _reconstruct(node: _Node) -> List[Point]:
    path = []
    current: Optional[_Node] = node
    while current is not None:
        path.append(current.point)
        current = current.parent
    path.reverse()
    return path


def astar_path(
    start: Point,
    goal: Point,
    obstacles: Iterable[Point] = (),
    grid_size: float = ASTAR_GRID_SIZE,
    step: float = ASTAR_STEP,
    goal_tolerance: float = ASTAR_GOAL_TOLERANCE,
) -> RouteResult:
    """Shortest lattice path from ``start`` towards ``goal`` on a clamped grid.

    Moves are 8-directional with length ``step`` and stay inside
    ``[0, grid_size]`` on both axes. Cells holding an obstacle (rounded to
    the nearest integer) are never entered. The search ends at the first
    finalised node within ``goal_tolerance`` of the goal, and the goal itself
    is appended so the path ends on it. The returned distance is therefore the
    lattice cost ``g`` plus the final offset to the goal, not ``g`` alone, so it
    always equals the length of the returned path and stitched multi-point
    routes close exactly on their first stop. If the open set runs dry, the straight
    segment ``[start, goal]`` is returned with status ``"fallback"``.
    """
    start_time = current_time()
    blocked = {_cell(o.x, o.y) for o in obstacles}
    counter = itertools.count()
    open_set = [(distance(start, goal), next(counter), _Node(start, 0.0))]
    closed = set()
    expanded = 0

    while open_set:
        _, _, node = heapq.heappop(open_set)
        key = _key(node.point.x, node.point.y)
        if key in closed:
            continue
        closed.add(key)
        expanded += 1

        remaining = distance(node.point, goal)
        if remaining <= goal_tolerance:
            path = _reconstruct(node)
            total = node.g
            if path[-1] is not goal:
                if remaining > 0 or len(path) == 1:
                    path.append(goal)
                    total += remaining
                else:
                    path[-1] = goal
            return RouteResult(
                path=path,
                distance=total,
                time_ms=elapsed_ms(start_time),
                algorithm=LABEL,
                status=STATUS_COMPLETE,
                metadata={"nodes_expanded": expanded},
            )

        for dx, dy in DIRECTIONS:
            x = node.point.x + dx * step
            y = node.point.y + dy * step
            if x < 0 or x > grid_size or y < 0 or y > grid_size:
                continue
            if _cell(x, y) in blocked or _key(x, y) in closed:
                continue
            neighbor = Point(id=f"{x:g},{y:g}", x=x, y=y)
            g = node.g + distance(node.point, neighbor)
            heapq.heappush(open_set, (g + distance(neighbor, goal), next(counter), _Node(neighbor, g, node)))

    logger.info(
        "A* exhausted %d nodes between %s and %s; using direct path", expanded, start.id, goal.id
    )
    return RouteResult(
        path=[start, goal],
        distance=distance(start, goal),
        time_ms=elapsed_ms(start_time),
        algorithm=DIRECT_LABEL,
        status=STATUS_FALLBACK,
        metadata={"nodes_expanded": expanded},
    )


class AStarSolver(BaseSolver):
    """Stitches pairwise A* searches between consecutive stops into a closed loop."""

    name = AlgorithmType.ASTAR
    family = AlgorithmFamily.PATHFINDING
    label = MULTI_POINT_LABEL

    def __init__(
        self,
        obstacles: Iterable[Point] = (),
        grid_size: float = ASTAR_GRID_SIZE,
        step: float = ASTAR_STEP,
        goal_tolerance: float = ASTAR_GOAL_TOLERANCE,
    ):
        self.obstacles = list(obstacles)
        self.grid_size = grid_size
        self.step = step
        self.goal_tolerance = goal_tolerance

    def path_between(self, start: Point, goal: Point) -> RouteResult:
        return astar_path(
            start,
            goal,
            self.obstacles,
            grid_size=self.grid_size,
            step=self.step,
            goal_tolerance=self.goal_tolerance,
        )

    def solve(self, points: Sequence[Point]) -> RouteResult:
        n = len(points)
        if n < 2:
            return trivial_result(points, LABEL)

        start_time = current_time()
        stops = list(points) + [points[0]]
        full_path = [points[0]]
        total = 0.0
        legs = []
        fallback_legs = 0
        expanded = 0
        for a, b in zip(stops, stops[1:]):
            leg = self.path_between(a, b)
            total += leg.distance
            full_path.extend(leg.path[1:])
            legs.append(leg.distance)
            expanded += leg.metadata.get("nodes_expanded", 0)
            if leg.status == STATUS_FALLBACK:
                fallback_legs += 1

        logger.debug("A* multi-point n=%d: distance=%.4f, fallback legs=%d", n, total, fallback_legs)
        return RouteResult(
            path=full_path,
            distance=total,
            time_ms=elapsed_ms(start_time),
            algorithm=self.label,
            status=STATUS_FALLBACK if fallback_legs else STATUS_COMPLETE,
            metadata={
                "legs": legs,
                "fallback_legs": fallback_legs,
                "nodes_expanded": expanded,
            },
        )


__all__ = ["AStarSolver", "DIRECT_LABEL", "LABEL", "MULTI_POINT_LABEL", "astar_path"]
