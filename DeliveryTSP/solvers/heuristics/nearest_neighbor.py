from __future__ import annotations

import logging
from typing import List, Sequence, Tuple

import numpy as np

from DeliveryTSP.geometry import Point, distance_matrix
from DeliveryTSP.solvers.base import (
    BaseSolver,
    RouteResult,
    close_cycle,
    current_time,
    elapsed_ms,
    trivial_result,
)
from DeliveryTSP.utils.taxonomy import AlgorithmFamily, AlgorithmType

logger = logging.getLogger(__name__)


def nearest_neighbor_order(dist_matrix: np.ndarray) -> Tuple[List[int], float]:
    """Greedy open tour from vertex 0 and its length including the return leg."""
    n = dist_matrix.shape[0]
    if n == 0:
        return [], 0.0
    visited = [0]
    seen = {0}
    total = 0.0
    for _ in range(1, n):
        last = visited[-1]
        candidates = [(float(dist_matrix[last, city]), city) for city in range(n) if city not in seen]
        step, next_city = min(candidates)
        visited.append(next_city)
        seen.add(next_city)
        total += step
    total += float(dist_matrix[visited[-1], 0])
    return visited, total


class NearestNeighborSolver(BaseSolver):
    name = AlgorithmType.NEAREST_NEIGHBOR
    family = AlgorithmFamily.HEURISTIC
    label = "Nearest Neighbor (Greedy)"

    def solve(self, points: Sequence[Point]) -> RouteResult:
        n = len(points)
        if n <= 1:
            return trivial_result(points, self.label)

        start_time = current_time()
        visited, total = nearest_neighbor_order(distance_matrix(points))
        cycle = close_cycle(visited)
        logger.debug("Nearest neighbour tour n=%d, distance=%.4f", n, total)
        return RouteResult(
            path=[points[i] for i in cycle],
            distance=total,
            time_ms=elapsed_ms(start_time),
            algorithm=self.label,
            metadata={"order": cycle},
        )


__all__ = ["NearestNeighborSolver", "nearest_neighbor_order"]
