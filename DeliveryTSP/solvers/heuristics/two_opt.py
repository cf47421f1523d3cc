from __future__ import annotations

import logging
from typing import List, Sequence, Tuple

import numpy as np

from DeliveryTSP.config import TWO_OPT_MAX_ITERATIONS, TWO_OPT_TOLERANCE
from DeliveryTSP.geometry import Point, distance_matrix, route_length
from DeliveryTSP.solvers.base import (
    BaseSolver,
    RouteResult,
    close_cycle,
    current_time,
    elapsed_ms,
    trivial_result,
)
from DeliveryTSP.solvers.heuristics.nearest_neighbor import nearest_neighbor_order
from DeliveryTSP.utils.taxonomy import AlgorithmFamily, AlgorithmType

logger = logging.getLogger(__name__)


def two_opt(
    dist_matrix: np.ndarray,
    order: Sequence[int],
    max_iterations: int = TWO_OPT_MAX_ITERATIONS,
    tolerance: float = TWO_OPT_TOLERANCE,
) -> Tuple[List[int], int, int]:
    """Improve a copy of an open tour by reversing segments.

    ``order`` is a permutation of the vertex indices without the closing
    vertex. Edge ``(j, j + 1)`` wraps to the first vertex for the last
    position. A swap is applied only when it shortens the cycle by more than
    ``tolerance``. Returns the improved order, the number of full passes and
    the number of swaps applied.
    """
    path = list(order)
    n = dist_matrix.shape[0]
    if sorted(path) != list(range(n)):
        raise ValueError("Seed order must be a permutation of the vertex indices")

    iterations = 0
    swaps = 0
    improved = True
    while improved and iterations < max_iterations:
        improved = False
        iterations += 1
        for i in range(len(path) - 1):
            for j in range(i + 2, len(path)):
                a = path[i]
                b = path[i + 1]
                c = path[j]
                d = path[j + 1] if j + 1 < len(path) else path[0]
                current = dist_matrix[a, b] + dist_matrix[c, d]
                candidate = dist_matrix[a, c] + dist_matrix[b, d]
                if candidate < current - tolerance:
                    path[i + 1 : j + 1] = reversed(path[i + 1 : j + 1])
                    swaps += 1
                    improved = True
    return path, iterations, swaps


class TwoOptSolver(BaseSolver):
    name = AlgorithmType.TWO_OPT
    family = AlgorithmFamily.HEURISTIC
    label = "2-Opt Local Search"

    def __init__(self, max_iterations: int = TWO_OPT_MAX_ITERATIONS, tolerance: float = TWO_OPT_TOLERANCE):
        self.max_iterations = max_iterations
        self.tolerance = tolerance

    def solve(self, points: Sequence[Point]) -> RouteResult:
        n = len(points)
        if n <= 1:
            return trivial_result(points, self.label)

        start_time = current_time()
        dist = distance_matrix(points)
        seed, seed_cost = nearest_neighbor_order(dist)
        improved, iterations, swaps = two_opt(dist, seed, self.max_iterations, self.tolerance)
        cycle = close_cycle(improved)
        path = [points[i] for i in cycle]
        total = route_length(path)
        logger.debug(
            "2-opt n=%d: %.4f -> %.4f after %d passes, %d swaps", n, seed_cost, total, iterations, swaps
        )
        return RouteResult(
            path=path,
            distance=total,
            time_ms=elapsed_ms(start_time),
            algorithm=self.label,
            metadata={
                "order": cycle,
                "seed_distance": seed_cost,
                "iterations": iterations,
                "swaps": swaps,
            },
        )


__all__ = ["TwoOptSolver", "two_opt"]
