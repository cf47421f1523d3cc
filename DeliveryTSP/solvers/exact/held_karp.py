from __future__ import annotations

import logging
from typing import List, Sequence

import numpy as np

from DeliveryTSP.geometry import Point, distance_matrix
from DeliveryTSP.solvers.base import (
    BaseSolver,
    RouteInvariantError,
    RouteResult,
    close_cycle,
    current_time,
    elapsed_ms,
    trivial_result,
)
from DeliveryTSP.utils.taxonomy import AlgorithmFamily, AlgorithmType

logger = logging.getLogger(__name__)


def reconstruct_order(parent: np.ndarray, last: int) -> List[int]:
    """Walk predecessors back from ``last`` in the full-mask row to vertex 0.

    ``parent`` is indexed by ``mask >> 1``; a negative entry means the state
    was never reached and raises instead of yielding a truncated tour.
    """
    order = []
    row = parent.shape[0] - 1
    current = last
    while current != 0:
        order.append(current)
        prev = int(parent[row, current])
        if prev < 0:
            raise RouteInvariantError(
                f"Held-Karp predecessor missing for mask {(row << 1) | 1:#x}, vertex {current}"
            )
        row ^= 1 << (current - 1)
        current = prev
    order.append(0)
    order.reverse()
    return order


class HeldKarpSolver(BaseSolver):
    """Bitmask dynamic programming over subsets that contain the start vertex.

    Every subset includes vertex 0, so row ``mask >> 1`` of the cost and
    predecessor tables stands for ``mask``. Masks are visited in increasing
    numeric order, which finalises every proper subset before its supersets.
    Time is O(n^2 * 2^n); memory is O(n * 2^n), so callers cap ``n``.
    """

    name = AlgorithmType.EXACT_DP
    family = AlgorithmFamily.EXACT
    label = "Exact DP (Held-Karp)"

    def solve(self, points: Sequence[Point]) -> RouteResult:
        n = len(points)
        if n <= 1:
            return trivial_result(points, self.label)

        start_time = current_time()
        dist = distance_matrix(points)
        rows = 1 << (n - 1)
        cost = np.full((rows, n), np.inf)
        parent = np.full((rows, n), -1, dtype=np.int16)
        cost[0, 0] = 0.0

        for row in range(1, rows):
            mask = (row << 1) | 1
            ends = np.asarray([v for v in range(1, n) if mask >> v & 1], dtype=np.int64)
            prev_rows = (mask ^ (1 << ends)) >> 1
            candidates = cost[prev_rows] + dist[:, ends].T
            best_prev = np.argmin(candidates, axis=1)
            best_cost = candidates[np.arange(len(ends)), best_prev]
            cost[row, ends] = best_cost
            parent[row, ends] = np.where(np.isfinite(best_cost), best_prev, -1)

        full_row = rows - 1
        tour_costs = cost[full_row, 1:] + dist[1:, 0]
        last = int(np.argmin(tour_costs)) + 1
        tour_cost = float(tour_costs[last - 1])
        if not np.isfinite(tour_cost):
            raise RouteInvariantError("Held-Karp table has no finite closing entry")

        cycle = close_cycle(reconstruct_order(parent, last))
        logger.debug("Held-Karp solved n=%d, distance=%.4f", n, tour_cost)
        return RouteResult(
            path=[points[i] for i in cycle],
            distance=tour_cost,
            time_ms=elapsed_ms(start_time),
            algorithm=self.label,
            metadata={"order": cycle, "states": int(rows * (n - 1))},
        )


__all__ = ["HeldKarpSolver", "reconstruct_order"]
