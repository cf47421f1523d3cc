from __future__ import annotations

import logging
from dataclasses import replace
from typing import Iterable, List, Sequence

from DeliveryTSP.config import EngineConfig
from DeliveryTSP.geometry import Point
from DeliveryTSP.solvers import RouteResult, get_solver
from DeliveryTSP.solvers.base import STATUS_SUBSTITUTED
from DeliveryTSP.utils.taxonomy import AlgorithmType

logger = logging.getLogger(__name__)

DP_LIMIT_LABEL = "Nearest Neighbor (DP limit exceeded)"

COMPARE_ORDER = (
    AlgorithmType.EXACT_DP,
    AlgorithmType.NEAREST_NEIGHBOR,
    AlgorithmType.TWO_OPT,
    AlgorithmType.CHRISTOFIDES,
)


class RouteOptimizer:
    """Dispatcher from an algorithm selector to the matching solver."""

    def __init__(self, config: EngineConfig | None = None):
        self.config = config or EngineConfig()

    def solve(
        self,
        points: Sequence[Point],
        algorithm: AlgorithmType | str,
        obstacles: Iterable[Point] = (),
    ) -> RouteResult:
        selector = AlgorithmType(algorithm)
        points = list(points)

        if selector is AlgorithmType.EXACT_DP and len(points) > self.config.exact_dp_limit:
            logger.warning(
                "Exact DP requested for %d points (limit %d); using nearest neighbour instead",
                len(points),
                self.config.exact_dp_limit,
            )
            result = get_solver(AlgorithmType.NEAREST_NEIGHBOR).solve(points)
            metadata = dict(result.metadata)
            metadata.update({"requested": selector.value, "exact_dp_limit": self.config.exact_dp_limit})
            return replace(result, algorithm=DP_LIMIT_LABEL, status=STATUS_SUBSTITUTED, metadata=metadata)

        kwargs = self.config.solver_kwargs(selector)
        if selector is AlgorithmType.ASTAR:
            kwargs["obstacles"] = list(obstacles)
        solver = get_solver(selector, **kwargs)
        return solver.solve(points)

    def compare_all(self, points: Sequence[Point]) -> List[RouteResult]:
        """Run every tour solver once; exact DP is skipped above the size limit."""
        points = list(points)
        selectors = [
            s for s in COMPARE_ORDER if s is not AlgorithmType.EXACT_DP or len(points) <= self.config.exact_dp_limit
        ]
        results = [self.solve(points, selector) for selector in selectors]
        logger.debug("Compared %d algorithms on %d points", len(results), len(points))
        return results


def solve_tsp(points: Sequence[Point], algorithm: AlgorithmType | str) -> RouteResult:
    return RouteOptimizer().solve(points, algorithm)


def compare_algorithms(points: Sequence[Point]) -> List[RouteResult]:
    return RouteOptimizer().compare_all(points)


__all__ = ["COMPARE_ORDER", "DP_LIMIT_LABEL", "RouteOptimizer", "compare_algorithms", "solve_tsp"]
