from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from DeliveryTSP.utils.taxonomy import AlgorithmType

EXACT_DP_LIMIT = 20
TWO_OPT_MAX_ITERATIONS = 1000
TWO_OPT_TOLERANCE = 1e-4
ASTAR_GRID_SIZE = 100.0
ASTAR_STEP = 2.0
ASTAR_GOAL_TOLERANCE = 1.0


@dataclass(frozen=True)
class EngineConfig:
    """Tunable limits shared by the dispatcher and the solvers."""

    exact_dp_limit: int = EXACT_DP_LIMIT
    two_opt_max_iterations: int = TWO_OPT_MAX_ITERATIONS
    two_opt_tolerance: float = TWO_OPT_TOLERANCE
    astar_grid_size: float = ASTAR_GRID_SIZE
    astar_step: float = ASTAR_STEP
    astar_goal_tolerance: float = ASTAR_GOAL_TOLERANCE

    def __post_init__(self) -> None:
        if self.exact_dp_limit < 0:
            raise ValueError("exact_dp_limit must be non-negative")
        if self.two_opt_max_iterations < 0:
            raise ValueError("two_opt_max_iterations must be non-negative")
        if self.astar_step <= 0:
            raise ValueError("astar_step must be positive")
        if self.astar_grid_size < 0:
            raise ValueError("astar_grid_size must be non-negative")

    def solver_kwargs(self, algorithm: AlgorithmType) -> Dict[str, Any]:
        if algorithm is AlgorithmType.TWO_OPT:
            return {
                "max_iterations": self.two_opt_max_iterations,
                "tolerance": self.two_opt_tolerance,
            }
        if algorithm is AlgorithmType.ASTAR:
            return {
                "grid_size": self.astar_grid_size,
                "step": self.astar_step,
                "goal_tolerance": self.astar_goal_tolerance,
            }
        return {}


__all__ = [
    "ASTAR_GOAL_TOLERANCE",
    "ASTAR_GRID_SIZE",
    "ASTAR_STEP",
    "EXACT_DP_LIMIT",
    "EngineConfig",
    "TWO_OPT_MAX_ITERATIONS",
    "TWO_OPT_TOLERANCE",
]
