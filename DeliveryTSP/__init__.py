from DeliveryTSP.comparison import best_result, excess_percent, summarize
from DeliveryTSP.config import EngineConfig
from DeliveryTSP.core import RouteOptimizer, compare_algorithms, solve_tsp
from DeliveryTSP.geometry import Point, distance, distance_matrix, make_point, route_length
from DeliveryTSP.samples import BOROUGH_LANDMARKS, random_points, sample_points
from DeliveryTSP.solvers import (
    BaseSolver,
    RouteInvariantError,
    RouteResult,
    SOLVER_FAMILIES,
    SOLVER_REGISTRY,
    SOLVER_SPECS,
    get_solver,
)
from DeliveryTSP.utils.taxonomy import AlgorithmFamily, AlgorithmType

__all__ = [
    "AlgorithmFamily",
    "AlgorithmType",
    "BOROUGH_LANDMARKS",
    "BaseSolver",
    "EngineConfig",
    "Point",
    "RouteInvariantError",
    "RouteOptimizer",
    "RouteResult",
    "SOLVER_FAMILIES",
    "SOLVER_REGISTRY",
    "SOLVER_SPECS",
    "best_result",
    "compare_algorithms",
    "distance",
    "distance_matrix",
    "excess_percent",
    "get_solver",
    "make_point",
    "random_points",
    "route_length",
    "sample_points",
    "solve_tsp",
    "summarize",
]
