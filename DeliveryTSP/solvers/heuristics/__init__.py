from DeliveryTSP.solvers.heuristics.nearest_neighbor import NearestNeighborSolver, nearest_neighbor_order
from DeliveryTSP.solvers.heuristics.two_opt import TwoOptSolver, two_opt

__all__ = [
    "NearestNeighborSolver",
    "TwoOptSolver",
    "nearest_neighbor_order",
    "two_opt",
]
