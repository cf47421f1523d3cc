from DeliveryTSP.solvers.approx.christofides import (
    ChristofidesSolver,
    eulerian_tour,
    greedy_matching,
    odd_degree_vertices,
    prim_mst,
    shortcut,
)

__all__ = [
    "ChristofidesSolver",
    "eulerian_tour",
    "greedy_matching",
    "odd_degree_vertices",
    "prim_mst",
    "shortcut",
]
