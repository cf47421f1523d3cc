from __future__ import annotations

from DeliveryTSP.solvers.approx import ChristofidesSolver
from DeliveryTSP.solvers.base import BaseSolver, RouteInvariantError, RouteResult, SolverSpec
from DeliveryTSP.solvers.exact import HeldKarpSolver
from DeliveryTSP.solvers.heuristics import NearestNeighborSolver, TwoOptSolver
from DeliveryTSP.solvers.pathfinding import AStarSolver
from DeliveryTSP.utils.taxonomy import AlgorithmFamily, AlgorithmType


def _spec(cls: type[BaseSolver]) -> SolverSpec:
    return SolverSpec(name=cls.name, cls=cls, family=cls.family, label=cls.label)


SOLVER_SPECS: dict[AlgorithmType, SolverSpec] = {
    HeldKarpSolver.name: _spec(HeldKarpSolver),
    NearestNeighborSolver.name: _spec(NearestNeighborSolver),
    TwoOptSolver.name: _spec(TwoOptSolver),
    ChristofidesSolver.name: _spec(ChristofidesSolver),
    AStarSolver.name: _spec(AStarSolver),
}

SOLVER_REGISTRY: dict[AlgorithmType, type[BaseSolver]] = {name: spec.cls for name, spec in SOLVER_SPECS.items()}
SOLVER_FAMILIES: dict[AlgorithmType, AlgorithmFamily] = {name: spec.family for name, spec in SOLVER_SPECS.items()}


def get_solver(name: AlgorithmType | str, **kwargs) -> BaseSolver:
    try:
        solver_cls = SOLVER_REGISTRY.get(AlgorithmType(name))
    except ValueError:
        solver_cls = None
    if solver_cls is None:
        raise KeyError(f"Unknown solver: {name}")
    return solver_cls(**kwargs)


__all__ = [
    "AStarSolver",
    "AlgorithmFamily",
    "AlgorithmType",
    "BaseSolver",
    "ChristofidesSolver",
    "HeldKarpSolver",
    "NearestNeighborSolver",
    "RouteInvariantError",
    "RouteResult",
    "SOLVER_FAMILIES",
    "SOLVER_REGISTRY",
    "SOLVER_SPECS",
    "SolverSpec",
    "TwoOptSolver",
    "get_solver",
]
