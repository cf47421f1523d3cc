from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Any, Dict, List, Sequence, Type

from DeliveryTSP.geometry import Point
from DeliveryTSP.utils.taxonomy import AlgorithmFamily, AlgorithmType

STATUS_COMPLETE = "complete"
STATUS_TRIVIAL = "trivial"
STATUS_SUBSTITUTED = "substituted"
STATUS_FALLBACK = "fallback"


@dataclass(frozen=True)
class RouteResult:
    """Container capturing the outcome of running a route solver."""

    path: List[Point]
    distance: float
    time_ms: float
    algorithm: str
    status: str = STATUS_COMPLETE
    metadata: Dict[str, Any] = field(default_factory=dict)

    @property
    def order(self) -> List[int] | None:
        """Input indices visited, in path order, when the solver records them."""
        return self.metadata.get("order")


class RouteInvariantError(RuntimeError):
    """Raised when a solver reaches a state that a well-formed input cannot produce."""


def current_time() -> float:
    return time.perf_counter()


def elapsed_ms(start_time: float) -> float:
    return max(0.0, (current_time() - start_time) * 1000.0)


def close_cycle(order: Sequence[int]) -> List[int]:
    cycle = list(order)
    if cycle and cycle[0] != cycle[-1]:
        cycle.append(cycle[0])
    return cycle


def trivial_result(points: Sequence[Point], label: str) -> RouteResult:
    """Zero-length result for inputs too small to route."""
    return RouteResult(
        path=list(points),
        distance=0.0,
        time_ms=0.0,
        algorithm=label,
        status=STATUS_TRIVIAL,
        metadata={"order": list(range(len(points)))},
    )


@dataclass(frozen=True)
class SolverSpec:
    """Metadata describing a solver implementation."""

    name: AlgorithmType
    cls: Type["BaseSolver"]
    family: AlgorithmFamily
    label: str


class BaseSolver:
    """Common interface for route solvers."""

    name: AlgorithmType
    family: AlgorithmFamily
    label: str

    def solve(self, points: Sequence[Point]) -> RouteResult:  # noqa: D401
        """Compute a route over ``points``."""
        raise NotImplementedError

    def __call__(self, points: Sequence[Point]) -> RouteResult:
        return self.solve(points)


__all__ = [
    "BaseSolver",
    "RouteInvariantError",
    "RouteResult",
    "STATUS_COMPLETE",
    "STATUS_FALLBACK",
    "STATUS_SUBSTITUTED",
    "STATUS_TRIVIAL",
    "SolverSpec",
    "close_cycle",
    "current_time",
    "elapsed_ms",
    "trivial_result",
]
