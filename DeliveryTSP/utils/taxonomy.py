from __future__ import annotations

from enum import Enum


class AlgorithmFamily(str, Enum):
    EXACT = "exact"
    APPROXIMATION = "approximation"
    HEURISTIC = "heuristic"
    PATHFINDING = "pathfinding"


class AlgorithmType(str, Enum):
    """Selector values accepted by the dispatcher."""

    EXACT_DP = "exact-dp"
    NEAREST_NEIGHBOR = "nearest-neighbor"
    TWO_OPT = "2-opt"
    CHRISTOFIDES = "christofides"
    ASTAR = "astar"


__all__ = ["AlgorithmFamily", "AlgorithmType"]
