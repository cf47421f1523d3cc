from __future__ import annotations

import logging
from typing import List, Sequence, Tuple

import networkx as nx
import numpy as np

from DeliveryTSP.geometry import Point, distance_matrix, route_length
from DeliveryTSP.solvers.base import (
    BaseSolver,
    RouteInvariantError,
    RouteResult,
    current_time,
    elapsed_ms,
    trivial_result,
)
from DeliveryTSP.utils.taxonomy import AlgorithmFamily, AlgorithmType

logger = logging.getLogger(__name__)

Edge = Tuple[int, int]


def prim_mst(dist_matrix: np.ndarray) -> List[Edge]:
    """Minimum spanning tree grown from vertex 0 with an O(n^2) key scan."""
    n = dist_matrix.shape[0]
    in_tree = np.zeros(n, dtype=bool)
    key = np.full(n, np.inf)
    parent = np.full(n, -1, dtype=np.int64)
    if n == 0:
        return []
    key[0] = 0.0

    for _ in range(n):
        candidates = np.where(in_tree, np.inf, key)
        u = int(np.argmin(candidates))
        if not np.isfinite(candidates[u]):
            break
        in_tree[u] = True
        closer = ~in_tree & (dist_matrix[u] < key)
        key[closer] = dist_matrix[u][closer]
        parent[closer] = u

    return [(int(parent[v]), v) for v in range(1, n) if parent[v] >= 0]


def odd_degree_vertices(edges: Sequence[Edge], n: int) -> List[int]:
    if not edges:
        return []
    degrees = np.bincount(np.asarray(edges, dtype=np.int64).ravel(), minlength=n)
    return [int(v) for v in np.flatnonzero(degrees % 2 == 1)]


def greedy_matching(dist_matrix: np.ndarray, vertices: Sequence[int]) -> List[Edge]:
    """Repeatedly pair the closest two remaining vertices.

    Approximates a minimum-weight perfect matching; with an odd number of
    vertices one is left unpaired.
    """
    available = list(vertices)
    matching: List[Edge] = []
    while len(available) > 1:
        best = np.inf
        pair: Edge | None = None
        for i in range(len(available)):
            for j in range(i + 1, len(available)):
                d = dist_matrix[available[i], available[j]]
                if d < best:
                    best = d
                    pair = (available[i], available[j])
        if pair is None:
            break
        matching.append(pair)
        available.remove(pair[0])
        available.remove(pair[1])
    return matching


def eulerian_tour(edges: Sequence[Edge], start: int = 0) -> List[int]:
    """Hierholzer's algorithm over the edge multiset, driven by an explicit stack."""
    multigraph = nx.MultiGraph()
    multigraph.add_node(start)
    multigraph.add_edges_from(edges)
    odd = [node for node, degree in multigraph.degree() if degree % 2 == 1]
    if odd:
        raise RouteInvariantError(f"Multigraph has odd-degree vertices: {sorted(odd)}")

    tour: List[int] = []
    stack = [start]
    while stack:
        current = stack[-1]
        neighbors = multigraph[current]
        if len(neighbors) > 0:
            nxt = next(iter(neighbors))
            multigraph.remove_edge(current, nxt)
            stack.append(nxt)
        else:
            tour.append(stack.pop())

    if multigraph.number_of_edges():
        raise RouteInvariantError("Multigraph is disconnected; Eulerian walk left edges unused")
    tour.reverse()
    return tour


def shortcut(tour: Sequence[int]) -> List[int]:
    """Keep the first visit of each vertex and close back to the first one."""
    seen = set()
    cycle: List[int] = []
    for node in tour:
        if node not in seen:
            seen.add(node)
            cycle.append(node)
    if cycle:
        cycle.append(tour[0])
    return cycle


class ChristofidesSolver(BaseSolver):
    name = AlgorithmType.CHRISTOFIDES
    family = AlgorithmFamily.APPROXIMATION
    label = "Christofides (1.5-approx)"

    def solve(self, points: Sequence[Point]) -> RouteResult:
        n = len(points)
        if n <= 1:
            return trivial_result(points, self.label)

        start_time = current_time()
        dist = distance_matrix(points)
        mst = prim_mst(dist)
        odd = odd_degree_vertices(mst, n)
        matching = greedy_matching(dist, odd)
        tour = eulerian_tour(mst + matching, start=0)
        cycle = shortcut(tour)

        path = [points[i] for i in cycle]
        total = route_length(path)
        mst_weight = float(sum(dist[u, v] for u, v in mst))
        logger.debug(
            "Christofides n=%d: mst=%.4f, odd=%d, matched=%d, distance=%.4f",
            n,
            mst_weight,
            len(odd),
            len(matching),
            total,
        )
        return RouteResult(
            path=path,
            distance=total,
            time_ms=elapsed_ms(start_time),
            algorithm=self.label,
            metadata={
                "order": cycle,
                "mst_weight": mst_weight,
                "odd_vertices": len(odd),
                "matching_size": len(matching),
            },
        )


__all__ = [
    "ChristofidesSolver",
    "eulerian_tour",
    "greedy_matching",
    "odd_degree_vertices",
    "prim_mst",
    "shortcut",
]
