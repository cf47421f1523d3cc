import itertools
import math
from collections import Counter

import pytest

from DeliveryTSP import Point, distance, random_points


def pt(pid, x, y):
    return Point(id=pid, x=float(x), y=float(y), name=pid)


@pytest.fixture
def triangle():
    return [pt("A", 0, 0), pt("B", 3, 0), pt("C", 0, 4)]


@pytest.fixture
def collinear():
    return [pt(f"P{i}", i, 0) for i in range(4)]


@pytest.fixture
def square():
    return [pt("SW", 0, 0), pt("SE", 10, 0), pt("NE", 10, 10), pt("NW", 0, 10)]


@pytest.fixture
def random_sets():
    """Seeded random stop sets of 2..9 points."""
    return [random_points(n, seed=seed) for seed, n in enumerate(range(2, 10), start=7)]


@pytest.fixture
def assert_closed_tour():
    def check(result, points):
        path = result.path
        assert path[0] is points[0]
        assert path[-1] is points[0]
        visited = Counter(p.id for p in path[:-1])
        assert visited == Counter(p.id for p in points)

    return check


@pytest.fixture
def brute_force_optimum():
    def optimum(points):
        n = len(points)
        best = math.inf
        for perm in itertools.permutations(range(1, n)):
            order = (0,) + perm + (0,)
            cost = sum(distance(points[a], points[b]) for a, b in zip(order, order[1:]))
            best = min(best, cost)
        return best

    return optimum
