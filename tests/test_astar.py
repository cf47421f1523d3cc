"""Tests for the grid A* pathfinder and its multi-point mode."""
import math

import pytest

from DeliveryTSP import Point, distance, route_length, sample_points
from DeliveryTSP.solvers import AStarSolver
from DeliveryTSP.solvers.pathfinding.astar import DIRECT_LABEL, LABEL, MULTI_POINT_LABEL, astar_path


def block(cx, cy, radius):
    return [
        Point(f"wall-{x}-{y}", x, y)
        for x in range(cx - radius, cx + radius + 1)
        for y in range(cy - radius, cy + radius + 1)
    ]


class TestSinglePair:

    def test_straight_line(self):
        start, goal = Point("s", 0, 0), Point("g", 10, 0)
        result = astar_path(start, goal)
        assert result.status == "complete"
        assert result.algorithm == LABEL
        assert result.distance == pytest.approx(10.0)
        assert result.path[0] is start
        assert result.path[-1] is goal
        assert len(result.path) == 6

    def test_diagonal_moves(self):
        result = astar_path(Point("s", 0, 0), Point("g", 8, 8))
        assert result.distance == pytest.approx(8 * math.sqrt(2))

    def test_goal_off_lattice_is_appended(self):
        start, goal = Point("hub", 50, 35), Point("bk", 65, 65)
        result = astar_path(start, goal)
        assert result.status == "complete"
        assert result.path[-1] is goal
        assert result.distance == pytest.approx(route_length(result.path))
        assert result.distance >= distance(start, goal)

    def test_distance_includes_final_offset(self):
        start, goal = Point("a", 0, 0), Point("b", 3, 0)
        result = astar_path(start, goal)
        assert [(p.x, p.y) for p in result.path] == [(0, 0), (2, 0), (3, 0)]
        assert result.distance == pytest.approx(2.0 + 1.0)

    def test_start_equals_goal(self):
        start, goal = Point("a", 20, 20), Point("b", 20, 20)
        result = astar_path(start, goal)
        assert result.distance == 0.0
        assert result.path == [start, goal]

    def test_detours_around_wall(self):
        wall = [Point(f"w{y}", 10, y) for y in range(0, 19)]
        start, goal = Point("s", 0, 10), Point("g", 20, 10)
        result = astar_path(start, goal, wall)
        assert result.status == "complete"
        assert result.distance > 20.0
        blocked = {(round(w.x), round(w.y)) for w in wall}
        for p in result.path:
            assert (round(p.x), round(p.y)) not in blocked

    def test_stays_inside_grid(self):
        result = astar_path(Point("s", 0, 0), Point("g", 0, 10), grid_size=20)
        for p in result.path:
            assert 0 <= p.x <= 20 and 0 <= p.y <= 20

    def test_unreachable_goal_falls_back_to_direct_line(self):
        start, goal = Point("s", 10, 10), Point("g", 50, 50)
        result = astar_path(start, goal, block(50, 50, 2))
        assert result.status == "fallback"
        assert result.algorithm == DIRECT_LABEL
        assert result.path == [start, goal]
        assert result.distance == pytest.approx(distance(start, goal))
        assert result.metadata["nodes_expanded"] > 0

    def test_goal_outside_grid_falls_back(self):
        start, goal = Point("s", 2, 2), Point("g", 30, 30)
        result = astar_path(start, goal, grid_size=10)
        assert result.status == "fallback"
        assert result.distance == pytest.approx(distance(start, goal))

    def test_custom_step(self):
        result = astar_path(Point("s", 0, 0), Point("g", 9, 0), step=3)
        assert result.distance == pytest.approx(9.0)
        assert len(result.path) == 4


class TestMultiPoint:

    def test_closed_loop_through_every_stop(self):
        pts = [Point("a", 10, 10), Point("b", 30, 10), Point("c", 30, 40), Point("d", 10, 40)]
        result = AStarSolver().solve(pts)
        assert result.algorithm == MULTI_POINT_LABEL
        assert result.status == "complete"
        assert result.path[0] is pts[0]
        assert result.path[-1] is pts[0]
        stops = [p for p in result.path if p in pts]
        assert [p.id for p in stops] == ["a", "b", "c", "d", "a"]
        assert result.distance == pytest.approx(100.0)
        assert result.metadata["legs"] == pytest.approx([20.0, 30.0, 20.0, 30.0])

    def test_sample_set_distance_matches_path(self):
        pts = sample_points()
        result = AStarSolver().solve(pts)
        assert result.path[0] is pts[0] and result.path[-1] is pts[0]
        assert result.distance == pytest.approx(route_length(result.path))
        assert len(result.metadata["legs"]) == len(pts)
        for p in pts[1:]:
            assert sum(1 for q in result.path if q is p) == 1

    def test_fallback_leg_marks_result(self):
        pts = [Point("s", 10, 10), Point("g", 50, 50)]
        result = AStarSolver(obstacles=block(50, 50, 2)).solve(pts)
        assert result.status == "fallback"
        assert result.metadata["fallback_legs"] == 2
        assert result.distance == pytest.approx(2 * distance(*pts))

    def test_fewer_than_two_points(self):
        for pts in ([], [Point("only", 1, 1)]):
            result = AStarSolver().solve(pts)
            assert result.distance == 0.0
            assert result.path == pts
            assert result.algorithm == LABEL
