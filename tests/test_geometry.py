"""Tests for geometry primitives and sample data."""
import math

import numpy as np
import pytest

from DeliveryTSP import (
    BOROUGH_LANDMARKS,
    Point,
    distance,
    distance_matrix,
    make_point,
    random_points,
    route_length,
    sample_points,
)


class TestDistance:

    def test_pythagorean_triple(self):
        assert distance(Point("a", 0, 0), Point("b", 3, 4)) == pytest.approx(5.0)

    def test_symmetric(self):
        a, b = Point("a", 1.5, -2.0), Point("b", -7.25, 3.0)
        assert distance(a, b) == distance(b, a)

    def test_zero_for_same_point(self):
        a = Point("a", 12.0, 34.0)
        assert distance(a, a) == 0.0

    def test_triangle_inequality(self):
        pts = random_points(6, seed=3)
        for a in pts:
            for b in pts:
                for c in pts:
                    assert distance(a, c) <= distance(a, b) + distance(b, c) + 1e-9


class TestRouteLength:

    def test_empty_and_single(self):
        assert route_length([]) == 0.0
        assert route_length([Point("a", 5, 5)]) == 0.0

    def test_no_implicit_return_leg(self, triangle):
        assert route_length(triangle) == pytest.approx(3 + 5)
        assert route_length(triangle + [triangle[0]]) == pytest.approx(12)


class TestDistanceMatrix:

    def test_matches_pairwise_distance(self, triangle):
        mat = distance_matrix(triangle)
        assert mat.shape == (3, 3)
        for i, a in enumerate(triangle):
            for j, b in enumerate(triangle):
                assert mat[i, j] == pytest.approx(distance(a, b))
        assert np.allclose(mat, mat.T)
        assert np.all(np.diag(mat) == 0)

    def test_empty(self):
        assert distance_matrix([]).shape == (0, 0)


class TestPoints:

    def test_points_are_immutable(self):
        p = Point("a", 1, 2)
        with pytest.raises(AttributeError):
            p.x = 5

    def test_make_point_unique_ids(self):
        ids = {make_point(1, 1).id for _ in range(50)}
        assert len(ids) == 50

    def test_make_point_default_name(self):
        assert make_point(1, 2, index=3).name == "Stop 3"
        assert make_point(1, 2, name="Depot").name == "Depot"
        assert make_point(1, 2, name="", index=4).name == "Stop 4"

    def test_make_point_keeps_given_id(self):
        p = make_point(1, 2, index=2, point_id="depot-7")
        assert p.id == "depot-7"
        assert p.name == "Stop 2"


class TestSamples:

    def test_sample_set(self):
        pts = sample_points()
        assert len(pts) == 8
        assert len({p.id for p in pts}) == 8
        assert pts[0].name == "Manhattan Hub"
        assert pts[-1].name == "Manhattan Stop 7"
        assert [p.id for p in pts] == [f"sample-{k}" for k in range(1, 9)]
        assert (pts[0].x, pts[0].y) == (50.0, 35.0)

    def test_samples_line_up_with_boroughs(self):
        boroughs = [name for name, _, _ in BOROUGH_LANDMARKS]
        pts = sample_points()
        for p in pts:
            assert any(p.name.startswith(b) for b in boroughs)
            assert 0 <= p.x <= 100 and 0 <= p.y <= 100
        for b in boroughs:
            assert any(p.name.startswith(b) for p in pts)

    def test_first_stops_sit_on_landmarks(self):
        pts = sample_points()
        for p, (name, x, y) in zip(pts, BOROUGH_LANDMARKS):
            assert p.name.startswith(name)
            assert (p.x, p.y) == (x, y)

    def test_random_points_seeded(self):
        a = random_points(10, seed=11)
        b = random_points(10, seed=11)
        assert [(p.x, p.y) for p in a] == [(p.x, p.y) for p in b]
        assert len({p.id for p in a}) == 10
        assert all(0 <= p.x < 100 and 0 <= p.y < 100 for p in a)
        assert a[0].name == "Stop 1"

    def test_random_points_scale(self):
        pts = random_points(20, seed=1, scale=5.0)
        assert max(max(p.x, p.y) for p in pts) < 5.0
        assert not math.isnan(pts[0].x)
