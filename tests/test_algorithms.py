import math

import pytest

from geodist.algorithms import (
    LineSegment,
    orientation,
    point_point_distance,
    point_segment_closest_point,
    point_segment_distance,
    project_factor,
    segment_intersection,
    segment_segment_closest_points,
    segment_segment_distance,
    segments_intersect,
)


def test_point_point_distance_is_euclidean():
    assert point_point_distance((0.0, 0.0), (3.0, 4.0)) == 5.0
    assert point_point_distance((2.5, -1.0), (2.5, -1.0)) == 0.0


def test_point_segment_distance_uses_perpendicular_inside_segment():
    assert point_segment_distance((5.0, 5.0), (0.0, 0.0), (10.0, 0.0)) == 5.0
    assert point_segment_closest_point((5.0, 5.0), (0.0, 0.0), (10.0, 0.0)) == (5.0, 0.0)


def test_point_segment_closest_point_clamps_to_endpoint_object():
    start = (0.0, 0.0, 7.0)
    end = (10.0, 0.0, 9.0)

    assert point_segment_closest_point((-3.0, 4.0), start, end) is start
    assert point_segment_closest_point((13.0, -4.0), start, end) is end
    assert point_segment_distance((-3.0, 4.0), start, end) == 5.0


def test_degenerate_segment_behaves_as_point():
    a = (1.0, 1.0)

    assert point_segment_distance((4.0, 5.0), a, a) == 5.0
    assert point_segment_closest_point((4.0, 5.0), a, a) is a
    assert segment_segment_distance(a, a, (4.0, 5.0), (4.0, 5.0)) == 5.0
    assert segment_segment_closest_points(a, a, (4.0, 5.0), (4.0, 5.0)) == (a, (4.0, 5.0))


def test_crossing_segments_share_intersection_point():
    a0, a1 = (0.0, 0.0), (10.0, 10.0)
    b0, b1 = (0.0, 10.0), (10.0, 0.0)

    assert segments_intersect(a0, a1, b0, b1)
    assert segment_segment_distance(a0, a1, b0, b1) == 0.0
    assert segment_segment_closest_points(a0, a1, b0, b1) == ((5.0, 5.0), (5.0, 5.0))


@pytest.mark.parametrize(
    'a0, a1, b0, b1, expected',
    [
        ((0.0, 0.0), (5.0, 0.0), (5.0, 0.0), (5.0, 5.0), (5.0, 0.0)),
        ((0.0, 0.0), (10.0, 0.0), (5.0, 0.0), (15.0, 0.0), (5.0, 0.0)),
        ((0.0, 0.0), (10.0, 0.0), (4.0, -3.0), (4.0, 0.0), (4.0, 0.0)),
        ((3.0, 3.0), (3.0, 3.0), (0.0, 0.0), (6.0, 6.0), (3.0, 3.0)),
    ],
)
def test_touching_segments_report_the_touching_endpoint(a0, a1, b0, b1, expected):
    assert segment_intersection(a0, a1, b0, b1) == expected
    assert segment_segment_distance(a0, a1, b0, b1) == 0.0


def test_endpoint_on_supporting_line_but_off_segment_is_not_an_intersection():
    # b0 lies on the line through a but beyond a1
    a0, a1 = (0.0, 0.0), (2.0, 0.0)
    b0, b1 = (3.0, 0.0), (1.0, 5.0)

    assert segment_intersection(a0, a1, b0, b1) is None
    assert segment_segment_distance(a0, a1, b0, b1) > 0.0


def test_collinear_disjoint_segments():
    a0, a1 = (0.0, 0.0), (1.0, 0.0)
    b0, b1 = (2.0, 0.0), (3.0, 0.0)

    assert not segments_intersect(a0, a1, b0, b1)
    assert segment_segment_distance(a0, a1, b0, b1) == 1.0
    assert segment_segment_closest_points(a0, a1, b0, b1) == ((1.0, 0.0), (2.0, 0.0))


def test_parallel_segments_distance():
    a0, a1 = (0.0, 0.0), (10.0, 0.0)
    b0, b1 = (0.0, 5.0), (10.0, 5.0)

    assert segment_segment_distance(a0, a1, b0, b1) == 5.0
    p, q = segment_segment_closest_points(a0, a1, b0, b1)
    assert point_point_distance(p, q) == 5.0
    assert p[1] == 0.0 and q[1] == 5.0


def test_nearly_parallel_segments_are_stable():
    a0, a1 = (0.0, 0.0), (10.0, 0.0)
    b0, b1 = (0.0, 1e-9), (10.0, 2e-9)

    assert not segments_intersect(a0, a1, b0, b1)
    dist = segment_segment_distance(a0, a1, b0, b1)
    assert math.isclose(dist, 1e-9, rel_tol=1e-9)
    p, q = segment_segment_closest_points(a0, a1, b0, b1)
    assert math.isclose(point_point_distance(p, q), dist, rel_tol=1e-9)


def test_orientation_signs():
    assert orientation((0.0, 0.0), (1.0, 0.0), (0.0, 1.0)) == 1
    assert orientation((0.0, 0.0), (1.0, 0.0), (0.0, -1.0)) == -1
    assert orientation((0.0, 0.0), (1.0, 1.0), (0.5, 0.5)) == 0


def test_orientation_resolves_tiny_determinants_exactly():
    assert orientation((0.0, 0.0), (1.0, 1.0), (0.5, 0.5 + 2.0 ** -53)) == 1
    assert orientation((0.0, 0.0), (1.0, 1.0), (0.5, 0.5 - 2.0 ** -54)) == -1


def test_line_segment_value_type():
    seg = LineSegment((0.0, 0.0), (3.0, 4.0))
    other = LineSegment((10.0, 0.0), (10.0, 4.0))

    assert seg.length == 5.0
    assert not seg.is_degenerate
    assert LineSegment((1.0, 1.0), (1.0, 1.0)).is_degenerate
    assert seg.project_factor((3.0, 4.0)) == 1.0
    assert seg.closest_point((0.0, -2.0)) == (0.0, 0.0)
    assert seg.distance((0.0, -2.0)) == 2.0
    assert seg.distance(other) == 7.0
    assert seg.closest_points(other) == ((3.0, 4.0), (10.0, 4.0))
    assert seg.intersection(other) is None


def test_huge_finite_coordinates_do_not_overflow():
    a, b = (-1e200, 0.0), (1e200, 0.0)

    assert project_factor((0.0, 1.0), a, b) == 0.5
    assert point_segment_distance((0.0, 1.0), a, b) == 1.0
    assert point_segment_closest_point((0.0, 1.0), a, b) == (0.0, 0.0)
    assert segment_intersection(a, b, (0.0, -1e200), (0.0, 1e200)) == (0.0, 0.0)
