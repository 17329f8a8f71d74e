"""
Tests for distance queries.
"""

import math
import pytest


def test_point_segment_clamped_and_interior():
    from geom2d import Point2, Segment, squared_distance_point_segment, distance_point_segment

    segment = Segment(Point2(0, 0), Point2(10, 0))

    assert squared_distance_point_segment(Point2(-5, 3), segment) == pytest.approx(34.0), \
        "Projection before p0 should clamp to p0"
    assert squared_distance_point_segment(Point2(5, 4), segment) == pytest.approx(16.0), \
        "Interior projection gives the perpendicular distance"
    assert squared_distance_point_segment(Point2(13, -4), segment) == pytest.approx(25.0), \
        "Projection past p1 should clamp to p1"
    assert distance_point_segment(Point2(5, 4), segment) == pytest.approx(4.0)


def test_endpoints_are_at_zero_distance():
    from geom2d import Point2, Segment, distance_point_segment

    segment = Segment(Point2(1, 2), Point2(-4, 7))

    assert distance_point_segment(segment.p0, segment) == 0.0
    assert distance_point_segment(segment.p1, segment) == 0.0
    assert distance_point_segment(segment.point_at(0.3), segment) == pytest.approx(0.0, abs=1e-6)


def test_dispatcher_is_symmetric():
    from geom2d import OrientedBox, Point2, Ray, Segment, distance

    point = Point2(3, -2)
    others = [
        Point2(-1, 4),
        Segment(Point2(0, 0), Point2(10, 1)),
        Ray(Point2(5, 5), Point2(0, 1)),
        OrientedBox(Point2(1, 1), Point2(1, 1), Point2(1, 0.5)),
    ]

    for other in others:
        assert distance(point, other) == pytest.approx(distance(other, point)), \
            f"Distance to {type(other).__name__} should be symmetric"

    s0 = Segment(Point2(0, 0), Point2(2, 2))
    s1 = Segment(Point2(5, 0), Point2(6, -3))
    assert distance(s0, s1) == pytest.approx(distance(s1, s0))


def test_dispatcher_rejects_unsupported_pairs():
    from geom2d import Arc, Point2, Ray, Segment, distance, squared_distance

    with pytest.raises(TypeError):
        squared_distance(Segment(Point2(0, 0), Point2(1, 0)), Ray(Point2(0, 0), Point2(1, 0)))

    with pytest.raises(TypeError):
        distance(Point2(0, 0), Arc(Point2(0, 0), 1.0, 0.0, 90.0))


def test_point_ray():
    from geom2d import Point2, Ray, distance_point_ray

    ray = Ray(Point2(0, 0), Point2(2, 0))

    assert distance_point_ray(Point2(5, 3), ray) == pytest.approx(3.0), "Ahead of the origin"
    assert distance_point_ray(Point2(-3, 4), ray) == pytest.approx(5.0), "Behind the origin"


def test_ray_ray():
    from geom2d import Point2, Ray, distance_ray_ray

    crossing = distance_ray_ray(Ray(Point2(0, 0), Point2(1, 1)), Ray(Point2(4, 0), Point2(-1, 1)))
    parallel = distance_ray_ray(Ray(Point2(0, 0), Point2(1, 0)), Ray(Point2(0, 1), Point2(1, 0)))
    facing = distance_ray_ray(Ray(Point2(0, 0), Point2(1, 0)), Ray(Point2(5, 0), Point2(-1, 0)))
    away = distance_ray_ray(Ray(Point2(0, 0), Point2(-1, 0)), Ray(Point2(5, 0), Point2(1, 0)))
    diverging = distance_ray_ray(Ray(Point2(0, 0), Point2(1, 0)), Ray(Point2(0, 1), Point2(-1, 1)))

    assert crossing == 0.0, "Crossing rays meet"
    assert parallel == pytest.approx(1.0), "Parallel rays keep their offset"
    assert facing == 0.0, "Collinear rays facing each other overlap"
    assert away == pytest.approx(5.0), "Collinear rays pointing apart are separated by their origins"
    assert diverging == pytest.approx(1.0), "Lines meet behind one origin"


def test_segment_segment_crossing_is_zero():
    from geom2d import Point2, Segment, distance_segment_segment

    s0 = Segment(Point2(0, 0), Point2(10, 10))
    s1 = Segment(Point2(0, 10), Point2(10, 0))

    assert distance_segment_segment(s0, s1) == 0.0


def test_segment_segment_matches_endpoint_minimum():
    from geom2d import Point2, Segment, distance_point_segment, distance_segment_segment

    pairs = [
        (Segment(Point2(0, 0), Point2(10, 0)), Segment(Point2(0, 3), Point2(10, 3))),
        (Segment(Point2(0, 0), Point2(1, 1)), Segment(Point2(3, 0), Point2(4, 5))),
        (Segment(Point2(-2, 1), Point2(2, 1)), Segment(Point2(0, 2), Point2(0, 6))),
        (Segment(Point2(0, 0), Point2(5, 0)), Segment(Point2(7, 0), Point2(9, 0))),
    ]

    for s0, s1 in pairs:
        expected = min(
            distance_point_segment(s0.p0, s1),
            distance_point_segment(s0.p1, s1),
            distance_point_segment(s1.p0, s0),
            distance_point_segment(s1.p1, s0),
        )
        assert distance_segment_segment(s0, s1) == pytest.approx(expected), \
            f"Distance between {s0} and {s1} should be the endpoint minimum"

    assert distance_segment_segment(*pairs[0]) == pytest.approx(3.0)
    assert distance_segment_segment(*pairs[2]) == pytest.approx(1.0)


def test_point_box_inside_and_outside():
    from geom2d import OrientedBox, Point2, distance_point_box

    box = OrientedBox(Point2(0, 0), Point2(1, 0), Point2(2, 1))

    assert distance_point_box(Point2(0.5, -0.5), box) == 0.0, "Inside the box"
    assert distance_point_box(Point2(2, 1), box) == 0.0, "On a corner"
    assert distance_point_box(Point2(5, 0), box) == pytest.approx(3.0), "Beyond one face"
    assert distance_point_box(Point2(4, 3), box) == pytest.approx(math.sqrt(8.0)), "Beyond a corner"


def test_point_box_is_rotation_consistent():
    from geom2d import OrientedBox, Point2, distance_point_box

    axis_aligned = OrientedBox(Point2(0, 0), Point2(1, 0), Point2(2, 1))
    rotated = OrientedBox(Point2(3, -1), Point2(1, 1), Point2(2, 1))
    u, v = rotated.axes

    for local in (Point2(0.5, 0.2), Point2(3, 0), Point2(4, 3), Point2(-1, -2.5)):
        world = rotated.center + local.x * u + local.y * v
        assert distance_point_box(world, rotated) == pytest.approx(distance_point_box(local, axis_aligned)), \
            f"Local point {local} should be equally far from both boxes"


def test_segment_segment_honors_epsilon():
    from geom2d import Point2, Segment, distance_segment_segment

    s0 = Segment(Point2(0, 0), Point2(1, 0))
    s1 = Segment(Point2(0.5, 0.001), Point2(3, 0.001))

    assert distance_segment_segment(s0, s1) == pytest.approx(0.001), "Default tolerance keeps the gap"
    assert distance_segment_segment(s0, s1, epsilon=1e-2) == 0.0, \
        "A looser tolerance treats the segments as overlapping"


def test_ray_ray_honors_epsilon():
    from geom2d import Point2, Ray, distance_ray_ray

    r0 = Ray(Point2(0, 0), Point2(1, 0))
    r1 = Ray(Point2(5, 0.001), Point2(-1, 0))

    assert distance_ray_ray(r0, r1) == pytest.approx(0.001), "Default tolerance keeps the offset"
    assert distance_ray_ray(r0, r1, epsilon=1e-2) == 0.0, \
        "A looser tolerance treats the facing rays as collinear"
