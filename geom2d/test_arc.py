"""
Tests for arc discretization.
"""

import pytest


def test_angle_round_trip_over_octants():
    from geom2d import Arc, Point2

    arc = Arc(Point2(1, 2), 3.0, 0.0, 360.0)

    for angle in range(0, 360, 45):
        point = arc.point_at_angle(angle)
        assert arc.angle_at_point(point) == pytest.approx(angle, abs=1e-6), \
            f"Round trip of {angle}° failed"


def test_angle_is_normalized():
    from geom2d import Arc, Point2

    arc = Arc(Point2(0, 0), 1.0, 0.0, 90.0)

    assert arc.angle_at_point(Point2(0, -2)) == pytest.approx(270.0), "Angles fall in [0, 360)"
    assert arc.angle_at_point(arc.point_at_angle(-90.0)) == pytest.approx(270.0)
    assert arc.angle_at_point(arc.point_at_angle(450.0)) == pytest.approx(90.0)
    assert arc.angle_at_point(Point2(0, 0)) == 0.0, "Center maps to 0"


def test_arc_endpoints():
    from geom2d import Arc, Point2

    arc = Arc(Point2(0, 0), 2.0, 90.0, 180.0)

    assert arc.p0.is_close(Point2(0, 2))
    assert arc.p1.is_close(Point2(-2, 0))
    assert arc.sweep == 90.0


def test_explode_count_and_contiguity():
    from geom2d import ARC_EXPLODE_STEPS, Arc, Point2

    arc = Arc(Point2(5, -1), 4.0, 10.0, 200.0)

    for steps in (1, 7, ARC_EXPLODE_STEPS):
        chords = arc.explode(steps)
        assert len(chords) == steps, f"Expected {steps} chords, got {len(chords)}"
        for prev, nxt in zip(chords, chords[1:]):
            assert prev.p1 == nxt.p0, "Consecutive chords should share an endpoint"
        assert chords[0].p0.is_close(arc.p0), "First chord starts at the arc start"
        assert chords[-1].p1.is_close(arc.p1), "Last chord ends at the arc end"

    assert len(arc.explode()) == ARC_EXPLODE_STEPS


def test_explode_points_lie_on_circle():
    from geom2d import Arc, Point2

    arc = Arc(Point2(1, 1), 2.5, 300.0, 60.0)

    for chord in arc.explode():
        assert (chord.p0 - arc.center).length() == pytest.approx(2.5)
    # angle1 < angle0 runs clockwise through 0
    assert arc.explode(2)[0].p1.is_close(arc.point_at_angle(180.0))


def test_explode_rejects_non_positive_steps():
    from geom2d import Arc, Point2

    arc = Arc(Point2(0, 0), 1.0, 0.0, 90.0)

    with pytest.raises(ValueError):
        arc.explode(0)


def test_zero_radius_arc_is_safe():
    from geom2d import Arc, Point2

    arc = Arc(Point2(2, 3), 0.0, 0.0, 90.0)
    chords = arc.explode(4)

    assert all(chord.is_degenerate() for chord in chords)
    assert arc.angle_at_point(Point2(2, 3)) == 0.0
