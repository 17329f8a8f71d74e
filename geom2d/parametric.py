"""
Parametric helpers shared by the intersection and distance queries.
"""

from typing import Tuple

from .base import Point2, Segment


def solve_lines(a: Point2, ab: Point2, c: Point2, cd: Point2) -> Tuple[float, float, float]:
    """
    Denominator and unnormalized parameters of two parametric lines.

    Solves A + r (B - A) = C + s (D - C) with Cramer's rule:

        r = ((Ay-Cy)(Dx-Cx) - (Ax-Cx)(Dy-Cy)) / den
        s = ((Ay-Cy)(Bx-Ax) - (Ax-Cx)(By-Ay)) / den
        den = (Bx-Ax)(Dy-Cy) - (By-Ay)(Dx-Cx)

    Returns:
        Tuple of (den, r numerator, s numerator)
    """
    ac = a - c
    den = ab.cross(cd)
    r = ac.y * cd.x - ac.x * cd.y
    s = ac.y * ab.x - ac.x * ab.y
    return den, r, s


def squared_distance_point_segment(point: Point2, segment: Segment) -> float:
    """
    Squared distance between a point and a segment.

    Projects the point onto the segment direction and clamps to the
    endpoints (both bounds inclusive).

    Args:
        point: Query point
        segment: Target segment

    Returns:
        Squared distance to the nearest point of the segment
    """
    d = segment.p1 - segment.p0
    diff_p0 = point - segment.p0
    t = d.dot(diff_p0)

    if t <= 0:
        # p0 is the closest point
        return diff_p0.dot(diff_p0)

    dd = d.dot(d)
    if t >= dd:
        # p1 is the closest point
        diff_p1 = point - segment.p1
        return diff_p1.dot(diff_p1)

    # Closest point is inside the segment
    return diff_p0.dot(diff_p0) - t * t / dd


def is_point_on_segment(point: Point2, segment: Segment, epsilon: float) -> bool:
    """Check whether a point lies within epsilon of a segment."""
    return squared_distance_point_segment(point, segment) <= epsilon * epsilon
