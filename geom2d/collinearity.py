"""
Collinearity tests based on a normalized cross product.
"""

from .base import Point2, Segment
from .constants import EPSILON


def signed_triangle_area_indicator(segment: Segment, point: Point2, epsilon: float = EPSILON) -> float:
    """
    Orientation of a point relative to a segment.

    This is the cross product of the unit vectors (point - p0) and
    (p1 - p0), i.e. the sine of the angle between them. It is bounded in
    [-1, 1] and is not the triangle area itself.

    Args:
        segment: Reference segment
        point: Point to classify
        epsilon: Length below which either vector is treated as zero

    Returns:
        Sine of the angle, or 0.0 when the point sits on p0 or the segment
        is degenerate
    """
    u = point - segment.p0
    u_length = u.length()
    if u_length < epsilon:
        return 0.0
    v = segment.p1 - segment.p0
    v_length = v.length()
    if v_length < epsilon:
        return 0.0
    u = u * (1.0 / u_length)
    v = v * (1.0 / v_length)
    return u.x * v.y - u.y * v.x


def is_point_collinear(segment: Segment, point: Point2, epsilon: float = EPSILON) -> bool:
    """Check whether a point lies on the segment's supporting line."""
    return abs(signed_triangle_area_indicator(segment, point, epsilon)) <= epsilon


def are_segments_collinear(s0: Segment, s1: Segment, epsilon: float = EPSILON) -> bool:
    """Check whether both endpoints of s1 lie on the supporting line of s0."""
    return is_point_collinear(s0, s1.p0, epsilon) and is_point_collinear(s0, s1.p1, epsilon)
