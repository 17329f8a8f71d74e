"""
Intersection queries between linear primitives.

All queries solve the two-line parametric system

    A + r (B - A) = C + s (D - C)

with Cramer's rule and then classify the result into a tagged Intersection.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Union

from .base import Interval, Point2, Ray, Segment
from .constants import EPSILON
from .parametric import is_point_on_segment, solve_lines

logger = logging.getLogger(__name__)


class IntersectionType(Enum):
    """Kind of intersection produced by a query."""
    NONE = "none"
    POINT = "point"
    SEGMENT = "segment"


@dataclass(frozen=True)
class Intersection:
    """
    Result of an intersection query.

    Exactly one payload matches the kind: `point` for POINT, `segment` for
    SEGMENT, neither for NONE. Instances are truthy unless the kind is NONE.

    Attributes:
        kind: Intersection kind
        point: Intersection point (POINT only)
        segment: Overlapping sub-segment (SEGMENT only)
    """
    kind: IntersectionType = IntersectionType.NONE
    point: Optional[Point2] = None
    segment: Optional[Segment] = None

    def __post_init__(self):
        if self.kind == IntersectionType.NONE and (self.point is not None or self.segment is not None):
            raise ValueError("NONE intersection cannot carry a payload")
        if self.kind == IntersectionType.POINT and (self.point is None or self.segment is not None):
            raise ValueError("POINT intersection requires exactly a point")
        if self.kind == IntersectionType.SEGMENT and (self.segment is None or self.point is not None):
            raise ValueError("SEGMENT intersection requires exactly a segment")

    @classmethod
    def none(cls) -> 'Intersection':
        return cls()

    @classmethod
    def at_point(cls, point: Point2) -> 'Intersection':
        return cls(IntersectionType.POINT, point=point)

    @classmethod
    def along_segment(cls, segment: Segment) -> 'Intersection':
        return cls(IntersectionType.SEGMENT, segment=segment)

    def __bool__(self) -> bool:
        return self.kind != IntersectionType.NONE

    @property
    def result(self) -> Union[Point2, Segment]:
        """
        Payload of the intersection.

        Raises:
            ValueError: If there is no intersection
        """
        if self.kind == IntersectionType.POINT:
            return self.point
        if self.kind == IntersectionType.SEGMENT:
            return self.segment
        raise ValueError("No intersection")

    @property
    def points(self) -> List[Point2]:
        """Points describing the intersection: none, one, or both overlap ends."""
        if self.kind == IntersectionType.POINT:
            return [self.point]
        if self.kind == IntersectionType.SEGMENT:
            return [self.segment.p0, self.segment.p1]
        return []


def _collinear_overlap(s0: Segment, s1: Segment, epsilon: float) -> Intersection:
    """Overlap of two segments already known to share a supporting line."""
    if s0.is_degenerate(epsilon) and s1.is_degenerate(epsilon):
        if s0.p0.is_close(s1.p0, epsilon):
            return Intersection.at_point(s0.p0)
        return Intersection.none()
    if s0.is_degenerate(epsilon):
        s0, s1 = s1, s0
    if s1.is_degenerate(epsilon):
        logger.debug("Collinear overlap with degenerate segment %s", s1)
        if is_point_on_segment(s1.p0, s0, epsilon):
            return Intersection.at_point(s1.p0)
        return Intersection.none()

    # Parametrize s1 along s0's own direction so vertical segments work too
    d = s0.direction
    dd = d.dot(d)
    t0 = (s1.p0 - s0.p0).dot(d) / dd
    t1 = (s1.p1 - s0.p0).dot(d) / dd

    overlap = Interval(0.0, 1.0).intersection(Interval.spanning(t0, t1))
    if overlap is None:
        return Intersection.none()

    start = s0.point_at(overlap.min)
    end = s0.point_at(overlap.max)
    if start.is_close(end, epsilon):
        return Intersection.at_point(start)
    return Intersection.along_segment(Segment(start, end))


def _collinear_ray_overlap(segment: Segment, ray: Ray, epsilon: float) -> Intersection:
    """Part of a segment lying on a collinear ray."""
    if ray.is_degenerate(epsilon):
        logger.debug("Degenerate ray direction at %s", ray.origin)
        if is_point_on_segment(ray.origin, segment, epsilon):
            return Intersection.at_point(ray.origin)
        return Intersection.none()

    dd = ray.direction.dot(ray.direction)
    t0 = (segment.p0 - ray.origin).dot(ray.direction) / dd
    t1 = (segment.p1 - ray.origin).dot(ray.direction) / dd

    if t0 < -epsilon and t1 < -epsilon:
        return Intersection.none()

    start = segment.p0 if t0 >= -epsilon else ray.origin
    end = segment.p1 if t1 >= -epsilon else ray.origin
    if start.is_close(end, epsilon):
        return Intersection.at_point(start)
    return Intersection.along_segment(Segment(start, end))


def intersect_lines(s0: Segment, s1: Segment, epsilon: float = EPSILON) -> Intersection:
    """
    Intersect the infinite lines supporting two segments.

    Args:
        s0: Segment defining the first line
        s1: Segment defining the second line
        epsilon: Tolerance for parallelism

    Returns:
        POINT intersection, or NONE when the lines are parallel or identical
    """
    den, r, _ = solve_lines(s0.p0, s0.direction, s1.p0, s1.direction)
    if abs(den) > epsilon:
        return Intersection.at_point(s0.point_at(r / den))
    return Intersection.none()


def intersect_segments(s0: Segment, s1: Segment, epsilon: float = EPSILON) -> Intersection:
    """
    Intersect two segments.

    Parameter ranges are closed, so touching endpoints count as an
    intersection. Collinear segments report their true overlap.

    Args:
        s0: First segment
        s1: Second segment
        epsilon: Tolerance for parallelism and collinearity

    Returns:
        POINT for a single crossing or touching point, SEGMENT for a
        collinear overlap of positive length, NONE otherwise
    """
    den, r, s = solve_lines(s0.p0, s0.direction, s1.p0, s1.direction)

    # If the denominator is zero, AB and CD are parallel
    if abs(den) <= epsilon:
        # If the numerator of r is also zero, AB and CD are collinear
        if abs(r) <= epsilon:
            return _collinear_overlap(s0, s1, epsilon)
        return Intersection.none()

    r /= den
    s /= den
    if 0.0 <= r <= 1.0 and 0.0 <= s <= 1.0:
        return Intersection.at_point(s0.point_at(r))
    return Intersection.none()


def intersect_segment_ray(segment: Segment, ray: Ray, epsilon: float = EPSILON) -> Intersection:
    """
    Intersect a segment with a ray.

    The segment parameter must lie in [0, 1] and the ray parameter must not
    be negative (hits behind the origin are rejected).

    Args:
        segment: Segment to test
        ray: Ray to cast
        epsilon: Tolerance for parallelism, collinearity and the ray origin

    Returns:
        POINT for a crossing, SEGMENT when the ray runs along the segment,
        NONE otherwise
    """
    den, r, s = solve_lines(segment.p0, segment.direction, ray.origin, ray.direction)

    if abs(den) <= epsilon:
        if abs(r) <= epsilon:
            return _collinear_ray_overlap(segment, ray, epsilon)
        return Intersection.none()

    r /= den
    s /= den
    if 0.0 <= r <= 1.0 and s >= -epsilon:
        return Intersection.at_point(segment.point_at(r))
    return Intersection.none()
