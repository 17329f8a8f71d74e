"""
Distance queries between geometric primitives.

Squared distances avoid the square root and should be preferred for
comparisons. Each `distance_*` function is the square root of its squared
counterpart.
"""

from typing import Union
import numpy as np

from .base import Point2, Ray, Segment
from .shapes import OrientedBox
from .constants import EPSILON
from .intersection import IntersectionType, intersect_segments
from .parametric import solve_lines, squared_distance_point_segment


def _root(squared: float) -> float:
    # Cancellation can leave a tiny negative value for points on the primitive
    return float(np.sqrt(max(squared, 0.0)))


# Point-Point

def squared_distance_point_point(p0: Point2, p1: Point2) -> float:
    """Squared Euclidean distance between two points."""
    return (p0 - p1).length_squared()


def distance_point_point(p0: Point2, p1: Point2) -> float:
    """Euclidean distance between two points."""
    return (p0 - p1).length()


# Point-Segment

# squared_distance_point_segment lives in parametric.py and is re-exported here

def distance_point_segment(point: Point2, segment: Segment) -> float:
    return _root(squared_distance_point_segment(point, segment))


# Point-Ray

def squared_distance_point_ray(point: Point2, ray: Ray) -> float:
    """
    Squared distance between a point and a ray.

    The ray direction does not need to be normalized.
    """
    diff = point - ray.origin
    t = diff.dot(ray.direction)

    if t <= 0.0:
        return diff.length_squared()

    t = (t * t) / ray.direction.length_squared()
    return diff.length_squared() - t


def distance_point_ray(point: Point2, ray: Ray) -> float:
    return _root(squared_distance_point_ray(point, ray))


# Ray-Ray

def squared_distance_ray_ray(r0: Ray, r1: Ray, epsilon: float = EPSILON) -> float:
    """
    Squared distance between two rays.

    Returns 0 when the rays meet. Otherwise the closest pair of points in
    the plane always includes one of the two origins.
    """
    if r0.is_degenerate(epsilon) or r1.is_degenerate(epsilon):
        return min(
            squared_distance_point_ray(r0.origin, r1),
            squared_distance_point_ray(r1.origin, r0),
        )

    den, r, s = solve_lines(r0.origin, r0.direction, r1.origin, r1.direction)
    if abs(den) > epsilon:
        if r / den >= 0.0 and s / den >= 0.0:
            return 0.0
    elif abs(r) <= epsilon:
        # Collinear rays overlap unless they point away from each other
        if r0.direction.dot(r1.direction) > 0.0 or (r1.origin - r0.origin).dot(r0.direction) >= 0.0:
            return 0.0

    return min(
        squared_distance_point_ray(r0.origin, r1),
        squared_distance_point_ray(r1.origin, r0),
    )


def distance_ray_ray(r0: Ray, r1: Ray, epsilon: float = EPSILON) -> float:
    return _root(squared_distance_ray_ray(r0, r1, epsilon))


# Segment-Segment

def squared_distance_segment_segment(s0: Segment, s1: Segment, epsilon: float = EPSILON) -> float:
    """
    Squared distance between two segments.

    Intersecting segments are at distance 0. In 2D the closest pair of two
    disjoint segments always involves an endpoint, so the result is the
    smallest of the four endpoint-to-segment distances.
    """
    if intersect_segments(s0, s1, epsilon).kind != IntersectionType.NONE:
        return 0.0

    return min(
        squared_distance_point_segment(s0.p0, s1),
        squared_distance_point_segment(s0.p1, s1),
        squared_distance_point_segment(s1.p0, s0),
        squared_distance_point_segment(s1.p1, s0),
    )


def distance_segment_segment(s0: Segment, s1: Segment, epsilon: float = EPSILON) -> float:
    return _root(squared_distance_segment_segment(s0, s1, epsilon))


# Point-Oriented Box

def squared_distance_point_box(point: Point2, box: OrientedBox) -> float:
    """
    Squared distance between a point and an oriented box.

    The point is expressed in the box frame; along each local axis only the
    part beyond the half-width contributes. Points inside the box are at
    distance 0.
    """
    diff = point - box.center
    total = 0.0
    for axis, extent in zip(box.axes, (box.extents.x, box.extents.y)):
        excess = abs(diff.dot(axis)) - extent
        if excess > 0.0:
            total += excess * excess
    return total


def distance_point_box(point: Point2, box: OrientedBox) -> float:
    return _root(squared_distance_point_box(point, box))


# Dispatch

Primitive = Union[Point2, Segment, Ray, OrientedBox]

_SQUARED_DISTANCES = {
    (Point2, Point2): squared_distance_point_point,
    (Point2, Segment): squared_distance_point_segment,
    (Point2, Ray): squared_distance_point_ray,
    (Point2, OrientedBox): squared_distance_point_box,
    (Ray, Ray): squared_distance_ray_ray,
    (Segment, Segment): squared_distance_segment_segment,
}


def squared_distance(a: Primitive, b: Primitive) -> float:
    """
    Squared distance between two primitives of any supported pair of types.

    Mixed pairs are accepted in either order.

    Raises:
        TypeError: If the pair of types is not supported
    """
    func = _SQUARED_DISTANCES.get((type(a), type(b)))
    if func is not None:
        return func(a, b)
    func = _SQUARED_DISTANCES.get((type(b), type(a)))
    if func is not None:
        return func(b, a)
    raise TypeError(
        f"Distance between {type(a).__name__} and {type(b).__name__} is not supported"
    )


def distance(a: Primitive, b: Primitive) -> float:
    """Distance between two primitives (see squared_distance)."""
    return _root(squared_distance(a, b))
