"""
2D geometry kernel for layer processing.

This package provides value types (points, intervals, segments, rays),
composite shapes (arcs, circles, triangles, rectangles, oriented boxes),
intersection and distance queries, vertical clearance between segments and
arcs, and ray-cast hatching of rectangles.

Usage:
    from geom2d import Point2, Rectangle, Hatching, Segment, intersect_segments

    # Intersect two segments
    hit = intersect_segments(
        Segment(Point2(0, 0), Point2(10, 10)),
        Segment(Point2(0, 10), Point2(10, 0)),
    )
    print(hit.kind, hit.result)

    # Hatch a rectangle with a hole
    outer = Rectangle(Point2(0, 0), Point2(20, 20))
    hole = Rectangle(Point2(7, 7), Point2(6, 6))
    segments = Hatching(outer, hole).get_hatching_segments(angle=45, spacing=0.5)
"""

from .constants import EPSILON, ARC_EXPLODE_STEPS
from .base import Point2, Interval, IntervalType, Segment, Ray
from .shapes import Arc, Circle, Triangle, Polygon, Rectangle, OrientedBox, Ordering
from .collinearity import signed_triangle_area_indicator, is_point_collinear, are_segments_collinear
from .intersection import (
    Intersection,
    IntersectionType,
    intersect_lines,
    intersect_segments,
    intersect_segment_ray,
)
from .distance import (
    squared_distance,
    distance,
    squared_distance_point_point,
    distance_point_point,
    squared_distance_point_segment,
    distance_point_segment,
    squared_distance_point_ray,
    distance_point_ray,
    squared_distance_ray_ray,
    distance_ray_ray,
    squared_distance_segment_segment,
    distance_segment_segment,
    squared_distance_point_box,
    distance_point_box,
)
from .vertical import (
    point_to_above_segment,
    point_to_above_arc,
    segment_to_above_segment,
    segment_to_above_arc,
    arc_to_above_segment,
    arc_to_above_arc,
)
from .hatching import Hatching, HatchingParameters

__all__ = [
    'EPSILON',
    'ARC_EXPLODE_STEPS',
    'Point2',
    'Interval',
    'IntervalType',
    'Segment',
    'Ray',
    'Arc',
    'Circle',
    'Triangle',
    'Polygon',
    'Rectangle',
    'OrientedBox',
    'Ordering',
    'signed_triangle_area_indicator',
    'is_point_collinear',
    'are_segments_collinear',
    'Intersection',
    'IntersectionType',
    'intersect_lines',
    'intersect_segments',
    'intersect_segment_ray',
    'squared_distance',
    'distance',
    'squared_distance_point_point',
    'distance_point_point',
    'squared_distance_point_segment',
    'distance_point_segment',
    'squared_distance_point_ray',
    'distance_point_ray',
    'squared_distance_ray_ray',
    'distance_ray_ray',
    'squared_distance_segment_segment',
    'distance_segment_segment',
    'squared_distance_point_box',
    'distance_point_box',
    'point_to_above_segment',
    'point_to_above_arc',
    'segment_to_above_segment',
    'segment_to_above_arc',
    'arc_to_above_segment',
    'arc_to_above_arc',
    'Hatching',
    'HatchingParameters',
]
