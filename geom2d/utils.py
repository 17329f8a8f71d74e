"""
Utility functions for interoperating with shapely.
"""

from typing import Iterable, List, Optional, Tuple, Union
from shapely.geometry import LineString, MultiLineString, Point, Polygon

from .base import Point2, Segment
from .shapes import Arc, OrientedBox, Rectangle, Triangle
from .shapes import Polygon as VertexPolygon
from .constants import ARC_EXPLODE_STEPS

Convertible = Union[Point2, Segment, Arc, Rectangle, Triangle, OrientedBox, VertexPolygon]


def get_bounding_box(segments: Iterable[Segment]) -> Tuple[float, float, float, float]:
    """
    Calculate the bounding box of a set of segments.

    Args:
        segments: Segments to enclose

    Returns:
        Tuple of (min_x, min_y, max_x, max_y)
    """
    all_points = [point for segment in segments for point in (segment.p0, segment.p1)]
    if not all_points:
        return (0.0, 0.0, 0.0, 0.0)

    xs = [p.x for p in all_points]
    ys = [p.y for p in all_points]

    return (min(xs), min(ys), max(xs), max(ys))


def to_shapely(primitive: Convertible, arc_steps: int = ARC_EXPLODE_STEPS):
    """
    Convert a kernel primitive to the equivalent shapely geometry.

    Args:
        primitive: Point2, Segment, Arc, Rectangle, Triangle, OrientedBox or Polygon
        arc_steps: Number of chords used to approximate arcs

    Returns:
        Point, LineString or Polygon

    Raises:
        TypeError: If the primitive type has no shapely equivalent
    """
    if isinstance(primitive, Point2):
        return Point(primitive.x, primitive.y)
    if isinstance(primitive, Segment):
        return LineString([primitive.p0.as_tuple(), primitive.p1.as_tuple()])
    if isinstance(primitive, Arc):
        chords = primitive.explode(arc_steps)
        coords = [chords[0].p0.as_tuple()] + [chord.p1.as_tuple() for chord in chords]
        return LineString(coords)
    if isinstance(primitive, (Rectangle, OrientedBox)):
        return Polygon([corner.as_tuple() for corner in primitive.corners])
    if isinstance(primitive, Triangle):
        return Polygon([primitive.p0.as_tuple(), primitive.p1.as_tuple(), primitive.p2.as_tuple()])
    if isinstance(primitive, VertexPolygon):
        return Polygon([point.as_tuple() for point in primitive])
    raise TypeError(f"{type(primitive).__name__} has no shapely equivalent")


def hatching_region(outer: Rectangle, hole: Optional[Rectangle] = None) -> Polygon:
    """
    Build the shapely region filled by a hatching.

    Args:
        outer: Outer boundary
        hole: Optional hole

    Returns:
        Shapely Polygon with the hole as an interior ring
    """
    exterior = [corner.as_tuple() for corner in outer.corners]
    holes = [[corner.as_tuple() for corner in hole.corners]] if hole is not None else []
    return Polygon(exterior, holes)


def segments_to_multilinestring(segments: Iterable[Segment]) -> MultiLineString:
    """Collect segments into a single shapely MultiLineString."""
    return MultiLineString([[s.p0.as_tuple(), s.p1.as_tuple()] for s in segments])


def clip_segment(segment: Segment, polygon: Polygon) -> List[Segment]:
    """
    Clip a segment to a polygon.

    Args:
        segment: Segment to clip
        polygon: Shapely Polygon to clip against

    Returns:
        List of Segments lying inside the polygon; touching points are ignored
    """
    intersection = to_shapely(segment).intersection(polygon)

    if intersection.is_empty:
        return []

    if intersection.geom_type == 'LineString':
        lines = [intersection]
    elif intersection.geom_type in ('MultiLineString', 'GeometryCollection'):
        lines = [geom for geom in intersection.geoms if geom.geom_type == 'LineString']
    else:
        # Single point intersection - ignore
        lines = []

    clipped = []
    for line in lines:
        coords = list(line.coords)
        if len(coords) >= 2:
            clipped.append(Segment(Point2(*coords[0]), Point2(*coords[-1])))
    return clipped
