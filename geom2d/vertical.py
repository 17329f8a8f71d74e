"""
Vertical (Y direction) gaps between primitives.

Each query measures how far a primitive "above" sits over a lower one
within their shared X span. A positive distance means the upper primitive is
above. Every function returns a (found, distance) pair; when found is False
the primitives never overlap in X (or no sample had the expected sign) and
distance is math.inf.

Arcs are reduced to ARC_EXPLODE_STEPS chords before measuring.
"""

import math
from typing import Tuple

from .base import Point2, Segment
from .shapes import Arc
from .constants import EPSILON, ARC_EXPLODE_STEPS

VerticalGap = Tuple[bool, float]


def point_to_above_segment(point: Point2, segment: Segment, epsilon: float = EPSILON) -> VerticalGap:
    """
    Vertical gap from a point up to a segment.

    Args:
        point: Lower point
        segment: Segment expected above the point
        epsilon: Tolerance on the X span and for near-vertical segments

    Returns:
        (found, distance): found is False when point.x is outside the
        segment's X span. For a near-vertical segment the distance is 0
        inside its Y range, else the gap to the nearest end.
    """
    x_min = min(segment.p0.x, segment.p1.x)
    x_max = max(segment.p0.x, segment.p1.x)

    if point.x < x_min - epsilon or point.x > x_max + epsilon:
        return False, math.inf

    dx = segment.p1.x - segment.p0.x
    if abs(dx) < epsilon:
        y_min = min(segment.p0.y, segment.p1.y)
        y_max = max(segment.p0.y, segment.p1.y)
        if point.y < y_min:
            return True, y_min - point.y
        elif point.y > y_max:
            return True, y_max - point.y
        return True, 0.0

    y_on_segment = segment.p0.y + (point.x - segment.p0.x) * (segment.p1.y - segment.p0.y) / dx
    return True, y_on_segment - point.y


def point_to_above_arc(point: Point2, arc: Arc, epsilon: float = EPSILON) -> VerticalGap:
    """Smallest strictly positive gap from a point up to any chord of an arc."""
    found = False
    distance = math.inf
    for chord in arc.explode(ARC_EXPLODE_STEPS):
        ok, dist = point_to_above_segment(point, chord, epsilon)
        if ok and dist > 0:
            distance = min(distance, dist)
            found = True
    return found, distance


def segment_to_above_segment(segment: Segment, segment_above: Segment, epsilon: float = EPSILON) -> VerticalGap:
    """
    Vertical clearance between a segment and a segment above it.

    Both directions are sampled: the lower segment's endpoints against the
    upper one (keeping gaps >= 0) and the upper segment's endpoints against
    the lower one (keeping gaps <= 0, sign-flipped).

    Returns:
        (found, distance) with the smallest non-negative clearance
    """
    found = False
    distance = math.inf

    for point in (segment.p0, segment.p1):
        ok, dist = point_to_above_segment(point, segment_above, epsilon)
        if ok and dist >= 0.0:
            distance = min(distance, dist)
            found = True

    for point in (segment_above.p0, segment_above.p1):
        ok, dist = point_to_above_segment(point, segment, epsilon)
        if ok and dist <= 0.0:
            distance = min(distance, -dist)
            found = True

    return found, distance


def _chord_to_above_segment(lower: Segment, upper: Segment, epsilon: float) -> VerticalGap:
    # Same sampling as segment_to_above_segment with strict sign filters
    found = False
    distance = math.inf

    for point in (lower.p0, lower.p1):
        ok, dist = point_to_above_segment(point, upper, epsilon)
        if ok and dist > 0:
            distance = min(distance, dist)
            found = True

    for point in (upper.p0, upper.p1):
        ok, dist = point_to_above_segment(point, lower, epsilon)
        if ok and dist < 0:
            distance = min(distance, -dist)
            found = True

    return found, distance


def segment_to_above_arc(segment: Segment, arc_above: Arc, epsilon: float = EPSILON) -> VerticalGap:
    """Vertical clearance between a segment and an arc above it."""
    found = False
    distance = math.inf
    for chord in arc_above.explode(ARC_EXPLODE_STEPS):
        ok, dist = _chord_to_above_segment(segment, chord, epsilon)
        if ok:
            distance = min(distance, dist)
            found = True
    return found, distance


def arc_to_above_segment(arc: Arc, segment_above: Segment, epsilon: float = EPSILON) -> VerticalGap:
    """Vertical clearance between an arc and a segment above it."""
    found = False
    distance = math.inf
    for chord in arc.explode(ARC_EXPLODE_STEPS):
        ok, dist = _chord_to_above_segment(chord, segment_above, epsilon)
        if ok:
            distance = min(distance, dist)
            found = True
    return found, distance


def arc_to_above_arc(arc: Arc, arc_above: Arc, epsilon: float = EPSILON) -> VerticalGap:
    """
    Vertical clearance between two arcs.

    Every chord pair is compared with segment_to_above_segment; only
    strictly positive clearances count.
    """
    found = False
    distance = math.inf
    chords_above = arc_above.explode(ARC_EXPLODE_STEPS)
    for chord in arc.explode(ARC_EXPLODE_STEPS):
        for chord_above in chords_above:
            ok, dist = segment_to_above_segment(chord, chord_above, epsilon)
            if ok and dist > 0:
                distance = min(distance, dist)
                found = True
    return found, distance
