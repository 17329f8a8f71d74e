"""
Composite shapes built on the base value types.

Arcs carry the discretization logic used by the vertical distance queries;
rectangles expose the boundary consumed by the hatching generator.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Tuple
import numpy as np

from .base import Point2, Segment
from .constants import EPSILON, ARC_EXPLODE_STEPS, FULL_TURN_DEGREES

logger = logging.getLogger(__name__)


class Ordering(Enum):
    """Vertex ordering of a triangle."""
    CLOCKWISE = "clockwise"
    COUNTERCLOCKWISE = "counterclockwise"
    NONE = "none"


@dataclass(frozen=True)
class Arc:
    """
    Circular arc.

    Angles are in degrees, measured counter-clockwise from the +X axis, so a
    point on the arc is center + radius * (cos(angle), sin(angle)). The arc
    runs from angle0 to angle1; when angle1 < angle0 it is traversed
    clockwise.

    Attributes:
        center: Center of the supporting circle
        radius: Radius of the supporting circle
        angle0: Starting angle in degrees
        angle1: Ending angle in degrees
    """
    center: Point2
    radius: float
    angle0: float
    angle1: float

    @property
    def p0(self) -> Point2:
        """Starting point."""
        return self.point_at_angle(self.angle0)

    @property
    def p1(self) -> Point2:
        """Ending point."""
        return self.point_at_angle(self.angle1)

    @property
    def sweep(self) -> float:
        """Signed angular span in degrees."""
        return self.angle1 - self.angle0

    def point_at_angle(self, angle: float) -> Point2:
        """
        Get the arc point for a given angle.

        Args:
            angle: Angle in degrees

        Returns:
            Point on the supporting circle
        """
        angle_rad = np.radians(angle)
        return Point2(
            self.center.x + self.radius * float(np.cos(angle_rad)),
            self.center.y + self.radius * float(np.sin(angle_rad))
        )

    def angle_at_point(self, point: Point2, epsilon: float = EPSILON) -> float:
        """
        Get the angle of a point as seen from the arc center.

        Inverse of point_at_angle: the result is normalized to [0, 360).

        Args:
            point: Point to measure
            epsilon: Distance below which the point is considered the center

        Returns:
            Angle in degrees, 0.0 when the point coincides with the center
        """
        offset = point - self.center
        if offset.length() < epsilon:
            logger.debug("angle_at_point: point %s coincides with arc center", point)
            return 0.0

        angle = float(np.degrees(np.arctan2(offset.y, offset.x))) % FULL_TURN_DEGREES
        # -0.0 and values that round up to a full turn both map to 0
        if angle >= FULL_TURN_DEGREES or angle == 0.0:
            angle = 0.0
        return angle

    def explode(self, step_count: int = ARC_EXPLODE_STEPS) -> List[Segment]:
        """
        Approximate the arc by a polyline of equal angular steps.

        Args:
            step_count: Number of chords to generate

        Returns:
            List of step_count contiguous Segments from angle0 to angle1

        Raises:
            ValueError: If step_count is less than 1
        """
        if step_count < 1:
            raise ValueError(f"step_count must be at least 1, got {step_count}")

        angles = np.linspace(self.angle0, self.angle1, step_count + 1)
        points = [self.point_at_angle(angle) for angle in angles]
        return [Segment(points[i], points[i + 1]) for i in range(step_count)]


@dataclass(frozen=True)
class Circle:
    """
    Circle defined by center and radius.

    Parametric form: X(t) = center + radius * (cos t, sin t).
    """
    center: Point2
    radius: float

    def area(self) -> float:
        return float(np.pi) * self.radius * self.radius

    def point_at_angle(self, angle: float) -> Point2:
        """Point on the circle at an angle given in degrees."""
        return self.to_arc().point_at_angle(angle)

    def to_arc(self) -> Arc:
        """Full turn arc on this circle, starting at angle 0."""
        return Arc(self.center, self.radius, 0.0, FULL_TURN_DEGREES)


Circle.UNIT = Circle(Point2(0.0, 0.0), 1.0)


@dataclass(frozen=True)
class Triangle:
    """Triangle with vertices p0, p1, p2."""
    p0: Point2
    p1: Point2
    p2: Point2

    def __getitem__(self, index: int) -> Point2:
        if index == 0:
            return self.p0
        if index == 1:
            return self.p1
        if index == 2:
            return self.p2
        raise IndexError(f"Triangle index out of range: {index}")

    def __len__(self) -> int:
        return 3

    def signed_area(self) -> float:
        """
        Signed area of the triangle.

        Area(P0, P1, P2) = 0.5 * ((x1-x0)(y2-y0) - (x2-x0)(y1-y0)),
        positive for counter-clockwise vertices.
        """
        return 0.5 * (self.p1 - self.p0).cross(self.p2 - self.p0)

    def area(self) -> float:
        return abs(self.signed_area())

    @property
    def ordering(self) -> Ordering:
        """Vertex ordering given by the sign of the area."""
        area = self.signed_area()
        if area > 0:
            return Ordering.COUNTERCLOCKWISE
        elif area < 0:
            return Ordering.CLOCKWISE
        else:
            return Ordering.NONE

    def from_barycentric(self, u: float, v: float) -> Point2:
        """Point from barycentric coordinates (1-u-v, u, v)."""
        return (1.0 - u - v) * self.p0 + u * self.p1 + v * self.p2

    @property
    def segments(self) -> Tuple[Segment, Segment, Segment]:
        return (
            Segment(self.p0, self.p1),
            Segment(self.p1, self.p2),
            Segment(self.p2, self.p0),
        )


@dataclass(frozen=True)
class Polygon:
    """
    Closed polygon given by its vertex list.

    Attributes:
        points: Vertices in order; the last connects back to the first
    """
    points: Tuple[Point2, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, 'points', tuple(self.points))

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Point2]:
        return iter(self.points)

    def __getitem__(self, index: int) -> Point2:
        return self.points[index]

    def flipped(self) -> 'Polygon':
        """Same polygon with the vertex order reversed."""
        return Polygon(self.points[::-1])

    @property
    def segments(self) -> List[Segment]:
        """Edges in vertex order, closing back to the first vertex."""
        count = len(self.points)
        if count < 2:
            return []
        return [Segment(self.points[i], self.points[(i + 1) % count]) for i in range(count)]


@dataclass(frozen=True)
class Rectangle:
    """
    Axis-aligned rectangle.

    Attributes:
        origin: Lower-left corner
        dimensions: Width and height as a Point2
    """
    origin: Point2
    dimensions: Point2

    @property
    def corners(self) -> Tuple[Point2, Point2, Point2, Point2]:
        """Corners P0..P3 in counter-clockwise order starting at origin."""
        p0 = self.origin
        p1 = self.origin + self.dimensions.x * Point2.X_AXIS
        p2 = self.origin + self.dimensions
        p3 = self.origin + self.dimensions.y * Point2.Y_AXIS
        return (p0, p1, p2, p3)

    @property
    def segments(self) -> Tuple[Segment, Segment, Segment, Segment]:
        """Boundary segments: bottom, right, top, left."""
        p0, p1, p2, p3 = self.corners
        return (
            Segment(p0, p1),
            Segment(p1, p2),
            Segment(p2, p3),
            Segment(p3, p0),
        )


@dataclass(frozen=True)
class OrientedBox:
    """
    Rectangle with arbitrary orientation.

    Attributes:
        center: Box center
        axis: Direction of the first local axis (normalized on construction)
        extents: Half-widths along the first and second local axes
    """
    center: Point2
    axis: Point2
    extents: Point2

    def __post_init__(self):
        if self.axis.length() < EPSILON:
            raise ValueError(f"OrientedBox axis must be non-zero, got {self.axis}")
        if self.extents.x < 0 or self.extents.y < 0:
            raise ValueError(f"OrientedBox extents must be non-negative, got {self.extents}")
        object.__setattr__(self, 'axis', self.axis.normalized())

    @property
    def axes(self) -> Tuple[Point2, Point2]:
        """Unit local axes (axis, axis rotated by +90 degrees)."""
        return (self.axis, self.axis.perpendicular())

    @property
    def corners(self) -> Tuple[Point2, Point2, Point2, Point2]:
        u, v = self.axes
        eu = self.extents.x * u
        ev = self.extents.y * v
        return (
            self.center - eu - ev,
            self.center + eu - ev,
            self.center + eu + ev,
            self.center - eu + ev,
        )
