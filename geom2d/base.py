"""
Base value types for the 2D geometry kernel.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional, Tuple
import numpy as np

from .constants import EPSILON


@dataclass(frozen=True)
class Point2:
    """
    Immutable 2D coordinate pair, also used as a 2D vector.

    Attributes:
        x: X coordinate
        y: Y coordinate
    """
    x: float
    y: float

    # numpy scalars defer to the reflected operators below
    __array_ufunc__ = None

    def __post_init__(self):
        # Coerce numpy scalars and ints so equality and repr stay predictable
        object.__setattr__(self, 'x', float(self.x))
        object.__setattr__(self, 'y', float(self.y))

    def __add__(self, other: 'Point2') -> 'Point2':
        return Point2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: 'Point2') -> 'Point2':
        return Point2(self.x - other.x, self.y - other.y)

    def __neg__(self) -> 'Point2':
        return Point2(-self.x, -self.y)

    def __mul__(self, factor: float) -> 'Point2':
        return Point2(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __truediv__(self, factor: float) -> 'Point2':
        return Point2(self.x / factor, self.y / factor)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def dot(self, other: 'Point2') -> float:
        """Dot product with another vector."""
        return self.x * other.x + self.y * other.y

    def cross(self, other: 'Point2') -> float:
        """Z component of the 3D cross product (2D "perp dot")."""
        return self.x * other.y - self.y * other.x

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y

    def length(self) -> float:
        return float(np.hypot(self.x, self.y))

    def normalized(self, epsilon: float = EPSILON) -> 'Point2':
        """
        Get the unit vector pointing in the same direction.

        Returns the zero vector when the length is below epsilon.
        """
        length = self.length()
        if length < epsilon:
            return Point2(0.0, 0.0)
        return Point2(self.x / length, self.y / length)

    def perpendicular(self) -> 'Point2':
        """Rotate by +90 degrees (counter-clockwise)."""
        return Point2(-self.y, self.x)

    def is_close(self, other: 'Point2', epsilon: float = EPSILON) -> bool:
        """Check whether two points coincide within epsilon."""
        return (self - other).length_squared() <= epsilon * epsilon

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y], dtype=float)


Point2.ZERO = Point2(0.0, 0.0)
Point2.X_AXIS = Point2(1.0, 0.0)
Point2.Y_AXIS = Point2(0.0, 1.0)


class IntervalType(Enum):
    """Endpoint inclusion of an interval."""
    OPEN = "open"
    CLOSED = "closed"
    OPEN_CLOSED = "open_closed"
    CLOSED_OPEN = "closed_open"


@dataclass(frozen=True)
class Interval:
    """
    Scalar interval with configurable endpoint inclusion.

    Attributes:
        min: Lower bound
        max: Upper bound
        kind: Which endpoints belong to the interval
    """
    min: float
    max: float
    kind: IntervalType = IntervalType.CLOSED

    def __post_init__(self):
        if self.min > self.max:
            raise ValueError(f"Interval min {self.min} is greater than max {self.max}")

    @property
    def length(self) -> float:
        return self.max - self.min

    def contains(self, value: float) -> bool:
        """
        Check if a value lies inside the interval.

        Args:
            value: Scalar to test

        Returns:
            True if value is inside, honoring endpoint inclusion
        """
        if self.min < value < self.max:
            return True
        if self.kind == IntervalType.OPEN:
            return False
        if value == self.min:
            return self.kind in (IntervalType.CLOSED, IntervalType.CLOSED_OPEN)
        if value == self.max:
            return self.kind in (IntervalType.CLOSED, IntervalType.OPEN_CLOSED)
        return False

    def intersection(self, other: 'Interval') -> Optional['Interval']:
        """
        Closed overlap of two intervals.

        Returns:
            The overlapping closed Interval, or None when they are disjoint
        """
        lo = max(self.min, other.min)
        hi = min(self.max, other.max)
        if lo > hi:
            return None
        return Interval(lo, hi, IntervalType.CLOSED)

    @classmethod
    def spanning(cls, a: float, b: float) -> 'Interval':
        """Closed interval between two values given in any order."""
        return cls(min(a, b), max(a, b), IntervalType.CLOSED)


@dataclass(frozen=True)
class Segment:
    """
    Line segment from p0 to p1.

    The parameter t runs from 0 at p0 to 1 at p1.
    """
    p0: Point2
    p1: Point2

    @property
    def direction(self) -> Point2:
        """Unnormalized direction p1 - p0."""
        return self.p1 - self.p0

    def length_squared(self) -> float:
        return self.direction.length_squared()

    def length(self) -> float:
        return self.direction.length()

    def point_at(self, t: float) -> Point2:
        """Point at parameter t (t=0 gives p0, t=1 gives p1)."""
        return self.p0 + t * (self.p1 - self.p0)

    def reversed(self) -> 'Segment':
        return Segment(self.p1, self.p0)

    def is_degenerate(self, epsilon: float = EPSILON) -> bool:
        return self.length() < epsilon


@dataclass(frozen=True)
class Ray:
    """
    Half-line starting at origin and extending along direction.

    The direction does not need to be a unit vector.
    """
    origin: Point2
    direction: Point2

    def point_at(self, t: float) -> Point2:
        return self.origin + t * self.direction

    def is_degenerate(self, epsilon: float = EPSILON) -> bool:
        return self.direction.length() < epsilon
