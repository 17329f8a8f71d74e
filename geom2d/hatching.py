"""
Ray-cast hatching of a rectangle with an optional rectangular hole.
"""

import logging
import math
from dataclasses import dataclass
from typing import List, Optional
import numpy as np

from .base import Point2, Ray, Segment
from .shapes import Rectangle
from .intersection import intersect_segment_ray
from .constants import EPSILON, DEFAULT_HATCH_ANGLE, DEFAULT_HATCH_SPACING

logger = logging.getLogger(__name__)


@dataclass
class HatchingParameters:
    """
    Parameters for hatching generation.

    Attributes:
        hatch_angle: Direction in degrees along which successive scanlines
                     are spaced; the scanlines themselves run perpendicular
        hatch_spacing: Distance between scanlines
    """
    hatch_angle: float = DEFAULT_HATCH_ANGLE
    hatch_spacing: float = DEFAULT_HATCH_SPACING

    def validate(self) -> bool:
        """
        Validate the parameters.

        Returns:
            True if parameters are valid, False otherwise
        """
        if not (math.isfinite(self.hatch_angle) and math.isfinite(self.hatch_spacing)):
            return False
        if self.hatch_spacing <= 0:
            return False
        return True


class Hatching:
    """
    Parallel fill lines inside a rectangle, skipping an optional hole.

    Each scanline is a ray cast across the outer rectangle. Its hits on the
    outer boundary (and on the hole boundary, when the outer rectangle was
    crossed) are sorted along the ray and paired into segments.
    """

    def __init__(self, outer: Rectangle, hole: Optional[Rectangle] = None, epsilon: float = EPSILON):
        """
        Initialize the hatching.

        Args:
            outer: Outer boundary
            hole: Optional inner boundary left unfilled
            epsilon: Tolerance for intersections and merging hits
        """
        self._outer = outer
        self._hole = hole
        self._epsilon = epsilon

    @property
    def outer(self) -> Rectangle:
        return self._outer

    @property
    def hole(self) -> Optional[Rectangle]:
        return self._hole

    @property
    def has_hole(self) -> bool:
        return self._hole is not None

    def boundary_segments(self) -> List[Segment]:
        """Outer boundary segments followed by the hole boundary segments."""
        segments = list(self._outer.segments)
        if self.has_hole:
            segments.extend(self._hole.segments)
        return segments

    def get_hatching_segments(self, angle: float, spacing: float) -> List[Segment]:
        """
        Generate boundary and hatch segments.

        Args:
            angle: Hatch angle in degrees
            spacing: Distance between scanlines

        Returns:
            Boundary segments followed by the hatch segments in scan order
        """
        return self.generate(HatchingParameters(hatch_angle=angle, hatch_spacing=spacing))

    def generate(self, parameters: HatchingParameters) -> List[Segment]:
        """
        Generate boundary and hatch segments from parameters.

        Invalid parameters produce the boundary only.

        Args:
            parameters: Hatching parameters

        Returns:
            Boundary segments followed by the hatch segments in scan order
        """
        segments = self.boundary_segments()

        if not parameters.validate():
            logger.warning("Invalid hatching parameters %s, emitting boundary only", parameters)
            return segments

        angle_rad = np.radians(parameters.hatch_angle)
        direction = Point2(np.cos(angle_rad), np.sin(angle_rad))
        direction_ortho = direction.perpendicular()

        step_count = int(np.floor(self._outer.dimensions.dot(direction) / parameters.hatch_spacing))

        # Start each ray behind the rectangle so that it sweeps the whole boundary
        backoff = self._outer.dimensions.length() + parameters.hatch_spacing

        for i in range(step_count):
            base = self._outer.origin + (i * parameters.hatch_spacing) * direction
            ray = Ray(base - backoff * direction_ortho, direction_ortho)

            hits = self._cast(ray, self._outer)
            if self.has_hole and len(hits) >= 2:
                hole_hits = self._cast(ray, self._hole)
                # A scanline grazing a hole corner meets it once; pairing needs an even count
                if len(hole_hits) % 2 == 0:
                    hits.extend(hole_hits)
                else:
                    logger.debug("Scanline %d touches the hole at %s, ignored", i, hole_hits)

            hits.sort(key=lambda p: (p - ray.origin).dot(direction_ortho))
            logger.debug("Scanline %d: %d hits", i, len(hits))

            if len(hits) >= 2:
                segments.append(Segment(hits[0], hits[1]))
            if len(hits) >= 4:
                segments.append(Segment(hits[2], hits[3]))

        return segments

    def _cast(self, ray: Ray, rectangle: Rectangle) -> List[Point2]:
        """
        Collect the distinct points where a ray meets a rectangle boundary.

        A ray running along an edge contributes both ends of the overlap;
        points closer than epsilon to an earlier hit on the same rectangle are
        dropped so corners count once.
        """
        hits: List[Point2] = []
        for edge in rectangle.segments:
            for point in intersect_segment_ray(edge, ray, self._epsilon).points:
                if any(point.is_close(other, self._epsilon) for other in hits):
                    continue
                hits.append(point)
        return hits
