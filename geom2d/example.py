#!/usr/bin/env python3
"""
Example script demonstrating the geometry kernel.

This script shows how to:
1. Hatch a plain rectangle
2. Hatch a rectangle with a hole
3. Explode an arc into chords and measure vertical clearance
4. Run intersection and distance queries
"""

import matplotlib.pyplot as plt
from matplotlib.collections import LineCollection
from typing import List, Optional

from geom2d import (
    Arc,
    Hatching,
    HatchingParameters,
    Point2,
    Rectangle,
    Segment,
    distance,
    intersect_segments,
    segment_to_above_arc,
)


def visualize_segments(segments: List[Segment], title: str = "Segments",
                       ax: Optional[plt.Axes] = None, show: bool = False,
                       highlight: Optional[List[Segment]] = None):
    """
    Visualize segments using matplotlib.

    Args:
        segments: Segments drawn in blue
        title: Plot title
        ax: Axes to draw into; a new figure is created when omitted
        show: Call plt.show() after drawing
        highlight: Optional segments drawn thicker in red (boundaries, chords)

    Returns:
        The matplotlib Figure holding the plot
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=(8, 8))
    else:
        fig = ax.figure

    if segments:
        lines = [[s.p0.as_tuple(), s.p1.as_tuple()] for s in segments]
        ax.add_collection(LineCollection(lines, colors='blue', linewidths=0.5))

    if highlight:
        lines = [[s.p0.as_tuple(), s.p1.as_tuple()] for s in highlight]
        ax.add_collection(LineCollection(lines, colors='red', linewidths=1.5))

    ax.autoscale()
    ax.set_aspect('equal')
    ax.grid(True, alpha=0.3)
    ax.set_xlabel('X')
    ax.set_ylabel('Y')
    ax.set_title(title)

    if show:
        plt.tight_layout()
        plt.show()

    return fig


def example_1_rectangle(show: bool = True):
    """Example 1: Plain rectangle hatched at 30 degrees."""
    print("=" * 60)
    print("Example 1: Rectangle Hatching")
    print("=" * 60)

    hatching = Hatching(Rectangle(Point2(0, 0), Point2(20, 10)))
    segments = hatching.generate(HatchingParameters(hatch_angle=30, hatch_spacing=0.5))

    boundary = segments[:4]
    fill = segments[4:]
    print(f"Generated {len(fill)} hatch segments")

    return visualize_segments(fill, "Example 1: Rectangle at 30°", show=show, highlight=boundary)


def example_2_rectangle_with_hole(show: bool = True):
    """Example 2: Rectangle with a hole."""
    print("\n" + "=" * 60)
    print("Example 2: Rectangle with Hole")
    print("=" * 60)

    outer = Rectangle(Point2(0, 0), Point2(20, 20))
    hole = Rectangle(Point2(7, 7), Point2(6, 6))
    segments = Hatching(outer, hole).get_hatching_segments(angle=45, spacing=0.8)

    boundary = segments[:8]
    fill = segments[8:]
    print(f"Generated {len(fill)} hatch segments")

    return visualize_segments(fill, "Example 2: Rectangle with Hole", show=show, highlight=boundary)


def example_3_arc_clearance(show: bool = True):
    """Example 3: Arc explosion and vertical clearance to a segment below."""
    print("\n" + "=" * 60)
    print("Example 3: Arc Clearance")
    print("=" * 60)

    arc = Arc(Point2(0, 0), 5.0, 30.0, 150.0)
    floor = Segment(Point2(-6, 1), Point2(6, 1))
    chords = arc.explode()

    found, gap = segment_to_above_arc(floor, arc)
    print(f"Arc exploded into {len(chords)} chords")
    print(f"Clearance found: {found}, distance = {gap:.4f}")

    return visualize_segments([floor], "Example 3: Arc Above Segment", show=show, highlight=chords)


def example_4_queries():
    """Example 4: Intersection and distance queries."""
    print("\n" + "=" * 60)
    print("Example 4: Queries")
    print("=" * 60)

    s0 = Segment(Point2(0, 0), Point2(10, 10))
    s1 = Segment(Point2(0, 10), Point2(10, 0))
    s2 = Segment(Point2(5, 0), Point2(15, 0))

    print(f"Crossing: {intersect_segments(s0, s1).result}")
    print(f"Collinear overlap: {intersect_segments(Segment(Point2(0, 0), Point2(10, 0)), s2).result}")
    print(f"Distance point to segment: {distance(Point2(-5, 3), s2):.4f}")


def main():
    """Run all examples."""
    print("\nGeometry Kernel Examples")
    print("========================\n")

    example_1_rectangle()
    example_2_rectangle_with_hole()
    example_3_arc_clearance()
    example_4_queries()

    print("\n" + "=" * 60)
    print("All examples completed!")
    print("=" * 60)


if __name__ == '__main__':
    main()
