"""
Smoke tests for the matplotlib example script.
"""

import pytest

matplotlib = pytest.importorskip("matplotlib")
matplotlib.use("Agg")


def test_visualize_segments_returns_figure():
    import matplotlib.pyplot as plt
    from geom2d import Point2, Segment
    from geom2d.example import visualize_segments

    segments = [Segment(Point2(0, 0), Point2(1, 1)), Segment(Point2(1, 0), Point2(0, 1))]

    fig = visualize_segments(segments, title="Cross")
    assert fig is not None, "Should return the figure"
    assert fig.axes[0].get_title() == "Cross"
    assert len(fig.axes[0].collections) == 1, "Segments are drawn as one LineCollection"
    plt.close(fig)


def test_visualize_segments_on_existing_axes():
    import matplotlib.pyplot as plt
    from geom2d import Point2, Segment
    from geom2d.example import visualize_segments

    fig, ax = plt.subplots()
    result = visualize_segments(
        [Segment(Point2(0, 0), Point2(2, 0))],
        ax=ax,
        highlight=[Segment(Point2(0, 0), Point2(0, 2))],
    )

    assert result is fig, "Drawing into given axes reuses their figure"
    assert len(ax.collections) == 2, "Highlights get their own collection"
    plt.close(fig)


def test_examples_render():
    import matplotlib.pyplot as plt
    from geom2d.example import example_1_rectangle, example_2_rectangle_with_hole, example_3_arc_clearance

    for example in (example_1_rectangle, example_2_rectangle_with_hole, example_3_arc_clearance):
        fig = example(show=False)
        assert fig.axes, f"{example.__name__} should draw into a figure"
        plt.close(fig)
