"""
Tests for the shapes built by point, line and area renderers.
"""
import pytest
from PySide6.QtCore import QPointF

from gral.plots import (
    DefaultAreaRenderer2D,
    DefaultLineRenderer2D,
    DefaultPointRenderer2D,
    DiscreteLineRenderer2D,
    PointShape,
    SmoothLineRenderer2D,
)
from gral.plots.colors import QuasiRandomColors
from gral.plots.points import resolve_color
from gral.util import Orientation

POINTS = [QPointF(0.0, 10.0), QPointF(10.0, 0.0), QPointF(20.0, 10.0)]


def vertices(path):
    return [(path.elementAt(i).x, path.elementAt(i).y) for i in range(path.elementCount())]


class TestLineRenderers:
    """Tests for the paths through data points."""

    def test_straight_segments(self):
        path = DefaultLineRenderer2D().get_line_shape(POINTS)
        assert vertices(path) == [(0.0, 10.0), (10.0, 0.0), (20.0, 10.0)]

    def test_vertical_steps(self):
        renderer = DiscreteLineRenderer2D(ascending_point=0.5)
        path = renderer.get_line_shape(POINTS[:2])
        assert vertices(path) == [(0.0, 10.0), (5.0, 10.0), (5.0, 0.0), (10.0, 0.0)]

    def test_horizontal_steps(self):
        renderer = DiscreteLineRenderer2D(ascent_direction=Orientation.HORIZONTAL)
        path = renderer.get_line_shape(POINTS[:2])
        assert vertices(path) == [(0.0, 10.0), (10.0, 10.0), (10.0, 0.0)]

    def test_smooth_line_passes_through_points(self):
        path = SmoothLineRenderer2D().get_line_shape(POINTS)
        # A move followed by two cubic segments of three elements each
        assert path.elementCount() == 7
        assert vertices(path)[3] == (10.0, 0.0)
        assert vertices(path)[6] == (20.0, 10.0)

    def test_gap_removes_line_around_points(self):
        renderer = DefaultLineRenderer2D(stroke_width=2.0, gap=3.0)
        stroke = renderer.get_stroke([QPointF(0.0, 0.0), QPointF(20.0, 0.0)])
        assert stroke.contains(QPointF(10.0, 0.0))
        assert not stroke.contains(QPointF(1.0, 0.0))


class TestAreaRenderer:
    """Tests for the filled area under a series."""

    def test_area_shape(self):
        path = DefaultAreaRenderer2D().get_area_shape(POINTS, 20.0)
        assert path.contains(QPointF(10.0, 15.0))
        assert not path.contains(QPointF(10.0, 25.0))
        assert DefaultAreaRenderer2D().get_area_shape([], 20.0).isEmpty()


class TestPointRenderer:
    """Tests for point symbols and colors."""

    @pytest.mark.parametrize("shape", list(PointShape))
    def test_shapes_are_centered(self, qapp, shape):
        path = DefaultPointRenderer2D(shape, 8.0).get_point_shape()
        bounds = path.boundingRect()
        assert bounds.center().x() == pytest.approx(0.0)
        assert bounds.center().y() == pytest.approx(0.0)
        assert bounds.width() == pytest.approx(8.0)

    def test_mapped_colors_use_row_index(self):
        mapper = QuasiRandomColors()
        assert resolve_color(mapper, 4).rgb() == mapper.get(4).rgb()
