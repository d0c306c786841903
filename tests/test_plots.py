"""
Tests for XY, bar and pie plots.
"""
import math

import pytest
from PySide6.QtCore import QPointF
from PySide6.QtGui import QColor, QImage, QPainter

from gral.data import DataTable
from gral.graphics import DrawingContext
from gral.plots import (
    AXIS_X,
    AXIS_Y,
    BarPlot,
    BarRenderer,
    DefaultAreaRenderer2D,
    DefaultLineRenderer2D,
    PiePlot,
    SmoothLineRenderer2D,
    XYPlot,
)
from gral.plots.colors import LinearGradient
from gral.util import Location


def render(drawable, width=400, height=300):
    image = QImage(width, height, QImage.Format.Format_ARGB32)
    image.fill(QColor(255, 255, 255))
    painter = QPainter(image)
    try:
        drawable.draw(DrawingContext(painter))
    finally:
        painter.end()
    return image


def xy_table(*rows, name=None):
    table = DataTable(float, float, name=name)
    for row in rows:
        table.add(*row)
    return table


class TestXYPlot:
    """Tests for data management, autoscaling and geometry of XY plots."""

    def test_autoscale_follows_data(self, qapp):
        data = xy_table((1.0, 2.0), (3.0, 5.0))
        plot = XYPlot(data)
        assert (plot.axes[AXIS_X].min, plot.axes[AXIS_X].max) == (1.0, 3.0)
        assert (plot.axes[AXIS_Y].min, plot.axes[AXIS_Y].max) == (2.0, 5.0)
        data.add(4.0, -1.0)
        assert plot.axes[AXIS_X].max == 4.0
        assert plot.axes[AXIS_Y].min == -1.0

    def test_explicit_range_is_kept(self, qapp):
        data = xy_table((1.0, 2.0), (3.0, 5.0))
        plot = XYPlot(data)
        plot.axes[AXIS_X].set_range(0.0, 10.0)
        data.add(20.0, 1.0)
        assert (plot.axes[AXIS_X].min, plot.axes[AXIS_X].max) == (0.0, 10.0)

    def test_missing_values_are_ignored_by_autoscale(self, qapp):
        data = xy_table((1.0, 2.0), (None, 100.0), (3.0, None))
        plot = XYPlot(data)
        assert plot.axes[AXIS_X].max == 3.0
        assert plot.axes[AXIS_Y].max == 100.0

    def test_needs_numeric_columns(self, qapp):
        plot = XYPlot()
        with pytest.raises(ValueError):
            plot.add(DataTable(float, str))
        with pytest.raises(ValueError):
            plot.add(DataTable(float))

    def test_add_twice_and_remove(self, qapp):
        data = xy_table((1.0, 2.0))
        plot = XYPlot(data)
        plot.add(data)
        assert plot.get_data() == [data]
        assert plot in data.data_listeners
        plot.remove(data)
        assert plot.get_data() == []
        assert plot not in data.data_listeners
        assert plot.get_point_renderer(data) is None

    def test_visibility(self, qapp):
        first = xy_table((0.0, 0.0), (1.0, 1.0))
        second = xy_table((5.0, 5.0), (10.0, 10.0))
        plot = XYPlot(first, second)
        assert plot.axes[AXIS_X].max == 10.0
        plot.set_visible(second, False)
        assert not plot.is_visible(second)
        assert plot.get_visible_data() == [first]
        assert plot.axes[AXIS_X].max == 1.0
        with pytest.raises(ValueError):
            plot.set_visible(xy_table(), True)

    def test_renderers(self, qapp):
        data = xy_table((1.0, 2.0))
        plot = XYPlot(data)
        assert plot.get_point_renderer(data) is not None
        assert plot.get_line_renderer(data) is None
        line = DefaultLineRenderer2D()
        plot.set_line_renderer(data, line)
        plot.set_point_renderer(data, None)
        assert plot.get_line_renderer(data) is line
        assert plot.get_point_renderer(data) is None

    def test_world_to_view(self, qapp):
        plot = XYPlot(xy_table((0.0, 0.0), (10.0, 20.0)))
        plot.set_bounds(0.0, 0.0, 400.0, 300.0)
        data = plot.plot_area.data_bounds
        assert data.width() > 0.0 and data.height() > 0.0
        lower_left = plot.world_to_view(0.0, 0.0)
        upper_right = plot.world_to_view(10.0, 20.0)
        assert (lower_left.x(), lower_left.y()) == pytest.approx((data.left(), data.bottom()))
        assert (upper_right.x(), upper_right.y()) == pytest.approx((data.right(), data.top()))

    def test_axes_follow_plot_area(self, qapp):
        plot = XYPlot(xy_table((0.0, 0.0), (10.0, 20.0)))
        plot.set_bounds(0.0, 0.0, 400.0, 300.0)
        data = plot.plot_area.data_bounds
        x_drawable = plot.axis_drawables[AXIS_X]
        y_drawable = plot.axis_drawables[AXIS_Y]
        assert x_drawable.y == pytest.approx(data.bottom())
        assert y_drawable.x + y_drawable.width == pytest.approx(data.left())
        assert plot.get_axis_renderer(AXIS_X).shape_length == pytest.approx(data.width())

    def test_segments_split_at_gaps(self, qapp):
        data = xy_table((0.0, 0.0), (1.0, 1.0), (2.0, None), (3.0, 3.0))
        plot = XYPlot(data)
        plot.set_bounds(0.0, 0.0, 400.0, 300.0)
        assert [len(segment) for segment in plot.get_segments(data)] == [2, 1]

    def test_legend_entries(self, qapp):
        plot = XYPlot(xy_table((0.0, 0.0), name="measured"), xy_table((1.0, 1.0)))
        plot.legend_visible = True
        assert [entry.text for entry in plot.legend.entries] == ["measured", "Series 2"]
        assert plot.legend in plot
        assert plot.get_constraints(plot.legend) is Location.EAST
        plot.legend_location = Location.SOUTH
        assert plot.get_constraints(plot.legend) is Location.SOUTH
        plot.legend_visible = False
        assert plot.legend not in plot

    def test_draws(self, qapp):
        data = xy_table(*((float(x), math.sin(x)) for x in range(10)))
        plot = XYPlot(data)
        plot.set_title("Sine")
        plot.set_line_renderer(data, SmoothLineRenderer2D())
        plot.set_area_renderer(data, DefaultAreaRenderer2D())
        plot.legend_visible = True
        plot.set_bounds(0.0, 0.0, 400.0, 300.0)
        image = render(plot)
        assert not image.isNull()


class TestBarPlot:
    """Tests for bar plots."""

    def test_extent_includes_bars_and_baseline(self, qapp):
        plot = BarPlot(xy_table((1.0, 2.0), (3.0, 5.0)), bar_width=0.5)
        assert plot.axes[AXIS_X].min == pytest.approx(0.75)
        assert plot.axes[AXIS_X].max == pytest.approx(3.25)
        assert plot.axes[AXIS_Y].min == 0.0
        assert plot.axes[AXIS_Y].max == 5.0

    def test_default_renderer(self, qapp):
        data = xy_table((1.0, 2.0))
        plot = BarPlot(data)
        assert isinstance(plot.get_point_renderer(data), BarRenderer)

    def test_bar_rect(self, qapp):
        data = xy_table((1.0, 2.0), (3.0, 5.0))
        plot = BarPlot(data, bar_width=0.5)
        plot.set_bounds(0.0, 0.0, 400.0, 300.0)
        area = plot.plot_area.data_bounds
        rect = plot.get_point_renderer(data).get_bar_rect(plot, 3.0, 5.0)
        assert rect.width() == pytest.approx(area.width() * 0.5 / 2.5)
        assert rect.bottom() == pytest.approx(area.bottom())
        assert rect.top() == pytest.approx(area.top())

    def test_draws_with_gradient(self, qapp):
        data = xy_table((1.0, 2.0), (2.0, 3.0))
        plot = BarPlot(data)
        gradient = LinearGradient(QColor(0, 0, 0), QColor(255, 0, 0))
        gradient.set_range(0.0, 1.0)
        plot.get_point_renderer(data).color = gradient
        plot.set_bounds(0.0, 0.0, 300.0, 200.0)
        assert not render(plot, 300, 200).isNull()


@pytest.fixture
def pie_data():
    table = DataTable(int)
    for value in [1, -2, None, 3]:
        table.add(value)
    return table


class TestPiePlot:
    """Tests for slice geometry and colors of pie plots."""

    def test_slices(self, qapp, pie_data):
        plot = PiePlot(pie_data)
        assert plot.get_slices() == [(0.0, 1.0), (1.0, 2.0), (3.0, 0.0), (3.0, 3.0)]
        assert plot.get_total() == 6.0
        assert math.isnan(plot.get_value(2))

    def test_fractions(self, qapp, pie_data):
        plot = PiePlot(pie_data)
        fractions = [x for pair in plot.get_fractions() for x in pair]
        assert fractions == pytest.approx([0.0, 1 / 6, 1 / 6, 2 / 6, 0.5, 0.0, 0.5, 0.5])

    def test_fractions_without_total(self, qapp):
        table = DataTable(int)
        table.add(0)
        table.add(None)
        plot = PiePlot(table)
        assert all(math.isnan(x) for pair in plot.get_fractions() for x in pair)
        assert plot.get_slice_angles(0) == (0.0, 0.0)
        assert plot.slice_shape(0).isEmpty()

    def test_slices_follow_data(self, qapp, pie_data):
        plot = PiePlot(pie_data)
        pie_data.add(4)
        assert plot.get_total() == 10.0

    def test_angles(self, qapp, pie_data):
        plot = PiePlot(pie_data)
        assert plot.get_slice_angles(1) == pytest.approx((-60.0, -120.0))
        plot.clockwise = False
        plot.start = 90.0
        assert plot.get_slice_angles(1) == pytest.approx((150.0, 120.0))

    def test_slice_shapes(self, qapp, pie_data):
        plot = PiePlot(pie_data)
        plot.set_bounds(0.0, 0.0, 400.0, 300.0)
        assert not plot.slice_shape(0).isEmpty()
        assert not plot.slice_shape(1).isEmpty()
        assert plot.slice_shape(2).isEmpty()

    def test_donut_with_gap(self, qapp, pie_data):
        plot = PiePlot(pie_data)
        plot.set_bounds(0.0, 0.0, 400.0, 300.0)
        plot.radius_inner = 0.5
        plot.gap = 0.5
        shape = plot.slice_shape(3)
        center = plot.get_center()
        assert not shape.isEmpty()
        assert not shape.contains(center)

    def test_needs_numeric_column(self, qapp):
        with pytest.raises(ValueError):
            PiePlot(DataTable(str))

    def test_colors(self, qapp, pie_data):
        plot = PiePlot(pie_data)
        assert plot.get_slice_color(0).rgb() == plot.colors.get(0).rgb()
        plot.colors = LinearGradient(QColor(0, 0, 0), QColor(255, 255, 255))
        # Middle of the first slice is at 0.5 / 6
        assert plot.get_slice_color(0).redF() == pytest.approx(0.5 / 6.0, abs=0.01)

    def test_legend_skips_negative_and_missing_values(self, qapp, pie_data):
        plot = PiePlot(pie_data)
        plot.legend_visible = True
        assert [entry.text for entry in plot.legend.entries] == ["1", "3"]

    def test_draws_slice_color(self, qapp, pie_data):
        plot = PiePlot(pie_data)
        plot.set_bounds(0.0, 0.0, 400.0, 300.0)
        image = render(plot)
        center = plot.get_center()
        radius = plot.get_outer_radius()
        # Inside the first slice, 30 degrees clockwise from three o'clock
        inside = QPointF(center.x() + radius / 2.0 * math.cos(math.radians(30.0)),
                        center.y() + radius / 2.0 * math.sin(math.radians(30.0)))
        pixel = image.pixelColor(int(inside.x()), int(inside.y()))
        assert pixel.rgb() == plot.get_slice_color(0).rgb()

    def test_draw_computes_slices_once(self, qapp, pie_data, monkeypatch):
        plot = PiePlot(pie_data)
        plot.set_bounds(0.0, 0.0, 400.0, 300.0)
        calls = []
        get_slices = plot.get_slices

        def counting_get_slices():
            calls.append(1)
            return get_slices()

        monkeypatch.setattr(plot, "get_slices", counting_get_slices)
        render(plot)
        assert len(calls) == 1

    def test_empty_plot(self, qapp):
        plot = PiePlot()
        assert plot.source is None
        assert plot.get_slices() == []
        assert plot.get_legend_entries() == []
