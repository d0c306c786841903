"""
XY Plots
========
Scatter, line and area plots of data sources whose column 0 holds x and
column 1 holds y values.

Each data source gets its own point, line and area renderer. Points are
drawn with a `DefaultPointRenderer2D` unless changed; lines and areas are
off by default. Values that are missing or not finite interrupt lines and
areas.
"""
from __future__ import annotations

import logging
from typing import Optional

import numpy as np
from PySide6.QtCore import QLineF, QPointF, QRectF
from PySide6.QtGui import QBrush, QColor, QPen

from gral.data.source import DataSource
from gral.graphics.drawable import DrawingContext
from gral.plots.areas import AreaRenderer
from gral.plots.axes import Axis, AxisDrawable, AxisRenderer, LinearRenderer2D, TickType, line_shape
from gral.plots.legends import LegendEntry
from gral.plots.lines import LineRenderer
from gral.plots.plot import Plot, PlotArea
from gral.plots.points import DefaultPointRenderer2D, PointRenderer, resolve_color
from gral.util.geometry import Insets2D, Orientation
from gral.util.math_utils import is_calculatable, limit

logger = logging.getLogger(__name__)

AXIS_X = "x"
AXIS_Y = "y"


class XYPlotArea(PlotArea):
    def __init__(self, plot: XYPlot) -> None:
        super().__init__()
        self.plot = plot
        self.major_grid_x = True
        self.major_grid_y = True
        self.minor_grid_x = False
        self.minor_grid_y = False
        self.major_grid_color = QColor(0, 0, 0, 48)
        self.minor_grid_color = QColor(0, 0, 0, 24)
        # Space between the data bounds and the outer edges without axes
        self.padding = 10.0

    def _draw_grid(self, context: DrawingContext) -> None:
        painter = context.painter
        data = self.data_bounds
        for name, major, minor in (
            (AXIS_X, self.major_grid_x, self.minor_grid_x),
            (AXIS_Y, self.major_grid_y, self.minor_grid_y),
        ):
            if not (major or minor):
                continue
            renderer = self.plot.get_axis_renderer(name)
            for tick in renderer.get_ticks(self.plot.axes[name]):
                is_minor = tick.type == TickType.MINOR
                if (is_minor and not minor) or (not is_minor and not major):
                    continue
                painter.setPen(QPen(self.minor_grid_color if is_minor else self.major_grid_color, 1.0))
                if name == AXIS_X:
                    painter.drawLine(QLineF(tick.position.x(), data.top(), tick.position.x(), data.bottom()))
                else:
                    painter.drawLine(QLineF(data.left(), tick.position.y(), data.right(), tick.position.y()))

    def draw_plot(self, context: DrawingContext) -> None:
        painter = context.painter
        painter.save()
        self._draw_grid(context)
        painter.restore()
        baseline = self.plot.get_axis_position(AXIS_X)
        for source in self.plot.get_visible_data():
            segments = self.plot.get_segments(source)
            area = self.plot.get_area_renderer(source)
            line = self.plot.get_line_renderer(source)
            points = self.plot.get_point_renderer(source)
            if area is not None:
                for segment in segments:
                    area.draw(context, segment, baseline)
            if line is not None:
                for segment in segments:
                    line.draw(context, segment)
            if points is not None:
                for row in range(source.row_count):
                    points.draw(context, self.plot, source, row)


class XYPlot(Plot):
    """
    Example:
        data = DataTable(float, float)
        plot = XYPlot(data)
        plot.set_line_renderer(data, DefaultLineRenderer2D())
    """

    def __init__(self, *sources: DataSource) -> None:
        super().__init__()
        self.axes = {AXIS_X: Axis(), AXIS_Y: Axis()}
        x_renderer = LinearRenderer2D()
        # Ticks and labels of the x axis point downwards
        x_renderer.normal_orientation_clockwise = True
        self._axis_renderers: dict[str, AxisRenderer] = {AXIS_X: x_renderer, AXIS_Y: LinearRenderer2D()}
        self.axis_drawables = {
            AXIS_X: AxisDrawable(self.axes[AXIS_X], x_renderer, Orientation.HORIZONTAL),
            AXIS_Y: AxisDrawable(self.axes[AXIS_Y], self._axis_renderers[AXIS_Y], Orientation.VERTICAL),
        }
        for axis in self.axes.values():
            axis.add_axis_listener(self)
        self._point_renderers: dict[int, Optional[PointRenderer]] = {}
        self._line_renderers: dict[int, Optional[LineRenderer]] = {}
        self._area_renderers: dict[int, Optional[AreaRenderer]] = {}
        self.set_plot_area(XYPlotArea(self))
        for source in sources:
            self.add(source)

    # ---- axes ----

    def get_axis_renderer(self, name: str) -> AxisRenderer:
        return self._axis_renderers[name]

    def set_axis_renderer(self, name: str, renderer: AxisRenderer) -> None:
        if name == AXIS_X:
            renderer.normal_orientation_clockwise = True
        self._axis_renderers[name] = renderer
        self.axis_drawables[name].renderer = renderer
        self.layout()

    def range_changed(self, axis: Axis, minimum: float, maximum: float) -> None:
        self.layout()

    def get_axis_extent(self, name: str) -> Optional[tuple[float, float]]:
        col = 0 if name == AXIS_X else 1
        values = [
            source.get_column(col).to_array()
            for source in self.get_visible_data()
            if source.row_count > 0
        ]
        if not values:
            return None
        merged = np.concatenate(values)
        merged = merged[np.isfinite(merged)]
        if merged.size == 0:
            return None
        return float(merged.min()), float(merged.max())

    def get_axis_position(self, name: str) -> float:
        """View coordinate where axis `name` crosses the other axis."""
        data = self.plot_area.data_bounds
        other = AXIS_Y if name == AXIS_X else AXIS_X
        other_axis = self.axes[other]
        if not other_axis.is_valid():
            return data.bottom() if name == AXIS_X else data.left()
        value = limit(self._axis_renderers[name].intersection, other_axis.min, other_axis.max)
        offset = self._axis_renderers[other].world_to_view(other_axis, value, False)
        if name == AXIS_X:
            return data.bottom() - offset
        return data.left() + offset

    def world_to_view(self, x: float, y: float) -> QPointF:
        """Convert data values to a point in view coordinates."""
        data = self.plot_area.data_bounds
        x_view = self._axis_renderers[AXIS_X].world_to_view(self.axes[AXIS_X], x, True)
        y_view = self._axis_renderers[AXIS_Y].world_to_view(self.axes[AXIS_Y], y, True)
        return QPointF(data.left() + x_view, data.bottom() - y_view)

    # ---- renderers ----

    def add(self, source: DataSource, visible: bool = True) -> None:
        """
        Raises:
            ValueError: If the source has fewer than two numeric columns.
        """
        if source.column_count < 2 or not (source.is_column_numeric(0) and source.is_column_numeric(1)):
            raise ValueError(f"{source!r} needs numeric x and y columns.")
        self._point_renderers.setdefault(id(source), self.create_point_renderer(source))
        self._line_renderers.setdefault(id(source), None)
        self._area_renderers.setdefault(id(source), None)
        super().add(source, visible)

    def remove(self, source: DataSource) -> None:
        super().remove(source)
        for renderers in (self._point_renderers, self._line_renderers, self._area_renderers):
            renderers.pop(id(source), None)

    def create_point_renderer(self, source: DataSource) -> Optional[PointRenderer]:
        return DefaultPointRenderer2D()

    def get_point_renderer(self, source: DataSource) -> Optional[PointRenderer]:
        return self._point_renderers.get(id(source))

    def set_point_renderer(self, source: DataSource, renderer: Optional[PointRenderer]) -> None:
        self._point_renderers[id(source)] = renderer
        self.refresh()

    def get_line_renderer(self, source: DataSource) -> Optional[LineRenderer]:
        return self._line_renderers.get(id(source))

    def set_line_renderer(self, source: DataSource, renderer: Optional[LineRenderer]) -> None:
        self._line_renderers[id(source)] = renderer
        self.refresh()

    def get_area_renderer(self, source: DataSource) -> Optional[AreaRenderer]:
        return self._area_renderers.get(id(source))

    def set_area_renderer(self, source: DataSource, renderer: Optional[AreaRenderer]) -> None:
        self._area_renderers[id(source)] = renderer
        self.refresh()

    def get_segments(self, source: DataSource) -> list[list[QPointF]]:
        """View points of `source`, split wherever a value is missing."""
        segments: list[list[QPointF]] = []
        current: list[QPointF] = []
        for row in range(source.row_count):
            x, y = source.get(0, row), source.get(1, row)
            if is_calculatable(x) and is_calculatable(y):
                current.append(self.world_to_view(x, y))
            elif current:
                segments.append(current)
                current = []
        if current:
            segments.append(current)
        return segments

    # ---- layout and painting ----

    def layout(self) -> None:
        area = self.plot_area
        if not isinstance(area, XYPlotArea):
            super().layout()
            return
        x_drawable, y_drawable = self.axis_drawables[AXIS_X], self.axis_drawables[AXIS_Y]
        x_height = x_drawable.preferred_size.height()
        y_width = y_drawable.preferred_size.width()
        area.insets = Insets2D(area.padding, y_width, x_height, area.padding)
        super().layout()

        data = area.data_bounds
        x_renderer, y_renderer = self._axis_renderers[AXIS_X], self._axis_renderers[AXIS_Y]
        x_renderer.shape = line_shape(data.bottomLeft(), data.bottomRight())
        y_renderer.shape = line_shape(data.bottomLeft(), data.topLeft())
        x_pos = self.get_axis_position(AXIS_X)
        y_pos = self.get_axis_position(AXIS_Y)
        x_renderer.shape = line_shape(QPointF(data.left(), x_pos), QPointF(data.right(), x_pos))
        y_renderer.shape = line_shape(QPointF(y_pos, data.bottom()), QPointF(y_pos, data.top()))
        x_drawable.set_bounds(data.left(), x_pos, data.width(), x_height)
        y_drawable.set_bounds(y_pos - y_width, data.top(), y_width, data.height())

    def draw(self, context: DrawingContext) -> None:
        super().draw(context)
        for drawable in self.axis_drawables.values():
            drawable.draw(context)

    def get_legend_entries(self) -> list[LegendEntry]:
        entries = []
        for i, source in enumerate(self.get_visible_data()):
            text = source.name or f"Series {i + 1}"
            entries.append(LegendEntry(text, self._symbol_painter(source)))
        return entries

    def _symbol_painter(self, source: DataSource):
        def draw_symbol(context: DrawingContext, rect: QRectF) -> None:
            painter = context.painter
            painter.save()
            area = self.get_area_renderer(source)
            line = self.get_line_renderer(source)
            points = self.get_point_renderer(source)
            middle = rect.center().y()
            if area is not None:
                painter.fillRect(QRectF(rect.left(), middle, rect.width(), rect.height() / 2.0),
                                 QBrush(area.color))
            if line is not None:
                painter.setPen(QPen(line.color, line.stroke_width))
                painter.drawLine(QLineF(rect.left(), middle, rect.right(), middle))
            if points is not None:
                color = resolve_color(points.color, 0)
                if color is not None:
                    painter.translate(rect.center())
                    painter.fillPath(points.get_point_shape(), QBrush(color))
            painter.restore()
        return draw_symbol
