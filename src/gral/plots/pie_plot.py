"""
Pie Plots
=========
Pie and donut charts of the values in column 0 of a data source.

Every value gets a slice whose angle is proportional to its absolute value.
Negative values keep their space but are not painted, missing values and
values that are not finite get no slice at all.
"""
from __future__ import annotations

import logging
import math
from typing import Optional

from PySide6.QtCore import QPointF, QRectF
from PySide6.QtGui import QBrush, QColor, QPainterPath, QPainterPathStroker

from gral import config
from gral.data.source import DataSource
from gral.graphics.drawable import DrawingContext
from gral.plots.colors import ColorMapper, QuasiRandomColors, ScaledColorMapper
from gral.plots.legends import LegendEntry
from gral.plots.plot import Plot, PlotArea
from gral.util.math_utils import is_calculatable

logger = logging.getLogger(__name__)

# Start and span of every slice
Slices = list[tuple[float, float]]


class PiePlotArea(PlotArea):
    def __init__(self, plot: PiePlot) -> None:
        super().__init__()
        self.plot = plot
        self.background = None
        self.border_color = None
        self.clipping = False

    def draw_plot(self, context: DrawingContext) -> None:
        painter = context.painter
        fractions = self.plot.get_fractions()
        for row, (start, span) in enumerate(fractions):
            if not span > 0.0 or self.plot.get_value(row) < 0.0:
                continue
            color = self.plot.get_slice_color(row, fractions)
            if color is None:
                continue
            painter.fillPath(self.plot.slice_shape(row, fractions), QBrush(color))


class PiePlot(Plot):
    """
    Example:
        plot = PiePlot(data)
        plot.radius_inner = 0.4  # donut
    """

    def __init__(self, source: Optional[DataSource] = None) -> None:
        super().__init__()
        # Relative to the largest circle that fits into the plot area
        self.radius = 1.0
        # Relative to the outer radius
        self.radius_inner = 0.0
        # Width of the gap between slices, relative to the default font size
        self.gap = 0.0
        # Degrees counter-clockwise from three o'clock
        self.start = 0.0
        self.clockwise = True
        self.colors: ColorMapper = QuasiRandomColors()
        # Relative position of the center in the plot area
        self.center = QPointF(0.5, 0.5)
        self.set_plot_area(PiePlotArea(self))
        if source is not None:
            self.add(source)

    def add(self, source: DataSource, visible: bool = True) -> None:
        """
        Raises:
            ValueError: If column 0 of the source isn't numeric.
        """
        if source.column_count < 1 or not source.is_column_numeric(0):
            raise ValueError(f"{source!r} needs a numeric first column.")
        super().add(source, visible)

    @property
    def source(self) -> Optional[DataSource]:
        """Data source whose slices are shown."""
        visible = self.get_visible_data()
        return visible[0] if visible else None

    def get_value(self, row: int) -> float:
        source = self.source
        if source is None:
            return math.nan
        value = source.get(0, row)
        return float(value) if is_calculatable(value) else math.nan

    # ---- geometry ----

    def get_slices(self) -> Slices:
        """
        Start and span of every row's slice in accumulated units of the sum
        of absolute values. Rows without a usable value have a span of 0.
        """
        source = self.source
        if source is None:
            return []
        slices = []
        position = 0.0
        for row in range(source.row_count):
            value = self.get_value(row)
            span = abs(value) if is_calculatable(value) else 0.0
            slices.append((position, span))
            position += span
        return slices

    def get_total(self) -> float:
        return sum(span for _, span in self.get_slices())

    def get_fractions(self) -> Slices:
        """
        Start and span of every slice relative to the total, NaN for all
        slices if the total is 0.
        """
        slices = self.get_slices()
        total = sum(span for _, span in slices)
        if total <= 0.0:
            return [(math.nan, math.nan)] * len(slices)
        return [(start / total, span / total) for start, span in slices]

    def get_center(self) -> QPointF:
        data = self.plot_area.data_bounds
        return QPointF(data.x() + data.width() * self.center.x(),
                       data.y() + data.height() * self.center.y())

    def get_outer_radius(self) -> float:
        data = self.plot_area.data_bounds
        return min(data.width(), data.height()) / 2.0 * self.radius

    def get_slice_angles(self, index: int, fractions: Optional[Slices] = None) -> tuple[float, float]:
        """
        Start angle and sweep in Qt degrees (counter-clockwise positive).
        `fractions` are the result of `get_fractions` when the caller has them.
        """
        if fractions is None:
            fractions = self.get_fractions()
        start, span = fractions[index]
        if not is_calculatable(span):
            return self.start, 0.0
        direction = -1.0 if self.clockwise else 1.0
        return self.start + direction * 360.0 * start, direction * 360.0 * span

    def slice_shape(self, index: int, fractions: Optional[Slices] = None) -> QPainterPath:
        """Outline of slice `index` (an annular sector for donuts)."""
        angle, sweep = self.get_slice_angles(index, fractions)
        path = QPainterPath()
        if sweep == 0.0:
            return path
        center = self.get_center()
        outer = self.get_outer_radius()
        inner = outer * self.radius_inner
        outer_rect = QRectF(center.x() - outer, center.y() - outer, 2.0 * outer, 2.0 * outer)
        path.arcMoveTo(outer_rect, angle)
        path.arcTo(outer_rect, angle, sweep)
        if inner > 0.0:
            inner_rect = QRectF(center.x() - inner, center.y() - inner, 2.0 * inner, 2.0 * inner)
            path.arcTo(inner_rect, angle + sweep, -sweep)
        else:
            path.lineTo(center)
        path.closeSubpath()

        gap = self.gap * config.DEFAULT_FONT_SIZE
        if gap > 0.0 and abs(sweep) < 360.0:
            edges = QPainterPath()
            for edge_angle in (angle, angle + sweep):
                radians = math.radians(edge_angle)
                edges.moveTo(center)
                edges.lineTo(center.x() + outer * math.cos(radians),
                             center.y() - outer * math.sin(radians))
            stroker = QPainterPathStroker()
            stroker.setWidth(gap)
            path = path.subtracted(stroker.createStroke(edges))
        return path

    # ---- colors and legend ----

    def get_slice_color(self, index: int, fractions: Optional[Slices] = None) -> Optional[QColor]:
        """
        Scaled mappers get the relative position of the slice's middle,
        other mappers the row index.
        """
        if isinstance(self.colors, ScaledColorMapper):
            if fractions is None:
                fractions = self.get_fractions()
            start, span = fractions[index]
            if not is_calculatable(span):
                return None
            return self.colors.get(start + span / 2.0)
        return self.colors.get(index)

    def get_legend_entries(self) -> list[LegendEntry]:
        source = self.source
        if source is None:
            return []
        entries = []
        for row in range(source.row_count):
            value = self.get_value(row)
            if not is_calculatable(value) or value < 0.0:
                continue
            entries.append(LegendEntry(f"{value:g}", self._symbol_painter(row)))
        return entries

    def _symbol_painter(self, row: int):
        def draw_symbol(context: DrawingContext, rect: QRectF) -> None:
            color = self.get_slice_color(row)
            if color is not None:
                context.painter.fillRect(rect, QBrush(color))
        return draw_symbol
