from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from PySide6.QtCore import QRectF
from PySide6.QtGui import QBrush, QColor, QPainterPath, QPen

from gral.graphics.drawable import DrawingContext
from gral.plots.colors import ColorMapper
from gral.plots.points import PointRenderer, resolve_color
from gral.util.math_utils import is_calculatable

if TYPE_CHECKING:
    from gral.data.source import DataSource
    from gral.plots.bar_plot import BarPlot


class BarRenderer(PointRenderer):
    """
    Draws a rectangle from the plot's baseline to each y value.

    `bar_width` is relative to the bar width of the plot, so 0.5 draws bars
    of half the plot's width.
    """

    def __init__(self, color: QColor | ColorMapper | None = None, bar_width: float = 1.0) -> None:
        super().__init__()
        if color is not None:
            self.color = color
        self.bar_width = bar_width
        self.stroke_color: Optional[QColor] = None
        self.stroke_width = 1.0

    def get_point_shape(self) -> QPainterPath:
        path = QPainterPath()
        path.addRect(QRectF(-4.0, -4.0, 8.0, 8.0))
        return path

    def get_bar_rect(self, plot: BarPlot, x: float, y: float) -> QRectF:
        half = plot.bar_width * self.bar_width / 2.0
        corner1 = plot.world_to_view(x - half, y)
        corner2 = plot.world_to_view(x + half, plot.baseline)
        return QRectF(corner1, corner2).normalized()

    def draw(self, context: DrawingContext, plot: BarPlot, source: DataSource, row: int) -> None:
        x, y = source.get(0, row), source.get(1, row)
        if not (is_calculatable(x) and is_calculatable(y)):
            return
        color = resolve_color(self.color, row)
        if color is None:
            return
        rect = self.get_bar_rect(plot, x, y)
        painter = context.painter
        painter.fillRect(rect, QBrush(color))
        if self.stroke_color is not None:
            painter.save()
            painter.setPen(QPen(self.stroke_color, self.stroke_width))
            painter.setBrush(QBrush())
            painter.drawRect(rect)
            painter.restore()
