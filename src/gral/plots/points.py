"""
Point Renderers
===============
Draw one data row of an XY plot as a symbol.

Renderers receive the plot, the data source and the row; the plot converts
data values to view coordinates with `world_to_view(x, y)`. Column 0 holds
the x and column 1 the y values.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import TYPE_CHECKING, Optional

from PySide6.QtCore import QLineF, QPointF, QRectF, Qt
from PySide6.QtGui import QBrush, QColor, QFont, QFontMetricsF, QPainterPath, QPen

from gral import config
from gral.graphics.drawable import DrawingContext
from gral.plots.colors import ColorMapper
from gral.util.math_utils import is_calculatable

if TYPE_CHECKING:
    from gral.data.source import DataSource
    from gral.plots.xy_plot import XYPlot


class PointShape(Enum):
    SQUARE = "square"
    CIRCLE = "circle"
    DIAMOND = "diamond"
    CROSS = "cross"


def shape_path(shape: PointShape, size: float) -> QPainterPath:
    """Symbol outline of the given size centered at the origin."""
    half = size / 2.0
    path = QPainterPath()
    if shape == PointShape.SQUARE:
        path.addRect(QRectF(-half, -half, size, size))
    elif shape == PointShape.CIRCLE:
        path.addEllipse(QPointF(0.0, 0.0), half, half)
    elif shape == PointShape.DIAMOND:
        path.moveTo(0.0, -half)
        path.lineTo(half, 0.0)
        path.lineTo(0.0, half)
        path.lineTo(-half, 0.0)
        path.closeSubpath()
    elif shape == PointShape.CROSS:
        arm = size / 6.0
        path.addRect(QRectF(-half, -arm, size, 2.0 * arm))
        path.addRect(QRectF(-arm, -half, 2.0 * arm, size))
        path = path.simplified()
    return path


def resolve_color(color: QColor | ColorMapper, row: int) -> Optional[QColor]:
    """A fixed color, or the color a mapper assigns to the row index."""
    if isinstance(color, ColorMapper):
        return color.get(row)
    return QColor(color)


class PointRenderer(ABC):
    def __init__(self) -> None:
        self.color: QColor | ColorMapper = QColor(0, 0, 0)

    @abstractmethod
    def draw(self, context: DrawingContext, plot: XYPlot, source: DataSource, row: int) -> None:
        """Draw row `row` of `source`."""

    @abstractmethod
    def get_point_shape(self) -> QPainterPath:
        """Symbol centered at the origin, also used for legends."""


class DefaultPointRenderer2D(PointRenderer):
    """
    Draws a symbol at each point, optionally with error bars and the value
    as text.

    Error bars need two extra columns holding the upper and lower error,
    set with `error_columns = (top, bottom)`.
    """

    def __init__(self, shape: PointShape = PointShape.SQUARE, size: float = 6.0) -> None:
        super().__init__()
        self.shape = shape
        self.size = size
        self.value_visible = False
        self.value_format = "{:g}"
        self.value_distance = 4.0
        self.value_font = QFont(config.DEFAULT_FONT_FAMILY)
        self.value_font.setPointSizeF(config.DEFAULT_FONT_SIZE * 0.8)
        self.error_visible = False
        self.error_columns: Optional[tuple[int, int]] = None
        self.error_color = QColor(0, 0, 0)
        self.error_width = 1.0

    def get_point_shape(self) -> QPainterPath:
        return shape_path(self.shape, self.size)

    def draw(self, context: DrawingContext, plot: XYPlot, source: DataSource, row: int) -> None:
        x, y = source.get(0, row), source.get(1, row)
        if not (is_calculatable(x) and is_calculatable(y)):
            return
        color = resolve_color(self.color, row)
        if color is None:
            return
        point = plot.world_to_view(x, y)
        painter = context.painter
        painter.save()
        if self.error_visible and self.error_columns is not None:
            self._draw_error(context, plot, source, row, x, y)
        painter.translate(point)
        painter.fillPath(self.get_point_shape(), QBrush(color))
        if self.value_visible:
            text = self.value_format.format(y)
            metrics = QFontMetricsF(self.value_font)
            width = metrics.horizontalAdvance(text)
            height = metrics.height()
            painter.setFont(self.value_font)
            painter.setPen(color)
            box = QRectF(-width / 2.0, -self.size / 2.0 - self.value_distance - height, width, height)
            painter.drawText(box, Qt.AlignmentFlag.AlignCenter, text)
        painter.restore()

    def _draw_error(self, context: DrawingContext, plot: XYPlot, source: DataSource,
                    row: int, x: float, y: float) -> None:
        top_col, bottom_col = self.error_columns
        top, bottom = source.get(top_col, row), source.get(bottom_col, row)
        if not (is_calculatable(top) and is_calculatable(bottom)):
            return
        upper = plot.world_to_view(x, y + top)
        lower = plot.world_to_view(x, y - bottom)
        cap = self.size / 2.0
        painter = context.painter
        painter.setPen(QPen(self.error_color, self.error_width))
        painter.drawLine(QLineF(upper, lower))
        for end in (upper, lower):
            painter.drawLine(QLineF(end.x() - cap, end.y(), end.x() + cap, end.y()))

