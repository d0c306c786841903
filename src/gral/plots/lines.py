"""
Line Renderers
==============
Connect the points of a data series.

Every renderer builds a `QPainterPath` through the given view points and
strokes it. A `gap` leaves empty space of that radius around each point so
lines don't overlap the point symbols.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from PySide6.QtCore import QPointF
from PySide6.QtGui import QBrush, QColor, QPainterPath, QPainterPathStroker, QPen

from gral.graphics.drawable import DrawingContext
from gral.util.geometry import Orientation


class LineRenderer(ABC):
    def __init__(self, stroke_width: float = 1.5, color: QColor | None = None, gap: float = 0.0) -> None:
        self.stroke_width = stroke_width
        self.color = color if color is not None else QColor(0, 0, 0)
        self.gap = gap
        self.gap_rounded = True

    @abstractmethod
    def get_line_shape(self, points: Sequence[QPointF]) -> QPainterPath:
        """Path through `points` in drawing order."""

    def get_stroke(self, points: Sequence[QPointF]) -> QPainterPath:
        """Outline of the stroked line with the gaps punched out."""
        stroker = QPainterPathStroker()
        stroker.setWidth(self.stroke_width)
        stroke = stroker.createStroke(self.get_line_shape(points))
        if self.gap > 0.0:
            holes = QPainterPath()
            for point in points:
                if self.gap_rounded:
                    holes.addEllipse(point, self.gap, self.gap)
                else:
                    holes.addRect(point.x() - self.gap, point.y() - self.gap, 2 * self.gap, 2 * self.gap)
            stroke = stroke.subtracted(holes)
        return stroke

    def draw(self, context: DrawingContext, points: Sequence[QPointF]) -> None:
        if len(points) < 2:
            return
        painter = context.painter
        painter.save()
        if self.gap > 0.0:
            painter.fillPath(self.get_stroke(points), QBrush(self.color))
        else:
            painter.setPen(QPen(self.color, self.stroke_width))
            painter.setBrush(QBrush())
            painter.drawPath(self.get_line_shape(points))
        painter.restore()


class DefaultLineRenderer2D(LineRenderer):
    """Straight segments between consecutive points."""

    def get_line_shape(self, points: Sequence[QPointF]) -> QPainterPath:
        path = QPainterPath()
        for i, point in enumerate(points):
            if i == 0:
                path.moveTo(point)
            else:
                path.lineTo(point)
        return path


class DiscreteLineRenderer2D(LineRenderer):
    """
    Step lines. With horizontal ascent the line runs horizontally to the
    next x value and then vertically to its y value; with vertical ascent
    the vertical step lies at `ascending_point` between the two points.
    """

    def __init__(self, stroke_width: float = 1.5, color: QColor | None = None, gap: float = 0.0,
                 ascent_direction: Orientation = Orientation.VERTICAL, ascending_point: float = 0.5) -> None:
        super().__init__(stroke_width, color, gap)
        self.ascent_direction = ascent_direction
        # Relative position of the vertical step between two points
        self.ascending_point = ascending_point

    def get_line_shape(self, points: Sequence[QPointF]) -> QPainterPath:
        path = QPainterPath()
        if not points:
            return path
        path.moveTo(points[0])
        for previous, point in zip(points, points[1:]):
            if self.ascent_direction == Orientation.HORIZONTAL:
                path.lineTo(point.x(), previous.y())
            else:
                step_x = previous.x() + (point.x() - previous.x()) * self.ascending_point
                path.lineTo(step_x, previous.y())
                path.lineTo(step_x, point.y())
            path.lineTo(point)
        return path


class SmoothLineRenderer2D(LineRenderer):
    """
    Catmull-Rom spline through all points, drawn as cubic Bezier segments.
    A `smoothness` of 0 gives straight lines.
    """

    def __init__(self, stroke_width: float = 1.5, color: QColor | None = None, gap: float = 0.0,
                 smoothness: float = 1.0) -> None:
        super().__init__(stroke_width, color, gap)
        self.smoothness = smoothness

    def get_line_shape(self, points: Sequence[QPointF]) -> QPainterPath:
        path = QPainterPath()
        if not points:
            return path
        path.moveTo(points[0])
        k = self.smoothness / 6.0
        n = len(points)
        for i in range(n - 1):
            p0 = points[max(i - 1, 0)]
            p1 = points[i]
            p2 = points[i + 1]
            p3 = points[min(i + 2, n - 1)]
            c1 = QPointF(p1.x() + (p2.x() - p0.x()) * k, p1.y() + (p2.y() - p0.y()) * k)
            c2 = QPointF(p2.x() - (p3.x() - p1.x()) * k, p2.y() - (p3.y() - p1.y()) * k)
            path.cubicTo(c1, c2, p2)
        return path
