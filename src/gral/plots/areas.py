"""
Area Renderers
==============
Fill the region between a data series and a baseline (the y position of
the x axis in view coordinates).
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from PySide6.QtCore import QLineF, QPointF
from PySide6.QtGui import QBrush, QColor, QPainterPath, QPen

from gral.graphics.drawable import DrawingContext


class AreaRenderer(ABC):
    def __init__(self, color: QColor | None = None) -> None:
        self.color = color if color is not None else QColor(0, 0, 0, 64)

    @abstractmethod
    def draw(self, context: DrawingContext, points: Sequence[QPointF], baseline: float) -> None:
        """Draw the area under `points` down to the view y coordinate `baseline`."""


class DefaultAreaRenderer2D(AreaRenderer):
    """Closed polygon from the points down to the baseline."""

    def get_area_shape(self, points: Sequence[QPointF], baseline: float) -> QPainterPath:
        path = QPainterPath()
        if not points:
            return path
        path.moveTo(points[0].x(), baseline)
        for point in points:
            path.lineTo(point)
        path.lineTo(points[-1].x(), baseline)
        path.closeSubpath()
        return path

    def draw(self, context: DrawingContext, points: Sequence[QPointF], baseline: float) -> None:
        if len(points) < 2:
            return
        context.painter.fillPath(self.get_area_shape(points, baseline), QBrush(self.color))


class LineAreaRenderer2D(AreaRenderer):
    """Vertical lines from every point down to the baseline."""

    def __init__(self, color: QColor | None = None, stroke_width: float = 1.0) -> None:
        super().__init__(color)
        self.stroke_width = stroke_width

    def draw(self, context: DrawingContext, points: Sequence[QPointF], baseline: float) -> None:
        painter = context.painter
        painter.save()
        painter.setPen(QPen(self.color, self.stroke_width))
        for point in points:
            painter.drawLine(QLineF(point.x(), point.y(), point.x(), baseline))
        painter.restore()
