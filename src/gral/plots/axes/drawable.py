from __future__ import annotations

from PySide6.QtCore import QLineF, QPointF, QRectF, QSizeF, Qt
from PySide6.QtGui import QColor, QFontMetricsF, QPen

from gral import config
from gral.graphics.drawable import Drawable, DrawingContext
from gral.graphics.label import Label
from gral.plots.axes.axis import Axis
from gral.plots.axes.renderer import AxisRenderer, TickType
from gral.util.geometry import Orientation


class AxisDrawable(Drawable):
    """
    Paints the shape, ticks, tick labels and title of an axis.

    The renderer's shape is expected in the same coordinates as the
    drawable's bounds; the plot updates both during layout.
    """

    def __init__(self, axis: Axis, renderer: AxisRenderer, orientation: Orientation) -> None:
        super().__init__()
        self.axis = axis
        self.renderer = renderer
        self.orientation = orientation
        self.color = QColor(*config.DEFAULT_FOREGROUND)
        self.stroke_width = 1.0

    def _tick_label_extent(self) -> float:
        """Largest tick label size perpendicular to the axis."""
        metrics = QFontMetricsF(self.renderer.font)
        labels = [t.label for t in self.renderer.get_ticks(self.axis) if t.label]
        if not labels:
            return 0.0
        if self.orientation == Orientation.HORIZONTAL:
            return metrics.height()
        return max(metrics.horizontalAdvance(label) for label in labels)

    @property
    def preferred_size(self) -> QSizeF:
        r = self.renderer
        extent = r.tick_length + r.tick_label_distance + self._tick_label_extent()
        if r.label:
            extent += r.label_distance + QFontMetricsF(r.font).height()
        if self.orientation == Orientation.HORIZONTAL:
            return QSizeF(0.0, extent)
        return QSizeF(extent, 0.0)

    def draw(self, context: DrawingContext) -> None:
        painter = context.painter
        r = self.renderer
        painter.save()
        pen = QPen(self.color, self.stroke_width)
        painter.setPen(pen)
        painter.setFont(r.font)
        if r.shape_visible:
            painter.drawPath(r.shape)

        metrics = QFontMetricsF(r.font)
        for tick in r.get_ticks(self.axis):
            length = r.tick_length if tick.type != TickType.MINOR else r.tick_length / 2.0
            end = QPointF(tick.position.x() + tick.normal.x() * length,
                          tick.position.y() + tick.normal.y() * length)
            painter.drawLine(QLineF(tick.position, end))
            if not tick.label:
                continue
            distance = length + r.tick_label_distance
            anchor = QPointF(tick.position.x() + tick.normal.x() * distance,
                             tick.position.y() + tick.normal.y() * distance)
            width = metrics.horizontalAdvance(tick.label)
            height = metrics.height()
            # Align the label box on the side facing the axis
            box = QRectF(anchor.x() - width * (0.5 - tick.normal.x() * 0.5),
                         anchor.y() - height * (0.5 - tick.normal.y() * 0.5),
                         width, height)
            painter.drawText(box, Qt.AlignmentFlag.AlignCenter, tick.label)
        painter.restore()

        if r.label:
            self._title_label().draw(context)

    def _title_label(self) -> Label:
        r = self.renderer
        label = Label(r.label, font=r.font, color=self.color)
        height = QFontMetricsF(r.font).height()
        b = self.bounds
        if self.orientation == Orientation.HORIZONTAL:
            label.set_bounds(b.x(), b.bottom() - height, b.width(), height)
        else:
            label.rotation = 90.0
            label.set_bounds(b.x(), b.y(), height, b.height())
        return label

