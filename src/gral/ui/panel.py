"""
Qt widgets that display drawables.
"""
from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import QSize
from PySide6.QtGui import QColor, QContextMenuEvent, QPainter, QPaintEvent, QResizeEvent
from PySide6.QtWidgets import QFileDialog, QMenu, QMessageBox, QWidget

from gral import config
from gral.graphics.drawable import Drawable, DrawingContext, Quality
from gral.io.plots import DrawableWriterFactory
from gral.ui.export_dialog import ExportDialog, UserAction

logger = logging.getLogger(__name__)


class DrawablePanel(QWidget):
    """
    Widget that paints a drawable. The drawable always fills the whole
    widget; its bounds follow the widget size.
    """

    def __init__(self, drawable: Drawable, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.drawable = drawable
        self.quality = Quality.QUALITY
        self.background: Optional[QColor] = QColor(*config.DEFAULT_BACKGROUND)
        self.drawable.set_bounds(0.0, 0.0, float(self.width()), float(self.height()))

    def sizeHint(self) -> QSize:
        size = self.drawable.preferred_size
        if size.width() <= 0 or size.height() <= 0:
            return QSize(int(config.DEFAULT_EXPORT_WIDTH), int(config.DEFAULT_EXPORT_HEIGHT))
        return size.toSize()

    def resizeEvent(self, event: QResizeEvent) -> None:
        self.drawable.set_bounds(0.0, 0.0, float(event.size().width()), float(event.size().height()))
        super().resizeEvent(event)

    def paintEvent(self, event: QPaintEvent) -> None:
        painter = QPainter(self)
        try:
            if self.background is not None:
                painter.fillRect(self.rect(), self.background)
            self.drawable.draw(DrawingContext(painter, self.quality))
        finally:
            painter.end()


class InteractivePanel(DrawablePanel):
    """`DrawablePanel` with a context menu to export the drawable."""

    def contextMenuEvent(self, event: QContextMenuEvent) -> None:
        menu = QMenu(self)
        action = menu.addAction(self.tr("Export image…"))
        action.triggered.connect(self.export)
        menu.exec(event.globalPos())

    def export(self) -> None:
        capabilities = DrawableWriterFactory.get_capabilities()
        filters = ";;".join(
            f"{c.name} (" + " ".join(f"*.{e}" for e in c.extensions) + ")" for c in capabilities
        )
        fname, selected = QFileDialog.getSaveFileName(self, self.tr("Export image"), "", filters)
        if not fname:
            return
        mime_type = next(
            (c.mime_type for c in capabilities if selected.startswith(c.name)),
            capabilities[0].mime_type,
        )
        dialog = ExportDialog(self, self.drawable)
        dialog.exec()
        if dialog.user_action != UserAction.APPROVE:
            return
        bounds = dialog.document_bounds
        try:
            writer = DrawableWriterFactory.get(mime_type)
            writer.write(self.drawable, fname, bounds.x(), bounds.y(), bounds.width(), bounds.height())
        except Exception as e:
            QMessageBox.critical(self, self.tr("Error"), self.tr("Could not export image:\n{0}").format(e))
        self.update()
