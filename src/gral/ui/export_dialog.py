from __future__ import annotations

from enum import Enum
from typing import Optional

from PySide6.QtCore import QRectF
from PySide6.QtWidgets import QDialog, QDialogButtonBox, QDoubleSpinBox, QFormLayout, QVBoxLayout, QWidget

from gral.graphics.drawable import Drawable

# Largest coordinate that can be entered
MAX_COORDINATE = 1e7


class UserAction(Enum):
    APPROVE = "approve"
    CANCEL = "cancel"


class ExportDialog(QDialog):
    """
    Lets the user choose the document rectangle of an export. It starts
    with the bounds of the drawable.
    """

    def __init__(self, parent: Optional[QWidget], drawable: Drawable) -> None:
        super().__init__(parent)
        self.setWindowTitle(self.tr("Export options"))
        self.user_action = UserAction.CANCEL
        self._document_bounds = QRectF()

        root = QVBoxLayout(self)
        form = QFormLayout()

        def _make_spin(minimum: float) -> QDoubleSpinBox:
            spin = QDoubleSpinBox()
            spin.setRange(minimum, MAX_COORDINATE)
            spin.setDecimals(2)
            spin.setSuffix(" px")
            spin.valueChanged.connect(self._on_spin_changed)
            return spin

        self.input_x = _make_spin(-MAX_COORDINATE)
        self.input_y = _make_spin(-MAX_COORDINATE)
        self.input_w = _make_spin(0.0)
        self.input_h = _make_spin(0.0)
        form.addRow(self.tr("Left:"), self.input_x)
        form.addRow(self.tr("Top:"), self.input_y)
        form.addRow(self.tr("Width:"), self.input_w)
        form.addRow(self.tr("Height:"), self.input_h)
        root.addLayout(form)

        self.buttonBox = QDialogButtonBox(QDialogButtonBox.StandardButton.Ok | QDialogButtonBox.StandardButton.Cancel)
        self.buttonBox.button(QDialogButtonBox.StandardButton.Ok).setDefault(True)
        self.buttonBox.accepted.connect(self._on_accept)
        self.buttonBox.rejected.connect(self.reject)
        root.addWidget(self.buttonBox)

        bounds = drawable.bounds
        self.set_document_bounds(bounds.x(), bounds.y(), bounds.width(), bounds.height())

    @property
    def document_bounds(self) -> QRectF:
        return QRectF(self._document_bounds)

    def set_document_bounds(self, x: float, y: float, width: float, height: float) -> None:
        self._document_bounds = QRectF(x, y, width, height)
        for spin, value in ((self.input_x, x), (self.input_y, y), (self.input_w, width), (self.input_h, height)):
            spin.blockSignals(True)
            spin.setValue(value)
            spin.blockSignals(False)

    def _on_spin_changed(self, _value: float) -> None:
        self._document_bounds = QRectF(
            self.input_x.value(), self.input_y.value(), self.input_w.value(), self.input_h.value()
        )

    def _on_accept(self) -> None:
        self.user_action = UserAction.APPROVE
        self.accept()
