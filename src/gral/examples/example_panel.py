from __future__ import annotations

from typing import Optional

from PySide6.QtGui import QColor
from PySide6.QtWidgets import QVBoxLayout, QWidget

from gral import config


class ExamplePanel(QWidget):
    """Base class of the example windows."""

    COLOR1 = QColor(*config.COLOR1)
    COLOR2 = QColor(*config.COLOR2)

    title = "Example"
    description = ""

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.setLayout(QVBoxLayout())
        self.layout().setContentsMargins(0, 0, 0, 0)

    def show_in_frame(self) -> None:
        self.setWindowTitle(f"GRAL: {self.title}")
        self.resize(int(config.DEFAULT_EXPORT_WIDTH), int(config.DEFAULT_EXPORT_HEIGHT))
        self.show()
