from __future__ import annotations

from typing import Optional

from PySide6.QtWidgets import QWidget

from gral.data import DataTable
from gral.examples.example_panel import ExamplePanel
from gral.plots import BarPlot
from gral.plots.colors import LinearGradient
from gral.ui import InteractivePanel
from gral.util.geometry import Insets2D

VALUES = [(1.0, 4.0), (2.0, 7.5), (3.0, 3.2), (4.0, -2.1), (5.0, 5.8), (6.0, 9.1), (7.0, 6.4)]


class SimpleBarPlot(ExamplePanel):
    title = "Bar plot"
    description = "Bars colored along a gradient"

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.data = DataTable(float, float)
        for x, y in VALUES:
            self.data.add(x, y)

        self.plot = BarPlot(self.data, bar_width=0.8)
        self.plot.set_title(self.description)
        self.plot.set_insets(Insets2D(20.0, 20.0, 20.0, 20.0))

        colors = LinearGradient(self.COLOR1, self.COLOR2)
        colors.set_range(0, len(VALUES) - 1)
        renderer = self.plot.get_point_renderer(self.data)
        renderer.color = colors
        renderer.stroke_color = self.COLOR1.darker()

        self.layout().addWidget(InteractivePanel(self.plot))
