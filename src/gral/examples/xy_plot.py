from __future__ import annotations

import os
from typing import Optional

from PySide6.QtWidgets import QWidget

from gral import config
from gral.data import Kernel
from gral.data.filters import Convolution, Mode
from gral.examples.example_panel import ExamplePanel
from gral.io.data import DataReaderFactory
from gral.plots import DefaultLineRenderer2D, DefaultPointRenderer2D, PointShape, XYPlot
from gral.ui import InteractivePanel
from gral.util.geometry import Insets2D

DATA_FILE = os.path.join("examples", "resources", "noisy_sine.csv")
WINDOW = 7


class SimpleXYPlot(ExamplePanel):
    title = "Scatter plot with moving average"
    description = f"Noisy sine wave and its moving average over {WINDOW} values"

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        reader = DataReaderFactory.get("text/csv", header=True)
        self.data = reader.read(config.get_resource_path(DATA_FILE), float, float)
        self.data.name = "Measurements"
        self.average = Convolution(self.data, Kernel.uniform(WINDOW), Mode.REPEAT, 1, name="Moving average")

        self.plot = XYPlot(self.data, self.average)
        self.plot.set_title(self.description)
        self.plot.set_insets(Insets2D(20.0, 20.0, 20.0, 20.0))

        points = DefaultPointRenderer2D(PointShape.CIRCLE, 5.0)
        points.color = self.COLOR1
        self.plot.set_point_renderer(self.data, points)

        self.plot.set_point_renderer(self.average, None)
        self.plot.set_line_renderer(self.average, DefaultLineRenderer2D(2.0, self.COLOR2))
        self.plot.get_axis_renderer("x").label = "x"
        self.plot.get_axis_renderer("y").label = "sin(x) + noise"
        self.plot.legend_visible = True

        self.layout().addWidget(InteractivePanel(self.plot))
