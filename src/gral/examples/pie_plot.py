from __future__ import annotations

from typing import Optional

import numpy as np
from PySide6.QtWidgets import QWidget

from gral.data import DataTable
from gral.examples.example_panel import ExamplePanel
from gral.plots import PiePlot
from gral.plots.colors import MultiColor
from gral.ui import InteractivePanel
from gral.util.geometry import Insets2D

SAMPLE_COUNT = 15


class SimplePiePlot(ExamplePanel):
    title = "Donut plot"
    description = f"Donut plot of {SAMPLE_COUNT} random data values"

    def __init__(self, parent: Optional[QWidget] = None, seed: Optional[int] = None) -> None:
        super().__init__(parent)
        rng = np.random.default_rng(seed)

        # About 15 % of the values are negative and leave a gap
        self.data = DataTable(int)
        for _ in range(SAMPLE_COUNT):
            value = int(rng.integers(1, 11))
            self.data.add(-value if rng.random() <= 0.15 else value)

        self.plot = PiePlot(self.data)
        self.plot.set_title(self.description)
        self.plot.radius = 0.9
        self.plot.radius_inner = 0.4
        self.plot.gap = 0.2
        self.plot.colors = MultiColor(self.COLOR1, self.COLOR2)
        self.plot.set_insets(Insets2D(20.0, 40.0, 40.0, 40.0))

        self.layout().addWidget(InteractivePanel(self.plot))
