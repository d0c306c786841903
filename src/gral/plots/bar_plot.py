from __future__ import annotations

from typing import Optional

from PySide6.QtGui import QColor

from gral import config
from gral.data.source import DataSource
from gral.plots.bars import BarRenderer
from gral.plots.points import PointRenderer
from gral.plots.xy_plot import AXIS_X, AXIS_Y, XYPlot


class BarPlot(XYPlot):
    """
    Bar chart of data sources with x values in column 0 and bar heights in
    column 1. Bars are `bar_width` x-axis units wide and start at `baseline`.
    """

    def __init__(self, *sources: DataSource, bar_width: float = 0.5, baseline: float = 0.0) -> None:
        self._bar_width = bar_width
        self._baseline = baseline
        super().__init__(*sources)
        self.plot_area.major_grid_x = False

    @property
    def bar_width(self) -> float:
        return self._bar_width

    @bar_width.setter
    def bar_width(self, width: float) -> None:
        self._bar_width = width
        self.refresh()

    @property
    def baseline(self) -> float:
        return self._baseline

    @baseline.setter
    def baseline(self, baseline: float) -> None:
        self._baseline = baseline
        self.refresh()

    def create_point_renderer(self, source: DataSource) -> Optional[PointRenderer]:
        return BarRenderer(QColor(*config.COLOR1))

    def get_axis_extent(self, name: str) -> Optional[tuple[float, float]]:
        extent = super().get_axis_extent(name)
        if extent is None:
            return None
        lo, hi = extent
        if name == AXIS_X:
            half = self._bar_width / 2.0
            return lo - half, hi + half
        if name == AXIS_Y:
            return min(lo, self._baseline), max(hi, self._baseline)
        return extent
