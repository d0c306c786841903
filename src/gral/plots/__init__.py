from gral.plots.areas import AreaRenderer, DefaultAreaRenderer2D, LineAreaRenderer2D
from gral.plots.bar_plot import BarPlot
from gral.plots.bars import BarRenderer
from gral.plots.legends import Legend, LegendEntry, LegendItem
from gral.plots.lines import DefaultLineRenderer2D, DiscreteLineRenderer2D, LineRenderer, SmoothLineRenderer2D
from gral.plots.pie_plot import PiePlot, PiePlotArea
from gral.plots.plot import Plot, PlotArea
from gral.plots.points import DefaultPointRenderer2D, PointRenderer, PointShape
from gral.plots.xy_plot import AXIS_X, AXIS_Y, XYPlot, XYPlotArea

__all__ = [
    "AXIS_X",
    "AXIS_Y",
    "AreaRenderer",
    "BarPlot",
    "BarRenderer",
    "DefaultAreaRenderer2D",
    "DefaultLineRenderer2D",
    "DefaultPointRenderer2D",
    "DiscreteLineRenderer2D",
    "Legend",
    "LegendEntry",
    "LegendItem",
    "LineAreaRenderer2D",
    "LineRenderer",
    "PiePlot",
    "PiePlotArea",
    "Plot",
    "PlotArea",
    "PointRenderer",
    "PointShape",
    "SmoothLineRenderer2D",
    "XYPlot",
    "XYPlotArea",
]
