from gral.examples.bar_plot import SimpleBarPlot
from gral.examples.example_panel import ExamplePanel
from gral.examples.pie_plot import SimplePiePlot
from gral.examples.xy_plot import SimpleXYPlot

EXAMPLES: dict[str, type[ExamplePanel]] = {
    "pie": SimplePiePlot,
    "xy": SimpleXYPlot,
    "bar": SimpleBarPlot,
}

__all__ = ["EXAMPLES", "ExamplePanel", "SimpleBarPlot", "SimplePiePlot", "SimpleXYPlot"]
