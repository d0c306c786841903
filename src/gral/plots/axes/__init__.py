from gral.plots.axes.axis import Axis, AxisListener
from gral.plots.axes.drawable import AxisDrawable
from gral.plots.axes.renderer import (
    AxisRenderer,
    LinearRenderer2D,
    LogarithmicRenderer2D,
    Tick,
    TickType,
    line_shape,
)

__all__ = [
    "Axis",
    "AxisDrawable",
    "AxisListener",
    "AxisRenderer",
    "LinearRenderer2D",
    "LogarithmicRenderer2D",
    "Tick",
    "TickType",
    "line_shape",
]
