from gral.plots.colors.color_mapper import ColorMapper, MappingMode, ScaledColorMapper
from gral.plots.colors.colormap import ColormapMapper
from gral.plots.colors.mappers import (
    HeatMap,
    LinearGradient,
    MultiColor,
    QuasiRandomColors,
    RainbowColors,
    SingleColor,
    to_color,
)

__all__ = [
    "ColorMapper",
    "ColormapMapper",
    "HeatMap",
    "LinearGradient",
    "MappingMode",
    "MultiColor",
    "QuasiRandomColors",
    "RainbowColors",
    "ScaledColorMapper",
    "SingleColor",
    "to_color",
]
