"""
Color mapper backed by a matplotlib colormap.
"""
from __future__ import annotations

import matplotlib
from PySide6.QtGui import QColor

from gral.plots.colors.color_mapper import MappingMode, ScaledColorMapper


class ColormapMapper(ScaledColorMapper):
    """
    Looks colors up in one of matplotlib's named colormaps, e.g. 'viridis'.

    Raises:
        ValueError: If matplotlib doesn't know the colormap.
    """

    def __init__(self, name: str = "viridis", offset: float = 0.0, scale: float = 1.0,
                 mode: MappingMode = MappingMode.REPEAT) -> None:
        super().__init__(offset, scale, mode)
        if name not in matplotlib.colormaps:
            raise ValueError(f"Unknown colormap '{name}'")
        self.name = name
        self._colormap = matplotlib.colormaps[name]

    def color_at(self, position: float) -> QColor:
        r, g, b, a = self._colormap(float(position))
        return QColor.fromRgbF(r, g, b, a)
