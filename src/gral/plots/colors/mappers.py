"""
Concrete color mappers: constant colors, gradients and palettes.
"""
from __future__ import annotations

import math
from typing import Optional

from PySide6.QtGui import QColor

from gral.plots.colors.color_mapper import ColorMapper, MappingMode, ScaledColorMapper
from gral.util.math_utils import limit

# Fractional parts of multiples of the golden ratio are evenly spread
GOLDEN_RATIO_CONJUGATE = 0.6180339887498949


def to_color(value: QColor | tuple[int, ...] | str) -> QColor:
    """Accept a QColor, an RGB(A) tuple or a color name."""
    if isinstance(value, QColor):
        return QColor(value)
    if isinstance(value, str):
        return QColor(value)
    return QColor(*value)


class SingleColor(ColorMapper):
    """Returns the same color for every value."""

    def __init__(self, color: QColor | tuple[int, ...] | str) -> None:
        super().__init__()
        self.color = to_color(color)

    def get(self, value: float) -> Optional[QColor]:
        return QColor(self.color)


class LinearGradient(ScaledColorMapper):
    """
    Interpolates linearly between evenly spaced colors.

    Example:
        gradient = LinearGradient(QColor("black"), QColor("white"))
        gradient.get(0.5)  # mid grey
    """

    def __init__(self, *colors: QColor | tuple[int, ...] | str,
                 mode: MappingMode = MappingMode.REPEAT) -> None:
        if len(colors) < 2:
            raise ValueError("A gradient needs at least two colors.")
        super().__init__(mode=mode)
        self.colors: list[QColor] = [to_color(c) for c in colors]

    def color_at(self, position: float) -> QColor:
        scaled = position * (len(self.colors) - 1)
        i = min(int(math.floor(scaled)), len(self.colors) - 2)
        t = scaled - i
        c1, c2 = self.colors[i], self.colors[i + 1]
        return QColor.fromRgbF(
            c1.redF() + (c2.redF() - c1.redF()) * t,
            c1.greenF() + (c2.greenF() - c1.greenF()) * t,
            c1.blueF() + (c2.blueF() - c1.blueF()) * t,
            c1.alphaF() + (c2.alphaF() - c1.alphaF()) * t,
        )


# Two-color gradients used to be called MultiColor
MultiColor = LinearGradient


class HeatMap(LinearGradient):
    """Black, red, yellow and white."""

    def __init__(self, mode: MappingMode = MappingMode.REPEAT) -> None:
        super().__init__(QColor(0, 0, 0), QColor(255, 0, 0), QColor(255, 255, 0),
                         QColor(255, 255, 255), mode=mode)


class RainbowColors(ScaledColorMapper):
    """Sweeps the hue at full saturation and brightness."""

    def color_at(self, position: float) -> QColor:
        return QColor.fromHsvF(limit(position, 0.0, 1.0), 1.0, 1.0)


class QuasiRandomColors(ColorMapper):
    """
    Reproducible, well separated colors for categorical data.

    The hue of value `n` is the fractional part of `n` times the golden ratio
    conjugate, so neighbouring integers get very different hues. Saturation
    and brightness vary by up to `color_variance` in the same manner.
    """

    def __init__(self, color_variance: float = 0.25, seed: float = 0.0) -> None:
        super().__init__()
        self.color_variance = color_variance
        self.seed = seed

    def get(self, value: float) -> Optional[QColor]:
        if not math.isfinite(value):
            return None
        hue = (self.seed + value * GOLDEN_RATIO_CONJUGATE) % 1.0
        saturation = 1.0 - self.color_variance * ((value * math.sqrt(2.0)) % 1.0)
        brightness = 1.0 - self.color_variance * ((value * math.sqrt(3.0)) % 1.0)
        return QColor.fromHsvF(hue, limit(saturation, 0.0, 1.0), limit(brightness, 0.0, 1.0))
