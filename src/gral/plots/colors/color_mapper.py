"""
Color Mappers
=============
Objects that turn numbers into colors.

Why is this file needed?
------------------------
Plots color slices, points and bars from data values or row indexes. The
mapping is pluggable so a plot does not need to know whether it shows a
gradient, a categorical palette or a single color.

Scaled mappers first normalize the value with `offset` and `scale` and then
look up the color of the normalized value in [0, 1]. How values beyond that
range are handled is controlled by `MappingMode`.
"""
from __future__ import annotations

import math
from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional

from PySide6.QtGui import QColor

from gral.util.math_utils import limit


class MappingMode(Enum):
    # Values outside [0, 1] have no color
    OMIT = "omit"
    # Values are clamped into [0, 1]
    REPEAT = "repeat"
    # Values are wrapped into [0, 1)
    CIRCULAR = "circular"


class ColorMapper(ABC):
    """Maps a number to a color."""

    def __init__(self, mode: MappingMode = MappingMode.REPEAT) -> None:
        self.mode = mode

    @abstractmethod
    def get(self, value: float) -> Optional[QColor]:
        """Color of `value`, None if the value has no color."""

    def apply_mode(self, value: float) -> Optional[float]:
        """Bring a normalized value into [0, 1] according to `mode`."""
        if not math.isfinite(value):
            return None
        if self.mode == MappingMode.OMIT:
            return value if 0.0 <= value <= 1.0 else None
        if self.mode == MappingMode.CIRCULAR:
            return value % 1.0
        return limit(value, 0.0, 1.0)


class ScaledColorMapper(ColorMapper):
    """Color mapper that normalizes values linearly before the lookup."""

    def __init__(self, offset: float = 0.0, scale: float = 1.0,
                 mode: MappingMode = MappingMode.REPEAT) -> None:
        super().__init__(mode)
        self.offset = offset
        self.scale = scale

    def set_range(self, start: float, end: float) -> None:
        self.offset = start
        self.scale = end - start

    def scale_value(self, value: float) -> float:
        return (value - self.offset) / self.scale

    def get(self, value: float) -> Optional[QColor]:
        if self.scale == 0.0:
            return None
        normalized = self.apply_mode(self.scale_value(value))
        if normalized is None:
            return None
        return self.color_at(normalized)

    @abstractmethod
    def color_at(self, position: float) -> QColor:
        """Color of a normalized position in [0, 1]."""
