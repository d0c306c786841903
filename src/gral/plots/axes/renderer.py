"""
Axis Renderers
==============
Translate between data values on an `Axis` and positions along the axis
shape in view coordinates, and produce the ticks shown on the axis.

`world_to_view` returns the distance from the start of the axis shape;
`view_to_world` is its inverse. The shape is a painter path, usually a
straight line set by the plot during layout.
"""
from __future__ import annotations

import logging
import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from PySide6.QtCore import QLineF, QPointF
from PySide6.QtGui import QFont, QPainterPath

from gral import config
from gral.plots.axes.axis import Axis
from gral.util.math_utils import ceil, is_calculatable, limit, magnitude

logger = logging.getLogger(__name__)

# Upper bound for generated ticks, protects against tiny spacings
MAX_TICKS = 1000


class TickType(Enum):
    MAJOR = "major"
    MINOR = "minor"
    CUSTOM = "custom"


@dataclass
class Tick:
    type: TickType
    value: float
    position: QPointF
    normal: QPointF
    label: Optional[str]


def line_shape(start: QPointF, end: QPointF) -> QPainterPath:
    path = QPainterPath(start)
    path.lineTo(end)
    return path


class AxisRenderer(ABC):
    def __init__(self) -> None:
        self.shape: QPainterPath = line_shape(QPointF(0.0, 0.0), QPointF(1.0, 0.0))
        # Value on the other axis where this axis is placed, clamped into its range
        self.intersection: float = -math.inf
        self.shape_visible = True
        self.normal_orientation_clockwise = False
        # None means automatic spacing
        self.tick_spacing: Optional[float] = None
        self.minor_ticks_count = 1
        self.ticks_visible = True
        self.minor_ticks_visible = True
        self.tick_length = 6.0
        self.tick_labels_visible = True
        self.tick_label_format = "{:g}"
        self.tick_label_distance = 4.0
        self.custom_ticks: dict[float, str] = {}
        self.label: str = ""
        self.label_distance = 6.0
        self.font = QFont(config.DEFAULT_FONT_FAMILY)
        self.font.setPointSizeF(config.DEFAULT_FONT_SIZE)

    @property
    def shape_length(self) -> float:
        return self.shape.length()

    # ---- mapping ----

    @abstractmethod
    def world_to_view(self, axis: Axis, value: float, extrapolate: bool) -> float:
        """Distance along the shape for `value`."""

    @abstractmethod
    def view_to_world(self, axis: Axis, value: float, extrapolate: bool) -> float:
        """Value for the distance `value` along the shape."""

    def get_position(self, axis: Axis, value: float, extrapolate: bool = True) -> Optional[QPointF]:
        """Point on the shape for `value`, None outside the shape."""
        length = self.shape_length
        if length <= 0.0:
            return None
        distance = self.world_to_view(axis, value, extrapolate)
        if not is_calculatable(distance):
            return None
        if 0.0 <= distance <= length:
            return self.shape.pointAtPercent(self.shape.percentAtLength(distance))
        if not extrapolate:
            return None
        # Extend the first or last segment of the shape
        start = self.shape.pointAtPercent(0.0)
        end = self.shape.pointAtPercent(1.0)
        direction = QLineF(start, end).unitVector()
        dx, dy = direction.dx(), direction.dy()
        return QPointF(start.x() + dx * distance, start.y() + dy * distance)

    def get_normal(self, distance: float) -> QPointF:
        """Unit normal of the shape at `distance`, pointing away from the plot."""
        length = self.shape_length
        if length <= 0.0:
            return QPointF(0.0, 1.0)
        percent = self.shape.percentAtLength(limit(distance, 0.0, length))
        angle = math.radians(self.shape.angleAtPercent(percent))
        # Qt angles are counter-clockwise with y pointing down
        tx, ty = math.cos(angle), -math.sin(angle)
        if self.normal_orientation_clockwise:
            return QPointF(-ty, tx)
        return QPointF(ty, -tx)

    # ---- ticks ----

    @abstractmethod
    def _tick_values(self, axis: Axis) -> list[tuple[TickType, float]]:
        """Values of major and minor ticks within the axis range."""

    def format_tick(self, value: float) -> str:
        return self.tick_label_format.format(value)

    def get_ticks(self, axis: Axis) -> list[Tick]:
        """Major, minor and custom ticks inside the range of `axis`."""
        if not axis.is_valid():
            return []
        values: dict[float, TickType] = {}
        if self.ticks_visible:
            for tick_type, value in self._tick_values(axis):
                if tick_type == TickType.MINOR and not self.minor_ticks_visible:
                    continue
                values.setdefault(value, tick_type)
        for value in self.custom_ticks:
            if axis.min <= value <= axis.max:
                values[value] = TickType.CUSTOM

        ticks = []
        for value in sorted(values):
            tick_type = values[value]
            distance = self.world_to_view(axis, value, False)
            position = self.get_position(axis, value, False)
            if position is None:
                continue
            if tick_type == TickType.CUSTOM:
                label = self.custom_ticks[value]
            elif tick_type == TickType.MAJOR and self.tick_labels_visible:
                label = self.format_tick(value)
            else:
                label = None
            ticks.append(Tick(tick_type, value, position, self.get_normal(distance), label))
        return ticks


class LinearRenderer2D(AxisRenderer):
    """Maps values linearly onto the axis shape."""

    def world_to_view(self, axis: Axis, value: float, extrapolate: bool) -> float:
        if axis.range == 0.0:
            return 0.0
        if not extrapolate:
            value = limit(value, axis.min, axis.max)
        return (value - axis.min) / axis.range * self.shape_length

    def view_to_world(self, axis: Axis, value: float, extrapolate: bool) -> float:
        length = self.shape_length
        if length == 0.0:
            return axis.min
        if not extrapolate:
            value = limit(value, 0.0, length)
        return axis.min + value / length * axis.range

    def auto_spacing(self, axis: Axis) -> float:
        """Round spacing that yields roughly five to ten major ticks."""
        step = magnitude(10.0, axis.range)
        for divisor in (1.0, 2.0, 5.0, 10.0):
            if axis.range / (step / divisor) >= 4.0:
                return step / divisor
        return step / 10.0

    def _tick_values(self, axis: Axis) -> list[tuple[TickType, float]]:
        spacing = self.tick_spacing if self.tick_spacing else self.auto_spacing(axis)
        if spacing <= 0.0 or axis.range / spacing > MAX_TICKS:
            logger.warning(f"Tick spacing {spacing} unusable for range {axis.range}")
            return []
        minor_spacing = spacing / (self.minor_ticks_count + 1)
        values = []
        start = ceil(axis.min, minor_spacing)
        count = int(math.floor((axis.max - start) / minor_spacing + 1e-9)) + 1
        for i in range(count):
            value = start + i * minor_spacing
            # Snap rounding noise of multiples of the spacing
            value = round(value / minor_spacing) * minor_spacing
            major_index = value / spacing
            is_major = abs(major_index - round(major_index)) < 1e-9
            if is_major:
                value = round(major_index) * spacing
            values.append((TickType.MAJOR if is_major else TickType.MINOR, value))
        return values


class LogarithmicRenderer2D(AxisRenderer):
    """
    Maps values by their base-10 logarithm.

    Raises:
        ValueError: For non-positive values or axis bounds.
    """

    @staticmethod
    def _log(value: float) -> float:
        if value <= 0.0:
            raise ValueError(f"Logarithmic axes need positive values, got {value}")
        return math.log10(value)

    def world_to_view(self, axis: Axis, value: float, extrapolate: bool) -> float:
        lo, hi = self._log(axis.min), self._log(axis.max)
        if not extrapolate:
            value = limit(value, axis.min, axis.max)
        if hi == lo:
            return 0.0
        return (self._log(value) - lo) / (hi - lo) * self.shape_length

    def view_to_world(self, axis: Axis, value: float, extrapolate: bool) -> float:
        lo, hi = self._log(axis.min), self._log(axis.max)
        length = self.shape_length
        if length == 0.0:
            return axis.min
        if not extrapolate:
            value = limit(value, 0.0, length)
        return 10.0 ** (lo + value / length * (hi - lo))

    def _tick_values(self, axis: Axis) -> list[tuple[TickType, float]]:
        lo = math.floor(self._log(axis.min))
        hi = math.ceil(self._log(axis.max))
        values = []
        for exponent in range(lo, hi + 1):
            decade = 10.0 ** exponent
            if axis.min <= decade <= axis.max:
                values.append((TickType.MAJOR, decade))
            if self.minor_ticks_count > 0:
                for factor in range(2, 10):
                    value = factor * decade
                    if axis.min <= value <= axis.max:
                        values.append((TickType.MINOR, value))
        return values
