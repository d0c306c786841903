from __future__ import annotations

import logging
import math
from typing import Protocol

logger = logging.getLogger(__name__)


class AxisListener(Protocol):
    def range_changed(self, axis: Axis, minimum: float, maximum: float) -> None: ...


class Axis:
    """
    Value range of one plot dimension.

    An autoscaled axis follows the data of its plot; setting the range
    explicitly switches autoscaling off.
    """

    def __init__(self, minimum: float = 0.0, maximum: float = 1.0, autoscaled: bool = True) -> None:
        self._min = float(minimum)
        self._max = float(maximum)
        self.autoscaled = autoscaled
        self._listeners: list[AxisListener] = []

    @property
    def min(self) -> float:
        return self._min

    @min.setter
    def min(self, value: float) -> None:
        self.set_range(value, self._max)

    @property
    def max(self) -> float:
        return self._max

    @max.setter
    def max(self, value: float) -> None:
        self.set_range(self._min, value)

    @property
    def range(self) -> float:
        return self._max - self._min

    def is_valid(self) -> bool:
        return math.isfinite(self._min) and math.isfinite(self._max) and self._max > self._min

    def set_range(self, minimum: float, maximum: float) -> None:
        """Set the range explicitly and stop autoscaling."""
        self.autoscaled = False
        self._update(minimum, maximum)

    def _update(self, minimum: float, maximum: float) -> None:
        minimum, maximum = float(minimum), float(maximum)
        if (minimum, maximum) == (self._min, self._max):
            return
        self._min, self._max = minimum, maximum
        logger.debug(f"Axis range changed to [{minimum}, {maximum}]")
        for listener in list(self._listeners):
            listener.range_changed(self, minimum, maximum)

    def autoscale(self, minimum: float, maximum: float) -> None:
        """Adopt a data range if the axis is autoscaled."""
        if not self.autoscaled:
            return
        if minimum == maximum:
            # Keep a usable range for constant data
            minimum, maximum = minimum - 0.5, maximum + 0.5
        self._update(minimum, maximum)

    def add_axis_listener(self, listener: AxisListener) -> None:
        if not any(l is listener for l in self._listeners):
            self._listeners.append(listener)

    def remove_axis_listener(self, listener: AxisListener) -> None:
        self._listeners = [l for l in self._listeners if l is not listener]

    def __repr__(self) -> str:
        return f"Axis(min={self._min}, max={self._max}, autoscaled={self.autoscaled})"
