"""
Drawables
=========
Base abstractions for everything that can be painted by GRAL.

A `Drawable` owns a rectangle (`bounds`) in the coordinate system of the
painter it is drawn with, and a preferred size used by layouts. Painting
happens in `draw(context)` where `context` carries the `QPainter` and the
requested rendering quality.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Optional, overload

from PySide6.QtCore import QRectF, QSizeF
from PySide6.QtGui import QPainter


class Quality(Enum):
    DRAFT = "draft"
    NORMAL = "normal"
    QUALITY = "quality"


class Target(Enum):
    BITMAP = "bitmap"
    VECTOR = "vector"


@dataclass
class DrawingContext:
    """Environment of a single paint pass."""
    painter: QPainter
    quality: Quality = Quality.NORMAL
    target: Target = Target.BITMAP

    def __post_init__(self) -> None:
        self.apply_quality()

    def apply_quality(self) -> None:
        hints = (
            QPainter.RenderHint.Antialiasing
            | QPainter.RenderHint.TextAntialiasing
            | QPainter.RenderHint.SmoothPixmapTransform
        )
        self.painter.setRenderHints(hints, False)
        if self.quality == Quality.NORMAL:
            self.painter.setRenderHints(
                QPainter.RenderHint.Antialiasing | QPainter.RenderHint.TextAntialiasing, True
            )
        elif self.quality == Quality.QUALITY:
            self.painter.setRenderHints(hints, True)


class Drawable(ABC):
    """Abstract base class for paintable nodes."""

    def __init__(self) -> None:
        self._bounds = QRectF()
        self._preferred_size = QSizeF(0.0, 0.0)

    @abstractmethod
    def draw(self, context: DrawingContext) -> None:
        """Paint this drawable with the painter of `context`."""

    # ---- bounds ----

    @property
    def bounds(self) -> QRectF:
        return QRectF(self._bounds)

    @bounds.setter
    def bounds(self, rect: QRectF) -> None:
        self.set_bounds(rect)

    @overload
    def set_bounds(self, rect: QRectF) -> None: ...

    @overload
    def set_bounds(self, x: float, y: float, width: float, height: float) -> None: ...

    def set_bounds(self, *args) -> None:
        if len(args) == 1:
            rect = args[0]
            self._bounds = QRectF(rect.x(), rect.y(), rect.width(), rect.height())
        elif len(args) == 4:
            self._bounds = QRectF(*(float(a) for a in args))
        else:
            raise TypeError("set_bounds() expects a QRectF or x, y, width, height")

    @property
    def x(self) -> float:
        return self._bounds.x()

    @property
    def y(self) -> float:
        return self._bounds.y()

    @property
    def width(self) -> float:
        return self._bounds.width()

    @property
    def height(self) -> float:
        return self._bounds.height()

    # ---- preferred size ----

    @property
    def preferred_size(self) -> QSizeF:
        return QSizeF(self._preferred_size)

    def set_preferred_size(self, width: float | QSizeF, height: Optional[float] = None) -> None:
        if isinstance(width, QSizeF):
            self._preferred_size = QSizeF(width)
        else:
            self._preferred_size = QSizeF(float(width), float(height or 0.0))

    def contains(self, x: float, y: float) -> bool:
        return self._bounds.contains(x, y)
