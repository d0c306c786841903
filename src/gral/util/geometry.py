"""
Geometric value types used by drawables and layouts.

Bounds are expressed with Qt's `QRectF`; the classes here cover what Qt does
not model directly (insets in top/left/bottom/right order, locations).
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from PySide6.QtCore import QRectF


class Location(Enum):
    """Position of a drawable relative to its container."""
    CENTER = (0.5, 0.5)
    NORTH = (0.5, 0.0)
    NORTH_EAST = (1.0, 0.0)
    EAST = (1.0, 0.5)
    SOUTH_EAST = (1.0, 1.0)
    SOUTH = (0.5, 1.0)
    SOUTH_WEST = (0.0, 1.0)
    WEST = (0.0, 0.5)
    NORTH_WEST = (0.0, 0.0)

    @property
    def align_x(self) -> float:
        return self.value[0]

    @property
    def align_y(self) -> float:
        return self.value[1]


class Orientation(Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


@dataclass(frozen=True)
class Insets2D:
    """Empty margins preserved around the contents of a drawable."""
    top: float = 0.0
    left: float = 0.0
    bottom: float = 0.0
    right: float = 0.0

    @property
    def horizontal(self) -> float:
        return self.left + self.right

    @property
    def vertical(self) -> float:
        return self.top + self.bottom

    def shrink(self, rect: QRectF) -> QRectF:
        """Return `rect` reduced by these insets (never negative in size)."""
        return QRectF(
            rect.x() + self.left,
            rect.y() + self.top,
            max(0.0, rect.width() - self.horizontal),
            max(0.0, rect.height() - self.vertical),
        )

