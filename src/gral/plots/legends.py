"""
Legends
=======
Lists a symbol and a text for every series (or slice) of a plot.

The plot supplies `LegendEntry` objects; each entry knows how to paint its
own symbol so the legend stays independent of the plot type.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from PySide6.QtCore import QRectF, QSizeF
from PySide6.QtGui import QBrush, QColor, QFont, QPen

from gral import config
from gral.graphics.container import DrawableContainer
from gral.graphics.drawable import Drawable, DrawingContext
from gral.graphics.label import Label
from gral.graphics.layout import StackedLayout
from gral.util.geometry import Insets2D, Orientation

logger = logging.getLogger(__name__)


@dataclass
class LegendEntry:
    text: str
    # Paints the symbol into the given rectangle
    draw_symbol: Callable[[DrawingContext, QRectF], None]


class LegendItem(Drawable):
    def __init__(self, entry: LegendEntry, symbol_size: QSizeF, font: QFont, gap: float) -> None:
        super().__init__()
        self.entry = entry
        self.symbol_size = QSizeF(symbol_size)
        self.gap = gap
        self.label = Label(entry.text, font=font, alignment_x=0.0)

    @property
    def preferred_size(self) -> QSizeF:
        text = self.label.preferred_size
        return QSizeF(
            self.symbol_size.width() + self.gap + text.width(),
            max(self.symbol_size.height(), text.height()),
        )

    def draw(self, context: DrawingContext) -> None:
        b = self.bounds
        symbol = QRectF(
            b.x(),
            b.y() + (b.height() - self.symbol_size.height()) / 2.0,
            self.symbol_size.width(),
            self.symbol_size.height(),
        )
        self.entry.draw_symbol(context, symbol)
        offset = self.symbol_size.width() + self.gap
        self.label.set_bounds(b.x() + offset, b.y(), max(0.0, b.width() - offset), b.height())
        self.label.draw(context)


class Legend(DrawableContainer):
    def __init__(self, orientation: Orientation = Orientation.VERTICAL, gap: float = 4.0) -> None:
        super().__init__(StackedLayout(orientation, gap))
        self.background: Optional[QColor] = QColor(*config.DEFAULT_BACKGROUND)
        self.border_color: Optional[QColor] = QColor(*config.DEFAULT_FOREGROUND)
        self.border_width = 1.0
        self.symbol_size = QSizeF(16.0, 10.0)
        self.symbol_gap = 6.0
        self.font = QFont(config.DEFAULT_FONT_FAMILY)
        self.font.setPointSizeF(config.DEFAULT_FONT_SIZE)
        self.set_insets(Insets2D(6.0, 6.0, 6.0, 6.0))

    @property
    def orientation(self) -> Orientation:
        return self.layout_manager.orientation

    @orientation.setter
    def orientation(self, orientation: Orientation) -> None:
        self.set_layout(StackedLayout(orientation, self.layout_manager.gap))

    def set_entries(self, entries: Sequence[LegendEntry]) -> None:
        """Replace all items of the legend."""
        for item in list(self):
            self.remove(item)
        for entry in entries:
            self.add(LegendItem(entry, self.symbol_size, self.font, self.symbol_gap))
        logger.debug(f"Legend shows {len(entries)} entries.")

    @property
    def entries(self) -> list[LegendEntry]:
        return [item.entry for item in self if isinstance(item, LegendItem)]

    def draw(self, context: DrawingContext) -> None:
        painter = context.painter
        painter.save()
        if self.background is not None:
            painter.fillRect(self.bounds, QBrush(self.background))
        if self.border_color is not None:
            painter.setPen(QPen(self.border_color, self.border_width))
            painter.setBrush(QBrush())
            painter.drawRect(self.bounds)
        painter.restore()
        self.draw_components(context)
