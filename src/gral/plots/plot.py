"""
Plots
=====
Base classes shared by all plot types.

Why is this file needed?
------------------------
Every plot is a container with a title, a plot area and an optional legend,
laid out with an `EdgeLayout`. It also keeps the list of displayed data
sources, listens to them and keeps autoscaled axes in sync with their data.
Subclasses decide how data turns into shapes (`PlotArea.draw_plot`) and
which value ranges their axes need (`get_axis_extent`).
"""
from __future__ import annotations

import logging
from abc import abstractmethod
from typing import Optional, Sequence

from PySide6.QtCore import QRectF
from PySide6.QtGui import QBrush, QColor, QFont, QPen

from gral import config
from gral.data.events import DataChangeEvent
from gral.data.source import DataSource
from gral.graphics.container import DrawableContainer
from gral.graphics.drawable import Drawable, DrawingContext
from gral.graphics.label import Label
from gral.graphics.layout import EdgeLayout
from gral.plots.axes import Axis
from gral.plots.legends import Legend, LegendEntry
from gral.util.geometry import Insets2D, Location

logger = logging.getLogger(__name__)


class PlotArea(Drawable):
    """
    Region in which the data is drawn.

    `insets` reserve space inside the bounds (e.g. for axes); the remaining
    `data_bounds` are filled with the background, clipped and framed.
    """

    def __init__(self) -> None:
        super().__init__()
        self.background: Optional[QColor] = QColor(*config.DEFAULT_BACKGROUND)
        self.border_color: Optional[QColor] = QColor(*config.DEFAULT_FOREGROUND)
        self.border_width = 1.0
        self.clipping = True
        self.insets = Insets2D()

    @property
    def data_bounds(self) -> QRectF:
        return self.insets.shrink(self.bounds)

    def draw(self, context: DrawingContext) -> None:
        painter = context.painter
        data = self.data_bounds
        painter.save()
        if self.background is not None:
            painter.fillRect(data, QBrush(self.background))
        if self.clipping:
            painter.setClipRect(data)
        self.draw_plot(context)
        painter.restore()
        if self.border_color is not None:
            painter.save()
            painter.setPen(QPen(self.border_color, self.border_width))
            painter.setBrush(QBrush())
            painter.drawRect(data)
            painter.restore()

    @abstractmethod
    def draw_plot(self, context: DrawingContext) -> None:
        """Draw the data inside `data_bounds`."""


class Plot(DrawableContainer):
    def __init__(self) -> None:
        self.plot_area: Optional[PlotArea] = None
        super().__init__(EdgeLayout(20.0, 20.0))
        font = QFont(config.DEFAULT_FONT_FAMILY)
        font.setPointSizeF(config.DEFAULT_FONT_SIZE * 1.5)
        self.title = Label("", font=font)
        self.background: Optional[QColor] = None
        self.border_color: Optional[QColor] = None
        self.border_width = 1.0
        self.axes: dict[str, Axis] = {}
        self._data: list[DataSource] = []
        self._visible: dict[int, bool] = {}
        self.legend = Legend()
        self._legend_visible = False
        self._legend_location = Location.EAST
        DrawableContainer.add(self, self.title, Location.NORTH)

    # ---- components ----

    def set_plot_area(self, area: PlotArea) -> None:
        if self.plot_area is not None:
            DrawableContainer.remove(self, self.plot_area)
        self.plot_area = area
        DrawableContainer.add(self, area, Location.CENTER)

    def set_title(self, text: str) -> None:
        self.title.text = text
        self.layout()

    @property
    def legend_visible(self) -> bool:
        return self._legend_visible

    @legend_visible.setter
    def legend_visible(self, visible: bool) -> None:
        self._legend_visible = visible
        if visible:
            self.legend.set_entries(self.get_legend_entries())
            DrawableContainer.add(self, self.legend, self._legend_location)
        else:
            DrawableContainer.remove(self, self.legend)

    @property
    def legend_location(self) -> Location:
        return self._legend_location

    @legend_location.setter
    def legend_location(self, location: Location) -> None:
        self._legend_location = location
        if self._legend_visible:
            DrawableContainer.add(self, self.legend, location)

    def get_legend_entries(self) -> list[LegendEntry]:
        return []

    # ---- data ----

    def add(self, source: DataSource, visible: bool = True) -> None:
        """Display the data of `source`. Adding a source twice has no effect."""
        if any(s is source for s in self._data):
            return
        self._data.append(source)
        self._visible[id(source)] = visible
        source.add_data_listener(self)
        logger.debug(f"Added {source!r} to {type(self).__name__}")
        self.refresh()

    def remove(self, source: DataSource) -> None:
        if not any(s is source for s in self._data):
            return
        self._data = [s for s in self._data if s is not source]
        self._visible.pop(id(source), None)
        source.remove_data_listener(self)
        self.refresh()

    def clear(self) -> None:
        for source in list(self._data):
            self.remove(source)

    def get_data(self) -> list[DataSource]:
        return list(self._data)

    def get_visible_data(self) -> list[DataSource]:
        return [s for s in self._data if self._visible.get(id(s), False)]

    def is_visible(self, source: DataSource) -> bool:
        return self._visible.get(id(source), False)

    def set_visible(self, source: DataSource, visible: bool) -> None:
        if not any(s is source for s in self._data):
            raise ValueError(f"{source!r} isn't part of this plot.")
        self._visible[id(source)] = visible
        self.refresh()

    # ---- updates ----

    def refresh(self) -> None:
        """Autoscale axes and rebuild the legend after data changes."""
        self.autoscale_axes()
        if self._legend_visible:
            self.legend.set_entries(self.get_legend_entries())
        self.layout()

    def autoscale_axes(self) -> None:
        for name, axis in self.axes.items():
            if not axis.autoscaled:
                continue
            extent = self.get_axis_extent(name)
            if extent is not None:
                axis.autoscale(*extent)

    def get_axis_extent(self, name: str) -> Optional[tuple[float, float]]:
        """Data range an autoscaled axis `name` should show, None if unknown."""
        return None

    def data_added(self, source: DataSource, events: Sequence[DataChangeEvent]) -> None:
        self.refresh()

    def data_updated(self, source: DataSource, events: Sequence[DataChangeEvent]) -> None:
        self.refresh()

    def data_removed(self, source: DataSource, events: Sequence[DataChangeEvent]) -> None:
        self.refresh()

    # ---- painting ----

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
