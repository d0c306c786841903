"""
Layout strategies for `DrawableContainer`.

Every layout positions the components of a container inside the container's
bounds minus its insets, using the components' preferred sizes and the
constraints they were added with.
"""
from __future__ import annotations

import logging
import math
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional

from PySide6.QtCore import QSizeF

from gral.util.geometry import Location, Orientation

if TYPE_CHECKING:
    from gral.graphics.container import DrawableContainer
    from gral.graphics.drawable import Drawable

logger = logging.getLogger(__name__)


class Layout(ABC):
    @abstractmethod
    def layout(self, container: DrawableContainer) -> None:
        """Arrange the components of `container`."""

    @abstractmethod
    def get_preferred_size(self, container: DrawableContainer) -> QSizeF:
        """Size needed to lay out all components at their preferred sizes."""


def _pref_w(d: Optional[Drawable]) -> float:
    return d.preferred_size.width() if d is not None else 0.0


def _pref_h(d: Optional[Drawable]) -> float:
    return d.preferred_size.height() if d is not None else 0.0


class EdgeLayout(Layout):
    """
    Border layout: one component per `Location`.

    North and south strips get their preferred height, west and east strips
    their preferred width, corners take the size of the adjacent strips and
    the center component fills the remaining space.
    """

    def __init__(self, gap_x: float = 0.0, gap_y: float = 0.0) -> None:
        self.gap_x = gap_x
        self.gap_y = gap_y

    @staticmethod
    def _components_by_location(container: DrawableContainer) -> dict[Location, Drawable]:
        comps: dict[Location, Drawable] = {}
        for component in container:
            constraints = container.get_constraints(component)
            location = constraints if isinstance(constraints, Location) else Location.CENTER
            if location in comps:
                logger.debug(f"Location {location.name} is occupied twice, last component wins.")
            comps[location] = component
        return comps

    def layout(self, container: DrawableContainer) -> None:
        comps = self._components_by_location(container)
        get = comps.get
        nw, n, ne = get(Location.NORTH_WEST), get(Location.NORTH), get(Location.NORTH_EAST)
        w, c, e = get(Location.WEST), get(Location.CENTER), get(Location.EAST)
        sw, s, se = get(Location.SOUTH_WEST), get(Location.SOUTH), get(Location.SOUTH_EAST)

        area = container.insets.shrink(container.bounds)

        w_west = max(_pref_w(nw), _pref_w(w), _pref_w(sw))
        w_east = max(_pref_w(ne), _pref_w(e), _pref_w(se))
        h_north = max(_pref_h(nw), _pref_h(n), _pref_h(ne))
        h_south = max(_pref_h(sw), _pref_h(s), _pref_h(se))

        gap_west = self.gap_x if w_west > 0.0 else 0.0
        gap_east = self.gap_x if w_east > 0.0 else 0.0
        gap_north = self.gap_y if h_north > 0.0 else 0.0
        gap_south = self.gap_y if h_south > 0.0 else 0.0

        x_west = area.x()
        x_center = x_west + w_west + gap_west
        x_east = area.x() + area.width() - w_east
        y_north = area.y()
        y_center = y_north + h_north + gap_north
        y_south = area.y() + area.height() - h_south

        w_center = max(0.0, x_east - gap_east - x_center)
        h_center = max(0.0, y_south - gap_south - y_center)

        def place(d: Optional[Drawable], x: float, y: float, width: float, height: float) -> None:
            if d is not None:
                d.set_bounds(x, y, max(0.0, width), max(0.0, height))

        place(nw, x_west, y_north, w_west, h_north)
        place(n, x_center, y_north, w_center, h_north)
        place(ne, x_east, y_north, w_east, h_north)
        place(w, x_west, y_center, w_west, h_center)
        place(c, x_center, y_center, w_center, h_center)
        place(e, x_east, y_center, w_east, h_center)
        place(sw, x_west, y_south, w_west, h_south)
        place(s, x_center, y_south, w_center, h_south)
        place(se, x_east, y_south, w_east, h_south)

    def get_preferred_size(self, container: DrawableContainer) -> QSizeF:
        comps = self._components_by_location(container)
        get = comps.get
        insets = container.insets

        w_west = max(_pref_w(get(Location.NORTH_WEST)), _pref_w(get(Location.WEST)), _pref_w(get(Location.SOUTH_WEST)))
        w_center = max(_pref_w(get(Location.NORTH)), _pref_w(get(Location.CENTER)), _pref_w(get(Location.SOUTH)))
        w_east = max(_pref_w(get(Location.NORTH_EAST)), _pref_w(get(Location.EAST)), _pref_w(get(Location.SOUTH_EAST)))
        h_north = max(_pref_h(get(Location.NORTH_WEST)), _pref_h(get(Location.NORTH)), _pref_h(get(Location.NORTH_EAST)))
        h_center = max(_pref_h(get(Location.WEST)), _pref_h(get(Location.CENTER)), _pref_h(get(Location.EAST)))
        h_south = max(_pref_h(get(Location.SOUTH_WEST)), _pref_h(get(Location.SOUTH)), _pref_h(get(Location.SOUTH_EAST)))

        width = insets.horizontal + w_west + w_center + w_east
        width += self.gap_x * ((w_west > 0.0) + (w_east > 0.0))
        height = insets.vertical + h_north + h_center + h_south
        height += self.gap_y * ((h_north > 0.0) + (h_south > 0.0))
        return QSizeF(width, height)


class StackedLayout(Layout):
    """
    Stacks components along `orientation` at their preferred extent.

    Without constraints a component is stretched across the container; with an
    `(align_x, align_y)` pair it keeps its preferred size and is aligned.
    """

    def __init__(self, orientation: Orientation, gap: float = 0.0) -> None:
        self.orientation = orientation
        self.gap = gap

    def layout(self, container: DrawableContainer) -> None:
        area = container.insets.shrink(container.bounds)
        vertical = self.orientation == Orientation.VERTICAL

        pos = area.y() if vertical else area.x()
        for i, component in enumerate(container):
            if i > 0:
                pos += self.gap
            pref = component.preferred_size
            align = container.get_constraints(component)
            if isinstance(align, Location):
                align = align.value

            if vertical:
                width, height = area.width(), pref.height()
                x = area.x()
                if align is not None:
                    width = min(pref.width(), area.width())
                    x = area.x() + align[0] * (area.width() - width)
                component.set_bounds(x, pos, width, height)
                pos += height
            else:
                width, height = pref.width(), area.height()
                y = area.y()
                if align is not None:
                    height = min(pref.height(), area.height())
                    y = area.y() + align[1] * (area.height() - height)
                component.set_bounds(pos, y, width, height)
                pos += width

    def get_preferred_size(self, container: DrawableContainer) -> QSizeF:
        insets = container.insets
        sizes = [c.preferred_size for c in container]
        gaps = self.gap * max(0, len(sizes) - 1)
        if self.orientation == Orientation.VERTICAL:
            width = max((s.width() for s in sizes), default=0.0)
            height = sum(s.height() for s in sizes) + gaps
        else:
            width = sum(s.width() for s in sizes) + gaps
            height = max((s.height() for s in sizes), default=0.0)
        return QSizeF(width + insets.horizontal, height + insets.vertical)


class TableLayout(Layout):
    """
    Grid with a fixed number of columns, filled row by row.

    Columns and rows get the largest preferred extent of their cells; extra
    space is shared out in proportion to those extents.
    """

    def __init__(self, columns: int, gap_x: float = 0.0, gap_y: float = 0.0) -> None:
        if columns <= 0:
            raise ValueError(f"Invalid number of columns: {columns}")
        self.columns = columns
        self.gap_x = gap_x
        self.gap_y = gap_y

    def _extents(self, container: DrawableContainer) -> tuple[list[float], list[float]]:
        components = list(container)
        rows = math.ceil(len(components) / self.columns)
        widths = [0.0] * self.columns
        heights = [0.0] * rows
        for i, component in enumerate(components):
            row, col = divmod(i, self.columns)
            pref = component.preferred_size
            widths[col] = max(widths[col], pref.width())
            heights[row] = max(heights[row], pref.height())
        return widths, heights

    @staticmethod
    def _distribute(extents: list[float], available: float) -> list[float]:
        total = sum(extents)
        if not extents:
            return []
        if total <= 0.0:
            return [available / len(extents)] * len(extents)
        return [available * ext / total for ext in extents]

    def layout(self, container: DrawableContainer) -> None:
        widths, heights = self._extents(container)
        if not heights:
            return
        area = container.insets.shrink(container.bounds)
        avail_w = max(0.0, area.width() - self.gap_x * (len(widths) - 1))
        avail_h = max(0.0, area.height() - self.gap_y * (len(heights) - 1))
        col_w = self._distribute(widths, avail_w)
        row_h = self._distribute(heights, avail_h)

        for i, component in enumerate(container):
            row, col = divmod(i, self.columns)
            x = area.x() + sum(col_w[:col]) + self.gap_x * col
            y = area.y() + sum(row_h[:row]) + self.gap_y * row
            component.set_bounds(x, y, col_w[col], row_h[row])

    def get_preferred_size(self, container: DrawableContainer) -> QSizeF:
        widths, heights = self._extents(container)
        insets = container.insets
        if not heights:
            return QSizeF(insets.horizontal, insets.vertical)
        width = sum(widths) + self.gap_x * max(0, len(widths) - 1)
        height = sum(heights) + self.gap_y * max(0, len(heights) - 1)
        return QSizeF(width + insets.horizontal, height + insets.vertical)
