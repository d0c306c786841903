"""
Drawable Container
==================
A `Drawable` that stores other drawables as components. It takes care of
laying out, managing insets for and painting its components.

Layout itself is delegated to an injected `Layout`; the container only tracks
components, constraints and insets and re-runs the layout on every mutation.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Iterator, Optional, Protocol

from PySide6.QtCore import QSizeF

from gral.graphics.drawable import Drawable, DrawingContext
from gral.util.geometry import Insets2D

if TYPE_CHECKING:
    from gral.graphics.layout import Layout

logger = logging.getLogger(__name__)


class Container(Protocol):
    """Interface of objects that hold drawables together with constraints."""

    def add(self, drawable: Drawable, constraints: Any = None) -> None: ...

    def remove(self, drawable: Drawable) -> None: ...

    def get_constraints(self, drawable: Drawable) -> Any: ...

    @property
    def insets(self) -> Insets2D: ...

    @property
    def layout_manager(self) -> Optional[Layout]: ...

    def __iter__(self) -> Iterator[Drawable]: ...

    def __len__(self) -> int: ...


class DrawableContainer(Drawable):
    def __init__(self, layout: Optional[Layout] = None) -> None:
        super().__init__()
        self._insets = Insets2D()
        self._layout: Optional[Layout] = layout
        self._components: list[Drawable] = []
        self._constraints: dict[int, Any] = {}

    # ---- painting ----

    def draw(self, context: DrawingContext) -> None:
        self.draw_components(context)

    def draw_components(self, context: DrawingContext) -> None:
        for drawable in self._components:
            drawable.draw(context)

    # ---- components ----

    def add(self, drawable: Drawable, constraints: Any = None) -> None:
        if drawable is self:
            raise ValueError("A container cannot contain itself.")
        if self._index_of(drawable) >= 0:
            self._components.pop(self._index_of(drawable))
        self._components.append(drawable)
        self._constraints[id(drawable)] = constraints
        self.layout()

    def remove(self, drawable: Drawable) -> None:
        index = self._index_of(drawable)
        if index < 0:
            return
        self._components.pop(index)
        self._constraints.pop(id(drawable), None)
        self.layout()

    def get_constraints(self, drawable: Drawable) -> Any:
        return self._constraints.get(id(drawable))

    def _index_of(self, drawable: Drawable) -> int:
        # Identity, not equality: drawables may define __eq__
        for i, component in enumerate(self._components):
            if component is drawable:
                return i
        return -1

    def __iter__(self) -> Iterator[Drawable]:
        return iter(list(self._components))

    def __len__(self) -> int:
        return len(self._components)

    def __contains__(self, drawable: object) -> bool:
        return any(component is drawable for component in self._components)

    # ---- insets ----

    @property
    def insets(self) -> Insets2D:
        return Insets2D(self._insets.top, self._insets.left, self._insets.bottom, self._insets.right)

    @insets.setter
    def insets(self, insets: Insets2D) -> None:
        self.set_insets(insets)

    def set_insets(self, insets: Insets2D) -> None:
        if insets == self._insets:
            return
        self._insets = insets
        self.layout()

    # ---- layout ----

    @property
    def layout_manager(self) -> Optional[Layout]:
        return self._layout

    def set_layout(self, layout: Optional[Layout]) -> None:
        self._layout = layout
        self.layout()

    def layout(self) -> None:
        """Recalculate this container's layout."""
        if self._layout is not None:
            self._layout.layout(self)

    def set_bounds(self, *args) -> None:
        super().set_bounds(*args)
        self.layout()

    @property
    def preferred_size(self) -> QSizeF:
        if self._layout is not None:
            return self._layout.get_preferred_size(self)
        return super().preferred_size
