from gral.graphics.container import Container, DrawableContainer
from gral.graphics.drawable import Drawable, DrawingContext, Quality, Target
from gral.graphics.label import Label
from gral.graphics.layout import EdgeLayout, Layout, StackedLayout, TableLayout

__all__ = [
    "Container",
    "Drawable",
    "DrawableContainer",
    "DrawingContext",
    "EdgeLayout",
    "Label",
    "Layout",
    "Quality",
    "StackedLayout",
    "TableLayout",
    "Target",
]
