"""
Tests for drawable containers and their layouts.
"""
import pytest
from PySide6.QtCore import QRectF, QSizeF

from gral.graphics import Drawable, DrawableContainer, EdgeLayout, Label, StackedLayout, TableLayout
from gral.util import Insets2D, Location, Orientation


class Box(Drawable):
    def __init__(self, width=0.0, height=0.0):
        super().__init__()
        self.set_preferred_size(width, height)

    def draw(self, context):
        pass


class TestDrawable:
    """Tests for bounds and preferred size of a single drawable."""

    def test_bounds_are_copied(self):
        box = Box()
        rect = QRectF(1.0, 2.0, 3.0, 4.0)
        box.bounds = rect
        rect.setWidth(100.0)
        assert box.bounds == QRectF(1.0, 2.0, 3.0, 4.0)
        assert (box.x, box.y, box.width, box.height) == (1.0, 2.0, 3.0, 4.0)

    def test_set_bounds_arguments(self):
        with pytest.raises(TypeError):
            Box().set_bounds(1.0, 2.0)

    def test_preferred_size(self):
        box = Box()
        box.set_preferred_size(QSizeF(5.0, 6.0))
        assert box.preferred_size == QSizeF(5.0, 6.0)

    def test_contains(self):
        box = Box()
        box.set_bounds(0.0, 0.0, 10.0, 10.0)
        assert box.contains(5.0, 5.0)
        assert not box.contains(15.0, 5.0)


class TestDrawableContainer:
    """Tests for adding, removing and moving components."""

    def test_add_and_remove(self):
        container = DrawableContainer()
        box = Box()
        container.add(box, Location.NORTH)
        assert box in container
        assert len(container) == 1
        assert container.get_constraints(box) is Location.NORTH
        container.remove(box)
        assert box not in container
        assert container.get_constraints(box) is None

    def test_adding_twice_moves_to_end(self):
        container = DrawableContainer()
        first, second = Box(), Box()
        container.add(first)
        container.add(second)
        container.add(first, Location.EAST)
        assert list(container) == [second, first]
        assert container.get_constraints(first) is Location.EAST

    def test_cannot_contain_itself(self):
        container = DrawableContainer()
        with pytest.raises(ValueError):
            container.add(container)

    def test_remove_unknown_is_ignored(self):
        container = DrawableContainer()
        container.remove(Box())
        assert len(container) == 0

    def test_insets_returns_copy(self):
        container = DrawableContainer()
        container.insets = Insets2D(1.0, 2.0, 3.0, 4.0)
        assert container.insets == Insets2D(1.0, 2.0, 3.0, 4.0)
        assert container.insets is not container.insets

    def test_without_layout(self):
        container = DrawableContainer()
        container.set_preferred_size(7.0, 8.0)
        container.add(Box(1.0, 1.0))
        assert container.layout_manager is None
        assert container.preferred_size == QSizeF(7.0, 8.0)


class TestEdgeLayout:
    """Tests for the border layout."""

    @pytest.fixture
    def container(self):
        container = DrawableContainer(EdgeLayout())
        container.set_bounds(0.0, 0.0, 100.0, 100.0)
        return container

    def test_north_and_center(self, container):
        north, center = Box(10.0, 20.0), Box()
        container.add(north, Location.NORTH)
        container.add(center)
        assert north.bounds == QRectF(0.0, 0.0, 100.0, 20.0)
        assert center.bounds == QRectF(0.0, 20.0, 100.0, 80.0)

    def test_all_edges(self, container):
        boxes = {
            Location.NORTH: Box(0.0, 10.0),
            Location.SOUTH: Box(0.0, 15.0),
            Location.WEST: Box(20.0, 0.0),
            Location.EAST: Box(5.0, 0.0),
            Location.CENTER: Box(),
        }
        for location, box in boxes.items():
            container.add(box, location)
        assert boxes[Location.CENTER].bounds == QRectF(20.0, 10.0, 75.0, 75.0)
        assert boxes[Location.WEST].bounds == QRectF(0.0, 10.0, 20.0, 75.0)
        assert boxes[Location.SOUTH].bounds == QRectF(20.0, 85.0, 75.0, 15.0)

    def test_corners_take_row_and_column_size(self, container):
        corner, north, west = Box(30.0, 5.0), Box(0.0, 12.0), Box(8.0, 0.0)
        container.add(corner, Location.NORTH_WEST)
        container.add(north, Location.NORTH)
        container.add(west, Location.WEST)
        assert corner.bounds == QRectF(0.0, 0.0, 30.0, 12.0)
        assert west.bounds == QRectF(0.0, 12.0, 30.0, 88.0)

    def test_gaps_only_next_to_occupied_edges(self):
        container = DrawableContainer(EdgeLayout(4.0, 5.0))
        container.set_bounds(0.0, 0.0, 100.0, 100.0)
        north, center = Box(0.0, 20.0), Box()
        container.add(north, Location.NORTH)
        container.add(center)
        assert center.bounds == QRectF(0.0, 25.0, 100.0, 75.0)

    def test_insets(self, container):
        center = Box()
        container.add(center)
        container.insets = Insets2D(10.0, 10.0, 10.0, 10.0)
        assert center.bounds == QRectF(10.0, 10.0, 80.0, 80.0)

    def test_preferred_size(self):
        container = DrawableContainer(EdgeLayout(2.0, 3.0))
        container.insets = Insets2D(1.0, 1.0, 1.0, 1.0)
        container.add(Box(10.0, 20.0), Location.NORTH)
        container.add(Box(30.0, 40.0))
        container.add(Box(5.0, 0.0), Location.EAST)
        assert container.preferred_size == QSizeF(2.0 + 30.0 + 5.0 + 2.0, 2.0 + 20.0 + 40.0 + 3.0)


class TestStackedLayout:
    """Tests for stacking components in a row or a column."""

    def test_vertical_stretches_across(self):
        container = DrawableContainer(StackedLayout(Orientation.VERTICAL, 2.0))
        container.set_bounds(0.0, 0.0, 50.0, 100.0)
        first, second = Box(10.0, 20.0), Box(30.0, 10.0)
        container.add(first)
        container.add(second)
        assert first.bounds == QRectF(0.0, 0.0, 50.0, 20.0)
        assert second.bounds == QRectF(0.0, 22.0, 50.0, 10.0)
        assert container.preferred_size == QSizeF(30.0, 32.0)

    def test_alignment_keeps_preferred_size(self):
        container = DrawableContainer(StackedLayout(Orientation.VERTICAL))
        container.set_bounds(0.0, 0.0, 50.0, 100.0)
        box = Box(30.0, 10.0)
        container.add(box, (1.0, 0.5))
        assert box.bounds == QRectF(20.0, 0.0, 30.0, 10.0)

    def test_horizontal(self):
        container = DrawableContainer(StackedLayout(Orientation.HORIZONTAL, 5.0))
        container.set_bounds(10.0, 0.0, 100.0, 40.0)
        first, second = Box(10.0, 20.0), Box(30.0, 10.0)
        container.add(first)
        container.add(second, Location.SOUTH)
        assert first.bounds == QRectF(10.0, 0.0, 10.0, 40.0)
        assert second.bounds == QRectF(25.0, 30.0, 30.0, 10.0)
        assert container.preferred_size == QSizeF(45.0, 20.0)


class TestTableLayout:
    """Tests for the grid layout."""

    def test_invalid_columns(self):
        with pytest.raises(ValueError):
            TableLayout(0)

    def test_proportional_extents(self):
        container = DrawableContainer(TableLayout(2))
        container.set_bounds(0.0, 0.0, 100.0, 50.0)
        boxes = [Box(10.0, 10.0), Box(30.0, 10.0), Box(10.0, 40.0)]
        for box in boxes:
            container.add(box)
        assert boxes[0].bounds == QRectF(0.0, 0.0, 25.0, 10.0)
        assert boxes[1].bounds == QRectF(25.0, 0.0, 75.0, 10.0)
        assert boxes[2].bounds == QRectF(0.0, 10.0, 25.0, 40.0)

    def test_even_split_without_preferred_sizes(self):
        container = DrawableContainer(TableLayout(2, 10.0))
        container.set_bounds(0.0, 0.0, 110.0, 20.0)
        left, right = Box(), Box()
        container.add(left)
        container.add(right)
        assert left.bounds == QRectF(0.0, 0.0, 50.0, 20.0)
        assert right.bounds == QRectF(60.0, 0.0, 50.0, 20.0)

    def test_preferred_size(self):
        container = DrawableContainer(TableLayout(2, 1.0, 2.0))
        assert container.preferred_size == QSizeF(0.0, 0.0)
        for size in [(10.0, 10.0), (30.0, 10.0), (10.0, 40.0)]:
            container.add(Box(*size))
        assert container.preferred_size == QSizeF(41.0, 52.0)


class TestLabel:
    """Tests for label metrics."""

    def test_empty_label(self, qapp):
        label = Label()
        assert label.preferred_size == QSizeF(0.0, 0.0)

    def test_rotation_swaps_extents(self, qapp):
        label = Label("Temperature")
        size = label.preferred_size
        assert size.width() > size.height() > 0.0
        label.rotation = 90.0
        rotated = label.preferred_size
        assert rotated.width() == pytest.approx(size.height())
        assert rotated.height() == pytest.approx(size.width())

    def test_lines_add_height(self, qapp):
        single = Label("a").preferred_size.height()
        assert Label("a\nb").preferred_size.height() == pytest.approx(2.0 * single)
