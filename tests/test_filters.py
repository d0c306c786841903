"""
Tests for border handling and the convolution, median and resize filters.
"""
import math

import pytest

from gral.data import DataTable, Kernel
from gral.data.filters import Convolution, Median, Mode, Resize, resolve_row


def column_table(*values, column_type=float):
    table = DataTable(column_type)
    for value in values:
        table.add(value)
    return table


class TestResolveRow:
    """Tests for mapping rows outside a column onto valid rows."""

    def test_inside_is_unchanged(self):
        for mode in Mode:
            assert resolve_row(2, 5, mode) == 2

    def test_omit_and_zero(self):
        assert resolve_row(-1, 5, Mode.OMIT) is None
        assert resolve_row(5, 5, Mode.ZERO) is None

    def test_repeat(self):
        assert resolve_row(-2, 5, Mode.REPEAT) == 0
        assert resolve_row(7, 5, Mode.REPEAT) == 4

    def test_mirror(self):
        assert resolve_row(-1, 5, Mode.MIRROR) == 1
        assert resolve_row(5, 5, Mode.MIRROR) == 3
        assert resolve_row(8, 5, Mode.MIRROR) == 0
        assert resolve_row(9, 5, Mode.MIRROR) == 1
        assert resolve_row(3, 1, Mode.MIRROR) == 0

    def test_circular(self):
        assert resolve_row(5, 5, Mode.CIRCULAR) == 0
        assert resolve_row(-1, 5, Mode.CIRCULAR) == 4
        assert resolve_row(-6, 5, Mode.CIRCULAR) == 4

    def test_no_rows(self):
        assert resolve_row(0, 0, Mode.REPEAT) is None


class TestFilter:
    """Tests for behaviour shared by all filters."""

    def test_non_numeric_column(self):
        table = DataTable(float, str)
        with pytest.raises(ValueError):
            Convolution(table, Kernel.uniform(3), Mode.REPEAT, 1)
        with pytest.raises(ValueError):
            Convolution(table, Kernel.uniform(3), Mode.REPEAT)

    def test_unfiltered_columns_are_delegated(self):
        table = DataTable(float, str)
        table.add(1.0, "a")
        table.add(2.0, "b")
        smoothed = Convolution(table, Kernel.uniform(3), Mode.REPEAT, 0)
        assert smoothed.column_types == (float, str)
        assert smoothed.get(1, 1) == "b"
        assert smoothed.is_filtered(0)
        assert not smoothed.is_filtered(1)
        assert smoothed.get_index(1) == -1
        assert smoothed.filtered_column_count == 1

    def test_set(self):
        table = DataTable(float, str)
        table.add(1.0, "a")
        smoothed = Convolution(table, Kernel.uniform(1), Mode.REPEAT, 0)
        assert smoothed.set(0, 0, 9.0) == 1.0
        assert smoothed.get(0, 0) == 9.0
        with pytest.raises(ValueError):
            smoothed.set(1, 0, 1.0)

    def test_set_checks_row(self, recorder):
        table = column_table(1.0, 2.0)
        smoothed = Convolution(table, Kernel([1.0]), Mode.REPEAT)
        smoothed.add_data_listener(recorder)
        with pytest.raises(IndexError):
            smoothed.set(0, -1, 9.0)
        with pytest.raises(IndexError):
            smoothed.set(0, 2, 9.0)
        assert [smoothed.get(0, r) for r in range(2)] == [1.0, 2.0]
        assert recorder.kinds() == []

    def test_follows_changes(self, recorder):
        table = column_table(1.0, 2.0)
        smoothed = Convolution(table, Kernel.uniform(1), Mode.REPEAT)
        smoothed.add_data_listener(recorder)
        table.add(3.0)
        assert smoothed.row_count == 3
        assert smoothed.get(0, 2) == 3.0
        assert recorder.kinds() == ["added"]

    def test_detach(self):
        table = column_table(1.0)
        smoothed = Convolution(table, Kernel.uniform(1), Mode.REPEAT)
        smoothed.detach()
        table.add(2.0)
        assert smoothed.row_count == 2
        with pytest.raises(IndexError):
            smoothed.get(0, 1)


class TestConvolution:
    """Tests for kernel convolution."""

    @pytest.fixture
    def table(self):
        return column_table(1.0, 2.0, 3.0, 4.0, 5.0)

    def test_repeat(self, table):
        smoothed = Convolution(table, Kernel.uniform(3), Mode.REPEAT)
        assert smoothed.get(0, 0) == pytest.approx(4.0 / 3.0)
        assert smoothed.get(0, 2) == pytest.approx(3.0)
        assert smoothed.get(0, 4) == pytest.approx(14.0 / 3.0)

    def test_zero(self, table):
        smoothed = Convolution(table, Kernel.uniform(3), Mode.ZERO)
        assert smoothed.get(0, 0) == pytest.approx(1.0)

    def test_omit_is_not_renormalized(self, table):
        smoothed = Convolution(table, Kernel.uniform(3), Mode.OMIT)
        assert smoothed.get(0, 0) == pytest.approx(1.0)

    def test_missing_values_are_skipped(self):
        table = column_table(None, None, 3.0)
        smoothed = Convolution(table, Kernel([1.0, 1.0], offset=0), Mode.OMIT)
        assert math.isnan(smoothed.get(0, 0))
        assert smoothed.get(0, 1) == pytest.approx(3.0)

    def test_mode_change_refilters(self, table, recorder):
        smoothed = Convolution(table, Kernel.uniform(3), Mode.REPEAT)
        smoothed.add_data_listener(recorder)
        smoothed.mode = Mode.ZERO
        assert smoothed.get(0, 0) == pytest.approx(1.0)
        assert recorder.kinds() == ["updated"]

    def test_kernel_change_refilters(self, table):
        smoothed = Convolution(table, Kernel.uniform(3), Mode.REPEAT)
        smoothed.kernel = Kernel([2.0])
        assert smoothed.get(0, 3) == pytest.approx(8.0)


class TestMedian:
    """Tests for the moving median."""

    def test_window(self):
        table = column_table(1.0, 100.0, 2.0, 3.0, 4.0)
        median = Median(table, 3, 1, Mode.REPEAT, 0)
        assert median.get(0, 0) == pytest.approx(1.0)
        assert median.get(0, 1) == pytest.approx(2.0)
        assert median.get(0, 2) == pytest.approx(3.0)

    def test_default_offset(self):
        median = Median(column_table(1.0, 2.0), 5)
        assert median.offset == 2

    def test_invalid_window(self):
        with pytest.raises(ValueError):
            Median(column_table(1.0), 0)
        median = Median(column_table(1.0), 1)
        with pytest.raises(ValueError):
            median.window_size = -1

    def test_offset_change(self):
        table = column_table(1.0, 2.0, 3.0)
        median = Median(table, 1, 0)
        median.offset = 1
        assert median.get(0, 1) == pytest.approx(1.0)


class TestResize:
    """Tests for resampling to another row count."""

    def test_shrink_averages(self):
        resized = Resize(column_table(0.0, 2.0, 4.0, 6.0), 2)
        assert resized.row_count == 2
        assert [resized.get(0, r) for r in range(2)] == pytest.approx([1.0, 5.0])

    def test_grow_interpolates(self):
        resized = Resize(column_table(0.0, 10.0), 4)
        assert [resized.get(0, r) for r in range(4)] == pytest.approx([0.0, 2.5, 7.5, 10.0])

    def test_unfiltered_columns_use_nearest_row(self):
        table = DataTable(float, str)
        for i, label in enumerate("abcd"):
            table.add(float(i), label)
        resized = Resize(table, 2, 0)
        assert resized.get(1, 1) == "c"

    def test_non_positive_size_keeps_rows(self):
        table = column_table(1.0, 2.0, 3.0)
        resized = Resize(table, 0)
        assert resized.row_count == 3
        assert resized.get(0, 2) == 3.0
        resized.size = 1
        assert resized.get(0, 0) == pytest.approx(2.0)

    def test_empty_source(self):
        resized = Resize(DataTable(float, str), 3, 0)
        assert resized.row_count == 3
        assert math.isnan(resized.get(0, 0))
        assert [resized.get(1, r) for r in range(3)] == [None, None, None]
