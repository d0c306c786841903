"""
Data Filters
============
Abstract base for filters that derive new values for some columns of a data
source, in other words a set of one-dimensional data.

Functionality includes:
1. Different modes for handling the borders of a column (see `Mode`).
2. Listening for changes of the original data; every change re-runs the
   filter and is passed on to the filter's own listeners.
3. Filtering of multiple columns.

Values of filtered columns are buffered. Access to unfiltered columns is
delegated to the original data source.
"""
from __future__ import annotations

import bisect
import logging
from abc import abstractmethod
from enum import Enum
from typing import Any, Optional, Sequence

from gral.data.events import DataChangeEvent
from gral.data.source import DataSource

logger = logging.getLogger(__name__)


class Mode(Enum):
    """Behavior when a filter needs values beyond the borders of a column."""
    # Ignores missing values
    OMIT = "omit"
    # Treats missing values as zero
    ZERO = "zero"
    # Repeats the last value
    REPEAT = "repeat"
    # Mirrors values at the last value
    MIRROR = "mirror"
    # Repeats the data
    CIRCULAR = "circular"


def resolve_row(row: int, row_count: int, mode: Mode) -> Optional[int]:
    """
    Map a possibly out-of-range row index to a valid one under `mode`.

    Returns:
        A row index in [0, row_count), or None if the mode supplies a
        constant instead (OMIT, ZERO) or there are no rows at all.
    """
    last = row_count - 1
    if 0 <= row <= last:
        return row
    if row_count <= 0 or mode in (Mode.OMIT, Mode.ZERO):
        return None
    if mode == Mode.REPEAT:
        return min(max(row, 0), last)
    if mode == Mode.MIRROR:
        if last == 0:
            return 0
        rem, mod = divmod(abs(row), last)
        return mod if rem % 2 == 0 else last - mod
    if mode == Mode.CIRCULAR:
        # Floored modulo wraps negative rows from the end
        return row % row_count
    raise ValueError(f"Unknown mode: {mode}")


class Filter(DataSource):
    def __init__(self, original: DataSource, mode: Mode, *cols: int, name: Optional[str] = None) -> None:
        """
        Initializes a new filter with the data source, border handling and
        columns to be filtered.

        Args:
            original: Data source to be filtered.
            mode: Border handling mode.
            cols: Indexes of numeric columns to be filtered; all columns if
                  none are given.

        Raises:
            ValueError: If one of the columns isn't numeric.
        """
        super().__init__(*original.column_types, name=name)
        self.original = original
        self._mode = mode
        # Sorted for binary search
        self._cols: list[int] = sorted(cols)
        self._rows: list[list[float]] = []

        for col in (self._cols or range(original.column_count)):
            if not original.is_column_numeric(col):
                raise ValueError(f"Column {col} isn't numeric and cannot be filtered.")

        types = list(original.column_types)
        for col in (self._cols or range(original.column_count)):
            types[col] = float
        self._set_column_types(*types)

        self.original.add_data_listener(self)
        self.data_updated(self.original, ())

    # ---- original values ----

    def get_original(self, col: int, row: int) -> Any:
        """
        Value of the original source. Rows outside the source are resolved
        according to the border handling mode.
        """
        resolved = resolve_row(row, self.original.row_count, self._mode)
        if resolved is None:
            return 0.0 if self._mode == Mode.ZERO else float("nan")
        return self.original.get(col, resolved)

    # ---- buffer ----

    def clear(self) -> None:
        self._rows.clear()

    def add(self, values: Sequence[Any]) -> None:
        self._rows.append([float("nan") if v is None else float(v) for v in values])

    def get(self, col: int, row: int) -> Any:
        pos = self.get_index(col)
        if pos < 0:
            return self.original.get(col, row)
        self._check_row(row)
        return self._rows[row][pos]

    def set(self, col: int, row: int, value: float) -> float:
        """
        Replace a buffered value of a filtered column.

        Raises:
            ValueError: If the column isn't filtered.
            IndexError: If the row is out of range.
        """
        pos = self.get_index(col)
        if pos < 0:
            raise ValueError("Can't set value in unfiltered column.")
        self._check_row(row)
        old = self._rows[row][pos]
        self._rows[row][pos] = value
        self.notify_data_updated(DataChangeEvent(self, col, row, old, value))
        return old

    # ---- structure ----

    @property
    def row_count(self) -> int:
        return self.original.row_count

    @property
    def filtered_row_count(self) -> int:
        return self.original.row_count

    @property
    def filtered_column_count(self) -> int:
        if not self._cols:
            return self.original.column_count
        return len(self._cols)

    def get_index_original(self, col: int) -> int:
        """Index of the original column for the filtered column `col`."""
        if not self._cols:
            return col
        return self._cols[col]

    def get_index(self, col: int) -> int:
        """Index of the filtered column for original column `col`, -1 if unfiltered."""
        if not self._cols:
            return col if 0 <= col < self.original.column_count else -1
        pos = bisect.bisect_left(self._cols, col)
        if pos < len(self._cols) and self._cols[pos] == col:
            return pos
        return -1

    def is_filtered(self, col: int) -> bool:
        return self.get_index(col) >= 0

    @property
    def mode(self) -> Mode:
        return self._mode

    @mode.setter
    def mode(self, mode: Mode) -> None:
        self._mode = mode
        self.data_updated(self, ())

    # ---- listener ----

    def data_added(self, source: DataSource, events: Sequence[DataChangeEvent]) -> None:
        self._refilter()
        self.notify_data_added(*events)

    def data_updated(self, source: DataSource, events: Sequence[DataChangeEvent]) -> None:
        self._refilter()
        self.notify_data_updated(*events)

    def data_removed(self, source: DataSource, events: Sequence[DataChangeEvent]) -> None:
        self._refilter()
        self.notify_data_removed(*events)

    def _refilter(self) -> None:
        self.filter()
        logger.debug(f"{type(self).__name__} recomputed {len(self._rows)} rows.")

    @abstractmethod
    def filter(self) -> None:
        """Recompute the buffered rows from the original data."""

    def detach(self) -> None:
        """Stop listening to the original data source."""
        self.original.remove_data_listener(self)
