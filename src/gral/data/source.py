"""
Data Sources
============
Tabular data abstraction used by plots and filters.

A `DataSource` is an ordered list of rows, each with a fixed number of typed
columns. Sources announce changes to registered `DataListener`s; every change
also drops cached statistics.
"""
from __future__ import annotations

import logging
import numbers
from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any, Iterator, Optional

import numpy as np

from gral.data.events import DataChangeEvent, DataListener

if TYPE_CHECKING:
    import numpy.typing as npt

    from gral.data.statistics import Statistics

logger = logging.getLogger(__name__)


def is_numeric_type(column_type: type) -> bool:
    """Numeric columns hold real numbers. Booleans are not considered numeric."""
    return issubclass(column_type, numbers.Real) and not issubclass(column_type, bool)


class DataSource(ABC):
    """Abstract base of all tabular data."""

    def __init__(self, *column_types: type, name: Optional[str] = None) -> None:
        self._column_types: tuple[type, ...] = tuple(column_types)
        self._listeners: list[DataListener] = []
        self._statistics: Optional[Statistics] = None
        self.name = name

    # ---- structure ----

    @property
    def column_types(self) -> tuple[type, ...]:
        return self._column_types

    def _set_column_types(self, *column_types: type) -> None:
        self._column_types = tuple(column_types)

    @property
    def column_count(self) -> int:
        return len(self._column_types)

    @property
    @abstractmethod
    def row_count(self) -> int:
        """Number of rows."""

    @abstractmethod
    def get(self, col: int, row: int) -> Any:
        """Value of the cell at `col`, `row`."""

    def is_column_numeric(self, col: int) -> bool:
        if not 0 <= col < self.column_count:
            raise IndexError(f"Column {col} out of range [0, {self.column_count})")
        return is_numeric_type(self._column_types[col])

    def get_row(self, row: int) -> Row:
        return Row(self, row)

    def get_column(self, col: int) -> Column:
        return Column(self, col)

    def __len__(self) -> int:
        return self.row_count

    def __iter__(self) -> Iterator[Row]:
        for row in range(self.row_count):
            yield Row(self, row)

    def _check_row(self, row: int) -> None:
        if not 0 <= row < self.row_count:
            raise IndexError(f"Row {row} out of range [0, {self.row_count})")

    def _check_col(self, col: int) -> None:
        if not 0 <= col < self.column_count:
            raise IndexError(f"Column {col} out of range [0, {self.column_count})")

    # ---- statistics ----

    @property
    def statistics(self) -> Statistics:
        if self._statistics is None:
            from gral.data.statistics import Statistics
            self._statistics = Statistics(self)
        return self._statistics

    # ---- listeners ----

    def add_data_listener(self, listener: DataListener) -> None:
        if not any(l is listener for l in self._listeners):
            self._listeners.append(listener)

    def remove_data_listener(self, listener: DataListener) -> None:
        self._listeners = [l for l in self._listeners if l is not listener]

    @property
    def data_listeners(self) -> tuple[DataListener, ...]:
        return tuple(self._listeners)

    def notify_data_added(self, *events: DataChangeEvent) -> None:
        self._statistics = None
        for listener in list(self._listeners):
            listener.data_added(self, events)

    def notify_data_updated(self, *events: DataChangeEvent) -> None:
        self._statistics = None
        for listener in list(self._listeners):
            listener.data_updated(self, events)

    def notify_data_removed(self, *events: DataChangeEvent) -> None:
        self._statistics = None
        for listener in list(self._listeners):
            listener.data_removed(self, events)

    def __repr__(self) -> str:
        types = ", ".join(t.__name__ for t in self._column_types)
        return f"{type(self).__name__}(name={self.name!r}, columns=[{types}], rows={self.row_count})"


class Row(Sequence):
    """Read-only view of one row of a data source."""

    def __init__(self, source: DataSource, index: int) -> None:
        source._check_row(index)
        self.source = source
        self.index = index

    def __getitem__(self, col):
        if isinstance(col, slice):
            return [self.source.get(c, self.index) for c in range(self.source.column_count)[col]]
        if col < 0:
            col += self.source.column_count
        self.source._check_col(col)
        return self.source.get(col, self.index)

    def __len__(self) -> int:
        return self.source.column_count

    def to_tuple(self) -> tuple:
        return tuple(self)

    def __repr__(self) -> str:
        return f"Row({self.index}, {list(self)})"


class Column(Sequence):
    """Read-only view of one column of a data source."""

    def __init__(self, source: DataSource, index: int) -> None:
        source._check_col(index)
        self.source = source
        self.index = index

    def __getitem__(self, row):
        if isinstance(row, slice):
            return [self.source.get(self.index, r) for r in range(self.source.row_count)[row]]
        if row < 0:
            row += self.source.row_count
        self.source._check_row(row)
        return self.source.get(self.index, row)

    def __len__(self) -> int:
        return self.source.row_count

    @property
    def is_numeric(self) -> bool:
        return self.source.is_column_numeric(self.index)

    def to_array(self) -> npt.NDArray[np.float64]:
        """Column values as float array, NaN for missing values."""
        if not self.is_numeric:
            raise ValueError(f"Column {self.index} isn't numeric.")
        return np.array(
            [np.nan if v is None else float(v) for v in self],
            dtype=np.float64,
        )

    def min(self) -> float:
        return self.source.statistics.get("MIN", self.index)

    def max(self) -> float:
        return self.source.statistics.get("MAX", self.index)

    def sum(self) -> float:
        return self.source.statistics.get("SUM", self.index)

    def mean(self) -> float:
        return self.source.statistics.get("MEAN", self.index)

    def median(self) -> float:
        return self.source.statistics.get("MEDIAN", self.index)

    def __repr__(self) -> str:
        return f"Column({self.index}, {list(self)})"
