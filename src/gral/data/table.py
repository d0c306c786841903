"""
Mutable in-memory data table.
"""
from __future__ import annotations

import logging
import numbers
from dataclasses import dataclass
from typing import Any, Optional

from gral.data.events import DataChangeEvent
from gral.data.source import DataSource, Row

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Ascending:
    """Sort comparator: column `col` in ascending order, missing values last."""
    col: int
    descending = False


@dataclass(frozen=True)
class Descending:
    """Sort comparator: column `col` in descending order, missing values last."""
    col: int
    descending = True


Comparator = Ascending | Descending


def _coerce(column_type: type, value: Any, col: int) -> Any:
    """Validate `value` against the column type and convert it where lossless."""
    if value is None:
        return None
    if column_type is float:
        if isinstance(value, numbers.Real) and not isinstance(value, bool):
            return float(value)
    elif column_type is int:
        if isinstance(value, numbers.Integral) and not isinstance(value, bool):
            return int(value)
    elif isinstance(value, column_type):
        return value
    raise TypeError(
        f"Value {value!r} of type {type(value).__name__} doesn't match "
        f"type {column_type.__name__} of column {col}."
    )


class DataTable(DataSource):
    """
    Table of typed columns that supports adding, updating, removing and
    sorting rows. Every mutation is announced to the registered listeners.

    Example:
        table = DataTable(float, float)
        table.add(1.0, 2.5)
        table.add(2.0, 3.0)
    """

    def __init__(self, *column_types: type, name: Optional[str] = None) -> None:
        super().__init__(*column_types, name=name)
        self._rows: list[list[Any]] = []

    @classmethod
    def from_source(cls, source: DataSource, name: Optional[str] = None) -> DataTable:
        """Create a detached copy of any data source."""
        table = cls(*source.column_types, name=name if name is not None else source.name)
        for row in range(source.row_count):
            table._rows.append([source.get(col, row) for col in range(source.column_count)])
        return table

    @property
    def row_count(self) -> int:
        return len(self._rows)

    def get(self, col: int, row: int) -> Any:
        self._check_row(row)
        self._check_col(col)
        return self._rows[row][col]

    # ---- mutation ----

    def add(self, *values: Any) -> int:
        """
        Append a row. The row may also be passed as a single list, tuple or
        `Row`.

        Returns:
            Index of the new row.

        Raises:
            ValueError: If the number of values doesn't match the column count.
            TypeError: If a value doesn't match the type of its column.
        """
        if len(values) == 1 and isinstance(values[0], (list, tuple, Row)):
            values = tuple(values[0])
        if len(values) != self.column_count:
            raise ValueError(
                f"Wrong number of columns! Expected {self.column_count}, got {len(values)}."
            )
        row_values = [
            _coerce(column_type, value, col)
            for col, (column_type, value) in enumerate(zip(self.column_types, values))
        ]
        self._rows.append(row_values)
        row = len(self._rows) - 1
        self.notify_data_added(*(
            DataChangeEvent(self, col, row, None, value) for col, value in enumerate(row_values)
        ))
        return row

    def set(self, col: int, row: int, value: Any) -> Any:
        """Replace the value of a cell and return the previous value."""
        self._check_row(row)
        self._check_col(col)
        value = _coerce(self.column_types[col], value, col)
        old = self._rows[row][col]
        self._rows[row][col] = value
        self.notify_data_updated(DataChangeEvent(self, col, row, old, value))
        return old

    def remove(self, row: int) -> None:
        self._check_row(row)
        values = self._rows.pop(row)
        self.notify_data_removed(*(
            DataChangeEvent(self, col, row, value, None) for col, value in enumerate(values)
        ))

    def remove_last(self) -> None:
        if not self._rows:
            return
        self.remove(len(self._rows) - 1)

    def clear(self) -> None:
        if not self._rows:
            return
        events = [
            DataChangeEvent(self, col, row, value, None)
            for row, values in enumerate(self._rows)
            for col, value in enumerate(values)
        ]
        self._rows.clear()
        self.notify_data_removed(*events)

    def sort(self, *comparators: Comparator) -> None:
        """
        Sort the rows in place. Comparators are applied in order, the first
        one has the highest priority.
        """
        if not comparators:
            return
        for comparator in comparators:
            self._check_col(comparator.col)

        old_rows = [list(r) for r in self._rows]
        # Stable sorts from the lowest priority comparator to the highest
        for comparator in reversed(comparators):
            present = [r for r in self._rows if r[comparator.col] is not None]
            missing = [r for r in self._rows if r[comparator.col] is None]
            present.sort(key=lambda r: r[comparator.col], reverse=comparator.descending)
            self._rows = present + missing

        events = [
            DataChangeEvent(self, col, row, old_rows[row][col], self._rows[row][col])
            for row in range(len(self._rows))
            for col in range(self.column_count)
            if old_rows[row][col] != self._rows[row][col]
        ]
        logger.debug(f"Sorted {len(self._rows)} rows, {len(events)} cells changed.")
        self.notify_data_updated(*events)
