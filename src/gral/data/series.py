from __future__ import annotations

from typing import Any, Optional, Sequence

from gral.data.events import DataChangeEvent
from gral.data.source import DataSource


class DataSeries(DataSource):
    """
    Read-only projection of some columns of another data source.

    Column `i` of the series is column `cols[i]` of the source. Changes of the
    source are forwarded to the listeners of the series.
    """

    def __init__(self, source: DataSource, *cols: int, name: Optional[str] = None) -> None:
        if not cols:
            cols = tuple(range(source.column_count))
        for col in cols:
            source._check_col(col)
        super().__init__(*(source.column_types[c] for c in cols), name=name)
        self.source = source
        self.cols: tuple[int, ...] = tuple(cols)
        source.add_data_listener(self)

    @property
    def row_count(self) -> int:
        return self.source.row_count

    def get(self, col: int, row: int) -> Any:
        self._check_col(col)
        return self.source.get(self.cols[col], row)

    def _translate(self, events: Sequence[DataChangeEvent]) -> list[DataChangeEvent]:
        translated = []
        for event in events:
            for i, col in enumerate(self.cols):
                if col == event.col:
                    translated.append(DataChangeEvent(self, i, event.row, event.old, event.new))
        return translated

    def data_added(self, source: DataSource, events: Sequence[DataChangeEvent]) -> None:
        self.notify_data_added(*self._translate(events))

    def data_updated(self, source: DataSource, events: Sequence[DataChangeEvent]) -> None:
        self.notify_data_updated(*self._translate(events))

    def data_removed(self, source: DataSource, events: Sequence[DataChangeEvent]) -> None:
        self.notify_data_removed(*self._translate(events))
