from __future__ import annotations

from typing import Optional

import numpy as np

from gral.data.filters.filter import Filter, Mode
from gral.data.source import DataSource
from gral.util.math_utils import is_calculatable


class Median(Filter):
    """
    Sliding-window median of the filtered columns.

    For row `r` the window covers `window_size` rows starting at
    `r - offset`. Values that are not finite are ignored; an empty window
    gives NaN.
    """

    def __init__(
        self,
        original: DataSource,
        window_size: int,
        offset: Optional[int] = None,
        mode: Mode = Mode.REPEAT,
        *cols: int,
        name: Optional[str] = None,
    ) -> None:
        if window_size <= 0:
            raise ValueError(f"Invalid window size: {window_size}")
        self._window_size = window_size
        self._offset = window_size // 2 if offset is None else offset
        super().__init__(original, mode, *cols, name=name)

    @property
    def window_size(self) -> int:
        return self._window_size

    @window_size.setter
    def window_size(self, window_size: int) -> None:
        if window_size <= 0:
            raise ValueError(f"Invalid window size: {window_size}")
        self._window_size = window_size
        self.data_updated(self, ())

    @property
    def offset(self) -> int:
        return self._offset

    @offset.setter
    def offset(self, offset: int) -> None:
        self._offset = offset
        self.data_updated(self, ())

    def _median(self, col: int, row: int) -> float:
        start = row - self._offset
        window = [
            float(v)
            for v in (self.get_original(col, r) for r in range(start, start + self._window_size))
            if is_calculatable(v)
        ]
        if not window:
            return float("nan")
        return float(np.median(window))

    def filter(self) -> None:
        self.clear()
        for row in range(self.original.row_count):
            self.add([
                self._median(self.get_index_original(i), row)
                for i in range(self.filtered_column_count)
            ])
