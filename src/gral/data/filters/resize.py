from __future__ import annotations

import logging
from typing import Any, Optional

import numpy as np

from gral.data.filters.filter import Filter, Mode
from gral.data.source import DataSource

logger = logging.getLogger(__name__)


class Resize(Filter):
    """
    Resamples the filtered columns to `size` rows.

    Shrinking averages the original rows that fall into each new row,
    growing interpolates linearly between neighbouring rows. Unfiltered
    columns are sampled at the nearest original row, or are None while the
    source is empty. A `size` of 0 or less keeps the original row count.
    """

    def __init__(
        self,
        original: DataSource,
        size: int,
        *cols: int,
        name: Optional[str] = None,
    ) -> None:
        self._size = size
        super().__init__(original, Mode.REPEAT, *cols, name=name)

    @property
    def size(self) -> int:
        return self._size

    @size.setter
    def size(self, size: int) -> None:
        self._size = size
        self.data_updated(self, ())

    @property
    def row_count(self) -> int:
        if self._size <= 0:
            return self.original.row_count
        return self._size

    @property
    def filtered_row_count(self) -> int:
        return self.row_count

    def _original_row(self, row: int) -> int:
        n = self.original.row_count
        return min(int(row * n / self.row_count), n - 1)

    def get(self, col: int, row: int) -> Any:
        if self.is_filtered(col):
            return super().get(col, row)
        self._check_row(row)
        if self.original.row_count == 0:
            return None
        return self.original.get(col, self._original_row(row))

    @staticmethod
    def _resample(values: np.ndarray, size: int) -> np.ndarray:
        n = values.size
        if n == 0:
            return np.full(size, np.nan)
        if size == n:
            return values.copy()
        if size < n:
            result = np.empty(size)
            for i in range(size):
                lo = int(np.floor(i * n / size))
                hi = max(int(np.ceil((i + 1) * n / size)), lo + 1)
                box = values[lo:hi]
                box = box[np.isfinite(box)]
                result[i] = box.mean() if box.size else np.nan
            return result
        # Centres of the new rows in units of original rows
        positions = np.clip((np.arange(size) + 0.5) * n / size - 0.5, 0.0, n - 1.0)
        return np.interp(positions, np.arange(n, dtype=np.float64), values)

    def filter(self) -> None:
        self.clear()
        size = self.row_count
        columns = [
            self._resample(self.original.get_column(self.get_index_original(i)).to_array(), size)
            for i in range(self.filtered_column_count)
        ]
        for row in range(size):
            self.add([column[row] for column in columns])
        logger.debug(f"Resized {self.original.row_count} rows to {size}.")
