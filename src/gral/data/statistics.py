"""
Descriptive statistics of a data source.

Values are computed lazily with numpy and cached until the source changes
(the source then hands out a fresh `Statistics` object).
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, Optional

import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt

    from gral.data.source import DataSource

logger = logging.getLogger(__name__)

N = "N"
SUM = "SUM"
MEAN = "MEAN"
MIN = "MIN"
MAX = "MAX"
MEDIAN = "MEDIAN"
# Sum of squared deviations from the mean
SUM2 = "SUM2"
# Sample variance, SUM2 / (N - 1)
VARIANCE = "VARIANCE"


def _sum2(values: npt.NDArray[np.float64]) -> float:
    return float(np.sum((values - values.mean()) ** 2))


def _variance(values: npt.NDArray[np.float64]) -> float:
    if values.size < 2:
        return float("nan")
    return _sum2(values) / (values.size - 1)


_FUNCTIONS: dict[str, Callable[[npt.NDArray[np.float64]], float]] = {
    N: lambda v: float(v.size),
    SUM: lambda v: float(np.sum(v)),
    MEAN: lambda v: float(np.mean(v)),
    MIN: lambda v: float(np.min(v)),
    MAX: lambda v: float(np.max(v)),
    MEDIAN: lambda v: float(np.median(v)),
    SUM2: _sum2,
    VARIANCE: _variance,
}

KEYS: tuple[str, ...] = tuple(_FUNCTIONS)


class Statistics:
    def __init__(self, source: DataSource) -> None:
        self.source = source
        self._cache: dict[tuple[str, Optional[int]], float] = {}

    def _values(self, col: Optional[int]) -> npt.NDArray[np.float64]:
        if col is None:
            columns = [
                self.source.get_column(c).to_array()
                for c in range(self.source.column_count)
                if self.source.is_column_numeric(c)
            ]
            values = np.concatenate(columns) if columns else np.empty(0)
        else:
            if not self.source.is_column_numeric(col):
                raise ValueError(f"Column {col} isn't numeric, no statistics available.")
            values = self.source.get_column(col).to_array()
        return values[np.isfinite(values)]

    def get(self, key: str, col: Optional[int] = None) -> float:
        """
        Return the statistic `key` of column `col`, or of all numeric columns
        if `col` is None.

        Args:
            key: One of N, SUM, MEAN, MIN, MAX, MEDIAN, SUM2, VARIANCE.
            col: Column index.

        Returns:
            The value, NaN when no finite values are available
            (except N, which is 0).
        """
        if key not in _FUNCTIONS:
            raise KeyError(f"Unknown statistics key '{key}'")
        cache_key = (key, col)
        if cache_key not in self._cache:
            values = self._values(col)
            if values.size == 0 and key != N:
                result = float("nan")
            else:
                result = _FUNCTIONS[key](values)
            self._cache[cache_key] = result
        return self._cache[cache_key]
