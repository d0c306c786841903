from __future__ import annotations

from typing import Optional

from gral.data.filters.filter import Filter, Mode
from gral.data.kernel import Kernel
from gral.data.source import DataSource
from gral.util.math_utils import is_calculatable


class Convolution(Filter):
    """
    Convolves the filtered columns with a `Kernel`.

    The value of row `r` is the sum of `kernel.get(k) * original[r + k]` over
    all kernel indexes `k`. Rows beyond the borders are resolved by the mode,
    values that are not finite don't contribute. A row without any
    contribution is NaN.

    Example:
        smoothed = Convolution(table, Kernel.uniform(5), Mode.REPEAT, 1)
    """

    def __init__(
        self,
        original: DataSource,
        kernel: Kernel,
        mode: Mode,
        *cols: int,
        name: Optional[str] = None,
    ) -> None:
        self._kernel = kernel
        super().__init__(original, mode, *cols, name=name)

    @property
    def kernel(self) -> Kernel:
        return self._kernel

    @kernel.setter
    def kernel(self, kernel: Kernel) -> None:
        self._kernel = kernel
        self.data_updated(self, ())

    def _convolve(self, col: int, row: int) -> float:
        total = 0.0
        used = False
        for k in range(self._kernel.min_index, self._kernel.max_index + 1):
            value = self.get_original(col, row + k)
            if not is_calculatable(value):
                continue
            total += self._kernel.get(k) * float(value)
            used = True
        return total if used else float("nan")

    def filter(self) -> None:
        self.clear()
        for row in range(self.original.row_count):
            self.add([
                self._convolve(self.get_index_original(i), row)
                for i in range(self.filtered_column_count)
            ])
