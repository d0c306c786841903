"""
Convolution Kernels
===================
One-dimensional weight arrays used by the `Convolution` filter.

A kernel is indexed relative to its `offset`: `get(i)` returns the weight
applied to the value `i` rows away from the row being filtered, so valid
indexes run from `min_index` (= -offset) to `max_index`. Outside that range
the weight is zero.
"""
from __future__ import annotations

import math
from typing import TYPE_CHECKING, Optional, Sequence

import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt


class Kernel:
    def __init__(self, values: Sequence[float], offset: Optional[int] = None) -> None:
        if len(values) == 0:
            raise ValueError("A kernel needs at least one value.")
        self._values: npt.NDArray[np.float64] = np.asarray(values, dtype=np.float64).copy()
        self.offset: int = len(values) // 2 if offset is None else int(offset)

    # ---- access ----

    @property
    def size(self) -> int:
        return int(self._values.size)

    @property
    def min_index(self) -> int:
        return -self.offset

    @property
    def max_index(self) -> int:
        return self.size - 1 - self.offset

    def get(self, i: int) -> float:
        j = i + self.offset
        if j < 0 or j >= self.size:
            return 0.0
        return float(self._values[j])

    @property
    def values(self) -> npt.NDArray[np.float64]:
        return self._values.copy()

    def __len__(self) -> int:
        return self.size

    def __repr__(self) -> str:
        return f"Kernel({self._values.tolist()}, offset={self.offset})"

    # ---- arithmetic ----

    def normalize(self) -> Kernel:
        """Return a kernel whose weights sum to one."""
        total = float(self._values.sum())
        if total == 0.0:
            raise ValueError("Cannot normalize a kernel whose weights sum to zero.")
        return Kernel(self._values / total, self.offset)

    def _aligned(self, other: Kernel) -> tuple[int, int]:
        lo = min(self.min_index, other.min_index)
        hi = max(self.max_index, other.max_index)
        return lo, hi

    def add(self, other: Kernel | float) -> Kernel:
        if isinstance(other, Kernel):
            lo, hi = self._aligned(other)
            values = [self.get(i) + other.get(i) for i in range(lo, hi + 1)]
            return Kernel(values, -lo)
        return Kernel(self._values + float(other), self.offset)

    def mul(self, other: Kernel | float) -> Kernel:
        if isinstance(other, Kernel):
            lo, hi = self._aligned(other)
            values = [self.get(i) * other.get(i) for i in range(lo, hi + 1)]
            return Kernel(values, -lo)
        return Kernel(self._values * float(other), self.offset)

    def negate(self) -> Kernel:
        return self.mul(-1.0)

    __add__ = add
    __mul__ = mul

    def __neg__(self) -> Kernel:
        return self.negate()

    # ---- factories ----

    @staticmethod
    def uniform(size: int) -> Kernel:
        """Moving average over `size` values."""
        if size <= 0:
            raise ValueError(f"Invalid kernel size: {size}")
        return Kernel(np.full(size, 1.0 / size))

    @staticmethod
    def binomial(size: int) -> Kernel:
        """Normalized binomial coefficients of order `size - 1`."""
        if size <= 0:
            raise ValueError(f"Invalid kernel size: {size}")
        n = size - 1
        coefficients = [math.comb(n, k) for k in range(size)]
        return Kernel(np.asarray(coefficients, dtype=np.float64) / 2.0 ** n)

    @staticmethod
    def binomial_variance(variance: float) -> Kernel:
        """Binomial kernel approximating a Gaussian of the given variance."""
        if variance < 0.0:
            raise ValueError(f"Invalid variance: {variance}")
        return Kernel.binomial(int(4.0 * variance) + 1)

    @staticmethod
    def gaussian(size: int, sigma: float) -> Kernel:
        if size <= 0 or sigma <= 0.0:
            raise ValueError(f"Invalid kernel size {size} or sigma {sigma}")
        x = np.arange(size, dtype=np.float64) - size // 2
        weights = np.exp(-(x ** 2) / (2.0 * sigma ** 2))
        return Kernel(weights / weights.sum())

    @staticmethod
    def laplacian() -> Kernel:
        """Discrete second derivative."""
        return Kernel([1.0, -2.0, 1.0])
