"""
Trend Design.

Design holds the validated (x, y) pair for a straight-line fit. For a
time series, x is the implicit period index 0..n-1; for paired data,
x is whatever the caller supplies.

All validation for fitting happens here, once, at the boundary.
Backends trust a Design completely.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pytrend.core.validation import (
    check_array,
    check_1d,
    check_finite,
    check_not_empty,
    check_consistent_length,
    check_min_samples,
    check_nonzero_variance,
)

# A line has two parameters
MIN_SAMPLES = 2


@dataclass(frozen=True)
class TrendDesign:
    """
    Straight-line regression design.

    Immutable after construction.

    Construction:
        TrendDesign.from_series(y)       # x = 0, 1, ..., n-1
        TrendDesign.from_arrays(x, y)    # explicit x
    """
    _x: NDArray[np.floating[Any]]
    _y: NDArray[np.floating[Any]]
    _n: int
    _is_index: bool

    @classmethod
    def from_series(cls, y: ArrayLike) -> TrendDesign:
        """
        Build Design from a time series, using positions as x.

        Raises:
            EmptyInputError: If y is empty
            InsufficientDataError: If y has a single observation
        """
        y_arr = check_array(y, 'y')
        check_1d(y_arr, 'y')
        check_finite(y_arr, 'y')
        check_not_empty(y_arr, 'y')
        check_min_samples(y_arr, MIN_SAMPLES, 'y')

        x_arr = np.arange(y_arr.shape[0], dtype=np.float64)
        return cls(_x=x_arr, _y=y_arr, _n=y_arr.shape[0], _is_index=True)

    @classmethod
    def from_arrays(cls, x: ArrayLike, y: ArrayLike) -> TrendDesign:
        """
        Build Design from paired x and y sequences.

        Checks run in a fixed order and the first failure is raised:
        conversion and finiteness, emptiness, length agreement, minimum
        sample count, then variation in x.

        Raises:
            EmptyInputError: If x or y is empty
            LengthMismatchError: If x and y differ in length
            InsufficientDataError: If fewer than two points
            ZeroVarianceError: If all x values are identical
        """
        x_arr = check_array(x, 'x')
        y_arr = check_array(y, 'y')
        check_1d(x_arr, 'x')
        check_1d(y_arr, 'y')
        check_finite(x_arr, 'x')
        check_finite(y_arr, 'y')
        check_not_empty(x_arr, 'x')
        check_not_empty(y_arr, 'y')
        check_consistent_length(x_arr, y_arr, names=('x', 'y'))
        check_min_samples(x_arr, MIN_SAMPLES, 'x')
        check_nonzero_variance(x_arr, 'x')

        return cls(_x=x_arr, _y=y_arr, _n=x_arr.shape[0], _is_index=False)

    # === Properties ===

    @property
    def x(self) -> NDArray[np.floating[Any]]:
        """Predictor values (n,)."""
        return self._x

    @property
    def y(self) -> NDArray[np.floating[Any]]:
        """Response values (n,)."""
        return self._y

    @property
    def n(self) -> int:
        """Number of observations."""
        return self._n

    @property
    def is_index(self) -> bool:
        """True when x is the implicit period index."""
        return self._is_index

    def __repr__(self) -> str:
        mode = 'index' if self._is_index else 'xy'
        return f"TrendDesign(n={self._n}, mode={mode!r})"
