"""
Projection of a fitted line onto future periods or arbitrary x values.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pytrend.core.validation import (
    check_array,
    check_finite,
    check_non_negative_int,
    check_finite_scalar,
    check_finite_result,
)


def forecast(
    start: int,
    count: int,
    slope: float,
    intercept: float,
) -> NDArray[np.floating[Any]]:
    """
    Project `count` periods starting at period `start`.

    Element i is slope * (start + i) + intercept. A count of 0 gives an
    empty array.

    Args:
        start: First period index to project (>= 0)
        count: Number of periods (>= 0)
        slope: Fitted slope
        intercept: Fitted intercept

    Returns:
        float64 array of length `count`

    Raises:
        ValidationError: If start/count are not non-negative integers or
            the coefficients are not finite
        NumericalError: If a projected value overflows float64

    Example:
        >>> forecast(6, 3, slope=20.0, intercept=100.0)
        array([220., 240., 260.])
    """
    start = check_non_negative_int(start, 'start')
    count = check_non_negative_int(count, 'count')
    slope = check_finite_scalar(slope, 'slope')
    intercept = check_finite_scalar(intercept, 'intercept')

    periods = np.arange(start, start + count, dtype=np.float64)
    with np.errstate(over='ignore', invalid='ignore'):
        values = slope * periods + intercept
    check_finite_result(values, 'forecast')
    return values


def predict(
    x: ArrayLike,
    slope: float,
    intercept: float,
) -> NDArray[np.floating[Any]]:
    """
    Evaluate slope * x + intercept at each x.

    Raises:
        ValidationError: If x is non-numeric or non-finite, or the
            coefficients are not finite
        NumericalError: If a predicted value overflows float64
    """
    x_arr = check_array(x, 'x')
    check_finite(x_arr, 'x')
    slope = check_finite_scalar(slope, 'slope')
    intercept = check_finite_scalar(intercept, 'intercept')
    with np.errstate(over='ignore', invalid='ignore'):
        values = slope * x_arr + intercept
    check_finite_result(values, 'predict')
    return values
