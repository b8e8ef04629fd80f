"""
Goodness-of-fit metrics between observed and predicted series.

Standalone utility functions (no Design/Backend pipeline). Each validates
its inputs at entry and returns a plain float.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pytrend.core.exceptions import ZeroVarianceError
from pytrend.core.validation import (
    check_array,
    check_1d,
    check_finite,
    check_not_empty,
    check_consistent_length,
    check_nonzero_variance,
    check_finite_result,
)


def _check_pair(
    actual: ArrayLike,
    predicted: ArrayLike,
) -> tuple[NDArray[np.floating[Any]], NDArray[np.floating[Any]]]:
    """Convert and validate an (actual, predicted) pair."""
    a = check_array(actual, 'actual')
    p = check_array(predicted, 'predicted')
    check_1d(a, 'actual')
    check_1d(p, 'predicted')
    check_finite(a, 'actual')
    check_finite(p, 'predicted')
    check_not_empty(a, 'actual')
    check_not_empty(p, 'predicted')
    check_consistent_length(a, p, names=('actual', 'predicted'))
    return a, p


def mse(actual: ArrayLike, predicted: ArrayLike) -> float:
    """
    Mean squared error: mean((actual − predicted)²).

    Raises:
        EmptyInputError: If either input is empty
        LengthMismatchError: If lengths differ
        NumericalError: If the result overflows float64
    """
    a, p = _check_pair(actual, predicted)
    with np.errstate(over='ignore', invalid='ignore'):
        diff = a - p
        result = float(diff @ diff / a.shape[0])
    check_finite_result(result, 'mse')
    return result


def rmse(actual: ArrayLike, predicted: ArrayLike) -> float:
    """Root mean squared error, in the units of the data."""
    return float(np.sqrt(mse(actual, predicted)))


def mae(actual: ArrayLike, predicted: ArrayLike) -> float:
    """
    Mean absolute error: mean(|actual − predicted|).

    Raises:
        EmptyInputError: If either input is empty
        LengthMismatchError: If lengths differ
        NumericalError: If the result overflows float64
    """
    a, p = _check_pair(actual, predicted)
    with np.errstate(over='ignore', invalid='ignore'):
        result = float(np.mean(np.abs(a - p)))
    check_finite_result(result, 'mae')
    return result


def r_squared(actual: ArrayLike, predicted: ArrayLike) -> float:
    """
    Coefficient of determination: 1 − SSres / SStot.

    SSres = Σ(actual − predicted)², SStot = Σ(actual − mean(actual))².
    Values below zero mean the predictions do worse than the mean of
    `actual`; that is a legitimate result, not an error.

    Raises:
        EmptyInputError: If either input is empty
        LengthMismatchError: If lengths differ
        ZeroVarianceError: If `actual` is constant (SStot = 0)
        NumericalError: If a sum of squares overflows float64
    """
    a, p = _check_pair(actual, predicted)
    check_nonzero_variance(a, 'actual')

    with np.errstate(over='ignore', invalid='ignore'):
        resid = a - p
        centered = a - np.mean(a)
        ss_res = float(resid @ resid)
        ss_tot = float(centered @ centered)
    check_finite_result(ss_res, 'r_squared: residual sum of squares')
    check_finite_result(ss_tot, 'r_squared: total sum of squares')
    if not ss_tot > 0:
        raise ZeroVarianceError(
            f"actual: total sum of squares underflows to {ss_tot}, R² undefined",
            name='actual',
        )
    result = 1.0 - ss_res / ss_tot
    check_finite_result(result, 'r_squared')
    return result
