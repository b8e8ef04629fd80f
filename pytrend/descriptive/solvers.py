"""
Solver dispatch for descriptive statistics.
"""

from __future__ import annotations

from numpy.typing import ArrayLike

from pytrend.core.validation import check_array, check_1d, check_finite, check_not_empty
from pytrend.descriptive.solution import DescriptiveSolution
from pytrend.descriptive.backends.cpu import CPUDescriptiveBackend


def describe(data: ArrayLike) -> DescriptiveSolution:
    """
    Compute descriptive statistics of a sample.

    Computes: mean, median, population variance and standard deviation
    (divisor n), minimum, maximum and range.

    Parameters
    ----------
    data : array-like
        1D sample of finite real values.

    Returns
    -------
    DescriptiveSolution

    Raises
    ------
    EmptyInputError
        If data has no observations.
    ValidationError
        If data is non-numeric or contains NaN/Inf.
    DimensionError
        If data is not 1D.
    NumericalError
        If a statistic overflows float64.
    """
    arr = check_array(data, 'data')
    check_1d(arr, 'data')
    check_finite(arr, 'data')
    check_not_empty(arr, 'data')

    result = CPUDescriptiveBackend().solve(arr)
    return DescriptiveSolution(_result=result)
