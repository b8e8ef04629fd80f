"""
Goodness-of-fit metrics.

Public API:
    r_squared(actual, predicted)  - Coefficient of determination
    mse(actual, predicted)        - Mean squared error
    rmse(actual, predicted)       - Root mean squared error
    mae(actual, predicted)        - Mean absolute error
"""

from pytrend.metrics.goodness_of_fit import r_squared, mse, rmse, mae

__all__ = [
    "r_squared",
    "mse",
    "rmse",
    "mae",
]
