"""
pytrend: least-squares trend lines for time series.

Fits straight lines to time-ordered or paired data, scores the fit,
and projects it forward.

Submodules:
    regression: fit_index, fit_xy, fit
    metrics: r_squared, mse, rmse, mae
    forecasting: forecast, predict
    descriptive: describe
"""

__version__ = "0.1.0"

from pytrend import regression
from pytrend import metrics
from pytrend import forecasting
from pytrend import descriptive
from pytrend.regression import fit_index, fit_xy, fit, TrendLine
from pytrend.metrics import r_squared, mse, rmse, mae
from pytrend.forecasting import forecast, predict
from pytrend.descriptive import describe
from pytrend.core.exceptions import (
    ErrorKind,
    PyTrendError,
    ValidationError,
    NumericalError,
    InsufficientDataError,
    EmptyInputError,
    LengthMismatchError,
    ZeroVarianceError,
)

__all__ = [
    "__version__",
    "regression",
    "metrics",
    "forecasting",
    "descriptive",
    # Regression engine
    "fit_index",
    "fit_xy",
    "fit",
    "TrendLine",
    "r_squared",
    "mse",
    "rmse",
    "mae",
    "forecast",
    "predict",
    "describe",
    # Errors
    "ErrorKind",
    "PyTrendError",
    "ValidationError",
    "NumericalError",
    "InsufficientDataError",
    "EmptyInputError",
    "LengthMismatchError",
    "ZeroVarianceError",
]
