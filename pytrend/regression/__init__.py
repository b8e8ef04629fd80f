"""
Straight-line trend regression.

Public API:
    fit_index(y)    - Least-squares line over the implicit time index
    fit_xy(x, y)    - Least-squares line through paired points
    fit(y, x=None)  - Complete analysis (metrics, inference, forecast)

Example:
    >>> from pytrend.regression import fit_index, fit
    >>> slope, intercept = fit_index([2, 4, 6, 8, 10])
    >>> result = fit([2, 4, 6, 8, 10])
    >>> print(result.summary())
"""

from pytrend.regression._common import TrendLine
from pytrend.regression.design import TrendDesign
from pytrend.regression.solution import TrendSolution, TrendParams
from pytrend.regression.solvers import fit_index, fit_xy, fit

__all__ = [
    "fit_index",
    "fit_xy",
    "fit",
    "TrendLine",
    "TrendDesign",
    "TrendSolution",
    "TrendParams",
]
