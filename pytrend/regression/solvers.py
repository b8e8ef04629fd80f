"""
Solver dispatch for trend regression.

This module provides the public fitting API:
    fit_index(y)     -> TrendLine      (x = 0..n-1)
    fit_xy(x, y)     -> TrendLine
    fit(y, x=None)   -> TrendSolution  (full analysis)
"""

from typing import Literal
from numpy.typing import ArrayLike

from pytrend.core.exceptions import ValidationError
from pytrend.core.protocols import Backend
from pytrend.regression.design import TrendDesign
from pytrend.regression.solution import TrendParams, TrendSolution
from pytrend.regression.backends.cpu import CPUCenteredBackend
from pytrend.regression._common import TrendLine, centered_moments, line_from_moments


# Type alias for backend selection
BackendChoice = Literal['auto', 'cpu']


def fit_index(y: ArrayLike) -> TrendLine:
    """
    Fit a least-squares line to a time series.

    Positions 0, 1, ..., n-1 serve as x, so the slope is the change per
    period and the intercept is the fitted value at period 0.

    Args:
        y: Observations in time order

    Returns:
        TrendLine(slope, intercept)

    Raises:
        InsufficientDataError: If y has fewer than two observations. An
            empty y raises the subclass EmptyInputError, so
            ``except InsufficientDataError`` covers every n < 2, but its
            ``kind`` is ErrorKind.EMPTY_INPUT rather than
            ErrorKind.INSUFFICIENT_DATA. Code that dispatches on ``kind``
            must handle both.
        ValidationError: If y is non-numeric or contains NaN/Inf
        DimensionError: If y is not 1D
        NumericalError: If a centred sum overflows float64

    Example:
        >>> slope, intercept = fit_index([100, 120, 140, 160, 180, 200])
        >>> round(slope, 6), round(intercept, 6)
        (20.0, 100.0)
    """
    design = TrendDesign.from_series(y)
    return line_from_moments(centered_moments(design.x, design.y))


def fit_xy(x: ArrayLike, y: ArrayLike) -> TrendLine:
    """
    Fit a least-squares line through paired (x, y) points.

    Args:
        x: Predictor values
        y: Response values, same length as x

    Returns:
        TrendLine(slope, intercept)

    Raises:
        EmptyInputError: If x or y is empty
        LengthMismatchError: If x and y differ in length
        InsufficientDataError: If fewer than two points
        ZeroVarianceError: If all x values are identical
        NumericalError: If a centred sum overflows float64
    """
    design = TrendDesign.from_arrays(x, y)
    return line_from_moments(centered_moments(design.x, design.y))


def fit(
    y: ArrayLike,
    x: ArrayLike | None = None,
    *,
    backend: BackendChoice = 'auto',
) -> TrendSolution:
    """
    Fit a trend line and return the complete analysis.

    This is the full pipeline: validation and Design construction,
    backend selection, and result wrapping. The returned solution carries
    fitted values, residuals, R², MSE, RMSE, MAE, coefficient inference,
    forecasts and a printable summary.

    Args:
        y: Response values (time-ordered when x is omitted)
        x: Optional predictor values. If None, x = 0..n-1.
        backend: 'auto' or 'cpu'

    Returns:
        TrendSolution

    Raises:
        ValidationError: On invalid input or unknown backend (see
            fit_index / fit_xy for the subclasses raised)
        NumericalError: If a moment or sum of squares overflows float64

    Example:
        >>> result = fit([100, 120, 140, 160, 180, 200])
        >>> result.forecast(3)
        array([220., 240., 260.])
        >>> print(result.summary())
    """
    # This is the boundary - validate here, trust everywhere else
    if x is None:
        design = TrendDesign.from_series(y)
    else:
        design = TrendDesign.from_arrays(x, y)

    backend_impl = _get_backend(backend)
    result = backend_impl.solve(design)

    return TrendSolution(_result=result, _design=design)


def _get_backend(choice: BackendChoice) -> Backend[TrendDesign, TrendParams]:
    """
    Select and instantiate the appropriate backend.

    Raises:
        ValidationError: If unknown backend specified
    """
    if choice in ('auto', 'cpu'):
        return CPUCenteredBackend()

    raise ValidationError(f"Unknown backend: {choice!r}")
