"""
Shared numeric kernel and result types for straight-line fits.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, NamedTuple
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pytrend.core.exceptions import ZeroVarianceError
from pytrend.core.validation import check_finite_result


class TrendLine(NamedTuple):
    """
    Fitted line y = slope * x + intercept.

    Unpacks as an ordered pair: ``slope, intercept = fit_index(y)``.
    """
    slope: float
    intercept: float

    def predict(self, x: ArrayLike) -> NDArray[np.floating[Any]]:
        """Evaluate the line at each x."""
        with np.errstate(over='ignore', invalid='ignore'):
            values = self.slope * np.asarray(x, dtype=np.float64) + self.intercept
        check_finite_result(values, 'predicted values')
        return values


@dataclass(frozen=True)
class CenteredMoments:
    """Means and centred sums of squares/cross-products of x and y."""
    x_mean: float
    y_mean: float
    sxx: float
    sxy: float


def centered_moments(
    x: NDArray[np.floating[Any]],
    y: NDArray[np.floating[Any]],
) -> CenteredMoments:
    """
    Compute x̄, ȳ, Σ(x−x̄)² and Σ(x−x̄)(y−ȳ).

    Centring before multiplying keeps the sums accurate for series with a
    large offset, where the raw-sum formula n·Σxy − Σx·Σy cancels badly.
    """
    with np.errstate(over='ignore', invalid='ignore'):
        x_mean = float(np.mean(x))
        y_mean = float(np.mean(y))
        dx = x - x_mean
        dy = y - y_mean
        return CenteredMoments(
            x_mean=x_mean,
            y_mean=y_mean,
            sxx=float(dx @ dx),
            sxy=float(dx @ dy),
        )


def line_from_moments(moments: CenteredMoments) -> TrendLine:
    """
    Least-squares slope and intercept from centred moments.

    TrendDesign rejects constant x, but distinct values close enough to
    underflow when squared can still leave sxx == 0.

    Raises:
        NumericalError: If a moment, the slope or the intercept overflows
        ZeroVarianceError: If sxx is not positive
    """
    check_finite_result(moments.x_mean, 'x: mean')
    check_finite_result(moments.y_mean, 'y: mean')
    check_finite_result(moments.sxx, 'x: centred sum of squares')
    check_finite_result(moments.sxy, 'centred cross-product of x and y')
    if not moments.sxx > 0:
        raise ZeroVarianceError(
            f"x: centred sum of squares is {moments.sxx}, slope undefined",
            name='x',
        )
    slope = moments.sxy / moments.sxx
    intercept = moments.y_mean - slope * moments.x_mean
    check_finite_result(slope, 'slope')
    check_finite_result(intercept, 'intercept')
    return TrendLine(slope=float(slope), intercept=float(intercept))
