"""
Trend regression solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from __future__ import annotations

import warnings
from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import ArrayLike, NDArray
from scipy import stats

from pytrend.core.result import Result
from pytrend.core.exceptions import ValidationError, ZeroVarianceError
from pytrend.core.validation import check_finite_result
from pytrend.metrics import r_squared, mse, mae, rmse
from pytrend.forecasting import forecast, predict
from pytrend.regression._common import TrendLine

if TYPE_CHECKING:
    from pytrend.regression.design import TrendDesign


def _significance_stars(p: float) -> str:
    """Return significance stars like R."""
    if p < 0.001:
        return '***'
    elif p < 0.01:
        return '**'
    elif p < 0.05:
        return '*'
    elif p < 0.1:
        return '.'
    else:
        return ' '


def _format_pvalue(p: float) -> str:
    """Format p-value like R."""
    if np.isnan(p):
        return 'NA'
    if p < 2e-16:
        return '< 2e-16'
    elif p < 0.001:
        return f'{p:.2e}'
    else:
        return f'{p:.4f}'


@dataclass(frozen=True)
class TrendParams:
    """
    Parameter payload for a straight-line fit.

    This is the immutable data computed by backends.
    """
    slope: float
    intercept: float
    fitted_values: NDArray[np.floating[Any]]
    residuals: NDArray[np.floating[Any]]
    rss: float
    tss: float
    x_mean: float
    sxx: float
    df_residual: int


@dataclass
class TrendSolution:
    """
    User-facing trend analysis results.

    Wraps the backend Result and provides the fitted line, goodness-of-fit
    metrics, coefficient inference and forecasts.
    """
    _result: Result[TrendParams]
    _design: 'TrendDesign'

    # Cached computations
    _standard_errors: NDArray[np.floating[Any]] | None = None

    # --- Line ---

    @property
    def slope(self) -> float:
        return self._result.params.slope

    @property
    def intercept(self) -> float:
        return self._result.params.intercept

    @property
    def line(self) -> TrendLine:
        """The fitted line as a (slope, intercept) pair."""
        return TrendLine(slope=self.slope, intercept=self.intercept)

    @property
    def coefficients(self) -> NDArray[np.floating[Any]]:
        """Coefficients in R order: [intercept, slope]."""
        return np.array([self.intercept, self.slope], dtype=np.float64)

    @property
    def fitted_values(self) -> NDArray[np.floating[Any]]:
        return self._result.params.fitted_values

    @property
    def residuals(self) -> NDArray[np.floating[Any]]:
        return self._result.params.residuals

    @property
    def rss(self) -> float:
        return self._result.params.rss

    @property
    def tss(self) -> float:
        return self._result.params.tss

    @property
    def n(self) -> int:
        return self._design.n

    @property
    def df_residual(self) -> int:
        return self._result.params.df_residual

    # --- Goodness of fit ---

    @property
    def r_squared(self) -> float:
        """
        Coefficient of determination.

        Raises:
            ZeroVarianceError: If the response is constant
        """
        return r_squared(self._design.y, self.fitted_values)

    @property
    def mse(self) -> float:
        return mse(self._design.y, self.fitted_values)

    @property
    def rmse(self) -> float:
        return rmse(self._design.y, self.fitted_values)

    @property
    def mae(self) -> float:
        return mae(self._design.y, self.fitted_values)

    # --- Inference ---

    @property
    def standard_errors(self) -> NDArray[np.floating[Any]]:
        """
        Standard errors of [intercept, slope].

        With σ² = RSS / (n − 2):
            SE(slope)     = sqrt(σ² / Sxx)
            SE(intercept) = sqrt(σ² (1/n + x̄² / Sxx))

        Two points leave no residual degrees of freedom; the errors are
        then NaN and a RuntimeWarning is emitted.

        Raises:
            NumericalError: If the errors overflow float64
        """
        if self._standard_errors is not None:
            return self._standard_errors

        params = self._result.params
        df = params.df_residual

        if df <= 0:
            warnings.warn(
                f"Standard errors undefined with {df} residual degrees of "
                f"freedom (n={self.n})",
                RuntimeWarning,
                stacklevel=2,
            )
            self._standard_errors = np.full(2, np.nan, dtype=np.float64)
            return self._standard_errors

        with np.errstate(over='ignore', invalid='ignore'):
            sigma_sq = np.float64(params.rss) / df
            # x̄² / Sxx taken as (x̄ / √Sxx)²
            scaled_mean = params.x_mean / np.sqrt(params.sxx)
            se_slope = np.sqrt(sigma_sq / params.sxx)
            se_intercept = np.sqrt(sigma_sq * (1.0 / self.n + scaled_mean ** 2))
        se = np.array([se_intercept, se_slope], dtype=np.float64)
        check_finite_result(se, 'standard errors')
        self._standard_errors = se
        return self._standard_errors

    @property
    def t_statistics(self) -> NDArray[np.floating[Any]]:
        """t-statistics for [intercept, slope]."""
        se = self.standard_errors
        with np.errstate(divide='ignore', invalid='ignore'):
            t = self.coefficients / se
            # A perfect fit has zero standard errors; report NaN, not inf
            t = np.where(np.isfinite(t), t, np.nan)
        return t

    @property
    def p_values(self) -> NDArray[np.floating[Any]]:
        """Two-sided p-values from Student t with n − 2 degrees of freedom."""
        t = self.t_statistics
        if self.df_residual <= 0:
            return np.full(2, np.nan, dtype=np.float64)
        return 2.0 * stats.t.sf(np.abs(t), self.df_residual)

    # --- Projection ---

    def predict(self, x: ArrayLike) -> NDArray[np.floating[Any]]:
        """Evaluate the fitted line at arbitrary x values."""
        return predict(x, self.slope, self.intercept)

    def forecast(self, count: int, start: int | None = None) -> NDArray[np.floating[Any]]:
        """
        Project the next `count` periods.

        For index designs `start` defaults to n, the first period after the
        observed series. Designs with explicit x need an explicit start.
        """
        if start is None:
            if not self._design.is_index:
                raise ValidationError(
                    "start: required when the design has explicit x values"
                )
            start = self.n
        return forecast(start, count, self.slope, self.intercept)

    # --- Envelope ---

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        """Generate R-style summary output."""
        try:
            r2_str = f"{self.r_squared:.6f}"
        except ZeroVarianceError:
            r2_str = "NA (constant response)"

        predictor = 'period' if self._design.is_index else 'x'
        lines = [
            "Linear Trend Results",
            "=" * 60,
            f"Observations: {self.n}",
            f"Equation: y = {self.slope:.6f} * {predictor} + {self.intercept:.6f}",
            f"R-squared: {r2_str}",
            f"MSE: {self.mse:.6f}",
            f"RMSE: {self.rmse:.6f}",
            f"MAE: {self.mae:.6f}",
            "",
            "Coefficients:",
            "-" * 60,
            f"{'':<12} {'Estimate':>14} {'Std.Error':>12} {'t value':>10} {'Pr(>|t|)':>10}",
            "-" * 60,
        ]

        if self.df_residual > 0:
            se, t, pv = self.standard_errors, self.t_statistics, self.p_values
        else:
            se = t = pv = np.full(2, np.nan, dtype=np.float64)

        for name, coef, s, tv, p in zip(
            ('(Intercept)', predictor), self.coefficients, se, t, pv
        ):
            se_str = f"{s:12.6f}" if not np.isnan(s) else "          NA"
            t_str = f"{tv:10.3f}" if not np.isnan(tv) else "        NA"
            stars = _significance_stars(p) if not np.isnan(p) else ' '
            lines.append(
                f"{name:<12} {coef:14.6f} {se_str} {t_str} {_format_pvalue(p):>10} {stars}"
            )

        lines.append("-" * 60)
        lines.append(f"Residual DF: {self.df_residual}")
        lines.append(f"Backend: {self.backend_name}")
        if self.timing:
            lines.append(f"Time: {self.timing.get('total_seconds', 0):.6f}s")
        for w in self.warnings:
            lines.append(f"Warning: {w}")

        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"TrendSolution(n={self.n}, slope={self.slope:.4f}, "
            f"intercept={self.intercept:.4f})"
        )
