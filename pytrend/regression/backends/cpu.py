"""
CPU reference backend for straight-line trend fits.

Uses mean-centred moments (Σ(x−x̄)², Σ(x−x̄)(y−ȳ)) rather than a QR
factorisation: with a single predictor the normal equations reduce to a
scalar ratio, and centring keeps them well conditioned.
"""

from typing import Any
import numpy as np

from pytrend.core.result import Result
from pytrend.core.compute.timing import Timer
from pytrend.core.validation import check_finite_result
from pytrend.regression.design import TrendDesign
from pytrend.regression.solution import TrendParams
from pytrend.regression._common import centered_moments, line_from_moments


class CPUCenteredBackend:
    """
    CPU backend using centred moments.

    Implements the Backend protocol for TrendDesign -> TrendParams.
    """

    @property
    def name(self) -> str:
        return 'cpu_centered'

    def solve(self, design: TrendDesign) -> Result[TrendParams]:
        """
        Solve the least-squares line.

        Algorithm:
            1. x̄, ȳ, Sxx = Σ(x−x̄)², Sxy = Σ(x−x̄)(y−ȳ)
            2. slope = Sxy / Sxx, intercept = ȳ − slope·x̄
            3. Fitted values, residuals, RSS and TSS

        Args:
            design: Validated trend design

        Returns:
            Result containing TrendParams

        Raises:
            ZeroVarianceError: If Sxx underflows to zero
            NumericalError: If a moment or sum of squares overflows float64
        """
        timer = Timer()
        timer.start()

        x = design.x
        y = design.y
        n = design.n

        with timer.section('moments'):
            moments = centered_moments(x, y)

        with timer.section('coefficients'):
            line = line_from_moments(moments)

        with timer.section('residuals'):
            fitted_values = line.predict(x)
            with np.errstate(over='ignore', invalid='ignore'):
                residuals = y - fitted_values

        with timer.section('statistics'):
            with np.errstate(over='ignore', invalid='ignore'):
                rss = float(residuals @ residuals)
                tss = float(np.sum((y - moments.y_mean) ** 2))

        timer.stop()

        check_finite_result(residuals, 'residuals')
        check_finite_result(rss, 'residual sum of squares')
        check_finite_result(tss, 'total sum of squares')

        df_residual = n - 2
        warns: list[str] = []
        if df_residual == 0:
            warns.append(
                "zero residual degrees of freedom: two points define the line exactly"
            )

        params = TrendParams(
            slope=line.slope,
            intercept=line.intercept,
            fitted_values=fitted_values,
            residuals=residuals,
            rss=rss,
            tss=tss,
            x_mean=moments.x_mean,
            sxx=moments.sxx,
            df_residual=df_residual,
        )

        info: dict[str, Any] = {
            'method': 'centered_moments',
            'mode': 'index' if design.is_index else 'xy',
            'n': n,
        }

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warns),
        )
