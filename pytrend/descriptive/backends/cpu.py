"""
CPU backend for descriptive statistics.
"""

from typing import Any
import numpy as np
from numpy.typing import NDArray

from pytrend.core.result import Result
from pytrend.core.compute.timing import Timer
from pytrend.core.validation import check_finite_result
from pytrend.descriptive.solution import DescriptiveParams


class CPUDescriptiveBackend:
    """NumPy reference implementation for a validated 1D sample."""

    @property
    def name(self) -> str:
        return 'cpu_descriptive'

    def solve(self, data: NDArray[np.floating[Any]]) -> Result[DescriptiveParams]:
        timer = Timer()
        timer.start()

        n = data.shape[0]

        with timer.section('moments'):
            with np.errstate(over='ignore', invalid='ignore'):
                mean = float(np.mean(data))
                centered = data - mean
                variance = float(centered @ centered / n)

        with timer.section('order_statistics'):
            # np.median averages the two middle values for even n
            with np.errstate(over='ignore', invalid='ignore'):
                median = float(np.median(data))
            lo = float(np.min(data))
            hi = float(np.max(data))

        timer.stop()

        check_finite_result(mean, 'mean')
        check_finite_result(median, 'median')
        check_finite_result(variance, 'variance')
        check_finite_result(hi - lo, 'range')

        params = DescriptiveParams(
            n=n,
            mean=mean,
            median=median,
            variance=variance,
            sd=float(np.sqrt(variance)),
            min=lo,
            max=hi,
            range=hi - lo,
        )

        return Result(
            params=params,
            info={'ddof': 0, 'n': n},
            timing=timer.result(),
            backend_name=self.name,
        )
