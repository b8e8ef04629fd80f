"""
Descriptive statistics solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pytrend.core.result import Result


@dataclass(frozen=True)
class DescriptiveParams:
    """
    Parameter payload for descriptive statistics of one sample.

    Variance and sd use the population divisor n.
    """
    n: int
    mean: float
    median: float
    variance: float
    sd: float
    min: float
    max: float
    range: float


@dataclass
class DescriptiveSolution:
    """
    User-facing descriptive statistics results.

    Wraps Result[DescriptiveParams] and provides convenient accessors.
    """
    _result: Result[DescriptiveParams]

    @property
    def params(self) -> DescriptiveParams:
        return self._result.params

    @property
    def n(self) -> int:
        return self._result.params.n

    @property
    def mean(self) -> float:
        return self._result.params.mean

    @property
    def median(self) -> float:
        return self._result.params.median

    @property
    def variance(self) -> float:
        """Population variance (divisor n)."""
        return self._result.params.variance

    @property
    def sd(self) -> float:
        """Population standard deviation."""
        return self._result.params.sd

    @property
    def min(self) -> float:
        return self._result.params.min

    @property
    def max(self) -> float:
        return self._result.params.max

    @property
    def range(self) -> float:
        """max − min."""
        return self._result.params.range

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    def summary(self) -> str:
        """Generate a plain-text summary table."""
        p = self._result.params
        rows = [
            ('Mean', p.mean),
            ('Median', p.median),
            ('Std. Dev.', p.sd),
            ('Variance', p.variance),
            ('Min', p.min),
            ('Max', p.max),
            ('Range', p.range),
        ]
        lines = [
            "Descriptive Statistics",
            "=" * 40,
            f"Observations: {p.n}",
            "-" * 40,
        ]
        lines.extend(f"{label:<12} {value:>20.6f}" for label, value in rows)
        lines.append("-" * 40)
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"DescriptiveSolution(n={self.n}, mean={self.mean:.4f}, "
            f"sd={self.sd:.4f})"
        )
