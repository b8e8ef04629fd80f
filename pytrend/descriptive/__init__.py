"""
Descriptive statistics module.

Public API:
    describe(data)  - Mean, median, variance, sd, min, max, range
"""

from pytrend.descriptive.solution import DescriptiveParams, DescriptiveSolution
from pytrend.descriptive.solvers import describe

__all__ = [
    "describe",
    "DescriptiveParams",
    "DescriptiveSolution",
]
