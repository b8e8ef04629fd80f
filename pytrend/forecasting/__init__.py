"""
Forecasting from a fitted line.

Public API:
    forecast(start, count, slope, intercept)  - Future periods
    predict(x, slope, intercept)              - Arbitrary x values
"""

from pytrend.forecasting.projection import forecast, predict

__all__ = [
    "forecast",
    "predict",
]
