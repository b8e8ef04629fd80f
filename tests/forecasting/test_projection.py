"""
Tests for forecast() and predict().
"""

import pytest
import numpy as np

from pytrend.forecasting import forecast, predict
from pytrend.regression import fit_index
from pytrend.core.exceptions import NumericalError, ValidationError


class TestForecast:

    def test_basic(self):
        np.testing.assert_allclose(forecast(5, 3, 2.0, 1.0), [11.0, 13.0, 15.0])

    def test_negative_slope(self):
        np.testing.assert_allclose(forecast(0, 3, -2.0, 5.0), [5.0, 3.0, 1.0])

    def test_keywords(self):
        n = 6
        out = forecast(start=n, count=3, slope=20, intercept=100)
        np.testing.assert_array_equal(out, [100 + 20 * n, 100 + 20 * (n + 1), 100 + 20 * (n + 2)])

    def test_sales_pipeline(self, sales):
        slope, intercept = fit_index(sales)
        out = forecast(len(sales), 3, slope, intercept)
        np.testing.assert_allclose(out, [220.0, 240.0, 260.0], atol=1e-9)

    def test_zero_count(self):
        out = forecast(10, 0, 1.0, 0.0)
        assert out.shape == (0,)
        assert out.dtype == np.float64

    def test_deterministic(self):
        assert np.array_equal(forecast(3, 5, 0.1, 0.2), forecast(3, 5, 0.1, 0.2))

    def test_numpy_integer_arguments(self):
        out = forecast(np.int64(2), np.int32(2), 1.0, 0.0)
        np.testing.assert_array_equal(out, [2.0, 3.0])

    @pytest.mark.parametrize("start, count", [(-1, 3), (0, -1), (1.5, 2), (0, 2.0)])
    def test_invalid_start_count(self, start, count):
        with pytest.raises(ValidationError):
            forecast(start, count, 1.0, 0.0)

    def test_non_finite_slope(self):
        with pytest.raises(ValidationError, match="slope"):
            forecast(0, 3, np.nan, 0.0)

    def test_overflow(self):
        with pytest.raises(NumericalError, match="forecast"):
            forecast(0, 2, 1e308, 1e308)

    def test_near_limit_not_overflowing(self):
        out = forecast(0, 2, 1e307, 1e307)
        np.testing.assert_allclose(out, [1e307, 2e307])


class TestPredict:

    def test_basic(self):
        np.testing.assert_allclose(predict([0.0, 1.0, 2.0], 2.0, 1.0), [1.0, 3.0, 5.0])

    def test_scalar(self):
        assert float(predict(4.0, 0.5, 1.0)) == 3.0

    def test_empty(self):
        assert predict([], 2.0, 1.0).shape == (0,)

    def test_rejects_nan(self):
        with pytest.raises(ValidationError, match="x: contains non-finite"):
            predict([1.0, np.nan], 1.0, 0.0)

    def test_overflow(self):
        with pytest.raises(NumericalError, match="predict"):
            predict([2.0], 1e308, 0.0)
