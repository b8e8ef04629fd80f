"""
Tests for describe().
"""

import pytest
import numpy as np

from pytrend.descriptive import describe, DescriptiveSolution
from pytrend.core.exceptions import (
    DimensionError,
    EmptyInputError,
    NumericalError,
    ValidationError,
)


class TestDescribe:

    def test_odd_length(self):
        result = describe([1.0, 2.0, 3.0, 4.0, 5.0])
        assert isinstance(result, DescriptiveSolution)
        assert result.n == 5
        assert result.mean == pytest.approx(3.0)
        assert result.median == pytest.approx(3.0)
        assert result.min == 1.0
        assert result.max == 5.0
        assert result.range == 4.0

    def test_population_variance(self):
        result = describe([1.0, 2.0, 3.0, 4.0, 5.0])
        assert result.variance == pytest.approx(2.0)
        assert result.sd == pytest.approx(np.sqrt(2.0))
        assert result.info['ddof'] == 0

    def test_even_median(self):
        assert describe([1.0, 2.0, 3.0, 4.0]).median == pytest.approx(2.5)

    def test_unsorted_input(self):
        result = describe([5.0, 1.0, 4.0, 2.0, 3.0])
        assert result.median == 3.0
        assert result.min == 1.0

    def test_single_value(self):
        result = describe([7.0])
        assert result.variance == 0.0
        assert result.range == 0.0

    def test_matches_numpy(self, rng):
        data = rng.standard_normal(1001)
        result = describe(data)
        assert result.mean == pytest.approx(np.mean(data))
        assert result.variance == pytest.approx(np.var(data))
        assert result.median == pytest.approx(np.median(data))

    def test_summary(self):
        s = describe([1.0, 2.0, 3.0]).summary()
        assert "Median" in s
        assert "Observations: 3" in s

    def test_backend_and_timing(self):
        result = describe([1.0, 2.0])
        assert result.backend_name == 'cpu_descriptive'
        assert 'total_seconds' in result.timing


class TestDescribeValidation:

    def test_empty(self):
        with pytest.raises(EmptyInputError):
            describe([])

    def test_nan(self):
        with pytest.raises(ValidationError, match="non-finite"):
            describe([1.0, np.nan])

    def test_2d(self):
        with pytest.raises(DimensionError):
            describe([[1.0, 2.0]])

    def test_mean_overflow(self):
        with pytest.raises(NumericalError, match="mean"):
            describe([1e308, 1e308])

    def test_variance_overflow(self):
        with pytest.raises(NumericalError, match="variance"):
            describe([-1e308, 1e308])

    def test_large_values_within_range(self):
        result = describe([-1e150, 1e150])
        assert result.mean == 0.0
        assert result.variance == pytest.approx(1e300)
