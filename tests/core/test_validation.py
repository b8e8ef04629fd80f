"""
Tests for input validation utilities.

Validates every function in core/validation.py.
"""

import warnings

import numpy as np
import pytest

from pytrend.core.exceptions import (
    DimensionError,
    EmptyInputError,
    InsufficientDataError,
    LengthMismatchError,
    NumericalError,
    ValidationError,
    ZeroVarianceError,
)
from pytrend.core.validation import (
    check_1d,
    check_array,
    check_consistent_length,
    check_finite,
    check_finite_result,
    check_finite_scalar,
    check_min_samples,
    check_non_negative_int,
    check_nonzero_variance,
    check_not_empty,
)


# ═══════════════════════════════════════════════════════════════════════
# check_array
# ═══════════════════════════════════════════════════════════════════════


class TestCheckArray:
    """check_array converts to float64 and rejects non-numeric data."""

    def test_list_to_float_array(self):
        result = check_array([1, 2, 3], "y")
        assert isinstance(result, np.ndarray)
        assert result.dtype == np.float64
        np.testing.assert_array_equal(result, [1.0, 2.0, 3.0])

    def test_returns_copy(self):
        arr = np.array([1.0, 2.0, 3.0])
        result = check_array(arr, "y")
        result[0] = 99.0
        assert arr[0] == 1.0

    def test_empty_list(self):
        result = check_array([], "y")
        assert result.shape == (0,)

    def test_rejects_mixed_types(self):
        with pytest.raises(ValidationError, match="object dtype"):
            check_array([None, 1, 2.0], "y")

    def test_rejects_strings(self):
        with pytest.raises(ValidationError, match="non-numeric dtype"):
            check_array(["a", "b", "c"], "y")

    def test_rejects_complex(self):
        with pytest.raises(ValidationError, match="complex"):
            check_array([1 + 2j, 3.0], "y")

    def test_name_in_message(self):
        with pytest.raises(ValidationError, match="predicted"):
            check_array(["a"], "predicted")


class TestCheckFinite:

    def test_accepts_finite(self):
        check_finite(np.array([1.0, -2.0, 3.5]), "y")

    def test_rejects_nan(self):
        with pytest.raises(ValidationError, match="1 NaN, 0 Inf"):
            check_finite(np.array([1.0, np.nan]), "y")

    def test_rejects_inf(self):
        with pytest.raises(ValidationError, match="0 NaN, 2 Inf"):
            check_finite(np.array([np.inf, -np.inf, 1.0]), "y")


class TestCheck1d:

    def test_accepts_1d(self):
        check_1d(np.zeros(3), "y")

    def test_rejects_2d(self):
        with pytest.raises(DimensionError, match="expected 1D array, got 2D"):
            check_1d(np.zeros((3, 2)), "y")

    def test_rejects_scalar(self):
        with pytest.raises(DimensionError, match="got 0D"):
            check_1d(np.array(5.0), "y")


class TestCheckNotEmpty:

    def test_accepts_single(self):
        check_not_empty(np.array([1.0]), "y")

    def test_rejects_empty(self):
        with pytest.raises(EmptyInputError) as exc_info:
            check_not_empty(np.array([]), "actual")
        assert exc_info.value.name == "actual"


class TestCheckConsistentLength:

    def test_equal_lengths(self):
        check_consistent_length(np.zeros(3), np.zeros(3), names=("x", "y"))

    def test_single_array(self):
        check_consistent_length(np.zeros(3), names=("x",))

    def test_mismatch(self):
        with pytest.raises(LengthMismatchError, match="x=2, y=3") as exc_info:
            check_consistent_length(np.zeros(2), np.zeros(3), names=("x", "y"))
        assert exc_info.value.expected == 2
        assert exc_info.value.actual == 3

    def test_names_count_must_match(self):
        with pytest.raises(ValueError, match="must match number of names"):
            check_consistent_length(np.zeros(2), np.zeros(2), names=("x",))


class TestCheckMinSamples:

    def test_enough(self):
        check_min_samples(np.zeros(2), 2, "y")

    def test_too_few(self):
        with pytest.raises(InsufficientDataError, match="at least 2 samples, got 1") as exc_info:
            check_min_samples(np.zeros(1), 2, "y")
        assert exc_info.value.required == 2
        assert exc_info.value.actual == 1


class TestCheckNonzeroVariance:

    def test_varying(self):
        check_nonzero_variance(np.array([1.0, 1.0, 1.0000001]), "x")

    def test_constant(self):
        with pytest.raises(ZeroVarianceError, match="x: zero variance") as exc_info:
            check_nonzero_variance(np.array([5.0, 5.0, 5.0]), "x")
        assert exc_info.value.name == "x"
        assert exc_info.value.value == 5.0

    def test_constant_non_representable(self):
        """0.1 is inexact in binary but identical copies still have zero range."""
        with pytest.raises(ZeroVarianceError):
            check_nonzero_variance(np.full(7, 0.1), "x")

    def test_full_range_does_not_overflow(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            check_nonzero_variance(np.array([-1e308, 1e308]), "x")


class TestCheckScalars:

    @pytest.mark.parametrize("value", [0, 3, np.int64(7)])
    def test_non_negative_int_accepts(self, value):
        assert check_non_negative_int(value, "count") == int(value)

    @pytest.mark.parametrize("value", [-1, 1.5, "3", True, None])
    def test_non_negative_int_rejects(self, value):
        with pytest.raises(ValidationError, match="count"):
            check_non_negative_int(value, "count")

    def test_finite_scalar_accepts(self):
        assert check_finite_scalar(np.float64(2.5), "slope") == 2.5
        assert check_finite_scalar(20, "slope") == 20.0

    @pytest.mark.parametrize("value", [np.nan, np.inf, "1.0", False])
    def test_finite_scalar_rejects(self, value):
        with pytest.raises(ValidationError, match="slope"):
            check_finite_scalar(value, "slope")


class TestCheckFiniteResult:

    def test_finite_scalar(self):
        check_finite_result(1e308, "mse")

    def test_finite_array(self):
        check_finite_result(np.array([-1e308, 0.0, 1e308]), "forecast")

    def test_empty_array(self):
        check_finite_result(np.array([]), "forecast")

    def test_overflowed_scalar(self):
        with pytest.raises(NumericalError, match=r"mse: result outside float64 range \(inf\)"):
            check_finite_result(np.inf, "mse")

    def test_overflowed_array(self):
        with pytest.raises(NumericalError, match="2 non-finite values"):
            check_finite_result(np.array([1.0, np.inf, np.nan]), "forecast")

    def test_not_a_validation_error(self):
        with pytest.raises(NumericalError) as exc_info:
            check_finite_result(np.nan, "r_squared")
        assert not isinstance(exc_info.value, ValidationError)
