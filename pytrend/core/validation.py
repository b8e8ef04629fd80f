"""
Input validation utilities for pytrend.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - No default handling of edge cases
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numbers

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pytrend.core.exceptions import (
    ValidationError,
    DimensionError,
    InsufficientDataError,
    EmptyInputError,
    LengthMismatchError,
    ZeroVarianceError,
    NumericalError,
)


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to numpy array.

    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating mixed types or non-numeric data).

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with float64 dtype

    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    # np.asarray([]) is float64, so empty inputs pass through here
    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(
            f"{name}: complex dtype {result.dtype}, expected real data"
        )

    return result.astype(np.float64, copy=True)


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array is 1-dimensional.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        DimensionError: If array is not 1D
    """
    if array.ndim != 1:
        raise DimensionError(
            f"{name}: expected 1D array, got {array.ndim}D with shape {array.shape}"
        )


def check_not_empty(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array has at least one observation.

    Raises:
        EmptyInputError: If array has length zero
    """
    if array.shape[0] == 0:
        raise EmptyInputError(f"{name}: empty input, no observations", name=name)


def check_consistent_length(
    *arrays: NDArray[np.floating[Any]],
    names: tuple[str, ...]
) -> None:
    """
    Verify all arrays have the same length (first dimension).

    Args:
        *arrays: Arrays to check
        names: Parameter names for error messages (must match number of arrays)

    Raises:
        ValueError: If number of names doesn't match number of arrays
        LengthMismatchError: If arrays have inconsistent lengths
    """
    if len(arrays) != len(names):
        raise ValueError(
            f"Number of arrays ({len(arrays)}) must match number of names ({len(names)})"
        )

    if len(arrays) < 2:
        return

    lengths = tuple(arr.shape[0] for arr in arrays)
    if len(set(lengths)) > 1:
        details = ", ".join(f"{name}={length}" for name, length in zip(names, lengths))
        raise LengthMismatchError(
            f"Inconsistent lengths: {details}",
            names=tuple(names),
            lengths=lengths,
        )


def check_min_samples(array: NDArray[np.floating[Any]], min_samples: int, name: str) -> None:
    """
    Verify array has at least the minimum number of samples.

    Args:
        array: Array to check
        min_samples: Minimum required samples (first dimension)
        name: Parameter name for error messages

    Raises:
        InsufficientDataError: If array has fewer than min_samples
    """
    n = array.shape[0]
    if n < min_samples:
        raise InsufficientDataError(
            f"{name}: requires at least {min_samples} samples, got {n}",
            name=name,
            required=min_samples,
            actual=n,
        )


def check_nonzero_variance(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify a 1D array is not constant.

    Compares every value to the first: an exact test that cannot
    overflow, run before any sum of squares is divided.

    Raises:
        ZeroVarianceError: If all values are identical
    """
    if np.all(array == array[0]):
        raise ZeroVarianceError(
            f"{name}: zero variance, all {array.shape[0]} values equal {float(array[0])}",
            name=name,
            value=float(array[0]),
        )


def check_non_negative_int(value: Any, name: str) -> int:
    """
    Verify a scalar is a non-negative integer and return it as int.

    Booleans are rejected even though bool is an int subclass.

    Raises:
        ValidationError: If value is not an integer or is negative
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Integral):
        raise ValidationError(
            f"{name}: expected non-negative integer, got {type(value).__name__} {value!r}"
        )
    if value < 0:
        raise ValidationError(f"{name}: must be >= 0, got {value}")
    return int(value)


def check_finite_scalar(value: Any, name: str) -> float:
    """
    Verify a scalar is a finite real number and return it as float.

    Raises:
        ValidationError: If value is not real or not finite
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Real):
        raise ValidationError(
            f"{name}: expected real number, got {type(value).__name__} {value!r}"
        )
    result = float(value)
    if not np.isfinite(result):
        raise ValidationError(f"{name}: must be finite, got {result}")
    return result


def check_finite_result(value: Any, name: str) -> None:
    """
    Verify a computed scalar or array is finite.

    Finite inputs near the float64 limit can still overflow once squared,
    summed or scaled. Callers compute under ``np.errstate(over='ignore',
    invalid='ignore')`` and then check here.

    Raises:
        NumericalError: If any value is NaN or Inf
    """
    if not np.all(np.isfinite(value)):
        if np.ndim(value) == 0:
            got = float(value)
        else:
            got = f"{int(np.sum(~np.isfinite(value)))} non-finite values"
        raise NumericalError(
            f"{name}: result outside float64 range ({got}), input magnitudes too large"
        )
