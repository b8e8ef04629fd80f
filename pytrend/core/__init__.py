"""
Core infrastructure for pytrend.

This module provides shared abstractions and utilities used by all
domain-specific submodules (regression, metrics, forecast, descriptive).

Key components:
    protocols: Backend protocol
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy and ErrorKind tags
    validation: Input validators
    compute: Timing and tolerance tiers
"""

from pytrend.core.protocols import Backend
from pytrend.core.result import Result
from pytrend.core.exceptions import (
    ErrorKind,
    PyTrendError,
    ValidationError,
    DimensionError,
    NumericalError,
    InsufficientDataError,
    EmptyInputError,
    LengthMismatchError,
    ZeroVarianceError,
)

__all__ = [
    # Protocols
    "Backend",
    # Result
    "Result",
    # Exceptions
    "ErrorKind",
    "PyTrendError",
    "ValidationError",
    "DimensionError",
    "NumericalError",
    "InsufficientDataError",
    "EmptyInputError",
    "LengthMismatchError",
    "ZeroVarianceError",
]
