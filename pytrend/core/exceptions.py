"""
Exception hierarchy for pytrend.

All exceptions inherit from PyTrendError to allow catching any
library-specific error. Domain errors (insufficient data, length mismatch,
empty input, zero variance) additionally carry an ErrorKind tag so callers
can match the closed set of failure modes exhaustively.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""

from enum import Enum


class ErrorKind(Enum):
    """Closed set of domain failure modes."""
    INSUFFICIENT_DATA = 'insufficient_data'
    LENGTH_MISMATCH = 'length_mismatch'
    EMPTY_INPUT = 'empty_input'
    ZERO_VARIANCE = 'zero_variance'


class PyTrendError(Exception):
    """Base exception for all pytrend errors."""
    pass


class ValidationError(PyTrendError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when array shapes don't match expected dimensions or
    when multiple arrays have inconsistent shapes.
    """
    pass


class NumericalError(PyTrendError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class InsufficientDataError(ValidationError):
    """
    Too few observations for the requested computation.

    Attributes:
        name: Parameter name of the short input
        required: Minimum number of observations needed
        actual: Number of observations received
    """
    kind = ErrorKind.INSUFFICIENT_DATA

    def __init__(
        self,
        message: str,
        name: str | None = None,
        required: int | None = None,
        actual: int | None = None,
    ):
        super().__init__(message)
        self.name = name
        self.required = required
        self.actual = actual


class EmptyInputError(InsufficientDataError):
    """
    Input sequence has no observations.

    A special case of InsufficientDataError, so handlers for "not enough
    data" also see empty inputs. Distinguish via ``kind``.
    """
    kind = ErrorKind.EMPTY_INPUT

    def __init__(self, message: str, name: str | None = None):
        super().__init__(message, name=name, required=1, actual=0)


class LengthMismatchError(DimensionError):
    """
    Paired sequences have different lengths.

    Attributes:
        names: Parameter names, in the order checked
        lengths: Observed lengths, aligned with names
        expected: Length of the first sequence
        actual: Length of the first sequence that disagreed
    """
    kind = ErrorKind.LENGTH_MISMATCH

    def __init__(
        self,
        message: str,
        names: tuple[str, ...] = (),
        lengths: tuple[int, ...] = (),
    ):
        super().__init__(message)
        self.names = names
        self.lengths = lengths
        self.expected = lengths[0] if lengths else None
        self.actual = next(
            (length for length in lengths[1:] if length != self.expected),
            None,
        )


class ZeroVarianceError(NumericalError):
    """
    Input has no variation where variation is required.

    Raised before any division when all x values are identical (slope
    undefined) or when the actual series is constant (R² undefined).

    Attributes:
        name: Parameter name of the degenerate input
        value: The constant value, if known
    """
    kind = ErrorKind.ZERO_VARIANCE

    def __init__(
        self,
        message: str,
        name: str | None = None,
        value: float | None = None,
    ):
        super().__init__(message)
        self.name = name
        self.value = value
