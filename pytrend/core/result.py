"""
Result envelope shared by every pytrend backend.

A backend returns ``Result[P]``; the user-facing solution object
(TrendSolution, DescriptiveSolution) wraps it and exposes the payload
through named properties.
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable output of a backend's ``solve``.

    Attributes:
        params: Backend payload (TrendParams or DescriptiveParams)
        info: Method name, sample size and fit mode
        timing: ``Timer.result()`` output, or None if not measured
        backend_name: Name of the backend that produced the payload
        warnings: Non-fatal conditions, e.g. zero residual degrees of freedom

    Example:
        >>> Result(params=line_params, info={'n': 5}, timing=None,
        ...        backend_name='cpu_centered')
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)
