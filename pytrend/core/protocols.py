"""
Core protocols for pytrend.

Structural interfaces that domain-specific implementations satisfy.
We use Protocol (structural typing) rather than ABC (nominal typing).
"""

from typing import Protocol, TypeVar, runtime_checkable

from pytrend.core.result import Result

P = TypeVar('P', covariant=True)  # Parameter payload type
D = TypeVar('D', contravariant=True)  # Design type


@runtime_checkable
class Backend(Protocol[D, P]):
    """
    Protocol for computational backends.

    Each backend takes a validated domain design and produces a domain
    parameter payload wrapped in Result. Backends are stateless, which
    makes them easy to test and swap.

    Type Parameters:
        D: The design type this backend accepts
        P: The parameter payload type this backend produces
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{device}_{algorithm}', e.g. 'cpu_centered'.
        """
        ...

    def solve(self, design: D) -> Result[P]:
        """
        Execute the computation on an already validated design.

        Raises:
            NumericalError: If numerical issues prevent a solution
        """
        ...
