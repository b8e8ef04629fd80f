"""
Tolerance tiers for numerical validation.

Defines precision expectations for comparing floating-point results:
- CPU FP64: well-conditioned inputs, near machine precision
- CPU FP64, ill-conditioned: large offsets or magnitudes where the
  centred sums lose digits

Used by the test suite and the benchmark script.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


CPU_FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-9,
    name='cpu_fp64',
    description='CPU double precision, well-conditioned inputs',
)

CPU_FP64_ILL_CONDITIONED = ToleranceTier(
    rtol=1e-6,
    atol=1e-6,
    name='cpu_fp64_ill_conditioned',
    description='CPU double precision, large magnitudes or offsets',
)


def select_tolerance(
    backend_name: str,
    is_ill_conditioned: bool = False,
) -> ToleranceTier:
    """Select appropriate tolerance tier for a given backend."""
    if not backend_name.startswith('cpu'):
        raise ValueError(f"No tolerance tier for backend {backend_name!r}")
    if is_ill_conditioned:
        return CPU_FP64_ILL_CONDITIONED
    return CPU_FP64
