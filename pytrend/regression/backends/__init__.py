"""
Trend regression backends.

Available backends:
    CPUCenteredBackend: CPU reference implementation using centred moments
"""

from pytrend.regression.backends.cpu import CPUCenteredBackend

__all__ = [
    "CPUCenteredBackend",
]
