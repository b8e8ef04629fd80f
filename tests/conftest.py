"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def exact_series():
    """Noise-free series y = 2.5 * i - 3 over 50 periods."""
    slope, intercept = 2.5, -3.0
    y = slope * np.arange(50) + intercept
    return y, slope, intercept


@pytest.fixture
def noisy_series(rng):
    """Linear trend plus Gaussian noise."""
    n = 200
    slope, intercept = 0.75, 10.0
    y = slope * np.arange(n) + intercept + rng.standard_normal(n)
    return y, slope, intercept


@pytest.fixture
def sales():
    """Monthly sales growing by exactly 20 per period from 100."""
    return [100.0, 120.0, 140.0, 160.0, 180.0, 200.0]
