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
def normal_sample(rng):
    """Normal sample with mean 10 and sd 3."""
    return rng.standard_normal(200) * 3.0 + 10.0


@pytest.fixture
def noisy_line(rng):
    """Points scattered around y = 2.5 x - 1."""
    x = rng.uniform(-5.0, 5.0, size=100)
    y = 2.5 * x - 1.0 + rng.standard_normal(100) * 0.5
    return x, y
