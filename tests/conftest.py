"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pycurvefit.models import SampleSet


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def line_points():
    """Exact points on y = 2x + 3."""
    return [(0, 3), (1, 5), (2, 7), (3, 9)]


@pytest.fixture
def parabola_points():
    """Exact points on y = x², symmetric about 0."""
    return [(-2, 4), (-1, 1), (0, 0), (1, 1), (2, 4)]


@pytest.fixture
def constant_x_points():
    """Every x equal; the normal equations are singular."""
    return [(2, 1), (2, 3), (2, 5), (2, 7)]


@pytest.fixture
def noisy_line(rng):
    """y = 1.5x - 2 with small Gaussian noise on 30 points."""
    x = np.linspace(0, 10, 30)
    y = 1.5 * x - 2 + rng.standard_normal(30) * 0.5
    return SampleSet.from_arrays(x, y)
