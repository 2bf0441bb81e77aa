"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pymatrix import Matrix, Vector


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def random_matrix(rng):
    """Factory for random matrices with standard normal entries."""
    def make(rows, cols):
        return Matrix(rng.standard_normal((rows, cols)))
    return make


@pytest.fixture
def random_vector(rng):
    """Factory for random vectors with standard normal entries."""
    def make(dim):
        return Vector(rng.standard_normal(dim))
    return make
