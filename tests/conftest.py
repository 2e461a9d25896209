"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pymatrix import Matrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture(params=['fp64', 'fp32'])
def precision(request):
    """Run a test once per storage precision."""
    return request.param


@pytest.fixture
def well_conditioned(rng):
    """Factory for random diagonally dominant n x n arrays (safely invertible)."""
    def make(n):
        A = rng.uniform(-1.0, 1.0, size=(n, n))
        return A + n * np.eye(n)
    return make


@pytest.fixture
def textbook_2x2():
    """[[4, 7], [2, 6]]: det 10, inverse [[0.6, -0.7], [-0.2, 0.4]]."""
    return Matrix.from_array([[4.0, 7.0], [2.0, 6.0]])


@pytest.fixture
def singular_2x2():
    """[[1, 2], [2, 4]]: second row is twice the first, det 0."""
    return Matrix.from_array([[1.0, 2.0], [2.0, 4.0]])
