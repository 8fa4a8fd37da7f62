"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pyfixedmath.matrix import Matrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def random_matrix(rng):
    """Factory for random containers of a given element type and shape.

    Integral element types get small integers so products stay exact;
    floating types get standard normal draws.
    """
    def make(dtype, rows, cols):
        cls = Matrix[dtype, rows, cols]
        if np.issubdtype(cls.dtype, np.integer):
            values = rng.integers(-20, 20, size=(rows, cols))
        else:
            values = rng.standard_normal((rows, cols))
        return cls.from_numpy(values)
    return make
