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
def well_conditioned(rng):
    """Factory for diagonally dominated random square matrices."""
    def make(n: int, complex_valued: bool = False) -> np.ndarray:
        A = rng.standard_normal((n, n))
        if complex_valued:
            A = A + 1j * rng.standard_normal((n, n))
        return A + n * np.eye(n)
    return make


@pytest.fixture
def singular_3x3():
    """The 3x3 matrix with rows (1,2,3), (4,5,6), (7,8,9)."""
    return np.arange(1.0, 10.0).reshape(3, 3)


@pytest.fixture
def regression_4x4():
    """Values 1..9 cycled row-major into 4x4, diagonal overwritten with 50."""
    A = np.array([(k % 9) + 1 for k in range(16)], dtype=np.float64).reshape(4, 4)
    np.fill_diagonal(A, 50.0)
    return A
