"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pygauss.matrix import Matrix


_REFERENCE_ROWS = [
    [1.5, 2.0, 1.0, -1.0, -2.0, 1.0, 1.0],
    [3.0, 3.0, -1.0, 16.0, 18.0, 1.0, 1.0],
    [1.0, 1.0, 3.0, -2.0, -6.0, 1.0, 1.0],
    [1.0, 1.0, 99.0, 19.0, 2.0, 1.0, 1.0],
    [1.0, -2.0, 16.0, 1.0, 9.0, 10.0, 1.0],
    [1.0, 3.0, 1.0, -5.0, 1.0, 1.0, 95.0],
]

# Single-precision roots of _REFERENCE_ROWS
_REFERENCE_ROOTS_FP32 = [
    -264.05893, 159.63196, -6.156921, 35.310387, -18.806696, 81.67839,
]


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def reference_rows():
    """Row-major literal of the 6 x 7 augmented reference system."""
    return [list(row) for row in _REFERENCE_ROWS]


@pytest.fixture
def reference_roots_fp32():
    """Roots of the reference system computed in single precision."""
    return list(_REFERENCE_ROOTS_FP32)


@pytest.fixture
def reference_system(reference_rows):
    """The 6 x 7 augmented reference system in single precision."""
    return Matrix.from_rows(reference_rows, dtype=np.float32)


@pytest.fixture
def integer_system():
    """
    3 x 4 system with integer roots x = (1, -2, 3).

        2x +  y -  z = -3
        -x + 3y + 2z = -1
        x  -  y + 4z = 15
    """
    return Matrix.from_rows([
        [2.0, 1.0, -1.0, -3.0],
        [-1.0, 3.0, 2.0, -1.0],
        [1.0, -1.0, 4.0, 15.0],
    ])


@pytest.fixture
def random_system(rng):
    """Diagonally dominant random system with known roots."""
    n = 8
    A = rng.standard_normal((n, n)) + n * np.eye(n)
    x_true = rng.standard_normal(n)
    b = A @ x_true
    return A, b, x_true
