"""
pygauss: dense linear systems by naive Gaussian elimination.

Solves A·x = b for square, dense, real-valued systems given as an
augmented matrix [A | b], and measures the residual |b - A·x| of the
computed roots. No pivoting is performed: a zero pivot is reported as
UnableToCalculateError rather than worked around.

Submodules:
    matrix: Dense Matrix type with augmented-system helpers
    elimination: solve() and the elimination backends
    core: Exceptions, Result envelope, validation, timing, tolerances
"""

__version__ = "0.1.0"

from pygauss.matrix import Matrix
from pygauss.elimination import solve, EliminationResult, EliminationSolution
from pygauss.core.exceptions import (
    PyGaussError,
    ValidationError,
    DimensionError,
    ErrorReason,
    CalculationError,
    IncorrectSizeError,
    UnableToCalculateError,
)

__all__ = [
    "__version__",
    "Matrix",
    "solve",
    "EliminationResult",
    "EliminationSolution",
    "PyGaussError",
    "ValidationError",
    "DimensionError",
    "ErrorReason",
    "CalculationError",
    "IncorrectSizeError",
    "UnableToCalculateError",
]
