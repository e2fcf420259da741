"""
Core infrastructure for pygauss.

Shared abstractions and utilities used by the matrix type and the
elimination solver.

Key components:
    protocols: Backend protocol
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing and tolerance tiers
"""

from pygauss.core.protocols import Backend
from pygauss.core.result import Result
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
    # Protocols
    "Backend",
    # Result
    "Result",
    # Exceptions
    "PyGaussError",
    "ValidationError",
    "DimensionError",
    "ErrorReason",
    "CalculationError",
    "IncorrectSizeError",
    "UnableToCalculateError",
]
