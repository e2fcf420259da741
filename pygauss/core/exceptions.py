"""
Exception hierarchy for pygauss.

All exceptions inherit from PyGaussError to allow catching any
library-specific error. The solver's own failures are CalculationError
subclasses, tagged with an ErrorReason so callers can branch on the kind
without isinstance chains.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""

from enum import Enum


class PyGaussError(Exception):
    """Base exception for all pygauss errors."""
    pass


class ValidationError(PyGaussError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when a literal has rows of different lengths, when two matrices
    in an elementwise operation have different shapes, or when an operand
    has the wrong number of dimensions.
    """
    pass


class ErrorReason(Enum):
    """The two ways a Gaussian elimination can fail."""
    INCORRECT_SIZE = 'incorrect_size'
    UNABLE_TO_CALCULATE = 'unable_to_calculate'

    @property
    def message(self) -> str:
        return _REASON_MESSAGES[self]


_REASON_MESSAGES = {
    ErrorReason.INCORRECT_SIZE: (
        "Incorrect matrix size: an augmented system must have n rows "
        "and n + 1 columns"
    ),
    ErrorReason.UNABLE_TO_CALCULATE: (
        "Unable to calculate: a zero pivot was encountered, the system "
        "has no unique solution without reordering rows"
    ),
}


class CalculationError(PyGaussError):
    """
    Gaussian elimination could not produce a solution.

    Attributes:
        reason: Which failure kind occurred
    """

    def __init__(self, reason: ErrorReason, message: str | None = None):
        super().__init__(message if message is not None else reason.message)
        self.reason = reason


class IncorrectSizeError(CalculationError):
    """
    Augmented matrix does not have the n x (n+1) shape.

    Detected before any elimination step, so the input is untouched.

    Attributes:
        rows: Number of rows of the rejected matrix
        cols: Number of columns of the rejected matrix
    """

    def __init__(
        self,
        message: str | None = None,
        rows: int | None = None,
        cols: int | None = None,
    ):
        super().__init__(ErrorReason.INCORRECT_SIZE, message)
        self.rows = rows
        self.cols = cols


class UnableToCalculateError(CalculationError):
    """
    A zero pivot was met during elimination.

    The naive algorithm never swaps rows, so it stops at the first zero
    on the diagonal. The caller's matrix is not modified.

    Attributes:
        pivot_index: Diagonal position of the zero pivot
        phase: 'forward', 'backward' or 'extraction'
    """

    def __init__(
        self,
        message: str | None = None,
        pivot_index: int | None = None,
        phase: str | None = None,
    ):
        super().__init__(ErrorReason.UNABLE_TO_CALCULATE, message)
        self.pivot_index = pivot_index
        self.phase = phase
